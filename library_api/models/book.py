from library_api.extensions import db

# descriptive columns, in spreadsheet/export order
BOOK_FIELDS = (
    "accession_no",
    "class_no",
    "title_of_the_book",
    "name_of_the_author",
    "volume_no",
    "publisher",
    "year",
    "place",
    "price",
    "isbn_issn_no",
    "language",
    "subject_heading",
    "no_of_pages_contain",
    "source",
)


class Book(db.Model):
    __tablename__ = "book_management"

    id = db.Column(db.String(32), primary_key=True)
    # business key, expected unique but not enforced
    accession_no = db.Column(db.String(64), nullable=True, index=True)

    class_no = db.Column(db.String(64), nullable=True)
    title_of_the_book = db.Column(db.String(500), nullable=True)
    name_of_the_author = db.Column(db.String(255), nullable=True)
    volume_no = db.Column(db.String(64), nullable=True)
    publisher = db.Column(db.String(255), nullable=True)
    year = db.Column(db.String(32), nullable=True)
    place = db.Column(db.String(255), nullable=True)
    price = db.Column(db.String(64), nullable=True)
    isbn_issn_no = db.Column(db.String(64), nullable=True)
    language = db.Column(db.String(64), nullable=True)
    subject_heading = db.Column(db.String(255), nullable=True)
    no_of_pages_contain = db.Column(db.String(32), nullable=True)
    source = db.Column(db.String(255), nullable=True)

    def to_dict(self):
        data = {"id": self.id}
        data.update({f: getattr(self, f) for f in BOOK_FIELDS})
        return data
