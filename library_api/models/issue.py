from library_api.extensions import db


class IssueStatus:
    PENDING = "Pending"
    RETURNED = "Returned"

    ISSUED = (PENDING, RETURNED)


# copied from the Book at issue time; later book edits do not touch them
SNAPSHOT_FIELDS = (
    "title_of_the_book",
    "name_of_the_author",
    "volume_no",
    "year",
    "place",
    "price",
    "isbn_issn_no",
    "language",
    "subject_heading",
    "no_of_pages_contain",
    "source",
)


class IssueRecord(db.Model):
    __tablename__ = "issue_return_book"

    issue_id = db.Column(db.String(32), primary_key=True)

    # logical reference to book_management.accession_no, no FK
    accession_no = db.Column(db.String(64), nullable=False, index=True)

    student_name = db.Column(db.String(255), nullable=False)
    phone_no = db.Column(db.String(32), nullable=True)
    parental = db.Column(db.String(255), nullable=True)
    remark = db.Column(db.String(1000), nullable=True)

    issued_on = db.Column(db.Date, nullable=False)
    status = db.Column(db.String(20), nullable=False, default=IssueStatus.PENDING, index=True)

    title_of_the_book = db.Column(db.String(500), nullable=True)
    name_of_the_author = db.Column(db.String(255), nullable=True)
    volume_no = db.Column(db.String(64), nullable=True)
    year = db.Column(db.String(32), nullable=True)
    place = db.Column(db.String(255), nullable=True)
    price = db.Column(db.String(64), nullable=True)
    isbn_issn_no = db.Column(db.String(64), nullable=True)
    language = db.Column(db.String(64), nullable=True)
    subject_heading = db.Column(db.String(255), nullable=True)
    no_of_pages_contain = db.Column(db.String(32), nullable=True)
    source = db.Column(db.String(255), nullable=True)

    def to_dict(self):
        data = {
            "issue_id": self.issue_id,
            "accession_no": self.accession_no,
            "student_name": self.student_name,
            "phone_no": self.phone_no,
            "parental": self.parental,
            "remark": self.remark,
            "issued_on": self.issued_on.isoformat() if self.issued_on else None,
            "status": self.status,
        }
        data.update({f: getattr(self, f) for f in SNAPSHOT_FIELDS})
        return data
