from library_api.models.book import Book
from library_api.extensions import db

class BookRepo:
    @staticmethod
    def list_all():
        return Book.query.order_by(Book.accession_no, Book.id).all()

    @staticmethod
    def get(book_id: str):
        return db.session.get(Book, book_id)

    @staticmethod
    def get_by_accession(accession_no: str):
        return Book.query.filter_by(accession_no=accession_no).first()

    @staticmethod
    def count() -> int:
        return Book.query.count()

    @staticmethod
    def create(book: Book):
        db.session.add(book)
        db.session.commit()
        return book

    @staticmethod
    def add_in_savepoint(book: Book):
        # caller commits the outer transaction once the batch is done
        with db.session.begin_nested():
            db.session.add(book)
        return book

    @staticmethod
    def update():
        db.session.commit()

    @staticmethod
    def delete(book_id: str) -> int:
        deleted = Book.query.filter_by(id=book_id).delete(synchronize_session=False)
        db.session.commit()
        return deleted

    @staticmethod
    def commit():
        db.session.commit()
