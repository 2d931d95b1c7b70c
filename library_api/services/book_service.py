from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from library_api.errors import NotFound, ValidationError
from library_api.models.book import Book, BOOK_FIELDS
from library_api.repositories.book_repo import BookRepo
from library_api.utils.ids import new_record_id


def clean_value(value):
    """Payload/cell value -> stored text. None stays None, 2001.0 becomes '2001'."""
    if value is None:
        return None
    if isinstance(value, (dict, list)):
        raise ValidationError("Book fields must be plain values")
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value).strip()


def _book_from(data: dict) -> Book:
    fields = {f: clean_value(data.get(f)) for f in BOOK_FIELDS}
    if not fields["accession_no"]:
        raise ValidationError("accession_no is required")
    return Book(id=new_record_id(), **fields)


class BookService:
    @staticmethod
    def list_books():
        return BookRepo.list_all()

    @staticmethod
    def count_books() -> int:
        return BookRepo.count()

    @staticmethod
    def get_book(book_id: str):
        book = BookRepo.get(book_id)
        if not book:
            raise NotFound("Book not found")
        return book

    @staticmethod
    def create_book(data: dict):
        return BookRepo.create(_book_from(data))

    @staticmethod
    def update_book(book_id: str, data: dict):
        # only keys present in the payload are written; explicit null clears
        present = {f: clean_value(data[f]) for f in BOOK_FIELDS if f in data}
        if not present:
            raise ValidationError("No updates provided")
        if "accession_no" in present and not present["accession_no"]:
            raise ValidationError("accession_no cannot be empty")

        book = BookService.get_book(book_id)
        for k, v in present.items():
            setattr(book, k, v)
        BookRepo.update()
        return book

    @staticmethod
    def delete_book(book_id: str):
        if BookRepo.delete(book_id) == 0:
            raise NotFound("Book not found")

    @staticmethod
    def import_books(rows):
        """
        rows: [(spreadsheet_row_number, {field: value})]
        Each row is inserted in its own savepoint; returns one result dict per row.
        """
        results = []
        for row_no, data in rows:
            try:
                book = BookRepo.add_in_savepoint(_book_from(data))
                results.append({"row": row_no, "Status": True, "Id": book.id})
            except ValidationError as e:
                results.append({"row": row_no, "Status": False, "Error": e.message})
            except SQLAlchemyError as e:
                current_app.logger.warning(f"[books] import row {row_no} failed: {e}")
                results.append({"row": row_no, "Status": False, "Error": "Insert failed"})
        BookRepo.commit()

        imported = sum(1 for r in results if r["Status"])
        current_app.logger.info(f"[books] Imported {imported} of {len(results)} rows")
        return results
