from io import BytesIO
from zipfile import BadZipFile

from openpyxl import Workbook, load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from library_api.errors import ImportFormatError
from library_api.models.book import BOOK_FIELDS

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

# human-readable column labels accepted on import
HEADER_ALIASES = {
    "Accession No": "accession_no",
    "Class No": "class_no",
    "Title": "title_of_the_book",
    "Author": "name_of_the_author",
    "Volume No": "volume_no",
    "Publisher": "publisher",
    "Year": "year",
    "Place": "place",
    "Price": "price",
    "ISBN/ISSN No": "isbn_issn_no",
    "Language": "language",
    "Subject Heading": "subject_heading",
    "No of Pages": "no_of_pages_contain",
    "Source": "source",
}


def _field_for_header(header):
    if header is None:
        return None
    name = str(header).strip()
    if name in BOOK_FIELDS:
        return name
    return HEADER_ALIASES.get(name)


class SpreadsheetService:
    @staticmethod
    def export_books(books) -> bytes:
        wb = Workbook()
        ws = wb.active
        ws.title = "Books"
        ws.append(list(BOOK_FIELDS))
        for b in books:
            ws.append([getattr(b, f) for f in BOOK_FIELDS])

        buf = BytesIO()
        wb.save(buf)
        return buf.getvalue()

    @staticmethod
    def read_books(stream):
        """
        First sheet, first row as header. Returns [(row_number, {field: value})],
        skipping blank rows. Raises ImportFormatError when nothing usable is found.
        """
        try:
            wb = load_workbook(BytesIO(stream.read()), read_only=True, data_only=True)
        except (InvalidFileException, BadZipFile, KeyError, OSError, ValueError):
            raise ImportFormatError()

        try:
            ws = wb.worksheets[0]
            rows = ws.iter_rows(values_only=True)
            header = next(rows, None)
            if not header:
                raise ImportFormatError()

            columns = [_field_for_header(h) for h in header]
            if not any(columns):
                raise ImportFormatError()

            parsed = []
            for row_no, values in enumerate(rows, start=2):
                record = {}
                for field, value in zip(columns, values):
                    if field and value not in (None, ""):
                        record[field] = value
                if record:
                    parsed.append((row_no, record))
        finally:
            wb.close()

        if not parsed:
            raise ImportFormatError()
        return parsed
