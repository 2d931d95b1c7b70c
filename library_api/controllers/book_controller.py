from io import BytesIO

from flask import Blueprint, request, jsonify, send_file

from library_api.errors import ValidationError
from library_api.services.book_service import BookService
from library_api.services.spreadsheet_service import SpreadsheetService, XLSX_MIMETYPE
from library_api.utils.auth import token_required
from library_api.utils.payload import json_object

book_bp = Blueprint("books", __name__)


@book_bp.post("/add_book")
@token_required
def add_book():
    book = BookService.create_book(json_object())
    return jsonify({"Status": True, "Message": "Book added successfully", "Id": book.id}), 201


@book_bp.get("/all_books")
@token_required
def all_books():
    books = BookService.list_books()
    return jsonify({"Status": True, "Books": [b.to_dict() for b in books]})


@book_bp.get("/book/<book_id>")
@token_required
def get_book(book_id):
    book = BookService.get_book(book_id)
    return jsonify({"Status": True, "Book": book.to_dict()})


@book_bp.put("/edit_book/<book_id>")
@token_required
def edit_book(book_id):
    book = BookService.update_book(book_id, json_object())
    return jsonify({"Status": True, "Message": "Book updated successfully", "Book": book.to_dict()})


@book_bp.delete("/delete_book/<book_id>")
@token_required
def delete_book(book_id):
    BookService.delete_book(book_id)
    return jsonify({"Status": True, "Message": "Book deleted successfully"})


@book_bp.get("/book_count")
@token_required
def book_count():
    return jsonify({"Status": True, "BookCount": BookService.count_books()})


@book_bp.get("/export_books")
@token_required
def export_books():
    content = SpreadsheetService.export_books(BookService.list_books())
    return send_file(
        BytesIO(content),
        mimetype=XLSX_MIMETYPE,
        as_attachment=True,
        download_name="books.xlsx",
    )


@book_bp.post("/import_books")
@token_required
def import_books():
    upload = request.files.get("file")
    if upload is None or not upload.filename:
        raise ValidationError("No file uploaded")

    rows = SpreadsheetService.read_books(upload.stream)
    results = BookService.import_books(rows)

    imported = sum(1 for r in results if r["Status"])
    failed = len(results) - imported
    return jsonify({
        "Status": True,
        "Message": f"Imported {imported} of {len(results)} books",
        "Imported": imported,
        "Failed": failed,
        "Results": results,
    })
