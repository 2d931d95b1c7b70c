from flask import Blueprint, jsonify

from library_api.services.issue_service import IssueService
from library_api.utils.auth import token_required
from library_api.utils.payload import json_object

issue_bp = Blueprint("issues", __name__)


@issue_bp.post("/issue_book")
@token_required
def issue_book():
    issue = IssueService.issue_book(json_object())
    return jsonify({
        "Status": True,
        "Result": "Book issued successfully",
        "IssueId": issue.issue_id,
    }), 201


@issue_bp.put("/return_book/<issue_id>")
@token_required
def return_book(issue_id):
    IssueService.return_book(issue_id)
    return jsonify({"Status": True, "Result": "Book returned successfully"})


@issue_bp.delete("/delete_issue/<issue_id>")
@token_required
def delete_issue(issue_id):
    IssueService.delete_issue(issue_id)
    return jsonify({"Status": True, "Result": "Issue record deleted successfully"})


@issue_bp.get("/pending_book/<accession_no>")
@token_required
def pending_book(accession_no):
    book, pending = IssueService.pending_for_book(accession_no)
    return jsonify({
        "Status": True,
        "BookDetails": book.to_dict(),
        "PendingIssues": [x.to_dict() for x in pending],
    })


@issue_bp.get("/all_issues")
@token_required
def all_issues():
    return jsonify({"Status": True, "Issues": [x.to_dict() for x in IssueService.list_all()]})


@issue_bp.get("/all_issued_books")
@token_required
def all_issued_books():
    return jsonify({"Status": True, "Issues": [x.to_dict() for x in IssueService.list_issued()]})


@issue_bp.get("/count_pending_books")
@token_required
def count_pending_books():
    return jsonify({"Status": True, "PendingBooksCount": IssueService.count_pending()})


@issue_bp.get("/issued_books_count")
@token_required
def issued_books_count():
    return jsonify({"Status": True, "IssuedBooks": IssueService.issued_counts()})


@issue_bp.get("/returned_issues/<accession_no>")
@token_required
def returned_issues(accession_no):
    returned = IssueService.returned_for_book(accession_no)
    return jsonify({"Status": True, "ReturnedIssues": [x.to_dict() for x in returned]})
