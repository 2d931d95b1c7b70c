from datetime import date

from flask import current_app

from library_api.errors import Conflict, NotFound, StoreError, ValidationError
from library_api.models.issue import IssueRecord, IssueStatus, SNAPSHOT_FIELDS
from library_api.repositories.book_repo import BookRepo
from library_api.repositories.issue_repo import IssueRepo
from library_api.utils.ids import new_issue_id

BORROWER_FIELDS = ("student_name", "phone_no", "parental", "remark")


def _parse_issued_on(value) -> date:
    if value in (None, ""):
        return date.today()
    try:
        return date.fromisoformat(str(value)[:10])
    except ValueError:
        raise ValidationError("issued_on must be an ISO date (YYYY-MM-DD)")


def _text(value):
    if value is None:
        return None
    if isinstance(value, (dict, list)):
        raise ValidationError("Issue fields must be plain values")
    return str(value).strip()


class IssueService:
    """
    Issue/return lifecycle of a book copy, keyed by accession number:

        [no record] --issue--> Pending --return--> Returned
        Pending | Returned --delete--> [no record]
    """

    @staticmethod
    def _unused_issue_id() -> str:
        for _ in range(5):
            issue_id = new_issue_id()
            if not IssueRepo.exists(issue_id):
                return issue_id
        raise StoreError("Could not allocate an issue id")

    @staticmethod
    def issue_book(data: dict) -> IssueRecord:
        accession_no = _text(data.get("accession_no"))
        student_name = _text(data.get("student_name"))
        if not accession_no or not student_name:
            raise ValidationError("accession_no and student_name are required")
        issued_on = _parse_issued_on(data.get("issued_on"))

        # existence check and insert are two round trips; inventory is read-only here
        book = BookRepo.get_by_accession(accession_no)
        if not book:
            raise NotFound("Book not found")

        if current_app.config.get("ENFORCE_SINGLE_ACTIVE_LOAN") and IssueRepo.has_pending(accession_no):
            raise Conflict("Book is already issued")

        issue = IssueRecord(
            issue_id=IssueService._unused_issue_id(),
            accession_no=accession_no,
            issued_on=issued_on,
            status=IssueStatus.PENDING,
            **{f: _text(data.get(f)) for f in BORROWER_FIELDS},
            **{f: getattr(book, f) for f in SNAPSHOT_FIELDS},
        )
        IssueRepo.create(issue)
        current_app.logger.info(f"[issues] Issued {accession_no} as {issue.issue_id}")
        return issue

    @staticmethod
    def return_book(issue_id: str):
        # unknown id and already-returned are the same outcome
        if IssueRepo.mark_returned(issue_id) == 0:
            raise NotFound("Issue not found or already returned")
        current_app.logger.info(f"[issues] Returned {issue_id}")

    @staticmethod
    def delete_issue(issue_id: str):
        if IssueRepo.delete(issue_id) == 0:
            raise NotFound("Issue record not found")
        current_app.logger.info(f"[issues] Deleted {issue_id}")

    @staticmethod
    def pending_for_book(accession_no: str):
        book = BookRepo.get_by_accession(accession_no)
        if not book:
            raise NotFound("Book not found in the library")
        return book, IssueRepo.list_by_accession(accession_no, IssueStatus.PENDING)

    @staticmethod
    def list_all():
        return IssueRepo.list_all()

    @staticmethod
    def list_issued():
        return IssueRepo.list_by_statuses(IssueStatus.ISSUED)

    @staticmethod
    def count_pending() -> int:
        return IssueRepo.count_by_status(IssueStatus.PENDING)

    @staticmethod
    def issued_counts():
        return [
            {"accession_no": accession_no, "issued_count": count}
            for accession_no, count in IssueRepo.issued_counts()
        ]

    @staticmethod
    def returned_for_book(accession_no: str):
        return IssueRepo.list_by_accession(accession_no, IssueStatus.RETURNED)
