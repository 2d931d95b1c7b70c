from sqlalchemy import func

from library_api.models.issue import IssueRecord, IssueStatus
from library_api.extensions import db

class IssueRepo:
    @staticmethod
    def get(issue_id: str):
        return db.session.get(IssueRecord, issue_id)

    @staticmethod
    def exists(issue_id: str) -> bool:
        return db.session.query(IssueRecord.issue_id).filter_by(issue_id=issue_id).first() is not None

    @staticmethod
    def create(issue: IssueRecord):
        db.session.add(issue)
        db.session.commit()
        return issue

    @staticmethod
    def mark_returned(issue_id: str) -> int:
        """
        Compare-and-set: one UPDATE whose predicate includes status = 'Pending'.
        Returns the number of rows changed (0 or 1).
        """
        changed = (
            IssueRecord.query
            .filter_by(issue_id=issue_id, status=IssueStatus.PENDING)
            .update({IssueRecord.status: IssueStatus.RETURNED}, synchronize_session=False)
        )
        db.session.commit()
        return changed

    @staticmethod
    def delete(issue_id: str) -> int:
        deleted = IssueRecord.query.filter_by(issue_id=issue_id).delete(synchronize_session=False)
        db.session.commit()
        return deleted

    @staticmethod
    def list_all():
        return IssueRecord.query.order_by(IssueRecord.issued_on.desc(), IssueRecord.issue_id).all()

    @staticmethod
    def list_by_statuses(statuses):
        return (
            IssueRecord.query
            .filter(IssueRecord.status.in_(statuses))
            .order_by(IssueRecord.issued_on.desc(), IssueRecord.issue_id)
            .all()
        )

    @staticmethod
    def list_by_accession(accession_no: str, status: str):
        return (
            IssueRecord.query
            .filter_by(accession_no=accession_no, status=status)
            .order_by(IssueRecord.issued_on.desc(), IssueRecord.issue_id)
            .all()
        )

    @staticmethod
    def has_pending(accession_no: str) -> bool:
        return (
            db.session.query(IssueRecord.issue_id)
            .filter_by(accession_no=accession_no, status=IssueStatus.PENDING)
            .first()
        ) is not None

    @staticmethod
    def count_by_status(status: str) -> int:
        return IssueRecord.query.filter_by(status=status).count()

    @staticmethod
    def issued_counts():
        """[(accession_no, issued_count)] over Pending + Returned records."""
        return (
            db.session.query(IssueRecord.accession_no, func.count(IssueRecord.issue_id))
            .filter(IssueRecord.status.in_(IssueStatus.ISSUED))
            .group_by(IssueRecord.accession_no)
            .order_by(IssueRecord.accession_no)
            .all()
        )
