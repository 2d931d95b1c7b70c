from library_api.models.user import User
from library_api.models.book import Book, BOOK_FIELDS
from library_api.models.issue import IssueRecord, IssueStatus, SNAPSHOT_FIELDS

__all__ = ["User", "Book", "BOOK_FIELDS", "IssueRecord", "IssueStatus", "SNAPSHOT_FIELDS"]
