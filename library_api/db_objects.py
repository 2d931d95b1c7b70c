from sqlalchemy import inspect

from library_api.extensions import db
from library_api import models  # noqa: F401  registers tables on db.metadata

TABLES = ("users", "book_management", "issue_return_book")


def ensure_db_objects(app):
    """
    Create any missing tables/indexes. Existing tables are left untouched;
    this is not a migration tool.
    """
    with app.app_context():
        existing = set(inspect(db.engine).get_table_names())
        missing = [t for t in TABLES if t not in existing]
        db.create_all()
        if missing:
            app.logger.info(f"[store] Created tables: {', '.join(missing)}")
