from flask import jsonify
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

from library_api.extensions import db


class ApiError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code = 500
    message = "Server error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)
        self.message = message or self.message


class ValidationError(ApiError):
    status_code = 400
    message = "Invalid request"


class Unauthenticated(ApiError):
    status_code = 401
    message = "Access token is required"


class InvalidToken(ApiError):
    status_code = 403
    message = "Invalid or expired token"


class Unauthorized(ApiError):
    status_code = 401
    message = "Incorrect password"


class NotFound(ApiError):
    status_code = 404
    message = "Not found"


class Conflict(ApiError):
    status_code = 409
    message = "Conflict"


class StoreError(ApiError):
    status_code = 500
    message = "Query Error"


class ImportFormatError(ApiError):
    status_code = 400
    message = "Empty file or incorrect format"


def _json_error(message, code):
    return jsonify({"Status": False, "Error": message}), code


def register_error_handlers(app):
    @app.errorhandler(ApiError)
    def handle_api_error(e: ApiError):
        if e.status_code >= 500:
            app.logger.error(f"[api] {type(e).__name__}: {e.message}")
        return _json_error(e.message, e.status_code)

    @app.errorhandler(SQLAlchemyError)
    def handle_store_error(e: SQLAlchemyError):
        db.session.rollback()
        app.logger.exception(f"[store] query failed: {e}")
        return _json_error(StoreError.message, StoreError.status_code)

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        return _json_error(e.description or e.name, e.code)
