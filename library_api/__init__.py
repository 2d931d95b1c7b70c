from flask import Flask, jsonify

from library_api.config import config_for_env
from library_api.extensions import db, jwt
from library_api.errors import register_error_handlers
from library_api.db_objects import ensure_db_objects


def _check_required_settings(app):
    if app.config.get("TESTING") or app.config.get("DEBUG"):
        return
    missing = [k for k in app.config.get("REQUIRED_SETTINGS", ()) if not app.config.get(k)]
    if missing:
        raise RuntimeError(
            "Missing required configuration: " + ", ".join(missing)
            + " (set JWT_SECRET_KEY and DB_USER/DB_PASSWORD/DB_DATABASE)"
        )


def create_app(config_object=None):
    app = Flask(__name__)
    app.config.from_object(config_object or config_for_env())
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    _check_required_settings(app)

    # 1) store + token codec
    db.init_app(app)
    jwt.init_app(app)

    # 2) tables (create-only)
    if app.config.get("AUTO_CREATE_SCHEMA"):
        ensure_db_objects(app)

    # 3) errors -> JSON
    register_error_handlers(app)

    # 4) API blueprints
    from library_api.controllers.admin_controller import admin_bp
    from library_api.controllers.book_controller import book_bp
    from library_api.controllers.issue_controller import issue_bp
    app.register_blueprint(admin_bp, url_prefix="/api/admin")
    app.register_blueprint(book_bp, url_prefix="/api/books")
    app.register_blueprint(issue_bp, url_prefix="/api/issues")

    from library_api.commands import register_commands
    register_commands(app)

    @app.get("/health")
    def health():
        return jsonify({"Status": True})

    return app
