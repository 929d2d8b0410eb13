from datetime import datetime, timezone

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from libraryportal.config import Config
from libraryportal.extensions import cors, db, migrate, swagger
from libraryportal import models  # noqa: F401  (registers tables on db.metadata)
from libraryportal.repositories import BookRepo, BorrowerRepo
from libraryportal.services import BookService, BorrowerService
from libraryportal.utils.auth import init_security
from libraryportal.utils.converters import IdConverter


def create_app(config_object=Config):
    app = Flask(__name__)
    app.config.from_object(config_object)
    app.logger.setLevel(app.config["LOG_LEVEL"])

    # 1) extensions
    db.init_app(app)
    migrate.init_app(app, db)
    cors.init_app(app)
    swagger.init_app(app)

    # 2) security: in-memory user + before_request guard
    init_security(app)

    # 3) repositories and services, built once and shared by the blueprints
    with app.app_context():
        book_repo = BookRepo(db.session)
        borrower_repo = BorrowerRepo(db.session)
        app.extensions["libraryportal"].update({
            "book_service": BookService(book_repo, borrower_repo),
            "borrower_service": BorrowerService(borrower_repo),
        })

        if app.config["AUTO_CREATE_TABLES"]:
            db.create_all()
            app.logger.info("[db] Tables ensured.")

    # 4) blueprints; <id:...> routes need the converter registered first
    app.url_map.converters["id"] = IdConverter
    from libraryportal.controllers.auth_controller import auth_bp
    from libraryportal.controllers.book_controller import book_bp
    from libraryportal.controllers.borrower_controller import borrower_bp
    app.register_blueprint(auth_bp)
    app.register_blueprint(book_bp)
    app.register_blueprint(borrower_bp)

    @app.errorhandler(Exception)
    def handle_unexpected(e):
        if isinstance(e, HTTPException):
            return e
        app.logger.exception(f"[app] Unhandled error on {request.method} {request.path}: {e}")
        return jsonify({
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "message": str(e),
            "details": f"uri={request.path}",
        }), 500

    @app.get("/health")
    def health():
        return jsonify({"ok": True})

    return app
