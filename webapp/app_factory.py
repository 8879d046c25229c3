"""
Application Factory - Flask app creation for the Answer Grader service.
"""

from typing import Optional

from flask import Flask
from flask_cors import CORS

from answer_grader.config import Config, ConfigManager
from answer_grader.database import db
from answer_grader.services import AnswerKeyService, CorrectionService, OCRService
from answer_grader.storage import AnswerKeyStore, SQLAnswerKeyStore
from answer_grader.utils.logger import logger

EXTENSION_NAME = "answer_grader"


def create_app(
    config_name: str = "development",
    config: Optional[Config] = None,
    store: Optional[AnswerKeyStore] = None,
    ocr_service: Optional[OCRService] = None,
) -> Flask:
    """
    Application factory function.

    Args:
        config_name: Configuration environment name
        config: Explicit configuration; loaded from the environment when omitted
        store: Answer-key store; the SQL store is used when omitted
        ocr_service: OCR collaborator; built from the configuration when omitted

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)

    if config is None:
        config = ConfigManager().config

    app.config.update(
        SECRET_KEY=config.secret_key,
        DEBUG=config.debug,
        SQLALCHEMY_DATABASE_URI=config.database_url,
        SQLALCHEMY_TRACK_MODIFICATIONS=False,
        MAX_CONTENT_LENGTH=config.max_upload_mb * 1024 * 1024,
    )

    app.json.sort_keys = False

    # Override for testing environment
    if config_name == "testing":
        app.config["TESTING"] = True
        app.config["SQLALCHEMY_DATABASE_URI"] = "sqlite:///:memory:"

    _init_extensions(app, config)
    _init_services(app, config, store, ocr_service)
    _register_blueprints(app)
    _setup_error_handlers(app)

    logger.info(f"Answer Grader app created ({config_name})")
    return app


def _init_extensions(app: Flask, config: Config) -> None:
    """Initialize Flask extensions."""
    db.init_app(app)
    with app.app_context():
        db.create_all()

    CORS(
        app,
        origins=config.cors_origins,
        methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    )


def _init_services(
    app: Flask,
    config: Config,
    store: Optional[AnswerKeyStore],
    ocr_service: Optional[OCRService],
) -> None:
    store = store or SQLAnswerKeyStore()
    app.extensions[EXTENSION_NAME] = {
        "key_service": AnswerKeyService(store),
        "correction_service": CorrectionService(store),
        "ocr_service": ocr_service or OCRService.from_config(config),
    }


def _register_blueprints(app: Flask) -> None:
    from .api.exam_routes import exam_bp

    app.register_blueprint(exam_bp)


def _setup_error_handlers(app: Flask) -> None:
    from .api.error_handlers import register_error_handlers

    register_error_handlers(app)
