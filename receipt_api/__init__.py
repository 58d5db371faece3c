# --- receipt_api/__init__.py ---
from flask import Flask
from werkzeug.exceptions import HTTPException

from .config import Config
from .errors import ReceiptError
from .extensions import cors, init_store
from .utils.api import api_ok, api_error


def create_app(config_object=None, store=None):
    app = Flask(__name__)

    config_object = config_object or Config
    app.config.from_object(config_object)
    config_object.init_app(app)

    # Init extensions
    cors.init_app(app, resources={r"/*": {"origins": app.config["CORS_ORIGINS"]}})
    init_store(app, store)

    # Register blueprints
    from .receipt import bp as receipt_bp; app.register_blueprint(receipt_bp)

    from .cli import register_cli
    register_cli(app)

    register_error_handlers(app)

    @app.get("/")
    def health():
        return api_ok({"ok": True, "msg": "API running"})

    return app


def register_error_handlers(app):
    @app.errorhandler(ReceiptError)
    def receipt_error(e: ReceiptError):
        if e.status_code >= 500:
            app.logger.error("receipt request failed: %s", e.message)
        return api_error(e.message, e.status_code)

    @app.errorhandler(HTTPException)
    def http_error(e: HTTPException):
        return api_error(e.description, e.code)

    @app.errorhandler(Exception)
    def unexpected_error(e: Exception):
        app.logger.exception("unhandled error")
        return api_error("internal server error", 500)
