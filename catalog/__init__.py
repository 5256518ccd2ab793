import os
import click
from flask import Flask, redirect, render_template, request, url_for
from mongoengine import connect
from werkzeug.exceptions import HTTPException
from .log import setup_logging, get_logger
from .model import seed_catalog_if_empty

logger = get_logger(__name__)


def _env_flag(name, default="false"):
    return os.environ.get(name, default).strip().lower() in ("1", "true", "yes", "on")


def create_app(test_config=None):
    app = Flask(__name__)

    app.config["SECRET_KEY"] = os.environ.get("SECRET_KEY", "secret_key_1234")
    app.config["MONGODB_HOST"] = os.environ.get("MONGODB_HOST", "mongodb://localhost:27017/local_library")
    app.config["SEED_ON_STARTUP"] = _env_flag("SEED_ON_STARTUP")
    app.config["LOG_LEVEL"] = os.environ.get("LOG_LEVEL", "INFO")
    app.config["LOG_FORMAT"] = os.environ.get("LOG_FORMAT", "console")
    app.config.setdefault("MONGODB_CONNECT_OPTIONS", {})
    if test_config:
        app.config.update(test_config)

    setup_logging(app.config["LOG_LEVEL"], app.config["LOG_FORMAT"])

    connect(host=app.config["MONGODB_HOST"], **app.config["MONGODB_CONNECT_OPTIONS"])
    logger.info("document store connected", host=app.config["MONGODB_HOST"])

    from .books_bp import bp as books_bp
    app.register_blueprint(books_bp)

    @app.route("/")
    def home():
        return redirect(url_for("books.index"))

    @app.errorhandler(HTTPException)
    def handle_http_error(err):
        logger.warning("request failed", status=err.code, message=err.description, path=request.path)
        return render_template(
            "error.html",
            title=err.name,
            message=err.description,
            status=err.code,
        ), err.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(err):
        logger.error("unhandled error", path=request.path, exc_info=err)
        return render_template(
            "error.html",
            title="Internal Server Error",
            message="Something went wrong while handling your request.",
            status=500,
        ), 500

    @app.cli.command("seed")
    def seed_command():
        """Load the sample authors and books into an empty catalog."""
        count = seed_catalog_if_empty()
        click.echo(f"Seeded {count} books.")

    if app.config["SEED_ON_STARTUP"]:
        with app.app_context():
            seed_catalog_if_empty()

    logger.info("catalog app created", seed_on_startup=app.config["SEED_ON_STARTUP"])
    return app
