"""Application assembly and command-line entry point."""

import argparse
import os

from flask import Flask
from sqlalchemy.exc import SQLAlchemyError

from .config import ConfigError, load_config
from .handler import create_book_blueprint
from .repository import BookRepository, connect
from .service import BookService

_DEFAULT_HOST = "0.0.0.0"
_DEFAULT_PORT = 8080


def create_app(config):
    """Connect to the configured database and return the Flask application."""
    session_factory = connect(config.dsn)
    service = BookService(BookRepository(session_factory))
    app = Flask(__name__)
    app.register_blueprint(create_book_blueprint(service), url_prefix="/v1")
    return app


def _split_address(address):
    if not address:
        return _DEFAULT_HOST, int(os.environ.get("PORT") or _DEFAULT_PORT)
    host, separator, port = address.rpartition(":")
    if not separator:
        host, port = address, ""
    return host or _DEFAULT_HOST, int(port) if port else _DEFAULT_PORT


def main(argv=None):
    parser = argparse.ArgumentParser(prog="pustaka", description="Serve the book API.")
    parser.add_argument(
        "config_dir", nargs="?", default=".", help="directory holding app.env"
    )
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config_dir)
    except ConfigError:
        raise SystemExit("cannot load config") from None

    try:
        app = create_app(config)
    except SQLAlchemyError:
        raise SystemExit("db connection error") from None

    host, port = _split_address(config.http_server_address)
    app.run(host=host, port=port)