"""The book API application and its command-line entry point."""

from __future__ import annotations

import argparse
import logging
import os

from flask import Flask
from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError

from pustaka.config import load_config
from pustaka.handler import create_blueprint
from pustaka.repository import BookRepository
from pustaka.service import BookService

log = logging.getLogger(__name__)

_DEFAULT_PORT = 8080


def create_app(service: BookService) -> Flask:
    """Build the Flask application with the book routes under /v1."""
    app = Flask(__name__)
    app.register_blueprint(create_blueprint(service), url_prefix="/v1")
    return app


def _parse_address(address: str) -> tuple[str, int]:
    """Split a host:port address; an empty host means every interface."""
    if not address:
        port = os.environ.get("PORT")
        return "0.0.0.0", int(port) if port else _DEFAULT_PORT
    host, _, port = address.rpartition(":")
    return host.strip("[]") or "0.0.0.0", int(port)


def main(argv=None) -> None:
    """Load app.env from the working directory, migrate the database and serve."""
    parser = argparse.ArgumentParser(prog="pustaka", description="Serve the book API.")
    parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO)

    try:
        config = load_config(".")
    except OSError as exc:
        log.error("cannot load config %s", exc)
        raise SystemExit(1) from exc

    try:
        engine = create_engine(config.dsn)
        with engine.connect():
            pass
        repository = BookRepository(engine)
        repository.migrate()
    except SQLAlchemyError as exc:
        log.error("db connection error")
        raise SystemExit(1) from exc

    try:
        host, port = _parse_address(config.http_server_address)
    except ValueError as exc:
        log.error("invalid server address %r", config.http_server_address)
        raise SystemExit(1) from exc

    app = create_app(BookService(repository))
    app.run(host=host, port=port)