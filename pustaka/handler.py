"""HTTP handlers for the book endpoints."""

from __future__ import annotations

import json
import re

from flask import Blueprint, jsonify, request
from sqlalchemy.exc import SQLAlchemyError

from pustaka.entity import BookRequest, BookResponse, BookValidationError
from pustaka.service import BookService

_INTEGER = re.compile(r"[+-]?[0-9]+")
_INT64_MIN, _INT64_MAX = -(2**63), 2**63 - 1
_SERVICE_ERRORS = (ValueError, SQLAlchemyError)


def _parse_id(text: str) -> int:
    """Parse a path id; anything that is not an integer becomes 0."""
    if not _INTEGER.fullmatch(text):
        return 0
    return max(_INT64_MIN, min(int(text), _INT64_MAX))


def _read_request() -> BookRequest:
    try:
        payload = json.loads(request.get_data(as_text=True))
    except json.JSONDecodeError as exc:
        raise ValueError(f"invalid JSON body: {exc.msg}") from exc
    return BookRequest.from_json(payload)


def _bad_request(errors):
    return jsonify(errors=errors), 400


def _book_data(book):
    return jsonify(data=BookResponse.from_book(book).to_dict())


def create_blueprint(service: BookService) -> Blueprint:
    """Build the blueprint serving /books on top of the given service."""
    blueprint = Blueprint("books", __name__)

    @blueprint.route("/books", methods=["GET"])
    def get_books():
        try:
            books = service.find_all()
        except _SERVICE_ERRORS as exc:
            return _bad_request(str(exc))
        responses = [BookResponse.from_book(book).to_dict() for book in books]
        return jsonify(data=responses or None)

    @blueprint.route("/books/<book_id>", methods=["GET"])
    def get_book(book_id):
        try:
            book = service.find_by_id(_parse_id(book_id))
        except _SERVICE_ERRORS as exc:
            return _bad_request(str(exc))
        return _book_data(book)

    @blueprint.route("/books", methods=["POST"])
    def create_book():
        try:
            book_request = _read_request()
        except BookValidationError as exc:
            return _bad_request(exc.errors)
        except ValueError as exc:
            return _bad_request([str(exc)])
        try:
            book = service.create(book_request)
        except _SERVICE_ERRORS as exc:
            return _bad_request(str(exc))
        return _book_data(book)

    @blueprint.route("/books/<book_id>", methods=["PUT"])
    def update_book(book_id):
        try:
            book_request = _read_request()
        except BookValidationError as exc:
            return _bad_request(exc.errors)
        except ValueError as exc:
            return _bad_request([str(exc)])
        try:
            book = service.update(_parse_id(book_id), book_request)
        except _SERVICE_ERRORS as exc:
            return _bad_request(str(exc))
        return _book_data(book)

    @blueprint.route("/books/<book_id>", methods=["DELETE"])
    def delete_book(book_id):
        try:
            book = service.delete(_parse_id(book_id))
        except _SERVICE_ERRORS as exc:
            return _bad_request(str(exc))
        return _book_data(book)

    return blueprint