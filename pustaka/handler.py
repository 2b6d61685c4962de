"""HTTP handlers of the book API."""

import re

from flask import Blueprint, jsonify, request
from sqlalchemy.exc import SQLAlchemyError

from .schemas import BookResponse, RequestValidationError, parse_book_request

_INTEGER = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_SERVICE_ERRORS = (SQLAlchemyError, ValueError, LookupError)


def _parse_id(raw):
    if not _INTEGER.fullmatch(raw):
        return 0
    return min(max(int(raw), _INT64_MIN), _INT64_MAX)


def _error(payload):
    return jsonify(errors=payload), 400


def _book_payload(book):
    return jsonify(data=BookResponse.from_book(book).to_dict())


def create_book_blueprint(service):
    """Return a blueprint with the book routes bound to *service*."""
    blueprint = Blueprint("books", __name__)

    @blueprint.get("/books")
    def get_books():
        try:
            books = service.find_all()
        except _SERVICE_ERRORS as exc:
            return _error(str(exc))
        data = [BookResponse.from_book(book).to_dict() for book in books]
        return jsonify(data=data or None)

    @blueprint.get("/books/<book_id>")
    def get_book(book_id):
        try:
            book = service.find_by_id(_parse_id(book_id))
        except _SERVICE_ERRORS as exc:
            return _error(str(exc))
        return _book_payload(book)

    @blueprint.post("/books")
    def create_book():
        try:
            book_request = parse_book_request(request.get_json(silent=True))
        except RequestValidationError as exc:
            return _error(exc.errors)
        try:
            book = service.create(book_request)
        except _SERVICE_ERRORS as exc:
            return _error(str(exc))
        return _book_payload(book)

    @blueprint.put("/books/<book_id>")
    def update_book(book_id):
        try:
            book_request = parse_book_request(request.get_json(silent=True))
        except RequestValidationError as exc:
            return _error(exc.errors)
        try:
            book = service.update(_parse_id(book_id), book_request)
        except _SERVICE_ERRORS as exc:
            return _error(str(exc))
        return _book_payload(book)

    @blueprint.delete("/books/<book_id>")
    def delete_book(book_id):
        try:
            book = service.delete(_parse_id(book_id))
        except _SERVICE_ERRORS as exc:
            return _error(str(exc))
        return _book_payload(book)

    return blueprint