"""Book records and the request and response shapes of the book API."""

from __future__ import annotations

import re
from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Any

_DIGITS = re.compile(r"[0-9]+")
_JSON_NUMBER = re.compile(r"-?(?:0|[1-9][0-9]*)(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?")
_INT64_MAX = 2**63 - 1

# (JSON key, field name used in error messages, holds a number)
_FIELDS = (
    ("title", "Title", False),
    ("price", "Price", True),
    ("description", "Description", False),
    ("rating", "Rating", True),
    ("discount", "Discount", True),
)


@dataclass
class Book:
    """A row of the books table."""

    id: int = 0
    title: str = ""
    description: str = ""
    price: int = 0
    rating: int = 0
    discount: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None


class BookValidationError(ValueError):
    """A request body whose fields break the validation rules."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))


def _lookup(data: dict, name: str) -> Any:
    """Return the value for a key matched case-insensitively; the last match wins."""
    value = None
    for key, item in data.items():
        if isinstance(key, str) and key.lower() == name and item is not None:
            value = item
    return value


def _text(name: str, value: Any) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"field {name} must be a string")
    return value


def _number_literal(name: str, value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        raise ValueError(f"field {name} must be a number")
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        if not _JSON_NUMBER.fullmatch(value):
            raise ValueError(f"field {name} holds an invalid number literal {value!r}")
        return value
    raise ValueError(f"field {name} must be a number")


@dataclass(frozen=True)
class BookRequest:
    """The validated body of a create or update request."""

    title: str
    price: int
    description: str
    rating: int
    discount: int

    @classmethod
    def from_json(cls, data: Any) -> BookRequest:
        """Build a request from decoded JSON.

        Raises BookValidationError listing every field that fails its rule,
        and ValueError when the body has the wrong shape or types.
        """
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError("request body must be a JSON object")

        raw: dict[str, str] = {}
        for key, _, numeric in _FIELDS:
            value = _lookup(data, key)
            raw[key] = _number_literal(key, value) if numeric else _text(key, value)

        errors = []
        for key, label, numeric in _FIELDS:
            if raw[key] == "":
                errors.append(f"Error on field {label}, condition: required")
            elif numeric and not _DIGITS.fullmatch(raw[key]):
                errors.append(f"Error on field {label}, condition: number")
        if errors:
            raise BookValidationError(errors)

        return cls(
            title=raw["title"],
            price=min(int(raw["price"]), _INT64_MAX),
            description=raw["description"],
            rating=min(int(raw["rating"]), _INT64_MAX),
            discount=min(int(raw["discount"]), _INT64_MAX),
        )


@dataclass(frozen=True)
class BookResponse:
    """The public view of a book returned by the API."""

    id: int
    title: str
    description: str
    rating: int
    price: int
    discount: int

    @classmethod
    def from_book(cls, book: Book) -> BookResponse:
        return cls(
            id=book.id,
            title=book.title,
            description=book.description,
            rating=book.rating,
            price=book.price,
            discount=book.discount,
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)