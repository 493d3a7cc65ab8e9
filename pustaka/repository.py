"""Storage of books in a relational database."""

from __future__ import annotations

from dataclasses import asdict, replace
from datetime import datetime

from sqlalchemy import (
    BigInteger,
    Column,
    DateTime,
    Integer,
    MetaData,
    Table,
    Text,
    select,
)
from sqlalchemy.engine import Engine

from pustaka.entity import Book

_metadata = MetaData()

_books = Table(
    "books",
    _metadata,
    Column(
        "id",
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True,
        autoincrement=True,
    ),
    Column("title", Text),
    Column("description", Text),
    Column("price", BigInteger),
    Column("rating", BigInteger),
    Column("discount", BigInteger),
    Column("created_at", DateTime),
    Column("updated_at", DateTime),
)


def _to_book(row) -> Book:
    return Book(**row._mapping)


class BookRepository:
    """CRUD operations on the books table."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def migrate(self) -> None:
        """Create the books table if it does not exist."""
        _metadata.create_all(self._engine)

    def find_all(self) -> list[Book]:
        with self._engine.connect() as conn:
            rows = conn.execute(select(_books).order_by(_books.c.id))
            return [_to_book(row) for row in rows]

    def find_by_id(self, book_id: int) -> Book:
        """Return the book with that id, or an empty Book when there is none."""
        with self._engine.connect() as conn:
            row = conn.execute(select(_books).where(_books.c.id == book_id)).first()
        return _to_book(row) if row is not None else Book()

    def create(self, book: Book) -> Book:
        now = datetime.now()
        stored = replace(
            book,
            created_at=book.created_at or now,
            updated_at=book.updated_at or now,
        )
        values = asdict(stored)
        if not stored.id:
            del values["id"]
        with self._engine.begin() as conn:
            result = conn.execute(_books.insert().values(**values))
        return replace(stored, id=result.inserted_primary_key[0])

    def update(self, book: Book) -> Book:
        """Save every field of the book, inserting it when no row matches."""
        if not book.id:
            return self.create(book)
        stored = replace(book, updated_at=datetime.now())
        values = asdict(stored)
        del values["id"]
        with self._engine.begin() as conn:
            result = conn.execute(
                _books.update().where(_books.c.id == stored.id).values(**values)
            )
        if result.rowcount == 0:
            return self.create(stored)
        return stored

    def delete(self, book: Book) -> Book:
        """Remove the book's row; a book without an id cannot be deleted."""
        if not book.id:
            raise ValueError("WHERE conditions required")
        with self._engine.begin() as conn:
            conn.execute(_books.delete().where(_books.c.id == book.id))
        return book