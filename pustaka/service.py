"""Book operations built on a repository."""

from __future__ import annotations

from dataclasses import replace

from pustaka.entity import Book, BookRequest
from pustaka.repository import BookRepository


class BookService:
    """Turns API requests into repository calls."""

    def __init__(self, repository: BookRepository) -> None:
        self._repository = repository

    def find_all(self) -> list[Book]:
        return self._repository.find_all()

    def find_by_id(self, book_id: int) -> Book:
        return self._repository.find_by_id(book_id)

    def create(self, request: BookRequest) -> Book:
        book = Book(
            title=request.title,
            description=request.description,
            rating=request.rating,
            price=request.price,
            discount=request.discount,
        )
        return self._repository.create(book)

    def update(self, book_id: int, request: BookRequest) -> Book:
        """Overwrite the book's fields; an unknown id saves a new book."""
        book = replace(
            self._repository.find_by_id(book_id),
            title=request.title,
            description=request.description,
            rating=request.rating,
            price=request.price,
            discount=request.discount,
        )
        return self._repository.update(book)

    def delete(self, book_id: int) -> Book:
        book = self._repository.find_by_id(book_id)
        return self._repository.delete(book)