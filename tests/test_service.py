import pytest
from sqlalchemy import create_engine

from pustaka.entity import BookRequest
from pustaka.repository import BookRepository
from pustaka.service import BookService


@pytest.fixture
def service(tmp_path):
    repo = BookRepository(create_engine(f"sqlite:///{tmp_path / 'books.db'}"))
    repo.migrate()
    return BookService(repo)


REQUEST = BookRequest(title="Bumi", price=100, description="Fantasy", rating=4, discount=5)
OTHER = BookRequest(title="Bulan", price=200, description="Sequel", rating=5, discount=0)


def test_create_copies_request_fields(service):
    book = service.create(REQUEST)
    assert book.id > 0
    assert (book.title, book.price, book.description, book.rating, book.discount) == (
        "Bumi",
        100,
        "Fantasy",
        4,
        5,
    )


def test_find_by_id_and_find_all(service):
    book = service.create(REQUEST)
    assert service.find_by_id(book.id) == book
    assert service.find_all() == [book]


def test_update_overwrites_fields_and_keeps_id(service):
    book = service.create(REQUEST)
    updated = service.update(book.id, OTHER)
    assert updated.id == book.id
    assert updated.created_at == book.created_at
    found = service.find_by_id(book.id)
    assert (found.title, found.price, found.rating) == ("Bulan", 200, 5)


def test_update_unknown_id_creates_new_book(service):
    service.update(42, OTHER)
    books = service.find_all()
    assert len(books) == 1
    assert books[0].title == "Bulan"


def test_delete_returns_removed_book(service):
    book = service.create(REQUEST)
    assert service.delete(book.id) == book
    assert service.find_all() == []


def test_delete_unknown_id_raises(service):
    with pytest.raises(ValueError):
        service.delete(7)