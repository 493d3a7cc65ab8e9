from unittest.mock import patch

import pytest
from sqlalchemy import create_engine

from pustaka.app import create_app, main
from pustaka.repository import BookRepository
from pustaka.service import BookService


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("DSN", raising=False)
    monkeypatch.delenv("HTTP_SERVER_ADDRESS", raising=False)
    monkeypatch.delenv("PORT", raising=False)


@pytest.fixture
def repo(tmp_path):
    repository = BookRepository(create_engine(f"sqlite:///{tmp_path / 'books.db'}"))
    repository.migrate()
    return repository


def test_routes_are_under_v1(repo):
    client = create_app(BookService(repo)).test_client()
    assert client.get("/v1/books").get_json() == {"data": None}
    assert client.get("/books").status_code == 404


def test_create_and_fetch_through_app(repo):
    client = create_app(BookService(repo)).test_client()
    payload = {"title": "Bumi", "description": "Fantasy", "price": 1, "rating": 2, "discount": 3}
    created = client.post("/v1/books", json=payload).get_json()["data"]
    assert client.get(f"/v1/books/{created['id']}").get_json()["data"] == created


def test_main_without_config_exits(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 1


def test_main_with_bad_dsn_exits(tmp_path, monkeypatch):
    (tmp_path / "app.env").write_text("DSN=nosuchdialect://\nHTTP_SERVER_ADDRESS=:8080\n")
    monkeypatch.chdir(tmp_path)
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 1


def test_main_migrates_and_serves(tmp_path, monkeypatch):
    db = tmp_path / "books.db"
    (tmp_path / "app.env").write_text(
        f"DSN=sqlite:///{db}\nHTTP_SERVER_ADDRESS=127.0.0.1:9090\n"
    )
    monkeypatch.chdir(tmp_path)
    with patch("flask.Flask.run") as run:
        main([])
    run.assert_called_once_with(host="127.0.0.1", port=9090)
    assert BookRepository(create_engine(f"sqlite:///{db}")).find_all() == []


def test_main_empty_host_listens_everywhere(tmp_path, monkeypatch):
    db = tmp_path / "books.db"
    (tmp_path / "app.env").write_text(f"DSN=sqlite:///{db}\nHTTP_SERVER_ADDRESS=:8080\n")
    monkeypatch.chdir(tmp_path)
    with patch("flask.Flask.run") as run:
        main([])
    assert run.call_args.kwargs == {"host": "0.0.0.0", "port": 8080}
    assert BookRepository(create_engine(f"sqlite:///{db}")).find_all() == []