"""A JSON HTTP API for managing a catalogue of books, built on Flask and SQLAlchemy."""

__version__ = "0.1.0"