"""
Pytest configuration and shared fixtures.
"""

import json
import random

import pytest
from fastapi.testclient import TestClient

from catalogue.main import create_app
from catalogue.store import BookStore


@pytest.fixture
def books_file(tmp_path):
    """Path of the JSON file backing the store under test."""
    return tmp_path / "books.json"


@pytest.fixture
def sample_books():
    """Books as they would appear in a persisted file."""
    return [
        {"id": 12, "title": "Dune", "author": "Frank Herbert"},
        {"id": 404, "title": "Neuromancer", "author": "William Gibson", "year": 1984},
        {"id": 7, "title": "Hyperion", "author": "Dan Simmons"},
    ]


@pytest.fixture
def seeded_books_file(books_file, sample_books):
    """Books file pre-populated with sample books."""
    books_file.write_text(json.dumps(sample_books), encoding="utf-8")
    return books_file


@pytest.fixture
def store(books_file):
    """Empty store backed by a file that does not exist yet."""
    book_store = BookStore(books_file, rng=random.Random(1234))
    book_store.load()
    return book_store


@pytest.fixture
def seeded_store(seeded_books_file):
    """Store loaded from the sample books file."""
    book_store = BookStore(seeded_books_file, rng=random.Random(1234))
    book_store.load()
    return book_store


@pytest.fixture
def client(store):
    """Test client serving the empty store."""
    with TestClient(create_app(store=store)) as test_client:
        yield test_client


@pytest.fixture
def seeded_client(seeded_store):
    """Test client serving the sample books."""
    with TestClient(create_app(store=seeded_store)) as test_client:
        yield test_client
