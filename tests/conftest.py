"""Shared pytest fixtures for the movies API tests."""

import json

import pytest
from fastapi.testclient import TestClient

from app.database import MovieStore
from app.main import create_app

SEED_MOVIES = [
    {
        "id": "movie-001",
        "title": "The Dark Knight",
        "year": 2008,
        "director": "Christopher Nolan",
        "duration": 152,
        "rate": 9.0,
        "poster": "https://example.com/dark-knight.jpg",
        "genre": ["Action", "Crime", "Drama"],
    },
    {
        "id": "movie-002",
        "title": "Forrest Gump",
        "year": 1994,
        "director": "Robert Zemeckis",
        "duration": 142,
        "rate": 8.8,
        "poster": "https://example.com/forrest-gump.jpg",
        "genre": ["Comedy", "Drama"],
    },
    {
        "id": "movie-003",
        "title": "The Matrix",
        "year": 1999,
        "director": "Lana Wachowski",
        "duration": 136,
        "rate": 8.7,
        "poster": "https://example.com/matrix.jpg",
        "genre": ["Action", "Sci-Fi"],
    },
]


@pytest.fixture
def new_movie():
    """A valid create payload."""
    return {
        "title": "Arrival",
        "year": 2016,
        "director": "Denis Villeneuve",
        "duration": 116,
        "poster": "https://example.com/arrival.jpg",
        "genre": ["Drama", "Sci-Fi"],
    }


@pytest.fixture
def seed_file(tmp_path):
    """Write the seed movies to a temporary JSON file."""
    path = tmp_path / "movies.json"
    path.write_text(json.dumps(SEED_MOVIES), encoding="utf-8")
    return path


@pytest.fixture
def store(seed_file):
    """Fresh store loaded from the temporary seed file."""
    return MovieStore.from_file(str(seed_file))


@pytest.fixture
def client(store):
    """Test client over an app that owns its own store."""
    app = create_app(store=store)
    return TestClient(app)
