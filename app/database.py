import json
import logging
import os
import uuid
from typing import List, Optional

from app import config
from app.schemas import validate_movie

logger = logging.getLogger(__name__)


def load_movies(path: Optional[str] = None) -> List[dict]:
    """Reads the seed file. Every record goes through the movie schema."""
    path = path or config.MOVIES_PATH
    if not os.path.exists(path):
        logger.warning(f"Seed file not found at {path}, starting with no movies.")
        return []
    with open(path, encoding="utf-8") as f:
        raw = json.load(f)
    if not isinstance(raw, list):
        raise ValueError(f"Seed file {path} must hold a JSON array of movies")

    movies = []
    seen = set()
    for position, item in enumerate(raw):
        if not isinstance(item, dict):
            raise ValueError(f"Seed entry {position} in {path} is not an object")
        movie_id = str(item["id"]) if item.get("id") is not None else str(uuid.uuid4())
        if movie_id in seen:
            raise ValueError(f"Duplicate movie id {movie_id} in {path}")
        seen.add(movie_id)
        movies.append({"id": movie_id, **validate_movie(item)})
    logger.info(f"Loaded {len(movies)} movies from {path}")
    return movies


class MovieStore:
    """Ordered in-memory movie collection, mutated in place."""

    def __init__(self, movies: Optional[List[dict]] = None):
        self.movies = list(movies or [])

    @classmethod
    def from_file(cls, path: Optional[str] = None) -> "MovieStore":
        return cls(load_movies(path))

    def _index_of(self, movie_id: str) -> int:
        for i, movie in enumerate(self.movies):
            if movie["id"] == movie_id:
                return i
        return -1

    def list_movies(self, genre: Optional[str] = None) -> List[dict]:
        if not genre:
            return list(self.movies)
        wanted = genre.lower()
        return [m for m in self.movies if any(g.lower() == wanted for g in m.get("genre", []))]

    def get(self, movie_id: str) -> Optional[dict]:
        index = self._index_of(movie_id)
        return self.movies[index] if index != -1 else None

    def create(self, data: dict) -> dict:
        movie = {"id": str(uuid.uuid4()), **data}
        self.movies.append(movie)
        logger.info(f"Created movie {movie['id']} ({movie.get('title')})")
        return movie

    def update(self, movie_id: str, changes: dict) -> Optional[dict]:
        index = self._index_of(movie_id)
        if index == -1:
            return None
        # id is never taken from the payload
        changes = {k: v for k, v in changes.items() if k != "id"}
        movie = {**self.movies[index], **changes}
        self.movies[index] = movie
        logger.info(f"Updated movie {movie_id}: {sorted(changes)}")
        return movie

    def delete(self, movie_id: str) -> bool:
        index = self._index_of(movie_id)
        if index == -1:
            return False
        del self.movies[index]
        logger.info(f"Deleted movie {movie_id}")
        return True
