from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from app.database import MovieStore
from app.schemas import MessageResponse, Movie, MovieCreate, MovieUpdate

router = APIRouter()


def get_store(request: Request) -> MovieStore:
    return request.app.state.store


@router.get("/movies", response_model=List[Movie])
def get_movies(genre: Optional[str] = Query(None), store: MovieStore = Depends(get_store)):
    """All movies, or only those tagged with `genre` (case-insensitive)."""
    return store.list_movies(genre)


@router.get("/movies/{movie_id}", response_model=Movie)
def get_movie(movie_id: str, store: MovieStore = Depends(get_store)):
    movie = store.get(movie_id)
    if movie is None:
        raise HTTPException(status_code=404, detail="Movie not found")
    return movie


@router.post("/movies", response_model=Movie, status_code=201)
def create_movie(movie: MovieCreate, store: MovieStore = Depends(get_store)):
    return store.create(movie.to_record())


@router.patch("/movies/{movie_id}", response_model=Movie)
def update_movie(
    movie_id: str,
    changes: Optional[MovieUpdate] = None,
    store: MovieStore = Depends(get_store),
):
    """Merges only the fields sent in the body over the stored movie. No body means no changes."""
    movie = store.update(movie_id, changes.to_changes() if changes is not None else {})
    if movie is None:
        raise HTTPException(status_code=404, detail="Movie not found")
    return movie


@router.delete("/movies/{movie_id}", response_model=MessageResponse)
def delete_movie(movie_id: str, store: MovieStore = Depends(get_store)):
    if not store.delete(movie_id):
        raise HTTPException(status_code=404, detail="Movie not found")
    return {"message": "Movie deleted"}
