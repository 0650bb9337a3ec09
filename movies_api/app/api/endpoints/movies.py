"""
Movie endpoints.

Five routes over the in‑memory store: list, get, create, update and
delete.  Lookups that miss answer with HTTP 200 and a
``{"message": "Movie not found"}`` payload rather than a 404; existing
clients check the body, not the status code.

Create and update read the raw body and decode it in the service
layer, so malformed input surfaces as HTTP 400 with the decode error
text instead of FastAPI's 422 validation response.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException, Request, status

from movies_api.app.core.store import MovieStore, get_store
from movies_api.app.schemas.movie import Movie
from movies_api.app.services.movie_service import MovieDecodeError, MovieService

router = APIRouter()

NOT_FOUND = {"message": "Movie not found"}


def legacy_body_handling(request: Request) -> bool:
    return request.app.state.settings.legacy_body_handling


@router.get("", response_model=List[Movie])
async def list_movies(store: MovieStore = Depends(get_store)) -> List[Movie]:
    """Return every movie in store order."""
    return await MovieService.list_movies(store)


@router.get("/{movie_id}", response_model=Dict[str, Any])
async def get_movie(movie_id: str, store: MovieStore = Depends(get_store)) -> Dict[str, Any]:
    """Return a single movie, or the not‑found message."""
    movie = await MovieService.get_movie(store, movie_id)
    if movie is None:
        return NOT_FOUND
    return movie.model_dump()


@router.post("", response_model=Movie)
async def create_movie(
    request: Request,
    store: MovieStore = Depends(get_store),
    legacy: bool = Depends(legacy_body_handling),
) -> Movie:
    """Create a movie under a generated id; any id in the body is ignored."""
    raw = await request.body()
    try:
        return await MovieService.create_movie(store, raw, legacy=legacy)
    except MovieDecodeError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


@router.put("/{movie_id}", response_model=Dict[str, Any])
async def update_movie(
    movie_id: str,
    request: Request,
    store: MovieStore = Depends(get_store),
    legacy: bool = Depends(legacy_body_handling),
) -> Dict[str, Any]:
    """Replace a movie; the path id wins over any id in the body.

    The updated movie moves to the end of the list.
    """
    raw = await request.body()
    try:
        movie = await MovieService.update_movie(store, movie_id, raw, legacy=legacy)
    except MovieDecodeError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    if movie is None:
        return NOT_FOUND
    return movie.model_dump()


@router.delete("/{movie_id}", response_model=List[Movie])
async def delete_movie(movie_id: str, store: MovieStore = Depends(get_store)) -> List[Movie]:
    """Delete a movie if present and return the remaining list either way."""
    return await MovieService.delete_movie(store, movie_id)
