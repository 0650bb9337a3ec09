"""
In‑memory movie store.

The store keeps movies in a plain list in insertion order.  There is
no index: lookups are linear scans, which is fine for the handful of
records the service is meant to hold.  Replacing a movie removes it
and appends the new version, so updated records move to the end of
the list.

All primitives run under a single lock, including the
scan‑then‑mutate sequences, so concurrent requests cannot lose or
duplicate records.  The store is created by ``create_app`` and
reaches route handlers through the ``get_store`` dependency.
"""

import logging
import random
from threading import Lock
from typing import Iterable, List, Optional

from fastapi import Request

from ..schemas.movie import Director, Movie

logger = logging.getLogger(__name__)

# Generated ids are decimal strings of integers in [0, ID_SPACE).
ID_SPACE = 1_000_000

SEED_MOVIES = (
    Movie(id="1", isbn="438277", title="Movie One", director=Director(firstname="John", lastname="Doe")),
    Movie(id="2", isbn="277438", title="Movie Two", director=Director(firstname="Smith", lastname="Bob")),
)


class MovieStore:
    """Ordered, lock‑guarded collection of movies."""

    def __init__(self, movies: Optional[Iterable[Movie]] = None, rng: Optional[random.Random] = None) -> None:
        self._movies: List[Movie] = list(movies or [])
        self._lock = Lock()
        self._rng = rng or random.Random()

    def __len__(self) -> int:
        with self._lock:
            return len(self._movies)

    def list_all(self) -> List[Movie]:
        """Return a snapshot of all movies in current order."""
        with self._lock:
            return list(self._movies)

    def get(self, movie_id: str) -> Optional[Movie]:
        with self._lock:
            index = self._index_of(movie_id)
            return None if index is None else self._movies[index]

    def insert(self, movie: Movie) -> Movie:
        with self._lock:
            self._movies.append(movie)
        return movie

    def create(self, movie: Movie) -> Movie:
        """Store ``movie`` under a freshly generated id.

        Any id carried by ``movie`` is ignored.  The id is drawn at
        random and redrawn until it does not clash with a stored one.
        """
        with self._lock:
            taken = {m.id for m in self._movies}
            if len(taken) >= ID_SPACE:
                raise RuntimeError("movie id space exhausted")
            new_id = str(self._rng.randrange(ID_SPACE))
            while new_id in taken:
                new_id = str(self._rng.randrange(ID_SPACE))
            created = movie.model_copy(update={"id": new_id})
            self._movies.append(created)
        return created

    def replace(self, movie_id: str, movie: Movie) -> Optional[Movie]:
        """Swap the first movie with ``movie_id`` for ``movie``.

        The replacement keeps ``movie_id`` whatever id it carried and is
        appended at the end.  Returns ``None`` when nothing matched.
        """
        with self._lock:
            index = self._index_of(movie_id)
            if index is None:
                return None
            del self._movies[index]
            replacement = movie.model_copy(update={"id": movie_id})
            self._movies.append(replacement)
        return replacement

    def remove(self, movie_id: str) -> bool:
        """Remove the first movie with ``movie_id``; report whether one was found."""
        with self._lock:
            index = self._index_of(movie_id)
            if index is None:
                return False
            del self._movies[index]
            return True

    def _index_of(self, movie_id: str) -> Optional[int]:
        # Caller must hold the lock.
        for index, movie in enumerate(self._movies):
            if movie.id == movie_id:
                return index
        return None


def seed_store(store: MovieStore) -> MovieStore:
    """Insert the two seed movies the service starts with."""
    for movie in SEED_MOVIES:
        store.insert(movie.model_copy(deep=True))
    logger.debug("Seeded store with %d movies", len(SEED_MOVIES))
    return store


def get_store(request: Request) -> MovieStore:
    """FastAPI dependency returning the store owned by the application."""
    return request.app.state.store
