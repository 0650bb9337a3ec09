"""
Service layer for movies.

Handlers hand raw request bodies to this module rather than letting
FastAPI validate them, because malformed bodies are handled
differently per route: create and update either reject them (the
default) or follow the legacy rules described in
``Settings.legacy_body_handling``.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional, Type

from pydantic import BaseModel, ValidationError

from movies_api.app.core.store import MovieStore
from movies_api.app.schemas.movie import Director, Movie

logger = logging.getLogger(__name__)


class MovieDecodeError(ValueError):
    """Raised when a request body cannot be decoded into a ``Movie``."""


_JSON_WHITESPACE = " \t\n\r"


def _fold_keys(data: Any, model: Type[BaseModel]) -> Any:
    """Map keys onto ``model`` field names ignoring case (``Title`` -> ``title``)."""
    if not isinstance(data, dict):
        return data
    fields = {name.lower(): name for name in model.model_fields}
    folded: Dict[str, Any] = {}
    for key, value in data.items():
        name = key if key in model.model_fields else fields.get(key.lower(), key)
        if name == "director":
            value = _fold_keys(value, Director)
        folded[name] = value
    return folded


def decode_movie(raw: bytes, *, legacy: bool = False) -> Movie:
    """Decode a JSON request body into a ``Movie``.

    Missing fields take their defaults, unknown fields are ignored and a
    literal ``null`` body yields an empty movie.  Anything else that is
    not a JSON object with correctly typed fields raises
    ``MovieDecodeError`` carrying the underlying error text.

    With ``legacy`` set, decoding is looser in the way the first release
    of the service was: only the first JSON value of the body is read
    (trailing data is ignored) and keys match field names ignoring case.
    """
    try:
        if legacy:
            text = raw.decode("utf-8").lstrip(_JSON_WHITESPACE)
            data, _ = json.JSONDecoder().raw_decode(text)
            data = _fold_keys(data, Movie)
        else:
            data = json.loads(raw)
        if data is None:
            return Movie()
        return Movie.model_validate(data)
    except (json.JSONDecodeError, UnicodeDecodeError, RecursionError, ValidationError) as exc:
        # RecursionError: nesting deeper than the interpreter stack allows.
        raise MovieDecodeError(str(exc) or type(exc).__name__) from exc


class MovieService:
    """Operations behind the movie routes."""

    @classmethod
    async def list_movies(cls, store: MovieStore) -> List[Movie]:
        return store.list_all()

    @classmethod
    async def get_movie(cls, store: MovieStore, movie_id: str) -> Optional[Movie]:
        return store.get(movie_id)

    @classmethod
    async def create_movie(cls, store: MovieStore, raw: bytes, *, legacy: bool = False) -> Movie:
        """Decode ``raw`` and store it under a generated id.

        In legacy mode a malformed body is ignored and an empty movie is
        stored instead; otherwise ``MovieDecodeError`` propagates and the
        store is left untouched.
        """
        try:
            movie = decode_movie(raw, legacy=legacy)
        except MovieDecodeError as exc:
            if not legacy:
                logger.warning("Rejected movie body on create: %s", exc)
                raise
            logger.warning("Ignoring malformed movie body on create: %s", exc)
            movie = Movie()
        created = store.create(movie)
        logger.info("Created movie %s", created.id)
        return created

    @classmethod
    async def update_movie(
        cls, store: MovieStore, movie_id: str, raw: bytes, *, legacy: bool = False
    ) -> Optional[Movie]:
        """Replace the movie stored under ``movie_id``.

        Returns the stored replacement, or ``None`` if no movie has that
        id.  The replacement always keeps ``movie_id`` and moves to the
        end of the list.

        By default the body is decoded before the store is touched, so a
        malformed body leaves the original in place.  In legacy mode the
        original is removed first and is lost if decoding then fails.
        """
        if legacy:
            return await cls._update_movie_legacy(store, movie_id, raw)
        try:
            movie = decode_movie(raw)
        except MovieDecodeError as exc:
            logger.warning("Rejected movie body on update of %s: %s", movie_id, exc)
            raise
        updated = store.replace(movie_id, movie)
        if updated is not None:
            logger.info("Updated movie %s", movie_id)
        return updated

    @classmethod
    async def _update_movie_legacy(cls, store: MovieStore, movie_id: str, raw: bytes) -> Optional[Movie]:
        if not store.remove(movie_id):
            return None
        try:
            movie = decode_movie(raw, legacy=True)
        except MovieDecodeError as exc:
            logger.warning("Malformed body on update; movie %s was removed: %s", movie_id, exc)
            raise
        updated = store.insert(movie.model_copy(update={"id": movie_id}))
        logger.info("Updated movie %s", movie_id)
        return updated

    @classmethod
    async def delete_movie(cls, store: MovieStore, movie_id: str) -> List[Movie]:
        """Remove the movie if present and return what remains."""
        if store.remove(movie_id):
            logger.info("Deleted movie %s", movie_id)
        return store.list_all()
