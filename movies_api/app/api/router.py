"""
Top‑level router of the API.

Domain routers are mounted here under their resource prefix.  The
service has no version prefix: movies live directly under
``/movies``.
"""

from fastapi import APIRouter

from .endpoints import movies

router = APIRouter()

router.include_router(movies.router, prefix="/movies", tags=["movies"])
