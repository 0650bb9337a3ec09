"""
Pydantic models for movie data.

``Movie`` is both the request body accepted by the create/update
routes and the record held by the store.  Every string field defaults
to an empty string and ``director`` defaults to ``None``, so a body
that omits fields still decodes.  Unknown fields are ignored.
"""

from typing import Optional

from pydantic import BaseModel, Field


class Director(BaseModel):
    firstname: str = Field("", examples=["John"])
    lastname: str = Field("", examples=["Doe"])


class Movie(BaseModel):
    """A film with its ISBN, title and optional director."""

    id: str = Field("", examples=["1"])
    isbn: str = Field("", examples=["438277"])
    title: str = Field("", examples=["Movie One"])
    director: Optional[Director] = None
