"""
Pytest configuration for the Movies API.

Provides fixtures for:
- Fresh, seeded applications per test (default and legacy body handling)
- FastAPI test clients bound to those applications
"""

from __future__ import annotations

import random

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from movies_api.app.core.config import Settings
from movies_api.app.core.store import MovieStore, seed_store
from movies_api.app.main import create_app


@pytest.fixture
def store() -> MovieStore:
    """Seeded store with a deterministic id generator."""
    return seed_store(MovieStore(rng=random.Random(1234)))


@pytest.fixture
def app(store: MovieStore) -> FastAPI:
    return create_app(Settings(log_level="DEBUG", legacy_body_handling=False), store=store)


@pytest.fixture
def legacy_app(store: MovieStore) -> FastAPI:
    return create_app(Settings(log_level="DEBUG", legacy_body_handling=True), store=store)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)


@pytest.fixture
def legacy_client(legacy_app: FastAPI) -> TestClient:
    return TestClient(legacy_app)


@pytest.fixture
def new_movie() -> dict:
    return {"isbn": "999", "title": "New Movie", "director": {"firstname": "A", "lastname": "B"}}
