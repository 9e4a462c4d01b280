"""Shared fixtures for API integration tests."""

from collections.abc import Callable

import pytest
from fastapi import FastAPI

from app.config import Settings
from app.main import create_app


@pytest.fixture
def make_app() -> Callable[..., FastAPI]:
    """Build a seeded application with instant progress animations.

    Keyword arguments override individual settings; any .env file is ignored.
    """

    def _make(**overrides) -> FastAPI:
        values = {
            "seed_sample_data": True,
            "upload_progress_min_seconds": 0,
            "upload_progress_max_seconds": 0,
            "upload_progress_tick_seconds": 0,
            "upload_progress_linger_seconds": 0,
            **overrides,
        }
        return create_app(Settings(_env_file=None, **values))

    return _make


@pytest.fixture
def app(make_app) -> FastAPI:
    """A fresh application with its own seeded store."""
    return make_app()
