"""
Pytest configuration and shared fixtures.
"""

import base64

import pytest

from libraryportal import create_app
from libraryportal.config import TestConfig


@pytest.fixture
def app():
    """Fresh application on an in-memory SQLite database."""
    app = create_app(TestConfig)
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def ctx(app):
    """Application context for calling services directly."""
    with app.app_context():
        yield app


@pytest.fixture
def book_service(ctx):
    return ctx.extensions["libraryportal"]["book_service"]


@pytest.fixture
def borrower_service(ctx):
    return ctx.extensions["libraryportal"]["borrower_service"]


@pytest.fixture
def auth_headers():
    token = base64.b64encode(b"user:password").decode("ascii")
    return {"Authorization": f"Basic {token}"}


@pytest.fixture
def sample_book():
    return {"isbn": "111", "title": "A", "author": "X"}


@pytest.fixture
def sample_borrower():
    return {"name": "Jane Reader", "email": "jane@example.com"}
