"""Shared pytest fixtures for all tests."""

import pytest


REFERENCE_PROFITS = [
    [15, 10, 0, -6, 17],
    [3, 14, 8, 9, 2],
    [1, 5, 14, 20, -3],
    [7, 19, 10, 2, 0],
]


@pytest.fixture
def reference_matrix():
    """Provide a fresh copy of the reference profit matrix."""
    return [list(row) for row in REFERENCE_PROFITS]


@pytest.fixture
def app():
    """Provide the Flask application in testing mode."""
    from app import app as flask_app

    flask_app.config.update(TESTING=True, HURWICZ_COEFFICIENT=0.8, STRICT_COEFFICIENT=False)
    yield flask_app
    flask_app.config.update(HURWICZ_COEFFICIENT=0.8, STRICT_COEFFICIENT=False)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def cli_runner(app):
    return app.test_cli_runner()
