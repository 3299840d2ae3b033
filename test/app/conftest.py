from collections.abc import Generator
from pathlib import Path

import pytest
from flask import Flask, g
from flask.testing import FlaskClient
from loguru import logger

from webbookmark.app import create_app


@pytest.fixture
def app(songs_csv: Path) -> Flask:  # noqa: ARG001
    flask_app = create_app()
    flask_app.config.update({"TESTING": True})  # pyright: ignore[reportUnknownMemberType]
    return flask_app


@pytest.fixture
def client(app: Flask) -> Generator[FlaskClient, None, None]:
    with app.app_context():
        # before_request() not called outside of a request
        g.logger = logger.bind()
        yield app.test_client()
