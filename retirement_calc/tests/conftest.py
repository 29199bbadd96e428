from __future__ import annotations

import pytest
from flask import Flask
from flask.testing import FlaskClient

from retirement_calc.app import create_app
from retirement_calc.config import Settings


@pytest.fixture()
def app() -> Flask:
    return create_app(Settings(APP_ENV="test", LOG_LEVEL="WARNING"))


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    with app.test_client() as test_client:
        yield test_client
