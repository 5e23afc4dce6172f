from __future__ import annotations

from datetime import date

import pytest

from src.office_tracker.office_tracker.container import build_container
from src.office_tracker.office_tracker.main import create_app


@pytest.fixture
def fixed_today():
    return date(2025, 7, 15)


@pytest.fixture
def container():
    return build_container(fiscal_policy="calendar")


@pytest.fixture
def app(container):
    return create_app("config.testing", container=container)


@pytest.fixture
def client(app):
    return app.test_client()
