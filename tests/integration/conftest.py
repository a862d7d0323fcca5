"""Fixtures for tests that drive the assembled application.

Both domains are initialized by importing ``app``; each test leaves the
memory stores of both domains empty behind it.
"""

import pytest
from fastapi.testclient import TestClient
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def web_app():
    from app import app

    return app


@pytest.fixture()
def client(web_app):
    from menu.domain import menu
    from ordering.domain import ordering

    with TestClient(web_app) as test_client:
        yield test_client

    for domain in (menu, ordering):
        with DomainFixture(domain).domain_context():
            pass
