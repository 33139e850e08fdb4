from datetime import date

import pytest
from flask_jwt_extended import create_access_token

from daybook import create_app
from daybook.domains.journal.models import JournalEntry, JournalEntryTag  # noqa: F401
from daybook.extensions import db


# ==================== Pytest Markers ====================
def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (no external dependencies)")
    config.addinivalue_line("markers", "integration: Integration tests (database, API)")


@pytest.fixture()
def app():
    """Per-test app on a fresh in-memory database."""
    app = create_app("testing")
    ctx = app.app_context()
    ctx.push()
    db.create_all()
    try:
        yield app
    finally:
        db.session.remove()
        db.drop_all()
        ctx.pop()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def user_id():
    return 1


@pytest.fixture()
def other_user_id():
    return 2


@pytest.fixture()
def auth_headers(app, user_id):
    token = create_access_token(identity=str(user_id))
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def today():
    return date.today()
