"""
Shared pytest fixtures for the TaskHub test suite.

This module contains fixtures that are shared across all test modules.
Fixtures follow the Arrange-Act-Assert (AAA) pattern and ensure test
isolation by wiping the JSON collection files around every test.

Key Concepts Demonstrated:
- Fixture scopes (function, session)
- Fixture dependencies
- Test data factories
- Flat-file store setup/teardown
- Test client creation
"""

from __future__ import annotations

import os
from collections.abc import Callable

import pytest
from faker import Faker

# Set testing environment before importing app
os.environ["FLASK_ENV"] = "testing"
os.environ["TEST_JWT_SECRET_KEY"] = "test-jwt-secret-key-for-local-tests-123456"

from shared.test_helpers import auth_headers
from taskhub_app import Services, create_app
from taskhub_app.models import User
from taskhub_app.storage import JsonFileStore

# Initialize Faker for generating test data
fake = Faker()

DEFAULT_PASSWORD = "StrongPass123!"


# -----------------------------------------------------------------------------
# Application Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture(scope="session")
def public_dir(tmp_path_factory):
    """Provide a public directory holding a few front-end assets."""
    directory = tmp_path_factory.mktemp("public")
    (directory / "index.html").write_text("<h1>TaskHub</h1>", encoding="utf-8")
    (directory / "app.css").write_text("body { margin: 0; }", encoding="utf-8")
    (directory / "app.js").write_text("console.log('ready');", encoding="utf-8")
    (directory / "notes.xyz").write_text("plain notes", encoding="utf-8")
    (directory / "static").mkdir()
    (directory / "static" / "theme.css").write_text("h1 { color: teal; }", encoding="utf-8")
    return directory


@pytest.fixture(scope="session")
def app(tmp_path_factory, public_dir):
    """
    Create application instance for the test session.

    The same app is reused for all tests; collection files live in a
    temporary directory so no test touches development data.
    """
    data_dir = tmp_path_factory.mktemp("data")
    application = create_app(
        "testing",
        config_overrides={"DATA_DIR": str(data_dir), "PUBLIC_DIR": str(public_dir)},
    )
    yield application


@pytest.fixture
def services(app) -> Services:
    """Provide the store, credential service and repositories of the app."""
    return app.extensions["taskhub"]


@pytest.fixture(scope="function")
def data_store(services) -> JsonFileStore:
    """
    Provide the flat-file store with empty collections.

    Deletes every collection file before and after the test so each test
    starts from a pristine state.
    """
    store = services.store

    def _wipe() -> None:
        if store.data_dir.exists():
            for path in store.data_dir.glob("*.json"):
                path.unlink()

    _wipe()
    yield store
    _wipe()


@pytest.fixture(scope="function")
def client(app, data_store):
    """
    Create a test client for making HTTP requests.

    Depends on ``data_store`` so every HTTP test runs against empty
    collections.
    """
    with app.test_client() as test_client:
        yield test_client


# -----------------------------------------------------------------------------
# Test Data Factory Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def user_factory(services, data_store) -> Callable[..., User]:
    """
    Factory fixture that registers users directly through the repository.

    Example:
        def test_something(user_factory):
            user = user_factory(email="me@example.com")
            assert user.id
    """

    def _create_user(
        name: str | None = None,
        email: str | None = None,
        password: str = DEFAULT_PASSWORD,
    ) -> User:
        return services.users.create(
            name=name or fake.name(),
            email=email or fake.unique.email(),
            password=password,
            hash_password=services.credentials.hash_password,
        )

    return _create_user


@pytest.fixture
def registered_user(user_factory) -> User:
    """Create the single user most API tests act as."""
    return user_factory(name="Ann", email="a@x.com", password="pw12345")


@pytest.fixture
def auth_token(services, registered_user) -> str:
    """Issue a real token for ``registered_user``."""
    return services.credentials.issue_token(registered_user.claims())


@pytest.fixture
def api_headers(auth_token) -> dict[str, str]:
    """Authorization + JSON headers for ``registered_user``."""
    return auth_headers(auth_token)


@pytest.fixture
def valid_task_data() -> dict[str, str]:
    """Provide a fully-populated task payload."""
    return {
        "title": "Write report",
        "description": fake.paragraph(),
        "projectId": "project-1",
        "priority": "High",
        "status": "in-progress",
    }
