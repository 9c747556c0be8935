from __future__ import annotations

from collections.abc import Iterator

import pytest
from flask import Flask
from flask.testing import FlaskClient

from todo_backend.app import create_app
from todo_backend.infrastructure.db import Database
from todo_backend.shared.config import AppConfig, DatabaseConfig

TEST_SECRET = "test-secret-0123456789-abcdefghijklmnop"


@pytest.fixture()
def config(tmp_path) -> AppConfig:
    return AppConfig(
        jwt_secret=TEST_SECRET,
        timezone="Asia/Tokyo",
        database=DatabaseConfig(url=f"sqlite:///{tmp_path / 'todo.db'}"),
    )


@pytest.fixture()
def database(config: AppConfig) -> Iterator[Database]:
    db = Database.from_config(config.database)
    db.init_schema()
    yield db
    db.dispose()


@pytest.fixture()
def app(config: AppConfig, database: Database) -> Flask:
    return create_app(config, database)


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    return app.test_client()


def signup_and_login(
    client: FlaskClient,
    email: str = "alice@gmail.com",
    password: str = "secret123",
    name: str = "Alice",
) -> dict[str, str]:
    signup = client.post(
        "/api/auth/signup", json={"name": name, "email": email, "password": password}
    )
    assert signup.status_code == 201, signup.get_json()
    login = client.post("/api/auth/login", json={"email": email, "password": password})
    assert login.status_code == 200, login.get_json()
    return {"Authorization": f"Bearer {login.get_json()['token']}"}


@pytest.fixture()
def auth_headers(client: FlaskClient) -> dict[str, str]:
    return signup_and_login(client)


@pytest.fixture()
def login_as(client: FlaskClient):
    def _login(email: str, name: str = "User") -> dict[str, str]:
        return signup_and_login(client, email=email, name=name)

    return _login
