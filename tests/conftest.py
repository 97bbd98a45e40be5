"""
pytest configuration and fixtures for the todo backend test suite
"""

import pytest
from fastapi.testclient import TestClient

from app import create_app
from models.todo import Todo


@pytest.fixture
def app():
    """Fresh application with empty stores"""
    return create_app()


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def todo_store(app):
    return app.state.todo_store


@pytest.fixture
def registration_store(app):
    return app.state.registration_store


def make_todo(todo_id: int, name: str = "Todo", **overrides) -> Todo:
    fields = {
        "id": todo_id,
        "name": name,
        "description": f"{name} description",
        "notes": f"{name} notes",
        "completed": False,
        "synced": True,
    }
    fields.update(overrides)
    return Todo(**fields)


def todo_headers(todo_id="1", **overrides):
    headers = {
        "id": str(todo_id),
        "name": "Buy milk",
        "description": "Semi-skimmed",
        "notes": "Two litres",
        "completed": "false",
        "synced": "true",
    }
    headers.update(overrides)
    return {key: value for key, value in headers.items() if value is not None}
