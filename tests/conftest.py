"""
Pytest configuration and fixtures for test suite.
"""

import os
import pytest

# Set test environment variables before importing the app
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["APP_ENV"] = "development"
os.environ["LOG_FORMAT"] = "console"
os.environ["LOG_LEVEL"] = "warning"

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from todo_api.api.dependencies import get_db
from todo_api.main import app
from todo_api.models.base import Base
from todo_api.models.database import create_tables
from todo_api.models.entities.todo import Todo
from todo_api.repositories.todo_repository import TodoRepository

# One shared in-memory connection so every session sees the same tables
engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session():
    """Fresh todos table per test."""
    create_tables(engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def repository(db_session):
    """Todo repository bound to the test session."""
    return TodoRepository(db_session)


@pytest.fixture
def client(db_session):
    """FastAPI test client wired to the test database."""
    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def stored_todos(db_session):
    """Three persisted todos, the first one completed."""
    todos = [
        Todo(title="Todo Item 1", completed=True, order=1),
        Todo(title="Todo Item 2", completed=False, order=2),
        Todo(title="Todo Item 3", completed=False, order=3),
    ]
    db_session.add_all(todos)
    db_session.commit()
    for todo in todos:
        db_session.refresh(todo)
    return todos
