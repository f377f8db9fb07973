"""Shared fixtures: in-memory database, API client and a fake repository."""

from typing import Optional

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel, create_engine
from sqlmodel.pool import StaticPool

from taskmanager.database import get_session, register_sqlite_functions
from taskmanager.main import app
from taskmanager.models import Task, TaskStatus


@pytest.fixture(name="session")
def session_fixture():
    """Create a fresh in-memory database for each test."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    register_sqlite_functions(engine)
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session


@pytest.fixture(name="client")
def client_fixture(session: Session):
    """Create a test client with overridden database session."""
    def get_session_override():
        yield session

    app.dependency_overrides[get_session] = get_session_override
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


class InMemoryTaskRepository:
    """Dict-backed repository that records every save and delete call."""

    def __init__(self) -> None:
        self.tasks: dict[int, Task] = {}
        self.saved: list[Task] = []
        self.deleted: list[int] = []
        self._next_id = 1

    def add(self, **fields) -> Task:
        task = Task(id=self._next_id, **fields)
        self.tasks[task.id] = task
        self._next_id += 1
        return task

    def find_all(self) -> list[Task]:
        return list(self.tasks.values())

    def find_by_id(self, task_id: int) -> Optional[Task]:
        return self.tasks.get(task_id)

    def find_by_status(self, status: TaskStatus) -> list[Task]:
        return [t for t in self.tasks.values() if t.status == status]

    def find_by_title_containing(self, fragment: str) -> list[Task]:
        needle = fragment.lower()
        return [t for t in self.tasks.values() if needle in t.title.lower()]

    def find_favorites(self) -> list[Task]:
        return [t for t in self.tasks.values() if t.favorite]

    def save(self, task: Task) -> Task:
        if task.id is None:
            task.id = self._next_id
            self._next_id += 1
        self.tasks[task.id] = task
        self.saved.append(task)
        return task

    def delete_by_id(self, task_id: int) -> None:
        self.deleted.append(task_id)
        self.tasks.pop(task_id, None)


@pytest.fixture
def repository() -> InMemoryTaskRepository:
    return InMemoryTaskRepository()
