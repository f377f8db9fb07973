# taskmanager/repository.py
"""Persistence boundary for tasks: a protocol and its SQLModel implementation."""

from __future__ import annotations

import logging
from typing import NoReturn, Optional, Protocol, runtime_checkable

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, col, select

from taskmanager.errors import TaskStoreError
from taskmanager.models import Task, TaskStatus

logger = logging.getLogger(__name__)


@runtime_checkable
class TaskRepository(Protocol):
    """Narrow task persistence interface the service depends on."""

    def find_all(self) -> list[Task]:
        """Return every stored task."""

    def find_by_id(self, task_id: int) -> Optional[Task]:
        """Return a task by id or None when missing."""

    def find_by_status(self, status: TaskStatus) -> list[Task]:
        """Return tasks with the given status."""

    def find_by_title_containing(self, fragment: str) -> list[Task]:
        """Return tasks whose title contains *fragment*, ignoring case."""

    def find_favorites(self) -> list[Task]:
        """Return tasks flagged as favorite."""

    def save(self, task: Task) -> Task:
        """Insert or update *task* and return the stored row."""

    def delete_by_id(self, task_id: int) -> None:
        """Remove a task; missing ids are ignored."""


class SQLModelTaskRepository:
    """TaskRepository backed by a SQLModel session.

    Any SQLAlchemy error rolls the session back and is re-raised as
    :class:`TaskStoreError`.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def find_all(self) -> list[Task]:
        return self._list(select(Task))

    def find_by_id(self, task_id: int) -> Optional[Task]:
        try:
            return self._session.get(Task, task_id)
        except SQLAlchemyError as exc:
            self._fail("find_by_id", exc)

    def find_by_status(self, status: TaskStatus) -> list[Task]:
        return self._list(select(Task).where(Task.status == status))

    def find_by_title_containing(self, fragment: str) -> list[Task]:
        statement = select(Task).where(col(Task.title).icontains(fragment, autoescape=True))
        return self._list(statement)

    def find_favorites(self) -> list[Task]:
        return self._list(select(Task).where(col(Task.favorite).is_(True)))

    def save(self, task: Task) -> Task:
        try:
            self._session.add(task)
            self._session.commit()
            self._session.refresh(task)
        except SQLAlchemyError as exc:
            self._fail("save", exc)
        return task

    def delete_by_id(self, task_id: int) -> None:
        try:
            task = self._session.get(Task, task_id)
            if task is None:
                return
            self._session.delete(task)
            self._session.commit()
        except SQLAlchemyError as exc:
            self._fail("delete_by_id", exc)

    # -- private helpers ------------------------------------------------------

    def _list(self, statement) -> list[Task]:
        try:
            return list(self._session.exec(statement.order_by(col(Task.id))).all())
        except SQLAlchemyError as exc:
            self._fail("query", exc)

    def _fail(self, operation: str, exc: SQLAlchemyError) -> NoReturn:
        logger.exception("Task store %s failed", operation)
        self._session.rollback()
        raise TaskStoreError(f"Task store {operation} failed", cause=exc) from exc
