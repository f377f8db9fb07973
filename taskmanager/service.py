# taskmanager/service.py
"""Business rules between the HTTP routes and the task repository."""

import logging
from typing import Optional

from taskmanager.models import Task, TaskCreate, TaskStatus, TaskUpdate
from taskmanager.repository import TaskRepository

logger = logging.getLogger(__name__)


class TaskService:
    """Reads, creates and mutates tasks through a :class:`TaskRepository`.

    Identity-based mutations fetch the task first and return ``None`` (or
    ``False`` for deletes) when it does not exist; nothing is ever created
    implicitly. Store failures propagate as ``TaskStoreError``.
    """

    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def list_tasks(self) -> list[Task]:
        return self._repository.find_all()

    def get_task(self, task_id: int) -> Optional[Task]:
        return self._repository.find_by_id(task_id)

    def list_by_status(self, status: TaskStatus) -> list[Task]:
        return self._repository.find_by_status(status)

    def search_by_title(self, fragment: str) -> list[Task]:
        return self._repository.find_by_title_containing(fragment)

    def list_favorites(self) -> list[Task]:
        return self._repository.find_favorites()

    def create_task(self, candidate: TaskCreate) -> Task:
        """Persist a new task, defaulting an unset status to PENDING."""
        data = candidate.model_dump()
        if data.get("status") is None:
            data["status"] = TaskStatus.PENDING
        task = self._repository.save(Task.model_validate(data))
        logger.info("Created task %s with status %s", task.id, task.status.value)
        return task

    def update_task(self, task_id: int, patch: TaskUpdate) -> Optional[Task]:
        """Merge the fields the patch explicitly sets into an existing task."""
        task = self._repository.find_by_id(task_id)
        if task is None:
            logger.info("Update skipped, task %s not found", task_id)
            return None

        changes = patch.model_dump(exclude_unset=True)
        for field, value in changes.items():
            setattr(task, field, value)
        task = self._repository.save(task)
        logger.info("Updated task %s fields=%s", task_id, sorted(changes))
        return task

    def toggle_favorite(self, task_id: int) -> Optional[Task]:
        task = self._repository.find_by_id(task_id)
        if task is None:
            logger.info("Favorite toggle skipped, task %s not found", task_id)
            return None

        task.favorite = not task.favorite
        task = self._repository.save(task)
        logger.info("Task %s favorite=%s", task_id, task.favorite)
        return task

    def delete_task(self, task_id: int) -> bool:
        """Delete a task. Returns False when there was nothing to delete."""
        if self._repository.find_by_id(task_id) is None:
            logger.info("Delete skipped, task %s not found", task_id)
            return False

        self._repository.delete_by_id(task_id)
        logger.info("Deleted task %s", task_id)
        return True
