# taskmanager/deps.py
"""FastAPI dependency providers wiring session -> repository -> service."""

from fastapi import Depends
from sqlmodel import Session

from taskmanager.database import get_session
from taskmanager.repository import SQLModelTaskRepository, TaskRepository
from taskmanager.service import TaskService


def get_repository(session: Session = Depends(get_session)) -> TaskRepository:
    return SQLModelTaskRepository(session)


def get_task_service(repository: TaskRepository = Depends(get_repository)) -> TaskService:
    return TaskService(repository)
