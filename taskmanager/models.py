# taskmanager/models.py
"""Task model and request schemas for the task manager API."""

from enum import Enum
from typing import Optional

from pydantic import field_validator
from sqlmodel import Field, SQLModel

TITLE_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500


class TaskStatus(str, Enum):
    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


def _reject_blank(value: Optional[str]) -> Optional[str]:
    if value is not None and not value.strip():
        raise ValueError("Title is required")
    return value


class TaskBase(SQLModel):
    """Fields shared by the table model and the create schema."""
    title: str = Field(max_length=TITLE_MAX_LENGTH)
    description: Optional[str] = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)
    favorite: bool = Field(default=False)

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str) -> str:
        return _reject_blank(v)


class Task(TaskBase, table=True):
    """Task database table."""
    id: Optional[int] = Field(default=None, primary_key=True)
    status: TaskStatus = Field(default=TaskStatus.PENDING, index=True)


class TaskCreate(TaskBase):
    """Schema for creating a task. A missing status is filled in by the service."""
    status: Optional[TaskStatus] = None


class TaskUpdate(SQLModel):
    """Schema for a partial update.

    Only fields present in the request body are applied. ``description`` may
    be sent as null to clear it; the other fields must carry a value when
    they are sent at all.
    """
    title: Optional[str] = Field(default=None, max_length=TITLE_MAX_LENGTH)
    description: Optional[str] = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)
    status: Optional[TaskStatus] = None
    favorite: Optional[bool] = None

    @field_validator("title", "status", "favorite")
    @classmethod
    def not_null_when_sent(cls, v):
        # Defaults are not validated, so this only fires on an explicit null.
        if v is None:
            raise ValueError("Field may be omitted but not set to null")
        return v

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: Optional[str]) -> Optional[str]:
        return _reject_blank(v)
