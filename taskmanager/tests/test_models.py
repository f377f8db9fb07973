"""Tests for task defaults and request schema validation."""

import pytest
from pydantic import ValidationError

from taskmanager.models import Task, TaskCreate, TaskStatus, TaskUpdate


def test_task_defaults():
    task = Task(title="Title")

    assert task.id is None
    assert task.description is None
    assert task.status == TaskStatus.PENDING
    assert task.favorite is False


def test_task_status_values():
    assert [s.value for s in TaskStatus] == ["PENDING", "IN_PROGRESS", "COMPLETED", "CANCELLED"]
    assert TaskStatus("IN_PROGRESS") is TaskStatus.IN_PROGRESS


def test_task_status_parse_is_strict():
    with pytest.raises(ValueError):
        TaskStatus("in_progress")


def test_create_schema_leaves_status_unset():
    candidate = TaskCreate(title="Title", description="Description")

    assert candidate.status is None
    assert candidate.favorite is False


@pytest.mark.parametrize("title", ["", "   ", "a" * 101])
def test_create_schema_rejects_bad_title(title):
    with pytest.raises(ValidationError):
        TaskCreate(title=title)


def test_create_schema_accepts_boundary_lengths():
    candidate = TaskCreate(title="a" * 100, description="d" * 500)

    assert len(candidate.title) == 100
    assert len(candidate.description) == 500


def test_create_schema_rejects_long_description():
    with pytest.raises(ValidationError):
        TaskCreate(title="Title", description="d" * 501)


def test_update_schema_tracks_provided_fields():
    patch = TaskUpdate.model_validate({"status": "COMPLETED", "description": ""})

    assert patch.model_dump(exclude_unset=True) == {
        "status": TaskStatus.COMPLETED,
        "description": "",
    }


@pytest.mark.parametrize("field", ["title", "status", "favorite"])
def test_update_schema_rejects_explicit_null(field):
    with pytest.raises(ValidationError):
        TaskUpdate.model_validate({field: None})


def test_update_schema_rejects_blank_title():
    with pytest.raises(ValidationError):
        TaskUpdate(title=" ")
