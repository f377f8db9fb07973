# taskmanager/routes/tasks.py
"""CRUD, filter, search and favorite endpoints for tasks."""

from fastapi import APIRouter, Depends, HTTPException, Query

from taskmanager.deps import get_task_service
from taskmanager.models import Task, TaskCreate, TaskStatus, TaskUpdate
from taskmanager.service import TaskService

router = APIRouter(prefix="/api/tasks", tags=["tasks"])

TASK_NOT_FOUND = "Task not found"


@router.get("/")
def list_tasks(service: TaskService = Depends(get_task_service)) -> list[Task]:
    """List all tasks."""
    return service.list_tasks()


@router.get("/favorites")
def list_favorite_tasks(service: TaskService = Depends(get_task_service)) -> list[Task]:
    """List tasks marked as favorite."""
    return service.list_favorites()


@router.get("/search")
def search_tasks(
    title: str = Query(...),
    service: TaskService = Depends(get_task_service),
) -> list[Task]:
    """Case-insensitive substring search on task titles."""
    return service.search_by_title(title)


@router.get("/status/{status}")
def list_tasks_by_status(
    status: TaskStatus, service: TaskService = Depends(get_task_service)
) -> list[Task]:
    """List tasks with the given status. Unknown status tokens are rejected with 422."""
    return service.list_by_status(status)


@router.get("/{task_id}")
def get_task(task_id: int, service: TaskService = Depends(get_task_service)) -> Task:
    """Get a single task by ID."""
    task = service.get_task(task_id)
    if task is None:
        raise HTTPException(status_code=404, detail=TASK_NOT_FOUND)
    return task


@router.post("/", status_code=201)
def create_task(body: TaskCreate, service: TaskService = Depends(get_task_service)) -> Task:
    """Create a new task."""
    return service.create_task(body)


@router.put("/{task_id}")
def update_task(
    task_id: int, body: TaskUpdate, service: TaskService = Depends(get_task_service)
) -> Task:
    """Update an existing task. Only provided fields are changed."""
    task = service.update_task(task_id, body)
    if task is None:
        raise HTTPException(status_code=404, detail=TASK_NOT_FOUND)
    return task


@router.patch("/{task_id}/favorite")
def toggle_favorite(task_id: int, service: TaskService = Depends(get_task_service)) -> Task:
    """Flip the favorite flag of a task."""
    task = service.toggle_favorite(task_id)
    if task is None:
        raise HTTPException(status_code=404, detail=TASK_NOT_FOUND)
    return task


@router.delete("/{task_id}", status_code=204)
def delete_task(task_id: int, service: TaskService = Depends(get_task_service)) -> None:
    """Delete a task by ID."""
    if not service.delete_task(task_id):
        raise HTTPException(status_code=404, detail=TASK_NOT_FOUND)
