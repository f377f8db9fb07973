# taskmanager/main.py
"""FastAPI application for the task manager service."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from taskmanager.config import CORS_ORIGINS
from taskmanager.database import create_db_and_tables
from taskmanager.errors import TaskStoreError
from taskmanager.logging_config import configure_logging
from taskmanager.routes.tasks import router as tasks_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging and create database tables on startup."""
    configure_logging()
    create_db_and_tables()
    yield


app = FastAPI(title="Task Manager", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
    allow_headers=["Content-Type"],
)

app.include_router(tasks_router)


@app.exception_handler(TaskStoreError)
async def task_store_error_handler(request: Request, exc: TaskStoreError):
    logger.warning("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=503, content={"detail": "Task store unavailable"})


@app.get("/api/health")
def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "taskmanager-api"}
