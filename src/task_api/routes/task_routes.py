"""FastAPI routes for task-related operations.

This module implements the two task endpoints: listing every task and
creating a task behind credential verification.
"""

import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from ..auth import require_token
from ..database import get_db
from ..schemas.task import TaskResponse, parse_task_create
from ..services.task_service import create_task, list_tasks

logger = logging.getLogger(__name__)

# Create API router
task_router = APIRouter()


@task_router.get("/", response_model=List[TaskResponse])
def list_tasks_endpoint(db: Session = Depends(get_db)) -> List[Dict[str, Any]]:
    """List every task ordered by ascending id."""
    return list_tasks(db)


@task_router.post(
    "/create",
    status_code=201,
    response_model=TaskResponse,
    dependencies=[Depends(require_token)],
)
def create_task_endpoint(body: Any = Body(None), db: Session = Depends(get_db)):
    """Create a task from ``{"task": {"description": ...}}``.
    
    Args:
        body: Parsed JSON request body
        db: Database session dependency
        
    Returns:
        The created task, including its generated id, with status 201.
        A body without a usable ``task.description`` is answered with 400
        and nothing is stored.
    """
    payload = parse_task_create(body)
    if payload is None:
        logger.warning("POST /create rejected: task description missing")
        return JSONResponse(status_code=400, content={"error": "Task is required"})

    return create_task(payload, db)
