"""Task service layer for data persistence.

Each operation is a single statement against the shared connection pool.
Store errors are logged and re-raised unchanged; nothing is retried.
"""

import logging
from typing import Dict, Any, List

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..models.task import Task
from ..schemas.task import TaskCreate

logger = logging.getLogger(__name__)


def list_tasks(db: Session) -> List[Dict[str, Any]]:
    """Return every stored task ordered by ascending id.
    
    Args:
        db: SQLAlchemy database session
        
    Returns:
        List of task dictionaries, empty when the store has no rows
    """
    try:
        tasks = db.scalars(select(Task).order_by(Task.id.asc())).all()
    except Exception as e:
        logger.error(e, exc_info=True)
        raise

    logger.info(f"Retrieved {len(tasks)} tasks")
    return [task.to_dict() for task in tasks]


def create_task(payload: TaskCreate, db: Session) -> Dict[str, Any]:
    """Insert a task and return the stored row.
    
    Args:
        payload: TaskCreate Pydantic model with validated input data
        db: SQLAlchemy database session
        
    Returns:
        Dictionary representation of the created task, including its generated id
    """
    logger.info("Creating task")

    task = Task(description=payload.description)

    try:
        db.add(task)
        db.commit()
        db.refresh(task)
        logger.info(f"Successfully created task with ID: {task.id}")
        
        return task.to_dict()
        
    except Exception as e:
        logger.error(e, exc_info=True)
        db.rollback()
        raise
