"""Service layer for the task_api application.

This package contains the persistence operations behind the task routes.
"""

from .task_service import create_task, list_tasks

__all__ = ["create_task", "list_tasks"]
