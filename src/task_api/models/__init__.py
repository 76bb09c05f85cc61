"""SQLAlchemy ORM models for the task_api application.

This package contains all database models and the base declarative class.
"""

from .base import Base
from .task import Task

__all__ = ["Base", "Task"]
