"""Pydantic schemas for request/response validation and serialization."""

from .task import TaskCreate, TaskResponse, parse_task_create

__all__ = ["TaskCreate", "TaskResponse", "parse_task_create"]
