"""Pydantic schemas for task-related operations."""

from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator


class TaskCreate(BaseModel):
    """Input schema for creating a new task."""
    description: str = Field(..., description="Task description (required)")

    @field_validator('description')
    @classmethod
    def validate_description(cls, v: str) -> str:
        """Validate that description is non-empty."""
        if not v:
            raise ValueError("Description cannot be empty")
        return v


class TaskResponse(BaseModel):
    """Output schema for a stored task."""
    id: int = Field(..., description="Store-generated task identifier")
    description: str = Field(..., description="Task description")

    model_config = {
        "json_schema_extra": {
            "example": {
                "id": 1,
                "description": "Write the release notes"
            }
        }
    }


def parse_task_create(body: Any) -> Optional[TaskCreate]:
    """Extract the ``task`` object from a create request body.

    Returns None when the body has no ``task`` object or its ``description``
    is missing, falsy or not a string. The description is stored verbatim.
    """
    if not isinstance(body, dict):
        return None
    task = body.get("task")
    if not isinstance(task, dict):
        return None
    description = task.get("description")
    if not description or not isinstance(description, str):
        return None
    return TaskCreate(description=description)
