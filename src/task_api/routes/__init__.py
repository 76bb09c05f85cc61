"""API routes for the task_api application."""

from .task_routes import task_router

__all__ = ["task_router"]
