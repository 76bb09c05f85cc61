"""Task SQLAlchemy ORM model.

A task is created once and then only read: there are no update or delete
paths, so the model carries no timestamps or soft-delete columns.
"""

from typing import Dict, Any

from sqlalchemy import Column, Integer, Text

from .base import Base


class Task(Base):
    """A tracked task with a store-generated id."""
    __tablename__ = 'task'

    id = Column(Integer, primary_key=True, autoincrement=True)
    description = Column(Text, nullable=False)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the row as returned by the API."""
        return {
            'id': self.id,
            'description': self.description,
        }
