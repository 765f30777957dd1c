"""SQLAlchemy metadata registry import for Alembic."""

from todo_api.models import Label, Todo, TodoLabel
from todo_api.models.base import Base

__all__ = ["Base", "Label", "Todo", "TodoLabel"]
