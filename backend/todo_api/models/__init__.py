"""ORM models package exports."""

from todo_api.models.label import Label
from todo_api.models.todo import Todo
from todo_api.models.todo_label import TodoLabel

__all__ = [
    "Label",
    "Todo",
    "TodoLabel",
]
