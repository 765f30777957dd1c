"""Store interfaces shared by the database and in-memory backends."""

from abc import ABC, abstractmethod

from todo_api.schemas.label import CreateLabel, LabelRead
from todo_api.schemas.todo import CreateTodo, TodoEntity, UpdateTodo


class TodoStore(ABC):
    """CRUD over hydrated todos and their label associations."""

    @abstractmethod
    def create(self, payload: CreateTodo) -> TodoEntity:
        """Insert a todo with its label associations and return it hydrated."""

    @abstractmethod
    def find(self, todo_id: int) -> TodoEntity:
        """Return one todo or raise ``NotFoundError``."""

    @abstractmethod
    def all(self) -> list[TodoEntity]:
        """Return every todo ordered by ascending id."""

    @abstractmethod
    def update(self, todo_id: int, payload: UpdateTodo) -> TodoEntity:
        """Apply a partial update, replacing labels when the payload lists them."""

    @abstractmethod
    def delete(self, todo_id: int) -> None:
        """Remove a todo and its label associations."""


class LabelStore(ABC):
    """CRUD over labels with unique names."""

    @abstractmethod
    def create(self, payload: CreateLabel) -> LabelRead:
        """Insert a label or raise ``DuplicatedLabelError`` for a taken name."""

    @abstractmethod
    def all(self) -> list[LabelRead]:
        """Return every label ordered by ascending id."""

    @abstractmethod
    def delete(self, label_id: int) -> None:
        """Remove a label and detach it from every todo."""
