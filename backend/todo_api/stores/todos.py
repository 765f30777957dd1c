"""Database-backed todo store."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from sqlalchemy import delete, select
from sqlalchemy.orm import Session, sessionmaker

from todo_api.models.label import Label
from todo_api.models.todo import Todo
from todo_api.models.todo_label import TodoLabel
from todo_api.schemas.ids import is_storable_id
from todo_api.schemas.todo import CreateTodo, TodoEntity, UpdateTodo
from todo_api.stores.errors import NotFoundError, UnexpectedStoreError
from todo_api.stores.folding import TodoWithLabelRow, fold_to_entities
from todo_api.stores.interfaces import TodoStore
from todo_api.stores.transaction import transaction

logger = logging.getLogger(__name__)


class DatabaseTodoStore(TodoStore):
    """Todo store over the ``todos``/``todo_labels``/``labels`` tables.

    Every call runs in its own session and transaction, so a failure while
    rewriting associations leaves the todo exactly as it was.
    """

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def create(self, payload: CreateTodo) -> TodoEntity:
        with transaction(self._session_factory, "todo_store.create") as db:
            todo = Todo(text=payload.text, completed=False)
            db.add(todo)
            db.flush()
            _attach_labels(db, todo.id, payload.labels)
            entity = _find(db, todo.id)
        logger.debug("todo_store.create todo_id=%d label_count=%d", entity.id, len(entity.labels))
        return entity

    def find(self, todo_id: int) -> TodoEntity:
        with transaction(self._session_factory, "todo_store.find") as db:
            return _find(db, todo_id)

    def all(self) -> list[TodoEntity]:
        with transaction(self._session_factory, "todo_store.all") as db:
            return fold_to_entities(_select_rows(db))

    def update(self, todo_id: int, payload: UpdateTodo) -> TodoEntity:
        with transaction(self._session_factory, "todo_store.update") as db:
            todo = _load_todo(db, todo_id)
            if payload.text is not None:
                todo.text = payload.text
            if payload.completed is not None:
                todo.completed = payload.completed
            if payload.labels is not None:
                db.execute(delete(TodoLabel).where(TodoLabel.todo_id == todo_id))
                _attach_labels(db, todo_id, payload.labels)
            db.flush()
            entity = _find(db, todo_id)
        logger.debug(
            "todo_store.update todo_id=%d labels_replaced=%s",
            todo_id,
            payload.labels is not None,
        )
        return entity

    def delete(self, todo_id: int) -> None:
        with transaction(self._session_factory, "todo_store.delete") as db:
            todo = _load_todo(db, todo_id)
            db.execute(delete(TodoLabel).where(TodoLabel.todo_id == todo_id))
            db.delete(todo)
        logger.debug("todo_store.delete todo_id=%d", todo_id)


def _attach_labels(db: Session, todo_id: int, label_ids: Iterable[int]) -> None:
    # (todo_id, label_id) is the join-table key; keep the first occurrence only.
    unique_label_ids = list(dict.fromkeys(label_ids))
    unstorable = [label_id for label_id in unique_label_ids if not is_storable_id(label_id)]
    if unstorable:
        raise UnexpectedStoreError(f"unknown label ids: {unstorable}")
    db.add_all([TodoLabel(todo_id=todo_id, label_id=label_id) for label_id in unique_label_ids])
    db.flush()


def _load_todo(db: Session, todo_id: int) -> Todo:
    # Ids outside the column range cannot exist; the driver would reject them.
    todo = db.scalar(select(Todo).where(Todo.id == todo_id)) if is_storable_id(todo_id) else None
    if todo is None:
        raise NotFoundError(todo_id)
    return todo


def _find(db: Session, todo_id: int) -> TodoEntity:
    if not is_storable_id(todo_id):
        raise NotFoundError(todo_id)
    rows = _select_rows(db, todo_id)
    if not rows:
        raise NotFoundError(todo_id)
    return fold_to_entities(rows)[0]


def _select_rows(db: Session, todo_id: int | None = None) -> list[TodoWithLabelRow]:
    stmt = (
        select(
            Todo.id,
            Todo.text,
            Todo.completed,
            Label.id.label("label_id"),
            Label.name.label("label_name"),
        )
        .select_from(Todo)
        .outerjoin(TodoLabel, TodoLabel.todo_id == Todo.id)
        .outerjoin(Label, Label.id == TodoLabel.label_id)
        .order_by(Todo.id.asc(), Label.id.asc())
    )
    if todo_id is not None:
        stmt = stmt.where(Todo.id == todo_id)
    return [
        TodoWithLabelRow(
            id=row.id,
            text=row.text,
            completed=row.completed,
            label_id=row.label_id,
            label_name=row.label_name,
        )
        for row in db.execute(stmt)
    ]
