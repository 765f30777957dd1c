"""In-process stores guarded by one lock each.

They honour the same contract as the database stores and back the test suite
and the ``memory`` store backend.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from threading import Lock

from todo_api.schemas.label import CreateLabel, LabelRead
from todo_api.schemas.todo import CreateTodo, TodoEntity, UpdateTodo
from todo_api.stores.errors import DuplicatedLabelError, NotFoundError, UnexpectedStoreError
from todo_api.stores.folding import TodoWithLabelRow, fold_to_entities
from todo_api.stores.interfaces import LabelStore, TodoStore

logger = logging.getLogger(__name__)


class InMemoryLabelStore(LabelStore):
    """Label store backed by a dict keyed by label id."""

    def __init__(self) -> None:
        self._labels: dict[int, LabelRead] = {}
        self._next_id = 1
        self._lock = Lock()

    def create(self, payload: CreateLabel) -> LabelRead:
        with self._lock:
            for label in self._labels.values():
                if label.name == payload.name:
                    raise DuplicatedLabelError(label.id)
            label = LabelRead(id=self._next_id, name=payload.name)
            self._labels[label.id] = label
            self._next_id += 1
        logger.debug("label_store.create label_id=%d", label.id)
        return label

    def all(self) -> list[LabelRead]:
        with self._lock:
            return [self._labels[label_id] for label_id in sorted(self._labels)]

    def delete(self, label_id: int) -> None:
        with self._lock:
            if label_id not in self._labels:
                raise NotFoundError(label_id)
            del self._labels[label_id]
        logger.debug("label_store.delete label_id=%d", label_id)

    def find_many(self, label_ids: Iterable[int]) -> dict[int, LabelRead]:
        """Return the existing labels among ``label_ids``, keyed by id."""

        with self._lock:
            return {label_id: self._labels[label_id] for label_id in label_ids if label_id in self._labels}


@dataclass(slots=True)
class _StoredTodo:
    id: int
    text: str
    completed: bool = False
    label_ids: list[int] = field(default_factory=list)


class InMemoryTodoStore(TodoStore):
    """Todo store keeping flat todos plus the label ids attached to each.

    Label names are resolved through ``label_store`` on every read; ids of
    deleted labels drop out of the hydrated todo and are pruned from storage.
    """

    def __init__(self, label_store: InMemoryLabelStore) -> None:
        self._label_store = label_store
        self._todos: dict[int, _StoredTodo] = {}
        self._next_id = 1
        self._lock = Lock()

    def create(self, payload: CreateTodo) -> TodoEntity:
        with self._lock:
            label_ids = self._checked_label_ids(payload.labels)
            stored = _StoredTodo(id=self._next_id, text=payload.text, label_ids=label_ids)
            self._todos[stored.id] = stored
            self._next_id += 1
            entity = self._hydrate(stored)
        logger.debug("todo_store.create todo_id=%d label_count=%d", entity.id, len(entity.labels))
        return entity

    def find(self, todo_id: int) -> TodoEntity:
        with self._lock:
            return self._hydrate(self._get(todo_id))

    def all(self) -> list[TodoEntity]:
        with self._lock:
            return [self._hydrate(self._todos[todo_id]) for todo_id in sorted(self._todos)]

    def update(self, todo_id: int, payload: UpdateTodo) -> TodoEntity:
        with self._lock:
            current = self._get(todo_id)
            label_ids = current.label_ids
            if payload.labels is not None:
                label_ids = self._checked_label_ids(payload.labels)
            updated = replace(
                current,
                text=payload.text if payload.text is not None else current.text,
                completed=payload.completed if payload.completed is not None else current.completed,
                label_ids=label_ids,
            )
            self._todos[todo_id] = updated
            entity = self._hydrate(updated)
        logger.debug(
            "todo_store.update todo_id=%d labels_replaced=%s",
            todo_id,
            payload.labels is not None,
        )
        return entity

    def delete(self, todo_id: int) -> None:
        with self._lock:
            self._get(todo_id)
            del self._todos[todo_id]
        logger.debug("todo_store.delete todo_id=%d", todo_id)

    def _get(self, todo_id: int) -> _StoredTodo:
        stored = self._todos.get(todo_id)
        if stored is None:
            raise NotFoundError(todo_id)
        return stored

    def _checked_label_ids(self, label_ids: Iterable[int]) -> list[int]:
        unique_label_ids = list(dict.fromkeys(label_ids))
        known = self._label_store.find_many(unique_label_ids)
        missing = [label_id for label_id in unique_label_ids if label_id not in known]
        if missing:
            raise UnexpectedStoreError(f"unknown label ids: {missing}")
        return unique_label_ids

    def _hydrate(self, stored: _StoredTodo) -> TodoEntity:
        labels = self._label_store.find_many(stored.label_ids)
        if len(labels) != len(stored.label_ids):
            # Drop ids of labels deleted since the last read.
            stored.label_ids = [label_id for label_id in stored.label_ids if label_id in labels]
        rows = [
            TodoWithLabelRow(
                id=stored.id,
                text=stored.text,
                completed=stored.completed,
                label_id=label_id,
                label_name=labels[label_id].name,
            )
            for label_id in sorted(labels)
        ]
        if not rows:
            rows = [TodoWithLabelRow(id=stored.id, text=stored.text, completed=stored.completed)]
        return fold_to_entities(rows)[0]
