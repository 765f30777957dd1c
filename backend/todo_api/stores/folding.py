"""Folding of flat todo-label join rows into hydrated todos, and back.

A left join of ``todos`` with ``todo_labels`` and ``labels`` yields one row per
attached label, or a single row with null label columns for a todo without
labels. ``fold_to_entities`` turns such a result set into one ``TodoEntity``
per todo id; ``flatten_entity`` produces the rows that join would return for
an entity.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass

from todo_api.schemas.label import LabelRead
from todo_api.schemas.todo import TodoEntity


@dataclass(slots=True)
class TodoWithLabelRow:
    """One (todo, label) pair from the outer join."""

    id: int
    text: str
    completed: bool
    label_id: int | None = None
    label_name: str | None = None


def fold_to_entities(rows: Iterable[TodoWithLabelRow]) -> list[TodoEntity]:
    """Group rows by todo id into entities ordered by ascending id.

    Labels keep the row order of their group. Rows missing either label column
    contribute no label.
    """

    grouped: dict[int, list[TodoWithLabelRow]] = defaultdict(list)
    for row in rows:
        grouped[row.id].append(row)

    entities: list[TodoEntity] = []
    for todo_id in sorted(grouped):
        group = grouped[todo_id]
        head = group[0]
        labels = [
            LabelRead(id=row.label_id, name=row.label_name)
            for row in group
            if row.label_id is not None and row.label_name is not None
        ]
        entities.append(TodoEntity(id=head.id, text=head.text, completed=head.completed, labels=labels))
    return entities


def flatten_entity(entity: TodoEntity) -> list[TodoWithLabelRow]:
    """Return the join rows describing ``entity``.

    A label-less entity flattens to one row with null label columns, the same
    shape the outer join returns for it.
    """

    if not entity.labels:
        return [TodoWithLabelRow(id=entity.id, text=entity.text, completed=entity.completed)]
    return [
        TodoWithLabelRow(
            id=entity.id,
            text=entity.text,
            completed=entity.completed,
            label_id=label.id,
            label_name=label.name,
        )
        for label in entity.labels
    ]
