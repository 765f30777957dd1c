"""Database-backed label store."""

from __future__ import annotations

import logging

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker

from todo_api.models.label import Label
from todo_api.models.todo_label import TodoLabel
from todo_api.schemas.ids import is_storable_id
from todo_api.schemas.label import CreateLabel, LabelRead
from todo_api.stores.errors import DuplicatedLabelError, NotFoundError
from todo_api.stores.interfaces import LabelStore
from todo_api.stores.transaction import transaction

logger = logging.getLogger(__name__)


class DatabaseLabelStore(LabelStore):
    """Label store over the ``labels`` table."""

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def create(self, payload: CreateLabel) -> LabelRead:
        with transaction(self._session_factory, "label_store.create") as db:
            existing = _find_by_name(db, payload.name)
            if existing is not None:
                raise DuplicatedLabelError(existing.id)
            label = Label(name=payload.name)
            db.add(label)
            try:
                db.flush()
            except IntegrityError:
                # Lost a race against a concurrent insert of the same name.
                db.rollback()
                existing = _find_by_name(db, payload.name)
                if existing is None:
                    raise
                raise DuplicatedLabelError(existing.id) from None
            created = LabelRead.model_validate(label)
        logger.debug("label_store.create label_id=%d", created.id)
        return created

    def all(self) -> list[LabelRead]:
        with transaction(self._session_factory, "label_store.all") as db:
            labels = db.scalars(select(Label).order_by(Label.id.asc())).all()
            return [LabelRead.model_validate(label) for label in labels]

    def delete(self, label_id: int) -> None:
        with transaction(self._session_factory, "label_store.delete") as db:
            label = db.scalar(select(Label).where(Label.id == label_id)) if is_storable_id(label_id) else None
            if label is None:
                raise NotFoundError(label_id)
            db.execute(delete(TodoLabel).where(TodoLabel.label_id == label_id))
            db.delete(label)
        logger.debug("label_store.delete label_id=%d", label_id)


def _find_by_name(db: Session, name: str) -> Label | None:
    return db.scalar(select(Label).where(Label.name == name))
