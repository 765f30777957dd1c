"""Session-per-operation transaction scope for the database stores."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from todo_api.stores.errors import StoreError, UnexpectedStoreError

logger = logging.getLogger(__name__)


@contextmanager
def transaction(session_factory: sessionmaker[Session], operation: str) -> Iterator[Session]:
    """Yield a session committed on success and rolled back on any failure.

    Driver errors are re-raised as ``UnexpectedStoreError``; typed store errors
    propagate unchanged.
    """

    db = session_factory()
    try:
        yield db
        db.commit()
    except StoreError:
        db.rollback()
        raise
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("%s.failed", operation)
        raise UnexpectedStoreError(str(exc)) from exc
    finally:
        db.close()
