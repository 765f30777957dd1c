"""Typed failures surfaced by todo and label stores."""


class StoreError(Exception):
    """Base class for store failures."""


class NotFoundError(StoreError):
    """Requested record does not exist."""

    def __init__(self, entity_id: int) -> None:
        super().__init__(f"Not found id: {entity_id}")
        self.entity_id = entity_id


class DuplicatedLabelError(StoreError):
    """A label with the same name already exists."""

    def __init__(self, label_id: int) -> None:
        super().__init__(f"Duplicated label id: {label_id}")
        self.label_id = label_id


class UnexpectedStoreError(StoreError):
    """Any other backend failure."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Unexpected error: {message}")
        self.message = message
