"""Errors raised by the model layer. Callers translate these into user-facing messages."""


class DuplicateEntityError(ValueError):
    """An add, replace or reset would put two weakly-equal entities in one list."""

    def __init__(self, entity: object) -> None:
        super().__init__(f"Operation would result in duplicate entities: {entity!r}")
        self.entity = entity


class EntityNotFoundError(LookupError):
    """No stored entity is weakly equal to the one given."""

    def __init__(self, entity: object) -> None:
        super().__init__(f"Entity not found: {entity!r}")
        self.entity = entity


def require_non_null(**named: object) -> None:
    """Raise TypeError naming the first argument that is None."""
    for name, value in named.items():
        if value is None:
            raise TypeError(f"{name} must not be None.")
