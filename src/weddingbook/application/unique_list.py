"""Ordered collections that reject weakly-equal duplicates."""

from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Generic, TypeVar

from weddingbook.domain import (
    DuplicateEntityError,
    EntityNotFoundError,
    Person,
    Wedding,
    require_non_null,
)

T = TypeVar("T")


class ReadOnlyListView(Sequence[T]):
    """Live, read-only window onto a list owned by someone else."""

    def __init__(self, backing: list[T]) -> None:
        self._backing = backing

    def __getitem__(self, index):
        return self._backing[index]

    def __len__(self) -> int:
        return len(self._backing)

    def __iter__(self) -> Iterator[T]:
        return iter(self._backing)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sequence):
            return NotImplemented
        return list(self) == list(other)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._backing!r})"


class UniqueEntityList(Generic[T]):
    """
    Insertion-ordered list in which no two elements are the same entity.

    Sameness is decided by ``is_same`` (weak equality), not by ``==``: an
    edited entity whose non-identifying fields changed still counts as a
    duplicate of the original. Failed operations leave the list unchanged.
    """

    def __init__(self, is_same: Callable[[T, T], bool]) -> None:
        self._is_same = is_same
        self._items: list[T] = []
        self._view = ReadOnlyListView(self._items)

    def contains(self, item: T) -> bool:
        """True if a stored element is weakly equal to ``item``."""
        require_non_null(item=item)
        return any(self._is_same(existing, item) for existing in self._items)

    def contains_exact(self, item: T) -> bool:
        """True if a stored element is equal to ``item`` in every field."""
        require_non_null(item=item)
        return any(existing == item for existing in self._items)

    def add(self, item: T) -> None:
        require_non_null(item=item)
        if self.contains(item):
            raise DuplicateEntityError(item)
        self._items.append(item)

    def set_element(self, target: T, replacement: T) -> None:
        """Replace ``target`` in place with ``replacement``.

        ``replacement`` may be weakly equal to ``target`` itself, but not
        to any other element.
        """
        require_non_null(target=target, replacement=replacement)
        index = self._index_of(target)
        if index is None:
            raise EntityNotFoundError(target)
        for i, existing in enumerate(self._items):
            if i != index and self._is_same(existing, replacement):
                raise DuplicateEntityError(replacement)
        self._items[index] = replacement

    def remove(self, item: T) -> None:
        require_non_null(item=item)
        index = self._index_of(item)
        if index is None:
            raise EntityNotFoundError(item)
        del self._items[index]

    def reset_from(self, items: Iterable[T]) -> None:
        """Replace every element with ``items``, all or nothing."""
        require_non_null(items=items)
        candidates = list(items)
        for i, item in enumerate(candidates):
            require_non_null(item=item)
            for other in candidates[i + 1 :]:
                if self._is_same(item, other):
                    raise DuplicateEntityError(other)
        # Slice assignment keeps outstanding views pointed at the same list.
        self._items[:] = candidates

    def view(self) -> ReadOnlyListView[T]:
        return self._view

    def _index_of(self, item: T) -> int | None:
        for i, existing in enumerate(self._items):
            if self._is_same(existing, item):
                return i
        return None

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UniqueEntityList):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"


class UniquePersonList(UniqueEntityList[Person]):
    """Persons, unique by Person.is_same_person."""

    def __init__(self) -> None:
        super().__init__(Person.is_same_person)


class UniqueWeddingList(UniqueEntityList[Wedding]):
    """Weddings, unique by Wedding.is_same_wedding (name)."""

    def __init__(self) -> None:
        super().__init__(Wedding.is_same_wedding)
