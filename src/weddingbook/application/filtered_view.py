"""Predicate-driven live projection over a unique list's view."""

from collections.abc import Callable, Iterator, Sequence
from itertools import islice
from typing import TypeVar

from weddingbook.domain import require_non_null

T = TypeVar("T")


def _show_all(_entity: object) -> bool:
    return True


PREDICATE_SHOW_ALL = _show_all


class FilteredView(Sequence[T]):
    """
    Read-only sequence of the source elements that satisfy the current predicate.

    Nothing is cached: every read re-evaluates the predicate against the
    source, so mutations of the backing list are visible immediately.
    Swapping the predicate only replaces a reference.
    """

    def __init__(
        self,
        source: Sequence[T],
        predicate: Callable[[T], bool] | None = None,
    ) -> None:
        require_non_null(source=source)
        self._source = source
        self._predicate: Callable[[T], bool] = predicate or PREDICATE_SHOW_ALL

    @property
    def predicate(self) -> Callable[[T], bool]:
        return self._predicate

    def set_predicate(self, predicate: Callable[[T], bool]) -> None:
        require_non_null(predicate=predicate)
        self._predicate = predicate

    def _matching(self) -> list[T]:
        return [item for item in self._source if self._predicate(item)]

    def __getitem__(self, index):
        if isinstance(index, int) and index >= 0:
            # Stop at the requested match instead of building the whole list.
            for item in islice(self, index, None):
                return item
            raise IndexError("FilteredView index out of range")
        return self._matching()[index]

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __iter__(self) -> Iterator[T]:
        return (item for item in self._source if self._predicate(item))

    def __contains__(self, item: object) -> bool:
        return any(existing == item for existing in self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sequence):
            return NotImplemented
        return list(self) == list(other)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._matching()!r})"
