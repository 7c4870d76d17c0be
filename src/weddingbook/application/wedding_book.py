"""WeddingBook: the sole owner and writer of the wedding list."""

from collections.abc import Iterable, Sequence

from weddingbook.application.ports import ReadOnlyWeddingBook
from weddingbook.application.unique_list import UniqueWeddingList
from weddingbook.domain import Wedding, require_non_null


class WeddingBook:
    """Wraps a UniqueWeddingList. Duplicates are weddings with the same name."""

    def __init__(self, to_copy: ReadOnlyWeddingBook | None = None) -> None:
        self._weddings = UniqueWeddingList()
        if to_copy is not None:
            self.reset_data(to_copy)

    def set_weddings(self, weddings: Iterable[Wedding]) -> None:
        self._weddings.reset_from(weddings)

    def reset_data(self, new_data: ReadOnlyWeddingBook) -> None:
        require_non_null(new_data=new_data)
        self.set_weddings(new_data.get_wedding_list())

    def has_wedding(self, wedding: Wedding) -> bool:
        return self._weddings.contains(wedding)

    def has_exact_wedding(self, wedding: Wedding) -> bool:
        return self._weddings.contains_exact(wedding)

    def add_wedding(self, wedding: Wedding) -> None:
        self._weddings.add(wedding)

    def set_wedding(self, target: Wedding, edited: Wedding) -> None:
        self._weddings.set_element(target, edited)

    def remove_wedding(self, key: Wedding) -> None:
        self._weddings.remove(key)

    def get_wedding_list(self) -> Sequence[Wedding]:
        return self._weddings.view()

    def __len__(self) -> int:
        return len(self._weddings)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WeddingBook):
            return NotImplemented
        return self._weddings == other._weddings

    def __repr__(self) -> str:
        return f"WeddingBook(weddings={len(self._weddings)})"
