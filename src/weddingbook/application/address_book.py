"""AddressBook: the sole owner and writer of the person list."""

from collections.abc import Iterable, Sequence

from weddingbook.application.ports import ReadOnlyAddressBook
from weddingbook.application.unique_list import UniquePersonList
from weddingbook.domain import Person, require_non_null


class AddressBook:
    """Wraps a UniquePersonList. Duplicates are persons that pass is_same_person."""

    def __init__(self, to_copy: ReadOnlyAddressBook | None = None) -> None:
        self._persons = UniquePersonList()
        if to_copy is not None:
            self.reset_data(to_copy)

    def set_persons(self, persons: Iterable[Person]) -> None:
        """Replace the contents of the list. ``persons`` must not contain duplicates."""
        self._persons.reset_from(persons)

    def reset_data(self, new_data: ReadOnlyAddressBook) -> None:
        require_non_null(new_data=new_data)
        self.set_persons(new_data.get_person_list())

    def has_person(self, person: Person) -> bool:
        """True if a person with the same identity as ``person`` exists."""
        return self._persons.contains(person)

    def has_exact_person(self, person: Person) -> bool:
        """True if a person equal to ``person`` in every field exists."""
        return self._persons.contains_exact(person)

    def add_person(self, person: Person) -> None:
        self._persons.add(person)

    def set_person(self, target: Person, edited: Person) -> None:
        """Replace ``target`` with ``edited``.

        ``edited`` must not share its identity with another person in the book.
        """
        self._persons.set_element(target, edited)

    def remove_person(self, key: Person) -> None:
        self._persons.remove(key)

    def get_person_list(self) -> Sequence[Person]:
        return self._persons.view()

    def __len__(self) -> int:
        return len(self._persons)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AddressBook):
            return NotImplemented
        return self._persons == other._persons

    def __repr__(self) -> str:
        return f"AddressBook(persons={len(self._persons)})"
