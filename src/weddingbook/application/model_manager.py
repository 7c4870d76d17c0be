"""In-memory model: address book, wedding book, prefs, and the filtered views over them.

Tag-wedding linkage: a person whose tag text equals a wedding's name is a
participant of that wedding. Whenever a person is replaced or removed, every
participant set is brought back in line so that no wedding keeps a
superseded Person value.
"""

import logging
from collections.abc import Callable, Iterable, Sequence
from pathlib import Path

from weddingbook.application.address_book import AddressBook
from weddingbook.application.filtered_view import PREDICATE_SHOW_ALL, FilteredView
from weddingbook.application.ports import (
    ReadOnlyAddressBook,
    ReadOnlyUserPrefs,
    ReadOnlyWeddingBook,
)
from weddingbook.application.user_prefs import GuiSettings, UserPrefs
from weddingbook.application.wedding_book import WeddingBook
from weddingbook.domain import (
    EntityNotFoundError,
    Person,
    Tag,
    Wedding,
    require_non_null,
)

logger = logging.getLogger(__name__)

PREDICATE_SHOW_ALL_PERSONS: Callable[[Person], bool] = PREDICATE_SHOW_ALL
PREDICATE_SHOW_ALL_WEDDINGS: Callable[[Wedding], bool] = PREDICATE_SHOW_ALL


class ModelManager:
    """Single-writer, in-memory model. Not safe for concurrent mutation."""

    def __init__(
        self,
        address_book: ReadOnlyAddressBook | None = None,
        user_prefs: ReadOnlyUserPrefs | None = None,
        wedding_book: ReadOnlyWeddingBook | None = None,
    ) -> None:
        logger.debug(
            "Initializing with address book %r, wedding book %r and user prefs %r",
            address_book,
            wedding_book,
            user_prefs,
        )
        self._address_book = AddressBook(address_book)
        self._wedding_book = WeddingBook(wedding_book)
        self._user_prefs = UserPrefs(user_prefs)
        self._filtered_persons: FilteredView[Person] = FilteredView(
            self._address_book.get_person_list()
        )
        self._filtered_weddings: FilteredView[Wedding] = FilteredView(
            self._wedding_book.get_wedding_list()
        )

    # --- UserPrefs ---

    def set_user_prefs(self, user_prefs: ReadOnlyUserPrefs) -> None:
        require_non_null(user_prefs=user_prefs)
        self._user_prefs.reset_data(user_prefs)

    def get_user_prefs(self) -> ReadOnlyUserPrefs:
        return self._user_prefs

    def get_gui_settings(self) -> GuiSettings:
        return self._user_prefs.get_gui_settings()

    def set_gui_settings(self, gui_settings: GuiSettings) -> None:
        self._user_prefs.set_gui_settings(gui_settings)

    def get_address_book_file_path(self) -> Path:
        return self._user_prefs.get_address_book_file_path()

    def set_address_book_file_path(self, path: Path) -> None:
        self._user_prefs.set_address_book_file_path(path)

    def get_wedding_book_file_path(self) -> Path:
        return self._user_prefs.get_wedding_book_file_path()

    def set_wedding_book_file_path(self, path: Path) -> None:
        self._user_prefs.set_wedding_book_file_path(path)

    # --- AddressBook ---

    def set_address_book(self, address_book: ReadOnlyAddressBook) -> None:
        self._address_book.reset_data(address_book)

    def get_address_book(self) -> ReadOnlyAddressBook:
        return self._address_book

    def has_person(self, person: Person) -> bool:
        require_non_null(person=person)
        return self._address_book.has_person(person)

    def has_exact_person(self, person: Person) -> bool:
        """True only for a stored person equal to ``person`` in every field."""
        require_non_null(person=person)
        return self._address_book.has_exact_person(person)

    def add_person(self, person: Person) -> None:
        self._address_book.add_person(person)
        self.update_filtered_person_list(PREDICATE_SHOW_ALL_PERSONS)

    def set_person(self, target: Person, edited: Person) -> None:
        """Replace ``target`` in the address book only. See edit_person for the linked update."""
        require_non_null(target=target, edited=edited)
        self._address_book.set_person(target, edited)

    def delete_person(self, target: Person) -> None:
        """Remove ``target`` from the address book and from every wedding it attends."""
        require_non_null(target=target)
        self._address_book.remove_person(target)
        for wedding in self._wedding_book.get_wedding_list():
            if wedding.discard_participant(target):
                logger.debug("Removed deleted person %s from wedding %s", target.name, wedding.name)

    def edit_person(self, target: Person, edited: Person) -> None:
        """Replace ``target`` with ``edited`` and update wedding memberships.

        Memberships coming from tags that ``edited`` no longer carries are
        dropped. Remaining memberships are moved to ``edited``.
        """
        require_non_null(target=target, edited=edited)
        if not self._address_book.has_person(target):
            raise EntityNotFoundError(target)
        self._address_book.set_person(target, edited)
        self.sync_person_tag_removal(target, target.tags - edited.tags)
        self.sync_person_edit(target, edited)

    def get_filtered_person_list(self) -> Sequence[Person]:
        """Live, read-only view of the persons matching the current predicate."""
        return self._filtered_persons

    def update_filtered_person_list(self, predicate: Callable[[Person], bool]) -> None:
        """Install ``predicate`` on the person view. Keyword predicates are plain callables too."""
        require_non_null(predicate=predicate)
        self._filtered_persons.set_predicate(predicate)

    # --- WeddingBook ---

    def set_wedding_book(self, wedding_book: ReadOnlyWeddingBook) -> None:
        self._wedding_book.reset_data(wedding_book)

    def get_wedding_book(self) -> ReadOnlyWeddingBook:
        return self._wedding_book

    def has_wedding(self, wedding: Wedding) -> bool:
        require_non_null(wedding=wedding)
        return self._wedding_book.has_wedding(wedding)

    def has_exact_wedding(self, wedding: Wedding) -> bool:
        require_non_null(wedding=wedding)
        return self._wedding_book.has_exact_wedding(wedding)

    def add_wedding(self, wedding: Wedding) -> None:
        self._wedding_book.add_wedding(wedding)
        self.update_filtered_wedding_list(PREDICATE_SHOW_ALL_WEDDINGS)

    def set_wedding(self, target: Wedding, edited: Wedding) -> None:
        require_non_null(target=target, edited=edited)
        self._wedding_book.set_wedding(target, edited)

    def delete_wedding(self, target: Wedding) -> None:
        require_non_null(target=target)
        self._wedding_book.remove_wedding(target)

    def get_filtered_wedding_list(self) -> Sequence[Wedding]:
        return self._filtered_weddings

    def update_filtered_wedding_list(self, predicate: Callable[[Wedding], bool]) -> None:
        require_non_null(predicate=predicate)
        self._filtered_weddings.set_predicate(predicate)

    # --- Tag-wedding linkage ---

    def get_weddings_for_tags(self, tags: Iterable[Tag]) -> list[Wedding]:
        """Return the weddings named by ``tags``, once per matching tag.

        A wedding matched by two tags appears twice; callers only touch
        participant sets, so repeats are harmless.

        Searches the whole wedding list, not the filtered wedding view:
        weddings hidden by a filter still get their participants updated.
        sync_person_edit walks the full list too.
        """
        require_non_null(tags=tags)
        tag_names = [tag.tag_name for tag in tags]
        matches = []
        for wedding in self._wedding_book.get_wedding_list():
            for tag_name in tag_names:
                if wedding.name == tag_name:
                    matches.append(wedding)
        return matches

    def sync_person_edit(self, old: Person, new: Person) -> None:
        """Swap ``old`` for ``new`` in every participant set that holds it."""
        require_non_null(old=old, new=new)
        for wedding in self._wedding_book.get_wedding_list():
            if wedding.discard_participant(old):
                wedding.participants.add(new)
                logger.debug("Updated participant %s in wedding %s", new.name, wedding.name)

    def sync_person_tag_removal(self, person: Person, removed_tags: Iterable[Tag]) -> None:
        """Drop ``person`` from the weddings named by ``removed_tags``.

        Memberships that come from tags not listed are left alone.
        """
        require_non_null(person=person, removed_tags=removed_tags)
        for wedding in self.get_weddings_for_tags(removed_tags):
            if wedding.discard_participant(person):
                logger.debug("Removed %s from wedding %s", person.name, wedding.name)

    def clear_all_tags(self, person: Person) -> Person:
        """Strip every tag from ``person`` and leave all weddings those tags linked to.

        Returns the stored replacement, which differs from ``person`` only in
        having no tags.
        """
        require_non_null(person=person)
        if not self._address_book.has_person(person):
            raise EntityNotFoundError(person)
        self.sync_person_tag_removal(person, set(person.tags))
        edited = person.with_tags(())
        self.set_person(person, edited)
        self.sync_person_edit(person, edited)
        self.update_filtered_person_list(PREDICATE_SHOW_ALL_PERSONS)
        return edited

    def assign_person_to_wedding(self, person: Person, wedding: Wedding) -> Person:
        """Tag ``person`` with ``wedding``'s name and add them to its participants.

        Returns the stored replacement carrying the new tag.
        """
        require_non_null(person=person, wedding=wedding)
        stored_wedding = self._find_wedding(wedding)
        if not self._address_book.has_person(person):
            raise EntityNotFoundError(person)
        edited = person.with_tags(person.tags | {Tag(stored_wedding.name)})
        self.set_person(person, edited)
        self.sync_person_edit(person, edited)
        stored_wedding.participants.add(edited)
        return edited

    def _find_wedding(self, wedding: Wedding) -> Wedding:
        for stored in self._wedding_book.get_wedding_list():
            if stored.is_same_wedding(wedding):
                return stored
        raise EntityNotFoundError(wedding)

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, ModelManager):
            return NotImplemented
        return (
            self._address_book == other._address_book
            and self._wedding_book == other._wedding_book
            and self._user_prefs == other._user_prefs
            and list(self._filtered_persons) == list(other._filtered_persons)
            and list(self._filtered_weddings) == list(other._filtered_weddings)
        )
