"""Application ports (interfaces). Implemented by the model and by persistence adapters."""

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from weddingbook.application.user_prefs import GuiSettings
from weddingbook.domain import Person, Wedding


class ReadOnlyAddressBook(Protocol):
    """Snapshot of the person collection, as loaded or about to be saved."""

    def get_person_list(self) -> Sequence[Person]:
        """Return persons in insertion order. Must not be mutated by the caller."""
        ...


class ReadOnlyWeddingBook(Protocol):
    """Snapshot of the wedding collection, as loaded or about to be saved."""

    def get_wedding_list(self) -> Sequence[Wedding]:
        """Return weddings in insertion order. Must not be mutated by the caller."""
        ...


class ReadOnlyUserPrefs(Protocol):
    """GUI settings and data file locations. Stored verbatim by the model."""

    def get_gui_settings(self) -> GuiSettings: ...

    def get_address_book_file_path(self) -> Path: ...

    def get_wedding_book_file_path(self) -> Path: ...
