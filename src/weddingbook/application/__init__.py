"""Application layer: the in-memory model, its collections and ports. Depends only on domain."""

from weddingbook.application.address_book import AddressBook
from weddingbook.application.filtered_view import PREDICATE_SHOW_ALL, FilteredView
from weddingbook.application.model_manager import (
    PREDICATE_SHOW_ALL_PERSONS,
    PREDICATE_SHOW_ALL_WEDDINGS,
    ModelManager,
)
from weddingbook.application.ports import (
    ReadOnlyAddressBook,
    ReadOnlyUserPrefs,
    ReadOnlyWeddingBook,
)
from weddingbook.application.unique_list import (
    ReadOnlyListView,
    UniqueEntityList,
    UniquePersonList,
    UniqueWeddingList,
)
from weddingbook.application.user_prefs import GuiSettings, UserPrefs
from weddingbook.application.wedding_book import WeddingBook

__all__ = [
    "AddressBook",
    "FilteredView",
    "GuiSettings",
    "ModelManager",
    "PREDICATE_SHOW_ALL",
    "PREDICATE_SHOW_ALL_PERSONS",
    "PREDICATE_SHOW_ALL_WEDDINGS",
    "ReadOnlyAddressBook",
    "ReadOnlyListView",
    "ReadOnlyUserPrefs",
    "ReadOnlyWeddingBook",
    "UniqueEntityList",
    "UniquePersonList",
    "UniqueWeddingList",
    "UserPrefs",
    "WeddingBook",
]
