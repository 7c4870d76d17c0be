"""
Weddingbook core: clean-architecture layout.

- domain: entities (Person, Tag, Wedding), keyword predicates, errors. No outer dependencies.
- application: UniqueEntityList, AddressBook, WeddingBook, FilteredView, ModelManager.
- infrastructure: settings loader (.env and environment variables).
"""

from weddingbook.application import (
    PREDICATE_SHOW_ALL_PERSONS,
    PREDICATE_SHOW_ALL_WEDDINGS,
    AddressBook,
    GuiSettings,
    ModelManager,
    UserPrefs,
    WeddingBook,
)
from weddingbook.domain import (
    DuplicateEntityError,
    EntityNotFoundError,
    Person,
    Tag,
    Wedding,
)
from weddingbook.infrastructure import load_user_prefs

__all__ = [
    "AddressBook",
    "DuplicateEntityError",
    "EntityNotFoundError",
    "GuiSettings",
    "ModelManager",
    "PREDICATE_SHOW_ALL_PERSONS",
    "PREDICATE_SHOW_ALL_WEDDINGS",
    "Person",
    "Tag",
    "UserPrefs",
    "Wedding",
    "WeddingBook",
    "load_user_prefs",
]
