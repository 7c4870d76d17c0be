"""Domain layer: entities, value objects and predicates. No dependencies on outer layers."""

from weddingbook.domain.entities import Person, Tag, Wedding
from weddingbook.domain.errors import (
    DuplicateEntityError,
    EntityNotFoundError,
    require_non_null,
)
from weddingbook.domain.predicates import (
    JobContainsKeywordsPredicate,
    NameContainsKeywordsPredicate,
    TagContainsKeywordsPredicate,
    WeddingNameContainsKeywordsPredicate,
)

__all__ = [
    "DuplicateEntityError",
    "EntityNotFoundError",
    "JobContainsKeywordsPredicate",
    "NameContainsKeywordsPredicate",
    "Person",
    "Tag",
    "TagContainsKeywordsPredicate",
    "Wedding",
    "WeddingNameContainsKeywordsPredicate",
    "require_non_null",
]
