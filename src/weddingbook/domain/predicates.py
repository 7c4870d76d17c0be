"""Keyword predicates for filtered person and wedding views."""

from dataclasses import dataclass

from weddingbook.domain.entities import Person, Wedding


def contains_word_ignore_case(sentence: str, word: str) -> bool:
    """True if ``word`` is one of the whitespace-separated words of ``sentence``."""
    needle = word.casefold()
    return needle in (w.casefold() for w in sentence.split())


@dataclass(frozen=True)
class _KeywordsPredicate:
    keywords: tuple[str, ...]

    def __post_init__(self):
        keywords = tuple(k.strip() for k in self.keywords)
        for keyword in keywords:
            if not keyword or len(keyword.split()) != 1:
                raise ValueError("Each keyword must be a single non-empty word.")
        object.__setattr__(self, "keywords", keywords)

    def _matches(self, text: str) -> bool:
        return any(contains_word_ignore_case(text, k) for k in self.keywords)


@dataclass(frozen=True)
class NameContainsKeywordsPredicate(_KeywordsPredicate):
    """Matches a Person whose name contains any of the keywords."""

    def __call__(self, person: Person) -> bool:
        return self._matches(person.name)


@dataclass(frozen=True)
class JobContainsKeywordsPredicate(_KeywordsPredicate):
    """Matches a Person whose job contains any of the keywords."""

    def __call__(self, person: Person) -> bool:
        return self._matches(person.job)


@dataclass(frozen=True)
class TagContainsKeywordsPredicate(_KeywordsPredicate):
    """Matches a Person with any tag containing any of the keywords.

    Tags like "Smith-Jones" are one word, so a wedding's name can be used
    as a keyword to list its tagged guests.
    """

    def __call__(self, person: Person) -> bool:
        return any(self._matches(tag.tag_name) for tag in person.tags)


@dataclass(frozen=True)
class WeddingNameContainsKeywordsPredicate(_KeywordsPredicate):
    """Matches a Wedding whose name contains any of the keywords."""

    def __call__(self, wedding: Wedding) -> bool:
        return self._matches(wedding.name)
