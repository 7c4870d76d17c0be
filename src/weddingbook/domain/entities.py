"""Domain entities: Person, Tag, and Wedding."""

import datetime
import re
from collections.abc import Iterable
from dataclasses import dataclass, field, replace

from weddingbook.domain.errors import require_non_null
from weddingbook.domain.phone import phone_key

# Tag and wedding names: letters, digits, spaces and hyphens, starting with a letter or digit.
NAME_PATTERN = re.compile(r"^[^\W_][\w\- ]*$")
EMAIL_PATTERN = re.compile(r"^[\w.+\-]+@[\w\-]+(\.[\w\-]+)*$")
PHONE_MIN_DIGITS = 3


@dataclass(frozen=True)
class Tag:
    """
    A label on a Person. A tag whose name equals a Wedding's name marks
    the person as a participant of that wedding.
    """

    tag_name: str

    def __post_init__(self):
        require_non_null(tag_name=self.tag_name)
        tag_name = self.tag_name.strip()
        if not NAME_PATTERN.match(tag_name):
            raise ValueError(
                "Tag names must be alphanumeric and may contain spaces or hyphens."
            )
        object.__setattr__(self, "tag_name", tag_name)

    def __str__(self) -> str:
        return self.tag_name


def _as_tags(tags: Iterable[Tag | str]) -> frozenset[Tag]:
    return frozenset(t if isinstance(t, Tag) else Tag(t) for t in tags)


@dataclass(frozen=True)
class Person:
    """
    Represents a contact known by the user.

    ``==`` is exact equality over every field. Use is_same_person for the
    looser identity check that list uniqueness is keyed on.
    """

    name: str
    phone: str
    email: str
    address: str
    job: str = ""
    tags: frozenset[Tag] = field(default_factory=frozenset)

    def __post_init__(self):
        require_non_null(
            name=self.name,
            phone=self.phone,
            email=self.email,
            address=self.address,
            job=self.job,
            tags=self.tags,
        )
        name = self.name.strip()
        if not name:
            raise ValueError("Person name must be non-empty.")
        phone = self.phone.strip()
        if sum(ch.isdigit() for ch in phone) < PHONE_MIN_DIGITS:
            raise ValueError(
                f"Phone number must contain at least {PHONE_MIN_DIGITS} digits."
            )
        email = self.email.strip()
        if not EMAIL_PATTERN.match(email):
            raise ValueError("Email must be of the form local-part@domain.")
        address = self.address.strip()
        if not address:
            raise ValueError("Person address must be non-empty.")

        object.__setattr__(self, "name", name)
        object.__setattr__(self, "phone", phone)
        object.__setattr__(self, "email", email)
        object.__setattr__(self, "address", address)
        object.__setattr__(self, "job", self.job.strip())
        object.__setattr__(self, "tags", _as_tags(self.tags))

    def is_same_person(self, other: "Person | None") -> bool:
        """Same real-world person: name matches, and phone or email matches."""
        if other is self:
            return True
        if other is None:
            return False
        if self.name.casefold() != other.name.casefold():
            return False
        return (
            phone_key(self.phone) == phone_key(other.phone)
            or self.email.casefold() == other.email.casefold()
        )

    def with_tags(self, tags: Iterable[Tag | str]) -> "Person":
        """Return a copy of this person carrying exactly the given tags."""
        return replace(self, tags=_as_tags(tags))

    @property
    def tag_names(self) -> set[str]:
        return {tag.tag_name for tag in self.tags}


@dataclass(frozen=True)
class Wedding:
    """
    A wedding event. Name, date and venue are fixed; participants is a
    mutable set of Person values owned by the address book.

    ``==`` compares name, date and venue. The participant set is
    membership state and takes no part in equality or hashing.
    """

    name: str
    date: datetime.date
    venue: str
    participants: set[Person] = field(default_factory=set, compare=False, repr=False)

    def __post_init__(self):
        require_non_null(
            name=self.name,
            date=self.date,
            venue=self.venue,
            participants=self.participants,
        )
        name = self.name.strip()
        if not NAME_PATTERN.match(name):
            raise ValueError(
                "Wedding names must be alphanumeric and may contain spaces or hyphens."
            )
        venue = self.venue.strip()
        if not venue:
            raise ValueError("Wedding venue must be non-empty.")
        when = self.date
        if isinstance(when, str):
            when = datetime.date.fromisoformat(when.strip())
        elif not isinstance(when, datetime.date):
            raise ValueError("Wedding date must be a date or an ISO date string.")

        object.__setattr__(self, "name", name)
        object.__setattr__(self, "venue", venue)
        object.__setattr__(self, "date", when)
        object.__setattr__(self, "participants", set(self.participants))

    def is_same_wedding(self, other: "Wedding | None") -> bool:
        """Weddings are identified by name alone, ignoring case."""
        if other is self:
            return True
        if other is None:
            return False
        return self.name.casefold() == other.name.casefold()

    def discard_participant(self, person: Person) -> bool:
        """Drop every participant that is the same person as ``person``. True if any was dropped."""
        stale = {p for p in self.participants if p.is_same_person(person)}
        self.participants.difference_update(stale)
        return bool(stale)
