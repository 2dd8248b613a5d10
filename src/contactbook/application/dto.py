"""Result types returned by the directory. Handlers branch on them with isinstance."""

from dataclasses import dataclass

from contactbook.domain import Contact


@dataclass(frozen=True)
class ContactCreated:
    contact: Contact


@dataclass(frozen=True)
class DuplicateEmail:
    """Another live contact already holds this email."""

    email: str


@dataclass(frozen=True)
class ContactDeleted:
    contact_id: int


@dataclass(frozen=True)
class NotFound:
    """No live contact has this id."""

    contact_id: int
