"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Protocol

from contactbook.domain import Contact


class IdGenerator(Protocol):
    """Issues unique, strictly increasing contact ids."""

    def next_id(self) -> int:
        """Return an id greater than every id returned before."""
        ...


class ContactRepository(Protocol):
    """Holds contacts in insertion order. Not synchronized; the directory locks around it."""

    def add(self, contact: Contact) -> None:
        """Append a contact."""
        ...

    def list_all(self) -> list[Contact]:
        """Return all contacts in insertion order."""
        ...

    def find_by_email(self, email: str) -> Contact | None:
        """Return the contact with exactly this email, or None."""
        ...

    def remove(self, contact_id: int) -> bool:
        """Remove the contact with the given id. Returns True if removed, False if not found."""
        ...
