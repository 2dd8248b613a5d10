"""In-memory implementation of ContactRepository (no DB)."""

from contactbook.domain import Contact


class InMemoryContactRepository:
    """Stores contacts in memory. Order preserved by insertion."""

    def __init__(self) -> None:
        self._contacts: list[Contact] = []

    def add(self, contact: Contact) -> None:
        self._contacts.append(contact)

    def list_all(self) -> list[Contact]:
        return list(self._contacts)

    def find_by_email(self, email: str) -> Contact | None:
        for contact in self._contacts:
            if contact.email == email:
                return contact
        return None

    def remove(self, contact_id: int) -> bool:
        for idx, contact in enumerate(self._contacts):
            if contact.id == contact_id:
                del self._contacts[idx]
                return True
        return False
