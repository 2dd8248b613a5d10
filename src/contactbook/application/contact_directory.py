"""Contact list, create and delete. One directory instance per process, shared by all requests."""

import asyncio
from collections.abc import Awaitable, Callable, Iterable

from contactbook.application.dto import (
    ContactCreated,
    ContactDeleted,
    DuplicateEmail,
    NotFound,
)
from contactbook.application.ports import ContactRepository, IdGenerator
from contactbook.domain import Contact


async def no_delay() -> None:
    return None


class ContactDirectory:
    """Owns the contacts and serializes every read and mutation behind one asyncio.Lock.

    Check-then-mutate sequences never await while holding the lock, so a
    cancelled caller either applies its whole mutation or none of it.
    """

    def __init__(
        self,
        repository: ContactRepository,
        id_generator: IdGenerator,
        *,
        before_delete: Callable[[], Awaitable[None]] | None = None,
    ) -> None:
        self._repo = repository
        self._ids = id_generator
        self._before_delete = before_delete or no_delay
        self._lock = asyncio.Lock()

    async def list(self) -> tuple[Contact, ...]:
        """Return live contacts in creation order."""
        async with self._lock:
            return tuple(self._repo.list_all())

    async def count(self) -> int:
        async with self._lock:
            return len(self._repo.list_all())

    async def create(self, name: str, email: str) -> ContactCreated | DuplicateEmail:
        """Create a contact unless another live contact already has this email (exact match)."""
        async with self._lock:
            if self._repo.find_by_email(email) is not None:
                return DuplicateEmail(email=email)
            contact = Contact(id=self._ids.next_id(), name=name, email=email)
            self._repo.add(contact)
            return ContactCreated(contact=contact)

    async def delete(self, contact_id: int) -> ContactDeleted | NotFound:
        """Remove a contact by id. The delete hook runs first, outside the lock."""
        await self._before_delete()
        async with self._lock:
            if not self._repo.remove(contact_id):
                return NotFound(contact_id=contact_id)
            return ContactDeleted(contact_id=contact_id)

    async def seed(self, pairs: Iterable[tuple[str, str]]) -> tuple[Contact, ...]:
        """Create each (name, email) pair in order. Pairs with a taken email are skipped."""
        created = []
        for name, email in pairs:
            result = await self.create(name, email)
            if isinstance(result, ContactCreated):
                created.append(result.contact)
        return tuple(created)
