"""
Contactbook core: clean-architecture layout.

- domain: entities (Contact). No outer dependencies.
- application: use cases (ContactDirectory), ports (ContactRepository, IdGenerator), DTOs.
- infrastructure: adapters (InMemoryContactRepository, SequentialIdGenerator).
"""

from contactbook.application import (
    ContactCreated,
    ContactDeleted,
    ContactDirectory,
    ContactRepository,
    DuplicateEmail,
    IdGenerator,
    NotFound,
)
from contactbook.domain import Contact
from contactbook.infrastructure import InMemoryContactRepository, SequentialIdGenerator

__all__ = [
    "Contact",
    "ContactCreated",
    "ContactDeleted",
    "ContactDirectory",
    "ContactRepository",
    "DuplicateEmail",
    "IdGenerator",
    "InMemoryContactRepository",
    "NotFound",
    "SequentialIdGenerator",
]
