"""Application layer: use cases, ports, and DTOs. Depends only on domain."""

from contactbook.application.contact_directory import ContactDirectory, no_delay
from contactbook.application.dto import (
    ContactCreated,
    ContactDeleted,
    DuplicateEmail,
    NotFound,
)
from contactbook.application.ports import ContactRepository, IdGenerator

__all__ = [
    "ContactCreated",
    "ContactDeleted",
    "ContactDirectory",
    "ContactRepository",
    "DuplicateEmail",
    "IdGenerator",
    "NotFound",
    "no_delay",
]
