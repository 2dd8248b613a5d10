"""Infrastructure layer: concrete implementations of application ports."""

from contactbook.infrastructure.identity import SequentialIdGenerator
from contactbook.infrastructure.memory_repository import InMemoryContactRepository

__all__ = [
    "InMemoryContactRepository",
    "SequentialIdGenerator",
]
