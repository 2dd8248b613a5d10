"""Domain layer: entities and value objects. No dependencies on outer layers."""

from contactbook.domain.entities import Contact

__all__ = ["Contact"]
