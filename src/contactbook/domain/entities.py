"""Domain entities: Contact."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Contact:
    """
    Represents one person in the directory.
    A Contact is immutable once created; its id is assigned by the directory.
    """

    id: int
    name: str = ""
    email: str = ""

    def __post_init__(self):
        if self.id < 1:
            raise ValueError("Contact id must be a positive integer.")
