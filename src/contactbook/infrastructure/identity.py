"""Identity layer: issue contact ids.

Ids start at 1 and only grow. An id drawn for a contact that is later
deleted is never handed out again; gaps are allowed, reuse is not.
"""

import itertools


class SequentialIdGenerator:
    """Monotonic integer counter. The counter itself is private."""

    def __init__(self, start: int = 1) -> None:
        if start < 1:
            raise ValueError("Id generator start must be at least 1.")
        self._counter = itertools.count(start)

    def next_id(self) -> int:
        return next(self._counter)
