"""Node id generators handed to the incremental placer.

The engine never invents ids on its own; the host passes any zero-argument
callable returning a fresh string.
"""

from __future__ import annotations

__all__ = ["CounterIds", "IdFactory", "uuid_ids"]

import itertools
import uuid
from collections.abc import Callable, Iterable

IdFactory = Callable[[], str]


class CounterIds:
    """Monotonic ids ``<prefix>-1``, ``<prefix>-2``, ... skipping taken ones."""

    def __init__(self, prefix: str = "node", start: int = 1, taken: Iterable[str] = ()) -> None:
        self.prefix = prefix
        self._counter = itertools.count(start)
        self._taken = set(taken)

    def __call__(self) -> str:
        while True:
            candidate = f"{self.prefix}-{next(self._counter)}"
            if candidate not in self._taken:
                self._taken.add(candidate)
                return candidate


def uuid_ids(prefix: str = "node") -> IdFactory:
    """Return a factory of random ``<prefix>-<hex>`` ids."""

    def next_id() -> str:
        return f"{prefix}-{uuid.uuid4().hex[:12]}"

    return next_id
