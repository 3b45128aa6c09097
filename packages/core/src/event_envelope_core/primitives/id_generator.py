"""Event id generators used when stamping messages with ``Header.EVENT_ID``."""

from __future__ import annotations

import itertools
import uuid
from typing import Protocol, runtime_checkable


@runtime_checkable
class IIDGenerator(Protocol):
    """Source of event ids. Ids must be unique per generator instance."""

    def next_id(self) -> str: ...


class UUID4Generator(IIDGenerator):
    """Random UUIDv4 event ids in canonical string form."""

    def next_id(self) -> str:
        return str(uuid.uuid4())


class SequentialIdGenerator(IIDGenerator):
    """Deterministic ``<prefix>-<n>`` ids, counting from *start*.

    Intended for tests and replays where event ids must be predictable.
    """

    def __init__(self, prefix: str = "evt", start: int = 1) -> None:
        self._prefix = prefix
        self._counter = itertools.count(start)

    def next_id(self) -> str:
        return f"{self._prefix}-{next(self._counter)}"
