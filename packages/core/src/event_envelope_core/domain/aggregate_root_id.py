"""Aggregate root identifiers usable as header values."""

from __future__ import annotations

import uuid
from typing import Protocol, runtime_checkable

from typing_extensions import Self

from ..primitives.exceptions import InvalidAggregateRootIdError
from .value_object import ValueObject


@runtime_checkable
class AggregateRootId(Protocol):
    """Protocol for aggregate root identifiers.

    The envelope never inspects ids; it only stores and returns them.
    Implementations must round-trip through their string form so that
    transport collaborators can rebuild them.
    """

    def to_string(self) -> str:
        """Return the canonical string form of the id."""
        ...

    @classmethod
    def from_string(cls, value: str) -> Self:
        """Rebuild an id from its canonical string form."""
        ...


class UuidAggregateRootId(ValueObject):
    """UUID-backed aggregate root id.

    Usage::

        order_id = UuidAggregateRootId.generate()
        same = UuidAggregateRootId.from_string(order_id.to_string())
    """

    value: uuid.UUID

    @classmethod
    def generate(cls) -> UuidAggregateRootId:
        return cls(value=uuid.uuid4())

    @classmethod
    def from_string(cls, value: str) -> UuidAggregateRootId:
        try:
            return cls(value=uuid.UUID(value))
        except (AttributeError, TypeError, ValueError) as exc:
            raise InvalidAggregateRootIdError(cls.__name__, value) from exc

    def to_string(self) -> str:
        return str(self.value)

    def __str__(self) -> str:
        return self.to_string()
