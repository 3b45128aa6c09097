"""Domain primitives: the message envelope, header keys, aggregate ids."""

from __future__ import annotations

from .aggregate_root_id import AggregateRootId, UuidAggregateRootId
from .headers import (
    DEFAULT_TIME_OF_RECORDING_FORMAT,
    Header,
    HeaderValue,
    validate_header,
)
from .message import Message
from .value_object import ValueObject

__all__: list[str] = [
    "AggregateRootId",
    "DEFAULT_TIME_OF_RECORDING_FORMAT",
    "Header",
    "HeaderValue",
    "Message",
    "UuidAggregateRootId",
    "ValueObject",
    "validate_header",
]
