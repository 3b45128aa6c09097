"""Primitives: exceptions, ID generation, clocks."""

from __future__ import annotations

from .clock import Clock, FrozenClock, SystemClock
from .exceptions import (
    EventEnvelopeError,
    InvalidAggregateRootIdError,
    InvalidHeaderError,
    MessageError,
    MissingVersionError,
    TimeFormatError,
)
from .id_generator import IIDGenerator, SequentialIdGenerator, UUID4Generator

__all__ = [
    "Clock",
    "EventEnvelopeError",
    "FrozenClock",
    "IIDGenerator",
    "InvalidAggregateRootIdError",
    "InvalidHeaderError",
    "MessageError",
    "MissingVersionError",
    "SequentialIdGenerator",
    "SystemClock",
    "TimeFormatError",
    "UUID4Generator",
]
