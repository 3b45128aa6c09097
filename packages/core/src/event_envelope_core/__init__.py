"""event-envelope — immutable message envelope for event-sourced pipelines.

Pairs an opaque domain event with metadata headers. Optional pydantic
value objects for aggregate ids.
"""

from __future__ import annotations

from .correlation import (
    correlation_headers,
    correlation_scope,
    generate_correlation_id,
    get_causation_id,
    get_context_vars,
    get_correlation_id,
    set_causation_id,
    set_context_vars,
    set_correlation_id,
)
from .decorators import (
    CorrelationHeadersDecorator,
    DefaultHeadersDecorator,
    MessageDecorator,
    MessageDecoratorChain,
    dotted_snake_case_type_name,
)

# ── Domain ───────────────────────────────────────────────────────
from .domain import (
    DEFAULT_TIME_OF_RECORDING_FORMAT,
    AggregateRootId,
    Header,
    HeaderValue,
    Message,
    UuidAggregateRootId,
    ValueObject,
)

# ── Primitives ──────────────────────────────────────────────────
from .primitives import (
    Clock,
    EventEnvelopeError,
    FrozenClock,
    IIDGenerator,
    InvalidAggregateRootIdError,
    InvalidHeaderError,
    MessageError,
    MissingVersionError,
    SequentialIdGenerator,
    SystemClock,
    TimeFormatError,
    UUID4Generator,
)

__all__: list[str] = [
    # Domain
    "AggregateRootId",
    "DEFAULT_TIME_OF_RECORDING_FORMAT",
    "Header",
    "HeaderValue",
    "Message",
    "UuidAggregateRootId",
    "ValueObject",
    # Decorators
    "CorrelationHeadersDecorator",
    "DefaultHeadersDecorator",
    "MessageDecorator",
    "MessageDecoratorChain",
    "dotted_snake_case_type_name",
    # Correlation
    "correlation_headers",
    "correlation_scope",
    "generate_correlation_id",
    "get_causation_id",
    "get_context_vars",
    "get_correlation_id",
    "set_causation_id",
    "set_context_vars",
    "set_correlation_id",
    # Primitives
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
