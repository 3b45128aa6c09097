"""Correlation/causation tracking for the messages recorded in a unit of work."""

from __future__ import annotations

import contextlib
import uuid
from contextvars import ContextVar
from typing import TYPE_CHECKING

from .domain.headers import Header

if TYPE_CHECKING:
    from collections.abc import Iterator

_correlation_id: ContextVar[str | None] = ContextVar("correlation_id", default=None)
_causation_id: ContextVar[str | None] = ContextVar("causation_id", default=None)


def get_correlation_id() -> str | None:
    """Get current correlation ID from context."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None) -> None:
    """Set correlation ID in context."""
    _correlation_id.set(correlation_id)


def get_causation_id() -> str | None:
    """Get current causation ID from context."""
    return _causation_id.get()


def set_causation_id(causation_id: str | None) -> None:
    """Set causation ID in context."""
    _causation_id.set(causation_id)


def generate_correlation_id() -> str:
    """Generate a new correlation ID."""
    return str(uuid.uuid4())


def get_context_vars() -> dict[str, str | None]:
    """Snapshot both ids, e.g. to hand them to a background task."""
    return {
        "correlation_id": get_correlation_id(),
        "causation_id": get_causation_id(),
    }


def set_context_vars(**kwargs: str | None) -> None:
    """Restore ids from a snapshot; ids not passed are left as they are."""
    if "correlation_id" in kwargs:
        set_correlation_id(kwargs["correlation_id"])
    if "causation_id" in kwargs:
        set_causation_id(kwargs["causation_id"])


def correlation_headers() -> dict[str, str]:
    """Return the correlation headers for the current context.

    Ids that are not set are left out rather than mapped to ``None``.
    """
    headers: dict[str, str] = {}
    correlation_id = get_correlation_id()
    if correlation_id:
        headers[Header.CORRELATION_ID] = correlation_id
    causation_id = get_causation_id()
    if causation_id:
        headers[Header.CAUSATION_ID] = causation_id
    return headers


@contextlib.contextmanager
def correlation_scope(
    correlation_id: str | None = None,
    causation_id: str | None = None,
) -> Iterator[str]:
    """Bind correlation ids for the duration of a ``with`` block.

    A correlation id is generated when neither the argument nor the
    enclosing context provides one. The previous values are restored on exit.
    """
    resolved = correlation_id or get_correlation_id() or generate_correlation_id()
    correlation_token = _correlation_id.set(resolved)
    causation_token = _causation_id.set(causation_id or get_causation_id())
    try:
        yield resolved
    finally:
        _causation_id.reset(causation_token)
        _correlation_id.reset(correlation_token)
