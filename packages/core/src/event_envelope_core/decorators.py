"""Message decorators — enrich messages with headers before they leave a producer."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from .correlation import correlation_headers
from .domain.headers import DEFAULT_TIME_OF_RECORDING_FORMAT, Header
from .primitives.clock import Clock, SystemClock
from .primitives.id_generator import IIDGenerator, UUID4Generator

if TYPE_CHECKING:
    from collections.abc import Callable

    from .domain.message import Message

logger = logging.getLogger("event_envelope.decorators")

_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_WORD_BOUNDARY = re.compile(r"([a-z\d])([A-Z])")


@runtime_checkable
class MessageDecorator(Protocol):
    """Protocol for message decorators.

    Decorators return a new Message and never modify the one they receive.
    They should enrich through ``Message.with_headers`` so that headers set
    by an earlier stage are kept.
    """

    def decorate(self, message: Message[Any]) -> Message[Any]:
        """Return an enriched copy of *message*."""
        ...


def dotted_snake_case_type_name(payload: object) -> str:
    """Name a payload by its module path and snake-cased class name.

    ``shop.events.OrderPlaced`` becomes ``"shop.events.order_placed"``.
    """
    cls = type(payload)
    name = _ACRONYM_BOUNDARY.sub(r"\1_\2", cls.__name__)
    name = _WORD_BOUNDARY.sub(r"\1_\2", name).lower()
    return f"{cls.__module__}.{name}"


class DefaultHeadersDecorator(MessageDecorator):
    """Adds the event type, an event id and the time of recording.

    Args:
        clock: Source of the time of recording. Defaults to ``SystemClock()``.
        id_generator: Source of event ids. Defaults to ``UUID4Generator()``.
        time_format: strftime format used for the time of recording.
        type_namer: Maps a payload to its event type name.
    """

    def __init__(
        self,
        *,
        clock: Clock | None = None,
        id_generator: IIDGenerator | None = None,
        time_format: str = DEFAULT_TIME_OF_RECORDING_FORMAT,
        type_namer: Callable[[object], str] = dotted_snake_case_type_name,
    ) -> None:
        self._clock = clock or SystemClock()
        self._id_generator = id_generator or UUID4Generator()
        self._time_format = time_format
        self._type_namer = type_namer

    def decorate(self, message: Message[Any]) -> Message[Any]:
        return message.with_headers(
            {
                Header.EVENT_TYPE: self._type_namer(message.payload),
                Header.EVENT_ID: self._id_generator.next_id(),
            }
        ).with_time_of_recording(self._clock.now(), self._time_format)


class CorrelationHeadersDecorator(MessageDecorator):
    """Copies the correlation and causation ids of the current context."""

    def decorate(self, message: Message[Any]) -> Message[Any]:
        headers = correlation_headers()
        if not headers:
            return message
        return message.with_headers(headers)


class MessageDecoratorChain(MessageDecorator):
    """Applies decorators in order; the first one sees the original message."""

    def __init__(self, *decorators: MessageDecorator) -> None:
        self._decorators = decorators

    def decorate(self, message: Message[Any]) -> Message[Any]:
        for decorator in self._decorators:
            message = decorator.decorate(message)
            logger.debug(
                "Applied %s to %s",
                type(decorator).__name__,
                type(message.payload).__name__,
            )
        return message
