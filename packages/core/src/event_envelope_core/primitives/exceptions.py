"""Exceptions raised by the message envelope and its collaborators."""

from __future__ import annotations


class EventEnvelopeError(Exception):
    """Root exception for the entire event-envelope package."""


class MessageError(EventEnvelopeError):
    """Base class for all errors raised while reading or building a Message."""


class MissingVersionError(MessageError, RuntimeError):
    """Raised when the aggregate version is requested from a message that has none.

    A sourced event is always assigned a version by its producer, so this
    signals a producer bug rather than bad data.
    """

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or "Can't get the version if the message has none.")


class TimeFormatError(MessageError, ValueError):
    """Raised when the time-of-recording header cannot be parsed with its format.

    Carries both inputs so callers can log or reject the message.
    """

    def __init__(self, format: str, raw_value: str) -> None:  # noqa: A002
        self.format = format
        self.raw_value = raw_value
        super().__init__(
            f"Unable to resolve time of recording from header {raw_value!r} "
            f"using format {format!r}"
        )


class InvalidHeaderError(MessageError, ValueError):
    """Raised when a header key or value falls outside what a Message accepts."""

    def __init__(self, key: object, value: object, reason: str) -> None:
        self.key = key
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid header {key!r}: {reason}")


class InvalidAggregateRootIdError(EventEnvelopeError, ValueError):
    """Raised when a string cannot be turned into an aggregate root id."""

    def __init__(self, id_type: str, value: object) -> None:
        self.id_type = id_type
        self.value = value
        super().__init__(f"{value!r} is not a valid {id_type}")
