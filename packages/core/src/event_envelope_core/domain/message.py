"""Message — immutable envelope pairing a domain event with its headers."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Generic

from typing_extensions import TypeVar

from ..primitives.exceptions import (
    InvalidHeaderError,
    MissingVersionError,
    TimeFormatError,
)
from .headers import DEFAULT_TIME_OF_RECORDING_FORMAT, Header, validate_header

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .aggregate_root_id import AggregateRootId
    from .headers import HeaderValue

logger = logging.getLogger("event_envelope.message")

TPayload = TypeVar("TPayload", default=object)

_DIRECTIVE = re.compile(r"%(.)")
_YEAR_DIRECTIVES = frozenset("YyGcx")
# Leap year used to parse formats without a year, so Feb 29 stays valid.
_LEAP_ANCHOR_YEAR = 1972


@dataclass(frozen=True)
class Message(Generic[TPayload]):
    """Immutable envelope around a domain event.

    The payload is opaque to the envelope. Headers carry cross-cutting data
    (aggregate identity, version, time of recording, extension data) and are
    exposed read-only. Every ``with_*`` method returns a new Message that
    shares the payload and owns a fresh headers mapping, so one Message can
    be handed to any number of handlers without coordination.

    Messages compare by value but are not hashable, since headers are a
    mapping.

    Usage::

        message = (
            Message(OrderPlaced(order_id="o-1"))
            .with_header(Header.AGGREGATE_ROOT_VERSION, 3)
            .with_time_of_recording(clock.now())
        )
        message.aggregate_version()  # 3
    """

    payload: TPayload
    headers: Mapping[str, HeaderValue] = field(
        default_factory=lambda: MappingProxyType({})
    )

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        headers = {} if self.headers is None else dict(self.headers)
        object.__setattr__(self, "headers", MappingProxyType(headers))

    def __reduce__(self) -> tuple[Any, ...]:
        return (self.__class__, (self.payload, dict(self.headers)))

    # ── Copy-on-write mutators ───────────────────────────────────

    def with_header(self, key: str, value: HeaderValue) -> Message[TPayload]:
        """Return a copy with *key* set to *value*, replacing any prior value."""
        validate_header(key, value)
        return replace(self, headers={**self.headers, key: value})

    def with_headers(self, headers: Mapping[str, HeaderValue]) -> Message[TPayload]:
        """Return a copy with *headers* merged in.

        Headers already present on this message win over incoming ones;
        only keys that are not set yet are added. Outer pipeline stages can
        therefore enrich a message without clobbering what inner stages set.
        """
        merged = dict(self.headers)
        for key, value in headers.items():
            validate_header(key, value)
            merged.setdefault(key, value)
        return replace(self, headers=merged)

    def with_time_of_recording(
        self,
        time_of_recording: datetime,
        time_format: str = DEFAULT_TIME_OF_RECORDING_FORMAT,
    ) -> Message[TPayload]:
        """Return a copy stamped with *time_of_recording*.

        Both the formatted timestamp and *time_format* are stored, so
        :meth:`time_of_recording` knows how to parse the value back.
        Naive datetimes are read as UTC.
        """
        if not isinstance(time_format, str) or not time_format:
            raise InvalidHeaderError(
                Header.TIME_OF_RECORDING_FORMAT,
                time_format,
                "format must be a non-empty string",
            )
        if time_of_recording.tzinfo is None:
            time_of_recording = time_of_recording.replace(tzinfo=timezone.utc)
        return self.with_headers(
            {
                Header.TIME_OF_RECORDING: time_of_recording.strftime(time_format),
                Header.TIME_OF_RECORDING_FORMAT: time_format,
            }
        )

    # ── Accessors ────────────────────────────────────────────────

    def header(self, key: str) -> HeaderValue:
        """Return the raw value stored at *key*, or ``None``."""
        return self.headers.get(key)

    def aggregate_version(self) -> int:
        """Return the aggregate version.

        Raises:
            MissingVersionError: If the version header is absent.
            InvalidHeaderError: If the stored value is not an integer.
        """
        version = self.headers.get(Header.AGGREGATE_ROOT_VERSION)
        if version is None:
            raise MissingVersionError

        try:
            return int(version)  # type: ignore[arg-type]
        except (TypeError, ValueError) as exc:
            raise InvalidHeaderError(
                Header.AGGREGATE_ROOT_VERSION,
                version,
                "aggregate version must be an integer",
            ) from exc

    def aggregate_root_id(self) -> AggregateRootId | None:
        return self.headers.get(Header.AGGREGATE_ROOT_ID)  # type: ignore[return-value]

    def aggregate_root_id_type(self) -> str | None:
        return self.headers.get(Header.AGGREGATE_ROOT_ID_TYPE)  # type: ignore[return-value]

    def aggregate_root_type(self) -> str | None:
        return self.headers.get(Header.AGGREGATE_ROOT_TYPE)  # type: ignore[return-value]

    def event_id(self) -> str | None:
        return self.headers.get(Header.EVENT_ID)  # type: ignore[return-value]

    def event_type(self) -> str | None:
        return self.headers.get(Header.EVENT_TYPE)  # type: ignore[return-value]

    def time_of_recording(self) -> datetime:
        """Parse the time-of-recording header with its stored format.

        Falls back to the default format when no format header is present.
        Fields the format does not mention are taken from the Unix epoch:
        a format without a year yields 1970, one without an offset yields UTC.
        A Feb 29 read with a year-less format has no 1970 counterpart and is
        returned in 1972, the first leap year after the epoch.

        Raises:
            TimeFormatError: If the value does not match the format.
        """
        time_format = self.headers.get(Header.TIME_OF_RECORDING_FORMAT)
        if time_format is None:
            time_format = DEFAULT_TIME_OF_RECORDING_FORMAT
        time_format = str(time_format)

        raw = self.headers.get(Header.TIME_OF_RECORDING)
        raw_value = "" if raw is None else str(raw)

        has_year = _has_year_directive(time_format)
        try:
            if has_year:
                parsed = datetime.strptime(raw_value, time_format)
            else:
                parsed = datetime.strptime(
                    f"{_LEAP_ANCHOR_YEAR} {raw_value}", f"%Y {time_format}"
                )
        except ValueError as exc:
            logger.debug(
                "Unable to parse time of recording %r with format %r: %s",
                raw_value,
                time_format,
                exc,
            )
            raise TimeFormatError(time_format, raw_value) from exc

        return _anchor_to_epoch(parsed, has_year)


def _has_year_directive(time_format: str) -> bool:
    directives = set(_DIRECTIVE.findall(time_format.replace("%%", "")))
    return bool(directives & _YEAR_DIRECTIVES)


def _anchor_to_epoch(parsed: datetime, has_year: bool) -> datetime:
    if not has_year and not (parsed.month == 2 and parsed.day == 29):
        parsed = parsed.replace(year=1970)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
