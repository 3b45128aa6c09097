"""Well-known header keys and the closed set of header value types."""

from __future__ import annotations

from typing import Any, Final, Union

from typing_extensions import TypeAlias

from ..primitives.exceptions import InvalidHeaderError
from .aggregate_root_id import AggregateRootId

#: strftime/strptime format: date, microsecond time and numeric UTC offset.
DEFAULT_TIME_OF_RECORDING_FORMAT: Final = "%Y-%m-%d %H:%M:%S.%f%z"

HeaderValue: TypeAlias = Union[
    int,
    str,
    bool,
    float,
    list[Any],
    tuple[Any, ...],
    dict[str, Any],
    AggregateRootId,
    None,
]

# Runtime counterpart of ``HeaderValue``; nested container items are not checked.
_HEADER_VALUE_TYPES: Final = (
    int,
    str,
    bool,
    float,
    list,
    tuple,
    dict,
    AggregateRootId,
    type(None),
)


class Header:
    """Keys of the headers the envelope itself interprets or producers set."""

    AGGREGATE_ROOT_ID: Final = "aggregate_root_id"
    AGGREGATE_ROOT_ID_TYPE: Final = "aggregate_root_id_type"
    AGGREGATE_ROOT_TYPE: Final = "aggregate_root_type"
    AGGREGATE_ROOT_VERSION: Final = "aggregate_root_version"
    EVENT_ID: Final = "event_id"
    EVENT_TYPE: Final = "event_type"
    TIME_OF_RECORDING: Final = "time_of_recording"
    TIME_OF_RECORDING_FORMAT: Final = "time_of_recording_format"
    CORRELATION_ID: Final = "correlation_id"
    CAUSATION_ID: Final = "causation_id"


def validate_header(key: object, value: object) -> None:
    """Raise ``InvalidHeaderError`` unless *key*/*value* form a valid header."""
    if not isinstance(key, str) or not key:
        raise InvalidHeaderError(key, value, "key must be a non-empty string")
    if not isinstance(value, _HEADER_VALUE_TYPES):
        raise InvalidHeaderError(
            key, value, f"unsupported value type {type(value).__name__}"
        )
