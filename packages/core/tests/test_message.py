"""Tests for the Message envelope: construction, copy-on-write, accessors."""

from __future__ import annotations

import copy
import dataclasses
import pickle
from dataclasses import dataclass

import pytest

from event_envelope_core.domain.aggregate_root_id import UuidAggregateRootId
from event_envelope_core.domain.headers import Header
from event_envelope_core.domain.message import Message
from event_envelope_core.primitives.exceptions import (
    InvalidHeaderError,
    MessageError,
    MissingVersionError,
)

# --- Test Models ---


@dataclass(frozen=True)
class EventX:
    name: str = "x"


# --- Construction ---


def test_payload_and_headers_are_returned_as_given() -> None:
    payload = EventX()
    headers = {"a": 1, "b": "two", "c": [1, 2], "d": None}
    message = Message(payload, headers)

    assert message.payload is payload
    assert message.headers == headers


def test_headers_default_to_empty() -> None:
    message = Message(EventX())
    assert message.headers == {}
    assert len(message.headers) == 0


def test_none_headers_are_treated_as_empty() -> None:
    assert Message(EventX(), None).headers == {}


def test_construction_does_not_validate_headers() -> None:
    """Transport collaborators rebuild messages as-is."""
    message = Message(EventX(), {"weird": object()})
    assert "weird" in message.headers


def test_constructor_copies_the_headers_mapping() -> None:
    headers = {"a": 1}
    message = Message(EventX(), headers)
    headers["a"] = 2
    headers["b"] = 3

    assert message.header("a") == 1
    assert message.header("b") is None


def test_headers_view_is_read_only() -> None:
    message = Message(EventX(), {"a": 1})
    with pytest.raises(TypeError):
        message.headers["a"] = 2  # type: ignore[index]
    assert message.header("a") == 1


def test_message_is_frozen() -> None:
    message = Message(EventX())
    with pytest.raises(dataclasses.FrozenInstanceError):
        message.payload = EventX("y")  # type: ignore[misc]


def test_header_insertion_order_is_preserved() -> None:
    message = Message(EventX(), {"z": 1, "a": 2}).with_header("m", 3)
    assert list(message.headers) == ["z", "a", "m"]


def test_messages_compare_by_value() -> None:
    assert Message(EventX(), {"a": 1}) == Message(EventX(), {"a": 1})
    assert Message(EventX(), {"a": 1}) != Message(EventX(), {"a": 2})
    assert Message(EventX("x"), {}) != Message(EventX("y"), {})


def test_messages_are_not_hashable() -> None:
    message = Message(EventX(), {"a": 1})

    assert Message.__hash__ is None
    with pytest.raises(TypeError, match="unhashable"):
        hash(message)


def test_message_survives_pickle_and_deepcopy() -> None:
    message = Message(EventX(), {"a": 1, "b": [1, 2]})

    assert pickle.loads(pickle.dumps(message)) == message
    clone = copy.deepcopy(message)
    assert clone == message
    assert clone.header("b") is not message.header("b")


# --- with_header ---


def test_with_header_sets_value() -> None:
    message = Message(EventX()).with_header("k", "v")
    assert message.header("k") == "v"


def test_with_header_leaves_receiver_untouched() -> None:
    original = Message(EventX(), {"k": "old"})
    updated = original.with_header("k", "new")

    assert original.header("k") == "old"
    assert updated.header("k") == "new"
    assert updated is not original


def test_with_header_overwrites_existing_value() -> None:
    message = Message(EventX(), {"k": 1}).with_header("k", 2)
    assert message.header("k") == 2


def test_with_header_shares_payload_reference() -> None:
    payload = EventX()
    message = Message(payload).with_header("k", 1).with_headers({"j": 2})
    assert message.payload is payload


def test_header_keys_are_case_sensitive() -> None:
    message = Message(EventX()).with_header("Key", 1).with_header("key", 2)
    assert message.header("Key") == 1
    assert message.header("key") == 2


@pytest.mark.parametrize(
    "value",
    [0, -7, "text", True, False, 1.5, [1, [2, 3]], ("a", "b"), {"n": 1}, None],
)
def test_with_header_accepts_supported_values(value: object) -> None:
    message = Message(EventX()).with_header("k", value)  # type: ignore[arg-type]
    assert message.header("k") == value
    assert "k" in message.headers


def test_with_header_accepts_aggregate_root_id() -> None:
    aggregate_id = UuidAggregateRootId.generate()
    message = Message(EventX()).with_header(Header.AGGREGATE_ROOT_ID, aggregate_id)
    assert message.aggregate_root_id() is aggregate_id


@pytest.mark.parametrize("key", ["", 1, None])
def test_with_header_rejects_invalid_keys(key: object) -> None:
    with pytest.raises(InvalidHeaderError, match="non-empty string") as exc:
        Message(EventX()).with_header(key, 1)  # type: ignore[arg-type]
    assert exc.value.key == key


def test_with_header_rejects_unsupported_values() -> None:
    with pytest.raises(InvalidHeaderError, match="unsupported value type") as exc:
        Message(EventX()).with_header("k", object())  # type: ignore[arg-type]
    assert exc.value.key == "k"
    assert isinstance(exc.value, ValueError)
    assert isinstance(exc.value, MessageError)


# --- with_headers ---


def test_with_headers_existing_values_win() -> None:
    message = Message(EventX(), {"A": 1}).with_headers({"A": 2, "B": 3})

    assert message.header("A") == 1
    assert message.header("B") == 3


def test_with_headers_adds_new_keys_after_existing_ones() -> None:
    message = Message(EventX(), {"A": 1}).with_headers({"B": 2, "A": 9, "C": 3})
    assert list(message.headers.items()) == [("A", 1), ("B", 2), ("C", 3)]


def test_with_headers_keeps_existing_none_value() -> None:
    """A key explicitly set to None is still present and is not replaced."""
    message = Message(EventX(), {"A": None}).with_headers({"A": 1})
    assert "A" in message.headers
    assert message.header("A") is None


def test_with_headers_leaves_receiver_untouched() -> None:
    original = Message(EventX(), {"A": 1})
    original.with_headers({"B": 2})
    assert original.headers == {"A": 1}


def test_with_headers_with_empty_mapping_returns_equal_copy() -> None:
    original = Message(EventX(), {"A": 1})
    copied = original.with_headers({})
    assert copied == original
    assert copied is not original


def test_with_headers_validates_incoming_entries() -> None:
    with pytest.raises(InvalidHeaderError):
        Message(EventX()).with_headers({"": 1})


# --- Accessors ---


def test_aggregate_version_scenario() -> None:
    message = Message(EventX()).with_header("aggregate_root_version", 5)
    assert message.aggregate_version() == 5


def test_aggregate_version_reads_numeric_strings() -> None:
    message = Message(EventX(), {Header.AGGREGATE_ROOT_VERSION: "7"})
    assert message.aggregate_version() == 7


def test_aggregate_version_missing_raises() -> None:
    with pytest.raises(MissingVersionError, match="has none"):
        Message(EventX()).aggregate_version()


def test_aggregate_version_explicit_none_raises() -> None:
    message = Message(EventX(), {Header.AGGREGATE_ROOT_VERSION: None})
    with pytest.raises(MissingVersionError):
        message.aggregate_version()


def test_missing_version_is_a_runtime_error() -> None:
    with pytest.raises(RuntimeError):
        Message(EventX()).aggregate_version()


def test_aggregate_version_not_an_integer_raises() -> None:
    message = Message(EventX(), {Header.AGGREGATE_ROOT_VERSION: "seven"})
    with pytest.raises(InvalidHeaderError, match="integer") as exc:
        message.aggregate_version()
    assert exc.value.value == "seven"


def test_empty_message_returns_none_for_optional_accessors() -> None:
    message = Message(EventX())

    assert message.aggregate_root_id() is None
    assert message.aggregate_root_type() is None
    assert message.aggregate_root_id_type() is None
    assert message.event_id() is None
    assert message.event_type() is None
    assert message.header("anything") is None


def test_aggregate_accessors_return_stored_values_unchanged() -> None:
    aggregate_id = UuidAggregateRootId.generate()
    message = (
        Message(EventX())
        .with_header(Header.AGGREGATE_ROOT_ID, aggregate_id)
        .with_header(Header.AGGREGATE_ROOT_TYPE, "order")
        .with_header(Header.AGGREGATE_ROOT_ID_TYPE, "uuid")
        .with_header(Header.EVENT_ID, "evt-1")
        .with_header(Header.EVENT_TYPE, "shop.order_placed")
    )

    assert message.aggregate_root_id() == aggregate_id
    assert message.aggregate_root_type() == "order"
    assert message.aggregate_root_id_type() == "uuid"
    assert message.event_id() == "evt-1"
    assert message.event_type() == "shop.order_placed"


def test_aggregate_root_id_is_not_parsed() -> None:
    """A plain string stored as id comes back as that string."""
    message = Message(EventX(), {Header.AGGREGATE_ROOT_ID: "raw-id"})
    assert message.aggregate_root_id() == "raw-id"
