"""Pydantic field types that store durations as compact text."""

from datetime import timedelta
from typing import Annotated, Any, Optional

from pydantic import BeforeValidator, PlainSerializer

from .durations import decode, encode, try_decode


def _non_negative(value: timedelta) -> timedelta:
    if value < timedelta(0):
        raise ValueError(f"Negative durations are not supported: {value}")
    return value


def _validate_duration(value: Any) -> timedelta:
    if isinstance(value, timedelta):
        return _non_negative(value)
    if isinstance(value, str):
        return decode(value)
    raise ValueError(f"Expected duration text, got {type(value).__name__}")


def _validate_optional_duration(value: Any) -> Optional[timedelta]:
    if value is None:
        return None
    if isinstance(value, timedelta):
        return _non_negative(value)
    if isinstance(value, str):
        return try_decode(value)
    raise ValueError(f"Expected duration text, got {type(value).__name__}")


def _serialize_optional(value: Optional[timedelta]) -> Optional[str]:
    return None if value is None else encode(value)


DurationStr = Annotated[
    timedelta,
    BeforeValidator(_validate_duration),
    PlainSerializer(encode, return_type=str, when_used="json"),
]

# Text with an unknown unit (including "") is read as a missing value.
OptionalDurationStr = Annotated[
    Optional[timedelta],
    BeforeValidator(_validate_optional_duration),
    PlainSerializer(_serialize_optional, return_type=Optional[str], when_used="json"),
]
