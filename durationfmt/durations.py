"""Conversion between :class:`~datetime.timedelta` and compact duration text.

Durations are written as a whole number followed by a single unit letter:
seconds (``s``), minutes (``m``) or hours (``h``), e.g. ``"10s"``, ``"5m"`` or
``"3h"``. Only whole seconds are modelled; sub-second precision is dropped.
"""

import re
from datetime import timedelta
from typing import Optional, Union

from .errors import (
    DurationOverflowError,
    MalformedDurationError,
    UnrecognizedDurationError,
)

UNITS = {"s": 1, "m": 60, "h": 3600}
MAX_SECONDS = 2**64 - 1
_MAX_DIGITS = len(str(MAX_SECONDS))

_DIGITS = re.compile(r"[0-9]+")
_TIMEDELTA_MAX_SECONDS = timedelta.max.days * 86400 + timedelta.max.seconds

DurationLike = Union[timedelta, int]


def _whole_seconds(duration: DurationLike) -> int:
    if isinstance(duration, timedelta):
        if duration < timedelta(0):
            raise ValueError(f"Negative durations are not supported: {duration}")
        # microseconds are truncated
        return duration.days * 86400 + duration.seconds
    if isinstance(duration, bool) or not isinstance(duration, int):
        raise TypeError(
            f"Expected timedelta or int seconds, got {type(duration).__name__}"
        )
    if duration < 0:
        raise ValueError(f"Negative durations are not supported: {duration}")
    if duration > MAX_SECONDS:
        raise ValueError(f"Duration exceeds {MAX_SECONDS} seconds: {duration}")
    return duration


def encode(duration: DurationLike) -> str:
    """Render a duration using the largest unit it reaches.

    Hours are used from one hour upwards, minutes from one minute upwards and
    seconds below that. Division truncates, so ``3661`` seconds becomes
    ``"1h"``; the remainder is not written.

    Parameters
    ----------
    duration:
        A non-negative :class:`~datetime.timedelta` or whole number of seconds.

    Returns
    -------
    str
        Text of the form ``"<n>h"``, ``"<n>m"`` or ``"<n>s"``.

    Raises
    ------
    TypeError
        If ``duration`` is neither a timedelta nor an int.
    ValueError
        If ``duration`` is negative or beyond ``MAX_SECONDS``.
    """

    seconds = _whole_seconds(duration)
    if seconds >= UNITS["h"]:
        return f"{seconds // UNITS['h']}h"
    if seconds >= UNITS["m"]:
        return f"{seconds // UNITS['m']}m"
    return f"{seconds}s"


def try_decode(text: str) -> Optional[timedelta]:
    """Decode ``text`` or return ``None`` when its unit is not recognized.

    A known unit with a bad number still raises, only the unit check is
    relaxed.
    """

    if not isinstance(text, str):
        raise TypeError(f"Expected str, got {type(text).__name__}")
    multiplier = UNITS.get(text[-1:])
    if multiplier is None:
        return None

    value = text[:-1]
    if not _DIGITS.fullmatch(value):
        raise MalformedDurationError(text)
    significant = value.lstrip("0") or "0"
    if len(significant) > _MAX_DIGITS:
        raise MalformedDurationError(text)
    try:
        amount = int(significant)
    except ValueError as exc:
        raise MalformedDurationError(text) from exc
    if amount > MAX_SECONDS:
        raise MalformedDurationError(text)

    seconds = amount * multiplier
    if seconds > min(MAX_SECONDS, _TIMEDELTA_MAX_SECONDS):
        raise DurationOverflowError(text)
    return timedelta(seconds=seconds)


def decode(text: str) -> timedelta:
    """Convert duration text such as ``"5m"`` into a :class:`~datetime.timedelta`.

    Parameters
    ----------
    text:
        Digits followed by ``s``, ``m`` or ``h``. No sign, fraction or
        whitespace is accepted.

    Returns
    -------
    datetime.timedelta
        The decoded whole-second duration.

    Raises
    ------
    UnrecognizedDurationError
        If the last character is not a known unit (including empty text).
    MalformedDurationError
        If the number before the unit is empty, not plain digits, or larger
        than ``MAX_SECONDS``.
    DurationOverflowError
        If the number times the unit does not fit the supported range.
    """

    duration = try_decode(text)
    if duration is None:
        raise UnrecognizedDurationError(text)
    return duration
