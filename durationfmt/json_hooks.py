"""Hooks for the standard library :mod:`json` module."""

import json
from datetime import timedelta
from typing import Any, Callable, Dict, Iterable

from .durations import decode, encode
from .errors import MalformedDurationError

ObjectHook = Callable[[Dict[str, Any]], Dict[str, Any]]


class DurationJSONEncoder(json.JSONEncoder):
    def default(self, obj: Any) -> Any:
        if isinstance(obj, timedelta):
            return encode(obj)
        return super().default(obj)


def duration_object_hook(fields: Iterable[str]) -> ObjectHook:
    """Build an ``object_hook`` that decodes the given keys of every object.

    Keys not listed are left alone. A listed key holding anything but a string
    raises :class:`~durationfmt.errors.MalformedDurationError`.
    """

    names = frozenset(fields)

    def hook(dct: Dict[str, Any]) -> Dict[str, Any]:
        for key in names.intersection(dct):
            value = dct[key]
            if not isinstance(value, str):
                raise MalformedDurationError(str(value))
            dct[key] = decode(value)
        return dct

    return hook


def dumps(obj: Any, **kwargs: Any) -> str:
    kwargs.setdefault("cls", DurationJSONEncoder)
    return json.dumps(obj, **kwargs)


def loads(text: str, fields: Iterable[str], **kwargs: Any) -> Any:
    return json.loads(text, object_hook=duration_object_hook(fields), **kwargs)
