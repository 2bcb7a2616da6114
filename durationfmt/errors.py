"""Exceptions raised while decoding textual durations."""

from typing import Optional


class DurationError(ValueError):
    """Base class for duration decoding failures."""

    def __init__(self, message: str, text: Optional[str] = None):
        super().__init__(message)
        self.text = text


class UnrecognizedDurationError(DurationError):
    """The text does not end in one of the ``s``, ``m`` or ``h`` units.

    Callers may treat this as an absent value rather than an invalid one.
    """

    def __init__(self, text: Optional[str] = None):
        super().__init__("invalid duration format", text)


class MalformedDurationError(DurationError):
    """The unit is known but the numeric part is not a plain integer."""

    def __init__(self, text: Optional[str] = None):
        super().__init__("Invalid duration format", text)

    def __str__(self) -> str:
        if self.text is None:
            return super().__str__()
        return f"Invalid duration format: {self.text!r}"


class DurationOverflowError(DurationError):
    def __init__(self, text: Optional[str] = None):
        super().__init__(f"Duration out of range: {text!r}", text)
