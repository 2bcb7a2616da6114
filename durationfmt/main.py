import logging
import sys
from datetime import timedelta
from typing import Dict, List, Optional

from pydantic import Field, create_model

from .cli import parse_args
from .durations import decode, encode
from .fields import DurationStr
from .io_document import load_document
from .logging_setup import configure_logging, get_logger

log = get_logger("main")


def whole_seconds(duration: timedelta) -> int:
    return duration // timedelta(seconds=1)


def check_document(path: str, fields: List[str]) -> Dict[str, timedelta]:
    """Load ``path`` and decode each named key as duration text."""
    definitions = {
        f"field_{i}": (DurationStr, Field(alias=name)) for i, name in enumerate(fields)
    }
    model = create_model("DurationDocument", **definitions)
    document = load_document(path, model)
    return {name: getattr(document, f"field_{i}") for i, name in enumerate(fields)}


def main(argv: Optional[List[str]] = None):
    params = parse_args(argv if argv is not None else sys.argv[1:])
    configure_logging(logging.DEBUG if params.verbose else logging.WARNING)
    try:
        if params.command == "encode":
            print(encode(params.seconds))
        elif params.command == "decode":
            print(whole_seconds(decode(params.text)))
        elif params.command == "check":
            for name, duration in check_document(params.document, params.fields).items():
                print(f"{name}: {whole_seconds(duration)}s ({encode(duration)})")
    except (ValueError, OSError) as exc:
        log.debug("command %s failed", params.command, exc_info=True)
        print(f"[error] {exc}")
        sys.exit(1)


if __name__ == "__main__":  # pragma: no cover - exercised via CLI invocation
    main(sys.argv[1:])
