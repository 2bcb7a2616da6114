import json
import os
from typing import Any, Dict, Type, TypeVar

from pydantic import BaseModel

from .logging_setup import get_logger

ModelT = TypeVar("ModelT", bound=BaseModel)

log = get_logger("io_document")

SUFFIX = ".json"


def _json_path(path_or_base: str) -> str:
    path = os.path.expanduser(path_or_base)
    return path if path.endswith(SUFFIX) else f"{path}{SUFFIX}"


def resolve_document_path(path_or_base: str) -> str:
    """Return the file to read for ``path_or_base``.

    An existing file wins as given; otherwise ``.json`` is appended to bare
    names so ``config`` and ``config.json`` point at the same document.
    """
    path = os.path.expanduser(path_or_base)
    if os.path.isdir(path):
        raise IsADirectoryError(path)
    return path if os.path.isfile(path) else _json_path(path)


def read_document(path_or_base: str) -> Dict[str, Any]:
    path = resolve_document_path(path_or_base)
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object, got {type(data).__name__}")
    log.debug("loaded %d keys from %s", len(data), path)
    return data


def load_document(path_or_base: str, model: Type[ModelT]) -> ModelT:
    return model.model_validate(read_document(path_or_base))


def save_document(instance: BaseModel, path_or_base: str) -> str:
    path = _json_path(path_or_base)
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(instance.model_dump_json(indent=2))
    log.info("saved %s to %s", type(instance).__name__, path)
    return path
