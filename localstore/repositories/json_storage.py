"""
JSON file primitives used by DocumentStore.

Each document is one regular file holding a single JSON value. Writes encode
the whole value in memory and then overwrite the file in place; there is no
temp-file-and-rename step, so a crash mid-write can leave a truncated file.

Decoding is strict: the file must hold exactly one JSON value, and trailing
content after it is a DeserializationError rather than being ignored.
Non-finite floats (nan, inf) have no JSON form and are rejected on encode.
"""

from __future__ import annotations

import logging
import math
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, BinaryIO

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from localstore.core.errors import (
    DeserializationError,
    EndOfInputError,
    SerializationError,
    StorageIOError,
)

logger = logging.getLogger(__name__)

_ANY = TypeAdapter(Any)

DEFAULT_EXTENSION = ".json"
DEFAULT_FILE_MODE = 0o666


def document_path(directory: Path, name: str, extension: str = DEFAULT_EXTENSION) -> Path:
    return Path(directory) / f"{name}{extension}"


def ensure_directory(path: Path, mode: int = 0o777) -> Path:
    """Create *path* (one level only) unless it already exists."""
    try:
        path.stat()
    except FileNotFoundError:
        try:
            path.mkdir(mode=mode)
            logger.debug("created store directory %s", path)
        except FileExistsError:
            pass
        except OSError as exc:
            raise StorageIOError(f"could not create directory {path}: {exc}", path) from exc
    except OSError as exc:
        raise StorageIOError(f"could not stat {path}: {exc}", path) from exc

    if not path.is_dir():
        raise StorageIOError(f"{path} exists and is not a directory", path)
    return path


def open_for_read_write(path: Path, mode: int = DEFAULT_FILE_MODE) -> BinaryIO:
    """
    Open *path* for reading and writing.

    A missing file is created empty and that handle is returned instead; any
    other failure is raised as StorageIOError.
    """
    try:
        return open(path, "r+b")
    except FileNotFoundError:
        pass
    except OSError as exc:
        raise StorageIOError(f"could not open {path}: {exc}", path) from exc

    try:
        fd = os.open(path, os.O_RDWR | os.O_CREAT | os.O_TRUNC, mode)
    except OSError as exc:
        raise StorageIOError(f"could not create {path}: {exc}", path) from exc
    logger.debug("materialized empty document %s", path)
    return os.fdopen(fd, "r+b")


def _check_finite(value: Any) -> None:
    if isinstance(value, float):
        if not math.isfinite(value):
            raise SerializationError(f"unsupported value: {value!r}")
    elif isinstance(value, dict):
        for item in value.values():
            _check_finite(item)
    elif isinstance(value, (list, tuple, set, frozenset)):
        for item in value:
            _check_finite(item)


@lru_cache(maxsize=64)
def _cached_adapter(shape: Any) -> TypeAdapter:
    return TypeAdapter(shape)


def _adapter(shape: Any) -> TypeAdapter:
    if shape is Any:
        return _ANY
    try:
        return _cached_adapter(shape)
    except TypeError:
        # unhashable shape, e.g. Annotated with a dict in its metadata
        return TypeAdapter(shape)


def encode(value: Any) -> bytes:
    """Serialize *value* to compact JSON bytes."""
    try:
        _check_finite(_ANY.dump_python(value))
        return _ANY.dump_json(value)
    except (PydanticSerializationError, TypeError, ValueError) as exc:
        raise SerializationError(f"value of type {type(value).__name__} is not JSON serializable: {exc}") from exc


def decode(raw: bytes, shape: Any = Any) -> Any:
    """Decode one JSON value from *raw* into *shape*."""
    if not raw.strip():
        raise EndOfInputError("unexpected end of JSON input")
    try:
        return _adapter(shape).validate_json(raw)
    except ValidationError as exc:
        raise DeserializationError(str(exc)) from exc


def read_document(path: Path, shape: Any = Any, mode: int = DEFAULT_FILE_MODE) -> Any:
    with open_for_read_write(path, mode) as fh:
        try:
            raw = fh.read()
        except OSError as exc:
            raise StorageIOError(f"could not read {path}: {exc}", path) from exc
    return decode(raw, shape)


def write_document(path: Path, value: Any, mode: int = DEFAULT_FILE_MODE) -> None:
    content = encode(value)
    try:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, mode)
        with os.fdopen(fd, "wb") as fh:
            fh.write(content)
    except OSError as exc:
        raise StorageIOError(f"could not write {path}: {exc}", path) from exc
    logger.debug("wrote %d bytes to %s", len(content), path)
