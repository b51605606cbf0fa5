"""Exceptions raised by localstore."""
from __future__ import annotations

from pathlib import Path
from typing import Optional


class StoreError(Exception):
    """Base class for every localstore failure."""


class HomeDirectoryError(StoreError):
    """The current user's home directory could not be determined."""


class StorageIOError(StoreError):
    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.message = message
        self.path = path


class SerializationError(StoreError):
    pass


class DeserializationError(StoreError):
    pass


class EndOfInputError(DeserializationError):
    """The document file holds no JSON value at all (empty or blank)."""


class KeyNotFoundError(StoreError, KeyError):
    def __init__(self, key: str, document: str):
        super().__init__(key)
        self.key = key
        self.document = document

    def __str__(self) -> str:
        return f"key {self.key!r} not found in document {self.document!r}"
