"""
localstore
==========
Stores named JSON documents in a directory under the user's home and offers
get/set of individual keys inside a document.

Quick start:
    from localstore import DocumentStore
    store = DocumentStore.new(".myapp", "config")
    store.set_default("hello", "world")
    store.get_default("hello")   # "world"
"""

from .core.config import CurrentUserHome, FixedHome, HomeProvider, StoreSettings
from .core.errors import (
    DeserializationError,
    EndOfInputError,
    HomeDirectoryError,
    KeyNotFoundError,
    SerializationError,
    StorageIOError,
    StoreError,
)
from .services.document_store import DocumentStore

__version__ = "0.1.0"
__all__ = [
    "DocumentStore",
    "StoreSettings",
    "HomeProvider",
    "CurrentUserHome",
    "FixedHome",
    "StoreError",
    "HomeDirectoryError",
    "StorageIOError",
    "SerializationError",
    "DeserializationError",
    "EndOfInputError",
    "KeyNotFoundError",
]
