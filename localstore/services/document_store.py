"""
Named JSON documents in a per-application directory under the user's home.

Whole documents are loaded and stored with load/store. get/set treat a
document as a flat string-keyed mapping and rewrite the whole file on every
set.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

from localstore.core.config import HomeProvider, StoreSettings, default_home_provider
from localstore.core.errors import EndOfInputError, KeyNotFoundError
from localstore.repositories import json_storage

logger = logging.getLogger(__name__)

KeyValueDocument = dict[str, Any]


class DocumentStore:
    """Load, store and key-level access for JSON documents of one application."""

    def __init__(self, settings: StoreSettings, home: Optional[HomeProvider] = None) -> None:
        provider = home or default_home_provider()
        base = provider.home_dir() / settings.app_dir
        self._settings = settings
        self._base_directory = json_storage.ensure_directory(base, settings.dir_mode)

    @classmethod
    def new(cls, app_dir: str, default_name: str, home: Optional[HomeProvider] = None) -> "DocumentStore":
        return cls(StoreSettings(app_dir=app_dir, default_name=default_name), home=home)

    @property
    def base_directory(self) -> Path:
        return self._base_directory

    @property
    def default_document_name(self) -> str:
        return self._settings.default_name

    @property
    def settings(self) -> StoreSettings:
        return self._settings

    def __repr__(self) -> str:
        return f"DocumentStore({str(self._base_directory)!r}, default={self.default_document_name!r})"

    def path_for(self, name: str) -> Path:
        return json_storage.document_path(self._base_directory, name, self._settings.extension)

    # -------------------------- whole documents --------------------------
    def load(self, name: str, shape: Any = Any) -> Any:
        """
        Decode document *name* into *shape* (any type pydantic can validate).

        A document that was never stored is created empty on disk and then
        fails with EndOfInputError.
        """
        return json_storage.read_document(self.path_for(name), shape, self._settings.file_mode)

    def load_default(self, shape: Any = Any) -> Any:
        return self.load(self.default_document_name, shape)

    def store(self, name: str, value: Any) -> None:
        """Replace document *name* with *value*."""
        json_storage.write_document(self.path_for(name), value, self._settings.file_mode)

    def store_default(self, value: Any) -> None:
        self.store(self.default_document_name, value)

    # -------------------------- key/value --------------------------
    def get(self, name: str, key: str) -> Any:
        """
        Return *key* from document *name*.

        Raises KeyNotFoundError when the document loads but lacks the key. Load
        failures propagate unchanged, so a document that was never stored
        raises EndOfInputError rather than KeyNotFoundError.
        """
        document = self.load(name, KeyValueDocument)
        try:
            return document[key]
        except KeyError:
            raise KeyNotFoundError(key, name) from None

    def get_default(self, key: str) -> Any:
        return self.get(self.default_document_name, key)

    def set(self, name: str, key: str, value: Any) -> None:
        """Insert or overwrite *key* in document *name*, creating the document if needed."""
        try:
            document = self.load(name, KeyValueDocument)
        except EndOfInputError:
            logger.debug("document %s is empty, starting a new mapping", name)
            document = {}
        document[key] = value
        self.store(name, document)

    def set_default(self, key: str, value: Any) -> None:
        self.set(self.default_document_name, key, value)
