"""
Configuration helpers for localstore.

A store is described by a StoreSettings object. The user's home directory is
resolved through a HomeProvider so tests (and embedding applications) can
substitute a fixed directory instead of the real one.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Protocol

from localstore.core.errors import HomeDirectoryError


@dataclass(frozen=True)
class StoreSettings:
    """Typed description of one application's document directory."""

    app_dir: str
    default_name: str
    extension: str = ".json"
    dir_mode: int = 0o777
    file_mode: int = 0o666


class HomeProvider(Protocol):
    def home_dir(self) -> Path: ...


class CurrentUserHome:
    """Resolve the home directory of the user running the process."""

    def home_dir(self) -> Path:
        try:
            home = Path.home()
        except (RuntimeError, KeyError) as exc:
            raise HomeDirectoryError(f"could not determine home directory: {exc}") from exc
        return home


@dataclass(frozen=True)
class FixedHome:
    """Always answer with the same directory."""

    path: Path

    def home_dir(self) -> Path:
        return Path(self.path)


@lru_cache
def default_home_provider() -> HomeProvider:
    return CurrentUserHome()
