from __future__ import annotations

import dataclasses
import sys
from pathlib import Path

import pytest

# Make the localstore package importable when running from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from localstore.core import config as core_config  # noqa: E402
from localstore.core.errors import HomeDirectoryError  # noqa: E402


def test_settings_defaults_and_immutability():
    settings = core_config.StoreSettings(app_dir=".app", default_name="config")
    assert settings.extension == ".json"
    assert settings.dir_mode == 0o777
    assert settings.file_mode == 0o666
    with pytest.raises(dataclasses.FrozenInstanceError):
        settings.app_dir = ".other"  # type: ignore[misc]


def test_current_user_home_uses_path_home(tmp_path, monkeypatch):
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))
    assert core_config.CurrentUserHome().home_dir() == tmp_path


def test_current_user_home_wraps_lookup_failure(monkeypatch):
    def _no_home(cls):
        raise RuntimeError("Could not determine home directory.")

    monkeypatch.setattr(Path, "home", classmethod(_no_home))
    with pytest.raises(HomeDirectoryError):
        core_config.CurrentUserHome().home_dir()


def test_fixed_home_returns_given_directory(tmp_path):
    assert core_config.FixedHome(tmp_path).home_dir() == tmp_path
    assert core_config.FixedHome(str(tmp_path)).home_dir() == tmp_path


def test_default_home_provider_is_cached():
    core_config.default_home_provider.cache_clear()
    provider = core_config.default_home_provider()
    assert isinstance(provider, core_config.CurrentUserHome)
    assert core_config.default_home_provider() is provider
