import os
from pathlib import Path

import pytest
from pydantic import ValidationError

from mime_typemap.config.settings import Settings, get_settings


@pytest.mark.unit
def test_defaults():
    settings = Settings(_env_file=None)
    assert settings.typemap_paths == []
    assert settings.typemap_url is None
    assert settings.encoding == "utf-8"
    assert settings.http_timeout == 10.0
    assert settings.load_builtin_types is True
    assert settings.strict is False
    assert settings.log_level == "INFO"


@pytest.mark.unit
def test_reads_prefixed_environment(monkeypatch, tmp_path: Path):
    first = tmp_path / "a.types"
    second = tmp_path / "b.types"
    monkeypatch.setenv("MIME_TYPEMAP_TYPEMAP_PATH", f"{first}{os.pathsep}{second}")
    monkeypatch.setenv("MIME_TYPEMAP_TYPEMAP_URL", "https://example.com/mime.types")
    monkeypatch.setenv("MIME_TYPEMAP_LOAD_BUILTIN_TYPES", "false")
    monkeypatch.setenv("MIME_TYPEMAP_LOG_LEVEL", "debug")

    settings = Settings(_env_file=None)
    assert settings.typemap_paths == [first, second]
    assert settings.typemap_url == "https://example.com/mime.types"
    assert settings.load_builtin_types is False
    assert settings.log_level == "DEBUG"


@pytest.mark.unit
def test_rejects_non_http_url(monkeypatch):
    monkeypatch.setenv("MIME_TYPEMAP_TYPEMAP_URL", "ftp://example.com/mime.types")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


@pytest.mark.unit
def test_home_is_expanded(monkeypatch):
    monkeypatch.setenv("MIME_TYPEMAP_TYPEMAP_PATH", "~/.mime.types")
    settings = Settings(_env_file=None)
    assert settings.typemap_paths == [Path("~/.mime.types").expanduser()]


@pytest.mark.unit
def test_get_settings_is_cached(monkeypatch):
    first = get_settings()
    assert get_settings() is first
    monkeypatch.setenv("MIME_TYPEMAP_STRICT", "true")
    assert get_settings().strict is first.strict
    get_settings.cache_clear()
    assert get_settings().strict is True
