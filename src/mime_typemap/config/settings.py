"""Configuration settings for mime-typemap.

This module defines where the shared registry loads its type maps from
and how sources are read. Settings are loaded from ``MIME_TYPEMAP_*``
environment variables and ``.env`` files.
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import List, Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables.

    :param typemap_path: Type-map files, separated by ``os.pathsep``
    :type typemap_path: Optional[str]
    :param typemap_url: HTTP(S) type map loaded after the files
    :type typemap_url: Optional[str]
    :param encoding: Encoding of type-map files and responses
    :type encoding: str
    :param http_timeout: Timeout in seconds for URL sources
    :type http_timeout: float
    :param load_builtin_types: Seed the shared registry with built-in types
    :type load_builtin_types: bool
    :param strict: Raise instead of logging when a configured source fails
    :type strict: bool
    :param log_level: Logging level for the command line tool
    :type log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    """

    model_config = SettingsConfigDict(
        env_prefix="MIME_TYPEMAP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    typemap_path: Optional[str] = Field(
        None, description="Type-map files separated by the path separator"
    )
    typemap_url: Optional[str] = Field(None, description="HTTP(S) type-map URL")
    encoding: str = Field("utf-8", description="Encoding of type-map sources")
    http_timeout: float = Field(10.0, gt=0, description="URL source timeout")
    load_builtin_types: bool = Field(
        True, description="Seed the shared registry with built-in types"
    )
    strict: bool = Field(
        False, description="Raise when a configured source fails to load"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        "INFO", description="Logging level"
    )

    @field_validator("typemap_url")
    @classmethod
    def validate_typemap_url(cls, v: Optional[str]) -> Optional[str]:
        """Require an http:// or https:// URL when one is configured.

        :param v: The configured URL
        :type v: Optional[str]
        :return: The URL, or None if empty
        :rtype: Optional[str]
        """
        if not v:
            return None
        if not v.lower().startswith(("http://", "https://")):
            raise ValueError("typemap_url must be an http:// or https:// URL")
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        return v.upper() if isinstance(v, str) else v

    @property
    def typemap_paths(self) -> List[Path]:
        """Configured type-map files, user-expanded, in load order."""
        if not self.typemap_path:
            return []
        return [
            Path(p).expanduser() for p in self.typemap_path.split(os.pathsep) if p
        ]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()
