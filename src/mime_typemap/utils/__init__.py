"""Utility helpers for mime-typemap."""

from .logging import setup_logging

__all__ = ["setup_logging"]
