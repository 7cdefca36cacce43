"""Utility modules for the lingua backend."""

from .text import safe_truncate

__all__ = ["safe_truncate"]
