"""Utility modules for the HR assistant backend."""

from .text import log_preview, safe_truncate

__all__ = ["log_preview", "safe_truncate"]
