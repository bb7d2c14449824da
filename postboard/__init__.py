"""In-memory posts service with token authentication."""

from __future__ import annotations

from typing import Any


def create_app(*args: Any, **kwargs: Any):
    """Factory function that returns the Flask application."""

    from .app import create_app as _create_app

    return _create_app(*args, **kwargs)


__all__ = ["create_app"]
