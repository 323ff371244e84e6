"""baziengine command line interface package."""

from __future__ import annotations

from ..boot import configure_logging
from .app import app

__all__ = ["app", "main"]


def main() -> None:
    """Console entry point."""

    configure_logging()
    app(prog_name="baziengine")
