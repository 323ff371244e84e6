"""Chart assembly entry points."""

from __future__ import annotations

from .natal import ChartResult, build_chart, provider_from_settings

__all__ = ["ChartResult", "build_chart", "provider_from_settings"]
