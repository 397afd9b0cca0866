from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class ExtractionSettings:
    sample_target: int = 1000
    min_alpha: int = 128
    max_brightness: int = 245
    min_brightness: int = 10
    default_color_count: int = 5
    http_timeout: float = 10.0

    @classmethod
    def from_env(cls) -> ExtractionSettings:
        defaults = cls()
        return cls(
            sample_target=int(
                os.environ.get("PALETTE_SAMPLE_TARGET", defaults.sample_target)
            ),
            min_alpha=int(os.environ.get("PALETTE_MIN_ALPHA", defaults.min_alpha)),
            max_brightness=int(
                os.environ.get("PALETTE_MAX_BRIGHTNESS", defaults.max_brightness)
            ),
            min_brightness=int(
                os.environ.get("PALETTE_MIN_BRIGHTNESS", defaults.min_brightness)
            ),
            default_color_count=int(
                os.environ.get("PALETTE_COLOR_COUNT", defaults.default_color_count)
            ),
            http_timeout=float(
                os.environ.get("PALETTE_HTTP_TIMEOUT", defaults.http_timeout)
            ),
        )


LOG_LEVEL = os.environ.get("PALETTE_LOG_LEVEL", "WARNING")
