from __future__ import annotations

import math
import re

RGB = tuple[int, int, int]
HSL = tuple[int, int, int]

_HEX_PATTERN = re.compile(r"^#?([a-f\d]{2})([a-f\d]{2})([a-f\d]{2})$", re.IGNORECASE)


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round like ``Math.round``: halves always go towards +infinity."""
    scale = 10**ndigits
    return math.floor(value * scale + 0.5) / scale


def rgb_to_hex(r: int, g: int, b: int) -> str:
    return f"#{r:02X}{g:02X}{b:02X}"


def hex_to_rgb(value: str) -> RGB:
    # Malformed input maps to black instead of raising.
    match = _HEX_PATTERN.match(value)
    if match is None:
        return (0, 0, 0)
    return (
        int(match.group(1), 16),
        int(match.group(2), 16),
        int(match.group(3), 16),
    )


def rgb_to_hsl(r: int, g: int, b: int) -> HSL:
    red, green, blue = r / 255.0, g / 255.0, b / 255.0
    high = max(red, green, blue)
    low = min(red, green, blue)
    lightness = (high + low) / 2.0

    hue = 0.0
    saturation = 0.0
    if high != low:
        delta = high - low
        if lightness > 0.5:
            saturation = delta / (2.0 - high - low)
        else:
            saturation = delta / (high + low)

        if high == red:
            hue = ((green - blue) / delta + (6.0 if green < blue else 0.0)) / 6.0
        elif high == green:
            hue = ((blue - red) / delta + 2.0) / 6.0
        else:
            hue = ((red - green) / delta + 4.0) / 6.0

    return (
        int(round_half_up(hue * 360.0)) % 360,
        int(round_half_up(saturation * 100.0)),
        int(round_half_up(lightness * 100.0)),
    )


def hex_to_hsl(value: str) -> HSL:
    return rgb_to_hsl(*hex_to_rgb(value))
