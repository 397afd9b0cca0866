from __future__ import annotations

from dataclasses import replace

from .models import Color

BASIC_COLOR_NAMES: dict[str, str] = {
    "#FF0000": "Red",
    "#00FF00": "Green",
    "#0000FF": "Blue",
    "#FFFF00": "Yellow",
    "#FF00FF": "Magenta",
    "#00FFFF": "Cyan",
    "#FFFFFF": "White",
    "#000000": "Black",
}

DEFAULT_COLOR_NAME = "Color"


def get_color_name(hex_value: str) -> str:
    normalized = hex_value.strip().upper()
    if not normalized.startswith("#"):
        normalized = f"#{normalized}"
    return BASIC_COLOR_NAMES.get(normalized, DEFAULT_COLOR_NAME)


def assign_color_names(colors: list[Color]) -> list[Color]:
    return [replace(color, name=get_color_name(color.hex)) for color in colors]
