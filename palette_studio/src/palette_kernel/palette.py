from __future__ import annotations

import json
import re
from pathlib import Path

from .convert import hex_to_rgb, rgb_to_hex, rgb_to_hsl, round_half_up
from .models import Color

_HEX_PATTERN = re.compile(r"^#?[0-9A-Fa-f]{6}$")


class PaletteValidationError(ValueError):
    pass


def load_palette_json(source: str | bytes | Path) -> list[Color]:
    """Parse a palette previously written by ``export_json``.

    ``source`` is a JSON document (``str``/``bytes``) or a path to a ``.json``
    file. A bare list of color objects is accepted as well as the
    ``{"colors": [...]}`` envelope.
    """
    try:
        payload = json.loads(_read_source(source))
    except json.JSONDecodeError as exc:
        raise PaletteValidationError(f"palette is not valid json: {exc}") from exc

    if isinstance(payload, dict):
        if "colors" not in payload or not isinstance(payload["colors"], list):
            raise PaletteValidationError(
                "json palette must be a list or include a 'colors' list"
            )
        records = payload["colors"]
    elif isinstance(payload, list):
        records = payload
    else:
        raise PaletteValidationError(
            "json palette must be a list or object with 'colors'"
        )

    colors: list[Color] = []
    for idx, record in enumerate(records, start=1):
        if not isinstance(record, dict):
            raise PaletteValidationError(
                f"invalid palette entry at colors[{idx}] (expected object)"
            )
        colors.append(_parse_color(record, f"colors[{idx}]"))

    if not colors:
        raise PaletteValidationError("palette has no usable entries")
    return colors


def _read_source(source: str | bytes | Path) -> str:
    if isinstance(source, bytes):
        return source.decode("utf-8")
    if isinstance(source, Path):
        return source.read_text(encoding="utf-8")
    if source.lstrip().startswith(("{", "[")):
        return source

    path = Path(source)
    if not path.exists():
        raise PaletteValidationError(f"palette file does not exist: {path}")
    return path.read_text(encoding="utf-8")


def _parse_color(record: dict[str, object], location: str) -> Color:
    hex_value = record.get("hex")
    if not isinstance(hex_value, str) or not _HEX_PATTERN.match(hex_value.strip()):
        raise PaletteValidationError(f"{location}: invalid hex color {hex_value!r}")

    rgb = hex_to_rgb(hex_value.strip())
    if "rgb" in record:
        parsed_rgb = _parse_triplet(record["rgb"], ("r", "g", "b"), f"{location}.rgb")
        _check_ranges(parsed_rgb, (256, 256, 256), f"{location}.rgb")
        if parsed_rgb != rgb:
            raise PaletteValidationError(
                f"{location}: rgb {parsed_rgb} does not match hex {hex_value!r}"
            )

    hsl = rgb_to_hsl(*rgb)
    if "hsl" in record:
        parsed_hsl = _parse_triplet(record["hsl"], ("h", "s", "l"), f"{location}.hsl")
        _check_ranges(parsed_hsl, (360, 101, 101), f"{location}.hsl")
        # HSL is integer-rounded, so allow one step of drift per component.
        hue_drift = abs(parsed_hsl[0] - hsl[0])
        if (
            min(hue_drift, 360 - hue_drift) > 1
            or abs(parsed_hsl[1] - hsl[1]) > 1
            or abs(parsed_hsl[2] - hsl[2]) > 1
        ):
            raise PaletteValidationError(
                f"{location}: hsl {parsed_hsl} does not match hex {hex_value!r}"
            )
        hsl = parsed_hsl

    percentage = record.get("percentage")
    if percentage is not None:
        if isinstance(percentage, bool) or not isinstance(percentage, (int, float)):
            raise PaletteValidationError(
                f"{location}: percentage must be numeric, got {percentage!r}"
            )
        percentage = int(round_half_up(percentage))
        if not 0 <= percentage <= 100:
            raise PaletteValidationError(
                f"{location}: percentage must be within 0..100, got {percentage}"
            )

    name = record.get("name")
    return Color(
        hex=rgb_to_hex(*rgb),
        rgb=rgb,
        hsl=hsl,
        name=str(name) if name is not None else None,
        percentage=percentage,
    )


def _parse_triplet(
    raw: object, keys: tuple[str, str, str], location: str
) -> tuple[int, int, int]:
    if isinstance(raw, dict):
        values = [raw.get(key) for key in keys]
    elif isinstance(raw, list) and len(raw) == 3:
        values = list(raw)
    else:
        raise PaletteValidationError(
            f"{location}: expected an object with {'/'.join(keys)} or a 3-item list"
        )

    try:
        first, second, third = (int(value) for value in values)
    except (TypeError, ValueError) as exc:
        raise PaletteValidationError(
            f"{location}: invalid values, expected integer {'/'.join(keys)}"
        ) from exc
    return first, second, third


def _check_ranges(
    values: tuple[int, int, int], limits: tuple[int, int, int], location: str
) -> None:
    for value, limit in zip(values, limits):
        if not 0 <= value < limit:
            raise PaletteValidationError(
                f"{location}: value {value} outside 0..{limit - 1}"
            )
