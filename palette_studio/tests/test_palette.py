from __future__ import annotations

import json

import pytest

from palette_studio.src.palette_kernel.palette import (
    PaletteValidationError,
    load_palette_json,
)


def test_load_palette_from_exported_file(tmp_path):
    palette_file = tmp_path / "palette.json"
    palette_file.write_text(
        json.dumps(
            {
                "colors": [
                    {
                        "hex": "#C81E1E",
                        "rgb": {"r": 200, "g": 30, "b": 30},
                        "hsl": {"h": 0, "s": 74, "l": 45},
                        "percentage": 70,
                    },
                    {
                        "hex": "#1E3CC8",
                        "rgb": {"r": 30, "g": 60, "b": 200},
                        "hsl": {"h": 229, "s": 74, "l": 45},
                        "percentage": 30,
                    },
                ],
                "exportedAt": "2024-05-01T12:30:00+00:00",
            }
        ),
        encoding="utf-8",
    )

    colors = load_palette_json(palette_file)

    assert len(colors) == 2
    assert colors[0].hex == "#C81E1E"
    assert colors[0].rgb == (200, 30, 30)
    assert colors[1].hsl == (229, 74, 45)
    assert colors[1].percentage == 30


def test_load_palette_from_string_path_and_bare_list(tmp_path):
    palette_file = tmp_path / "list.json"
    palette_file.write_text(json.dumps([{"hex": "1e78d2"}]), encoding="utf-8")

    colors = load_palette_json(str(palette_file))

    assert colors[0].hex == "#1E78D2"
    assert colors[0].rgb == (30, 120, 210)
    assert colors[0].hsl == (210, 75, 47)
    assert colors[0].percentage is None


def test_load_palette_from_bytes():
    colors = load_palette_json(b'{"colors": [{"hex": "#000000", "percentage": 12}]}')
    assert colors[0].percentage == 12


@pytest.mark.parametrize(
    "payload",
    [
        '{"palette": []}',
        '"#FF0000"',
        "[]",
        "{not json",
        '[{"hex": "#XYZXYZ"}]',
        '["#FF0000"]',
        '[{"hex": "#FF0000", "rgb": {"r": "red"}}]',
        '[{"hex": "#FF0000", "percentage": "half"}]',
        '[{"hex": "#FF0000", "rgb": {"r": 300, "g": -1, "b": 0}}]',
        '[{"hex": "#FF0000", "rgb": {"r": 0, "g": 0, "b": 255}}]',
        '[{"hex": "#FF0000", "hsl": {"h": 999, "s": 100, "l": 50}}]',
        '[{"hex": "#FF0000", "hsl": {"h": 0, "s": 100, "l": -5}}]',
        '[{"hex": "#FF0000", "hsl": {"h": 240, "s": 100, "l": 50}}]',
        '[{"hex": "#FF0000", "percentage": 150}]',
    ],
)
def test_invalid_palette_payload_raises(payload):
    with pytest.raises(PaletteValidationError):
        load_palette_json(payload)


def test_missing_palette_file_raises(tmp_path):
    with pytest.raises(PaletteValidationError):
        load_palette_json(str(tmp_path / "missing.json"))


def test_rounded_hsl_within_one_step_is_accepted():
    colors = load_palette_json(
        '[{"hex": "#FF0001", "rgb": [255, 0, 1], "hsl": {"h": 359, "s": 100, "l": 50}}]'
    )

    assert colors[0].rgb == (255, 0, 1)
    assert colors[0].hsl == (359, 100, 50)


def test_fractional_percentage_rounds_half_up():
    colors = load_palette_json(
        '[{"hex": "#FF0000", "percentage": 33.7}, {"hex": "#0000FF", "percentage": 12.5}]'
    )

    assert [c.percentage for c in colors] == [34, 13]
