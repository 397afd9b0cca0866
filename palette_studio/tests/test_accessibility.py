from __future__ import annotations

import pytest

from palette_studio.src.palette_kernel import accessibility
from palette_studio.src.palette_kernel.accessibility import (
    BLACK,
    WHITE,
    accessibility_report,
    best_text_color,
    brightness,
    contrast_ratio,
    get_wcag_level,
    is_dark_color,
    palette_accessibility,
    relative_luminance,
)
from palette_studio.src.palette_kernel.models import Color


def test_relative_luminance_of_references():
    assert relative_luminance((255, 255, 255)) == pytest.approx(1.0)
    assert relative_luminance((0, 0, 0)) == 0.0
    assert relative_luminance((255, 0, 0)) == pytest.approx(0.2126)


def test_white_on_black_is_maximum_contrast():
    assert contrast_ratio(WHITE, BLACK) == pytest.approx(21.0)


def test_contrast_is_symmetric_and_one_against_itself():
    teal = Color.from_hex("#1E8C8C")
    assert contrast_ratio(teal, teal) == pytest.approx(1.0)
    assert contrast_ratio(teal, WHITE) == contrast_ratio(WHITE, teal)


@pytest.mark.parametrize(
    "ratio, level",
    [
        (21.0, "AAA"),
        (7.0, "AAA"),
        (6.99, "AA"),
        (4.5, "AA"),
        (4.49, "AA (Large text)"),
        (3.0, "AA (Large text)"),
        (2.9, "Fail"),
        (1.0, "Fail"),
    ],
)
def test_wcag_levels(ratio, level):
    assert get_wcag_level(ratio) == level


def test_palette_accessibility_uses_best_reference():
    red = Color.from_hex("#FF0000")
    blue = Color.from_hex("#0000FF")

    scores = palette_accessibility([red, blue])

    assert scores[0].contrast == 5.25
    assert scores[0].wcag == "AA"
    assert scores[0].readable is True
    assert scores[1].contrast == 8.59
    assert scores[1].wcag == "AAA"


def test_scores_are_parallel_to_palette():
    colors = [Color.from_hex(h) for h in ("#FFFFFF", "#777777", "#000000")]

    scores = palette_accessibility(colors)

    assert len(scores) == 3
    assert scores[0].contrast == 21.0
    assert scores[1].wcag == "AA"
    assert scores[2].contrast == 21.0


def test_best_text_color():
    assert best_text_color(WHITE) == BLACK
    assert best_text_color(BLACK) == WHITE
    assert best_text_color(Color.from_hex("#0000FF")) == WHITE
    assert best_text_color(Color.from_hex("#FFFF00")) == BLACK


def test_brightness_and_darkness():
    assert brightness((255, 255, 255)) == 255
    assert brightness((0, 0, 255)) == 29
    assert brightness((255, 255, 0)) == 226
    assert is_dark_color(Color.from_hex("#0000FF")) is True
    assert is_dark_color(Color.from_hex("#FFFF00")) is False


def test_accessibility_report_aggregates_scores():
    report = accessibility_report([Color.from_hex("#0000FF"), Color.from_hex("#FF0000")])

    assert [s.wcag for s in report.scores] == ["AAA", "AA"]
    assert report.average_contrast == 6.92
    assert report.all_wcag_aa is True
    assert report.all_wcag_aaa is False


def test_accessibility_report_all_aaa():
    report = accessibility_report([WHITE, BLACK])

    assert report.average_contrast == 21.0
    assert report.all_wcag_aaa is True
    assert report.to_dict()["scores"][0] == {
        "contrast": 21.0,
        "wcag": "AAA",
        "readable": True,
    }


def test_accessibility_report_rejects_empty_palette():
    with pytest.raises(ValueError):
        accessibility_report([])


def test_best_text_color_tie_returns_black(monkeypatch):
    monkeypatch.setattr(accessibility, "contrast_ratio", lambda color_a, color_b: 4.58)

    assert accessibility.best_text_color(Color.from_hex("#767676")) == BLACK
