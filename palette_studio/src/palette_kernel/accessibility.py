from __future__ import annotations

from .convert import RGB, round_half_up
from .models import AccessibilityReport, AccessibilityScore, Color

WCAG_AAA = "AAA"
WCAG_AA = "AA"
WCAG_AA_LARGE = "AA (Large text)"
WCAG_FAIL = "Fail"

WHITE = Color(hex="#FFFFFF", rgb=(255, 255, 255), hsl=(0, 0, 100))
BLACK = Color(hex="#000000", rgb=(0, 0, 0), hsl=(0, 0, 0))


def relative_luminance(rgb: RGB) -> float:
    red, green, blue = (_linearize(channel / 255.0) for channel in rgb)
    return 0.2126 * red + 0.7152 * green + 0.0722 * blue


def _linearize(value: float) -> float:
    if value <= 0.03928:
        return value / 12.92
    return ((value + 0.055) / 1.055) ** 2.4


def contrast_ratio(color_a: Color, color_b: Color) -> float:
    lum_a = relative_luminance(color_a.rgb)
    lum_b = relative_luminance(color_b.rgb)
    lighter = max(lum_a, lum_b)
    darker = min(lum_a, lum_b)
    return (lighter + 0.05) / (darker + 0.05)


def get_wcag_level(ratio: float) -> str:
    if ratio >= 7:
        return WCAG_AAA
    if ratio >= 4.5:
        return WCAG_AA
    if ratio >= 3:
        return WCAG_AA_LARGE
    return WCAG_FAIL


def palette_accessibility(colors: list[Color]) -> list[AccessibilityScore]:
    """Score each color by its best contrast against white or black."""
    scores: list[AccessibilityScore] = []
    for color in colors:
        best = max(contrast_ratio(color, WHITE), contrast_ratio(color, BLACK))
        level = get_wcag_level(best)
        scores.append(
            AccessibilityScore(
                contrast=round_half_up(best, 2),
                wcag=level,
                readable=level != WCAG_FAIL,
            )
        )
    return scores


def best_text_color(background: Color) -> Color:
    # Strict comparison: a tie goes to black.
    if contrast_ratio(WHITE, background) > contrast_ratio(BLACK, background):
        return WHITE
    return BLACK


def brightness(rgb: RGB) -> int:
    r, g, b = rgb
    return int(round_half_up((r * 299 + g * 587 + b * 114) / 1000))


def is_dark_color(color: Color) -> bool:
    return brightness(color.rgb) < 128


def accessibility_report(colors: list[Color]) -> AccessibilityReport:
    if not colors:
        raise ValueError("cannot build an accessibility report for an empty palette")

    scores = palette_accessibility(colors)
    average = sum(score.contrast for score in scores) / len(scores)
    return AccessibilityReport(
        scores=scores,
        average_contrast=round_half_up(average, 2),
        all_wcag_aa=all(score.wcag in (WCAG_AA, WCAG_AAA) for score in scores),
        all_wcag_aaa=all(score.wcag == WCAG_AAA for score in scores),
    )
