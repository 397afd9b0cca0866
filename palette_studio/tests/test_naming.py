from __future__ import annotations

from palette_studio.src.palette_kernel.models import Color
from palette_studio.src.palette_kernel.naming import assign_color_names, get_color_name


def test_basic_colors_are_named():
    assert get_color_name("#FF0000") == "Red"
    assert get_color_name("#00ffff") == "Cyan"
    assert get_color_name("000000") == "Black"


def test_other_colors_get_generic_name():
    assert get_color_name("#FE0000") == "Color"


def test_assign_color_names_returns_new_colors():
    colors = [Color.from_hex("#0000FF", percentage=60), Color.from_hex("#2A2945")]

    named = assign_color_names(colors)

    assert [c.name for c in named] == ["Blue", "Color"]
    assert named[0].percentage == 60
    assert colors[0].name is None
