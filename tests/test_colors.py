"""Tests for Petroff color sets and color lookup."""
from __future__ import annotations

import numpy as np
import pytest

from cmsstyle.colors import (
    BLACK,
    get_petroff_color,
    get_petroff_color_set,
    kLimit68,
    kLimit95,
    p6,
    p8,
    p10,
    palette_colors,
    resolve_color,
)


def test_palette_sizes():
    assert len(palette_colors(p6)) == 6
    assert len(palette_colors(p8)) == 8
    assert len(palette_colors(p10)) == 10


def test_palette_values():
    assert p6.kBlue == "#5790fc"
    assert p8.kAzure == "#578dff"
    assert p10.kAsh == "#717581"
    assert (kLimit68, kLimit95) == ("#607641", "#F5BB54")


@pytest.mark.parametrize("name", ["p8::kBlue", "p8.kBlue"])
def test_lookup_both_separators(name):
    assert get_petroff_color(name) == p8.kBlue


def test_lookup_p10():
    assert get_petroff_color("p10::kCyan") == "#92dadd"


def test_unknown_color_in_palette_is_black():
    assert get_petroff_color("p6::kOrange") == BLACK


def test_unknown_palette_is_black():
    assert get_petroff_color("p7::kBlue") == BLACK


def test_base_color_name():
    assert get_petroff_color("kRed") == "#ff0000"
    assert get_petroff_color("kWhite") == "#ffffff"


def test_matplotlib_color_name_passes_through():
    assert get_petroff_color("tab:blue") == "tab:blue"


def test_garbage_name_is_black():
    assert get_petroff_color("notacolor") == BLACK


@pytest.mark.parametrize("n", [1, 3, 6])
def test_color_set_small_uses_p6(n):
    assert get_petroff_color_set(n) == palette_colors(p6)


@pytest.mark.parametrize("n", [7, 8])
def test_color_set_medium_uses_p8(n):
    assert get_petroff_color_set(n) == palette_colors(p8)


@pytest.mark.parametrize("n", [9, 10])
def test_color_set_large_uses_p10(n):
    assert get_petroff_color_set(n) == palette_colors(p10)


def test_color_set_repeats_beyond_ten():
    colors = get_petroff_color_set(23)
    assert len(colors) == 23
    assert colors[10] == colors[0] == p10.kBlue
    assert colors[22] == colors[2] == p10.kRed


def test_color_set_is_a_new_list():
    first = get_petroff_color_set(3)
    first.append("#000000")
    assert len(get_petroff_color_set(3)) == 6


def test_resolve_integer_codes():
    assert resolve_color(632) == "#ff0000"
    assert resolve_color(600.0) == "#0000ff"
    assert resolve_color(1) == BLACK


def test_resolve_unknown_code():
    with pytest.raises(ValueError):
        resolve_color(12345)


def test_resolve_names_and_tuples():
    assert resolve_color("p6::kRed") == p6.kRed
    assert resolve_color("#123456") == "#123456"
    assert resolve_color((0.1, 0.2, 0.3)) == (0.1, 0.2, 0.3)


def test_resolve_rejects_bool():
    with pytest.raises(ValueError):
        resolve_color(True)


def test_resolve_numpy_codes():
    assert resolve_color(np.int64(632)) == "#ff0000"
    assert resolve_color(np.array([600, 1])[0]) == "#0000ff"
    assert resolve_color(np.float64(416.0)) == "#00ff00"


def test_resolve_matplotlib_gray_string():
    assert resolve_color("0.5") == "0.5"
    assert resolve_color("C1") == "C1"
    assert resolve_color("p10.kRed") == p10.kRed
