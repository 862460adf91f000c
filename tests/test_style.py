"""Tests for the CMS style, draw-code translation and 2-D palettes."""
from __future__ import annotations

import matplotlib as mpl
import matplotlib.pyplot as plt
import pytest

from cmsstyle.colors import p6
from cmsstyle.style import (
    CMS_PALETTE,
    alignment,
    cms_grid,
    create_alternative_palette,
    fill_pattern,
    font_properties,
    get_cms_style,
    line_style,
    marker_style,
    set_alternative_2d_color,
    set_cms_palette,
    set_cms_style,
    size_to_points,
)


def test_rc_params_installed():
    assert mpl.rcParams["xtick.direction"] == "in"
    assert mpl.rcParams["ytick.right"] is True
    assert mpl.rcParams["axes.prop_cycle"].by_key()["color"][0] == p6.kBlue


def test_force_false_keeps_style():
    style = get_cms_style()
    assert set_cms_style(force=False) is style
    assert set_cms_style() is not style


def test_defaults():
    style = get_cms_style()
    assert style.opt_stat == 0
    assert style.grid is False
    assert style.colormap().name == CMS_PALETTE


def test_grid_toggle():
    cms_grid(True)
    assert get_cms_style().grid is True
    assert mpl.rcParams["axes.grid"] is True
    cms_grid(False)
    assert mpl.rcParams["axes.grid"] is False


def test_font_codes():
    assert font_properties(61) == {"family": "sans-serif", "weight": "bold", "style": "normal"}
    assert font_properties(52)["style"] == "italic"
    assert font_properties(42)["weight"] == "normal"


def test_alignment_codes():
    assert alignment(31) == {"ha": "right", "va": "bottom"}
    assert alignment(13) == {"ha": "left", "va": "top"}
    assert alignment(22) == {"ha": "center", "va": "center"}


def test_line_and_marker_codes():
    assert line_style(2) == "--"
    assert line_style(99) == "-"
    assert marker_style(20) == ("o", True)
    assert marker_style(24) == ("o", False)


@pytest.mark.parametrize("code, expected", [
    (0, (False, None)),
    (1001, (True, None)),
    (3004, (False, "//")),
    (3999, (False, "//")),
])
def test_fill_pattern(code, expected):
    assert fill_pattern(code) == expected


def test_size_to_points():
    fig = plt.figure(figsize=(6, 6))
    assert size_to_points(0.05, fig) == pytest.approx(21.6)


def test_alternative_palette_alpha():
    cmap = create_alternative_palette(0.5)
    assert cmap.name == "cms_alternative"
    assert cmap(0.0) == pytest.approx((0.0, 0.0, 0.51, 0.5))
    assert cmap(1.0) == pytest.approx((0.51, 0.0, 0.0, 0.5))


def test_alternative_palette_for_style_and_back():
    set_alternative_2d_color()
    assert get_cms_style().colormap().name == "cms_alternative"
    set_cms_palette()
    assert get_cms_style().colormap().name == CMS_PALETTE


def test_alternative_palette_for_hist(hist2d):
    set_alternative_2d_color(hist2d)
    assert hist2d.colormap.name == "cms_alternative"
    assert get_cms_style().colormap().name == CMS_PALETTE
