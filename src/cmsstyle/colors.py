"""Petroff color sets, limit-band colors and color-name lookup.

The Petroff sets are three fixed collections of 6, 8 and 10 visually distinct
colors meant for multi-series plots. Colors are named the way they are
referenced in plotting code, e.g. ``"p8::kBlue"`` or ``"p8.kBlue"``.
"""
from __future__ import annotations

import numbers

import matplotlib.colors as mcolors

from .logger import CmsLogger

logger = CmsLogger(__name__).get_logger()


# ---------------------------------------------------------------------------
# Petroff color schemes
# ---------------------------------------------------------------------------

class p6:
    kBlue = "#5790fc"
    kYellow = "#f89c20"
    kRed = "#e42536"
    kGrape = "#964a8b"
    kGray = "#9c9ca1"
    kViolet = "#7a21dd"

    order = ("kBlue", "kYellow", "kRed", "kGrape", "kGray", "kViolet")


class p8:
    kBlue = "#1845fb"
    kOrange = "#ff5e02"
    kRed = "#c91f16"
    kPink = "#c849a9"
    kGreen = "#adad7d"
    kCyan = "#86c8dd"
    kAzure = "#578dff"
    kGray = "#656364"

    order = ("kBlue", "kOrange", "kRed", "kPink", "kGreen", "kCyan", "kAzure", "kGray")


class p10:
    kBlue = "#3f90da"
    kYellow = "#ffa90e"
    kRed = "#bd1f01"
    kGray = "#94a4a2"
    kViolet = "#832db6"
    kBrown = "#a96b59"
    kOrange = "#e76300"
    kGreen = "#b9ac70"
    kAsh = "#717581"
    kCyan = "#92dadd"

    order = ("kBlue", "kYellow", "kRed", "kGray", "kViolet",
             "kBrown", "kOrange", "kGreen", "kAsh", "kCyan")


PETROFF_SETS = {"p6": p6, "p8": p8, "p10": p10}

# Brazilian-flag limit plots: internal (68%) and external (95%) bands.
kLimit68 = "#607641"
kLimit95 = "#F5BB54"
kLimit68cms = "#85D1FB"
kLimit95cms = "#FFDF7F"

# ---------------------------------------------------------------------------
# Base colors, by name and by their integer code
# ---------------------------------------------------------------------------
BASE_COLORS: dict[str, str] = {
    "kWhite": "#ffffff",
    "kBlack": "#000000",
    "kGray": "#cccccc",
    "kRed": "#ff0000",
    "kGreen": "#00ff00",
    "kBlue": "#0000ff",
    "kYellow": "#ffff00",
    "kMagenta": "#ff00ff",
    "kCyan": "#00ffff",
    "kOrange": "#ffcc00",
    "kSpring": "#ccff00",
    "kTeal": "#00ffcc",
    "kAzure": "#0099ff",
    "kViolet": "#9900ff",
    "kPink": "#ff0099",
}

BASE_COLOR_CODES: dict[int, str] = {
    0: "kWhite", 1: "kBlack", 920: "kGray", 632: "kRed", 416: "kGreen",
    600: "kBlue", 400: "kYellow", 616: "kMagenta", 432: "kCyan",
    800: "kOrange", 820: "kSpring", 840: "kTeal", 860: "kAzure",
    880: "kViolet", 900: "kPink",
}

BLACK = BASE_COLORS["kBlack"]


def palette_colors(palette: type) -> list[str]:
    return [getattr(palette, name) for name in palette.order]


def get_petroff_color(color: str) -> str:
    """Look up a color by its symbolic name.

    Args:
        color: Name such as ``'p8::kBlue'`` or ``'p8.kBlue'``. Names without a
            separator are treated as base colors (``'kRed'``) and, failing
            that, as matplotlib color names.

    Returns:
        A matplotlib color. Unidentified Petroff colors resolve to black.
    """
    if "::" in color:
        prefix, _, name = color.partition("::")
    elif "." in color:
        prefix, _, name = color.partition(".")
    else:
        if color in BASE_COLORS:
            return BASE_COLORS[color]
        if mcolors.is_color_like(color):
            return color
        logger.warning(f"Unknown color name {color!r}, using black")
        return BLACK

    palette = PETROFF_SETS.get(prefix)
    if palette is None or name not in palette.order:
        return BLACK
    return getattr(palette, name)


def get_petroff_color_set(ncolors: int) -> list[str]:
    """Colors for ``ncolors`` series: p6 up to 6, p8 up to 8, else p10 repeated as needed."""
    if ncolors < 7:
        return palette_colors(p6)
    if ncolors < 9:
        return palette_colors(p8)
    base = palette_colors(p10)
    return [base[i % len(base)] for i in range(max(ncolors, len(base)))]


def _has_petroff_prefix(color: str) -> bool:
    return any(color.partition(sep)[0] in PETROFF_SETS for sep in ("::", "."))


def resolve_color(value):
    """Turn a color name, integer base-color code or RGB(A) tuple into a matplotlib color."""
    if isinstance(value, bool):
        raise ValueError(f"Not a color: {value!r}")
    if isinstance(value, numbers.Integral):
        value = int(value)
    elif isinstance(value, numbers.Real) and float(value).is_integer():
        value = int(value)
    if isinstance(value, int):
        if value not in BASE_COLOR_CODES:
            raise ValueError(f"Unknown color code: {value}")
        return BASE_COLORS[BASE_COLOR_CODES[value]]
    if isinstance(value, str):
        if value.startswith("#"):
            return value
        if mcolors.is_color_like(value) and not _has_petroff_prefix(value):
            return value
        return get_petroff_color(value)
    if not mcolors.is_color_like(value):
        raise ValueError(f"Not a color: {value!r}")
    return value
