"""CMS plot style: rcParams theme, 2-D palettes and draw-code translation."""
from __future__ import annotations

from dataclasses import dataclass, field

import matplotlib as mpl
import matplotlib.colors as mcolors
import seaborn as sns
from matplotlib import cycler

from .colors import palette_colors, p6
from .logger import CmsLogger

logger = CmsLogger(__name__).get_logger()

# ---------------------------------------------------------------------------
# Typography
# ---------------------------------------------------------------------------
FONT_AXIS_TITLE = 0.05  # fraction of canvas height
FONT_AXIS_LABEL = 0.04
POINTS_PER_INCH = 72.0

# ---------------------------------------------------------------------------
# Draw-code translation
# ---------------------------------------------------------------------------
# Font code = 10 * font number + precision.
FONTS: dict[int, tuple[str, str, str]] = {
    1: ("serif", "normal", "italic"),
    2: ("serif", "bold", "normal"),
    3: ("serif", "bold", "italic"),
    4: ("sans-serif", "normal", "normal"),
    5: ("sans-serif", "normal", "italic"),
    6: ("sans-serif", "bold", "normal"),
    7: ("sans-serif", "bold", "italic"),
    8: ("monospace", "normal", "normal"),
    9: ("monospace", "normal", "italic"),
    10: ("monospace", "bold", "normal"),
    11: ("monospace", "bold", "italic"),
    12: ("serif", "normal", "normal"),
    13: ("serif", "normal", "normal"),
    14: ("sans-serif", "normal", "normal"),
    15: ("serif", "normal", "italic"),
}

H_ALIGN = {1: "left", 2: "center", 3: "right"}
V_ALIGN = {1: "bottom", 2: "center", 3: "top"}

LINE_STYLES = {1: "-", 2: "--", 3: ":", 4: "-.", 5: (0, (6, 2, 1, 2)), 6: (0, (6, 2, 1, 2, 1, 2))}

# code -> (matplotlib marker, filled)
MARKERS: dict[int, tuple[str, bool]] = {
    1: (".", True), 2: ("+", True), 3: ("*", True), 4: ("o", False), 5: ("x", True),
    6: (".", True), 7: (".", True), 8: ("o", True),
    20: ("o", True), 21: ("s", True), 22: ("^", True), 23: ("v", True),
    24: ("o", False), 25: ("s", False), 26: ("^", False), 27: ("D", False),
    28: ("P", False), 29: ("*", True), 30: ("*", False), 32: ("v", False),
    33: ("D", True), 34: ("P", True),
}

HATCHES = {
    3001: "..", 3002: ".", 3003: "...", 3004: "//", 3005: "\\\\", 3006: "||",
    3007: "--", 3008: "xx", 3010: "++", 3244: "xx", 3354: "//", 3345: "\\\\",
}

# Marker sizes are given in units of 8 px, line widths in px (at 100 dpi).
MARKER_SIZE_SCALE = 5.76
LINE_WIDTH_SCALE = 0.72


def font_properties(code: int) -> dict:
    family, weight, style = FONTS.get(int(code) // 10, FONTS[4])
    return {"family": family, "weight": weight, "style": style}


def alignment(code: int) -> dict:
    code = int(code)
    return {"ha": H_ALIGN.get(code // 10, "left"), "va": V_ALIGN.get(code % 10, "bottom")}


def line_style(code: int):
    return LINE_STYLES.get(int(code), "-")


def marker_style(code: int) -> tuple[str, bool]:
    return MARKERS.get(int(code), ("o", True))


def fill_pattern(code: int) -> tuple[bool, str | None]:
    """(filled, hatch) for a fill-style code: 0 hollow, 1001 solid, 3xxx hatched."""
    code = int(code)
    if code == 0:
        return False, None
    if 3000 <= code < 4000:
        return False, HATCHES.get(code, "//")
    return True, None


def size_to_points(size: float, fig) -> float:
    """Convert a text size given as a fraction of the canvas height into points."""
    return size * fig.get_figheight() * POINTS_PER_INCH


# ---------------------------------------------------------------------------
# 2-D palettes
# ---------------------------------------------------------------------------
CMS_PALETTE = "viridis"

ALT_STOPS = (0.00, 0.34, 0.61, 0.84, 1.00)
ALT_RED = (0.00, 0.00, 0.87, 1.00, 0.51)
ALT_GREEN = (0.00, 0.81, 1.00, 0.20, 0.00)
ALT_BLUE = (0.51, 1.00, 0.12, 0.00, 0.00)


def create_alternative_palette(alpha: float = 1) -> mcolors.LinearSegmentedColormap:
    colors = [(s, (r, g, b, alpha)) for s, r, g, b in zip(ALT_STOPS, ALT_RED, ALT_GREEN, ALT_BLUE)]
    return mcolors.LinearSegmentedColormap.from_list("cms_alternative", colors, N=255)


# ---------------------------------------------------------------------------
# Style
# ---------------------------------------------------------------------------

@dataclass
class CmsStyle:
    rc: dict = field(default_factory=dict)
    palette: str | mcolors.Colormap = CMS_PALETTE
    opt_stat: int = 0
    grid: bool = False

    def colormap(self) -> mcolors.Colormap:
        if isinstance(self.palette, mcolors.Colormap):
            return self.palette
        return mpl.colormaps[self.palette]


_STYLE_STATE: dict = {"style": None}


def cms_rc() -> dict:
    return {
        "figure.facecolor": "white",
        "axes.facecolor": "white",
        "axes.edgecolor": "black",
        "axes.linewidth": 1.0,
        "axes.grid": False,
        "axes.prop_cycle": cycler(color=palette_colors(p6)),
        "font.family": "sans-serif",
        "font.sans-serif": ["TeX Gyre Heros", "Helvetica", "Arial", "DejaVu Sans"],
        "mathtext.default": "regular",
        "xaxis.labellocation": "right",
        "yaxis.labellocation": "top",
        "xtick.direction": "in",
        "ytick.direction": "in",
        "xtick.top": True,
        "ytick.right": True,
        "xtick.minor.visible": True,
        "ytick.minor.visible": True,
        "xtick.major.size": 8,
        "ytick.major.size": 8,
        "xtick.minor.size": 4,
        "ytick.minor.size": 4,
        "legend.frameon": False,
        "legend.borderaxespad": 0.0,
        "errorbar.capsize": 0,
        "grid.alpha": 0.5,
        "grid.linestyle": ":",
        "image.cmap": CMS_PALETTE,
        "savefig.facecolor": "white",
    }


def set_cms_style(force: bool = True) -> CmsStyle:
    """Install the CMS style for the session; ``force=False`` keeps an installed one."""
    current = _STYLE_STATE["style"]
    if current is not None and not force:
        return current
    style = CmsStyle(rc=cms_rc())
    sns.set_theme(context="notebook", style="ticks", rc=style.rc)
    _STYLE_STATE["style"] = style
    logger.debug("CMS style installed")
    return style


def get_cms_style() -> CmsStyle | None:
    return _STYLE_STATE["style"]


def require_style() -> CmsStyle:
    style = get_cms_style()
    if style is None:
        style = set_cms_style()
    return style


def cms_grid(grid_on: bool) -> None:
    style = require_style()
    style.grid = bool(grid_on)
    style.rc["axes.grid"] = style.grid
    mpl.rcParams["axes.grid"] = style.grid


def set_cms_palette() -> None:
    require_style().palette = CMS_PALETTE


def set_alternative_2d_color(hist=None, style: CmsStyle | None = None, alpha: float = 1) -> None:
    """Use the alternative palette for ``hist``, else ``style``, else the installed style."""
    cmap = create_alternative_palette(alpha)
    if hist is not None:
        hist.colormap = cmap
        if hist.artist is not None:
            hist.artist.set_cmap(cmap)
        return
    (style or require_style()).palette = cmap
