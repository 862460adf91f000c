"""Stats boxes and 2-D palette (colorbar) placement."""
from __future__ import annotations

from matplotlib.patches import Rectangle

from . import config
from .colors import resolve_color
from .histograms import DrawAttributes, Hist1D, Hist2D
from .logger import CmsLogger
from .properties import set_root_object_properties

logger = CmsLogger(__name__).get_logger()

PRESET_POSITIONS = ("tr", "tl", "br", "bl")


class StatsBox(DrawAttributes):
    """Summary of a histogram (entries, mean, std dev) drawn in an NDC box."""

    def __init__(self, hist: Hist1D, x1: float, y1: float, x2: float, y2: float):
        super().__init__()
        self.hist = hist
        self.x1, self.y1, self.x2, self.y2 = x1, y1, x2, y2
        self.fill_style = 1001
        self.text_size = config.STATS_FONT_SIZE
        self.artists: list = []
        self.fig = None

    def rows(self) -> list[tuple[str, str]]:
        h = self.hist
        return [
            (h.name, ""),
            ("Entries", f"{h.entries:d}"),
            ("Mean", f"{h.mean():.4g}"),
            ("Std Dev", f"{h.std_dev():.4g}"),
        ]

    def render(self, fig) -> None:
        self.remove()
        self.fig = fig
        fill = self.fill_kwargs() or {"facecolor": "none"}
        fill["edgecolor"] = resolve_color(self.line_color)
        patch = Rectangle((self.x1, self.y1), self.x2 - self.x1, self.y2 - self.y1,
                          transform=fig.transFigure, linewidth=self.line_kwargs()["linewidth"], **fill)
        fig.add_artist(patch)

        rows = self.rows()
        text = self.text_kwargs(fig)
        text.pop("ha")
        text.pop("va")
        pad = 0.01
        labels = "\n".join(label for label, _ in rows)
        values = "\n".join(value for _, value in rows)
        left = fig.text(self.x1 + pad, self.y2 - pad, labels, ha="left", va="top", **text)
        right = fig.text(self.x2 - pad, self.y2 - pad, values, ha="right", va="top", **text)
        self.artists = [patch, left, right]

    def remove(self) -> None:
        for artist in self.artists:
            artist.remove()
        self.artists = []

    def redraw(self) -> None:
        if self.fig is not None:
            self.render(self.fig)


def _is_unset(value) -> bool:
    return value is None or value == config.UNSET


def _preset_box(stats: StatsBox, margins: tuple[float, float, float, float],
                position: str, xscale: float | None, yscale: float | None) -> tuple[float, float, float, float]:
    if position not in PRESET_POSITIONS:
        raise ValueError(f"Unknown stats box position {position!r}; use one of {PRESET_POSITIONS}")
    left, right, top, bottom = margins
    width = (stats.x2 - stats.x1) * (xscale or 1)
    height = (stats.y2 - stats.y1) * (yscale or 1)
    if position[0] == "t":
        y2 = 1 - top
        y1 = y2 - height
    else:
        y1 = bottom
        y2 = y1 + height
    if position[1] == "r":
        x2 = 1 - right
        x1 = x2 - width
    else:
        x1 = left
        x2 = x1 + width
    return x1, y1, x2, y2


def change_stats_box(target, x1=None, y1=None, x2=None, y2=None, **confs) -> StatsBox:
    """Move and restyle a stats box.

    ``target`` is a canvas (its most recent stats box is changed) or a
    StatsBox. Numeric coordinates are NDC; ``None`` or -999 keeps a corner.
    A string ``x1`` picks a predefined spot inside the frame instead:

        "tr" top-right, "tl" top-left, "br" bottom-right, "bl" bottom-left

    and then ``y1`` scales the width and ``x2`` the height of the box.
    Remaining keyword arguments are properties, e.g. ``FillColor="kRed"``.

    Examples::

        change_stats_box(canv, "tr", FillColor="p6::kRed", FillStyle=3004)
        change_stats_box(canv, "tl", 1.2, TextColor="kRed", FontSize=0.03)
    """
    if isinstance(target, StatsBox):
        stats = target
        margins = None
    else:
        if not target.stats_boxes:
            raise ValueError(f"{target.name} has no stats box")
        stats = target.stats_boxes[-1]
        margins = target.margins()

    if isinstance(x1, str):
        if margins is None:
            raise ValueError("Predefined stats box positions need a canvas")
        stats.x1, stats.y1, stats.x2, stats.y2 = _preset_box(stats, margins, x1, y1, x2)
    else:
        for attr, value in (("x1", x1), ("y1", y1), ("x2", x2), ("y2", y2)):
            if not _is_unset(value):
                setattr(stats, attr, float(value))

    if confs:
        set_root_object_properties(stats, **confs)
    stats.redraw()
    logger.debug(f"stats box of {stats.hist.name} at "
                 f"({stats.x1:.3f}, {stats.y1:.3f}, {stats.x2:.3f}, {stats.y2:.3f})")
    return stats


# ---------------------------------------------------------------------------
# 2-D palettes
# ---------------------------------------------------------------------------

def palette_rect(margins: tuple[float, float, float, float]) -> tuple[float, float, float, float]:
    """Default (x1, x2, y1, y2) of a palette: a strip in the right margin, frame height."""
    _, right, top, bottom = margins
    return 1 - right * 0.95, 1 - right * 0.70, bottom, 1 - top


def get_palette(hist: Hist2D):
    """The colorbar drawn for ``hist`` (COLZ), or None."""
    return hist.palette


def update_palette_position(hist: Hist2D, canvas=None, x1=None, x2=None, y1=None, y2=None,
                            is_ndc: bool = True) -> None:
    """Move the palette of ``hist``.

    Args:
        hist: 2-D histogram drawn with ``COLZ``.
        canvas: If given, the palette is first reset to the default strip in
            its right margin.
        x1, x2, y1, y2: Explicit edges overriding the current ones.
        is_ndc: Edges are NDC (True) or data coordinates of the frame (False).
    """
    palette = get_palette(hist)
    if palette is None:
        raise ValueError(f"{hist.name} has no palette; draw it with COLZ")
    cax = palette.ax
    fig = cax.figure
    box = cax.get_position()
    cur_x1, cur_x2, cur_y1, cur_y2 = box.x0, box.x1, box.y0, box.y1
    if canvas is not None:
        cur_x1, cur_x2, cur_y1, cur_y2 = palette_rect(canvas.margins())

    if not is_ndc:
        frame = hist.artist.axes
        to_fig = frame.transData + fig.transFigure.inverted()
        xlo, ylo = frame.get_xlim()[0], frame.get_ylim()[0]
        if x1 is not None:
            x1 = to_fig.transform((x1, ylo))[0]
        if x2 is not None:
            x2 = to_fig.transform((x2, ylo))[0]
        if y1 is not None:
            y1 = to_fig.transform((xlo, y1))[1]
        if y2 is not None:
            y2 = to_fig.transform((xlo, y2))[1]

    x1 = cur_x1 if x1 is None else x1
    x2 = cur_x2 if x2 is None else x2
    y1 = cur_y1 if y1 is None else y1
    y2 = cur_y2 if y2 is None else y2
    cax.set_position([x1, y1, x2 - x1, y2 - y1])
