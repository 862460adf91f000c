"""CMS canvases: frame setup, CMS/lumi labels, legends, drawing and saving.

A canvas is a matplotlib Figure plus its frame Axes. Positions are NDC,
i.e. figure fractions, and text sizes are fractions of the canvas height.
"""
from __future__ import annotations

from pathlib import Path

import matplotlib.image as mpimg
import matplotlib.pyplot as plt
import numpy as np
from matplotlib.artist import Artist
from matplotlib.lines import Line2D
from matplotlib.patches import Patch

from . import config
from . import style as st
from .descriptors import get_descriptors
from .histograms import DrawAttributes, Hist1D, Hist2D, HistStack, parse_option
from .logger import CmsLogger
from .properties import set_root_object_properties
from .stats import StatsBox, palette_rect

logger = CmsLogger(__name__).get_logger()

_CURRENT: dict = {"canvas": None}


class CmsCanvas:
    """Figure wrapper that owns the objects it draws behind the user's back.

    At most one logo image and one logo container are alive at a time; they
    are replaced by ``add_cms_logo`` and released by ``close``.
    """

    def __init__(self, name: str, fig, frame):
        self.name = name
        self.fig = fig
        self.frame = frame
        self.cms_logo = None
        self.pad_logo = None
        self.labels: list = []
        self.legends: list[CmsLegend] = []
        self.stats_boxes: list[StatsBox] = []
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def margins(self) -> tuple[float, float, float, float]:
        """(left, right, top, bottom) margins as figure fractions."""
        p = self.fig.subplotpars
        return p.left, 1 - p.right, 1 - p.top, p.bottom

    def add_cms_logo(self, x0: float, y0: float, x1: float, y1: float, logofile) -> None:
        self._release_logo()
        image = mpimg.imread(str(logofile))
        self.pad_logo = self.fig.add_axes((x0, y0, x1 - x0, y1 - y0))
        self.pad_logo.set_axis_off()
        self.cms_logo = self.pad_logo.imshow(image)
        logger.debug(f"{self.name}: logo {logofile} at ({x0:.3f}, {y0:.3f}, {x1:.3f}, {y1:.3f})")

    def _release_logo(self) -> None:
        if self.cms_logo is not None:
            self.cms_logo.remove()
            self.cms_logo = None
        if self.pad_logo is not None:
            self.pad_logo.remove()
            self.pad_logo = None

    def clear_labels(self) -> None:
        for label in self.labels:
            label.remove()
        self.labels = []

    def add_legend(self, leg: CmsLegend) -> None:
        if leg not in self.legends:
            self.legends.append(leg)

    def close(self) -> None:
        if self.closed:
            return
        self._release_logo()
        plt.close(self.fig)
        self.closed = True
        if _CURRENT["canvas"] is self:
            _CURRENT["canvas"] = None


def cd(canvas: CmsCanvas) -> None:
    """Make ``canvas`` the target of subsequent draws."""
    if canvas.closed:
        raise ValueError(f"Canvas {canvas.name} is closed")
    _CURRENT["canvas"] = canvas
    plt.figure(canvas.fig.number)
    plt.sca(canvas.frame)


def current_canvas() -> CmsCanvas | None:
    return _CURRENT["canvas"]


def _require_canvas(canvas: CmsCanvas | None = None) -> CmsCanvas:
    canvas = canvas or current_canvas()
    if canvas is None:
        raise ValueError("No canvas: create one with cms_canvas() first")
    return canvas


# ---------------------------------------------------------------------------
# Canvas creation and labels
# ---------------------------------------------------------------------------

def cms_canvas(
    name: str,
    x_min: float,
    x_max: float,
    y_min: float,
    y_max: float,
    name_x_axis: str,
    name_y_axis: str,
    square: bool = True,
    i_pos: int = 11,
    extra_space: float = 0,
    with_z_axis: bool = False,
    scale_lumi: float = 1.0,
    y_tit_offset: float | None = None,
) -> CmsCanvas:
    """Create a canvas with a CMS-styled frame and labels.

    Args:
        name: Canvas name.
        x_min, x_max, y_min, y_max: Frame ranges.
        name_x_axis, name_y_axis: Axis titles.
        square: 600x600 px canvas, else 800x600 px.
        i_pos: Position of the CMS label, see ``cms_lumi``.
        extra_space: Added to the left margin to fit long labels.
        with_z_axis: Widen the right margin for a 2-D palette.
        scale_lumi: Scale of the lumi text, see ``cms_lumi``.
        y_tit_offset: Y title distance from the axis, in units of its font
            size. None keeps the default.

    Returns:
        The new canvas, which also becomes the current one. The caller closes
        it (or uses it as a context manager).
    """
    st.require_style()
    width = config.CANVAS_REF_W_SQUARE if square else config.CANVAS_REF_W_RECT
    height = config.CANVAS_REF_H

    left = config.MARGIN_LEFT * height / width + extra_space
    right = config.MARGIN_RIGHT * height / width
    if with_z_axis:
        right = config.MARGIN_RIGHT_Z * height / width + config.MARGIN_RIGHT_Z_PAD
    top = config.MARGIN_TOP
    bottom = config.MARGIN_BOTTOM

    fig = plt.figure(figsize=(width / config.DPI, height / config.DPI), dpi=config.DPI)
    fig.subplots_adjust(left=left, right=1 - right, top=1 - top, bottom=bottom)
    frame = fig.add_subplot()
    frame.set_xlim(x_min, x_max)
    frame.set_ylim(y_min, y_max)

    title_size = st.size_to_points(st.FONT_AXIS_TITLE, fig)
    frame.set_xlabel(name_x_axis, fontsize=title_size)
    frame.set_ylabel(name_y_axis, fontsize=title_size)
    if y_tit_offset is not None:
        frame.yaxis.labelpad = y_tit_offset * title_size
    frame.tick_params(labelsize=st.size_to_points(st.FONT_AXIS_LABEL, fig))

    canvas = CmsCanvas(name, fig, frame)
    cd(canvas)
    cms_lumi(canvas, i_pos, scale_lumi)
    logger.debug(f"canvas {name}: {width}x{height} px, margins l={left:.3f} r={right:.3f}")
    return canvas


def draw_text(text: str, pos_x: float, pos_y: float, font: int = 42, align: int = 11,
              size: float = 0.04, canvas: CmsCanvas | None = None):
    """Write ``text`` at NDC (pos_x, pos_y) with a font code, alignment code and size."""
    canvas = _require_canvas(canvas)
    fig = canvas.fig
    kwargs = st.font_properties(font)
    kwargs.update(st.alignment(align))
    return fig.text(pos_x, pos_y, text, fontsize=st.size_to_points(size, fig), **kwargs)


def cms_lumi(canvas: CmsCanvas, i_pos_x: int = 11, scale_lumi: float = 1.0) -> None:
    """Draw the CMS label (text or logo), extra text, additional info and lumi text.

    Args:
        canvas: Canvas to label.
        i_pos_x: ``10 * alignment + position``, position 1/2/3 being
            left/center/right inside the frame. Tens digit 0 puts the label
            above the frame (top-left). Defaults to 11: top-left, in frame.
        scale_lumi: Scale of the lumi text size.
    """
    desc = get_descriptors()
    left, right, top, bottom = canvas.margins()
    out_of_frame = i_pos_x // 10 == 0
    align_x = max(i_pos_x // 10, 1)
    align_y = 1 if i_pos_x == 0 else 3
    align = 10 * align_x + align_y

    cms_size = desc.cms_text_size * top
    extra_size = desc.extra_over_cms_text_size * cms_size
    above_frame = 1 - top + desc.lumi_text_offset * top

    canvas.clear_labels()
    canvas._release_logo()
    labels = canvas.labels

    if desc.lumi_text:
        labels.append(draw_text(desc.lumi_text, 1 - right, above_frame, 42, 31,
                                desc.lumi_text_size * top * scale_lumi, canvas=canvas))

    frame_w = 1 - left - right
    frame_h = 1 - top - bottom
    position = i_pos_x % 10
    if position <= 1:
        pos_x = left + config.REL_POS_X * frame_w
    elif position == 2:
        pos_x = left + 0.5 * frame_w
    else:
        pos_x = 1 - right - config.REL_POS_X * frame_w
    pos_y = 1 - top - config.REL_POS_Y * frame_h

    if out_of_frame:
        cms_label = None
        if desc.cms_text:
            cms_label = draw_text(desc.cms_text, left + desc.cms_text_offset_x, above_frame,
                                  desc.cms_text_font, 11, cms_size, canvas=canvas)
            labels.append(cms_label)
        if desc.extra_text:
            if cms_label is not None:
                labels.append(canvas.frame.annotate(
                    desc.extra_text, xy=(1, 0), xycoords=cms_label,
                    xytext=(0.3 * st.size_to_points(cms_size, canvas.fig), 0), textcoords="offset points",
                    ha="left", va="bottom", annotation_clip=False,
                    fontsize=st.size_to_points(extra_size, canvas.fig), **st.font_properties(desc.extra_text_font),
                ))
            else:
                labels.append(draw_text(desc.extra_text, left, above_frame,
                                        desc.extra_text_font, 11, extra_size, canvas=canvas))
        cursor = pos_y
    else:
        cursor = pos_y
        if desc.use_cms_logo:
            ratio = canvas.fig.get_figheight() / canvas.fig.get_figwidth()
            logo_w, logo_h = 0.15 * ratio, 0.15
            if align_x == 1:
                x0 = pos_x
            elif align_x == 2:
                x0 = pos_x - logo_w / 2
            else:
                x0 = pos_x - logo_w
            canvas.add_cms_logo(x0, pos_y - logo_h, x0 + logo_w, pos_y, desc.use_cms_logo)
            cursor = pos_y - logo_h - 0.01
        elif desc.cms_text:
            labels.append(draw_text(desc.cms_text, pos_x, cursor, desc.cms_text_font, align, cms_size,
                                    canvas=canvas))
            cursor -= config.REL_EXTRA_DY * cms_size
        if desc.extra_text:
            labels.append(draw_text(desc.extra_text, pos_x, cursor, desc.extra_text_font, align, extra_size,
                                    canvas=canvas))
            cursor -= config.REL_EXTRA_DY * extra_size

    info_align = 10 * align_x + 3
    for info in desc.additional_info:
        labels.append(draw_text(info, pos_x, cursor, desc.additional_info_font, info_align, extra_size,
                                canvas=canvas))
        cursor -= config.REL_EXTRA_DY * extra_size


# ---------------------------------------------------------------------------
# Legends
# ---------------------------------------------------------------------------

class CmsLegend(DrawAttributes):
    """Legend filled entry by entry and rendered into an NDC box on update."""

    def __init__(self, x1: float, y1: float, x2: float, y2: float, columns: int = 0):
        super().__init__()
        self.x1, self.y1, self.x2, self.y2 = x1, y1, x2, y2
        self.columns = columns
        self.entries: list[tuple[object, str, str]] = []
        self.legend = None

    def add_entry(self, obj, label: str, option: str = "") -> None:
        self.entries.append((obj, label, option))

    def handle(self, obj, option: str):
        """Proxy artist for ``obj``: patch (f), markers (p/e) or line (l).

        A stack is represented by its top histogram.
        """
        if isinstance(obj, Artist):
            return obj
        if isinstance(obj, HistStack):
            if not obj.hists:
                raise ValueError(f"{obj.name} is empty and has no legend entry")
            obj = obj.hists[-1]
        if not isinstance(obj, DrawAttributes):
            raise TypeError(f"No legend entry for {type(obj).__name__}")
        opt = option.lower()
        if "f" in opt:
            line = obj.line_kwargs()
            fill = obj.fill_kwargs() or {"facecolor": "none", "edgecolor": line["color"]}
            if "l" in opt:
                fill["edgecolor"] = line["color"]
            fill.setdefault("linewidth", line["linewidth"])
            return Patch(**fill)
        if "p" in opt or "e" in opt:
            kwargs = obj.marker_kwargs()
            linestyle = obj.line_kwargs()["linestyle"] if "l" in opt else "none"
            return Line2D([], [], linestyle=linestyle, **kwargs)
        if "l" in opt:
            return Line2D([], [], **obj.line_kwargs())
        return Patch(visible=False)

    def render(self, fig) -> None:
        if self.legend is not None:
            self.legend.remove()
        handles = [self.handle(obj, option) for obj, _, option in self.entries]
        labels = [label for _, label, _ in self.entries]
        text = self.text_kwargs(fig)
        self.legend = fig.legend(
            handles, labels,
            loc="upper left",
            bbox_to_anchor=(self.x1, self.y1, self.x2 - self.x1, self.y2 - self.y1),
            bbox_transform=fig.transFigure,
            ncols=max(self.columns, 1),
            prop={"size": text["fontsize"], "family": text["family"],
                  "weight": text["weight"], "style": text["style"]},
            labelcolor=text["color"],
            frameon=False,
        )


def cms_leg(x1: float, y1: float, x2: float, y2: float, text_size: float = 0.04,
            text_font: int = 42, text_color="black", columns: int = 0) -> CmsLegend:
    """Create a legend in the NDC box (x1, y1)-(x2, y2) and attach it to the current canvas."""
    leg = CmsLegend(x1, y1, x2, y2, columns=columns)
    set_root_object_properties(leg, TextSize=text_size, TextFont=text_font, TextColor=text_color)
    canvas = current_canvas()
    if canvas is not None:
        canvas.add_legend(leg)
    return leg


def add_to_legend(leg: CmsLegend, *entries: tuple) -> None:
    """Append ``(obj, label, option)`` entries in the given order."""
    for obj, label, option in entries:
        leg.add_entry(obj, label, option)


# ---------------------------------------------------------------------------
# Drawing
# ---------------------------------------------------------------------------

def cms_object_draw(obj, option: str = "", **confs):
    """Configure ``obj`` with ``confs`` (see set_root_object_properties) and draw it on the current canvas."""
    canvas = _require_canvas()
    style = st.require_style()
    if confs:
        set_root_object_properties(obj, **confs)
    tokens = parse_option(option)
    frame = canvas.frame

    if isinstance(obj, CmsLegend):
        canvas.add_legend(obj)
        return obj
    if isinstance(obj, HistStack):
        artists = obj.draw(frame, option)
    elif isinstance(obj, Hist2D):
        artists = obj.draw(frame, option, cmap=style.colormap())
        if "Z" in tokens:
            x1, x2, y1, y2 = palette_rect(canvas.margins())
            cax = canvas.fig.add_axes((x1, y1, x2 - x1, y2 - y1))
            obj.palette = canvas.fig.colorbar(artists, cax=cax)
    elif isinstance(obj, Hist1D):
        artists = obj.draw(frame, option)
        if style.opt_stat and obj.stats and "SAME" not in tokens:
            stats = StatsBox(obj, *config.STATS_BOX_NDC)
            stats.render(canvas.fig)
            canvas.stats_boxes.append(stats)
    elif isinstance(obj, Artist):
        artists = frame.add_artist(obj)
    else:
        raise TypeError(f"Cannot draw {type(obj).__name__}")
    logger.debug(f"{canvas.name}: drew {getattr(obj, 'name', type(obj).__name__)} with {option!r}")
    return artists


def cms_return_max_y(objs) -> float:
    """Largest y value among histograms (content + error), stacks, 2-D histograms or numbers."""
    maxima = []
    for obj in objs:
        if isinstance(obj, Hist1D):
            maxima.append(obj.max_with_errors())
        elif isinstance(obj, (HistStack, Hist2D)):
            maxima.append(obj.get_maximum())
        else:
            values = np.asarray(obj, dtype=np.float64)
            if values.size:
                maxima.append(float(values.max()))
    return max(maxima, default=0.0)


# ---------------------------------------------------------------------------
# Update / access / save
# ---------------------------------------------------------------------------

def add_cms_logo(canvas: CmsCanvas, x0: float, y0: float, x1: float, y1: float, logofile: str | None = None) -> None:
    """Draw the logo in the NDC box (x0, y0)-(x1, y1); ``logofile`` defaults to the configured one."""
    path = logofile or get_descriptors().use_cms_logo
    if not path:
        raise ValueError("No logo file given or configured (set_cms_logo_filename)")
    canvas.add_cms_logo(x0, y0, x1, y1, config.resolve_path(path))


def update_pad(canvas: CmsCanvas | None = None) -> None:
    canvas = _require_canvas(canvas)
    for leg in canvas.legends:
        leg.render(canvas.fig)
    canvas.fig.canvas.draw_idle()


def get_cms_canvas_hist(canvas: CmsCanvas):
    """The frame of the canvas, holding its axis ranges and titles."""
    return canvas.frame


def save_canvas(canvas: CmsCanvas, path, close: bool = True) -> Path:
    """Update and save the canvas; by default it is closed afterwards."""
    path = Path(path)
    update_pad(canvas)
    path.parent.mkdir(parents=True, exist_ok=True)
    canvas.fig.savefig(path, dpi=config.DPI)
    logger.info(f"Saved {path}")
    if close:
        canvas.close()
    return path
