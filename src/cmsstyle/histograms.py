"""Histogram, 2-D histogram and stack objects carrying their own draw attributes."""
from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from . import style as st
from .colors import resolve_color


class DrawAttributes:
    """Line, fill, marker and text attributes, settable by name (see properties)."""

    def __init__(self):
        self.line_color = "#000000"
        self.line_style = 1
        self.line_width = 1.0
        self.fill_color = "#ffffff"
        self.fill_style = 0
        self.marker_color = "#000000"
        self.marker_style = 20
        self.marker_size = 1.0
        self.text_color = "#000000"
        self.text_font = 42
        self.text_size = 0.04
        self.text_align = 11

    def line_kwargs(self) -> dict:
        return {
            "color": resolve_color(self.line_color),
            "linestyle": st.line_style(self.line_style),
            "linewidth": self.line_width * st.LINE_WIDTH_SCALE,
        }

    def fill_kwargs(self) -> dict | None:
        """Keyword arguments for a filled patch, or None when hollow."""
        filled, hatch = st.fill_pattern(self.fill_style)
        color = resolve_color(self.fill_color)
        if filled:
            return {"facecolor": color, "edgecolor": color}
        if hatch:
            return {"facecolor": "none", "edgecolor": color, "hatch": hatch, "linewidth": 0}
        return None

    def marker_kwargs(self) -> dict:
        marker, filled = st.marker_style(self.marker_style)
        color = resolve_color(self.marker_color)
        return {
            "marker": marker,
            "markersize": self.marker_size * st.MARKER_SIZE_SCALE,
            "markeredgecolor": color,
            "markerfacecolor": color if filled else "none",
            "color": color,
        }

    def text_kwargs(self, fig) -> dict:
        kwargs = {"color": resolve_color(self.text_color), "fontsize": st.size_to_points(self.text_size, fig)}
        kwargs.update(st.font_properties(self.text_font))
        kwargs.update(st.alignment(self.text_align))
        return kwargs


def parse_option(option: str) -> set[str]:
    """Split a draw option such as ``"HIST SAME"`` or ``"E1P"`` into known tokens."""
    opt = option.upper()
    tokens = set()
    for word in ("SAMES", "SAME", "HIST", "COLZ", "COL", "NOSTACK", "STACK"):
        if word in opt:
            tokens.add(word)
            opt = opt.replace(word, " ")
    if "COLZ" in tokens:
        tokens.update({"COL", "Z"})
    tokens.update(ch for ch in opt if ch in "EPLFZ")
    return tokens


class Hist1D(DrawAttributes):
    def __init__(self, name: str, edges: ArrayLike, counts: ArrayLike,
                 errors: ArrayLike | None = None, title: str = "", entries: int | None = None):
        super().__init__()
        self.name = name
        self.title = title
        self.edges = np.asarray(edges, dtype=np.float64)
        self.counts = np.asarray(counts, dtype=np.float64)
        if self.edges.ndim != 1 or len(self.edges) != len(self.counts) + 1:
            raise ValueError(f"{name}: need len(edges) == len(counts) + 1")
        if errors is None:
            self.errors = np.sqrt(np.abs(self.counts))
        else:
            self.errors = np.asarray(errors, dtype=np.float64)
        self.entries = int(round(self.counts.sum())) if entries is None else entries
        self.maximum: float | None = None
        self.minimum: float | None = None
        self.stats = True
        self.artists: list = []

    @classmethod
    def from_values(cls, name: str, values: ArrayLike, bins=50, range=None,
                    weights: ArrayLike | None = None, title: str = "") -> Hist1D:
        values = np.asarray(values, dtype=np.float64)
        counts, edges = np.histogram(values, bins=bins, range=range, weights=weights)
        if weights is None:
            errors = np.sqrt(counts)
        else:
            sumw2, _ = np.histogram(values, bins=edges, weights=np.asarray(weights) ** 2)
            errors = np.sqrt(sumw2)
        return cls(name, edges, counts, errors=errors, title=title, entries=len(values))

    @property
    def centers(self) -> NDArray[np.float64]:
        return 0.5 * (self.edges[:-1] + self.edges[1:])

    def integral(self) -> float:
        return float(self.counts.sum())

    def mean(self) -> float:
        total = self.counts.sum()
        if total == 0:
            return 0.0
        return float(np.sum(self.counts * self.centers) / total)

    def std_dev(self) -> float:
        total = self.counts.sum()
        if total == 0:
            return 0.0
        var = np.sum(self.counts * (self.centers - self.mean()) ** 2) / total
        return float(np.sqrt(max(var, 0.0)))

    def get_maximum(self) -> float:
        if self.maximum is not None:
            return self.maximum
        return float(self.counts.max()) if len(self.counts) else 0.0

    def max_with_errors(self) -> float:
        if not len(self.counts):
            return 0.0
        return float((self.counts + self.errors).max())

    def draw(self, ax, option: str = "", bottom: NDArray | None = None) -> list:
        tokens = parse_option(option)
        base = np.zeros_like(self.counts) if bottom is None else bottom
        top = base + self.counts
        artists = []
        markers = ("E" in tokens or "P" in tokens) and "HIST" not in tokens
        if markers:
            kwargs = self.marker_kwargs()
            kwargs["ecolor"] = kwargs.pop("color")
            yerr = self.errors if "E" in tokens else None
            container = ax.errorbar(self.centers, top, yerr=yerr, linestyle="none",
                                    elinewidth=self.line_width * st.LINE_WIDTH_SCALE, **kwargs)
            artists.append(container)
        elif "L" in tokens:
            artists.extend(ax.plot(self.centers, top, **self.line_kwargs()))
        else:
            fill = self.fill_kwargs()
            if fill is not None:
                artists.append(ax.stairs(top, self.edges, baseline=base, fill=True, **fill))
            artists.append(ax.stairs(top, self.edges, baseline=base, fill=False, **self.line_kwargs()))
        self.artists = artists
        return artists


class Hist2D(DrawAttributes):
    def __init__(self, name: str, xedges: ArrayLike, yedges: ArrayLike, counts: ArrayLike, title: str = ""):
        super().__init__()
        self.name = name
        self.title = title
        self.xedges = np.asarray(xedges, dtype=np.float64)
        self.yedges = np.asarray(yedges, dtype=np.float64)
        self.counts = np.asarray(counts, dtype=np.float64)
        if self.counts.shape != (len(self.xedges) - 1, len(self.yedges) - 1):
            raise ValueError(f"{name}: counts shape must be (len(xedges) - 1, len(yedges) - 1)")
        self.entries = int(round(self.counts.sum()))
        self.maximum: float | None = None
        self.minimum: float | None = None
        self.colormap = None
        self.artist = None
        self.palette = None

    @classmethod
    def from_values(cls, name: str, x: ArrayLike, y: ArrayLike, bins=20, range=None,
                    weights: ArrayLike | None = None, title: str = "") -> Hist2D:
        counts, xedges, yedges = np.histogram2d(x, y, bins=bins, range=range, weights=weights)
        hist = cls(name, xedges, yedges, counts, title=title)
        hist.entries = len(np.asarray(x))
        return hist

    def get_maximum(self) -> float:
        if self.maximum is not None:
            return self.maximum
        return float(self.counts.max()) if self.counts.size else 0.0

    def draw(self, ax, option: str = "COLZ", cmap=None):
        cmap = self.colormap or cmap
        self.artist = ax.pcolormesh(self.xedges, self.yedges, self.counts.T, cmap=cmap,
                                    vmin=self.minimum, vmax=self.maximum)
        return self.artist


class HistStack:
    def __init__(self, name: str, hists: list[Hist1D] | None = None, option: str = "STACK"):
        self.name = name
        self.option = option.upper()
        self.hists: list[Hist1D] = []
        self.maximum: float | None = None
        for h in hists or []:
            self.add(h)

    def add(self, hist: Hist1D) -> None:
        if self.hists and not np.array_equal(self.hists[0].edges, hist.edges):
            raise ValueError(f"{self.name}: {hist.name} has different binning")
        self.hists.append(hist)

    @property
    def stacked(self) -> bool:
        return "NOSTACK" not in self.option

    def total(self) -> NDArray[np.float64]:
        if not self.hists:
            return np.zeros(0)
        return np.sum([h.counts for h in self.hists], axis=0)

    def get_maximum(self) -> float:
        if self.maximum is not None:
            return self.maximum
        if not self.hists:
            return 0.0
        if self.stacked:
            return float(self.total().max())
        return max(h.get_maximum() for h in self.hists)

    def draw(self, ax, option: str = "HIST") -> list:
        artists = []
        if not self.hists:
            return artists
        stacked = self.stacked and "NOSTACK" not in parse_option(option)
        bottom = np.zeros_like(self.hists[0].counts)
        for h in self.hists:
            if stacked:
                artists.extend(h.draw(ax, option, bottom=bottom))
                bottom = bottom + h.counts
            else:
                artists.extend(h.draw(ax, option))
        return artists
