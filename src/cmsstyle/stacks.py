"""Stacked-histogram helpers."""
from __future__ import annotations

from .canvas import CmsLegend, add_to_legend, cms_object_draw
from .colors import get_petroff_color_set
from .histograms import Hist1D, HistStack
from .properties import set_root_object_properties

DEFAULT_STACK_CONFS = {"FillColor": -1, "FillStyle": 1001}


def build_stack(histos: list[Hist1D], colors: list | None = None, stackopt: str = "STACK",
                confs: dict | None = None) -> HistStack:
    """Stack ``histos`` (first at the bottom) and style each one.

    Args:
        histos: Histograms in stacking order.
        colors: One color per histogram. Defaults to the Petroff set for
            ``len(histos)`` colors.
        stackopt: ``"STACK"`` or ``"NOSTACK"``.
        confs: Properties applied to every histogram. A value of -1 on a
            color property means "this histogram's entry in ``colors``".
            Defaults to ``{"FillColor": -1, "FillStyle": 1001}``.

    Returns:
        The new HistStack.
    """
    if confs is None:
        confs = DEFAULT_STACK_CONFS
    if not colors:
        colors = get_petroff_color_set(len(histos))
    if len(colors) < len(histos):
        raise ValueError(f"{len(colors)} colors for {len(histos)} histograms")

    stack = HistStack("stack", option=stackopt)
    for i, h in enumerate(histos):
        conf = {key: (colors[i] if "Color" in key and value == -1 else value) for key, value in confs.items()}
        set_root_object_properties(h, **conf)
        stack.add(h)
    return stack


def build_and_draw_stack(objs: list[tuple[Hist1D, str, str]], leg: CmsLegend, reverse_leg: bool = True,
                         colors: list | None = None, stackopt: str = "STACK",
                         confs: dict | None = None) -> HistStack:
    """Build a stack from ``(hist, label, legend option)`` triples, fill ``leg`` and draw it.

    The legend is filled top-down, i.e. in reverse stacking order, unless
    ``reverse_leg`` is False.
    """
    stack = build_stack([h for h, _, _ in objs], colors=colors, stackopt=stackopt, confs=confs)
    entries = list(reversed(objs)) if reverse_leg else list(objs)
    add_to_legend(leg, *entries)
    cms_object_draw(stack, stackopt)
    return stack
