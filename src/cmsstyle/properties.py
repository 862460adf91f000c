"""Set or copy draw properties by name, e.g. ``FillColor`` or ``SetMarkerStyle``."""
from __future__ import annotations

from collections.abc import Callable

from .colors import resolve_color
from .logger import CmsLogger

logger = CmsLogger(__name__).get_logger()

# property name -> (attribute, converter)
PROPERTIES = {
    "LineColor": ("line_color", resolve_color),
    "LineStyle": ("line_style", int),
    "LineWidth": ("line_width", float),
    "FillColor": ("fill_color", resolve_color),
    "FillStyle": ("fill_style", int),
    "MarkerColor": ("marker_color", resolve_color),
    "MarkerStyle": ("marker_style", int),
    "MarkerSize": ("marker_size", float),
    "TextColor": ("text_color", resolve_color),
    "TextFont": ("text_font", int),
    "TextSize": ("text_size", float),
    "FontSize": ("text_size", float),
    "TextAlign": ("text_align", int),
    "Maximum": ("maximum", float),
    "Minimum": ("minimum", float),
}


def property_name(key: str) -> str:
    """Strip a leading ``Set``/``Get`` and check the name is supported."""
    name = key
    if name.startswith(("Set", "Get")) and len(name) > 3:
        name = name[3:]
    if name not in PROPERTIES:
        raise ValueError(f"Unsupported property: {key}")
    return name


def _attribute(obj, key: str) -> tuple[str, Callable]:
    attr, convert = PROPERTIES[property_name(key)]
    if not hasattr(obj, attr):
        raise AttributeError(f"{type(obj).__name__} has no property {key}")
    return attr, convert


def set_root_object_properties(obj, **confs) -> None:
    """Configure ``obj`` from keyword properties.

    Example::

        set_root_object_properties(h, FillColor="p6::kBlue", SetFillStyle=3004)
    """
    for key, value in confs.items():
        attr, convert = _attribute(obj, key)
        setattr(obj, attr, convert(value))
        logger.debug(f"{getattr(obj, 'name', type(obj).__name__)}: {attr} = {value!r}")


def copy_root_object_properties(obj, srcobj, proplist, **confs) -> None:
    """Copy the named properties from ``srcobj`` to ``obj``, then apply ``confs``."""
    for key in proplist:
        attr, _ = _attribute(obj, key)
        if not hasattr(srcobj, attr):
            raise AttributeError(f"{type(srcobj).__name__} has no property {key}")
        setattr(obj, attr, getattr(srcobj, attr))
    set_root_object_properties(obj, **confs)
