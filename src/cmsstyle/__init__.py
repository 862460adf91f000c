"""CMS house style for matplotlib plots."""
from .canvas import (
    CmsCanvas,
    CmsLegend,
    add_cms_logo,
    add_to_legend,
    cd,
    cms_canvas,
    cms_leg,
    cms_lumi,
    cms_object_draw,
    cms_return_max_y,
    current_canvas,
    draw_text,
    get_cms_canvas_hist,
    save_canvas,
    update_pad,
)
from .colors import (
    get_petroff_color,
    get_petroff_color_set,
    kLimit68,
    kLimit68cms,
    kLimit95,
    kLimit95cms,
    p6,
    p8,
    p10,
    resolve_color,
)
from .descriptors import (
    append_additional_info,
    get_descriptors,
    reset_cms_descriptors,
    set_cms_logo_filename,
    set_cms_text,
    set_energy,
    set_extra_text,
    set_lumi,
)
from .histograms import Hist1D, Hist2D, HistStack
from .properties import copy_root_object_properties, set_root_object_properties
from .stacks import build_and_draw_stack, build_stack
from .stats import StatsBox, change_stats_box, get_palette, update_palette_position
from .style import (
    CmsStyle,
    cms_grid,
    create_alternative_palette,
    get_cms_style,
    set_alternative_2d_color,
    set_cms_palette,
    set_cms_style,
)

__version__ = "0.1.0"
