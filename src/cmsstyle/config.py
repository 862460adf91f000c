"""Single source of truth for canvas geometry, label offsets and environment lookups."""
from __future__ import annotations

import logging
import os
from pathlib import Path

# ── Canvas geometry ─────────────────────────────────────────────────────────
# Reference sizes in pixels; figures are created at DPI so 1 px == 1/DPI inch.
CANVAS_REF_W_SQUARE = 600
CANVAS_REF_W_RECT = 800
CANVAS_REF_H = 600
DPI = 100

# Margins as fractions of the reference height, converted per canvas.
MARGIN_TOP = 0.07
MARGIN_BOTTOM = 0.11
MARGIN_LEFT = 0.13
MARGIN_RIGHT = 0.03
# With a z axis the right margin holds the palette: MARGIN_RIGHT_Z * H/W + MARGIN_RIGHT_Z_PAD.
MARGIN_RIGHT_Z = 0.11
MARGIN_RIGHT_Z_PAD = 0.03

# Unset coordinate marker accepted for backwards compatibility.
UNSET = -999

# ── Label placement (all in units of the frame, see cms_lumi) ───────────────
REL_POS_X = 0.035
REL_POS_Y = 0.035
REL_EXTRA_DY = 1.2

# ── Default descriptors ─────────────────────────────────────────────────────
DEFAULT_LUMI = "Run 2, 138 fb$^{-1}$"
DEFAULT_ENERGY = "13 TeV"
DEFAULT_CMS_TEXT = "CMS"
DEFAULT_EXTRA_TEXT = "Preliminary"

CMS_TEXT_FONT = 61  # helvetica-bold
EXTRA_TEXT_FONT = 52  # helvetica-italics
ADDITIONAL_INFO_FONT = 42

LUMI_TEXT_SIZE = 0.6
LUMI_TEXT_OFFSET = 0.2
CMS_TEXT_SIZE = 0.75
CMS_TEXT_OFFSET_X = 0.0
EXTRA_OVER_CMS_TEXT_SIZE = 0.76

EXTRA_TEXT_SHORTCUTS: dict[str, str] = {
    "p": "Preliminary",
    "s": "Simulation",
    "su": "Supplementary",
    "wip": "Work in progress",
    "pw": "Private work (CMS data)",
}

# ── Stats box ───────────────────────────────────────────────────────────────
STATS_BOX_NDC = (0.70, 0.70, 0.95, 0.90)
STATS_FONT_SIZE = 0.03

# ── Environment ─────────────────────────────────────────────────────────────
ENV_DIR = "CMSSTYLE_DIR"
ENV_LOG_LEVEL = "CMSSTYLE_LOG_LEVEL"


def cmsstyle_dir() -> Path | None:
    """Directory that relative logo filenames are resolved against, if set."""
    value = os.environ.get(ENV_DIR)
    if not value:
        return None
    return Path(value)


def log_level() -> str:
    """Level name from $CMSSTYLE_LOG_LEVEL; unknown names fall back to WARNING."""
    level = os.environ.get(ENV_LOG_LEVEL, "WARNING").upper()
    if not isinstance(logging.getLevelName(level), int):
        return "WARNING"
    return level


def resolve_path(filename: str) -> Path:
    """Resolve a file as given, then relative to $CMSSTYLE_DIR.

    Args:
        filename: Path to the file, absolute or relative.

    Returns:
        The first existing candidate.

    Raises:
        FileNotFoundError: If no candidate exists.
    """
    path = Path(filename)
    if path.exists():
        return path
    base = cmsstyle_dir()
    if base is not None and (base / path).exists():
        return base / path
    raise FileNotFoundError(f"{filename} not found (also looked in ${ENV_DIR})")
