"""Process-wide label configuration: lumi, energy, CMS and extra texts.

The state is read when labels are drawn, so setters only affect canvases
created (or relabelled with ``cms_lumi``) afterwards.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from . import config
from .logger import CmsLogger

logger = CmsLogger(__name__).get_logger()


@dataclass
class CmsDescriptors:
    lumi: str = config.DEFAULT_LUMI
    energy: str = config.DEFAULT_ENERGY
    cms_text: str = config.DEFAULT_CMS_TEXT
    extra_text: str = config.DEFAULT_EXTRA_TEXT

    cms_text_font: int = config.CMS_TEXT_FONT
    extra_text_font: int = config.EXTRA_TEXT_FONT
    additional_info_font: int = config.ADDITIONAL_INFO_FONT

    # Sizes and offsets are in units of the top margin.
    lumi_text_size: float = config.LUMI_TEXT_SIZE
    lumi_text_offset: float = config.LUMI_TEXT_OFFSET
    cms_text_size: float = config.CMS_TEXT_SIZE
    cms_text_offset_x: float = config.CMS_TEXT_OFFSET_X
    extra_over_cms_text_size: float = config.EXTRA_OVER_CMS_TEXT_SIZE

    use_cms_logo: str = ""
    additional_info: list[str] = field(default_factory=list)

    @property
    def lumi_text(self) -> str:
        """Text drawn above the frame on the right, e.g. ``Run 2, 138 fb^-1 (13 TeV)``."""
        if self.energy:
            return f"{self.lumi} ({self.energy})" if self.lumi else f"({self.energy})"
        return self.lumi


_DESCRIPTORS = CmsDescriptors()


def get_descriptors() -> CmsDescriptors:
    return _DESCRIPTORS


def reset_cms_descriptors() -> None:
    global _DESCRIPTORS
    _DESCRIPTORS = CmsDescriptors()


def set_energy(energy: float, unit: str = "TeV") -> None:
    """Set the centre-of-mass energy; ``energy=0`` writes ``unit`` alone."""
    if energy == 0:
        _DESCRIPTORS.energy = unit
    else:
        _DESCRIPTORS.energy = f"{energy:g} {unit}"


def set_lumi(lumi: float | None, unit: str = "fb", run: str = "Run 2", round_lumi: int | None = None) -> None:
    """Set the luminosity label.

    Args:
        lumi: Luminosity value. ``None`` or negative values are not shown.
        unit: Unit prefix, written as ``unit^-1``.
        run: Run name shown in front of the value. May be empty.
        round_lumi: 0, 1 or 2 fixes the number of decimal places; any other
            value keeps the number as given.
    """
    parts = []
    if run:
        parts.append(run)
    if lumi is not None and lumi >= 0:
        if round_lumi in (0, 1, 2):
            number = f"{lumi:.{round_lumi}f}"
        else:
            number = str(lumi)
        parts.append(f"{number} {unit}$^{{-1}}$")
    _DESCRIPTORS.lumi = ", ".join(parts)


def set_cms_text(text: str, font: int | None = None, size: float | None = None) -> None:
    _DESCRIPTORS.cms_text = text
    if font:
        _DESCRIPTORS.cms_text_font = font
    if size:
        _DESCRIPTORS.cms_text_size = size


def set_cms_logo_filename(filename: str) -> None:
    """Draw the logo image instead of the CMS text; an empty name restores the text."""
    if not filename:
        _DESCRIPTORS.use_cms_logo = ""
        return
    _DESCRIPTORS.use_cms_logo = str(config.resolve_path(filename))


def set_extra_text(text: str, font: int | None = None) -> None:
    """Set the extra text, expanding the recommended shortcuts.

    ``p`` Preliminary, ``s`` Simulation, ``su`` Supplementary,
    ``wip`` Work in progress, ``pw`` Private work (CMS data). Combinations
    must be written in full. Private work drops the CMS text altogether.
    """
    text = config.EXTRA_TEXT_SHORTCUTS.get(text, text)
    _DESCRIPTORS.extra_text = text
    if "Private" in text:
        logger.info("Private work: CMS text and logo are not drawn")
        _DESCRIPTORS.cms_text = ""
        _DESCRIPTORS.use_cms_logo = ""
    if font:
        _DESCRIPTORS.extra_text_font = font


def append_additional_info(text: str) -> None:
    _DESCRIPTORS.additional_info.append(text)
