"""CLI entry point: cmsstyle colors / demo."""
from __future__ import annotations

from pathlib import Path

import click


@click.group()
def cli():
    """CMS plot style helpers."""


@cli.command()
@click.option("--n", "ncolors", default=6, type=click.IntRange(min=1), help="Number of series.")
def colors(ncolors: int):
    """Print the Petroff colors used for N series."""
    from .colors import get_petroff_color_set

    for i, color in enumerate(get_petroff_color_set(ncolors)[:ncolors]):
        click.echo(f"{i:>3d}  {color}")


@cli.command()
@click.option("--out", "out_path", default="cms_demo.png", help="Output file (png, pdf, svg).")
@click.option("--square/--rect", default=True, help="600x600 or 800x600 canvas.")
@click.option("--i-pos", default=11, type=int, help="Position code of the CMS label.")
@click.option("--extra", default="p", help="Extra text or shortcut (p, s, su, wip, pw).")
@click.option("--logo", default=None, help="Logo image drawn instead of the CMS text.")
@click.option("--seed", default=42, type=int)
def demo(out_path: str, square: bool, i_pos: int, extra: str, logo: str | None, seed: int):
    """Render an example stacked plot with data points and a legend."""
    import matplotlib
    matplotlib.use("Agg")
    import numpy as np

    from .canvas import cms_canvas, cms_leg, cms_object_draw, cms_return_max_y, save_canvas
    from .descriptors import set_cms_logo_filename, set_extra_text
    from .histograms import Hist1D
    from .stacks import build_and_draw_stack
    from .style import set_cms_style

    set_cms_style()
    if logo:
        try:
            set_cms_logo_filename(logo)
        except FileNotFoundError as e:
            click.echo(str(e))
            raise SystemExit(1)
    set_extra_text(extra)

    rng = np.random.default_rng(seed)
    edges = np.linspace(0, 200, 41)
    bkg_a = Hist1D.from_values("ttbar", rng.exponential(60, 20_000), bins=edges)
    bkg_b = Hist1D.from_values("W+jets", rng.exponential(35, 12_000), bins=edges)
    signal = Hist1D.from_values("signal", rng.normal(125, 10, 1_500), bins=edges)
    data = Hist1D.from_values("data", np.concatenate([
        rng.exponential(60, 20_000), rng.exponential(35, 12_000), rng.normal(125, 10, 1_500),
    ]), bins=edges)

    stacked = bkg_a.counts + bkg_b.counts + signal.counts
    y_max = 1.4 * cms_return_max_y([data, stacked])
    canv = cms_canvas("demo", 0, 200, 0, y_max, "m [GeV]", "Events / 5 GeV", square=square, i_pos=i_pos)
    leg = cms_leg(0.60, 0.65, 0.92, 0.89)
    build_and_draw_stack([(bkg_a, r"$t\bar{t}$", "f"), (bkg_b, "W+jets", "f"), (signal, "Signal", "f")], leg)
    cms_object_draw(data, "E", MarkerStyle=20)
    leg.add_entry(data, "Data", "pe")
    path = save_canvas(canv, Path(out_path))
    click.echo(f"Saved {path}")
