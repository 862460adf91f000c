"""Tests for histogram containers and draw options."""
from __future__ import annotations

import matplotlib.pyplot as plt
import numpy as np
import pytest

from cmsstyle.histograms import Hist1D, Hist2D, HistStack, parse_option


@pytest.mark.parametrize("option, tokens", [
    ("", set()),
    ("HIST SAME", {"HIST", "SAME"}),
    ("hist", {"HIST"}),
    ("E1P", {"E", "P"}),
    ("SAMES", {"SAMES"}),
    ("COLZ", {"COLZ", "COL", "Z"}),
    ("NOSTACK", {"NOSTACK"}),
    ("STACK", {"STACK"}),
])
def test_parse_option(option, tokens):
    assert parse_option(option) == tokens


def test_length_mismatch():
    with pytest.raises(ValueError):
        Hist1D("bad", [0, 1, 2], [1, 2, 3])


def test_default_errors(flat_hist: Hist1D):
    assert np.allclose(flat_hist.errors, np.sqrt(10))
    assert flat_hist.entries == 400
    assert flat_hist.integral() == 400


def test_flat_moments(flat_hist: Hist1D):
    assert flat_hist.mean() == pytest.approx(100)
    assert flat_hist.std_dev() == pytest.approx(np.sqrt(25 * (40 ** 2 - 1) / 12))


def test_gaus_moments(gaus_hist: Hist1D):
    assert gaus_hist.entries == 10_000
    assert gaus_hist.mean() == pytest.approx(100, abs=1)
    assert gaus_hist.std_dev() == pytest.approx(15, abs=1)


def test_empty_moments():
    h = Hist1D("empty", [0, 1, 2], [0, 0])
    assert h.mean() == 0.0
    assert h.std_dev() == 0.0


def test_weighted_errors():
    h = Hist1D.from_values("w", [0.5, 0.5, 1.5], bins=2, range=(0, 2), weights=[2.0, 1.0, 3.0])
    assert np.allclose(h.counts, [3.0, 3.0])
    assert np.allclose(h.errors, [np.sqrt(5.0), 3.0])
    assert h.entries == 3


def test_maximum(flat_hist: Hist1D):
    assert flat_hist.get_maximum() == 10
    assert flat_hist.max_with_errors() == pytest.approx(10 + np.sqrt(10))
    flat_hist.maximum = 42
    assert flat_hist.get_maximum() == 42


def test_draw_hist_hollow_and_filled(flat_hist: Hist1D):
    _, ax = plt.subplots()
    assert len(flat_hist.draw(ax, "HIST")) == 1
    flat_hist.fill_style = 1001
    assert len(flat_hist.draw(ax, "HIST")) == 2
    assert len(ax.patches) == 3


def test_draw_error_points(flat_hist: Hist1D):
    _, ax = plt.subplots()
    (container,) = flat_hist.draw(ax, "E")
    assert len(ax.containers) == 1
    assert container is ax.containers[0]


def test_draw_line(flat_hist: Hist1D):
    _, ax = plt.subplots()
    flat_hist.draw(ax, "L")
    assert len(ax.lines) == 1


def test_hist2d_shape():
    with pytest.raises(ValueError):
        Hist2D("bad", [0, 1, 2], [0, 1], np.zeros((1, 2)))


def test_hist2d_from_values(hist2d: Hist2D):
    assert hist2d.counts.shape == (20, 20)
    assert hist2d.entries == 5_000
    assert hist2d.get_maximum() == hist2d.counts.max()


def _three(edges=np.linspace(0, 3, 4)):
    return [Hist1D(name, edges, counts) for name, counts in
            (("a", [1, 2, 3]), ("b", [4, 0, 1]), ("c", [0, 1, 5]))]


def test_stack_total_and_maximum():
    stack = HistStack("s", _three())
    assert np.allclose(stack.total(), [5, 3, 9])
    assert stack.get_maximum() == 9


def test_nostack_maximum():
    stack = HistStack("s", _three(), option="NOSTACK")
    assert not stack.stacked
    assert stack.get_maximum() == 5


def test_stack_binning_mismatch():
    stack = HistStack("s", _three())
    with pytest.raises(ValueError):
        stack.add(Hist1D("d", [0, 1, 2], [1, 1]))


def test_stack_draw_baselines():
    stack = HistStack("s", _three())
    _, ax = plt.subplots()
    stack.draw(ax, "HIST")
    tops = [patch.get_data().values for patch in ax.patches]
    assert np.allclose(tops[-1], [5, 3, 9])


def test_empty_stack():
    stack = HistStack("s")
    assert stack.get_maximum() == 0.0
    _, ax = plt.subplots()
    assert stack.draw(ax) == []
