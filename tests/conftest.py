"""Shared fixtures for cmsstyle tests."""
from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402
import pytest  # noqa: E402

from cmsstyle import canvas  # noqa: E402
from cmsstyle.descriptors import reset_cms_descriptors  # noqa: E402
from cmsstyle.histograms import Hist1D, Hist2D  # noqa: E402
from cmsstyle.style import set_cms_style  # noqa: E402


@pytest.fixture(autouse=True)
def clean_state(monkeypatch):
    """Fresh descriptors and style per test; no figures left open."""
    monkeypatch.delenv("CMSSTYLE_DIR", raising=False)
    reset_cms_descriptors()
    set_cms_style()
    yield
    plt.close("all")
    canvas._CURRENT["canvas"] = None


@pytest.fixture
def gaus_hist() -> Hist1D:
    """10K normal(100, 15) values in 40 bins over [0, 200]."""
    rng = np.random.default_rng(42)
    return Hist1D.from_values("gaus", rng.normal(100, 15, 10_000), bins=40, range=(0, 200))


@pytest.fixture
def flat_hist() -> Hist1D:
    return Hist1D("flat", np.linspace(0, 200, 41), np.full(40, 10.0))


@pytest.fixture
def hist2d() -> Hist2D:
    rng = np.random.default_rng(7)
    return Hist2D.from_values("h2", rng.normal(0, 1, 5_000), rng.normal(0, 1, 5_000), bins=20, range=[[-3, 3], [-3, 3]])


@pytest.fixture
def logo_file(tmp_path):
    path = tmp_path / "logo.png"
    plt.imsave(path, np.zeros((16, 16, 3)))
    return path
