"""Tests for the cmsstyle command line."""
from __future__ import annotations

from click.testing import CliRunner

from cmsstyle.cli import cli
from cmsstyle.colors import p6


def test_colors():
    result = CliRunner().invoke(cli, ["colors", "--n", "3"])
    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert len(lines) == 3
    assert lines[0] == f"  0  {p6.kBlue}"


def test_colors_rejects_zero():
    result = CliRunner().invoke(cli, ["colors", "--n", "0"])
    assert result.exit_code != 0


def test_demo(tmp_path):
    out = tmp_path / "demo.png"
    result = CliRunner().invoke(cli, ["demo", "--out", str(out), "--rect", "--i-pos", "0", "--extra", "s"])
    assert result.exit_code == 0, result.output
    assert out.exists()
    assert "Saved" in result.output


def test_demo_with_logo(tmp_path, logo_file):
    out = tmp_path / "demo_logo.png"
    result = CliRunner().invoke(cli, ["demo", "--out", str(out), "--logo", str(logo_file)])
    assert result.exit_code == 0, result.output
    assert out.exists()


def test_demo_missing_logo(tmp_path):
    result = CliRunner().invoke(cli, ["demo", "--out", str(tmp_path / "x.png"), "--logo", "missing.png"])
    assert result.exit_code == 1
    assert "not found" in result.output
