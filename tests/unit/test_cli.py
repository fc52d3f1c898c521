"""Tests for the command-line interface."""

import sys
from unittest.mock import patch

import pytest

from quickdict.cli.main import main


def _run(monkeypatch, *argv):
    monkeypatch.setattr(sys, "argv", ["quickdict", *argv])
    return main()


class TestDefineCommand:
    def test_found(self, monkeypatch, capsys, sample_dictionary):
        code = _run(monkeypatch, "--dictionary", str(sample_dictionary), "define", "ran")

        out = capsys.readouterr().out
        assert code == 0
        assert "run [local] (redirected from ran)" in out

    def test_not_found(self, monkeypatch, capsys, sample_dictionary):
        code = _run(monkeypatch, "--dictionary", str(sample_dictionary), "define", "zzz")

        assert code == 1
        assert "Not Found" in capsys.readouterr().out

    def test_missing_dictionary(self, monkeypatch, capsys, tmp_path):
        code = _run(monkeypatch, "--dictionary", str(tmp_path / "none.json"), "define", "run")

        out = capsys.readouterr().out
        assert code == 1
        assert "[ERROR]" in out


class TestSearchCommand:
    def test_local_only(self, monkeypatch, capsys, sample_dictionary):
        with patch("requests.get") as mock_get:
            code = _run(
                monkeypatch, "--dictionary", str(sample_dictionary), "search", "run", "--no-online"
            )

        out = capsys.readouterr().out
        assert code == 0
        assert "runner" in out
        mock_get.assert_not_called()


class TestAssetCommand:
    def test_writes_output(self, monkeypatch, sample_dictionary, resource_dir, tmp_path):
        output = tmp_path / "out.png"

        code = _run(
            monkeypatch,
            "--dictionary",
            str(sample_dictionary),
            "--resources",
            str(resource_dir),
            "asset",
            "asset://run.png",
            "-o",
            str(output),
        )

        assert code == 0
        assert output.read_bytes() == b"\x89PNGfake-png"

    def test_requires_resources(self, monkeypatch, capsys, sample_dictionary):
        code = _run(monkeypatch, "--dictionary", str(sample_dictionary), "asset", "run.png")

        assert code == 1
        assert "--resources" in capsys.readouterr().out


def test_no_command_prints_help(monkeypatch, capsys):
    assert _run(monkeypatch) == 1
    assert "usage" in capsys.readouterr().out


def test_version(monkeypatch):
    with pytest.raises(SystemExit):
        _run(monkeypatch, "--version")
