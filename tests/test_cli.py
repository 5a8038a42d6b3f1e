"""Tests for the chord-transpose command line tool."""

import logging
from pathlib import Path

import pytest

from chord_transposer.cli import main

SHEET = "G       Em\nHello world\n"


class TestMain:
    """Test the command line entry point."""

    def test_stdout(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        sheet = tmp_path / "song.txt"
        sheet.write_text(SHEET, encoding="utf-8")
        assert main([str(sheet), "--from", "C", "--to", "D"]) == 0
        assert capsys.readouterr().out == "A       F#m\nHello world\n"

    def test_output_file_with_flats(self, tmp_path: Path) -> None:
        sheet = tmp_path / "song.txt"
        out = tmp_path / "out.txt"
        sheet.write_text("C  F\nla\n", encoding="utf-8")
        assert main([str(sheet), "--from", "C", "--to", "D", "--flats", "-o", str(out)]) == 0
        assert out.read_text(encoding="utf-8") == "D  G\nla\n"

    def test_notation_follows_source_key(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test a flat source key keeps flat spellings in a sharp target key."""
        sheet = tmp_path / "song.txt"
        sheet.write_text("Bb  Db\nla\n", encoding="utf-8")
        main([str(sheet), "--from", "Bb", "--to", "C"])
        assert capsys.readouterr().out == "C  Eb\nla\n"

    def test_sharp_source_key_spells_sharps(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        sheet = tmp_path / "song.txt"
        sheet.write_text("C  G\nla\n", encoding="utf-8")
        main([str(sheet), "--from", "C", "--to", "Eb"])
        assert capsys.readouterr().out == "D#  A#\nla\n"

    def test_instrumental_and_info(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        sheet = tmp_path / "intro.txt"
        sheet.write_text("A  E\nD  A", encoding="utf-8")
        main([str(sheet), "--from", "A", "--to", "G", "--sharps", "--instrumental", "--info"])
        captured = capsys.readouterr()
        assert captured.out == "G  D\nC  G"
        assert "2 semitones down" in captured.err
        assert "Capo fret 10" in captured.err

    def test_missing_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([str(tmp_path / "missing.txt"), "--from", "C", "--to", "D"]) == 1
        assert "Input file not found" in capsys.readouterr().err

    def test_changed_chord_shape_warns(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        sheet = tmp_path / "song.txt"
        sheet.write_text("C  G\nla\n", encoding="utf-8")
        monkeypatch.setattr("chord_transposer.cli.transpose_text", lambda *args, **kwargs: "D  Am\nla\n")
        with caplog.at_level(logging.WARNING, logger="chord_transposer.shape"):
            assert main([str(sheet), "--from", "C", "--to", "D"]) == 0
        assert "Transposing G by 2 gave Am" in caplog.text

    def test_missing_keys_exit(self) -> None:
        with pytest.raises(SystemExit) as excinfo:
            main(["song.txt"])
        assert excinfo.value.code == 2
