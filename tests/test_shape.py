"""Tests for chord shape checks."""

import logging

import pytest

from chord_transposer.shape import chord_pairs, chord_pitch_classes, find_shape_mismatches, shape_preserved
from chord_transposer.transposer import transpose_chord


class TestChordPitchClasses:
    """Test reading pitch content with pychord."""

    def test_major_triad(self) -> None:
        assert chord_pitch_classes("C") == {0, 4, 7}

    def test_minor_seventh(self) -> None:
        assert chord_pitch_classes("Am7") == {9, 0, 4, 7}

    def test_slash_bass_included(self) -> None:
        """Test the bass note of a slash chord is part of the shape."""
        assert chord_pitch_classes("C/Bb") == {10, 0, 4, 7}

    @pytest.mark.parametrize("text", ["N.C.", "Hello", ""])
    def test_unreadable(self, text: str) -> None:
        assert chord_pitch_classes(text) is None


class TestShapePreserved:
    """Test comparing a chord with its transposition."""

    def test_moved_as_a_whole(self) -> None:
        assert shape_preserved("Am7/G", "Bm7/A", 2) is True

    def test_quality_changed(self) -> None:
        assert shape_preserved("C", "Dm", 2) is False

    def test_wrong_interval(self) -> None:
        assert shape_preserved("C", "D", 3) is False

    def test_enharmonic_spelling_accepted(self) -> None:
        assert shape_preserved("F#", "Gb", 0) is True

    def test_unreadable_chord(self) -> None:
        assert shape_preserved("C", "N.C.", 2) is None

    @pytest.mark.parametrize("chord", ["C", "Am", "F#m7", "Bbmaj7", "Edim", "Gsus4", "D7"])
    @pytest.mark.parametrize("semitones", [1, 5, 7, 11])
    def test_transposition_keeps_shape(self, chord: str, semitones: int) -> None:
        transposed = transpose_chord(chord, semitones, prefer_sharps=False)
        assert shape_preserved(chord, transposed, semitones) is True


class TestChordPairs:
    """Test pairing chords between two versions of a block."""

    def test_lyric_lines_skipped(self) -> None:
        assert chord_pairs("C   G\nla la", "D   A\nla la") == [("C", "D"), ("G", "A")]

    def test_instrumental_reads_every_line(self) -> None:
        pairs = chord_pairs("C  G\nAm  F", "D  A\nBm  G", instrumental=True)
        assert pairs == [("C", "D"), ("G", "A"), ("Am", "Bm"), ("F", "G")]

    def test_empty_text(self) -> None:
        assert chord_pairs("", "") == []


class TestFindShapeMismatches:
    """Test reporting chords whose shape changed."""

    def test_clean_pairs(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="chord_transposer.shape"):
            assert find_shape_mismatches([("C", "D"), ("Em", "F#m")], 2) == []
        assert not caplog.records

    def test_mismatch_returned_and_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="chord_transposer.shape"):
            mismatches = find_shape_mismatches([("C", "D"), ("G", "Am"), ("%", "%")], 2)
        assert mismatches == [("G", "Am")]
        assert "Transposing G by 2 gave Am" in caplog.text

    def test_accepts_iterators(self) -> None:
        assert find_shape_mismatches(zip(["C"], ["Dm"]), 2) == [("C", "Dm")]
