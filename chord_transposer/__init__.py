"""Chord transposition library for chord/lyric sheets.

This library moves written chords between keys. Note spellings are mapped
onto pitch classes, shifted, and re-spelled with sharps or flats; chord
qualities, slash bass notes and the lyrics under each chord line survive
unchanged.

Examples
--------
>>> from chord_transposer import transpose_chord, transpose_text

>>> transpose_chord("Am7/G", 2)
'Bm7/A'
>>> transpose_chord("F#m7/A", 1, prefer_sharps=False)
'Gm7/Bb'

>>> transpose_text("G       Em\\nHello world\\n", "C", "D")
'A       F#m\\nHello world\\n'
"""

from chord_transposer.models import ParsedChord, Section, Song, TransposeInfo
from chord_transposer.pitch_class import (
    FLAT_SCALE,
    SHARP_SCALE,
    display_key,
    pitch_class_of,
    spelling_of,
    step_key,
)
from chord_transposer.shape import chord_pitch_classes, find_shape_mismatches
from chord_transposer.song import transpose_info, transpose_section, transpose_song
from chord_transposer.text import get_semitone_interval, transpose_text, transpose_text_by
from chord_transposer.transposer import parse_chord, transpose_chord

__all__ = [
    "FLAT_SCALE",
    "SHARP_SCALE",
    "ParsedChord",
    "Section",
    "Song",
    "TransposeInfo",
    "chord_pitch_classes",
    "display_key",
    "find_shape_mismatches",
    "get_semitone_interval",
    "parse_chord",
    "pitch_class_of",
    "spelling_of",
    "step_key",
    "transpose_chord",
    "transpose_info",
    "transpose_section",
    "transpose_song",
    "transpose_text",
    "transpose_text_by",
]
