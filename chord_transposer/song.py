"""Song-level transposition.

This module re-keys whole arrangements: chord/lyric sections go through the
text transposer, chord-grid sections are JSON bar lists transposed beat by
beat, and the key change itself can be summarised for display (interval
direction and a guitar capo hint).
"""

from __future__ import annotations

import json
import logging
from dataclasses import replace
from typing import Any

from chord_transposer.models import Section, Song, TransposeInfo
from chord_transposer.shape import chord_pairs, find_shape_mismatches
from chord_transposer.text import get_semitone_interval, transpose_text_by
from chord_transposer.transposer import transpose_chord

logger = logging.getLogger(__name__)

# Sections with no lyrics; every line is a chord line
INSTRUMENTAL_SECTIONS: frozenset[str] = frozenset({"intro", "outro", "interlude", "solo", "instrumental"})

# Rests and repeat marks that appear as beats in chord grids
NON_TRANSPOSABLE_SYMBOLS: frozenset[str] = frozenset(
    {
        "WR",
        "HR",
        "QR",
        "ER",
        "SR",
        "WR.",
        "HR.",
        "QR.",
        "ER.",
        "SR.",
        "%",
        "//",
        "/.",
        "/",
    }
)

CHORD_GRID_THEME = "chord_grid"

# Bar fields holding chord beats
BAR_CHORD_FIELDS = ("chord", "chordAfter", "chordEnd")


def is_instrumental(section_type: str) -> bool:
    """Check if a section type has no lyric lines.

    Examples
    --------
    >>> is_instrumental("Intro")
    True
    >>> is_instrumental("verse")
    False
    """
    return section_type.lower() in INSTRUMENTAL_SECTIONS


def transpose_beats(beats: str, semitones: int, prefer_sharps: bool = True) -> str:
    """Transpose a space-separated run of chord-grid beats.

    Rests and repeat marks are kept as they are. Beats whose chord shape
    changes are logged as warnings.

    Examples
    --------
    >>> transpose_beats("C  %  G/B", 2)
    'D % A/C#'
    """
    originals = beats.split()
    transposed = [
        beat if beat in NON_TRANSPOSABLE_SYMBOLS else transpose_chord(beat, semitones, prefer_sharps)
        for beat in originals
    ]
    find_shape_mismatches(zip(originals, transposed), semitones)
    return " ".join(transposed)


def _transpose_bar(bar: dict[str, Any], semitones: int, prefer_sharps: bool) -> dict[str, Any]:
    result = dict(bar)
    for name in BAR_CHORD_FIELDS:
        value = bar.get(name)
        if isinstance(value, str) and value:
            result[name] = transpose_beats(value, semitones, prefer_sharps)
    return result


def transpose_chord_grid(payload: str, semitones: int, prefer_sharps: bool = True) -> str:
    """Transpose a chord-grid section stored as JSON.

    Parameters
    ----------
    payload : str
        JSON list of bars, or an object with a ``bars`` list.
    semitones : int
        Signed shift applied to every chord beat.
    prefer_sharps : bool
        Notation used for the transposed chords.

    Returns
    -------
    str
        The re-encoded JSON, or ``payload`` unchanged if it cannot be decoded.

    Examples
    --------
    >>> transpose_chord_grid('[{"chord": "G Em"}]', 2)
    '[{"chord": "A F#m"}]'
    """
    try:
        data = json.loads(payload)
    except json.JSONDecodeError as exc:
        logger.warning("Could not decode chord grid, leaving it unchanged: %s", exc)
        return payload

    if isinstance(data, dict) and isinstance(data.get("bars"), list):
        data["bars"] = _transpose_bars(data["bars"], semitones, prefer_sharps)
    elif isinstance(data, list):
        data = _transpose_bars(data, semitones, prefer_sharps)
    else:
        logger.warning("Chord grid has no bars, leaving it unchanged")
        return payload

    return json.dumps(data)


def _transpose_bars(bars: list[Any], semitones: int, prefer_sharps: bool) -> list[Any]:
    return [_transpose_bar(bar, semitones, prefer_sharps) if isinstance(bar, dict) else bar for bar in bars]


def transpose_section(
    section: Section,
    semitones: int,
    prefer_sharps: bool = True,
    *,
    chord_grid: bool = False,
) -> Section:
    """Transpose the chords of a single section.

    Parameters
    ----------
    section : Section
        The section to transpose.
    semitones : int
        Signed shift applied to every chord.
    prefer_sharps : bool
        Notation used for the transposed chords.
    chord_grid : bool
        Treat JSON-looking lyrics (starting with "[") as chord-grid bars.

    Returns
    -------
    Section
        A new section; lyric lines are unchanged.
    """
    if chord_grid and section.lyrics.startswith("["):
        return replace(section, lyrics=transpose_chord_grid(section.lyrics, semitones, prefer_sharps))

    instrumental = is_instrumental(section.section_type)
    lyrics = transpose_text_by(section.lyrics, semitones, prefer_sharps, instrumental=instrumental)
    chords = transpose_text_by(section.chords, semitones, prefer_sharps, instrumental=instrumental)
    for before, after in ((section.lyrics, lyrics), (section.chords, chords)):
        if before:
            find_shape_mismatches(chord_pairs(before, after, instrumental=instrumental), semitones)
    return replace(section, lyrics=lyrics, chords=chords)


def transpose_song(song: Song, to_key: str, prefer_sharps: bool = True) -> Song:
    """Transpose every section of a song into a new key.

    Parameters
    ----------
    song : Song
        The song in its current key.
    to_key : str
        The key to move to.
    prefer_sharps : bool
        Notation used for the transposed chords.

    Returns
    -------
    Song
        A new song in ``to_key``, or ``song`` itself when the interval is
        zero or either key is unknown.

    Examples
    --------
    >>> song = Song(key="C", sections=(Section("verse", lyrics="C  G\\nLa la"),))
    >>> transpose_song(song, "D").sections[0].lyrics
    'D  A\\nLa la'
    """
    semitones = get_semitone_interval(song.key, to_key)
    if semitones == 0:
        return song

    chord_grid = song.theme == CHORD_GRID_THEME
    sections = tuple(
        transpose_section(section, semitones, prefer_sharps, chord_grid=chord_grid) for section in song.sections
    )
    logger.debug("Transposed %d sections from %s to %s", len(sections), song.key, to_key)
    return replace(song, key=to_key, sections=sections)


def shortest_interval(from_key: str, to_key: str) -> int:
    """Return the signed interval of the smaller rotation between two keys.

    Intervals up to a tritone go up; larger ones go down.

    Examples
    --------
    >>> shortest_interval("D", "C")
    -2
    >>> shortest_interval("C", "F#")
    6
    """
    semitones = get_semitone_interval(from_key, to_key)
    return semitones if semitones <= 6 else semitones - 12


def transpose_info(from_key: str, to_key: str) -> TransposeInfo:
    """Describe a key change for display.

    Examples
    --------
    >>> info = transpose_info("D", "C")
    >>> info.interval_name, info.capo_text
    ('2 semitones down', 'Capo fret 10')
    """
    semitones = get_semitone_interval(from_key, to_key)
    signed = shortest_interval(from_key, to_key)

    if signed == 0:
        interval_name = "Same key"
    elif abs(signed) == 1:
        interval_name = "1 semitone up" if signed > 0 else "1 semitone down"
    elif signed > 0:
        interval_name = f"{signed} semitones up"
    else:
        interval_name = f"{-signed} semitones down"

    capo_text = "No capo needed" if semitones == 0 else f"Capo fret {semitones}"
    return TransposeInfo(semitones=semitones, interval_name=interval_name, capo_text=capo_text)
