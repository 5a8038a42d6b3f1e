"""Chord shape checks for transposed text.

Transposition only rewrites note spellings, so a transposed chord should
sound the same notes as the original moved by the interval. This module
reads chords with pychord to get their pitch content and reports pairs
whose shape changed, e.g. when a chord line was mangled by hand between
two transpositions or a token was split differently after re-spelling.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from chord_transposer.text import CHORD_TOKEN_RE, is_chord_line

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)


def chord_pitch_classes(chord: str) -> frozenset[int] | None:
    """Return the pitch classes sounded by a written chord.

    Parameters
    ----------
    chord : str
        The chord text (e.g., "Am7/G").

    Returns
    -------
    frozenset[int] | None
        Pitch classes (0-11), or None if pychord cannot read the chord.

    Examples
    --------
    >>> sorted(chord_pitch_classes("Am"))
    [0, 4, 9]
    >>> chord_pitch_classes("N.C.") is None
    True
    """
    from pychord import Chord as PyChord

    try:
        parsed = PyChord(chord)
    except ValueError:
        return None
    return frozenset(value % 12 for value in parsed.components(visible=False))


def shape_preserved(original: str, transposed: str, semitones: int) -> bool | None:
    """Check that ``transposed`` is ``original`` moved by ``semitones``.

    Returns None when either chord cannot be read, since nothing can be
    said about it.

    Examples
    --------
    >>> shape_preserved("Am7/G", "Bm7/A", 2)
    True
    >>> shape_preserved("C", "Dm", 2)
    False
    """
    before = chord_pitch_classes(original)
    after = chord_pitch_classes(transposed)
    if before is None or after is None:
        return None
    return after == frozenset((pc + semitones) % 12 for pc in before)


def chord_pairs(original: str, transposed: str, *, instrumental: bool = False) -> list[tuple[str, str]]:
    """Pair up the chords of two versions of a chord/lyric block.

    Chords are taken from chord lines only and paired by position.

    Examples
    --------
    >>> chord_pairs("C   G\\nla la", "D   A\\nla la")
    [('C', 'D'), ('G', 'A')]
    """
    pairs: list[tuple[str, str]] = []
    for i, (before_line, after_line) in enumerate(zip(original.split("\n"), transposed.split("\n"))):
        if not is_chord_line(i, instrumental):
            continue
        pairs.extend(zip(CHORD_TOKEN_RE.findall(before_line), CHORD_TOKEN_RE.findall(after_line)))
    return pairs


def find_shape_mismatches(pairs: Iterable[tuple[str, str]], semitones: int) -> list[tuple[str, str]]:
    """Return the chord pairs whose pitch content did not move as a whole.

    Each mismatch is logged as a warning; the text itself is never changed.

    Parameters
    ----------
    pairs : Iterable[tuple[str, str]]
        (original, transposed) chord pairs.
    semitones : int
        The interval the chords were transposed by.

    Returns
    -------
    list[tuple[str, str]]
        The mismatched pairs in input order.
    """
    mismatches = [pair for pair in pairs if shape_preserved(pair[0], pair[1], semitones) is False]
    for original, transposed in mismatches:
        logger.warning("Transposing %s by %d gave %s, a different chord shape", original, semitones, transposed)
    return mismatches
