"""Single-chord transposition.

A chord token is split into its root spelling and an opaque modifier. The
root is moved through pitch-class space and re-spelled from a display
scale; the modifier is carried over verbatim, except that a slash bass note
is transposed the same way.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chord_transposer.models import ParsedChord
from chord_transposer.pitch_class import pitch_class_of, spelling_of

if TYPE_CHECKING:
    from collections.abc import Iterable

# Letter plus at most a double accidental
MAX_ROOT_LENGTH = 3

ROOT_LETTERS = "ABCDEFG"


def parse_chord(token: str) -> ParsedChord | None:
    """Split a chord token into root and modifier.

    The root is the longest prefix made of a note letter and accidentals
    that resolves to a pitch class.

    Parameters
    ----------
    token : str
        The chord text (e.g., "Bbm7", "F#m7/A").

    Returns
    -------
    ParsedChord | None
        The parsed chord, or None if the token does not start with a note.

    Examples
    --------
    >>> parse_chord("Bbm7")
    ParsedChord(root='Bb', modifier='m7')
    >>> parse_chord("Ebbsus4")
    ParsedChord(root='Ebb', modifier='sus4')
    >>> parse_chord("Hello") is None
    True
    """
    if not token or token[0] not in ROOT_LETTERS:
        return None

    for length in range(min(MAX_ROOT_LENGTH, len(token)), 0, -1):
        root = token[:length]
        if pitch_class_of(root) is not None:
            return ParsedChord(root=root, modifier=token[length:])

    return None


def transpose_chord(chord: str, semitones: int, prefer_sharps: bool = True) -> str:
    """Transpose a chord token by a number of semitones.

    Parameters
    ----------
    chord : str
        The chord text (e.g., "Am7/G").
    semitones : int
        Signed shift; negative values move down.
    prefer_sharps : bool
        Spell the result from the sharp scale if True, flat scale otherwise.

    Returns
    -------
    str
        The transposed chord, or ``chord`` unchanged if it cannot be parsed.

    Examples
    --------
    >>> transpose_chord("G", 2)
    'A'
    >>> transpose_chord("Cmaj7", -1)
    'Bmaj7'
    >>> transpose_chord("Am7/G", 2, prefer_sharps=True)
    'Bm7/A'
    >>> transpose_chord("F#m7/A", 1, prefer_sharps=False)
    'Gm7/Bb'
    >>> transpose_chord("N.C.", 3)
    'N.C.'
    """
    parsed = parse_chord(chord)
    if parsed is None:
        return chord

    root_pc = pitch_class_of(parsed.root)
    new_root = spelling_of((root_pc + semitones) % 12, prefer_sharps)

    if parsed.bass is None:
        return f"{new_root}{parsed.modifier}"

    new_bass = transpose_chord(parsed.bass, semitones, prefer_sharps)
    return f"{new_root}{parsed.quality}/{new_bass}"


def transpose_chords(chords: Iterable[str], semitones: int, prefer_sharps: bool = True) -> list[str]:
    """Transpose each chord token in order.

    Examples
    --------
    >>> transpose_chords(["C", "Am", "F/A"], 5)
    ['F', 'Dm', 'A#/D']
    """
    return [transpose_chord(chord, semitones, prefer_sharps) for chord in chords]
