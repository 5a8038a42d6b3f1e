"""Pitch class model for note spellings.

This module maps written note names onto the 12 pitch classes (0-11,
where C=0) and back again through one of two fixed display scales. Every
transposition in the package goes through this round trip, so output
spellings are always drawn from ``SHARP_SCALE`` or ``FLAT_SCALE`` and never
carry a double accidental.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

# Note name to pitch class (0-11, where C=0)
NOTE_TO_PC: Mapping[str, int] = MappingProxyType(
    {
        "C": 0,
        "C#": 1,
        "Db": 1,
        "D": 2,
        "D#": 3,
        "Eb": 3,
        "E": 4,
        "Fb": 4,
        "E#": 5,
        "F": 5,
        "F#": 6,
        "Gb": 6,
        "G": 7,
        "G#": 8,
        "Ab": 8,
        "A": 9,
        "A#": 10,
        "Bb": 10,
        "B": 11,
        "Cb": 11,
        "B#": 0,
        # Double accidentals
        "C##": 2,
        "D##": 4,
        "E##": 6,
        "F##": 7,
        "G##": 9,
        "A##": 11,
        "B##": 1,
        "Cbb": 10,
        "Dbb": 0,
        "Ebb": 2,
        "Fbb": 3,
        "Gbb": 5,
        "Abb": 7,
        "Bbb": 9,
    }
)

SHARP_SCALE: tuple[str, ...] = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")
FLAT_SCALE: tuple[str, ...] = ("C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B")

# Keys the transpose dialog opens in flat notation
FLAT_KEYS: frozenset[str] = frozenset({"Db", "Eb", "Gb", "Ab", "Bb"})


def pitch_class_of(spelling: str) -> int | None:
    """Look up the pitch class of a note spelling.

    Parameters
    ----------
    spelling : str
        Note name (e.g., "C", "F#", "Bbb"). Case-sensitive, no trimming.

    Returns
    -------
    int | None
        Pitch class (0-11), or None if the spelling is not in the table.

    Examples
    --------
    >>> pitch_class_of("Db")
    1
    >>> pitch_class_of("B#")
    0
    >>> pitch_class_of("H") is None
    True
    """
    return NOTE_TO_PC.get(spelling)


def note_to_pc(note: str) -> int:
    """Convert a note name to pitch class (0-11).

    Raises
    ------
    ValueError
        If the note name is not recognized.

    Examples
    --------
    >>> note_to_pc("F#")
    6
    """
    pc = pitch_class_of(note)
    if pc is not None:
        return pc
    msg = f"Unknown note: {note}"
    raise ValueError(msg)


def scale_for(prefer_sharps: bool) -> tuple[str, ...]:
    """Return the display scale for the requested accidental style."""
    return SHARP_SCALE if prefer_sharps else FLAT_SCALE


def spelling_of(pitch_class: int, prefer_sharps: bool = True) -> str:
    """Spell a pitch class using the sharp or flat display scale.

    Parameters
    ----------
    pitch_class : int
        Pitch class; values outside 0-11 are reduced modulo 12.
    prefer_sharps : bool
        Use ``SHARP_SCALE`` if True, ``FLAT_SCALE`` otherwise.

    Returns
    -------
    str
        A natural or single-accidental note name.

    Examples
    --------
    >>> spelling_of(10, prefer_sharps=True)
    'A#'
    >>> spelling_of(10, prefer_sharps=False)
    'Bb'
    """
    return scale_for(prefer_sharps)[pitch_class % 12]


def enharmonic_spellings(spelling: str) -> list[str]:
    """List the other table spellings of the same pitch class.

    Examples
    --------
    >>> enharmonic_spellings("C#")
    ['B##', 'Db']
    >>> enharmonic_spellings("X")
    []
    """
    pc = pitch_class_of(spelling)
    if pc is None:
        return []
    return sorted(name for name, value in NOTE_TO_PC.items() if value == pc and name != spelling)


def display_key(key: str, prefer_sharps: bool) -> str:
    """Re-spell a key name in the requested notation.

    Unknown keys are returned unchanged.

    Examples
    --------
    >>> display_key("A#", prefer_sharps=False)
    'Bb'
    >>> display_key("Ebb", prefer_sharps=True)
    'D'
    """
    pc = pitch_class_of(key)
    if pc is None:
        return key
    return spelling_of(pc, prefer_sharps)


def default_prefer_sharps(key: str) -> bool:
    """Choose the notation a key is normally written in.

    Flat-spelled keys (Db, Eb, Gb, Ab, Bb and other "b" spellings) default to
    flats; everything else defaults to sharps.

    Examples
    --------
    >>> default_prefer_sharps("Eb")
    False
    >>> default_prefer_sharps("G")
    True
    """
    if key in FLAT_KEYS:
        return False
    return "b" not in key[1:]


def step_key(key: str, steps: int, prefer_sharps: bool = True) -> str:
    """Move a key up or down by a number of semitones.

    Parameters
    ----------
    key : str
        Starting key spelling.
    steps : int
        Signed semitone offset (e.g., -1 for one step down).
    prefer_sharps : bool
        Notation used for the resulting key.

    Returns
    -------
    str
        The new key, or ``key`` unchanged if it cannot be resolved.

    Examples
    --------
    >>> step_key("C", -1, prefer_sharps=False)
    'B'
    >>> step_key("A", 1, prefer_sharps=False)
    'Bb'
    """
    pc = pitch_class_of(key)
    if pc is None:
        return key
    return spelling_of(pc + steps, prefer_sharps)
