"""Chord/lyric text transposition.

Chord sheets are stored as alternating lines: a chord line followed by the
lyric line it sits above. Lines at even index are chord lines and have every
chord-shaped substring transposed in place; lines at odd index are lyrics and
are passed through byte for byte. The split is positional, it does not look
at line content.
"""

from __future__ import annotations

import logging
import re

from chord_transposer.pitch_class import pitch_class_of
from chord_transposer.transposer import transpose_chord

logger = logging.getLogger(__name__)

# Regex pattern for chord-shaped substrings on a chord line
# Matches: root (A-G), optional accidental, quality run, optional slash bass
CHORD_TOKEN_RE = re.compile(
    r"[A-G](?:##|#|bb|b)?"  # Root note with optional accidental
    r"(?:maj|min|m|dim|aug|add|sus|M|\d)*"  # Quality and extensions
    r"(?:/[A-G](?:##|#|bb|b)?)?"  # Optional slash bass
)


def get_semitone_interval(from_key: str, to_key: str) -> int:
    """Compute the upward semitone distance between two keys.

    Parameters
    ----------
    from_key : str
        Source key spelling.
    to_key : str
        Target key spelling.

    Returns
    -------
    int
        Interval in [0, 11], or 0 if either key is unknown.

    Examples
    --------
    >>> get_semitone_interval("C", "G")
    7
    >>> get_semitone_interval("D", "C")
    10
    >>> get_semitone_interval("C", "H")
    0
    """
    from_pc = pitch_class_of(from_key)
    to_pc = pitch_class_of(to_key)
    if from_pc is None or to_pc is None:
        logger.debug("Cannot compute interval from %r to %r", from_key, to_key)
        return 0
    return (to_pc - from_pc) % 12


def is_chord_line(index: int, instrumental: bool = False) -> bool:
    """Return True if the line at ``index`` holds chords.

    Examples
    --------
    >>> is_chord_line(0), is_chord_line(1), is_chord_line(1, instrumental=True)
    (True, False, True)
    """
    return instrumental or index % 2 == 0


def transpose_line(line: str, semitones: int, prefer_sharps: bool = True) -> str:
    """Transpose every chord-shaped substring of a chord line.

    Text between matches, including the spacing that aligns chords over
    lyrics, is left untouched.

    ``CHORD_TOKEN_RE`` has no word boundaries, so a capitalised word on a
    chord line has its leading note letter transposed too ("Bridge" becomes
    "C#ridge" after +2). Existing sheets are transposed this way; labels
    belong on their own section header, not on chord lines.

    Examples
    --------
    >>> transpose_line("G   D/F#  Em", 2)
    'A   E/G#  F#m'
    >>> transpose_line("Bridge: G", 2)
    'C#ridge: A'
    """
    if not line.strip():
        return line
    return CHORD_TOKEN_RE.sub(lambda m: transpose_chord(m.group(0), semitones, prefer_sharps), line)


def transpose_text_by(
    content: str | None,
    semitones: int,
    prefer_sharps: bool = True,
    *,
    instrumental: bool = False,
) -> str | None:
    """Transpose a chord/lyric block by a raw semitone offset.

    Parameters
    ----------
    content : str | None
        Multi-line text; chord lines at even index, lyric lines at odd index.
    semitones : int
        Signed shift applied to every chord.
    prefer_sharps : bool
        Notation used for the transposed chords.
    instrumental : bool
        Treat every line as a chord line (intros, solos and the like).

    Returns
    -------
    str | None
        The transposed text with the same number of lines.
    """
    if not content or semitones % 12 == 0:
        return content

    lines = content.split("\n")
    transposed = [
        transpose_line(line, semitones, prefer_sharps) if is_chord_line(i, instrumental) else line
        for i, line in enumerate(lines)
    ]
    return "\n".join(transposed)


def transpose_text(
    content: str | None,
    from_key: str,
    to_key: str,
    prefer_sharps: bool = True,
    *,
    instrumental: bool = False,
) -> str | None:
    """Transpose a chord/lyric block from one key to another.

    Parameters
    ----------
    content : str | None
        Multi-line text; chord lines at even index, lyric lines at odd index.
    from_key : str
        Key the text is currently written in.
    to_key : str
        Key to transpose to.
    prefer_sharps : bool
        Notation used for the transposed chords.
    instrumental : bool
        Treat every line as a chord line.

    Returns
    -------
    str | None
        The transposed text, or ``content`` unchanged when the keys match,
        either key is unknown, or there is nothing to transpose.

    Examples
    --------
    >>> transpose_text("G       Em\\nHello world\\n", "C", "D")
    'A       F#m\\nHello world\\n'
    """
    if not content or from_key == to_key:
        return content

    semitones = get_semitone_interval(from_key, to_key)
    if semitones == 0:
        logger.debug("No transposition needed from %r to %r", from_key, to_key)
        return content

    return transpose_text_by(content, semitones, prefer_sharps, instrumental=instrumental)
