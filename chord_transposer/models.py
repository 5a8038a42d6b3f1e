"""Data models for chord-transposer.

This module provides the value types shared by the transposition engine:
the parsed form of a written chord token and the song/section containers
re-keyed by the song layer.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ParsedChord:
    """A chord token split into its root spelling and opaque modifier.

    Parameters
    ----------
    root : str
        The root note spelling (e.g., "C", "F#", "Ebb").
    modifier : str
        Everything after the root, kept verbatim (e.g., "m7", "maj7/G").

    Examples
    --------
    >>> chord = ParsedChord(root="A", modifier="m7/G")
    >>> chord.quality
    'm7'
    >>> chord.bass
    'G'
    >>> str(chord)
    'Am7/G'
    """

    root: str
    modifier: str = ""

    @property
    def quality(self) -> str:
        """The part of the modifier before the slash."""
        return self.modifier.split("/", 1)[0]

    @property
    def bass(self) -> str | None:
        """The slash bass note, or None for plain chords."""
        if "/" not in self.modifier:
            return None
        return self.modifier.split("/", 1)[1]

    def __str__(self) -> str:
        return f"{self.root}{self.modifier}"


@dataclass(frozen=True)
class Section:
    """One section of an arrangement.

    Parameters
    ----------
    section_type : str
        Section label such as "verse", "chorus" or "intro".
    lyrics : str
        Chord-over-lyric text, or a JSON bar list for chord-grid songs.
    chords : str
        Optional separate chord text for the section.
    """

    section_type: str
    lyrics: str = ""
    chords: str = ""


@dataclass(frozen=True)
class Song:
    """An arrangement in a given key.

    Parameters
    ----------
    key : str
        The current key spelling (e.g., "G", "Bb").
    sections : tuple[Section, ...]
        The song's sections in order.
    theme : str
        Layout theme; "chord_grid" songs store bars as JSON in lyrics.
    """

    key: str
    sections: tuple[Section, ...] = field(default_factory=tuple)
    theme: str = "chord_lyric"


@dataclass(frozen=True)
class TransposeInfo:
    """Human-readable summary of a key change.

    Parameters
    ----------
    semitones : int
        Upward interval in [0, 11].
    interval_name : str
        Direction-aware description (e.g., "2 semitones down").
    capo_text : str
        Guitar capo hint (e.g., "Capo fret 2").
    """

    semitones: int
    interval_name: str
    capo_text: str
