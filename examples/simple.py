import sys

from chord_transposer import Section, Song, transpose_info, transpose_song, transpose_text

text = """G        D/F#     Em
Amazing grace how sweet the sound
C    G        D
That saved a wretch like me
"""

# Chord lines move, lyric lines stay as written
sys.stdout.write(transpose_text(text, "G", "Bb", prefer_sharps=False))

info = transpose_info("G", "Bb")
sys.stdout.write(f"{info.interval_name} ({info.capo_text})\n")  # "3 semitones up (Capo fret 3)"

# Whole arrangements, including chord-only sections
song = Song(
    key="G",
    sections=(
        Section("intro", lyrics="G  C  G  D"),
        Section("verse", lyrics=text),
    ),
)
for section in transpose_song(song, "A").sections:
    sys.stdout.write(f"[{section.section_type}]\n{section.lyrics}\n")
