"""Chord transposition library for chord/lyric song sheets.

This library provides tools for transposing chord symbols embedded in
free-form text between keys, spelled with sharps or flats, while keeping
chord lines aligned with the lyric lines beneath them.

Examples
--------
>>> from chord_transposer import transpose_text, semitone_interval

>>> # Transpose a chord line
>>> transpose_text("C G Am F", "C", "D")
'D A Bm G'

>>> # Capo and interval information
>>> semitone_interval("C", "G")
7

>>> # Round-trip the paired chord-line/lyric-line format
>>> from chord_transposer import ChordPlacement, render_chord_lyric_block
>>> render_chord_lyric_block(["Amazing grace"], [ChordPlacement(0, 0, "C")])
'C\\nAmazing grace'
"""

from chord_transposer.interval import (
    TransposeInfo,
    capo_text,
    describe_transposition,
    interval_label,
    semitone_interval,
)
from chord_transposer.models import Chord, TransposeSettings
from chord_transposer.parser import is_chord, parse_chord
from chord_transposer.scale import (
    FLAT_SCALE,
    KEY_TO_PITCH_CLASS,
    SHARP_SCALE,
    key_to_pitch_class,
    pitch_class_to_name,
)
from chord_transposer.sheet import (
    ChordLyricBlock,
    ChordPlacement,
    parse_chord_lyric_block,
    render_chord_lyric_block,
)
from chord_transposer.text import transpose_text
from chord_transposer.transposer import transpose_chord, transpose_token

__all__ = [
    "FLAT_SCALE",
    "KEY_TO_PITCH_CLASS",
    "SHARP_SCALE",
    "Chord",
    "ChordLyricBlock",
    "ChordPlacement",
    "TransposeInfo",
    "TransposeSettings",
    "capo_text",
    "describe_transposition",
    "interval_label",
    "is_chord",
    "key_to_pitch_class",
    "parse_chord",
    "parse_chord_lyric_block",
    "pitch_class_to_name",
    "render_chord_lyric_block",
    "semitone_interval",
    "transpose_chord",
    "transpose_text",
    "transpose_token",
]
