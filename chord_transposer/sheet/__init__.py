"""Chord sheet blocks for chord/lyric alignment.

This module provides column-aware tokenization and conversion between the
paired "chord line above lyric line" text format and positional chord
placements.
"""

from chord_transposer.sheet.block import (
    chords_for_line,
    format_lyrics,
    insert_chord,
    parse_chord_lyric_block,
    remove_chord,
    render_block,
    render_chord_lyric_block,
)
from chord_transposer.sheet.models import ChordLyricBlock, ChordPlacement, Token
from chord_transposer.sheet.tokenizer import replace_tokens, tokenize_line

__all__ = [
    "ChordLyricBlock",
    "ChordPlacement",
    "Token",
    "chords_for_line",
    "format_lyrics",
    "insert_chord",
    "parse_chord_lyric_block",
    "remove_chord",
    "render_block",
    "render_chord_lyric_block",
    "replace_tokens",
    "tokenize_line",
]
