"""Data models for chord sheets.

This module defines the column-aware token and the positional chord
placement records used to round-trip a chord-line/lyric-line block.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Token:
    """A token with column span information.

    Parameters
    ----------
    text : str
        The token text content.
    start : int
        Inclusive start column (0-indexed).
    end : int
        Exclusive end column.

    Examples
    --------
    >>> token = Token(text="Gm7", start=0, end=3)
    >>> token.start, token.end
    (0, 3)
    """

    text: str
    start: int
    end: int


@dataclass(frozen=True)
class ChordPlacement:
    """A chord anchored to a character column of a lyric line.

    Parameters
    ----------
    line_index : int
        Index of the lyric line (0-indexed).
    char_index : int
        Column within the lyric line. May equal the line length for a
        chord placed after the last character.
    chord : str
        The chord text exactly as displayed.
    """

    line_index: int
    char_index: int
    chord: str


@dataclass(frozen=True)
class ChordLyricBlock:
    """Lyric lines plus the chords anchored to them.

    Parameters
    ----------
    lyric_lines : tuple[str, ...]
        The lyric lines, in order.
    placements : tuple[ChordPlacement, ...]
        Chord placements. Blocks from the parser list them in line then
        column order; caller-built blocks may hold them in any order.
    """

    lyric_lines: tuple[str, ...]
    placements: tuple[ChordPlacement, ...] = ()
