"""Chord-line/lyric-line block serialization.

This module converts between the paired-line text format, where every
lyric line is preceded by a chord line aligned to it by column, and the
positional ChordPlacement records used for interactive editing.

Placements that overlap after rendering (two chords at the same column,
or a chord starting inside the previous one) are written back to back
without re-spacing, so parsing such a block may merge or shift them.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from chord_transposer.sheet.models import ChordLyricBlock, ChordPlacement
from chord_transposer.sheet.tokenizer import tokenize_line

logger = logging.getLogger(__name__)


def preprocess(text: str) -> list[str]:
    """Split paired-line text on any line ending, keeping each line intact."""
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    return text.split("\n")


def _by_column(placements: Iterable[ChordPlacement]) -> list[ChordPlacement]:
    # Stable: stacked chords keep insertion order
    return sorted(placements, key=lambda p: p.char_index)


def _canonical(placements: Iterable[ChordPlacement]) -> tuple[ChordPlacement, ...]:
    return tuple(sorted(placements, key=lambda p: (p.line_index, p.char_index)))


def render_chord_line(placements: Iterable[ChordPlacement]) -> str:
    """Build the chord line for one lyric line.

    Parameters
    ----------
    placements : Iterable[ChordPlacement]
        Placements anchored to a single lyric line.

    Returns
    -------
    str
        Chord texts padded with spaces to their columns, with no trailing
        whitespace.

    Examples
    --------
    >>> render_chord_line([ChordPlacement(0, 8, "G"), ChordPlacement(0, 0, "C")])
    'C       G'
    """
    parts: list[str] = []
    cursor = 0
    for placement in _by_column(placements):
        column = max(0, placement.char_index)
        if column > cursor:
            parts.append(" " * (column - cursor))
            cursor = column
        parts.append(placement.chord)
        cursor += len(placement.chord)
    return "".join(parts)


def render_chord_lyric_block(
    lyric_lines: Iterable[str],
    placements: Iterable[ChordPlacement],
) -> str:
    """Serialize lyric lines and placements to paired-line text.

    Every lyric line is preceded by its chord line, which is empty when the
    line has no chords, so the pairing stays one-to-one.

    Parameters
    ----------
    lyric_lines : Iterable[str]
        The lyric lines, in order.
    placements : Iterable[ChordPlacement]
        Chord placements. Placements on lines past the end are ignored.

    Returns
    -------
    str
        Chord and lyric lines joined with newlines.

    Examples
    --------
    >>> render_chord_lyric_block(["Amazing grace"], [ChordPlacement(0, 0, "C")])
    'C\\nAmazing grace'
    """
    lines = list(lyric_lines)
    by_line: dict[int, list[ChordPlacement]] = {i: [] for i in range(len(lines))}
    for placement in placements:
        if placement.line_index in by_line:
            by_line[placement.line_index].append(placement)
        else:
            logger.debug("Dropping placement on missing line: %s", placement)

    output: list[str] = []
    for i, lyric in enumerate(lines):
        output.append(render_chord_line(by_line[i]))
        output.append(lyric)
    return "\n".join(output)


def parse_chord_lyric_block(text: str) -> ChordLyricBlock:
    """Parse paired-line text into lyric lines and placements.

    Even-indexed lines are chord lines and odd-indexed lines are lyric
    lines. Each non-whitespace run on a chord line becomes a placement at
    its starting column, clamped to the length of the lyric line below.
    A trailing chord line with no lyric line pairs with an empty lyric.

    Parameters
    ----------
    text : str
        The block text.

    Returns
    -------
    ChordLyricBlock
        The lyric lines and their placements.

    Examples
    --------
    >>> block = parse_chord_lyric_block("C      G\\nAmazing grace")
    >>> block.lyric_lines
    ('Amazing grace',)
    >>> [(p.char_index, p.chord) for p in block.placements]
    [(0, 'C'), (7, 'G')]
    """
    if not text:
        return ChordLyricBlock(lyric_lines=())

    lines = preprocess(text)
    lyric_lines: list[str] = []
    placements: list[ChordPlacement] = []

    for line_index, pair_start in enumerate(range(0, len(lines), 2)):
        chord_line = lines[pair_start]
        lyric = lines[pair_start + 1] if pair_start + 1 < len(lines) else ""
        lyric_lines.append(lyric)

        for token in tokenize_line(chord_line):
            placements.append(
                ChordPlacement(
                    line_index=line_index,
                    char_index=min(token.start, len(lyric)),
                    chord=token.text,
                )
            )

    return ChordLyricBlock(lyric_lines=tuple(lyric_lines), placements=tuple(placements))


def render_block(block: ChordLyricBlock) -> str:
    """Serialize a ChordLyricBlock. See :func:`render_chord_lyric_block`."""
    return render_chord_lyric_block(block.lyric_lines, block.placements)


def chords_for_line(block: ChordLyricBlock, line_index: int) -> tuple[ChordPlacement, ...]:
    """Return the placements on one lyric line, ordered by column."""
    return tuple(_by_column(p for p in block.placements if p.line_index == line_index))


def insert_chord(
    block: ChordLyricBlock,
    line_index: int,
    char_index: int,
    chord: str,
) -> ChordLyricBlock:
    """Place a chord above a lyric character.

    A chord already starting at the same column of the same line is
    replaced.

    Parameters
    ----------
    block : ChordLyricBlock
        The block to edit.
    line_index : int
        The lyric line to anchor to.
    char_index : int
        The column, clamped to ``0..len(line)``.
    chord : str
        The chord text.

    Returns
    -------
    ChordLyricBlock
        A new block, or ``block`` itself if ``line_index`` is out of range.

    Examples
    --------
    >>> block = ChordLyricBlock(lyric_lines=("Amazing grace",))
    >>> block = insert_chord(block, 0, 8, "G")
    >>> render_block(insert_chord(block, 0, 8, "D"))
    '        D\\nAmazing grace'
    """
    if not 0 <= line_index < len(block.lyric_lines):
        logger.debug("Line %d out of range, chord %r not placed", line_index, chord)
        return block

    column = min(max(0, char_index), len(block.lyric_lines[line_index]))
    kept = [
        p
        for p in block.placements
        if not (p.line_index == line_index and p.char_index == column)
    ]
    kept.append(ChordPlacement(line_index=line_index, char_index=column, chord=chord))
    return ChordLyricBlock(lyric_lines=block.lyric_lines, placements=_canonical(kept))


def remove_chord(block: ChordLyricBlock, line_index: int, char_index: int) -> ChordLyricBlock:
    """Remove every chord anchored at a line and column."""
    kept = tuple(
        p
        for p in block.placements
        if not (p.line_index == line_index and p.char_index == char_index)
    )
    return ChordLyricBlock(lyric_lines=block.lyric_lines, placements=kept)


def format_lyrics(lyrics: str) -> str:
    """Interleave an empty chord line above every lyric line.

    Examples
    --------
    >>> format_lyrics("Amazing grace\\nHow sweet")
    '\\nAmazing grace\\n\\nHow sweet'
    """
    return render_chord_lyric_block(preprocess(lyrics), ())
