"""Bulk transposition of free-form text.

This module applies the chord parser and transposer to every token of a
multi-line block (lyrics, chord charts or notes). Non-chord tokens and all
whitespace are copied verbatim, so a chord line keeps its column layout
relative to the lyric line it sits above.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from chord_transposer.interval import semitone_interval
from chord_transposer.parser import parse_chord
from chord_transposer.scale import Spelling, spelling_for
from chord_transposer.sheet.tokenizer import replace_tokens, tokenize_line
from chord_transposer.transposer import shift_chord

logger = logging.getLogger(__name__)


def _shift_token(token: str, semitones: int, spelling: Spelling) -> str:
    chord = parse_chord(token)
    if chord is None:
        return token
    return shift_chord(chord, semitones).to_text(spelling)


def shift_line(line: str, semitones: int, spelling: Spelling = "sharp") -> str:
    """Shift every chord token of one line by a number of semitones.

    Parameters
    ----------
    line : str
        A single line of text, without its newline.
    semitones : int
        Number of semitones (positive = up).
    spelling : Spelling
        Spelling table for transposed chords.

    Returns
    -------
    str
        The line with chord tokens replaced and everything else untouched.

    Examples
    --------
    >>> shift_line("C    Am   love", 2)
    'D    Bm   love'
    """
    tokens = tokenize_line(line)
    texts = [_shift_token(t.text, semitones, spelling) for t in tokens]
    return replace_tokens(line, tokens, texts)


def transpose_lines(
    lines: Iterable[str],
    from_key: str,
    to_key: str,
    prefer_sharps: bool = True,
) -> list[str]:
    """Transpose a sequence of lines.

    Returns the lines unchanged (as a new list) when either key is unknown
    or both keys are the same pitch class.
    """
    lines = list(lines)
    semitones = semitone_interval(from_key, to_key)
    if semitones is None:
        logger.debug("Unknown key in %r -> %r, text left unchanged", from_key, to_key)
        return lines
    if semitones == 0:
        return lines

    spelling = spelling_for(prefer_sharps)
    return [shift_line(line, semitones, spelling) for line in lines]


def transpose_text(
    text: str,
    from_key: str,
    to_key: str,
    prefer_sharps: bool = True,
) -> str:
    """Transpose every chord symbol in a block of text.

    Parameters
    ----------
    text : str
        Multi-line text mixing chords and other words.
    from_key : str
        The key the text is written in.
    to_key : str
        The key to transpose into.
    prefer_sharps : bool
        True to spell accidentals with sharps, False for flats.

    Returns
    -------
    str
        The transposed text. Line breaks and whitespace are preserved
        exactly; tokens that are not chords are left as they are.

    Examples
    --------
    >>> transpose_text("C G Am F", "C", "D")
    'D A Bm G'
    >>> transpose_text("G    D/F#\\nAmazing grace", "G", "F", prefer_sharps=False)
    'F    C/E\\nAmazing grace'
    """
    if not text:
        return text
    return "\n".join(transpose_lines(text.split("\n"), from_key, to_key, prefer_sharps))
