"""Chord transposition.

This module shifts parsed chords by the interval between two keys and
re-renders them in the requested spelling.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from chord_transposer.interval import semitone_interval
from chord_transposer.models import Chord
from chord_transposer.parser import parse_chord
from chord_transposer.scale import Spelling

logger = logging.getLogger(__name__)


def shift_chord(chord: Chord, semitones: int) -> Chord:
    """Shift a chord's root and bass by a number of semitones.

    Parameters
    ----------
    chord : Chord
        The chord to shift.
    semitones : int
        Number of semitones (positive = up).

    Returns
    -------
    Chord
        New chord with the same quality and no source text.

    Examples
    --------
    >>> c = Chord(root=0, quality="maj7", bass=4)
    >>> shifted = shift_chord(c, 2)
    >>> shifted.root, shifted.bass
    (2, 6)
    >>> shift_chord(c, -1).root
    11
    """
    bass = None if chord.bass is None else (chord.bass + semitones) % 12
    return replace(
        chord,
        root=(chord.root + semitones) % 12,
        bass=bass,
        text=None,
    )


def _unchanged(chord: Chord, spelling: Spelling) -> str:
    # Source token when there is one, else rendered in the requested spelling
    return chord.text if chord.text is not None else chord.to_text(spelling)


def transpose_chord(
    chord: Chord,
    from_key: str,
    to_key: str,
    spelling: Spelling = "sharp",
) -> str:
    """Transpose a chord from one key to another.

    The quality suffix is carried through unchanged. A slash-chord bass is
    shifted by the same interval as the root.

    Parameters
    ----------
    chord : Chord
        The chord to transpose.
    from_key : str
        The key the chord is written in.
    to_key : str
        The key to transpose into.
    spelling : Spelling
        Spelling table for the transposed root and bass.

    Returns
    -------
    str
        The transposed chord symbol. If either key is unknown, or the keys
        are the same pitch class, the original token text is returned (or the
        chord rendered with ``spelling`` when it has no source text).

    Examples
    --------
    >>> transpose_chord(Chord(root=0, quality="maj7", bass=4), "C", "D")
    'Dmaj7/F#'
    >>> transpose_chord(Chord(root=9, quality="m", text="Am"), "C", "Eb", "flat")
    'Cm'
    """
    semitones = semitone_interval(from_key, to_key)
    if semitones is None:
        logger.debug("Cannot transpose %s from %r to %r", chord, from_key, to_key)
        return _unchanged(chord, spelling)
    if semitones == 0:
        return _unchanged(chord, spelling)
    return shift_chord(chord, semitones).to_text(spelling)


def transpose_token(
    token: str,
    from_key: str,
    to_key: str,
    spelling: Spelling = "sharp",
) -> str:
    """Transpose a single token, leaving non-chords untouched.

    Examples
    --------
    >>> transpose_token("G/B", "G", "A")
    'A/C#'
    >>> transpose_token("grace", "G", "A")
    'grace'
    """
    chord = parse_chord(token)
    if chord is None:
        return token
    return transpose_chord(chord, from_key, to_key, spelling)
