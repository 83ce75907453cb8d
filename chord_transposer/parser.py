"""Chord symbol parsing.

This module provides regex-based decomposition of a single whitespace-free
token into a root pitch class, an opaque quality suffix and an optional
slash-bass pitch class.

A token is a chord when it starts with a root letter A-G (optionally
followed by ``#`` or ``b``) and the rest of it is built from chord-quality
atoms and an optional slash bass, optionally closed by punctuation such as
``,`` or ``|``. The punctuation is carried through verbatim, so "G," and
"D/F#," in a comma-separated chart transpose to "A," and "E/G#,".
Capitalized words that happen to have this shape are still chords:
the article "A" or a lyric "Dm" will be parsed (and transposed) like any
other chord symbol.
"""

from __future__ import annotations

import re

from chord_transposer.models import Chord
from chord_transposer.scale import key_to_pitch_class

# Constants for chord detection
MAX_CHORD_LENGTH = 20

# Matches: root (A-G), optional accidental, quality atoms, optional slash bass
CHORD_RE = re.compile(
    r"(?P<root>[A-G][#b]?)"  # Root note with optional accidental
    r"(?P<quality>(?:"
    r"maj|min|dim|aug|sus|add|alt|no|"  # named qualities
    r"m|M|"  # minor / major shorthands
    r"\d|"  # extensions (7, 9, 11, 13, 6/9 ...)
    r"[#b+\-°ø()]"  # alterations and grouping
    r")*)"
    r"(?:/(?P<bass>[A-G][#b]?))?"  # Optional slash bass, no nesting
    r"(?P<punctuation>[,.;:!?|]*)"  # Trailing punctuation ("G,", "Am.", "C|")
)


def parse_chord(token: str) -> Chord | None:
    """Parse a token into a Chord.

    Parameters
    ----------
    token : str
        A single whitespace-free token (e.g., "F#m7", "G/B", "love").

    Returns
    -------
    Chord | None
        The parsed chord, or None if the token is not a chord symbol.

    Examples
    --------
    >>> chord = parse_chord("F#m7/C#")
    >>> chord.root, chord.quality, chord.bass
    (6, 'm7', 1)
    >>> parse_chord("Amazing") is None
    True
    >>> parse_chord("C/E/G") is None
    True
    >>> parse_chord("G,").punctuation
    ','
    """
    if not token or len(token) > MAX_CHORD_LENGTH:
        return None

    match = CHORD_RE.fullmatch(token)
    if match is None:
        return None

    root = key_to_pitch_class(match.group("root"))
    if root is None:
        return None

    bass = None
    if match.group("bass") is not None:
        bass = key_to_pitch_class(match.group("bass"))
        if bass is None:
            return None

    return Chord(
        root=root,
        quality=match.group("quality"),
        bass=bass,
        text=token,
        punctuation=match.group("punctuation"),
    )


def is_chord(token: str) -> bool:
    """Check if a token is a chord symbol.

    Examples
    --------
    >>> is_chord("Gm7")
    True
    >>> is_chord("Hello")
    False
    >>> is_chord("C/E")
    True
    """
    return parse_chord(token) is not None
