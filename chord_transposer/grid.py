"""Transposition of chord-grid sections.

Chord-grid sections store their bars as a JSON payload instead of paired
text lines: either a list of bar objects or an object with a ``bars``
list. A bar may carry ``chord`` and ``chordAfter`` strings holding
space-separated beats, some of which are rests or repeat marks.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from chord_transposer.interval import semitone_interval
from chord_transposer.scale import Spelling, spelling_for
from chord_transposer.text import shift_line

logger = logging.getLogger(__name__)

# Beats that are never transposed: rests (whole..sixteenth, dotted) and repeats
NON_TRANSPOSABLE: frozenset[str] = frozenset(
    {
        "WR",
        "HR",
        "QR",
        "ER",
        "SR",
        "WR.",
        "HR.",
        "QR.",
        "ER.",
        "SR.",
        "%",
        "//",
        "/.",
        "/",
    }
)

BAR_CHORD_FIELDS: tuple[str, ...] = ("chord", "chordAfter")


def is_chord_grid(text: str) -> bool:
    """Check whether section text holds a chord-grid payload.

    Examples
    --------
    >>> is_chord_grid('[{"chord": "C"}]')
    True
    >>> is_chord_grid("C  G\\nAmazing grace")
    False
    """
    return text.lstrip().startswith(("[", "{"))


def transpose_beats(beats: str, semitones: int, spelling: Spelling = "sharp") -> str:
    """Transpose a space-separated run of beats, skipping rests and repeats.

    Examples
    --------
    >>> transpose_beats("C QR Am %", 2)
    'D QR Bm %'
    """
    return " ".join(
        beat if beat in NON_TRANSPOSABLE else shift_line(beat, semitones, spelling)
        for beat in beats.split()
    )


def _bars(grid: Any) -> list[Any]:
    if isinstance(grid, dict):
        bars = grid.get("bars", [])
        return bars if isinstance(bars, list) else []
    if isinstance(grid, list):
        return grid
    return []


def transpose_chord_grid(
    payload: str,
    from_key: str,
    to_key: str,
    prefer_sharps: bool = True,
) -> str:
    """Transpose every chord in a chord-grid JSON payload.

    Parameters
    ----------
    payload : str
        JSON list of bars, or an object with a ``bars`` list.
    from_key : str
        The key the grid is written in.
    to_key : str
        The key to transpose into.
    prefer_sharps : bool
        True to spell accidentals with sharps, False for flats.

    Returns
    -------
    str
        The re-serialized payload. It is returned unchanged when it is not
        valid JSON, when a key is unknown, or when the keys match.

    Examples
    --------
    >>> transpose_chord_grid('[{"chord": "G D/F#", "restType": "QR"}]', "G", "A")
    '[{"chord": "A E/G#", "restType": "QR"}]'
    """
    semitones = semitone_interval(from_key, to_key)
    if not semitones:
        return payload

    try:
        grid = json.loads(payload)
    except json.JSONDecodeError:
        logger.warning("Chord grid payload is not valid JSON, left unchanged")
        return payload

    spelling = spelling_for(prefer_sharps)
    for bar in _bars(grid):
        if not isinstance(bar, dict):
            continue
        for field in BAR_CHORD_FIELDS:
            value = bar.get(field)
            if isinstance(value, str) and value:
                bar[field] = transpose_beats(value, semitones, spelling)

    return json.dumps(grid, ensure_ascii=False)
