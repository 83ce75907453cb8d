"""Chromatic scale model.

This module provides pitch class (0-11) arithmetic and the two canonical
spelling tables used to render a pitch class back into a key or chord
root name.
"""

from __future__ import annotations

from typing import Literal

Spelling = Literal["sharp", "flat"]

# Pitch class to note name, one table per spelling preference
SHARP_SCALE: tuple[str, ...] = (
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "A#",
    "B",
)
FLAT_SCALE: tuple[str, ...] = (
    "C",
    "Db",
    "D",
    "Eb",
    "E",
    "F",
    "Gb",
    "G",
    "Ab",
    "A",
    "Bb",
    "B",
)

# Note name to pitch class (0-11, where C=0), case-sensitive
KEY_TO_PITCH_CLASS: dict[str, int] = {
    "C": 0,
    "C#": 1,
    "Db": 1,
    "D": 2,
    "D#": 3,
    "Eb": 3,
    "E": 4,
    "Fb": 4,
    "E#": 5,
    "F": 5,
    "F#": 6,
    "Gb": 6,
    "G": 7,
    "G#": 8,
    "Ab": 8,
    "A": 9,
    "A#": 10,
    "Bb": 10,
    "B": 11,
    "Cb": 11,
    "B#": 0,
}

# Keys written with flats default to flat notation in the editor
FLAT_KEYS: frozenset[str] = frozenset({"Db", "Eb", "Gb", "Ab", "Bb"})

_SCALES: dict[str, tuple[str, ...]] = {
    "sharp": SHARP_SCALE,
    "flat": FLAT_SCALE,
}


def key_to_pitch_class(name: str) -> int | None:
    """Resolve a key or note name to its pitch class.

    Parameters
    ----------
    name : str
        Key name (e.g., "C", "F#", "Bb"). Lookup is case-sensitive.

    Returns
    -------
    int | None
        Pitch class (0-11, where C=0), or None if the name is unknown.

    Examples
    --------
    >>> key_to_pitch_class("Db")
    1
    >>> key_to_pitch_class("H") is None
    True
    """
    return KEY_TO_PITCH_CLASS.get(name)


def scale_for(spelling: Spelling) -> tuple[str, ...]:
    """Return the 12-entry name table for a spelling preference.

    Raises
    ------
    ValueError
        If the spelling is neither "sharp" nor "flat".
    """
    if spelling in _SCALES:
        return _SCALES[spelling]
    msg = f"Unknown spelling: {spelling}"
    raise ValueError(msg)


def pitch_class_to_name(pc: int, spelling: Spelling = "sharp") -> str:
    """Render a pitch class as a note name.

    Parameters
    ----------
    pc : int
        Pitch class. Values outside 0-11 are reduced modulo 12.
    spelling : Spelling
        "sharp" to use SHARP_SCALE, "flat" to use FLAT_SCALE.

    Returns
    -------
    str
        The note name.

    Examples
    --------
    >>> pitch_class_to_name(10)
    'A#'
    >>> pitch_class_to_name(10, "flat")
    'Bb'
    """
    return scale_for(spelling)[pc % 12]


def spelling_for(prefer_sharps: bool) -> Spelling:
    """Map the editor's sharps/flats toggle to a spelling preference."""
    return "sharp" if prefer_sharps else "flat"


def prefers_sharps(key: str) -> bool:
    """Return the default notation toggle for a key.

    Examples
    --------
    >>> prefers_sharps("G")
    True
    >>> prefers_sharps("Eb")
    False
    """
    return key not in FLAT_KEYS


def respell_key(key: str, prefer_sharps: bool = True) -> str:
    """Display a key in the chosen notation.

    Unknown keys are returned unchanged.

    Examples
    --------
    >>> respell_key("Bb")
    'A#'
    >>> respell_key("C#", prefer_sharps=False)
    'Db'
    """
    pc = key_to_pitch_class(key)
    if pc is None:
        return key
    return pitch_class_to_name(pc, spelling_for(prefer_sharps))


def step_key(key: str, steps: int, prefer_sharps: bool = True) -> str:
    """Move a key up or down the chromatic scale.

    Parameters
    ----------
    key : str
        The starting key name.
    steps : int
        Semitones to move (positive = up), wrapping around the octave.
    prefer_sharps : bool
        Notation for the resulting key name.

    Returns
    -------
    str
        The new key name, or ``key`` unchanged if it cannot be resolved.

    Examples
    --------
    >>> step_key("B", 1)
    'C'
    >>> step_key("C", -1, prefer_sharps=False)
    'B'
    >>> step_key("D", -1, prefer_sharps=False)
    'Db'
    """
    pc = key_to_pitch_class(key)
    if pc is None:
        return key
    return pitch_class_to_name(pc + steps, spelling_for(prefer_sharps))


def enharmonic_equivalent(name: str) -> str | None:
    """Return the other common spelling of a note name.

    Only the five black-key pitch classes have a sharp/flat pair in the
    spelling tables; every other name returns None.

    Examples
    --------
    >>> enharmonic_equivalent("C#")
    'Db'
    >>> enharmonic_equivalent("Bb")
    'A#'
    >>> enharmonic_equivalent("E") is None
    True
    """
    pc = key_to_pitch_class(name)
    if pc is None:
        return None
    sharp, flat = SHARP_SCALE[pc], FLAT_SCALE[pc]
    if sharp == flat:
        return None
    if name == sharp:
        return flat
    if name == flat:
        return sharp
    return None
