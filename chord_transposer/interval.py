"""Interval and capo calculations between two keys."""

from __future__ import annotations

from dataclasses import dataclass

from chord_transposer.scale import key_to_pitch_class


@dataclass(frozen=True)
class TransposeInfo:
    """Summary of a key change as shown to the player.

    Parameters
    ----------
    semitones : int
        Upward distance in semitones (0-11).
    capo_text : str
        Capo advice (e.g., "capo fret 7").
    interval_label : str
        Shortest-direction description (e.g., "5 semitones down").
    """

    semitones: int
    capo_text: str
    interval_label: str


def semitone_interval(from_key: str, to_key: str) -> int | None:
    """Compute the upward semitone distance between two keys.

    Parameters
    ----------
    from_key : str
        The original key (e.g., "C").
    to_key : str
        The target key (e.g., "G").

    Returns
    -------
    int | None
        Distance in the range 0-11, or None if either key is unknown.

    Examples
    --------
    >>> semitone_interval("C", "G")
    7
    >>> semitone_interval("G", "C")
    5
    >>> semitone_interval("C", "X") is None
    True
    """
    from_pc = key_to_pitch_class(from_key)
    to_pc = key_to_pitch_class(to_key)
    if from_pc is None or to_pc is None:
        return None
    return (to_pc - from_pc + 12) % 12


def interval_label(semitones: int) -> str:
    """Describe an interval in its shortest direction.

    Examples
    --------
    >>> interval_label(2)
    '2 semitones up'
    >>> interval_label(7)
    '5 semitones down'
    >>> interval_label(11)
    '1 semitone down'
    """
    semitones %= 12
    if semitones == 0:
        return "no capo / same key"
    if semitones == 1:
        return "1 semitone up"
    if semitones == 11:
        return "1 semitone down"
    if semitones <= 6:
        return f"{semitones} semitones up"
    return f"{12 - semitones} semitones down"


def capo_text(semitones: int) -> str:
    """Describe the capo position for an upward interval.

    The fret is the raw interval, never the shortest direction.

    Examples
    --------
    >>> capo_text(0)
    'no capo needed'
    >>> capo_text(7)
    'capo fret 7'
    """
    if semitones == 0:
        return "no capo needed"
    return f"capo fret {semitones}"


def describe_transposition(from_key: str, to_key: str) -> TransposeInfo | None:
    """Summarize a key change.

    Parameters
    ----------
    from_key : str
        The original key.
    to_key : str
        The target key.

    Returns
    -------
    TransposeInfo | None
        Interval, capo advice and label, or None if a key is unknown.

    Examples
    --------
    >>> info = describe_transposition("C", "G")
    >>> info.capo_text, info.interval_label
    ('capo fret 7', '5 semitones down')
    """
    semitones = semitone_interval(from_key, to_key)
    if semitones is None:
        return None
    return TransposeInfo(
        semitones=semitones,
        capo_text=capo_text(semitones),
        interval_label=interval_label(semitones),
    )
