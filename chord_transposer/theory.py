"""Chord theory helpers for the chord picker.

This module derives chord suggestions for a key from the major-scale
degrees, spells out chord tones, and lists enharmonic aliases of a chord.
All arithmetic goes through the chromatic scale model.
"""

from __future__ import annotations

from dataclasses import dataclass

from chord_transposer.models import Chord
from chord_transposer.parser import parse_chord
from chord_transposer.scale import key_to_pitch_class, pitch_class_to_name, spelling_for

# Major-scale degrees in semitones above the tonic (I ii iii IV V vi vii)
MAJOR_SCALE_DEGREES: tuple[int, ...] = (0, 2, 4, 5, 7, 9, 11)

# Bass notes offered for slash chords: degrees 3, 5, 7 and 2 of the key
SLASH_BASS_DEGREES: tuple[int, ...] = (4, 7, 11, 2)

SEVENTH_QUALITIES: tuple[str, ...] = ("7", "maj7")
OTHER_QUALITIES: tuple[str, ...] = ("sus4", "add9", "sus2")


@dataclass(frozen=True)
class ChordSuggestions:
    """Chord picker suggestions for a key, grouped by family.

    Parameters
    ----------
    major : tuple[str, ...]
        Major triads on each scale degree.
    minor : tuple[str, ...]
        Minor triads on each scale degree.
    seventh : tuple[str, ...]
        Dominant and major seventh chords on each scale degree.
    slash : tuple[str, ...]
        Each scale-degree root over common bass notes of the key.
    other : tuple[str, ...]
        Suspended and added-tone chords on each scale degree.
    """

    major: tuple[str, ...] = ()
    minor: tuple[str, ...] = ()
    seventh: tuple[str, ...] = ()
    slash: tuple[str, ...] = ()
    other: tuple[str, ...] = ()

    def all(self) -> tuple[str, ...]:
        """Return every suggestion, family by family."""
        return self.major + self.minor + self.seventh + self.slash + self.other


def scale_degree_roots(key: str, prefer_sharps: bool = True) -> list[str]:
    """Return the root names of the seven major-scale degrees of a key.

    Examples
    --------
    >>> scale_degree_roots("D")
    ['D', 'E', 'F#', 'G', 'A', 'B', 'C#']
    >>> scale_degree_roots("F", prefer_sharps=False)
    ['F', 'G', 'A', 'Bb', 'C', 'D', 'E']
    """
    tonic = key_to_pitch_class(key)
    if tonic is None:
        return []
    spelling = spelling_for(prefer_sharps)
    return [pitch_class_to_name(tonic + degree, spelling) for degree in MAJOR_SCALE_DEGREES]


def suggest_chords(key: str, prefer_sharps: bool = True) -> ChordSuggestions:
    """Build chord suggestions for a key.

    Parameters
    ----------
    key : str
        The song key (e.g., "G").
    prefer_sharps : bool
        Notation for the suggested chord roots.

    Returns
    -------
    ChordSuggestions
        Suggestions grouped by family; empty if the key is unknown.

    Examples
    --------
    >>> suggestions = suggest_chords("C")
    >>> suggestions.major
    ('C', 'D', 'E', 'F', 'G', 'A', 'B')
    >>> suggestions.slash[:3]
    ('C/E', 'C/G', 'C/B')
    """
    roots = scale_degree_roots(key, prefer_sharps)
    if not roots:
        return ChordSuggestions()

    tonic = key_to_pitch_class(key)
    spelling = spelling_for(prefer_sharps)
    basses = [pitch_class_to_name(tonic + degree, spelling) for degree in SLASH_BASS_DEGREES]

    return ChordSuggestions(
        major=tuple(roots),
        minor=tuple(f"{root}m" for root in roots),
        seventh=tuple(f"{root}{q}" for root in roots for q in SEVENTH_QUALITIES),
        slash=tuple(f"{root}/{bass}" for root in roots for bass in basses if bass != root),
        other=tuple(f"{root}{q}" for root in roots for q in OTHER_QUALITIES),
    )


def _quality_pitch_classes(chord: Chord) -> list[int] | None:
    """Pitch classes of the chord built on its root, via pychord's quality table."""
    from pychord import Chord as PyChord

    name = f"{pitch_class_to_name(chord.root)}{chord.quality}"
    try:
        values = PyChord(name).components(visible=False)
    except ValueError:
        return None

    pitch_classes: list[int] = []
    for value in values:
        pc = value % 12
        if pc not in pitch_classes:
            pitch_classes.append(pc)
    return pitch_classes


def chord_tones(token: str, prefer_sharps: bool = True) -> list[str] | None:
    """Spell out the notes of a chord symbol.

    Parameters
    ----------
    token : str
        Chord symbol (e.g., "Am7", "D/F#").
    prefer_sharps : bool
        Notation for the note names.

    Returns
    -------
    list[str] | None
        Note names starting from the bass (the root unless it is a slash
        chord), or None if the token is not a chord or its quality is not
        a known chord formula.

    Examples
    --------
    >>> chord_tones("Am7")
    ['A', 'C', 'E', 'G']
    >>> chord_tones("C/E")
    ['E', 'C', 'G']
    """
    chord = parse_chord(token)
    if chord is None:
        return None

    pitch_classes = _quality_pitch_classes(chord)
    if pitch_classes is None:
        return None

    if chord.bass is not None:
        pitch_classes = [chord.bass] + [pc for pc in pitch_classes if pc != chord.bass]

    spelling = spelling_for(prefer_sharps)
    return [pitch_class_to_name(pc, spelling) for pc in pitch_classes]


def chord_aliases(token: str) -> list[str]:
    """List the enharmonic respellings of a chord symbol.

    Examples
    --------
    >>> chord_aliases("C#m7")
    ['Dbm7']
    >>> chord_aliases("D/F#")
    ['D/Gb']
    >>> chord_aliases("Am")
    []
    """
    chord = parse_chord(token)
    if chord is None:
        return []

    aliases: list[str] = []
    for spelling in ("sharp", "flat"):
        text = chord.to_text(spelling)
        if text != token and text not in aliases:
            aliases.append(text)
    return aliases
