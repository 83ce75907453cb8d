"""Chord and transposition data models for chord-transposer.

This module provides the pitch-class representation of a chord symbol
and the explicit settings value that drives a transposition.
"""

from __future__ import annotations

from dataclasses import dataclass

from chord_transposer.interval import semitone_interval
from chord_transposer.scale import Spelling, pitch_class_to_name, spelling_for


@dataclass(frozen=True)
class Chord:
    """Pitch-class chord representation.

    Parameters
    ----------
    root : int
        Pitch class of the root (0-11).
    quality : str
        The quality/extension suffix exactly as written (e.g., "m7",
        "sus4", "add9"). Never interpreted or transposed.
    bass : int | None
        Pitch class of the bass note for slash chords, None otherwise.
    text : str | None
        The source token this chord was parsed from, if any.
    punctuation : str
        Punctuation that followed the symbol in its token (e.g., "," in
        "G,"). Rendered after the bass, unchanged.

    Examples
    --------
    >>> chord = Chord(root=0, quality="maj7", bass=4)
    >>> chord.to_text()
    'Cmaj7/E'
    >>> Chord(root=10, quality="m").to_text("flat")
    'Bbm'
    """

    root: int
    quality: str = ""
    bass: int | None = None
    text: str | None = None
    punctuation: str = ""

    @property
    def is_slash(self) -> bool:
        """Whether the chord carries a bass note."""
        return self.bass is not None

    def to_text(self, spelling: Spelling = "sharp") -> str:
        """Render the chord symbol.

        Parameters
        ----------
        spelling : Spelling
            Spelling table used for the root and bass names.

        Returns
        -------
        str
            Chord symbol (e.g., "F#m7", "D/F#").
        """
        result = f"{pitch_class_to_name(self.root, spelling)}{self.quality}"
        if self.bass is not None:
            result = f"{result}/{pitch_class_to_name(self.bass, spelling)}"
        return result + self.punctuation

    def __str__(self) -> str:
        """Return the source token, or the sharp rendering when there is none."""
        return self.text if self.text is not None else self.to_text()


@dataclass(frozen=True)
class TransposeSettings:
    """Explicit transposition settings.

    Parameters
    ----------
    from_key : str
        The key the material is currently written in.
    to_key : str
        The key to transpose into.
    prefer_sharps : bool
        True to spell accidentals with sharps, False for flats.

    Examples
    --------
    >>> settings = TransposeSettings(from_key="C", to_key="Eb", prefer_sharps=False)
    >>> settings.semitones
    3
    >>> settings.spelling
    'flat'
    """

    from_key: str
    to_key: str
    prefer_sharps: bool = True

    @property
    def semitones(self) -> int | None:
        """Upward distance from ``from_key`` to ``to_key``, None if unresolvable."""
        return semitone_interval(self.from_key, self.to_key)

    @property
    def spelling(self) -> Spelling:
        """Spelling preference derived from ``prefer_sharps``."""
        return spelling_for(self.prefer_sharps)

    def reversed(self) -> TransposeSettings:
        """Return settings that transpose back to ``from_key``."""
        return TransposeSettings(
            from_key=self.to_key,
            to_key=self.from_key,
            prefer_sharps=self.prefer_sharps,
        )
