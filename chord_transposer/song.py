"""Song and section transposition.

This module applies the bulk text transposer to the text fields of an
arrangement's sections, the way the editor does when the player picks a
new key.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from chord_transposer.grid import is_chord_grid, transpose_chord_grid
from chord_transposer.models import TransposeSettings
from chord_transposer.text import transpose_text

CHORD_GRID_THEME = "chord_grid"


@dataclass(frozen=True)
class Section:
    """One section of an arrangement.

    Parameters
    ----------
    section_type : str
        Section kind (e.g., "verse", "chorus", "intro").
    lyrics : str
        Lyric text, paired-line chord/lyric text, or a chord-grid payload.
    chords : str
        Chord chart text.
    content : str
        Free-form notes.
    """

    section_type: str
    lyrics: str = ""
    chords: str = ""
    content: str = ""


@dataclass(frozen=True)
class Song:
    """An arrangement with its current key.

    Parameters
    ----------
    current_key : str
        The key the sections are written in.
    sections : tuple[Section, ...]
        The sections, in order.
    theme : str
        Display theme; ``"chord_grid"`` songs keep grids in ``lyrics``.
    """

    current_key: str
    sections: tuple[Section, ...] = ()
    theme: str = ""


def transpose_section(
    section: Section,
    settings: TransposeSettings,
    *,
    theme: str = "",
) -> Section:
    """Transpose the lyrics, chords and content of a section.

    Parameters
    ----------
    section : Section
        The section to transpose.
    settings : TransposeSettings
        Keys and notation preference.
    theme : str
        The song theme. In chord-grid songs, lyrics holding a grid payload
        are transposed as a grid.

    Returns
    -------
    Section
        A new section with every text field transposed.
    """

    def _text(value: str) -> str:
        return transpose_text(value, settings.from_key, settings.to_key, settings.prefer_sharps)

    if theme == CHORD_GRID_THEME and is_chord_grid(section.lyrics):
        lyrics = transpose_chord_grid(
            section.lyrics,
            settings.from_key,
            settings.to_key,
            settings.prefer_sharps,
        )
    else:
        lyrics = _text(section.lyrics)

    return replace(
        section,
        lyrics=lyrics,
        chords=_text(section.chords),
        content=_text(section.content),
    )


def transpose_song(song: Song, to_key: str, prefer_sharps: bool = True) -> Song:
    """Transpose a whole song into a new key.

    Parameters
    ----------
    song : Song
        The song to transpose.
    to_key : str
        The new key.
    prefer_sharps : bool
        True to spell accidentals with sharps, False for flats.

    Returns
    -------
    Song
        A new song in ``to_key``. When the keys are the same pitch class
        or either key is unknown, the song is returned as-is.

    Examples
    --------
    >>> song = Song(current_key="C", sections=(Section("verse", chords="C G"),))
    >>> transposed = transpose_song(song, "D")
    >>> transposed.current_key, transposed.sections[0].chords
    ('D', 'D A')
    """
    settings = TransposeSettings(
        from_key=song.current_key,
        to_key=to_key,
        prefer_sharps=prefer_sharps,
    )
    if not settings.semitones:
        return song

    sections = tuple(
        transpose_section(section, settings, theme=song.theme) for section in song.sections
    )
    return replace(song, current_key=to_key, sections=sections)
