"""Tests for bulk text transposition."""

import pytest

from chord_transposer.scale import FLAT_SCALE, SHARP_SCALE
from chord_transposer.text import shift_line, transpose_lines, transpose_text

SHEET = """G         D/F#
Amazing grace, how sweet
Em        C     G
the sound that saved a wretch"""

ALL_KEYS = list(SHARP_SCALE) + ["Db", "Eb", "Gb", "Ab", "Bb"]


class TestTransposeTextScenarios:
    """Concrete transposition scenarios."""

    def test_simple_progression(self) -> None:
        """C G Am F from C to D."""
        assert transpose_text("C G Am F", "C", "D", True) == "D A Bm G"

    def test_flat_preference(self) -> None:
        """Flat preference spells black keys with flats."""
        assert transpose_text("C F G", "C", "Eb", False) == "Eb Ab Bb"

    def test_sharp_preference(self) -> None:
        """Sharp preference spells black keys with sharps."""
        assert transpose_text("C F G", "C", "Eb", True) == "D# G# A#"

    def test_sheet_lyrics_untouched(self) -> None:
        """Chord lines change, lyric lines do not (except chord-shaped words)."""
        result = transpose_text(SHEET, "G", "A")
        lines = result.split("\n")
        assert lines[0] == "A         E/G#"
        assert lines[1] == "Amazing grace, how sweet"
        assert lines[2] == "F#m        D     A"
        # "a" is lowercase and therefore not a chord
        assert lines[3] == "the sound that saved a wretch"

    def test_whitespace_preserved(self) -> None:
        """Leading, inner and trailing whitespace is copied verbatim."""
        assert transpose_text("  C \t G  ", "C", "D") == "  D \t A  "

    def test_line_breaks_preserved(self) -> None:
        """Empty lines and trailing newlines survive."""
        assert transpose_text("C\n\nG\n", "C", "D") == "D\n\nA\n"

    def test_crlf_line_endings(self) -> None:
        """Carriage returns are kept as whitespace."""
        assert transpose_text("C G\r\nAm\r\n", "C", "D") == "D A\r\nBm\r\n"

    def test_empty_text(self) -> None:
        """Empty text stays empty."""
        assert transpose_text("", "C", "D") == ""

    def test_unknown_key_returns_text(self) -> None:
        """Unresolvable keys leave the text unchanged."""
        assert transpose_text(SHEET, "G", "X") == SHEET
        assert transpose_text(SHEET, "", "A") == SHEET

    def test_capitalized_article_is_transposed(self) -> None:
        """A capital "A" at the start of a lyric is treated as a chord."""
        assert transpose_text("A love so true", "C", "D") == "B love so true"

    def test_comma_separated_chart(self) -> None:
        """Chords followed by punctuation are transposed, punctuation kept."""
        assert transpose_text("A, love so true", "C", "D") == "B, love so true"
        assert transpose_text("G, D/F#, Em.", "G", "A") == "A, E/G#, F#m."


class TestTransposeTextProperties:
    """Algebraic properties of text transposition."""

    @pytest.mark.parametrize("key", ALL_KEYS)
    @pytest.mark.parametrize("prefer_sharps", [True, False])
    def test_zero_interval_is_identity(self, key: str, prefer_sharps: bool) -> None:
        """Transposing to the same key returns the input unchanged."""
        text = "Bb  C#m7  F/A\nlove you so"
        assert transpose_text(text, key, key, prefer_sharps) == text

    @pytest.mark.parametrize(("from_key", "to_key"), [("C", "E"), ("G", "F#"), ("D", "B"), ("A", "C")])
    def test_round_trip_sharps(self, from_key: str, to_key: str) -> None:
        """Going there and back restores sharp-spelled chords."""
        text = "C  C#m7  F#/A#  Gsus4  A#dim"
        there = transpose_text(text, from_key, to_key, True)
        assert transpose_text(there, to_key, from_key, True) == text

    @pytest.mark.parametrize(("from_key", "to_key"), [("C", "Eb"), ("F", "Db"), ("Bb", "G")])
    def test_round_trip_flats(self, from_key: str, to_key: str) -> None:
        """Going there and back restores flat-spelled chords."""
        text = "Bb  Ebmaj7  Ab/C  Dbadd9"
        there = transpose_text(text, from_key, to_key, False)
        assert transpose_text(there, to_key, from_key, False) == text

    @pytest.mark.parametrize("prefer_sharps", [True, False])
    def test_composition(self, prefer_sharps: bool) -> None:
        """C to E then E to G equals C to G directly."""
        text = "C   Am7   F/C   G7sus4\nlove you so"
        two_step = transpose_text(
            transpose_text(text, "C", "E", prefer_sharps), "E", "G", prefer_sharps
        )
        assert two_step == transpose_text(text, "C", "G", prefer_sharps)

    @pytest.mark.parametrize(
        ("scale", "prefer_sharps"), [(SHARP_SCALE, True), (FLAT_SCALE, False)]
    )
    def test_chromatic_closure(self, scale: tuple[str, ...], prefer_sharps: bool) -> None:
        """Twelve single-semitone steps return the original text."""
        text = "  ".join(f"{name}m7" for name in scale)
        result = text
        for step in range(12):
            result = transpose_text(result, scale[step], scale[(step + 1) % 12], prefer_sharps)
        assert result == text

    @pytest.mark.parametrize(("from_key", "to_key"), [("C", "D"), ("G", "Bb"), ("E", "C#"), ("F", "F")])
    def test_lyric_words_invariant(self, from_key: str, to_key: str) -> None:
        """Lowercase lyric words are never touched."""
        assert transpose_text("love you so", from_key, to_key) == "love you so"


class TestLineHelpers:
    """Test the per-line helpers."""

    def test_shift_line(self) -> None:
        """A line is shifted by a raw semitone count."""
        assert shift_line("Am    G/B", -2) == "Gm    F/A"

    def test_transpose_lines(self) -> None:
        """Lines are transposed independently."""
        assert transpose_lines(["C", "hello", "G"], "C", "F") == ["F", "hello", "C"]

    def test_transpose_lines_returns_new_list(self) -> None:
        """The caller's list is not modified."""
        lines = ["C", "G"]
        result = transpose_lines(lines, "C", "C")
        assert result == lines
        assert result is not lines
