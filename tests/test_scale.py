"""Tests for the chromatic scale model."""

import pytest

from chord_transposer.scale import (
    FLAT_SCALE,
    KEY_TO_PITCH_CLASS,
    SHARP_SCALE,
    enharmonic_equivalent,
    key_to_pitch_class,
    pitch_class_to_name,
    prefers_sharps,
    respell_key,
    scale_for,
    spelling_for,
    step_key,
)


class TestScaleTables:
    """Test the spelling tables and lookup map."""

    def test_tables_have_twelve_entries(self) -> None:
        """Both spelling tables cover every pitch class."""
        assert len(SHARP_SCALE) == 12
        assert len(FLAT_SCALE) == 12

    def test_tables_resolve_to_their_index(self) -> None:
        """Every table entry resolves back to its own pitch class."""
        for pc in range(12):
            assert KEY_TO_PITCH_CLASS[SHARP_SCALE[pc]] == pc
            assert KEY_TO_PITCH_CLASS[FLAT_SCALE[pc]] == pc

    @pytest.mark.parametrize(
        ("sharp", "flat"),
        [("C#", "Db"), ("D#", "Eb"), ("F#", "Gb"), ("G#", "Ab"), ("A#", "Bb")],
    )
    def test_enharmonic_names_share_pitch_class(self, sharp: str, flat: str) -> None:
        """Sharp and flat spellings resolve to the same pitch class."""
        assert key_to_pitch_class(sharp) == key_to_pitch_class(flat)


class TestKeyToPitchClass:
    """Test key name resolution."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [("C", 0), ("C#", 1), ("Db", 1), ("E", 4), ("F#", 6), ("Bb", 10), ("B", 11)],
    )
    def test_known_keys(self, name: str, expected: int) -> None:
        """Known names resolve."""
        assert key_to_pitch_class(name) == expected

    @pytest.mark.parametrize("name", ["", "H", "c", "db", "C##", "Do"])
    def test_unknown_keys_return_none(self, name: str) -> None:
        """Unknown or wrongly cased names return None instead of raising."""
        assert key_to_pitch_class(name) is None


class TestPitchClassToName:
    """Test rendering pitch classes."""

    def test_sharp_spelling(self) -> None:
        """Sharp spelling uses the sharp table."""
        assert pitch_class_to_name(1) == "C#"

    def test_flat_spelling(self) -> None:
        """Flat spelling uses the flat table."""
        assert pitch_class_to_name(1, "flat") == "Db"

    def test_wraps_modulo_twelve(self) -> None:
        """Out-of-range values wrap around the octave."""
        assert pitch_class_to_name(12) == "C"
        assert pitch_class_to_name(-1) == "B"

    def test_unknown_spelling_raises(self) -> None:
        """An unknown spelling name is a programming error."""
        with pytest.raises(ValueError, match="Unknown spelling"):
            scale_for("double-sharp")  # type: ignore[arg-type]


class TestKeyHelpers:
    """Test the key display helpers."""

    def test_spelling_for(self) -> None:
        """The sharps toggle maps to a spelling name."""
        assert spelling_for(True) == "sharp"
        assert spelling_for(False) == "flat"

    @pytest.mark.parametrize(
        ("key", "expected"),
        [("C", True), ("F#", True), ("Db", False), ("Bb", False), ("F", True)],
    )
    def test_prefers_sharps(self, key: str, expected: bool) -> None:
        """Flat keys default to flat notation."""
        assert prefers_sharps(key) is expected

    def test_respell_key(self) -> None:
        """Keys are displayed in the chosen notation."""
        assert respell_key("Eb") == "D#"
        assert respell_key("D#", prefer_sharps=False) == "Eb"
        assert respell_key("G", prefer_sharps=False) == "G"

    def test_respell_unknown_key(self) -> None:
        """Unknown keys are displayed as-is."""
        assert respell_key("X") == "X"

    @pytest.mark.parametrize(
        ("key", "steps", "prefer_sharps", "expected"),
        [
            ("C", 1, True, "C#"),
            ("C", 1, False, "Db"),
            ("B", 1, True, "C"),
            ("C", -1, True, "B"),
            ("Eb", -2, False, "Db"),
            ("G", 12, True, "G"),
        ],
    )
    def test_step_key(self, key: str, steps: int, prefer_sharps: bool, expected: str) -> None:
        """Quick transpose steps wrap around the scale."""
        assert step_key(key, steps, prefer_sharps) == expected

    def test_step_unknown_key(self) -> None:
        """Unknown keys are not stepped."""
        assert step_key("X", 1) == "X"


class TestEnharmonicEquivalent:
    """Test enharmonic respelling of note names."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [("C#", "Db"), ("Db", "C#"), ("G#", "Ab"), ("Bb", "A#")],
    )
    def test_black_keys(self, name: str, expected: str) -> None:
        """Black keys have a sharp/flat pair."""
        assert enharmonic_equivalent(name) == expected

    @pytest.mark.parametrize("name", ["C", "E", "B", "Fb", "H"])
    def test_no_equivalent(self, name: str) -> None:
        """Natural, rare and unknown names have no table equivalent."""
        assert enharmonic_equivalent(name) is None
