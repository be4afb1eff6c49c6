"""Tests for stimulus lexicon resolution and loading."""

import json

import pytest
from pydantic import ValidationError

from affectsim.affect.emotions import Emotion
from affectsim.affect.lexicon import (
    DEFAULT_LEXICON,
    Lexicon,
    LexiconLoadError,
    load_lexicon,
    save_lexicon,
)


@pytest.fixture
def lexicon():
    """Lexicon with defaults only."""
    return Lexicon()


class TestDefaults:
    """Tests for the built-in table."""

    def test_default_keys(self, lexicon):
        """The seven built-in stimuli are present."""
        assert set(lexicon) == {"A", "B", "C", "?", "!", "@", "#"}
        assert lexicon.overrides == frozenset()

    def test_default_entry_values(self, lexicon):
        """Entries carry the documented deltas."""
        assert dict(lexicon["B"]) == {
            Emotion.FEAR: 0.6,
            Emotion.SADNESS: 0.5,
            Emotion.JOY: -0.2,
            Emotion.ANGER: 0.1,
        }

    def test_entries_are_read_only(self, lexicon):
        """Callers cannot mutate resolved delta maps."""
        with pytest.raises(TypeError):
            lexicon["A"][Emotion.JOY] = 1.0


class TestResolve:
    """Tests for Lexicon.resolve()."""

    def test_exact_single_character(self, lexicon):
        """A key resolves to its entry."""
        assert dict(lexicon.resolve("?")) == dict(DEFAULT_LEXICON["?"])

    def test_trims_whitespace(self, lexicon):
        """Surrounding whitespace is ignored."""
        assert dict(lexicon.resolve("  @\n")) == dict(DEFAULT_LEXICON["@"])

    def test_first_character_uppercased(self, lexicon):
        """Unknown strings fall back to their uppercased first character."""
        assert dict(lexicon.resolve("apple")) == dict(DEFAULT_LEXICON["A"])
        assert dict(lexicon.resolve("b")) == dict(DEFAULT_LEXICON["B"])

    def test_empty_input_is_noop(self, lexicon):
        """Empty or whitespace-only input maps to no change."""
        assert dict(lexicon.resolve("")) == {}
        assert dict(lexicon.resolve("   ")) == {}

    def test_unknown_input_is_noop(self, lexicon):
        """A first character with no entry maps to no change."""
        assert dict(lexicon.resolve("zebra")) == {}

    def test_exact_multi_character_match_wins(self):
        """An exact multi-character key beats the first-character fallback."""
        lexicon = Lexicon({"XYZ": {"joy": 0.8, "curiosity": 0.5}, "Apple": {"trust": 0.9}})
        assert dict(lexicon.resolve("XYZ")) == {Emotion.JOY: 0.8, Emotion.CURIOSITY: 0.5}
        assert dict(lexicon.resolve("Apple")) == {Emotion.TRUST: 0.9}
        assert dict(lexicon.resolve("Apricot")) == dict(DEFAULT_LEXICON["A"])


class TestOverlay:
    """Tests for caller-supplied entries."""

    def test_overlay_replaces_whole_entry(self):
        """A shared key is replaced, not merged per emotion."""
        lexicon = Lexicon({"A": {Emotion.FEAR: 0.9}})
        assert dict(lexicon["A"]) == {Emotion.FEAR: 0.9}
        assert lexicon.overrides == frozenset({"A"})

    def test_overlay_keeps_other_defaults(self):
        """Keys not in the overlay keep their defaults."""
        lexicon = Lexicon({"A": {Emotion.FEAR: 0.9}})
        assert dict(lexicon["C"]) == dict(DEFAULT_LEXICON["C"])

    def test_overlay_rejects_unknown_emotion(self):
        """Unknown emotion names are a validation error."""
        with pytest.raises(ValidationError):
            Lexicon({"Q": {"boredom": 0.3}})

    @pytest.mark.parametrize("delta", [float("nan"), float("inf"), float("-inf")])
    def test_overlay_rejects_non_finite_delta(self, delta):
        """Deltas must be finite so clamping keeps emotions in range."""
        with pytest.raises(ValidationError):
            Lexicon({"X": {"joy": delta}})

    def test_to_dict_uses_names(self):
        """Serialization uses emotion names."""
        data = Lexicon().to_dict()
        assert data["@"] == {"trust": 0.6, "joy": 0.4}


class TestLoadLexicon:
    """Tests for reading lexicon files."""

    def test_load_valid_file(self, tmp_path):
        """A well-formed file loads into an overlay."""
        path = tmp_path / "lexicon.json"
        path.write_text(json.dumps({"hello": {"joy": 0.3, "trust": 0.2}}))

        overlay = load_lexicon(path)

        assert overlay == {"hello": {Emotion.JOY: 0.3, Emotion.TRUST: 0.2}}
        assert dict(Lexicon(overlay).resolve("hello")) == {Emotion.JOY: 0.3, Emotion.TRUST: 0.2}

    def test_missing_file(self, tmp_path):
        """A missing file raises LexiconLoadError."""
        with pytest.raises(LexiconLoadError, match="Cannot read"):
            load_lexicon(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        """Malformed JSON raises LexiconLoadError."""
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        with pytest.raises(LexiconLoadError, match="not valid JSON"):
            load_lexicon(path)

    def test_wrong_shape(self, tmp_path):
        """Entries must map emotion names to numbers."""
        path = tmp_path / "shape.json"
        path.write_text(json.dumps({"hello": {"elation": 0.3}}))
        with pytest.raises(LexiconLoadError, match="invalid entries"):
            load_lexicon(path)

    def test_nan_delta_rejected(self, tmp_path):
        """A NaN token in the file fails the load instead of reaching the state."""
        path = tmp_path / "nan.json"
        path.write_text('{"X": {"joy": NaN}}')
        with pytest.raises(LexiconLoadError, match="invalid entries"):
            load_lexicon(path)

    def test_save_then_load(self, tmp_path):
        """save_lexicon() output is accepted by load_lexicon()."""
        path = tmp_path / "saved.json"
        save_lexicon(Lexicon({"hi": {"anger": 0.25}}), path)
        overlay = load_lexicon(path)
        assert overlay["hi"] == {Emotion.ANGER: 0.25}
        assert overlay["#"] == {Emotion.ANGER: 0.4, Emotion.SADNESS: 0.3}
