"""ABOUTME: Tests for the config module.
ABOUTME: Verifies scoring weights defaults and YAML loading."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from battlecoach.config import DEFAULT_WEIGHTS, ScoringWeights, load_scoring_config
from battlecoach.settings import settings


class TestScoringWeights:
    """Tests for ScoringWeights class."""

    def test_defaults(self) -> None:
        assert DEFAULT_WEIGHTS.defensive_resist_bonus == 2
        assert DEFAULT_WEIGHTS.offensive_ultra_bonus == 4
        assert DEFAULT_WEIGHTS.candidate_floor == 2
        assert DEFAULT_WEIGHTS.neutral_switch_threshold == 3
        assert DEFAULT_WEIGHTS.critical_hp_fraction == 0.3

    def test_frozen(self) -> None:
        with pytest.raises(ValidationError):
            DEFAULT_WEIGHTS.candidate_floor = 10  # type: ignore[misc]

    def test_fraction_bounds(self) -> None:
        with pytest.raises(ValidationError):
            ScoringWeights(critical_hp_fraction=0)


class TestLoadScoringConfig:
    """Tests for load_scoring_config function."""

    def test_load_missing_file(self, tmp_path: Path) -> None:
        """Missing config file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_scoring_config(tmp_path / "nonexistent.yml")

    def test_load_partial_config(self, tmp_path: Path) -> None:
        """Keys missing from the file keep their defaults."""
        config_path = tmp_path / "scoring.yml"
        config_path.write_text("candidate_floor: 3\ncritical_hp_fraction: 0.25\n")

        weights = load_scoring_config(config_path)

        assert weights.candidate_floor == 3
        assert weights.critical_hp_fraction == 0.25
        assert weights.offensive_ultra_bonus == 4

    def test_load_empty_file(self, tmp_path: Path) -> None:
        config_path = tmp_path / "scoring.yml"
        config_path.write_text("")
        assert load_scoring_config(config_path) == DEFAULT_WEIGHTS

    def test_unknown_key_rejected(self, tmp_path: Path) -> None:
        config_path = tmp_path / "scoring.yml"
        config_path.write_text("stab_bonus: 3\n")
        with pytest.raises(ValidationError):
            load_scoring_config(config_path)

    def test_shipped_config_matches_defaults(self) -> None:
        assert load_scoring_config(settings.scoring_config_path) == DEFAULT_WEIGHTS
