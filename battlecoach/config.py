"""ABOUTME: Configuration loaders for the matchup analyzer.
ABOUTME: Handles loading and validation of the scoring.yml heuristics."""

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field

from battlecoach.settings import settings


class ScoringWeights(BaseModel):
    """Tunable heuristics for bench scoring and suggestion selection.

    The defaults are the values the overlay ships with. They are empirical
    knobs, not part of any protocol.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    defensive_resist_bonus: int = 2
    """Added when the opponent's best type hits the candidate for <=0.5x."""

    defensive_weakness_penalty: int = 2
    """Subtracted when the opponent's best type hits the candidate for >=2x."""

    offensive_ultra_bonus: int = 4
    """Added when the candidate's best move hits for >=4x."""

    offensive_super_bonus: int = 2
    """Added when the candidate's best move hits for >=2x (and <4x)."""

    offensive_resisted_penalty: int = 1
    """Subtracted when the candidate's best move hits for <=0.5x."""

    candidate_floor: int = 2
    """Minimum score for a candidate to be recommended at all."""

    neutral_switch_threshold: int = 3
    """Minimum score to suggest a switch when incoming damage is neutral."""

    critical_hp_fraction: float = Field(default=0.3, gt=0.0, le=1.0)
    """Below this HP fraction the risky suggestion becomes all-or-nothing."""


DEFAULT_WEIGHTS = ScoringWeights()


def load_scoring_config(config_path: Path | None = None) -> ScoringWeights:
    """Load analyzer weights from a YAML file.

    Args:
        config_path: Path to the config file. Defaults to settings.scoring_config_path.

    Returns:
        Validated ScoringWeights. Keys missing from the file keep their defaults.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        pydantic.ValidationError: If config file holds unknown keys or invalid values.
    """
    if config_path is None:
        config_path = settings.scoring_config_path

    if not config_path.exists():
        raise FileNotFoundError(f"Scoring config not found: {config_path}")

    with config_path.open(encoding="utf-8") as f:
        raw_config = yaml.safe_load(f) or {}

    return ScoringWeights.model_validate(raw_config)
