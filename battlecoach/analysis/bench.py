# ABOUTME: Bench ranking tool listing every party member's switch score against the opponent.
# ABOUTME: Reuses the analyzer's candidate scoring and returns a Polars DataFrame.

from collections.abc import Sequence
from typing import Any

import polars as pl

from battlecoach.analysis.matchup import score_switch_candidate
from battlecoach.config import DEFAULT_WEIGHTS, ScoringWeights
from battlecoach.models import Creature

BENCH_SCHEMA: dict[str, Any] = {
    "slot": pl.Int64,
    "species": pl.String,
    "hp": pl.Int64,
    "max_hp": pl.Int64,
    "incoming": pl.Float64,
    "best_move": pl.String,
    "outgoing": pl.Float64,
    "score": pl.Int64,
    "eligible": pl.Boolean,
}


def rank_bench(
    active_player: Creature,
    opponent: Creature,
    roster: Sequence[Creature],
    weights: ScoringWeights | None = None,
) -> pl.DataFrame:
    """Score every bench member against the active opponent.

    The active creature (by identity) and members without type data are left out.
    Fainted members are listed with eligible=False so the table still shows them.

    Args:
        active_player: The player's creature on the field.
        opponent: The active opponent (must have type data).
        roster: The player's full party.
        weights: Scoring heuristics, DEFAULT_WEIGHTS when omitted.

    Returns:
        DataFrame with columns: slot, species, hp, max_hp, incoming, best_move,
        outgoing, score, eligible
        Sorted by score DESC, roster order among equal scores
    """
    if weights is None:
        weights = DEFAULT_WEIGHTS

    results: list[dict[str, Any]] = []

    for index, member in enumerate(roster):
        if member is active_player or not member.has_type_data:
            continue
        option = score_switch_candidate(member, opponent, weights)
        results.append(
            {
                "slot": member.slot if member.slot is not None else index,
                "species": member.species,
                "hp": member.current_hp,
                "max_hp": member.max_hp,
                "incoming": option.incoming,
                "best_move": option.move_label,
                "outgoing": option.outgoing,
                "score": option.score,
                "eligible": not member.is_fainted and option.score >= weights.candidate_floor,
            }
        )

    if not results:
        return pl.DataFrame(schema=BENCH_SCHEMA)

    df = pl.DataFrame(results, schema=BENCH_SCHEMA)
    return df.sort("score", descending=True, maintain_order=True)
