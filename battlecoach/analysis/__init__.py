# ABOUTME: Analysis package for live battle matchups.
# ABOUTME: Contains the matchup analyzer and the bench ranking tool.

from battlecoach.analysis.bench import rank_bench
from battlecoach.analysis.matchup import (
    RECOGNIZED_SETUP_MOVES,
    MoveChoice,
    SwitchOption,
    analyze_matchup,
    find_best_move,
    find_best_switch,
    score_switch_candidate,
)

__all__ = [
    "RECOGNIZED_SETUP_MOVES",
    "MoveChoice",
    "SwitchOption",
    "analyze_matchup",
    "find_best_move",
    "find_best_switch",
    "rank_bench",
    "score_switch_candidate",
]
