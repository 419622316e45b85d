# ABOUTME: Matchup analyzer turning the active battle state into tactical suggestions.
# ABOUTME: Scores the active matchup and the bench, then emits Safe/Balanced/Risky advice.

import logging
import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from battlecoach.config import DEFAULT_WEIGHTS, ScoringWeights
from battlecoach.models import BattleSuggestion, Creature, Move, SuggestionCategory
from battlecoach.utils.type_chart import (
    RESISTANCE_THRESHOLD,
    SUPER_EFFECTIVE_THRESHOLD,
    ULTRA_EFFECTIVE_THRESHOLD,
    ElementalType,
    dual_type_effectiveness,
)

logger = logging.getLogger(__name__)

# Status moves worth a turn, compared after normalization (lowercase letters only)
RECOGNIZED_SETUP_MOVES = frozenset(
    {
        "thunderwave",
        "willowisp",
        "toxic",
        "sleeppowder",
        "spore",
        "hypnosis",
        "swordsdance",
        "calmmind",
        "nastyplot",
        "shellsmash",
    }
)

ICON_SEARCH = "🔍"
ICON_SWITCH = "🔄"
ICON_SHIELD = "🛡️"
ICON_SCALE = "⚖️"
ICON_SWORDS = "⚔️"
ICON_SPARKLES = "✨"


@dataclass(frozen=True)
class MoveChoice:
    """Best attacking option of a creature against one defender.

    Attributes:
        label: Move name, or the fallback label when the creature has no moves.
        multiplier: Effectiveness of that option against the defender.
        from_moves: False when the option comes from the creature's own types.
    """

    label: str
    multiplier: float
    from_moves: bool = True


@dataclass(frozen=True)
class SwitchOption:
    """A scored bench member.

    Attributes:
        candidate: The bench creature.
        incoming: Worst multiplier the opponent's types deal to it.
        best_move: Its best attacking option, or None when it has nothing damaging.
        score: Combined defensive and offensive score.
    """

    candidate: Creature
    incoming: float
    best_move: MoveChoice | None
    score: int

    @property
    def move_label(self) -> str:
        return self.best_move.label if self.best_move else ""

    @property
    def outgoing(self) -> float:
        return self.best_move.multiplier if self.best_move else 0.0


def format_multiplier(multiplier: float) -> str:
    """Render a multiplier the way the overlay shows it, e.g. 2.0 -> "2x", 0.25 -> "0.25x"."""
    return f"{multiplier:g}x"


def normalize_move_name(name: str) -> str:
    """Lowercase a move name and keep letters only ("Will-O-Wisp" -> "willowisp")."""
    return re.sub(r"[^a-z]", "", name.lower())


def max_incoming(attacker_types: Sequence[ElementalType], defender_types: Sequence[ElementalType]) -> float:
    """Worst-case multiplier using the attacker's own typing as its attack vector.

    Opponent move lists are not assumed to be visible, so its types stand in for them.
    """
    worst = 0.0
    for atk_type in attacker_types:
        worst = max(worst, dual_type_effectiveness(atk_type, defender_types))
    return worst


def find_best_move(
    attacker: Creature,
    defender: Creature,
    fallback_label: Callable[[ElementalType], str] = lambda t: t.label,
    fallback_without_damaging_moves: bool = False,
) -> MoveChoice | None:
    """Find the attacker's most effective option against the defender.

    Scans damaging moves left to right and keeps the first one with the highest
    multiplier. When the attacker has no moves at all, its own types are scanned
    instead and labelled with `fallback_label`. With
    `fallback_without_damaging_moves`, a moveset made only of Status moves falls
    back to the types as well; the active creature is scored this way.

    Args:
        attacker: The creature choosing a move.
        defender: The creature being hit.
        fallback_label: Builds the label for a type-based fallback option.
        fallback_without_damaging_moves: Also fall back when no move can deal damage.

    Returns:
        The best MoveChoice, or None when nothing can be scored (only Status moves
        without the type fallback, or no moves and no types).
    """
    best: MoveChoice | None = None

    damaging_moves = attacker.damaging_moves
    use_moves = bool(damaging_moves) if fallback_without_damaging_moves else bool(attacker.moves)
    if use_moves:
        for move in damaging_moves:
            mult = dual_type_effectiveness(move.type, defender.types)
            if best is None or mult > best.multiplier:
                best = MoveChoice(label=move.name, multiplier=mult)
        return best

    for own_type in attacker.types:
        mult = dual_type_effectiveness(own_type, defender.types)
        if best is None or mult > best.multiplier:
            best = MoveChoice(label=fallback_label(own_type), multiplier=mult, from_moves=False)
    return best


def _bench_fallback_label(own_type: ElementalType) -> str:
    return f"Golpe {own_type.label}"


def score_switch_candidate(
    candidate: Creature,
    opponent: Creature,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> SwitchOption:
    """Score one bench member against the active opponent.

    Scoring formula:
        defense: +resist_bonus if incoming <= 0.5, -weakness_penalty if incoming >= 2
        offense: +ultra_bonus if best >= 4, +super_bonus if best >= 2, -resisted_penalty if best <= 0.5

    Args:
        candidate: Bench creature with type data.
        opponent: The active opponent.
        weights: Scoring heuristics.

    Returns:
        SwitchOption with incoming multiplier, best move and score.
    """
    score = 0

    incoming = max_incoming(opponent.types, candidate.types)
    if incoming <= RESISTANCE_THRESHOLD:
        score += weights.defensive_resist_bonus
    if incoming >= SUPER_EFFECTIVE_THRESHOLD:
        score -= weights.defensive_weakness_penalty

    best_move = find_best_move(candidate, opponent, _bench_fallback_label)
    outgoing = best_move.multiplier if best_move else 0.0
    if outgoing >= ULTRA_EFFECTIVE_THRESHOLD:
        score += weights.offensive_ultra_bonus
    elif outgoing >= SUPER_EFFECTIVE_THRESHOLD:
        score += weights.offensive_super_bonus
    elif outgoing <= RESISTANCE_THRESHOLD:
        score -= weights.offensive_resisted_penalty

    return SwitchOption(candidate=candidate, incoming=incoming, best_move=best_move, score=score)


def is_bench_eligible(member: Creature, active_player: Creature) -> bool:
    """A member can come in if it is not the active creature itself, not fainted, and typed."""
    return member is not active_player and not member.is_fainted and member.has_type_data


def find_best_switch(
    active_player: Creature,
    opponent: Creature,
    roster: Sequence[Creature],
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> SwitchOption | None:
    """Pick the highest scoring bench member, in roster order.

    A candidate replaces the current best only with a strictly higher score, and
    never below the candidate floor, so the first member reaching the top score wins.

    Returns:
        The best SwitchOption, or None when no member reaches the floor.
    """
    best: SwitchOption | None = None

    for member in roster:
        if not is_bench_eligible(member, active_player):
            continue
        option = score_switch_candidate(member, opponent, weights)
        if option.score < weights.candidate_floor:
            continue
        if best is None or option.score > best.score:
            best = option

    return best


def _placeholder() -> list[BattleSuggestion]:
    return [
        BattleSuggestion(
            category=SuggestionCategory.BALANCED,
            title="Analisando...",
            description="Aguardando dados de tipos para sugerir estratégias.",
            icon=ICON_SEARCH,
        )
    ]


def _safe_suggestion(
    incoming: float,
    best_switch: SwitchOption | None,
    weights: ScoringWeights,
) -> BattleSuggestion:
    if incoming >= SUPER_EFFECTIVE_THRESHOLD:
        if best_switch:
            species = best_switch.candidate.species
            return BattleSuggestion(
                category=SuggestionCategory.SAFE,
                title=f"Troque para {species}!",
                description=(
                    f"Você está em perigo. {species} pode usar {best_switch.move_label} para virar o jogo!"
                    if best_switch.move_label
                    else f"Você está em perigo. {species} aguenta melhor este oponente."
                ),
                icon=ICON_SWITCH,
            )
        return BattleSuggestion(
            category=SuggestionCategory.SAFE,
            title="Cuidado! Fraqueza",
            description=f"Você recebe {format_multiplier(incoming)} de dano. Jogue defensivamente ou cure-se.",
            icon=ICON_SHIELD,
        )

    if incoming <= RESISTANCE_THRESHOLD:
        return BattleSuggestion(
            category=SuggestionCategory.SAFE,
            title="Tanque Seguro",
            description="Você resiste aos ataques dele. Mantenha-se em campo.",
            icon=ICON_SHIELD,
        )

    if best_switch and best_switch.score >= weights.neutral_switch_threshold:
        species = best_switch.candidate.species
        return BattleSuggestion(
            category=SuggestionCategory.SAFE,
            title=f"Considere {species}",
            description=(
                f"{species} tem o golpe {best_switch.move_label} que seria devastador aqui."
                if best_switch.move_label
                else f"{species} aguenta melhor este oponente."
            ),
            icon=ICON_SWITCH,
        )
    return BattleSuggestion(
        category=SuggestionCategory.SAFE,
        title="Jogue com Calma",
        description="Dano neutro recebido. Cure-se se necessário.",
        icon=ICON_SHIELD,
    )


def _balanced_suggestion(best_move: MoveChoice | None, best_switch: SwitchOption | None) -> BattleSuggestion:
    outgoing = best_move.multiplier if best_move else 0.0

    if best_move and outgoing >= SUPER_EFFECTIVE_THRESHOLD:
        return BattleSuggestion(
            category=SuggestionCategory.BALANCED,
            title=f"Use {best_move.label}",
            description=f"Golpe super efetivo! Causa {format_multiplier(outgoing)} de dano.",
            icon=ICON_SCALE,
        )

    if outgoing <= RESISTANCE_THRESHOLD:
        if best_switch:
            species = best_switch.candidate.species
            return BattleSuggestion(
                category=SuggestionCategory.BALANCED,
                title=f"Troque para {species}",
                description=(
                    f"Seus ataques não funcionam bem. {species} tem {best_switch.move_label}."
                    if best_switch.move_label
                    else f"Seus ataques não funcionam bem. {species} aguenta melhor este oponente."
                ),
                icon=ICON_SWITCH,
            )
        return BattleSuggestion(
            category=SuggestionCategory.BALANCED,
            title="Ataque Pouco Efetivo",
            description="Tente golpes de cobertura ou status.",
            icon=ICON_SCALE,
        )

    if best_move and best_move.from_moves:
        return BattleSuggestion(
            category=SuggestionCategory.BALANCED,
            title=f"Use {best_move.label}",
            description="Sua melhor opção de dano neutro no momento.",
            icon=ICON_SCALE,
        )
    return BattleSuggestion(
        category=SuggestionCategory.BALANCED,
        title="Dano Neutro",
        description="Use seus golpes mais fortes para causar dano constante.",
        icon=ICON_SCALE,
    )


def find_setup_move(creature: Creature) -> Move | None:
    """Return the first Status move whose normalized name is a recognized setup/status move."""
    for move in creature.status_moves:
        if normalize_move_name(move.name) in RECOGNIZED_SETUP_MOVES:
            return move
    return None


def _risky_suggestion(active_player: Creature, weights: ScoringWeights) -> BattleSuggestion:
    if active_player.hp_fraction < weights.critical_hp_fraction:
        return BattleSuggestion(
            category=SuggestionCategory.RISKY,
            title="Tudo ou Nada",
            description="Vida crítica! Use seu golpe mais forte ou um item de cura agora.",
            icon=ICON_SWORDS,
        )

    setup_move = find_setup_move(active_player)
    if setup_move:
        return BattleSuggestion(
            category=SuggestionCategory.RISKY,
            title=f"Use {setup_move.name}",
            description="Um bom momento para aplicar status ou aumentar seus atributos.",
            icon=ICON_SPARKLES,
        )
    return BattleSuggestion(
        category=SuggestionCategory.RISKY,
        title="Pressão Ofensiva",
        description="Continue atacando para manter a pressão no oponente.",
        icon=ICON_SWORDS,
    )


def analyze_matchup(
    active_player: Creature,
    active_opponent: Creature,
    roster: Sequence[Creature] = (),
    weights: ScoringWeights | None = None,
) -> list[BattleSuggestion]:
    """Turn the current matchup into ordered tactical suggestions.

    Args:
        active_player: The player's creature on the field.
        active_opponent: The opponent's creature on the field.
        roster: The player's full party. The active creature may or may not be part
            of it; it is recognised by identity, never by species.
        weights: Scoring heuristics, DEFAULT_WEIGHTS when omitted.

    Returns:
        Exactly three suggestions ordered Safe, Balanced, Risky, or a single
        Balanced placeholder when either active creature lacks type data.
    """
    if weights is None:
        weights = DEFAULT_WEIGHTS

    if not active_player.has_type_data or not active_opponent.has_type_data:
        logger.debug("Missing type data for %s or %s", active_player.species, active_opponent.species)
        return _placeholder()

    incoming = max_incoming(active_opponent.types, active_player.types)
    best_move = find_best_move(active_player, active_opponent, fallback_without_damaging_moves=True)
    best_switch = find_best_switch(active_player, active_opponent, roster, weights)

    logger.debug(
        "%s vs %s: incoming=%s outgoing=%s best_move=%s switch=%s",
        active_player.species,
        active_opponent.species,
        incoming,
        best_move.multiplier if best_move else None,
        best_move.label if best_move else None,
        best_switch.candidate.species if best_switch else None,
    )

    return [
        _safe_suggestion(incoming, best_switch, weights),
        _balanced_suggestion(best_move, best_switch),
        _risky_suggestion(active_player, weights),
    ]
