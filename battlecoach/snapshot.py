"""ABOUTME: Adapter between the game API's JSON snapshots and the analyzer's data classes.
ABOUTME: Validates battle and party payloads, picks the active creatures, and runs the analyzer."""

import logging
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from battlecoach.analysis.matchup import analyze_matchup
from battlecoach.config import ScoringWeights
from battlecoach.models import BattleSuggestion, Creature, Move, MoveCategory
from battlecoach.utils.type_chart import parse_type

logger = logging.getLogger(__name__)

PLAYER_SIDES = frozenset({"SideA", "Player"})
OPPONENT_SIDES = frozenset({"SideB", "Opponent"})


class MoveRecord(BaseModel):
    """A move as delivered by the game API."""

    model_config = ConfigDict(extra="ignore")

    name: str
    type: str
    category: str = MoveCategory.STATUS.value
    power: int = 0
    accuracy: float = 0
    pp: int = 0
    max_pp: int = 0


class PokemonRecord(BaseModel):
    """A party, battle, or storage entry as delivered by the game API.

    Only the fields the analyzer needs are declared; stats, IVs, held item and
    the rest of the payload are ignored.
    """

    model_config = ConfigDict(extra="ignore")

    species: str
    level: int = 1
    hp: int = 0
    max_hp: int = 1
    types: list[str] | None = None
    moves: list[MoveRecord] = Field(default_factory=list)


class BattleActorRecord(BaseModel):
    """One side of a battle."""

    model_config = ConfigDict(extra="ignore")

    name: str = ""
    side: str = ""
    pokemon: list[PokemonRecord] = Field(default_factory=list)


class BattleRecord(BaseModel):
    """The battle endpoint payload."""

    model_config = ConfigDict(extra="ignore")

    status: Literal["active", "no_battle"]
    battle_id: str | None = None
    actors: list[BattleActorRecord] = Field(default_factory=list)
    error: str | None = None

    @property
    def is_active(self) -> bool:
        return self.status == "active"


_party_adapter = TypeAdapter(list[PokemonRecord])


def _to_category(raw: str) -> MoveCategory:
    """Map an API category onto MoveCategory; anything unrecognised cannot deal damage."""
    try:
        return MoveCategory(raw.strip().capitalize())
    except ValueError:
        return MoveCategory.STATUS


def to_creature(record: PokemonRecord, slot: int | None = None) -> Creature:
    """Convert an API record into a Creature.

    Args:
        record: Validated API record.
        slot: Position of the record in its list.

    Returns:
        The Creature. HP is clamped to >= 0 and max HP to >= 1.

    Raises:
        UnknownTypeError: If the record or one of its moves carries an unknown type tag.
    """
    moves = tuple(
        Move(name=move.name, type=parse_type(move.type), category=_to_category(move.category))
        for move in record.moves
    )
    return Creature(
        species=record.species,
        level=record.level,
        current_hp=max(record.hp, 0),
        max_hp=max(record.max_hp, 1),
        types=tuple(parse_type(t) for t in record.types or ()),
        moves=moves,
        slot=slot,
    )


def to_creatures(records: list[PokemonRecord]) -> list[Creature]:
    return [to_creature(record, slot) for slot, record in enumerate(records)]


def resolve_sides(battle: BattleRecord) -> tuple[BattleActorRecord | None, BattleActorRecord | None]:
    """Find the player and opponent actors.

    Sides named SideA/Player and SideB/Opponent win; otherwise the first and
    second actors are used.

    Returns:
        Tuple of (player_actor, opponent_actor), either may be None.
    """
    player = next((a for a in battle.actors if a.side in PLAYER_SIDES), None)
    opponent = next((a for a in battle.actors if a.side in OPPONENT_SIDES), None)

    if player is None and battle.actors:
        player = battle.actors[0]
    if opponent is None and len(battle.actors) > 1:
        opponent = battle.actors[1]
    return player, opponent


def pick_active(creatures: list[Creature]) -> Creature | None:
    """The active creature of a side is its first standing creature with type data."""
    return next((c for c in creatures if c.has_type_data and not c.is_fainted), None)


def _same_creature(member: Creature, active_player: Creature) -> bool:
    return (
        member.species.casefold() == active_player.species.casefold()
        and member.level == active_player.level
        and member.max_hp == active_player.max_hp
    )


def _same_state(member: Creature, active_player: Creature) -> bool:
    return member.current_hp == active_player.current_hp and [m.name for m in member.moves] == [
        m.name for m in active_player.moves
    ]


def align_roster(active_player: Creature, party: list[Creature]) -> list[Creature]:
    """Put the battle's active creature into the party in place of its party entry.

    The battle and party payloads are separate objects, so the party entry
    describing the active creature is replaced by the active creature itself.
    Identity-based bench exclusion then holds. Entries are matched on species,
    level and max HP; among several such entries, only those with the same
    current HP and move names count. When the match is still ambiguous the
    party is returned unchanged.
    """
    candidates = [index for index, member in enumerate(party) if _same_creature(member, active_player)]
    matches = candidates
    if len(candidates) > 1:
        matches = [index for index in candidates if _same_state(party[index], active_player)]

    if len(matches) == 1:
        index = matches[0]
        return [*party[:index], active_player, *party[index + 1 :]]

    if candidates:
        logger.warning(
            "Active %s matches %d party entries, bench left unaligned", active_player.species, len(candidates)
        )
    else:
        logger.debug("Active %s not found in party, bench left unaligned", active_player.species)
    return party


def active_matchup(
    battle: BattleRecord,
    party: list[PokemonRecord],
) -> tuple[Creature, Creature, list[Creature]] | None:
    """Extract the analyzer's inputs from a snapshot.

    Args:
        battle: The battle endpoint payload.
        party: The party endpoint payload from the same polling cycle.

    Returns:
        Tuple of (active_player, active_opponent, roster), or None when the
        battle is not active or a side has no creature with type data.
    """
    if not battle.is_active:
        return None

    player_actor, opponent_actor = resolve_sides(battle)
    if player_actor is None or opponent_actor is None:
        logger.debug("Battle %s has fewer than two sides", battle.battle_id)
        return None

    active_player = pick_active(to_creatures(player_actor.pokemon))
    active_opponent = pick_active(to_creatures(opponent_actor.pokemon))
    if active_player is None or active_opponent is None:
        logger.debug("Battle %s has no typed creature on one side", battle.battle_id)
        return None

    return active_player, active_opponent, align_roster(active_player, to_creatures(party))


def suggest_for_battle(
    battle: BattleRecord,
    party: list[PokemonRecord],
    weights: ScoringWeights | None = None,
) -> list[BattleSuggestion] | None:
    """Run the analyzer on a battle snapshot, if there is anything to analyze.

    Returns:
        The suggestions, or None when active_matchup finds nothing to analyze.
    """
    matchup = active_matchup(battle, party)
    if matchup is None:
        return None

    active_player, active_opponent, roster = matchup
    return analyze_matchup(active_player, active_opponent, roster, weights)


def load_battle(path: Path) -> BattleRecord:
    """Read a battle endpoint JSON dump."""
    return BattleRecord.model_validate_json(path.read_text(encoding="utf-8"))


def load_party(path: Path) -> list[PokemonRecord]:
    """Read a party endpoint JSON dump."""
    return _party_adapter.validate_json(path.read_text(encoding="utf-8"))
