"""ABOUTME: Data classes for battle snapshots and analyzer output.
ABOUTME: Contains Move, Creature, and BattleSuggestion plus their category enums."""

from dataclasses import dataclass
from enum import Enum

from battlecoach.utils.type_chart import ElementalType

MAX_TYPES_PER_CREATURE = 2


class MoveCategory(str, Enum):
    """Damage class of a move."""

    PHYSICAL = "Physical"
    SPECIAL = "Special"
    STATUS = "Status"


class SuggestionCategory(str, Enum):
    """Strategic bucket a suggestion belongs to, in display order."""

    SAFE = "safe"
    BALANCED = "balanced"
    RISKY = "risky"


@dataclass(frozen=True)
class Move:
    """A move known by a creature.

    Attributes:
        name: Display name (e.g., "Flamethrower").
        type: Elemental type of the move.
        category: Physical, Special or Status.
    """

    name: str
    type: ElementalType
    category: MoveCategory

    @property
    def is_status(self) -> bool:
        """Status moves carry no offensive effectiveness."""
        return self.category is MoveCategory.STATUS


@dataclass(frozen=True, eq=False)
class Creature:
    """A battle participant as seen in one snapshot.

    Equality is object identity: two party members of the same species are
    still different creatures.

    Attributes:
        species: Species name (e.g., "Charizard").
        level: Current level.
        current_hp: Remaining HP, 0 when fainted.
        max_hp: Maximum HP, always positive.
        types: Zero to two elemental types, primary first. Empty means the
            snapshot carried no type data.
        moves: Known moves, possibly empty.
        slot: Party slot index when known.
    """

    species: str
    level: int
    current_hp: int
    max_hp: int
    types: tuple[ElementalType, ...] = ()
    moves: tuple[Move, ...] = ()
    slot: int | None = None

    def __post_init__(self) -> None:
        if self.current_hp < 0:
            raise ValueError(f"{self.species}: current_hp must be >= 0, got {self.current_hp}")
        if self.max_hp <= 0:
            raise ValueError(f"{self.species}: max_hp must be > 0, got {self.max_hp}")

        # A repeated type ("Fire/Fire") is a monotype
        types = tuple(dict.fromkeys(self.types))
        if len(types) > MAX_TYPES_PER_CREATURE:
            raise ValueError(f"{self.species}: at most {MAX_TYPES_PER_CREATURE} types, got {len(types)}")
        object.__setattr__(self, "types", types)
        object.__setattr__(self, "moves", tuple(self.moves))

    @property
    def is_fainted(self) -> bool:
        return self.current_hp == 0

    @property
    def has_type_data(self) -> bool:
        return bool(self.types)

    @property
    def hp_fraction(self) -> float:
        return self.current_hp / self.max_hp

    @property
    def damaging_moves(self) -> list[Move]:
        """Moves in known order, Status moves removed."""
        return [move for move in self.moves if not move.is_status]

    @property
    def status_moves(self) -> list[Move]:
        return [move for move in self.moves if move.is_status]


@dataclass(frozen=True)
class BattleSuggestion:
    """One tactical suggestion, rendered verbatim by the overlay.

    Attributes:
        category: Safe, Balanced or Risky.
        title: Short headline, plain text.
        description: One or two sentences, plain text.
        icon: A short glyph string (an emoji).
    """

    category: SuggestionCategory
    title: str
    description: str
    icon: str
