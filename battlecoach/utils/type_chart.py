# ABOUTME: Pokemon type effectiveness chart for Gen 6+ (18 types including Fairy).
# ABOUTME: Provides single and dual type multipliers plus defensive profile helpers.

from collections.abc import Mapping, Sequence
from enum import Enum
from types import MappingProxyType

# Effectiveness thresholds
ULTRA_EFFECTIVE_THRESHOLD = 4.0
SUPER_EFFECTIVE_THRESHOLD = 2.0
RESISTANCE_THRESHOLD = 0.5
NEUTRAL_VALUE = 1.0
IMMUNITY_VALUE = 0.0


class ElementalType(str, Enum):
    """The 18 canonical elemental types."""

    NORMAL = "normal"
    FIRE = "fire"
    WATER = "water"
    ELECTRIC = "electric"
    GRASS = "grass"
    ICE = "ice"
    FIGHTING = "fighting"
    POISON = "poison"
    GROUND = "ground"
    FLYING = "flying"
    PSYCHIC = "psychic"
    BUG = "bug"
    ROCK = "rock"
    GHOST = "ghost"
    DRAGON = "dragon"
    DARK = "dark"
    STEEL = "steel"
    FAIRY = "fairy"

    def __str__(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        """Display name, e.g. "Fire"."""
        return self.value.capitalize()


class UnknownTypeError(ValueError):
    """Raised when a type tag is not one of the 18 canonical types."""


TYPES: tuple[ElementalType, ...] = tuple(ElementalType)

_T = ElementalType

# Exceptions to the neutral base fill: attacking type -> (2x, 0.5x, 0x) defenders
_MATCHUP_EXCEPTIONS: dict[ElementalType, tuple[tuple[ElementalType, ...], ...]] = {
    _T.NORMAL: ((), (_T.ROCK, _T.STEEL), (_T.GHOST,)),
    _T.FIRE: (
        (_T.GRASS, _T.ICE, _T.BUG, _T.STEEL),
        (_T.FIRE, _T.WATER, _T.ROCK, _T.DRAGON),
        (),
    ),
    _T.WATER: ((_T.FIRE, _T.GROUND, _T.ROCK), (_T.WATER, _T.GRASS, _T.DRAGON), ()),
    _T.ELECTRIC: ((_T.WATER, _T.FLYING), (_T.ELECTRIC, _T.GRASS, _T.DRAGON), (_T.GROUND,)),
    _T.GRASS: (
        (_T.WATER, _T.GROUND, _T.ROCK),
        (_T.FIRE, _T.GRASS, _T.POISON, _T.FLYING, _T.BUG, _T.DRAGON, _T.STEEL),
        (),
    ),
    _T.ICE: ((_T.GRASS, _T.GROUND, _T.FLYING, _T.DRAGON), (_T.FIRE, _T.WATER, _T.ICE, _T.STEEL), ()),
    _T.FIGHTING: (
        (_T.NORMAL, _T.ICE, _T.ROCK, _T.DARK, _T.STEEL),
        (_T.POISON, _T.FLYING, _T.PSYCHIC, _T.BUG, _T.FAIRY),
        (_T.GHOST,),
    ),
    _T.POISON: ((_T.GRASS, _T.FAIRY), (_T.POISON, _T.GROUND, _T.ROCK, _T.GHOST), (_T.STEEL,)),
    _T.GROUND: ((_T.FIRE, _T.ELECTRIC, _T.POISON, _T.ROCK, _T.STEEL), (_T.GRASS, _T.BUG), (_T.FLYING,)),
    _T.FLYING: ((_T.GRASS, _T.FIGHTING, _T.BUG), (_T.ELECTRIC, _T.ROCK, _T.STEEL), ()),
    _T.PSYCHIC: ((_T.FIGHTING, _T.POISON), (_T.PSYCHIC, _T.STEEL), (_T.DARK,)),
    _T.BUG: (
        (_T.GRASS, _T.PSYCHIC, _T.DARK),
        (_T.FIRE, _T.FIGHTING, _T.POISON, _T.FLYING, _T.GHOST, _T.STEEL, _T.FAIRY),
        (),
    ),
    _T.ROCK: ((_T.FIRE, _T.ICE, _T.FLYING, _T.BUG), (_T.FIGHTING, _T.GROUND, _T.STEEL), ()),
    _T.GHOST: ((_T.PSYCHIC, _T.GHOST), (_T.DARK,), (_T.NORMAL,)),
    _T.DRAGON: ((_T.DRAGON,), (_T.STEEL,), (_T.FAIRY,)),
    _T.DARK: ((_T.PSYCHIC, _T.GHOST), (_T.FIGHTING, _T.DARK, _T.FAIRY), ()),
    _T.STEEL: ((_T.ICE, _T.ROCK, _T.FAIRY), (_T.FIRE, _T.WATER, _T.ELECTRIC, _T.STEEL), ()),
    _T.FAIRY: ((_T.FIGHTING, _T.DRAGON, _T.DARK), (_T.FIRE, _T.POISON, _T.STEEL), ()),
}


def _build_effectiveness() -> Mapping[ElementalType, Mapping[ElementalType, float]]:
    """Build the read-only 18x18 matrix from a neutral fill plus the exceptions above."""
    chart: dict[ElementalType, Mapping[ElementalType, float]] = {}
    for atk_type in TYPES:
        row = dict.fromkeys(TYPES, NEUTRAL_VALUE)
        double, half, zero = _MATCHUP_EXCEPTIONS[atk_type]
        for def_type in double:
            row[def_type] = SUPER_EFFECTIVE_THRESHOLD
        for def_type in half:
            row[def_type] = RESISTANCE_THRESHOLD
        for def_type in zero:
            row[def_type] = IMMUNITY_VALUE
        chart[atk_type] = MappingProxyType(row)
    return MappingProxyType(chart)


# 18x18 effectiveness matrix: EFFECTIVENESS[attacking_type][defending_type]
EFFECTIVENESS = _build_effectiveness()

# Badge colours used by the overlay when rendering a type
TYPE_COLORS: Mapping[ElementalType, str] = MappingProxyType(
    {
        _T.NORMAL: "#A8A77A",
        _T.FIRE: "#EE8130",
        _T.WATER: "#6390F0",
        _T.ELECTRIC: "#F7D02C",
        _T.GRASS: "#7AC74C",
        _T.ICE: "#96D9D6",
        _T.FIGHTING: "#C22E28",
        _T.POISON: "#A33EA1",
        _T.GROUND: "#E2BF65",
        _T.FLYING: "#A98FF3",
        _T.PSYCHIC: "#F95587",
        _T.BUG: "#A6B91A",
        _T.ROCK: "#B6A136",
        _T.GHOST: "#735797",
        _T.DRAGON: "#6F35FC",
        _T.DARK: "#705746",
        _T.STEEL: "#B7B7CE",
        _T.FAIRY: "#D685AD",
    }
)


def parse_type(raw: str | ElementalType) -> ElementalType:
    """Convert a raw type tag (any case, surrounding whitespace allowed) into an ElementalType.

    Args:
        raw: Type name as delivered by the game API, e.g. "FIRE" or " Water ".

    Returns:
        The matching ElementalType.

    Raises:
        UnknownTypeError: If the tag is not one of the 18 canonical types.
    """
    if isinstance(raw, ElementalType):
        return raw
    try:
        return ElementalType(raw.strip().lower())
    except (ValueError, AttributeError):
        raise UnknownTypeError(f"Unknown elemental type: {raw!r}") from None


def single_type_effectiveness(attacking: ElementalType, defending: ElementalType) -> float:
    """Return the multiplier of one attacking type against one defending type.

    Returns:
        Effectiveness multiplier: 0, 0.5, 1, or 2.
    """
    return EFFECTIVENESS[attacking][defending]


def dual_type_effectiveness(attacking: ElementalType, defending_types: Sequence[ElementalType]) -> float:
    """Calculate the multiplier of an attacking type against a one- or two-typed defender.

    Args:
        attacking: The attacking type.
        defending_types: The defender's types (1 or 2 entries, order irrelevant).

    Returns:
        Effectiveness multiplier: 0, 0.25, 0.5, 1, 2, or 4.

    Raises:
        ValueError: If defending_types does not hold exactly one or two types.
    """
    if not 1 <= len(defending_types) <= 2:  # noqa: PLR2004
        raise ValueError(f"Defender must have 1 or 2 types, got {len(defending_types)}")

    multiplier = NEUTRAL_VALUE
    for def_type in defending_types:
        multiplier *= single_type_effectiveness(attacking, def_type)
    return multiplier


def get_weaknesses(defending_types: Sequence[ElementalType]) -> list[ElementalType]:
    """Return types that are super effective (>=2x) against the defender."""
    return [
        atk_type
        for atk_type in TYPES
        if dual_type_effectiveness(atk_type, defending_types) >= SUPER_EFFECTIVE_THRESHOLD
    ]


def get_resistances(defending_types: Sequence[ElementalType]) -> list[ElementalType]:
    """Return types that are resisted (<=0.5x, excluding 0x) by the defender."""
    return [
        atk_type
        for atk_type in TYPES
        if IMMUNITY_VALUE < dual_type_effectiveness(atk_type, defending_types) <= RESISTANCE_THRESHOLD
    ]


def get_immunities(defending_types: Sequence[ElementalType]) -> list[ElementalType]:
    """Return types that the defender is immune to (0x effectiveness)."""
    return [atk_type for atk_type in TYPES if dual_type_effectiveness(atk_type, defending_types) == IMMUNITY_VALUE]


def get_neutral(defending_types: Sequence[ElementalType]) -> list[ElementalType]:
    """Return types at neutral (1x) effectiveness against the defender."""
    return [atk_type for atk_type in TYPES if dual_type_effectiveness(atk_type, defending_types) == NEUTRAL_VALUE]
