# ABOUTME: Unit tests for the Pokemon type effectiveness chart module.
# ABOUTME: Tests single and dual type multipliers, type parsing, and defensive profiles.

from itertools import product

import pytest

from battlecoach.utils.type_chart import (
    EFFECTIVENESS,
    TYPE_COLORS,
    TYPES,
    ElementalType,
    UnknownTypeError,
    dual_type_effectiveness,
    get_immunities,
    get_neutral,
    get_resistances,
    get_weaknesses,
    parse_type,
    single_type_effectiveness,
)

T = ElementalType


class TestConstants:
    """Tests for module constants."""

    def test_types_count(self) -> None:
        """There should be exactly 18 types in Gen 6+."""
        assert len(TYPES) == 18

    def test_types_includes_fairy(self) -> None:
        """Fairy type should be included (Gen 6+)."""
        assert T.FAIRY in TYPES

    def test_effectiveness_matrix_complete(self) -> None:
        """Every type should have effectiveness against every type."""
        for atk_type in TYPES:
            assert atk_type in EFFECTIVENESS
            assert set(EFFECTIVENESS[atk_type]) == set(TYPES)

    def test_effectiveness_matrix_read_only(self) -> None:
        """The chart cannot be modified at runtime."""
        with pytest.raises(TypeError):
            EFFECTIVENESS[T.FIRE][T.GRASS] = 1.0  # type: ignore[index]

    def test_every_type_has_a_color(self) -> None:
        """Each type has a hex badge colour."""
        assert set(TYPE_COLORS) == set(TYPES)
        assert all(color.startswith("#") and len(color) == 7 for color in TYPE_COLORS.values())


class TestParseType:
    """Tests for parse_type function."""

    @pytest.mark.parametrize("raw", ["fire", "FIRE", "Fire", "  fire "])
    def test_case_and_whitespace_insensitive(self, raw: str) -> None:
        """API tags are upper case; user input may be anything."""
        assert parse_type(raw) is T.FIRE

    def test_enum_passthrough(self) -> None:
        assert parse_type(T.WATER) is T.WATER

    def test_unknown_type_raises(self) -> None:
        """Unknown tags are a data error, never silently neutral."""
        with pytest.raises(UnknownTypeError, match="Unknown elemental type"):
            parse_type("Mystery")

    def test_unknown_type_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_type("")


class TestSingleTypeEffectiveness:
    """Tests for single_type_effectiveness function."""

    def test_total_over_all_pairs(self) -> None:
        """All 324 ordered pairs are defined and in {0, 0.5, 1, 2}."""
        pairs = list(product(TYPES, TYPES))
        assert len(pairs) == 324
        for atk_type, def_type in pairs:
            assert single_type_effectiveness(atk_type, def_type) in {0.0, 0.5, 1.0, 2.0}

    def test_super_effective(self) -> None:
        """Water vs Fire = 2x."""
        assert single_type_effectiveness(T.WATER, T.FIRE) == 2.0

    def test_not_very_effective(self) -> None:
        """Fire vs Water = 0.5x."""
        assert single_type_effectiveness(T.FIRE, T.WATER) == 0.5

    def test_immune(self) -> None:
        """Normal vs Ghost = 0x."""
        assert single_type_effectiveness(T.NORMAL, T.GHOST) == 0.0

    def test_neutral(self) -> None:
        """Fire vs Normal = 1x."""
        assert single_type_effectiveness(T.FIRE, T.NORMAL) == 1.0

    def test_fairy_immune_to_dragon(self) -> None:
        """Dragon vs Fairy = 0x."""
        assert single_type_effectiveness(T.DRAGON, T.FAIRY) == 0.0

    def test_dark_immune_to_psychic(self) -> None:
        """Psychic vs Dark = 0x."""
        assert single_type_effectiveness(T.PSYCHIC, T.DARK) == 0.0

    def test_immunity_count(self) -> None:
        """Gen 6+ has exactly 8 single-type immunities."""
        zeros = [pair for pair in product(TYPES, TYPES) if single_type_effectiveness(*pair) == 0.0]
        assert len(zeros) == 8


class TestDualTypeEffectiveness:
    """Tests for dual_type_effectiveness function."""

    def test_single_type_matches_single_lookup(self) -> None:
        for atk_type, def_type in product(TYPES, TYPES):
            assert dual_type_effectiveness(atk_type, [def_type]) == single_type_effectiveness(atk_type, def_type)

    def test_product_and_commutative(self) -> None:
        """Dual result is the product of both lookups, regardless of type order."""
        for atk_type, t1, t2 in product(TYPES, TYPES, TYPES):
            expected = single_type_effectiveness(atk_type, t1) * single_type_effectiveness(atk_type, t2)
            assert dual_type_effectiveness(atk_type, [t1, t2]) == expected
            assert dual_type_effectiveness(atk_type, [t1, t2]) == dual_type_effectiveness(atk_type, [t2, t1])

    def test_4x_effective(self) -> None:
        """Rock vs Fire/Flying = 4x."""
        assert dual_type_effectiveness(T.ROCK, [T.FIRE, T.FLYING]) == 4.0

    def test_025x_effective(self) -> None:
        """Fighting vs Poison/Flying = 0.25x."""
        assert dual_type_effectiveness(T.FIGHTING, [T.POISON, T.FLYING]) == 0.25

    def test_immunity_dominates(self) -> None:
        """Normal vs Ghost/Steel = 0x, the Steel resistance does not matter."""
        assert dual_type_effectiveness(T.NORMAL, [T.GHOST, T.STEEL]) == 0.0
        assert dual_type_effectiveness(T.NORMAL, [T.STEEL, T.GHOST]) == 0.0

    def test_immunity_cancels_weakness(self) -> None:
        """Ground vs Flying/Steel = 0x even though Steel is weak to Ground."""
        assert dual_type_effectiveness(T.GROUND, [T.FLYING, T.STEEL]) == 0.0

    def test_dual_type_cancels_out(self) -> None:
        """Fire vs Grass/Water = 1x (2x * 0.5x)."""
        assert dual_type_effectiveness(T.FIRE, [T.GRASS, T.WATER]) == 1.0

    def test_fire_vs_rock_ground(self) -> None:
        """Fire vs Rock/Ground = 0.5x (Rock resists Fire, Ground is neutral)."""
        assert dual_type_effectiveness(T.FIRE, [T.ROCK, T.GROUND]) == 0.5

    def test_electric_vs_water_flying(self) -> None:
        """Electric vs Water/Flying = 4x."""
        assert dual_type_effectiveness(T.ELECTRIC, [T.WATER, T.FLYING]) == 4.0

    def test_result_values(self) -> None:
        """Every combination lands in {0, 0.25, 0.5, 1, 2, 4}."""
        allowed = {0.0, 0.25, 0.5, 1.0, 2.0, 4.0}
        for atk_type, t1, t2 in product(TYPES, TYPES, TYPES):
            assert dual_type_effectiveness(atk_type, [t1, t2]) in allowed

    @pytest.mark.parametrize("defending", [[], [T.FIRE, T.WATER, T.GRASS]])
    def test_invalid_arity_raises(self, defending: list[ElementalType]) -> None:
        with pytest.raises(ValueError, match="1 or 2 types"):
            dual_type_effectiveness(T.FIRE, defending)


class TestDefensiveProfile:
    """Tests for get_weaknesses, get_resistances, get_immunities, and get_neutral."""

    def test_fire_weaknesses(self) -> None:
        """Fire is weak to Water, Ground, Rock."""
        assert set(get_weaknesses([T.FIRE])) == {T.WATER, T.GROUND, T.ROCK}

    def test_steel_fairy_weaknesses(self) -> None:
        """Steel/Fairy is weak to Fire and Ground only."""
        assert set(get_weaknesses([T.STEEL, T.FAIRY])) == {T.FIRE, T.GROUND}

    def test_electric_monotype(self) -> None:
        """Electric is only weak to Ground."""
        assert get_weaknesses([T.ELECTRIC]) == [T.GROUND]

    def test_resistances_exclude_immunities(self) -> None:
        """Steel is immune to Poison, so Poison is not listed as a resistance."""
        resistances = get_resistances([T.STEEL])
        assert T.POISON not in resistances
        assert T.POISON in get_immunities([T.STEEL])

    def test_ghost_normal_immunities(self) -> None:
        """Ghost/Normal is immune to Normal, Fighting, and Ghost."""
        assert set(get_immunities([T.GHOST, T.NORMAL])) == {T.NORMAL, T.FIGHTING, T.GHOST}

    def test_profile_partitions_all_types(self) -> None:
        """Every attacking type falls into exactly one bucket."""
        defending = [T.WATER, T.GROUND]
        buckets = [
            set(get_weaknesses(defending)),
            set(get_resistances(defending)),
            set(get_immunities(defending)),
            set(get_neutral(defending)),
        ]
        assert sum(len(b) for b in buckets) == 18
        assert set().union(*buckets) == set(TYPES)
