# ABOUTME: Utils package for battlecoach utility functions.
# ABOUTME: Contains reusable helpers like the type chart module.

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

__all__ = [
    "EFFECTIVENESS",
    "TYPES",
    "TYPE_COLORS",
    "ElementalType",
    "UnknownTypeError",
    "dual_type_effectiveness",
    "get_immunities",
    "get_neutral",
    "get_resistances",
    "get_weaknesses",
    "parse_type",
    "single_type_effectiveness",
]
