"""
Unit Conversion Service for Larder.

Normalizes free-text cooking units to canonical keys and converts quantities
between units of the same dimension (mass, volume, count) via a shared base.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Literal, Mapping, Optional

# --- Types ---

DimensionKind = Literal["mass", "volume", "count", "unknown"]

UNKNOWN_UNIT = "unknown"


@dataclass(frozen=True)
class UnitDefinition:
    key: str
    kind: DimensionKind
    base_factor: float  # multiplier to the dimension base (g, ml, each)
    aliases: tuple[str, ...]

    def to_dict(self):
        return {
            "key": self.key,
            "kind": self.kind,
            "base_factor": self.base_factor,
            "aliases": list(self.aliases),
        }


# --- Data Tables ---

# Base units: g (mass), ml (volume), each (count)
_DEFINITIONS = (
    # Mass (base: g)
    UnitDefinition("g", "mass", 1, ("g", "gram", "grams")),
    UnitDefinition("kg", "mass", 1000, ("kg", "kilogram", "kilograms", "kilo", "kilos")),
    UnitDefinition("mg", "mass", 0.001, ("mg", "milligram", "milligrams")),
    UnitDefinition("oz", "mass", 28.3495, ("oz", "ounce", "ounces")),
    UnitDefinition("lb", "mass", 453.592, ("lb", "lbs", "pound", "pounds")),

    # Volume (base: ml)
    UnitDefinition("ml", "volume", 1, ("ml", "milliliter", "milliliters", "cc")),
    UnitDefinition("l", "volume", 1000, ("l", "liter", "liters")),
    UnitDefinition("tsp", "volume", 4.92892, ("tsp", "teaspoon", "teaspoons", "t")),
    UnitDefinition("tbsp", "volume", 14.7868, ("tbsp", "tablespoon", "tablespoons", "tbs", "T")),
    UnitDefinition("cup", "volume", 236.588, ("cup", "cups", "c")),
    UnitDefinition("pt", "volume", 473.176, ("pt", "pint", "pints")),
    UnitDefinition("qt", "volume", 946.353, ("qt", "quart", "quarts")),
    UnitDefinition("gal", "volume", 3785.41, ("gal", "gallon", "gallons")),
    UnitDefinition("floz", "volume", 29.5735, ("floz", "fl oz", "fluid ounce", "fluid ounces")),

    # Count (base: each)
    UnitDefinition("each", "count", 1, (
        "each", "ea", "unit", "units", "pc", "pcs", "piece", "pieces",
        "clove", "cloves", "slice", "slices", "head", "heads",
    )),
)

# Single-letter aliases where case carries meaning: t = teaspoon, T = tablespoon.
# Matched against the raw (trimmed) input before lowercasing.
CASE_SENSITIVE_ALIASES = {
    "t": "tsp",
    "T": "tbsp",
}


def _build_registry(definitions) -> Mapping[str, UnitDefinition]:
    registry = {}
    for definition in definitions:
        if definition.key in registry:
            raise ValueError(f"Duplicate unit key: {definition.key}")
        registry[definition.key] = definition
    return MappingProxyType(registry)


def _build_alias_index(definitions) -> Mapping[str, str]:
    """Flatten every key and alias (lowercased) to its canonical key."""
    index: dict[str, str] = {}
    for definition in definitions:
        for alias in (definition.key, *definition.aliases):
            if alias in CASE_SENSITIVE_ALIASES:
                continue
            folded = alias.lower()
            owner = index.get(folded)
            if owner is not None and owner != definition.key:
                raise ValueError(
                    f"Alias '{alias}' is claimed by both '{owner}' and '{definition.key}'"
                )
            index[folded] = definition.key
    return MappingProxyType(index)


UNITS_DB = _build_registry(_DEFINITIONS)
ALIAS_INDEX = _build_alias_index(_DEFINITIONS)


# --- Core Functions ---

def definition_of(key: str) -> Optional[UnitDefinition]:
    """Look up a canonical unit key. None means the unit is not recognized."""
    return UNITS_DB.get(key)


def normalize_unit(unit: Optional[str]) -> str:
    """
    Normalize a raw unit string to a canonical key.

    Falls back to the cleaned (and possibly singularized) string when no
    registry entry matches, so "widgets" and "widget" still compare equal.
    Always returns a non-empty string.
    """
    if not unit:
        return UNKNOWN_UNIT

    raw_clean = unit.strip()
    if raw_clean.endswith("."):
        raw_clean = raw_clean[:-1]

    # 1. Case sensitive single letters ('t' vs 'T')
    if raw_clean in CASE_SENSITIVE_ALIASES:
        return CASE_SENSITIVE_ALIASES[raw_clean]

    u = raw_clean.lower()
    if not u:
        return UNKNOWN_UNIT

    # 2. Direct alias match
    if u in ALIAS_INDEX:
        return ALIAS_INDEX[u]

    # 3. Plural s removal
    if u.endswith("s") and len(u) > 1:
        raw_singular = raw_clean[:-1]
        if raw_singular in CASE_SENSITIVE_ALIASES:
            return CASE_SENSITIVE_ALIASES[raw_singular]
        singular = u[:-1]
        return ALIAS_INDEX.get(singular, singular)

    return u


def convert_normalized(qty: float, from_key: str, to_key: str) -> Optional[float]:
    """
    Convert qty between two already normalized unit keys.

    Keys must come straight from normalize_unit; they are not normalized again.
    """
    if from_key == to_key:
        return qty

    def_from = definition_of(from_key)
    def_to = definition_of(to_key)

    if def_from is None or def_to is None:
        return None

    if def_from.kind != def_to.kind:
        return None

    # base_qty = qty * factor_from; target = base_qty / factor_to
    base_qty = qty * def_from.base_factor
    return base_qty / def_to.base_factor


def convert_quantity(qty: float, from_unit: Optional[str], to_unit: Optional[str]) -> Optional[float]:
    """
    Convert qty between raw units.

    Returns None when either unit is unrecognized or the units measure
    different dimensions. Identical normalized units return qty unchanged,
    registered or not.
    """
    return convert_normalized(qty, normalize_unit(from_unit), normalize_unit(to_unit))


def unit_kind(unit: Optional[str]) -> DimensionKind:
    """Dimension of a raw unit string, 'unknown' when unregistered."""
    definition = definition_of(normalize_unit(unit))
    return definition.kind if definition else "unknown"
