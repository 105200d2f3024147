"""
Unit vocabulary for quantity inputs.

Maps every accepted unit spelling (English and Korean) to the conversion
branch it selects. Keys are stored case-folded; lookups must fold the
incoming tag the same way (see normalize_unit_tag).

DO NOT add a spelling that already belongs to another branch.
"""

from enum import Enum


# ============================================================================
# Conversion Branches
# ============================================================================

class UnitBranch(Enum):
    """Which conversion applies to a quantity input."""
    MASS_KG = "mass_kg"                   # kilograms, normalized to grams
    MASS_G = "mass_g"                     # grams
    MOLAR = "molar"                       # moles
    VOLUME_L = "volume_l"                 # liters of gas at STP
    VOLUME_ML = "volume_ml"               # milliliters, normalized to liters
    PARTICLE_MULTIPLIER = "particle_multiplier"  # coefficient of N_A
    NONE = "none"                         # no conversion shown


# Branch groups sharing a derivation block
MASS_BRANCHES = frozenset({UnitBranch.MASS_KG, UnitBranch.MASS_G})
VOLUME_BRANCHES = frozenset({UnitBranch.VOLUME_L, UnitBranch.VOLUME_ML})


# ============================================================================
# Unit Aliases
# ============================================================================

UNIT_ALIASES = {
    # Kilograms
    "kg": UnitBranch.MASS_KG, "kilogram": UnitBranch.MASS_KG,
    "kilograms": UnitBranch.MASS_KG, "킬로그램": UnitBranch.MASS_KG,

    # Grams
    "g": UnitBranch.MASS_G, "gram": UnitBranch.MASS_G,
    "grams": UnitBranch.MASS_G, "그램": UnitBranch.MASS_G,

    # Moles
    "mol": UnitBranch.MOLAR, "mole": UnitBranch.MOLAR,
    "moles": UnitBranch.MOLAR, "mols": UnitBranch.MOLAR, "몰": UnitBranch.MOLAR,

    # Liters
    "l": UnitBranch.VOLUME_L, "liter": UnitBranch.VOLUME_L,
    "liters": UnitBranch.VOLUME_L, "litre": UnitBranch.VOLUME_L,
    "litres": UnitBranch.VOLUME_L, "리터": UnitBranch.VOLUME_L,

    # Milliliters
    "ml": UnitBranch.VOLUME_ML, "milliliter": UnitBranch.VOLUME_ML,
    "milliliters": UnitBranch.VOLUME_ML, "millilitre": UnitBranch.VOLUME_ML,
    "millilitres": UnitBranch.VOLUME_ML, "밀리리터": UnitBranch.VOLUME_ML,

    # Avogadro coefficient
    "na": UnitBranch.PARTICLE_MULTIPLIER, "n_a": UnitBranch.PARTICLE_MULTIPLIER,
    "avogadro": UnitBranch.PARTICLE_MULTIPLIER,
    "아보가드로수": UnitBranch.PARTICLE_MULTIPLIER,
}

# Canonical display symbol per branch
UNIT_SYMBOLS = {
    UnitBranch.MASS_KG: "kg",
    UnitBranch.MASS_G: "g",
    UnitBranch.MOLAR: "mol",
    UnitBranch.VOLUME_L: "L",
    UnitBranch.VOLUME_ML: "mL",
    UnitBranch.PARTICLE_MULTIPLIER: "NA",
}


def normalize_unit_tag(unit) -> str:
    """Case-fold and strip a unit tag; None becomes the empty string."""
    if unit is None:
        return ""
    return str(unit).strip().casefold()
