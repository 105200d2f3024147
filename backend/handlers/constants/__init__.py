"""
Centralized constants for the stoichiometry handler.

This module provides a single import point for the physical constants,
unit vocabulary, element names and display precision used by the
calculations.

Organization:
    - physical.py: Avogadro's number, gas molar volume, mass/volume factors
    - units.py: Conversion branches and accepted unit spellings
    - elements.py: Element symbols and Korean names
    - formatting.py: Rounding precision and the placeholder string

Usage:
    from backend.handlers.constants import AVOGADRO, MOLAR_VOLUME_STP
    from backend.handlers.constants import UnitBranch, UNIT_ALIASES
    from backend.handlers.constants.elements import KOREAN_ELEMENT_NAMES
"""

# Physical constants
from .physical import (
    AVOGADRO,
    AVOGADRO_COEFFICIENT,
    AVOGADRO_EXPONENT,
    MOLAR_VOLUME_STP,
    GRAMS_PER_KILOGRAM,
    MILLILITERS_PER_LITER,
)

# Unit vocabulary
from .units import (
    UnitBranch,
    UNIT_ALIASES,
    UNIT_SYMBOLS,
    MASS_BRANCHES,
    VOLUME_BRANCHES,
    normalize_unit_tag,
)

# Element names
from .elements import (
    KOREAN_ELEMENT_NAMES,
    ELEMENT_SYMBOLS,
)

# Display precision
from .formatting import (
    MASS_DECIMALS,
    VOLUME_DECIMALS,
    MOLAR_MASS_DECIMALS,
    MOLE_DECIMALS,
    AVOGADRO_FORM_DECIMALS,
    GROUPED_MOLE_MAX_DECIMALS,
    PLACEHOLDER,
)

__all__ = [
    # Physical
    "AVOGADRO",
    "AVOGADRO_COEFFICIENT",
    "AVOGADRO_EXPONENT",
    "MOLAR_VOLUME_STP",
    "GRAMS_PER_KILOGRAM",
    "MILLILITERS_PER_LITER",
    # Units
    "UnitBranch",
    "UNIT_ALIASES",
    "UNIT_SYMBOLS",
    "MASS_BRANCHES",
    "VOLUME_BRANCHES",
    "normalize_unit_tag",
    # Elements
    "KOREAN_ELEMENT_NAMES",
    "ELEMENT_SYMBOLS",
    # Formatting
    "MASS_DECIMALS",
    "VOLUME_DECIMALS",
    "MOLAR_MASS_DECIMALS",
    "MOLE_DECIMALS",
    "AVOGADRO_FORM_DECIMALS",
    "GROUPED_MOLE_MAX_DECIMALS",
    "PLACEHOLDER",
]
