"""
Physical constants used by the stoichiometry calculations.

These are the rounded textbook values used in general-chemistry derivations
(Avogadro's number to three significant figures, ideal-gas molar volume at
0 °C and 1 atm). The derivation strings quote them literally, so the numeric
values and the printed values must stay in agreement.
DO NOT change these values without updating the derivation labels.
"""

# ============================================================================
# Avogadro's Number
# ============================================================================

# Avogadro's number in 1/mol, textbook precision (6.02 × 10²³)
AVOGADRO_COEFFICIENT = 6.02
AVOGADRO_EXPONENT = 23
AVOGADRO = 6.02e23

# ============================================================================
# Gas Molar Volume
# ============================================================================

# Volume of one mole of ideal gas at 0 °C, 1 atm (STP), in L/mol
MOLAR_VOLUME_STP = 22.4

# ============================================================================
# Conversion Factors - Mass and Volume
# ============================================================================

GRAMS_PER_KILOGRAM = 1000.0
MILLILITERS_PER_LITER = 1000.0
