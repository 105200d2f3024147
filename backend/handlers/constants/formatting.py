"""
Display precision for derivation strings.

These settings only affect the printed derivation lines. Numeric fields in
result payloads (StoichiometryResult.to_dict()) are returned unrounded.
"""

# Decimal places
MASS_DECIMALS = 3
VOLUME_DECIMALS = 3
MOLAR_MASS_DECIMALS = 3
MOLE_DECIMALS = 4
AVOGADRO_FORM_DECIMALS = 2       # "x.xx × 10²³"
GROUPED_MOLE_MAX_DECIMALS = 4    # NA branch, thousands-grouped

# Rendered in place of an unavailable value
PLACEHOLDER = "-"
