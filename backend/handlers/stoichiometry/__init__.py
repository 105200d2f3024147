"""
Stoichiometry Handler

Handler for mole-concept conversions (mass, moles, gas volume, particle
counts) of a chemical formula.
"""

from .stoichiometry_handler import StoichiometryHandler
from .formula import ParsedAtom, ParsedFormula, FormulaParseError, parse_formula, extract_molecule_multiplier
from .element_table import ElementRecord, get_element_table, load_element_table, load_element_table_json
from .models import StoichiometryResult, ConversionValues, AtomBreakdown, Derivation
from .utils import compute_stoichiometry, classify_unit, convert_quantity, molar_mass, atoms_per_molecule


__all__ = [
    "StoichiometryHandler",
    "ParsedAtom",
    "ParsedFormula",
    "FormulaParseError",
    "parse_formula",
    "extract_molecule_multiplier",
    "ElementRecord",
    "get_element_table",
    "load_element_table",
    "load_element_table_json",
    "StoichiometryResult",
    "ConversionValues",
    "AtomBreakdown",
    "Derivation",
    "compute_stoichiometry",
    "classify_unit",
    "convert_quantity",
    "molar_mass",
    "atoms_per_molecule",
]
