"""
AI Functions for Stoichiometry

This module contains the AI-accessible functions for mole-concept questions:
- "How many moles are in 36 g of water?"
- "What volume does 2 mol of CO2 occupy at STP?"
- "How many atoms are in 3 NA of H2O?"

Each function parses the formula, runs the stoichiometry calculation and
returns a standardized result envelope.
"""

import logging
import time
from typing import Any, Dict, Optional, Annotated

from kani import ai_function, AIParam

from ..base import success_result, error_result, ErrorType, Confidence, track_tool_output
from ..constants.units import UNIT_ALIASES, UNIT_SYMBOLS, UnitBranch
from .formula import FormulaParseError, parse_formula

_log = logging.getLogger(__name__)

HANDLER_NAME = "stoichiometry"

CITATIONS = [
    "Avogadro constant, textbook value 6.02 × 10²³ mol⁻¹",
    "Ideal gas molar volume at 0 °C, 1 atm: 22.4 L/mol",
]


class StoichiometryAIFunctionsMixin:
    """Mixin class containing AI function methods for stoichiometric conversions."""

    @ai_function(
        desc=(
            "Convert an amount of a chemical substance between mass (g, kg), moles (mol), gas volume "
            "at STP (L, mL) and particle counts. Also accepts 'NA' for a coefficient of Avogadro's "
            "number. Use for mole-concept questions such as 'How many moles are in 36 g of H2O?' or "
            "'What is the volume of 2 mol of CO2 at STP?'. Returns molar mass, converted quantities "
            "and step-by-step derivations."
        ),
        auto_truncate=32000
    )
    @track_tool_output
    async def calculate_stoichiometry(
        self,
        formula: Annotated[str, AIParam(desc="Chemical formula, optionally with a leading molecule count (e.g., 'H2O', '3H2O', 'Ca(OH)2').")],
        amount: Annotated[float, AIParam(desc="Quantity value in the given unit (e.g., 18.015).")],
        unit: Annotated[str, AIParam(desc="Unit of the amount: 'g', 'kg', 'mol', 'L', 'mL' or 'NA' (Korean unit names also accepted).")],
        locale: Annotated[Optional[str], AIParam(desc="Label language for derivations: 'en' or 'ko' (default: configured locale).")] = None
    ) -> Dict[str, Any]:
        """
        Parse the formula and convert the given quantity.

        A formula that cannot be parsed is reported as invalid_input. An
        unrecognised unit or a zero amount is not an error: the result simply
        has branch "none" and no conversions.
        """
        start_time = time.time()

        try:
            parsed = parse_formula(formula)
        except FormulaParseError as e:
            return error_result(
                handler=HANDLER_NAME,
                function="calculate_stoichiometry",
                error=f"Could not parse formula {formula!r}: {e}",
                error_type=ErrorType.INVALID_INPUT,
                suggestions=["Use element symbols with counts, e.g. 'H2O', '3H2O' or 'Ca(OH)2'"],
                duration_ms=(time.time() - start_time) * 1000
            )

        try:
            calc = self.calculate(parsed, amount=amount, unit=unit, locale=locale)
            data = calc.to_dict()
            data["formula"] = str(parsed)

            notes = []
            if not calc.has_conversion:
                notes.append(
                    "No conversion performed: the unit is not recognised, the amount is zero, "
                    "or the molar mass is not positive"
                )
            if calc.conversions.volume_l is not None:
                notes.append("Gas volumes assume an ideal gas at 0 °C and 1 atm")

            return success_result(
                handler=HANDLER_NAME,
                function="calculate_stoichiometry",
                data=data,
                citations=CITATIONS,
                notes=notes or None,
                warnings=calc.warnings or None,
                confidence=Confidence.LOW if calc.warnings else Confidence.HIGH,
                duration_ms=(time.time() - start_time) * 1000
            )

        except Exception as e:
            _log.error(f"Error in calculate_stoichiometry: {e}", exc_info=True)
            return error_result(
                handler=HANDLER_NAME,
                function="calculate_stoichiometry",
                error=str(e),
                error_type=ErrorType.COMPUTATION_ERROR,
                duration_ms=(time.time() - start_time) * 1000
            )

    @ai_function(
        desc=(
            "Compute the molar mass (g/mol) of a chemical formula with a per-element breakdown and "
            "the worked sum. A leading count such as '3H2O' also reports the mass of that many molecules."
        ),
        auto_truncate=16000
    )
    @track_tool_output
    async def get_molar_mass(
        self,
        formula: Annotated[str, AIParam(desc="Chemical formula (e.g., 'H2SO4', '2NaCl', 'CuSO4·5H2O').")]
    ) -> Dict[str, Any]:
        """Molar mass, breakdown rows and derivation lines for a formula."""
        start_time = time.time()

        try:
            parsed = parse_formula(formula)
        except FormulaParseError as e:
            return error_result(
                handler=HANDLER_NAME,
                function="get_molar_mass",
                error=f"Could not parse formula {formula!r}: {e}",
                error_type=ErrorType.INVALID_INPUT,
                duration_ms=(time.time() - start_time) * 1000
            )

        try:
            calc = self.calculate(parsed)
            data = {
                "formula": str(parsed),
                "multiplier": calc.multiplier,
                "molar_mass": calc.molar_mass,
                "group_molar_mass": calc.group_molar_mass,
                "atoms_per_molecule": calc.atoms_per_molecule,
                "breakdown": [row.to_dict() for row in calc.breakdown],
                "derivation": calc.molar_mass_derivation,
            }
            return success_result(
                handler=HANDLER_NAME,
                function="get_molar_mass",
                data=data,
                warnings=calc.warnings or None,
                confidence=Confidence.LOW if calc.warnings else Confidence.HIGH,
                duration_ms=(time.time() - start_time) * 1000
            )

        except Exception as e:
            _log.error(f"Error in get_molar_mass: {e}", exc_info=True)
            return error_result(
                handler=HANDLER_NAME,
                function="get_molar_mass",
                error=str(e),
                error_type=ErrorType.COMPUTATION_ERROR,
                duration_ms=(time.time() - start_time) * 1000
            )

    @ai_function(desc="List the unit spellings accepted by calculate_stoichiometry, grouped by quantity.")
    @track_tool_output
    async def list_supported_units(self) -> Dict[str, Any]:
        """Accepted unit spellings grouped by branch, with each branch's canonical symbol."""
        groups: Dict[str, Dict[str, Any]] = {}
        for alias, branch in UNIT_ALIASES.items():
            entry = groups.setdefault(branch.value, {"symbol": UNIT_SYMBOLS[branch], "aliases": []})
            entry["aliases"].append(alias)
        return success_result(
            handler=HANDLER_NAME,
            function="list_supported_units",
            data={"units": groups},
            notes=["Unit matching is case-insensitive", f"'{UNIT_SYMBOLS[UnitBranch.PARTICLE_MULTIPLIER]}' means a coefficient of Avogadro's number"],
        )
