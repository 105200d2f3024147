"""
Stoichiometry calculations for a parsed chemical formula.

Given a formula (with an optional leading molecule count) and one quantity,
this module computes the molar mass and converts the quantity between

- mass (g, kg)
- amount of substance (mol)
- gas volume at 0 °C, 1 atm (L, mL; 22.4 L/mol)
- particle and atom counts (Avogadro's number, 6.02 × 10²³)

Physics used:
- n = m / M                      (moles from mass and molar mass)
- V = n × 22.4 L/mol             (ideal gas molar volume at STP)
- N = n × N_A                    (formula units)
- N_atoms = n × k × N_A          (k = atoms per formula unit)

Nothing here raises on bad data. Unknown element symbols contribute zero
mass, and a conversion whose inputs are missing or whose molar mass is not
positive is reported as unavailable (None) rather than failing.

IMPORTANT:
- Input given in "NA" (a coefficient of Avogadro's number) is converted to
  moles as coefficient × atoms-per-molecule, without dividing by N_A. This is
  the calculator's established rule and is kept for compatibility; results
  for that branch carry a warning saying so.
"""

import logging
import math
from typing import Any, Iterable, List, Mapping, Optional, Union

from ..base.converters import (
    kilograms_to_grams,
    milliliters_to_liters,
    mass_to_moles,
    moles_to_mass,
    moles_to_volume,
    volume_to_moles,
    moles_to_particles,
    moles_to_atom_count,
    avogadro_coefficient_to_moles,
    avogadro_coefficient_to_particles,
)
from ..constants.units import (
    UnitBranch,
    UNIT_ALIASES,
    MASS_BRANCHES,
    VOLUME_BRANCHES,
    normalize_unit_tag,
)
from .element_table import get_element, atomic_mass_of
from .formatting import build_molar_mass_derivation, build_conversion_derivations
from .formula import ParsedAtom, ParsedFormula, extract_molecule_multiplier
from .models import AtomBreakdown, ConversionValues, StoichiometryResult

_log = logging.getLogger(__name__)

NA_MOLES_WARNING = (
    "NA input: moles are computed as coefficient × atoms per molecule, without "
    "dividing by Avogadro's number. This is not dimensionally consistent with "
    "the other conversions."
)

FormulaInput = Union[ParsedFormula, Iterable[Any]]


def as_parsed_formula(formula: FormulaInput) -> ParsedFormula:
    """Accept a ParsedFormula or an upstream atom list (multiplier entry optional)."""
    if isinstance(formula, ParsedFormula):
        return formula
    return extract_molecule_multiplier(formula)


# ============================================================================
# Molar mass
# ============================================================================

def molar_mass(atoms: Iterable[ParsedAtom], table: Optional[Mapping[str, Any]]) -> float:
    """
    Σ(count × atomic mass) over the atoms, in g/mol.

    Symbols missing from the table contribute 0. With H = 1.008 and
    O = 15.999, H2O gives 2×1.008 + 1×15.999 = 18.015.
    """
    total = 0.0
    for atom in atoms:
        total += atom.count * atomic_mass_of(table, atom.symbol)
    return total


def atoms_per_molecule(formula: FormulaInput) -> int:
    """
    Total atom count of one formula unit.

    Summed over the full upstream list, so the count carried by a leading
    multiplier entry is included (placeholder_count on a ParsedFormula).
    """
    parsed = as_parsed_formula(formula)
    return sum(atom.count for atom in parsed.atoms) + (parsed.placeholder_count or 0)


def describe_atoms(parsed: ParsedFormula, table: Optional[Mapping[str, Any]]) -> List[AtomBreakdown]:
    """Per-element rows: reference data, count per molecule and count × multiplier."""
    rows = []
    for atom in parsed.atoms:
        record = get_element(table, atom.symbol)
        rows.append(AtomBreakdown(
            symbol=atom.symbol,
            count=atom.count,
            total_count=atom.count * parsed.multiplier,
            atomic_mass=record.atomic_mass if record else None,
            name=record.name if record else None,
            localized_name=record.localized_name if record else None,
        ))
    return rows


# ============================================================================
# Unit classification
# ============================================================================

def _usable_amount(amount: Any) -> Optional[float]:
    """The amount as a float if it is present, finite and non-zero, else None."""
    if amount is None or isinstance(amount, bool):
        return None
    try:
        value = float(amount)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value) or value == 0:
        return None
    return value


def classify_unit(unit: Optional[str], amount: Any, total: float) -> UnitBranch:
    """
    Select the conversion branch for a quantity input.

    A branch is active only when the unit is recognised (case-insensitive,
    English or Korean spelling), the amount is present and non-zero, and the
    molar mass is positive. Otherwise UnitBranch.NONE.

    Example:
        >>> classify_unit("MOL", 2, 18.015)
        <UnitBranch.MOLAR: 'molar'>
        >>> classify_unit("g", 5, 0.0)
        <UnitBranch.NONE: 'none'>
    """
    if _usable_amount(amount) is None or not total > 0:
        return UnitBranch.NONE
    return UNIT_ALIASES.get(normalize_unit_tag(unit), UnitBranch.NONE)


def normalize_amount(branch: UnitBranch, amount: Any) -> Optional[float]:
    """Amount in the branch's base unit: grams for mass, liters for volume."""
    value = _usable_amount(amount)
    if value is None:
        return None
    if branch is UnitBranch.MASS_KG:
        return kilograms_to_grams(value)
    if branch is UnitBranch.VOLUME_ML:
        return milliliters_to_liters(value)
    return value


# ============================================================================
# Conversion engine
# ============================================================================

def convert_quantity(
    branch: UnitBranch,
    amount: Optional[float],
    total: float,
    atoms_per_formula: int,
) -> ConversionValues:
    """
    Convert a normalized amount into the other representations.

    Args:
        branch: Active branch from classify_unit
        amount: Normalized amount (g for mass, L for volume, mol, or N_A coefficient)
        total: Molar mass in g/mol
        atoms_per_formula: Atoms per formula unit

    Returns:
        ConversionValues; fields not produced by the branch stay None.
        Everything is None when the molar mass is not positive or the
        amount is missing.
    """
    if amount is None or not total > 0 or branch is UnitBranch.NONE:
        return ConversionValues()

    if branch in MASS_BRANCHES:
        moles = mass_to_moles(amount, total)
        return ConversionValues(
            moles=moles,
            mass_g=amount,
            volume_l=moles_to_volume(moles),
            particle_count=moles_to_particles(moles),
            atom_count=moles_to_atom_count(moles, atoms_per_formula),
        )

    if branch is UnitBranch.MOLAR:
        return ConversionValues(
            moles=amount,
            mass_g=moles_to_mass(amount, total),
            volume_l=moles_to_volume(amount),
            particle_count=moles_to_particles(amount),
            atom_count=moles_to_atom_count(amount, atoms_per_formula),
        )

    if branch in VOLUME_BRANCHES:
        moles = volume_to_moles(amount)
        return ConversionValues(
            moles=moles,
            mass_g=moles_to_mass(moles, total),
            volume_l=amount,
            atom_count=moles_to_atom_count(moles, atoms_per_formula),
        )

    # UnitBranch.PARTICLE_MULTIPLIER
    moles = avogadro_coefficient_to_moles(amount, atoms_per_formula)
    return ConversionValues(
        moles=moles,
        mass_g=moles_to_mass(moles, total),
        volume_l=moles_to_volume(moles),
        particle_count=avogadro_coefficient_to_particles(amount),
        atom_count=moles_to_atom_count(amount, atoms_per_formula),
    )


def compute_stoichiometry(
    formula: FormulaInput,
    amount: Any = None,
    unit: Optional[str] = None,
    table: Optional[Mapping[str, Any]] = None,
    locale: str = "en",
) -> StoichiometryResult:
    """
    Full calculation for one formula and one quantity.

    Args:
        formula: ParsedFormula, or the upstream atom list whose first entry
            may be a numeric molecule count
        amount: Quantity value (None or 0 means no conversion)
        unit: Unit tag such as "g", "kg", "mol", "몰", "L", "mL", "NA"
        table: Element reference table (symbol -> record)
        locale: Derivation label language ("en" or "ko")

    Returns:
        StoichiometryResult with molar mass, per-atom breakdown, the active
        branch, conversions and derivation lines
    """
    parsed = as_parsed_formula(formula)
    atoms = list(parsed.atoms)
    total = molar_mass(atoms, table)
    k = atoms_per_molecule(parsed)
    breakdown = describe_atoms(parsed, table)

    warnings: List[str] = list(parsed.issues)
    missing = sorted({row.symbol for row in breakdown if row.atomic_mass is None})
    if missing:
        _log.warning(f"No atomic mass for {', '.join(missing)}; counted as 0")
        warnings.append(f"No atomic mass for {', '.join(missing)}; counted as 0 g/mol")

    branch = classify_unit(unit, amount, total)
    normalized = normalize_amount(branch, amount) if branch is not UnitBranch.NONE else None
    values = convert_quantity(branch, normalized, total, k)
    _log.debug(f"Branch {branch.value} for amount={amount!r} unit={unit!r} (M={total:.3f}, k={k})")

    if branch is UnitBranch.PARTICLE_MULTIPLIER:
        warnings.append(NA_MOLES_WARNING)

    raw_amount = _usable_amount(amount)
    return StoichiometryResult(
        multiplier=parsed.multiplier,
        atoms=atoms,
        breakdown=breakdown,
        molar_mass=total,
        group_molar_mass=total * parsed.multiplier,
        atoms_per_molecule=k,
        branch=branch,
        amount=raw_amount,
        unit=unit,
        normalized_amount=normalized,
        conversions=values,
        molar_mass_derivation=build_molar_mass_derivation(breakdown, parsed.multiplier, total) if atoms else [],
        derivations=build_conversion_derivations(
            branch, raw_amount, normalized, total, k, values, locale
        ),
        warnings=warnings,
    )
