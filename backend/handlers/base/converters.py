"""
Unit conversion utilities for stoichiometric quantities.

This module provides the conversion primitives used by the stoichiometry
calculations:
- Unit normalization (kg -> g, mL -> L)
- Mass <-> moles (via molar mass)
- Moles <-> gas volume at STP (22.4 L/mol)
- Moles -> particle and atom counts (via Avogadro's number)

Every function that divides by a quantity, or that needs a quantity which may
be missing, returns None instead of raising. None means "unavailable" and is
rendered as a placeholder by the formatting layer.
"""

from typing import Optional
from ..constants.physical import (
    AVOGADRO,
    MOLAR_VOLUME_STP,
    GRAMS_PER_KILOGRAM,
    MILLILITERS_PER_LITER,
)


def _is_positive(value: Optional[float]) -> bool:
    return value is not None and value > 0


# ============================================================================
# Unit Normalization
# ============================================================================

def kilograms_to_grams(mass_kg: float) -> float:
    """
    Convert mass from kilograms to grams.

    Example:
        >>> kilograms_to_grams(1.5)
        1500.0
    """
    return float(mass_kg) * GRAMS_PER_KILOGRAM


def milliliters_to_liters(volume_ml: float) -> float:
    """
    Convert volume from milliliters to liters.

    Example:
        >>> milliliters_to_liters(500)
        0.5
    """
    return float(volume_ml) / MILLILITERS_PER_LITER


# ============================================================================
# Mass <-> Moles
# ============================================================================

def mass_to_moles(mass_g: Optional[float], molar_mass: Optional[float]) -> Optional[float]:
    """
    Convert mass in grams to moles.

    Args:
        mass_g: Mass in grams
        molar_mass: Molar mass in g/mol

    Returns:
        Amount in mol, or None when the molar mass is not positive or the
        mass is missing

    Example:
        >>> mass_to_moles(36.0, 18.0)
        2.0
    """
    if mass_g is None or not _is_positive(molar_mass):
        return None
    return float(mass_g) / float(molar_mass)


def moles_to_mass(moles: Optional[float], molar_mass: Optional[float]) -> Optional[float]:
    """
    Convert moles to mass in grams.

    Returns None when the molar mass is not positive or the amount is missing.
    """
    if moles is None or not _is_positive(molar_mass):
        return None
    return float(moles) * float(molar_mass)


# ============================================================================
# Moles <-> Gas Volume (STP)
# ============================================================================

def moles_to_volume(moles: Optional[float]) -> Optional[float]:
    """
    Convert moles of an ideal gas to liters at 0 °C, 1 atm.

    Example:
        >>> moles_to_volume(2)
        44.8
    """
    if moles is None:
        return None
    return float(moles) * MOLAR_VOLUME_STP


def volume_to_moles(volume_l: Optional[float]) -> Optional[float]:
    """
    Convert liters of an ideal gas at 0 °C, 1 atm to moles.

    Example:
        >>> volume_to_moles(44.8)
        2.0
    """
    if volume_l is None:
        return None
    return float(volume_l) / MOLAR_VOLUME_STP


# ============================================================================
# Moles -> Particle Counts
# ============================================================================

def moles_to_particles(moles: Optional[float]) -> Optional[float]:
    """
    Number of formula units (molecules) in the given amount.

    Example:
        >>> moles_to_particles(1)
        6.02e+23
    """
    if moles is None:
        return None
    return float(moles) * AVOGADRO


def moles_to_atom_count(moles: Optional[float], atoms_per_molecule: int) -> Optional[float]:
    """
    Total number of atoms in the given amount.

    Args:
        moles: Amount in mol
        atoms_per_molecule: Atoms in one formula unit

    Returns:
        moles × atoms_per_molecule × N_A, or None when the amount is missing
        or the formula has no atoms
    """
    if moles is None or not _is_positive(atoms_per_molecule):
        return None
    return float(moles) * atoms_per_molecule * AVOGADRO


def avogadro_coefficient_to_particles(coefficient: Optional[float]) -> Optional[float]:
    """
    Expand a coefficient of N_A into a particle count.

    Example:
        >>> avogadro_coefficient_to_particles(2)
        1.204e+24
    """
    if coefficient is None:
        return None
    return float(coefficient) * AVOGADRO


def avogadro_coefficient_to_moles(coefficient: Optional[float], atoms_per_molecule: int) -> Optional[float]:
    """
    Mole count for an input given as a coefficient of N_A.

    The amount is scaled by the atoms per formula unit and is NOT divided by
    N_A. Dimensionally this does not match the other conversions, but it is
    the established behaviour of the calculator and existing results depend
    on it. Callers surface a warning alongside the value.

    Example:
        >>> avogadro_coefficient_to_moles(1, 3)
        3.0
    """
    if coefficient is None or not _is_positive(atoms_per_molecule):
        return None
    return float(coefficient) * atoms_per_molecule
