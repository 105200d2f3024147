"""
Derivation strings for stoichiometry results.

Turns computed values into the step-by-step lines shown to students, e.g.

    Mass: moles (mol) × molar mass (g/mol) = mass (g)
    2mol × 18.015g/mol = 36.030 g

Precision is fixed per quantity (see constants.formatting): 3 decimals for
mass, volume and molar mass, 4 for moles, 2 for the "x × 10²³" form. Mole
counts from Avogadro-coefficient input are thousands-grouped instead.
Labels exist in English ("en") and Korean ("ko").
"""

from typing import List, Optional, Sequence

from ..constants.physical import AVOGADRO_COEFFICIENT, AVOGADRO_EXPONENT, MOLAR_VOLUME_STP
from ..constants.units import UnitBranch, MASS_BRANCHES, VOLUME_BRANCHES
from ..constants.formatting import (
    MASS_DECIMALS,
    VOLUME_DECIMALS,
    MOLAR_MASS_DECIMALS,
    MOLE_DECIMALS,
    AVOGADRO_FORM_DECIMALS,
    GROUPED_MOLE_MAX_DECIMALS,
    PLACEHOLDER,
)
from .models import AtomBreakdown, ConversionValues, Derivation

_SUPERSCRIPTS = str.maketrans("0123456789-", "⁰¹²³⁴⁵⁶⁷⁸⁹⁻")

LABELS = {
    "en": {
        "moles_from_mass": "Moles: mass (g) ÷ molar mass (g/mol) = moles (mol)",
        "moles_from_volume": "Moles (gas at 0 ℃, 1 atm): volume (L) ÷ molar volume (22.4 L) = moles (mol)",
        "moles_from_na": "Moles: coefficient × atoms per molecule = moles (mol)",
        "mass": "Mass: moles (mol) × molar mass (g/mol) = mass (g)",
        "volume": "Volume (gas at 0 ℃, 1 atm): moles (mol) × molar volume (22.4 L) = volume (L)",
        "atoms": "Atoms: moles (mol) × atoms per molecule × Avogadro's number (6.02×10²³) = total atoms",
        "na_atoms": "Total atoms: NA coefficient × atoms per molecule × Avogadro's number",
        "na_particles": "NA coefficient × Avogadro's number",
        "atoms_suffix": " atoms",
    },
    "ko": {
        "moles_from_mass": "몰 수 계산: 질량(g) ÷ 1몰의 질량(g/mol) = 몰 수(mol)",
        "moles_from_volume": "몰 수 계산 (0℃, 1atm, 기체일 때): 부피(L) ÷ 1몰의 부피(22.4L) = 몰 수(mol)",
        "moles_from_na": "몰 수 계산: 계수 × 분자 하나당 원자의 개수 = 몰 수(mol)",
        "mass": "질량 계산: 몰 수(mol) × 1몰의 질량(g/mol) = 질량(g)",
        "volume": "부피 계산 (0℃, 1atm, 기체일 때): 몰 수(mol) × 1몰의 부피(22.4L) = 부피(L)",
        "atoms": "원자의 개수 계산: 몰 수(mol) × 분자 하나당 원자의 개수 × 아보가드로 수(6.02×10²³) = 총 원자 개수",
        "na_atoms": "총 원자의 개수: 입력한 NA의 계수 × 분자 하나당 원자의 개수 × 아보가드로 수",
        "na_particles": "입력한 NA의 계수 × 아보가드로 수",
        "atoms_suffix": "개",
    },
}


# ============================================================================
# Number formatting
# ============================================================================

def format_plain(value: Optional[float]) -> str:
    """Shortest natural rendering: 2.0 -> "2", 1.008 -> "1.008"."""
    if value is None:
        return PLACEHOLDER
    value = float(value)
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def format_fixed(value: Optional[float], decimals: int) -> str:
    """Fixed decimal places, or the placeholder when the value is unavailable."""
    if value is None:
        return PLACEHOLDER
    return f"{float(value):.{decimals}f}"


def format_grouped(value: Optional[float], max_decimals: int = GROUPED_MOLE_MAX_DECIMALS) -> str:
    """Thousands separators and at most max_decimals fraction digits: 1234.5 -> "1,234.5"."""
    if value is None:
        return PLACEHOLDER
    text = f"{float(value):,.{max_decimals}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def avogadro_power() -> str:
    return f"10{str(AVOGADRO_EXPONENT).translate(_SUPERSCRIPTS)}"


def format_avogadro_form(coefficient: Optional[float]) -> str:
    """Render coefficient × 10²³, e.g. 36.12 -> "36.12 × 10²³"."""
    if coefficient is None:
        return PLACEHOLDER
    return f"{float(coefficient):.{AVOGADRO_FORM_DECIMALS}f} × {avogadro_power()}"


def _avogadro_product(factors: Sequence[str], coefficient: float) -> str:
    lhs = " × ".join(list(factors) + [format_plain(AVOGADRO_COEFFICIENT), avogadro_power()])
    return f"{lhs} = {format_avogadro_form(coefficient)}"


# ============================================================================
# Derivations
# ============================================================================

def build_molar_mass_derivation(
    breakdown: Sequence[AtomBreakdown],
    multiplier: int,
    molar_mass: float,
) -> List[str]:
    """
    Molar-mass working, e.g. ["2×1.008 + 1×15.999", "= 18.015"], or with a
    molecule count ["3(2×1.008 + 1×15.999)", "= 3(18.015) = 54.045"].
    Elements missing from the table appear with mass 0.
    """
    terms = " + ".join(
        f"{row.count}×{format_plain(row.atomic_mass or 0)}" for row in breakdown
    )
    total = format_fixed(molar_mass, MOLAR_MASS_DECIMALS)
    if multiplier > 1:
        group_total = format_fixed(molar_mass * multiplier, MOLAR_MASS_DECIMALS)
        return [f"{multiplier}({terms})", f"= {multiplier}({total}) = {group_total}"]
    return [terms, f"= {total}"]


def _atoms_line(moles_text: str, moles: Optional[float], atoms_per_molecule: int, suffix: str) -> str:
    if not moles or not atoms_per_molecule:
        return f"{PLACEHOLDER}{suffix}"
    body = _avogadro_product(
        [moles_text, str(atoms_per_molecule)], moles * atoms_per_molecule * AVOGADRO_COEFFICIENT
    )
    return f"{body}{suffix}"


def build_conversion_derivations(
    branch: UnitBranch,
    amount: Optional[float],
    normalized_amount: Optional[float],
    molar_mass: float,
    atoms_per_molecule: int,
    values: ConversionValues,
    locale: str = "en",
) -> List[Derivation]:
    """
    Labeled derivation lines for the active branch; empty for UnitBranch.NONE.

    Args:
        branch: Active conversion branch
        amount: Amount as entered
        normalized_amount: Amount in g (mass) or L (volume); same as amount otherwise
        molar_mass: g/mol of one molecule
        atoms_per_molecule: Atom total used for particle math
        values: Computed conversions
        locale: "en" or "ko"
    """
    labels = LABELS.get(locale, LABELS["en"])
    suffix = labels["atoms_suffix"]
    k = atoms_per_molecule
    M = format_fixed(molar_mass, MOLAR_MASS_DECIMALS)
    molar_volume = format_plain(MOLAR_VOLUME_STP)
    mass = format_fixed(values.mass_g, MASS_DECIMALS)
    volume = format_fixed(values.volume_l, VOLUME_DECIMALS)
    lines: List[Derivation] = []

    if branch is UnitBranch.MOLAR:
        a = format_plain(amount)
        lines.append(Derivation("mass", labels["mass"], f"{a}mol × {M}g/mol = {mass} g"))
        lines.append(Derivation("volume", labels["volume"], f"{a}mol × {molar_volume}L = {volume} L"))
        lines.append(Derivation("atom_count", labels["atoms"], _atoms_line(a, amount, k, suffix)))

    elif branch in MASS_BRANCHES:
        moles = format_fixed(values.moles, MOLE_DECIMALS)
        lines.append(Derivation(
            "moles", labels["moles_from_mass"],
            f"{format_plain(normalized_amount)}g ÷ {M}g/mol = {moles} mol",
        ))
        lines.append(Derivation("volume", labels["volume"], f"{moles} mol × {molar_volume}L = {volume} L"))
        lines.append(Derivation("atom_count", labels["atoms"], _atoms_line(moles, values.moles, k, suffix)))

    elif branch in VOLUME_BRANCHES:
        moles = format_fixed(values.moles, MOLE_DECIMALS)
        lines.append(Derivation(
            "moles", labels["moles_from_volume"],
            f"{format_plain(normalized_amount)}L ÷ {molar_volume}L = {moles} mol",
        ))
        mass_expr = f"{moles}mol × {M}g/mol = {mass} g" if values.moles is not None else f"{PLACEHOLDER} g"
        lines.append(Derivation("mass", labels["mass"], mass_expr))
        lines.append(Derivation("atom_count", labels["atoms"], _atoms_line(moles, values.moles, k, suffix)))

    elif branch is UnitBranch.PARTICLE_MULTIPLIER:
        a = format_plain(amount)
        moles = format_grouped(values.moles)
        lines.append(Derivation("moles", labels["moles_from_na"], f"{a} × {k} = {moles} mol"))
        lines.append(Derivation("mass", labels["mass"], f"{moles} mol × {M}g/mol = {mass} g"))
        lines.append(Derivation("volume", labels["volume"], f"{moles} mol × {molar_volume}L = {volume} L"))
        lines.append(Derivation("atom_count", labels["na_atoms"], _atoms_line(a, amount, k, suffix)))
        particles = (
            _avogadro_product([a], amount * AVOGADRO_COEFFICIENT) if amount else PLACEHOLDER
        )
        lines.append(Derivation("particle_count", labels["na_particles"], particles))

    return lines
