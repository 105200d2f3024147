"""
Result types for stoichiometry calculations.

All numeric conversion fields are Optional: None means the value is not
available for the selected branch (or could not be computed) and is shown as
the placeholder by the formatting layer.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..constants.units import UnitBranch
from .formula import ParsedAtom


@dataclass(frozen=True)
class AtomBreakdown:
    """One row of the per-element listing."""
    symbol: str
    count: int                            # atoms per molecule
    total_count: int                      # count × molecule multiplier
    atomic_mass: Optional[float] = None   # None when the table has no entry
    name: Optional[str] = None
    localized_name: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "symbol": self.symbol,
            "name": self.name,
            "localized_name": self.localized_name,
            "atomic_mass": self.atomic_mass,
            "count": self.count,
            "total_count": self.total_count,
        }


@dataclass(frozen=True)
class ConversionValues:
    """Derived quantities for one quantity input."""
    moles: Optional[float] = None              # mol
    mass_g: Optional[float] = None             # g
    volume_l: Optional[float] = None           # L, ideal gas at STP
    particle_count: Optional[float] = None     # formula units
    atom_count: Optional[float] = None         # total atoms

    def to_dict(self) -> Dict[str, Optional[float]]:
        return {
            "moles": self.moles,
            "mass_g": self.mass_g,
            "volume_l": self.volume_l,
            "particle_count": self.particle_count,
            "atom_count": self.atom_count,
        }


@dataclass(frozen=True)
class Derivation:
    """A labeled calculation step, e.g. ("mass", "Mass: ...", "2mol × 18.015g/mol = 36.030 g")."""
    quantity: str
    label: str
    expression: str

    def to_dict(self) -> Dict[str, str]:
        return {"quantity": self.quantity, "label": self.label, "expression": self.expression}


@dataclass
class StoichiometryResult:
    """Everything the presentation layer needs for one formula and quantity."""
    multiplier: int
    atoms: List[ParsedAtom]
    breakdown: List[AtomBreakdown]
    molar_mass: float                     # g/mol of one molecule
    group_molar_mass: float               # molar_mass × multiplier
    atoms_per_molecule: int
    branch: UnitBranch = UnitBranch.NONE
    amount: Optional[float] = None
    unit: Optional[str] = None
    normalized_amount: Optional[float] = None   # g for mass, L for volume
    conversions: ConversionValues = field(default_factory=ConversionValues)
    molar_mass_derivation: List[str] = field(default_factory=list)
    derivations: List[Derivation] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def has_conversion(self) -> bool:
        return self.branch is not UnitBranch.NONE

    def to_dict(self) -> Dict[str, Any]:
        return {
            "multiplier": self.multiplier,
            "atoms": [atom.to_dict() for atom in self.atoms],
            "breakdown": [row.to_dict() for row in self.breakdown],
            "molar_mass": self.molar_mass,
            "group_molar_mass": self.group_molar_mass,
            "atoms_per_molecule": self.atoms_per_molecule,
            "branch": self.branch.value,
            "amount": self.amount,
            "unit": self.unit,
            "normalized_amount": self.normalized_amount,
            "conversions": self.conversions.to_dict(),
            "molar_mass_derivation": list(self.molar_mass_derivation),
            "derivations": [d.to_dict() for d in self.derivations],
            "warnings": list(self.warnings),
        }
