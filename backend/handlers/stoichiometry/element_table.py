"""
Element reference data for molar-mass calculations.

The table maps an element symbol to its ElementRecord (symbol, atomic mass,
English name, Korean name). It is read-only and built once per process:

- from an atom.json-style file when STOICHIOMETRY_ELEMENT_TABLE is set
  ({"H": {"symbol": "H", "kor": "수소", "atomic_mass": 1.008}, ...}),
- otherwise from the mendeleev periodic-table database.

Lookups never raise: a symbol missing from the table has atomic mass 0.
"""

import json
import logging
import math
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from ..constants.elements import KOREAN_ELEMENT_NAMES, ELEMENT_SYMBOLS
from .config import get_element_table_path

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ElementRecord:
    """Reference data for one element."""
    symbol: str
    atomic_mass: float                       # g/mol
    name: Optional[str] = None               # English name
    localized_name: Optional[str] = None     # Korean name

    def to_dict(self) -> Dict[str, Any]:
        return {
            "symbol": self.symbol,
            "name": self.name,
            "localized_name": self.localized_name,
            "atomic_mass": self.atomic_mass,
        }


ElementTable = Mapping[str, ElementRecord]


def _record_from_mapping(key: str, raw: Mapping[str, Any]) -> Optional[ElementRecord]:
    """Build a record from an atom.json entry; None if it has no usable mass."""
    try:
        mass = float(raw.get("atomic_mass"))
    except (TypeError, ValueError):
        return None
    if not math.isfinite(mass) or mass <= 0:
        return None
    symbol = str(raw.get("symbol") or key)
    return ElementRecord(
        symbol=symbol,
        atomic_mass=mass,
        name=raw.get("name"),
        localized_name=raw.get("kor") or raw.get("localized_name") or KOREAN_ELEMENT_NAMES.get(symbol),
    )


def get_element(table: Optional[Mapping[str, Any]], symbol: str) -> Optional[ElementRecord]:
    """
    Look up an element, accepting either ElementRecord values or raw
    atom.json-style mappings. Returns None when absent or unusable.
    """
    if table is None:
        return None
    raw = table.get(symbol)
    if raw is None:
        return None
    if isinstance(raw, ElementRecord):
        return raw
    if isinstance(raw, Mapping):
        return _record_from_mapping(symbol, raw)
    return None


def atomic_mass_of(table: Optional[Mapping[str, Any]], symbol: str) -> float:
    """Atomic mass of symbol in g/mol, or 0.0 if the table has no entry for it."""
    record = get_element(table, symbol)
    if record is None:
        return 0.0
    return record.atomic_mass


# ============================================================================
# Loaders
# ============================================================================

def load_element_table_json(path: Union[str, Path]) -> Dict[str, ElementRecord]:
    """
    Load an atom.json-style element table.

    Entries without a positive numeric atomic_mass are skipped with a warning.

    Raises:
        OSError: If the file cannot be read
        json.JSONDecodeError: If the file is not valid JSON
        ValueError: If the top-level JSON value is not an object
    """
    path = Path(path)
    with path.open(encoding="utf-8") as fh:
        raw_table = json.load(fh)
    if not isinstance(raw_table, dict):
        raise ValueError(f"Element table {path} must be a JSON object keyed by symbol")

    table: Dict[str, ElementRecord] = {}
    for key, raw in raw_table.items():
        record = _record_from_mapping(key, raw) if isinstance(raw, Mapping) else None
        if record is None:
            _log.warning(f"Skipping element table entry {key!r} in {path}: no usable atomic_mass")
            continue
        table[key] = record
    _log.info(f"Loaded {len(table)} elements from {path}")
    return table


def load_element_table() -> Dict[str, ElementRecord]:
    """
    Build the element table from mendeleev (standard atomic weights).

    Korean names are joined from KOREAN_ELEMENT_NAMES.
    """
    from mendeleev import element

    table: Dict[str, ElementRecord] = {}
    for elem in element(list(ELEMENT_SYMBOLS)):
        mass = getattr(elem, "atomic_weight", None)
        if mass is None:
            _log.warning(f"mendeleev has no atomic weight for {elem.symbol}; skipping")
            continue
        table[elem.symbol] = ElementRecord(
            symbol=elem.symbol,
            atomic_mass=float(mass),
            name=elem.name,
            localized_name=KOREAN_ELEMENT_NAMES.get(elem.symbol),
        )
    _log.info(f"Loaded {len(table)} elements from mendeleev")
    return table


@lru_cache(maxsize=1)
def get_element_table() -> Dict[str, ElementRecord]:
    """The configured element table, loaded once per process."""
    path = get_element_table_path()
    if path is not None:
        return load_element_table_json(path)
    return load_element_table()
