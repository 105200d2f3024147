"""
Parsed chemical formulas.

Two entry points produce a ParsedFormula:

- parse_formula(text) parses a formula string such as "3H2O", "Ca(OH)2" or
  "CuSO4·5H2O". A leading integer becomes the molecule-count multiplier.
- extract_molecule_multiplier(atoms) accepts the atom list emitted by the
  front-end parser, where the first entry may be a numeric "symbol" carrying
  the multiplier (e.g. [{"symbol": "3", "count": 1}, {"symbol": "H", ...}]).

ParsedFormula keeps the multiplier explicit so downstream code never has to
inspect the first atom to find out whether it is really an atom.
"""

import logging
import math
import re
from dataclasses import dataclass, field
from numbers import Real
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

_log = logging.getLogger(__name__)


class FormulaParseError(ValueError):
    """Raised when a formula string cannot be parsed."""
    pass


def _entry_symbol(raw: Any) -> Optional[str]:
    """Symbol of an upstream atom entry, or None if raw has no recognisable shape."""
    if isinstance(raw, ParsedAtom):
        symbol = raw.symbol
    elif isinstance(raw, Mapping):
        symbol = raw.get("symbol")
    elif isinstance(raw, (list, tuple)) and len(raw) == 2:
        symbol = raw[0]
    else:
        return None
    return str(symbol) if symbol is not None else ""


def _whole_count(value: Any) -> Optional[int]:
    """value as a non-negative int if it is a whole number (or a numeric string of one)."""
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return None
    if not isinstance(value, Real):
        return None
    if not math.isfinite(value) or value < 0 or not float(value).is_integer():
        return None
    return int(value)


@dataclass(frozen=True)
class ParsedAtom:
    """One element of a formula and how many times it occurs."""
    symbol: str
    count: int

    @classmethod
    def coerce(cls, raw: Any) -> "ParsedAtom":
        """
        Build from a ParsedAtom, a {"symbol", "count"} mapping or a (symbol, count) pair.

        Raises:
            ValueError: If raw is not an atom entry, or its count is not a
                non-negative whole number (2, 2.0 and "2" are accepted)
        """
        symbol = _entry_symbol(raw)
        if symbol is None:
            raise ValueError(f"Not an atom entry: {raw!r}")
        if isinstance(raw, ParsedAtom):
            count = raw.count
        elif isinstance(raw, Mapping):
            count = raw.get("count", 1)
        else:
            count = raw[1]
        value = _whole_count(count)
        if value is None:
            raise ValueError(f"Invalid count {count!r} for {symbol!r}")
        return cls(symbol=symbol, count=value)

    def to_dict(self) -> Dict[str, Any]:
        return {"symbol": self.symbol, "count": self.count}


@dataclass(frozen=True)
class ParsedFormula:
    """
    A formula with its molecule-count multiplier split out.

    Attributes:
        multiplier: Leading molecule count (1 when absent)
        atoms: Real atoms of one molecule, in order of appearance
        placeholder_count: Count carried by the multiplier entry of the
            upstream atom list, or None when there was no such entry. It is
            kept because the atoms-per-molecule total is taken over the full
            upstream list, multiplier entry included.
        issues: Problems found in the upstream entries (unusable counts
            read as 0, unrecognised entries dropped)
    """
    multiplier: int = 1
    atoms: Tuple[ParsedAtom, ...] = field(default_factory=tuple)
    placeholder_count: Optional[int] = None
    issues: Tuple[str, ...] = ()

    @property
    def has_multiplier_entry(self) -> bool:
        return self.placeholder_count is not None

    def to_atom_list(self) -> List[Dict[str, Any]]:
        """Render in the upstream list convention (multiplier as a numeric first entry)."""
        entries = [atom.to_dict() for atom in self.atoms]
        if self.placeholder_count is not None:
            entries.insert(0, {"symbol": str(self.multiplier), "count": self.placeholder_count})
        return entries

    def __str__(self) -> str:
        body = "".join(
            atom.symbol if atom.count == 1 else f"{atom.symbol}{atom.count}"
            for atom in self.atoms
        )
        if self.multiplier > 1:
            return f"{self.multiplier}{body}"
        return body


# ============================================================================
# Multiplier extraction from upstream atom lists
# ============================================================================

def _leading_number(symbol: Any) -> Optional[float]:
    """Return the numeric value of a symbol field, or None if it is not a number."""
    if not isinstance(symbol, str):
        return None
    text = symbol.strip()
    if not text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def extract_molecule_multiplier(atoms: Iterable[Any]) -> ParsedFormula:
    """
    Split a leading numeric entry off an upstream atom list.

    If the first entry's symbol parses as a number it is removed from the
    formula and its value becomes the multiplier. Values that are not a
    positive integer still remove the entry but leave the multiplier at 1.
    Anything that does not parse is treated as a real atom.

    Never raises on malformed entries: a count that is not a non-negative
    whole number is read as 0, and an entry with no symbol/count shape is
    dropped. Each such problem is logged and listed in ParsedFormula.issues.

    Args:
        atoms: Sequence of {"symbol", "count"} mappings or ParsedAtom objects

    Returns:
        ParsedFormula with multiplier, remaining atoms and placeholder_count

    Example:
        >>> extract_molecule_multiplier([{"symbol": "3", "count": 1},
        ...                              {"symbol": "H", "count": 2},
        ...                              {"symbol": "O", "count": 1}]).multiplier
        3
    """
    entries: List[ParsedAtom] = []
    issues: List[str] = []
    for raw in atoms or []:
        try:
            entries.append(ParsedAtom.coerce(raw))
        except ValueError as e:
            symbol = _entry_symbol(raw)
            if symbol is None:
                issues.append(f"{e}; entry ignored")
            else:
                entries.append(ParsedAtom(symbol=symbol, count=0))
                issues.append(f"{e}; counted as 0")
            _log.warning(issues[-1])

    if not entries:
        return ParsedFormula(issues=tuple(issues))

    value = _leading_number(entries[0].symbol)
    if value is None:
        return ParsedFormula(multiplier=1, atoms=tuple(entries), issues=tuple(issues))

    if value.is_integer() and value >= 1:
        multiplier = int(value)
    else:
        _log.warning(f"Ignoring non-integer molecule count {entries[0].symbol!r}; using 1")
        multiplier = 1

    return ParsedFormula(
        multiplier=multiplier,
        atoms=tuple(entries[1:]),
        placeholder_count=entries[0].count,
        issues=tuple(issues),
    )


# ============================================================================
# Formula string parsing
# ============================================================================

_TOKEN_PATTERN = re.compile(
    r"\s*(?:(?P<element>[A-Z][a-z]?)|(?P<number>\d+)|(?P<open>[(\[{])|(?P<close>[)\]}])|(?P<sep>[·•.*]))"
)
_CLOSERS = {"(": ")", "[": "]", "{": "}"}

Token = Tuple[str, str, int]


def _tokenize(text: str) -> List[Token]:
    tokens: List[Token] = []
    pos = 0
    stripped_end = len(text.rstrip())
    while pos < stripped_end:
        match = _TOKEN_PATTERN.match(text, pos)
        if match is None or match.end() == pos:
            bad = text[pos:].lstrip()[:1]
            raise FormulaParseError(f"Unexpected character {bad!r} at position {pos}")
        kind = match.lastgroup
        tokens.append((kind, match.group(kind), match.start(kind)))
        pos = match.end()
    return tokens


def _read_count(tokens: List[Token], i: int) -> Tuple[int, int]:
    if i < len(tokens) and tokens[i][0] == "number":
        return int(tokens[i][1]), i + 1
    return 1, i


def _merge(counts: Dict[str, int], symbol: str, n: int) -> None:
    counts[symbol] = counts.get(symbol, 0) + n


def _parse_sequence(tokens: List[Token], i: int, closer: Optional[str]) -> Tuple[Dict[str, int], int]:
    counts: Dict[str, int] = {}
    while i < len(tokens):
        kind, value, pos = tokens[i]
        if kind == "element":
            n, i = _read_count(tokens, i + 1)
            _merge(counts, value, n)
        elif kind == "open":
            inner, i = _parse_sequence(tokens, i + 1, _CLOSERS[value])
            n, i = _read_count(tokens, i)
            for symbol, c in inner.items():
                _merge(counts, symbol, c * n)
        elif kind == "close":
            if value != closer:
                raise FormulaParseError(f"Unbalanced {value!r} at position {pos}")
            if not counts:
                raise FormulaParseError(f"Empty group closed at position {pos}")
            return counts, i + 1
        else:
            raise FormulaParseError(f"Unexpected {value!r} at position {pos}")
    if closer is not None:
        raise FormulaParseError(f"Missing {closer!r}")
    return counts, i


def _split_parts(tokens: List[Token]) -> List[List[Token]]:
    parts: List[List[Token]] = [[]]
    for token in tokens:
        if token[0] == "sep":
            parts.append([])
        else:
            parts[-1].append(token)
    return parts


def parse_formula(text: str) -> ParsedFormula:
    """
    Parse a chemical formula string.

    Supports element symbols with counts, nested groups with (), [] or {},
    a leading molecule count ("3H2O", "2(NH4)2SO4") and hydrate separators
    with their own coefficients ("CuSO4·5H2O", "CuSO4.5H2O").

    Element symbols are not checked against the periodic table; unknown
    symbols simply carry no atomic mass later on.

    Args:
        text: Formula string

    Returns:
        ParsedFormula; when a leading count is present its placeholder_count
        is 1, matching the upstream list convention

    Raises:
        FormulaParseError: On empty input, stray characters, unbalanced
            brackets, misplaced numbers or a zero molecule count
    """
    if text is None or not str(text).strip():
        raise FormulaParseError("Formula is empty")

    tokens = _tokenize(str(text))
    parts = _split_parts(tokens)

    multiplier = 1
    placeholder_count: Optional[int] = None
    counts: Dict[str, int] = {}

    for index, part in enumerate(parts):
        if not part:
            raise FormulaParseError("Empty formula component")
        coefficient, start = _read_count(part, 0)
        if coefficient < 1:
            raise FormulaParseError("Coefficient must be a positive integer")
        part_counts, end = _parse_sequence(part, start, None)
        if end != len(part):
            raise FormulaParseError(f"Unexpected {part[end][1]!r} at position {part[end][2]}")
        if not part_counts:
            raise FormulaParseError("Formula component has no elements")

        if index == 0:
            if start:
                multiplier, placeholder_count = coefficient, 1
            scale = 1
        else:
            scale = coefficient
        for symbol, n in part_counts.items():
            _merge(counts, symbol, n * scale)

    atoms = tuple(ParsedAtom(symbol=s, count=n) for s, n in counts.items())
    _log.debug(f"Parsed {text!r} -> multiplier={multiplier}, atoms={atoms}")
    return ParsedFormula(multiplier=multiplier, atoms=atoms, placeholder_count=placeholder_count)
