"""
Pytest configuration and global fixtures.

This module provides shared fixtures for all test modules: a small element
reference table and the common formulas used across the stoichiometry tests.
"""

import pytest
import sys
from pathlib import Path

# Add repository root to path for "backend.handlers" imports
repo_root = Path(__file__).parent.parent
sys.path.insert(0, str(repo_root))

from backend.handlers.stoichiometry.element_table import ElementRecord


@pytest.fixture
def element_table():
    """Fixture providing a fixed element table (IUPAC abridged atomic weights)."""
    rows = [
        ("H", 1.008, "Hydrogen", "수소"),
        ("C", 12.011, "Carbon", "탄소"),
        ("N", 14.007, "Nitrogen", "질소"),
        ("O", 15.999, "Oxygen", "산소"),
        ("Na", 22.99, "Sodium", "나트륨"),
        ("S", 32.06, "Sulfur", "황"),
        ("Cl", 35.45, "Chlorine", "염소"),
        ("Ca", 40.078, "Calcium", "칼슘"),
        ("Cu", 63.546, "Copper", "구리"),
    ]
    return {
        symbol: ElementRecord(symbol=symbol, atomic_mass=mass, name=name, localized_name=kor)
        for symbol, mass, name, kor in rows
    }


@pytest.fixture
def water_atoms():
    """Fixture providing H2O in the upstream atom-list format."""
    return [{"symbol": "H", "count": 2}, {"symbol": "O", "count": 1}]


@pytest.fixture
def water_with_multiplier():
    """Fixture providing 3(H2O) with the multiplier as a numeric first entry."""
    return [
        {"symbol": "3", "count": 1},
        {"symbol": "H", "count": 2},
        {"symbol": "O", "count": 1},
    ]


@pytest.fixture
def water_molar_mass():
    """Molar mass of H2O with the fixture table."""
    return 2 * 1.008 + 15.999


@pytest.fixture
def tolerance_values():
    """Fixture providing relative tolerances for float comparisons."""
    return {
        "strict": 1e-9,
        "rounded": 1e-4,
        "reference": 1e-3,
    }
