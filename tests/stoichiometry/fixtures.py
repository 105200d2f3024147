"""
Fixtures specific to stoichiometry handler testing.

This module provides handler instances wired to the fixed element table so
tests never depend on the mendeleev database.
"""

import pytest

from backend.handlers.stoichiometry import StoichiometryHandler


@pytest.fixture
def handler(element_table):
    """Fixture providing a StoichiometryHandler with English labels."""
    return StoichiometryHandler(element_table=element_table, locale="en")


@pytest.fixture
def korean_handler(element_table):
    """Fixture providing a StoichiometryHandler with Korean labels."""
    return StoichiometryHandler(element_table=element_table, locale="ko")


@pytest.fixture
def empty_table_handler():
    """Fixture providing a handler whose element table knows no elements."""
    return StoichiometryHandler(element_table={}, locale="en")
