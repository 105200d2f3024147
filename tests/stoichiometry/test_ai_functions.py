"""
Tests for the stoichiometry AI functions.

Each function is awaited directly and its response envelope checked.
"""

import pytest

from backend.handlers.base import ErrorType, Confidence
from backend.handlers.stoichiometry import StoichiometryHandler
from backend.handlers.stoichiometry.element_table import get_element_table
from backend.handlers.stoichiometry.utils import NA_MOLES_WARNING
from tests.base.assertions import (
    assert_success_response,
    assert_error_response,
    assert_result_structure,
    assert_no_conversion,
)
from tests.stoichiometry.fixtures import *


class TestCalculateStoichiometry:
    """Tests for calculate_stoichiometry."""

    @pytest.mark.asyncio
    async def test_moles_of_water(self, handler):
        """2 mol of water weighs 36.03 g and occupies 44.8 L as a gas."""
        response = await handler.calculate_stoichiometry("H2O", 2, "mol")

        assert_success_response(response)
        data = response["data"]
        assert_result_structure(data)
        assert data["formula"] == "H2O"
        assert data["branch"] == "molar"
        assert data["conversions"]["mass_g"] == pytest.approx(36.03)
        assert data["conversions"]["volume_l"] == pytest.approx(44.8)
        assert response["confidence"] == Confidence.HIGH
        assert response["metadata"]["function"] == "calculate_stoichiometry"
        assert response["metadata"]["duration_ms"] >= 0

    @pytest.mark.asyncio
    async def test_grams_with_multiplier(self, handler):
        """The molecule count changes the group mass, not the conversion."""
        response = await handler.calculate_stoichiometry("3H2O", 18.015, "g")

        data = response["data"]
        assert data["multiplier"] == 3
        assert data["group_molar_mass"] == pytest.approx(54.045)
        assert data["conversions"]["moles"] == pytest.approx(1.0)
        assert data["atoms_per_molecule"] == 4

    @pytest.mark.asyncio
    async def test_avogadro_input_is_flagged(self, handler):
        response = await handler.calculate_stoichiometry("H2O", 1, "NA")

        assert_success_response(response)
        assert response["data"]["conversions"]["moles"] == pytest.approx(3.0)
        assert NA_MOLES_WARNING in response["warnings"]
        assert response["confidence"] == Confidence.LOW

    @pytest.mark.asyncio
    async def test_unknown_unit_is_not_an_error(self, handler):
        response = await handler.calculate_stoichiometry("H2O", 5, "lb")

        assert_success_response(response)
        assert_no_conversion(response["data"])
        assert any("No conversion" in note for note in response["notes"])

    @pytest.mark.asyncio
    async def test_korean_locale(self, handler):
        response = await handler.calculate_stoichiometry("H2O", 36.03, "그램", locale="ko")

        derivations = response["data"]["derivations"]
        assert derivations[0]["label"].startswith("몰 수 계산")
        assert derivations[-1]["expression"].endswith("개")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("formula", ["", "H2O)", "h2o", "0H2O"])
    async def test_invalid_formula(self, handler, formula):
        response = await handler.calculate_stoichiometry(formula, 1, "mol")

        assert_error_response(response, expected_error_type=ErrorType.INVALID_INPUT)
        assert response["suggestions"]

    @pytest.mark.asyncio
    async def test_unexpected_failure(self, handler, monkeypatch):
        def boom(*args, **kwargs):
            raise RuntimeError("table unavailable")

        monkeypatch.setattr(handler, "calculate", boom)
        response = await handler.calculate_stoichiometry("H2O", 1, "mol")

        assert_error_response(response, expected_error_type=ErrorType.COMPUTATION_ERROR)
        assert "table unavailable" in response["error"]


class TestGetMolarMass:
    """Tests for get_molar_mass."""

    @pytest.mark.asyncio
    async def test_water(self, handler):
        response = await handler.get_molar_mass("H2O")

        assert_success_response(response)
        data = response["data"]
        assert data["molar_mass"] == pytest.approx(18.015)
        assert data["derivation"] == ["2×1.008 + 1×15.999", "= 18.015"]
        assert [row["symbol"] for row in data["breakdown"]] == ["H", "O"]

    @pytest.mark.asyncio
    async def test_molecule_count(self, handler):
        response = await handler.get_molar_mass("3H2O")

        data = response["data"]
        assert data["multiplier"] == 3
        assert data["group_molar_mass"] == pytest.approx(54.045)
        assert data["breakdown"][0]["total_count"] == 6

    @pytest.mark.asyncio
    async def test_unknown_element_lowers_confidence(self, handler):
        response = await handler.get_molar_mass("XxO")

        assert_success_response(response)
        assert response["confidence"] == Confidence.LOW
        assert any("Xx" in w for w in response["warnings"])

    @pytest.mark.asyncio
    async def test_invalid_formula(self, handler):
        response = await handler.get_molar_mass("((")

        assert_error_response(response, expected_error_type=ErrorType.INVALID_INPUT)

    @pytest.mark.asyncio
    async def test_table_load_failure(self, tmp_path, monkeypatch, caplog):
        """A configured table that cannot be read yields a computation_error envelope."""
        monkeypatch.setenv("STOICHIOMETRY_ELEMENT_TABLE", str(tmp_path / "missing.json"))
        get_element_table.cache_clear()
        try:
            h = StoichiometryHandler(locale="en")
            with caplog.at_level("ERROR"):
                response = await h.get_molar_mass("H2O")
        finally:
            get_element_table.cache_clear()

        assert_error_response(response, expected_error_type=ErrorType.COMPUTATION_ERROR)
        assert "missing.json" in response["error"]
        assert "Error in get_molar_mass" in caplog.text
        assert h.recent_tool_outputs[-1]["result"] is response


class TestListSupportedUnits:
    """Tests for list_supported_units."""

    @pytest.mark.asyncio
    async def test_groups(self, handler):
        response = await handler.list_supported_units()

        assert_success_response(response)
        units = response["data"]["units"]
        assert set(units) == {"mass_kg", "mass_g", "molar", "volume_l", "volume_ml", "particle_multiplier"}
        assert units["molar"]["symbol"] == "mol"
        assert "몰" in units["molar"]["aliases"]


class TestToolOutputTracking:
    """Tests that AI function results are recorded on the handler."""

    @pytest.mark.asyncio
    async def test_results_are_tracked(self, handler):
        await handler.get_molar_mass("H2O")
        await handler.calculate_stoichiometry("H2O", 1, "mol")

        names = [entry["tool_name"] for entry in handler.recent_tool_outputs]
        assert names == ["get_molar_mass", "calculate_stoichiometry"]
        assert handler.recent_tool_outputs[-1]["result"]["success"] is True

    @pytest.mark.asyncio
    async def test_errors_are_tracked(self, handler):
        await handler.calculate_stoichiometry("H2O)", 1, "mol")

        assert handler.recent_tool_outputs[0]["result"]["success"] is False
