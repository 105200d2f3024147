"""
Tests for element table loading and lookups.
"""

import json
import pytest

from backend.handlers.stoichiometry import element_table as element_table_module
from backend.handlers.stoichiometry.element_table import (
    ElementRecord,
    atomic_mass_of,
    get_element,
    get_element_table,
    load_element_table,
    load_element_table_json,
)


@pytest.fixture
def atom_json(tmp_path):
    """Fixture writing a small atom.json-style table to disk."""
    path = tmp_path / "atom.json"
    path.write_text(json.dumps({
        "H": {"symbol": "H", "kor": "수소", "atomic_mass": 1.008},
        "O": {"symbol": "O", "kor": "산소", "atomic_mass": "15.999"},
        "Bad": {"symbol": "Bad", "kor": "나쁨", "atomic_mass": "n/a"},
        "Zero": {"symbol": "Zero", "atomic_mass": 0},
    }, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def clear_table_cache():
    """Fixture resetting the process-wide table cache around a test."""
    get_element_table.cache_clear()
    yield
    get_element_table.cache_clear()


class TestLookups:
    """Tests for get_element and atomic_mass_of."""

    def test_record_lookup(self, element_table):
        record = get_element(element_table, "O")

        assert record.atomic_mass == 15.999
        assert record.localized_name == "산소"

    def test_missing_symbol(self, element_table):
        assert get_element(element_table, "Xx") is None
        assert atomic_mass_of(element_table, "Xx") == 0.0

    def test_no_table(self):
        assert atomic_mass_of(None, "H") == 0.0

    def test_raw_mapping_entry(self):
        table = {"Na": {"symbol": "Na", "kor": "나트륨", "atomic_mass": 22.99}}
        record = get_element(table, "Na")

        assert record == ElementRecord(symbol="Na", atomic_mass=22.99, localized_name="나트륨")

    def test_raw_entry_without_mass_is_absent(self):
        table = {"Na": {"symbol": "Na", "kor": "나트륨"}}

        assert get_element(table, "Na") is None
        assert atomic_mass_of(table, "Na") == 0.0

    def test_lookup_is_case_sensitive(self, element_table):
        assert get_element(element_table, "o") is None


class TestJsonLoader:
    """Tests for load_element_table_json."""

    def test_loads_valid_entries(self, atom_json):
        table = load_element_table_json(atom_json)

        assert set(table) == {"H", "O"}
        assert table["O"].atomic_mass == 15.999
        assert table["H"].localized_name == "수소"

    def test_skips_unusable_entries(self, atom_json, caplog):
        with caplog.at_level("WARNING"):
            load_element_table_json(atom_json)

        assert "Bad" in caplog.text
        assert "Zero" in caplog.text

    def test_rejects_non_object(self, tmp_path):
        path = tmp_path / "atoms.json"
        path.write_text("[1, 2, 3]", encoding="utf-8")

        with pytest.raises(ValueError):
            load_element_table_json(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            load_element_table_json(tmp_path / "missing.json")


class TestConfiguredTable:
    """Tests for get_element_table configuration."""

    def test_uses_json_when_configured(self, atom_json, monkeypatch, clear_table_cache):
        monkeypatch.setenv("STOICHIOMETRY_ELEMENT_TABLE", str(atom_json))

        table = get_element_table()

        assert set(table) == {"H", "O"}
        assert get_element_table() is table

    def test_falls_back_to_mendeleev(self, monkeypatch, clear_table_cache):
        monkeypatch.delenv("STOICHIOMETRY_ELEMENT_TABLE", raising=False)
        sentinel = {"H": ElementRecord(symbol="H", atomic_mass=1.008)}
        monkeypatch.setattr(element_table_module, "load_element_table", lambda: sentinel)

        assert get_element_table() is sentinel


class TestMendeleevLoader:
    """Tests for the mendeleev-backed table."""

    @pytest.fixture(scope="class")
    def mendeleev_table(self):
        pytest.importorskip("mendeleev")
        return load_element_table()

    def test_common_elements(self, mendeleev_table):
        assert mendeleev_table["H"].atomic_mass == pytest.approx(1.008, abs=1e-3)
        assert mendeleev_table["O"].atomic_mass == pytest.approx(15.999, abs=1e-3)
        assert mendeleev_table["Na"].atomic_mass == pytest.approx(22.99, abs=1e-2)

    def test_names(self, mendeleev_table):
        assert mendeleev_table["O"].name == "Oxygen"
        assert mendeleev_table["O"].localized_name == "산소"
        assert mendeleev_table["Na"].localized_name == "나트륨"

    def test_water_molar_mass(self, mendeleev_table):
        total = 2 * mendeleev_table["H"].atomic_mass + mendeleev_table["O"].atomic_mass

        assert total == pytest.approx(18.015, abs=1e-2)
