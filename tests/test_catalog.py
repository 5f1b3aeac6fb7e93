"""
Catalog graph construction and the JSON catalog loader.
"""
import json

import pytest

import config
from catalog import CatalogError, build_catalog, load_catalog, satellite_id


class TestBuildCatalog:
    def test_default_catalog(self):
        G = build_catalog()
        areas = [n for n, d in G.nodes(data=True) if d['kind'] == "area"]
        sats = [n for n, d in G.nodes(data=True) if d['kind'] == "satellite"]
        assert areas == ["work", "health", "intimacy", "finance", "spiritual", "creativity"]
        assert len(sats) == 12
        assert G.has_edge("work", satellite_id("work", 2))
        assert G.nodes["work:2"]['label'] == "Project Partners"
        assert G.nodes["work:2"]['parent'] == "work"

    def test_default_footprint_from_display_size(self):
        G = build_catalog()
        assert G.nodes["finance"]['footprint_radius'] == config.ORB_SIZE / 2

    def test_explicit_footprint(self):
        G = build_catalog([{"id": "x", "orbit_radius": 100, "footprint_radius": 75}])
        assert G.nodes["x"]['footprint_radius'] == 75

    def test_web_field_names(self):
        G = build_catalog([{
            "id": "health", "name": "Health", "orbitRadius": 210, "angleOffset": 1.2,
            "connections": ["Dr. Martinez"], "score": 3.8,
        }])
        d = G.nodes["health"]
        assert d['label'] == "Health"
        assert d['orbit_radius'] == 210
        assert d['angle_offset'] == 1.2
        assert G.nodes["health:0"]['label'] == "Dr. Martinez"

    def test_satellite_dicts(self):
        G = build_catalog([{"id": "x", "orbit_radius": 100, "satellites": [{"label": "Mentor"}]}])
        assert G.nodes["x:0"]['label'] == "Mentor"

    def test_energy_and_score_clamped(self):
        G = build_catalog([{"id": "x", "orbit_radius": 100, "energy": 3, "score": -2}])
        assert G.nodes["x"]['energy'] == 1.0
        assert G.nodes["x"]['score'] == 0.0

    def test_negative_radius_clamped(self):
        G = build_catalog([{"id": "x", "orbit_radius": -40}])
        assert G.nodes["x"]['orbit_radius'] == 0.0

    def test_reflection_fallback(self):
        G = build_catalog([{"id": "unknown-area", "orbit_radius": 100}])
        assert G.nodes["unknown-area"]['reflection'] == config.DEFAULT_REFLECTION

    def test_duplicate_id(self):
        with pytest.raises(CatalogError, match="Duplicate"):
            build_catalog([{"id": "x", "orbit_radius": 1}, {"id": "x", "orbit_radius": 2}])

    def test_missing_id(self):
        with pytest.raises(CatalogError):
            build_catalog([{"orbit_radius": 1}])

    def test_missing_radius(self):
        with pytest.raises(CatalogError, match="orbit_radius"):
            build_catalog([{"id": "x"}])

    def test_non_numeric_offset(self):
        with pytest.raises(CatalogError, match="angle_offset"):
            build_catalog([{"id": "x", "orbit_radius": 10, "angle_offset": "north"}])

    def test_non_dict_entry(self):
        with pytest.raises(CatalogError):
            build_catalog(["work"])

    def test_catalog_error_is_value_error(self):
        assert issubclass(CatalogError, ValueError)


class TestLoadCatalog:
    def test_load(self, tmp_path):
        fp = tmp_path / "areas.json"
        fp.write_text(json.dumps({"LifeAreas": config.DEFAULT_LIFE_AREAS[:2]}), encoding="utf-8")
        areas = load_catalog(fp)
        assert [a["id"] for a in areas] == ["work", "health"]

    def test_load_with_bom(self, tmp_path):
        fp = tmp_path / "areas.json"
        fp.write_text(json.dumps({"LifeAreas": [{"id": "x", "orbit_radius": 5}]}), encoding="utf-8-sig")
        assert load_catalog(fp)[0]["id"] == "x"

    def test_missing_key(self, tmp_path):
        fp = tmp_path / "areas.json"
        fp.write_text(json.dumps({"GraphData": {}}), encoding="utf-8")
        with pytest.raises(CatalogError, match="LifeAreas"):
            load_catalog(fp)

    def test_bad_json(self, tmp_path):
        fp = tmp_path / "areas.json"
        fp.write_text("{not json", encoding="utf-8")
        with pytest.raises(CatalogError):
            load_catalog(fp)

    def test_missing_file(self, tmp_path):
        with pytest.raises(CatalogError):
            load_catalog(tmp_path / "nope.json")

    def test_invalid_entries_rejected_on_load(self, tmp_path):
        fp = tmp_path / "areas.json"
        fp.write_text(json.dumps({"LifeAreas": [{"id": "x"}]}), encoding="utf-8")
        with pytest.raises(CatalogError):
            load_catalog(fp)
