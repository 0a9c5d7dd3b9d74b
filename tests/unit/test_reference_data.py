"""
Unit tests for reference dataset loading.

Run: pytest tests/unit/test_reference_data.py -v
"""

import json

import pytest

from pathwise.core.reference_data import (
    DEFAULT_REFERENCE,
    ReferenceDataError,
    load_reference_data,
    reference_from_dict,
)


class TestDefaultReference:
    def test_catalog_sizes(self):
        assert len(DEFAULT_REFERENCE.career_paths) == 5
        assert [s.skill for s in DEFAULT_REFERENCE.trending_skills] == [
            "TypeScript", "React", "Python", "Kubernetes", "Machine Learning",
        ]

    def test_strategy_lookup_falls_back(self):
        assert DEFAULT_REFERENCE.strategy_for("high", "visual").startswith("Tackle")
        assert DEFAULT_REFERENCE.strategy_for("unknown", "visual") == DEFAULT_REFERENCE.default_strategy

    def test_lookup_tables_are_read_only(self):
        with pytest.raises(TypeError):
            DEFAULT_REFERENCE.strategy_table["high:visual"] = "changed"
        with pytest.raises(TypeError):
            DEFAULT_REFERENCE.goal_topics["rust"] = ("Ownership",)
        assert "rust" not in DEFAULT_REFERENCE.goal_topics

    def test_loaded_tables_are_read_only(self):
        reference = reference_from_dict({"interaction_styles": {"vlog": "visual"}})
        with pytest.raises(TypeError):
            reference.interaction_styles["vlog"] = "auditory"

    def test_round_trips_through_dict(self):
        rebuilt = reference_from_dict(DEFAULT_REFERENCE.to_dict())
        assert rebuilt.to_dict() == DEFAULT_REFERENCE.to_dict()


class TestLoadReferenceData:
    def test_none_returns_default(self):
        assert load_reference_data(None) is DEFAULT_REFERENCE

    def test_partial_override(self, tmp_path):
        path = tmp_path / "reference.json"
        path.write_text(json.dumps({
            "version": "2025.2",
            "declining_skills": ["Silverlight"],
            "career_paths": [
                {
                    "id": "sre",
                    "title": "Site Reliability Engineer",
                    "required_skills": ["Linux", "Go"],
                    "market_demand": "high",
                }
            ],
        }), encoding="utf-8")

        reference = load_reference_data(path)

        assert reference.version == "2025.2"
        assert reference.declining_skills == ("Silverlight",)
        assert reference.career_paths[0].market_demand == 80
        # untouched tables keep the defaults
        assert reference.trending_skills == DEFAULT_REFERENCE.trending_skills

    def test_missing_file(self, tmp_path):
        with pytest.raises(ReferenceDataError):
            load_reference_data(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ReferenceDataError):
            load_reference_data(path)

    def test_malformed_career_path(self, tmp_path):
        path = tmp_path / "reference.json"
        path.write_text(json.dumps({"career_paths": [{"title": "No id"}]}), encoding="utf-8")
        with pytest.raises(ReferenceDataError):
            load_reference_data(path)

    def test_top_level_must_be_object(self, tmp_path):
        path = tmp_path / "reference.json"
        path.write_text("[]", encoding="utf-8")
        with pytest.raises(ReferenceDataError):
            load_reference_data(path)
