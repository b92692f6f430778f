"""Tests for the ordered shape-detection rules over drifting payload fields."""

from collections import OrderedDict

from jd_match_ai.services.payload_shapes import (
    SectionList,
    SkillList,
    SkillMapping,
    SkillsAbsent,
    StageList,
    StagesAbsent,
    detect_skills_shape,
    detect_stages_shape,
)


class TestDetectSkillsShape:

    def test_list_under_key_skills(self):
        shape = detect_skills_shape({"key_skills": ["Python", "SQL"]})
        assert shape == SkillList("key_skills", ["Python", "SQL"])

    def test_mapping_under_legacy_skills_name(self):
        shape = detect_skills_shape({"skills": {"Go": 5}})
        assert isinstance(shape, SkillMapping)
        assert shape.field == "skills"

    def test_key_skills_preferred_over_skills(self):
        shape = detect_skills_shape({"key_skills": ["A"], "skills": ["B"]})
        assert shape.entries == ["A"]

    def test_falls_through_to_skills_when_key_skills_unset(self):
        shape = detect_skills_shape({"key_skills": None, "skills": ["B"]})
        assert shape == SkillList("skills", ["B"])

    def test_empty_list_still_decides_shape(self):
        shape = detect_skills_shape({"key_skills": [], "skills": ["B"]})
        assert shape == SkillList("key_skills", [])

    def test_ordered_mapping_is_a_mapping(self):
        shape = detect_skills_shape({"skills": OrderedDict([("Go", 1)])})
        assert isinstance(shape, SkillMapping)

    def test_unsupported_type_is_absent(self):
        shape = detect_skills_shape({"key_skills": "Python, SQL"})
        assert isinstance(shape, SkillsAbsent)
        assert "str" in shape.reason

    def test_missing_is_absent(self):
        assert detect_skills_shape({}) == SkillsAbsent()

    def test_non_mapping_payload_is_absent(self):
        assert detect_skills_shape(None) == SkillsAbsent()
        assert detect_skills_shape(["not", "a", "payload"]) == SkillsAbsent()


class TestDetectStagesShape:

    def test_explicit_stage_analysis_wins(self):
        shape = detect_stages_shape({"stage_analysis": [{"category": "x"}], "sections": [{}]})
        assert isinstance(shape, StageList)

    def test_empty_stage_analysis_falls_back_to_sections(self):
        shape = detect_stages_shape({"stage_analysis": [], "sections": [{"section_name": "a"}]})
        assert isinstance(shape, SectionList)
        assert shape.entries == [{"section_name": "a"}]

    def test_non_list_stage_analysis_falls_back(self):
        shape = detect_stages_shape({"stage_analysis": {"a": 1}, "sections": [{}]})
        assert isinstance(shape, SectionList)

    def test_nothing_usable(self):
        assert isinstance(detect_stages_shape({"sections": []}), StagesAbsent)
        assert isinstance(detect_stages_shape({"sections": "skills"}), StagesAbsent)
