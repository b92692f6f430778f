"""
Derive a render-ready view model from a raw analysis payload.

Pure functions only: no I/O, no shared state, and no
exceptions for missing or oddly typed fields. Every derivation ends in an empty
list or a default value so a partial payload still renders a usable report.
"""

from collections.abc import Mapping
from typing import Any, List, Optional

from jd_match_ai.config import (
    DEFAULT_CRITICALITY,
    MAX_DERIVED_STAGES,
    MAX_KEY_SKILLS,
    MODERATE_MATCH_THRESHOLD,
    NOT_AVAILABLE,
    STRONG_MATCH_THRESHOLD,
    UNKNOWN_CATEGORY,
    VALUE_PLACEHOLDERS,
)
from jd_match_ai.schemas.view_model import (
    FieldMatch,
    FieldValueView,
    KeySkill,
    MatchStrength,
    NormalizedViewModel,
    SectionView,
    StageSummary,
    StatusMarker,
)
from jd_match_ai.services.payload_shapes import (
    SectionList,
    SkillList,
    SkillMapping,
    StageList,
    detect_skills_shape,
    detect_stages_shape,
)
from jd_match_ai.utils.helpers import humanize_name, round_half_up, to_number

# Ordered: first matching group wins. Matched case-insensitively.
# Provisional: keyed on free-form wording until the service sends a fixed status enum.
STATUS_RULES = [
    (("full match", "exact match"), StatusMarker.SUCCESS),
    (("partial match",), StatusMarker.CAUTION),
    (("no match", "different"), StatusMarker.FAILURE),
]


def _mapping(value: Any) -> Mapping:
    return value if isinstance(value, Mapping) else {}


def _text(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    return str(value)


def classify_match(percentage: Any) -> MatchStrength:
    """Bucket a percentage: >=70 strong, >=50 moderate, else (or non-numeric) weak."""
    value = to_number(percentage)
    if value is None:
        return MatchStrength.WEAK
    if value >= STRONG_MATCH_THRESHOLD:
        return MatchStrength.STRONG
    if value >= MODERATE_MATCH_THRESHOLD:
        return MatchStrength.MODERATE
    return MatchStrength.WEAK


def classify_status(status: Any) -> StatusMarker:
    """Map free-form match status text to a marker; unknown or missing text is CAUTION."""
    if not isinstance(status, str) or not status.strip():
        return StatusMarker.CAUTION
    lowered = status.lower()
    for needles, marker in STATUS_RULES:
        if any(needle in lowered for needle in needles):
            return marker
    return StatusMarker.CAUTION


def _skill_from_entry(entry: Any) -> KeySkill:
    if isinstance(entry, Mapping):
        name = _text(entry.get("name")) or _text(entry.get("skill")) or str(dict(entry))
        years = entry.get("years")
        return KeySkill(name=name, years=_years(years) if years else None)
    return KeySkill(name=str(entry))


def _years(value: Any):
    if isinstance(value, (int, float, str)) and not isinstance(value, bool):
        return value
    return str(value)


def extract_key_skills(payload: Any) -> List[KeySkill]:
    """
    Top skills from key_skills/skills. Lists keep their first MAX_KEY_SKILLS entries
    in order; mappings become (name, years) pairs with falsy years shown as N/A.
    """
    shape = detect_skills_shape(payload)
    if isinstance(shape, SkillList):
        return [_skill_from_entry(entry) for entry in shape.entries[:MAX_KEY_SKILLS]]
    if isinstance(shape, SkillMapping):
        return [
            KeySkill(name=str(name), years=_years(years) if years else NOT_AVAILABLE)
            for name, years in list(shape.entries.items())[:MAX_KEY_SKILLS]
        ]
    return []


def _stage_from_entry(entry: Any) -> StageSummary:
    data = _mapping(entry)
    projects = data.get("projects")
    return StageSummary(
        category=_text(data.get("category")) or UNKNOWN_CATEGORY,
        match=_text(data.get("match")),
        projects=_years(projects) if projects else None,
        criticality=_text(data.get("criticality")),
    )


def _stage_from_section(section: Any) -> StageSummary:
    data = _mapping(section)
    projects = data.get("project_count")
    return StageSummary(
        category=humanize_name(data.get("section_name"), UNKNOWN_CATEGORY),
        match=classify_match(data.get("match_percentage")).stage_label,
        projects=_years(projects) if projects else NOT_AVAILABLE,
        criticality=_text(data.get("criticality")) or DEFAULT_CRITICALITY,
    )


def derive_stage_analysis(payload: Any) -> List[StageSummary]:
    """Use the service's stage_analysis when given, else summarize the first 4 sections."""
    shape = detect_stages_shape(payload)
    if isinstance(shape, StageList):
        return [_stage_from_entry(entry) for entry in shape.entries]
    if isinstance(shape, SectionList):
        return [_stage_from_section(section) for section in shape.entries[:MAX_DERIVED_STAGES]]
    return []


def describe_value(value: Any, side: str) -> FieldValueView:
    """
    Render a JD or resume value. Lists become items (empty list -> "specified/found"
    placeholder); a single value becomes text (missing -> short placeholder).
    """
    placeholders = VALUE_PLACEHOLDERS[side]
    if isinstance(value, list):
        items = [str(item) for item in value if item is not None]
        if not items:
            return FieldValueView(placeholder=placeholders["empty"])
        return FieldValueView(items=items)
    text = _text(value)
    if text is None:
        return FieldValueView(placeholder=placeholders["missing"])
    return FieldValueView(text=text)


def _field_match(result: Any) -> FieldMatch:
    data = _mapping(result)
    status = data.get("match_status")
    return FieldMatch(
        field=humanize_name(data.get("field"), "Unknown Field"),
        status=_text(status) or "",
        marker=classify_status(status),
        jd_value=describe_value(data.get("jd_value"), "jd"),
        resume_value=describe_value(data.get("resume_value"), "resume"),
        comments=_text(data.get("comments")),
    )


def _score_text(section: Mapping) -> Optional[str]:
    score, total = section.get("section_score"), section.get("total_possible")
    if score is None or total is None:
        return None
    return f"({score}/{total})"


def build_section_view(section: Any) -> SectionView:
    data = _mapping(section)
    raw_results = data.get("match_results")
    raw_results = raw_results if isinstance(raw_results, list) else []
    percentage = to_number(data.get("match_percentage"))
    return SectionView(
        name=humanize_name(data.get("section_name"), "Unknown Section"),
        match_percentage=percentage,
        display_percentage=round_half_up(percentage) if percentage is not None else None,
        strength=classify_match(percentage),
        score_text=_score_text(data),
        fields=[_field_match(result) for result in raw_results],
        raw_match_results=raw_results,
    )


def normalize_payload(payload: Any) -> NormalizedViewModel:
    """Build the full view model. Never raises, whatever the payload looks like."""
    data = _mapping(payload)
    overall = to_number(data.get("overall_percentage"))
    overall = overall if overall is not None else 0.0
    strength = classify_match(overall)
    sections = data.get("sections")
    sections = sections if isinstance(sections, list) else []
    return NormalizedViewModel(
        overall_percentage=overall,
        display_percentage=round_half_up(overall),
        strength=strength,
        match_label=strength.label,
        job_title=_text(data.get("job_title")),
        key_skills=extract_key_skills(data),
        stage_analysis=derive_stage_analysis(data),
        sections=[build_section_view(section) for section in sections],
    )
