"""
Shape detection for the parts of the analysis payload whose schema drifts.

Each detector walks an ordered list of rules and returns a small tagged variant,
so the normalizer never does ad hoc isinstance checks and each fallback chain can
be tested on its own.
"""

from collections.abc import Mapping
from typing import Any, Callable, List, NamedTuple, Optional, Union

from jd_match_ai.config import SKILL_FIELD_NAMES


class SkillList(NamedTuple):
    """Skills given as an ordered list (strings or {name, years} dicts)."""

    field: str
    entries: List[Any]


class SkillMapping(NamedTuple):
    """Skills given as {skill name: years of experience}."""

    field: str
    entries: Mapping


class SkillsAbsent(NamedTuple):
    """No usable skills field."""

    reason: str = "missing"


SkillsShape = Union[SkillList, SkillMapping, SkillsAbsent]


class StageList(NamedTuple):
    """Precomputed stage analysis supplied by the service."""

    entries: List[Any]


class SectionList(NamedTuple):
    """Stage analysis has to be derived from these sections."""

    entries: List[Any]


class StagesAbsent(NamedTuple):
    reason: str = "missing"


StagesShape = Union[StageList, SectionList, StagesAbsent]

SkillRule = Callable[[str, Any], Optional[SkillsShape]]


def _as_list(field: str, value: Any) -> Optional[SkillsShape]:
    if isinstance(value, list):
        return SkillList(field, value)
    return None


def _as_mapping(field: str, value: Any) -> Optional[SkillsShape]:
    if isinstance(value, Mapping):
        return SkillMapping(field, value)
    return None


SKILL_RULES: List[SkillRule] = [_as_list, _as_mapping]


def _get(payload: Any, key: str) -> Any:
    if isinstance(payload, Mapping):
        return payload.get(key)
    return None


def detect_skills_shape(payload: Any) -> SkillsShape:
    """
    The first skills field present (key_skills, then skills) decides the shape.
    Empty strings, zero and False count as missing, like an unset field.
    A present value of an unknown type yields SkillsAbsent rather than falling
    through to the next field name.
    """
    for field in SKILL_FIELD_NAMES:
        value = _get(payload, field)
        if value is None or value == "" or value is False or value == 0:
            continue
        for rule in SKILL_RULES:
            shape = rule(field, value)
            if shape is not None:
                return shape
        return SkillsAbsent(reason=f"unsupported {type(value).__name__} in '{field}'")
    return SkillsAbsent()


def detect_stages_shape(payload: Any) -> StagesShape:
    """Non-empty stage_analysis wins; otherwise fall back to sections; otherwise absent."""
    stages = _get(payload, "stage_analysis")
    if isinstance(stages, list) and stages:
        return StageList(stages)
    sections = _get(payload, "sections")
    if isinstance(sections, list) and sections:
        return SectionList(sections)
    return StagesAbsent()
