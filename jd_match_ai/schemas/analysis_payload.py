"""
Shape of the JSON returned by the analysis service.

The service does not guarantee any of these keys, and older versions used
different names (``skills`` instead of ``key_skills``). These TypedDicts document
what the normalizer looks for; the normalizer itself reads payloads defensively
as plain mappings and never trusts the declared types.
"""

from typing import Any, Dict, List, TypedDict, Union


SkillDescriptor = Union[str, Dict[str, Any]]
FieldValue = Union[str, List[str], None]


class MatchResultPayload(TypedDict, total=False):
    field: str
    jd_value: FieldValue
    resume_value: FieldValue
    match_status: str
    comments: str


class SectionPayload(TypedDict, total=False):
    section_name: str
    match_percentage: float
    section_score: float
    total_possible: float
    criticality: str
    project_count: Union[int, str]
    match_results: List[MatchResultPayload]


class StageAnalysisPayload(TypedDict, total=False):
    category: str
    match: str
    projects: Union[int, str]
    criticality: str


class AnalysisPayload(TypedDict, total=False):
    overall_percentage: float
    job_title: str
    key_skills: Union[List[SkillDescriptor], Dict[str, Any]]
    skills: Union[List[SkillDescriptor], Dict[str, Any]]
    sections: List[SectionPayload]
    stage_analysis: List[StageAnalysisPayload]
