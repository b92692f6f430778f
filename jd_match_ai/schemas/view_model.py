"""Normalized, render-ready view of an analysis payload."""

from enum import Enum
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

Years = Union[int, float, str]


class MatchStrength(str, Enum):
    """Three-way bucket for any match percentage."""

    STRONG = "strong"
    MODERATE = "moderate"
    WEAK = "weak"

    @property
    def label(self) -> str:
        """Overall label, e.g. 'Strong Match'."""
        return f"{self.value.capitalize()} Match"

    @property
    def stage_label(self) -> str:
        """Bucket label used in the stage overview ('Partial' for the middle bucket)."""
        return {"strong": "Strong", "moderate": "Partial", "weak": "Weak"}[self.value]


class StatusMarker(str, Enum):
    """Classification of a field-level match status."""

    SUCCESS = "success"
    CAUTION = "caution"
    FAILURE = "failure"


class _ViewModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class KeySkill(_ViewModel):
    name: str
    years: Optional[Years] = None


class StageSummary(_ViewModel):
    """One row of the at-a-glance overview."""

    category: str
    match: Optional[str] = None
    projects: Optional[Years] = None
    criticality: Optional[str] = None


class FieldValueView(_ViewModel):
    """JD or resume value: list items, a single text, or a placeholder when nothing is there."""

    items: List[str] = Field(default_factory=list)
    text: Optional[str] = None
    placeholder: Optional[str] = None


class FieldMatch(_ViewModel):
    field: str
    status: str = ""
    marker: StatusMarker = StatusMarker.CAUTION
    jd_value: FieldValueView
    resume_value: FieldValueView
    comments: Optional[str] = None


class SectionView(_ViewModel):
    """Expandable per-section detail. raw_match_results is the payload list, untouched."""

    name: str
    match_percentage: Optional[float] = None
    display_percentage: Optional[int] = None
    strength: MatchStrength = MatchStrength.WEAK
    score_text: Optional[str] = None
    fields: List[FieldMatch] = Field(default_factory=list)
    raw_match_results: List[Any] = Field(default_factory=list)


class NormalizedViewModel(_ViewModel):
    overall_percentage: float = 0.0
    display_percentage: int = 0
    strength: MatchStrength = MatchStrength.WEAK
    match_label: str = MatchStrength.WEAK.label
    job_title: Optional[str] = None
    key_skills: List[KeySkill] = Field(default_factory=list)
    stage_analysis: List[StageSummary] = Field(default_factory=list)
    sections: List[SectionView] = Field(default_factory=list)
