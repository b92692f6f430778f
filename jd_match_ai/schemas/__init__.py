"""Schema exports."""

from .candidate_file import CandidateFile, DocumentSlot
from .upload_session import UploadSession, UploadStatus
from .view_model import (
    FieldMatch,
    FieldValueView,
    KeySkill,
    MatchStrength,
    NormalizedViewModel,
    SectionView,
    StageSummary,
    StatusMarker,
)

__all__ = [
    "CandidateFile",
    "DocumentSlot",
    "UploadSession",
    "UploadStatus",
    "MatchStrength",
    "StatusMarker",
    "KeySkill",
    "StageSummary",
    "FieldValueView",
    "FieldMatch",
    "SectionView",
    "NormalizedViewModel",
]
