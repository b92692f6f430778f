"""Service exports."""

from .analysis_client import AnalysisClient
from .file_validation import validate_candidate_file
from .report_export import export_report_csv
from .result_normalizer import (
    classify_match,
    classify_status,
    derive_stage_analysis,
    extract_key_skills,
    normalize_payload,
)
from .upload_controller import UploadController

__all__ = [
    "AnalysisClient",
    "UploadController",
    "validate_candidate_file",
    "normalize_payload",
    "classify_match",
    "classify_status",
    "extract_key_skills",
    "derive_stage_analysis",
    "export_report_csv",
]
