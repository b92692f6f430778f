"""Configuration loaded from environment variables, plus fixed design constants."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env: try package dir then project root
_base = Path(__file__).resolve().parent
for _env_path in (_base / ".env", _base.parent / ".env"):
    if load_dotenv(_env_path):
        break
load_dotenv()  # also allow process env

# Remote comparison service (the only environment-driven setting)
ANALYSIS_ENDPOINT: str = os.getenv(
    "ANALYSIS_ENDPOINT", "http://3.110.84.51:8000/analyze-comprehensive"
)

# Multipart field names expected by the analysis service
JD_FIELD_NAME: str = "jd_file"
RESUME_FIELD_NAME: str = "resume_file"

# Upload validation
ALLOWED_MEDIA_TYPES: tuple = ("application/pdf", "text/plain")
ALLOWED_EXTENSIONS: list = ["pdf", "txt"]
MAX_FILE_SIZE_BYTES: int = 10 * 1024 * 1024

# Match classification thresholds (percent)
STRONG_MATCH_THRESHOLD: float = 70.0
MODERATE_MATCH_THRESHOLD: float = 50.0

# View model limits and fallbacks
MAX_KEY_SKILLS: int = 6
MAX_DERIVED_STAGES: int = 4
NOT_AVAILABLE: str = "N/A"
DEFAULT_CRITICALITY: str = "Medium"
UNKNOWN_CATEGORY: str = "Unknown"

# Skills may arrive under either name depending on the service version; first wins.
SKILL_FIELD_NAMES: tuple = ("key_skills", "skills")

# Placeholders for empty / missing field values in the detail view
VALUE_PLACEHOLDERS: dict = {
    "jd": {"empty": "No requirements specified", "missing": "No requirements"},
    "resume": {"empty": "No experience found", "missing": "No experience"},
}
