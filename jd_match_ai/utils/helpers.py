"""Small text and number helpers shared by the normalizer and the UI."""

import math
from typing import Any, Optional


def humanize_name(name: Any, fallback: str) -> str:
    """Turn a snake_case key into display text ("work_experience" -> "work experience")."""
    if not name or not isinstance(name, str):
        return fallback
    return name.replace("_", " ")


def to_number(value: Any) -> Optional[float]:
    """Coerce a payload value to float; None for missing, bool, or non-numeric input."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def round_half_up(value: float) -> int:
    """Round to the nearest whole number with halves going up (2.5 -> 3)."""
    return int(math.floor(value + 0.5))


def format_file_size(size: int) -> str:
    """Human-readable byte size (e.g. '512 B', '1.5 MB')."""
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f} KB"
    return f"{size / (1024 * 1024):.1f} MB"


def capitalize_first(text: str) -> str:
    """Uppercase only the first character ("technical skills" -> "Technical skills"; "AWS services" unchanged)."""
    if not text:
        return text
    return text[0].upper() + text[1:]
