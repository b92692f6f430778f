"""Utility exports."""

from .helpers import capitalize_first, format_file_size, humanize_name, round_half_up, to_number
from .logger import get_logger

__all__ = [
    "get_logger",
    "humanize_name",
    "to_number",
    "round_half_up",
    "format_file_size",
    "capitalize_first",
]
