"""Export the field-level comparison of a normalized report to CSV bytes."""

import csv
import io
from typing import List

from jd_match_ai.schemas.view_model import FieldValueView, NormalizedViewModel

CSV_HEADERS: List[str] = [
    "section",
    "section_match_percentage",
    "field",
    "match_status",
    "jd_value",
    "resume_value",
    "comments",
]


def _value_cell(value: FieldValueView) -> str:
    if value.items:
        return "; ".join(value.items)
    return value.text or ""


def export_report_csv(view: NormalizedViewModel) -> bytes:
    """One row per field-level result; sections without results get no rows."""
    out = io.StringIO()
    writer = csv.writer(out)
    writer.writerow(CSV_HEADERS)
    for section in view.sections:
        for field in section.fields:
            writer.writerow([
                section.name,
                section.display_percentage if section.display_percentage is not None else "",
                field.field,
                field.status,
                _value_cell(field.jd_value),
                _value_cell(field.resume_value),
                field.comments or "",
            ])
    return out.getvalue().encode("utf-8")
