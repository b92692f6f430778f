"""Display tokens for classifications. The only place colours and icons are chosen."""

from jd_match_ai.schemas.view_model import MatchStrength, StatusMarker

STRENGTH_COLORS = {
    MatchStrength.STRONG: "green",
    MatchStrength.MODERATE: "orange",
    MatchStrength.WEAK: "red",
}

STAGE_BADGE_COLORS = {
    "Strong": "green",
    "Partial": "orange",
}

STATUS_ICONS = {
    StatusMarker.SUCCESS: "✅",
    StatusMarker.CAUTION: "⚠️",
    StatusMarker.FAILURE: "❌",
}


def strength_color(strength: MatchStrength) -> str:
    return STRENGTH_COLORS[strength]


def stage_badge_color(match_label: str) -> str:
    """Colour for a stage bucket label; anything unrecognised renders as weak."""
    return STAGE_BADGE_COLORS.get(match_label or "", "red")


def status_icon(marker: StatusMarker) -> str:
    return STATUS_ICONS[marker]


def colored(text: str, color: str) -> str:
    """Streamlit markdown colour markup."""
    return f":{color}[{text}]"
