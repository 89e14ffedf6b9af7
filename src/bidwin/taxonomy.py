"""Classification taxonomy — score bands, risk badges, status icons.

Pure functions over validated results. They are total: unexpected agent
strings map to a neutral category (or no icon) instead of raising.
"""

from __future__ import annotations

from enum import StrEnum

from bidwin.schemas import RiskLevel, VerificationStatus

GOOD_SCORE_ABOVE = 80
MODERATE_SCORE_FROM = 50


class ScoreBand(StrEnum):
    GOOD = "good"
    MODERATE = "moderate"
    POOR = "poor"


class RiskBadge(StrEnum):
    SAFE = "safe"
    WARNING = "warning"
    DANGER = "danger"
    NEUTRAL = "neutral"


class StatusIcon(StrEnum):
    CHECK = "check"
    ALERT = "alert"
    CROSS = "cross"


_RISK_BADGES: dict[str, RiskBadge] = {
    RiskLevel.SAFE: RiskBadge.SAFE,
    RiskLevel.WARNING: RiskBadge.WARNING,
    RiskLevel.DANGER: RiskBadge.DANGER,
}

_STATUS_ICONS: dict[str, StatusIcon] = {
    VerificationStatus.VERIFIED: StatusIcon.CHECK,
    VerificationStatus.UNKNOWN: StatusIcon.ALERT,
    VerificationStatus.CONTRADICTION: StatusIcon.CROSS,
}

# Rich style per category, shared by every renderer.
BAND_STYLES: dict[ScoreBand, str] = {
    ScoreBand.GOOD: "bold white on green",
    ScoreBand.MODERATE: "bold black on yellow",
    ScoreBand.POOR: "bold white on red",
}

BADGE_STYLES: dict[RiskBadge, str] = {
    RiskBadge.SAFE: "green",
    RiskBadge.WARNING: "yellow",
    RiskBadge.DANGER: "red",
    RiskBadge.NEUTRAL: "white",
}

ICON_GLYPHS: dict[StatusIcon, str] = {
    StatusIcon.CHECK: "✔",
    StatusIcon.ALERT: "⚠",
    StatusIcon.CROSS: "✘",
}


def score_band(score: float) -> ScoreBand:
    """Band a compliance score.

    ``score > 80`` is good, ``50 <= score <= 80`` moderate, anything lower
    poor. Exactly 80 is moderate.
    """
    if score > GOOD_SCORE_ABOVE:
        return ScoreBand.GOOD
    if score >= MODERATE_SCORE_FROM:
        return ScoreBand.MODERATE
    return ScoreBand.POOR


def risk_badge(risk_level: str) -> RiskBadge:
    return _RISK_BADGES.get(risk_level, RiskBadge.NEUTRAL)


def status_icon(status: str) -> StatusIcon | None:
    """Return the icon for a verification status, or None if unrecognized."""
    return _STATUS_ICONS.get(status)


def format_score(score: float) -> str:
    """Render a score as a percentage, dropping a trailing ``.0``."""
    if float(score).is_integer():
        return f"{int(score)}%"
    return f"{score:.1f}%"
