"""
Score banding shared by every 0-100 score (recovery, growth, sub-scores).

Colors are a fixed contract: every surface that renders a score uses the
same four tokens.
"""
from typing import List, Tuple

# (lower bound inclusive, color, label), highest band first
_BANDS: List[Tuple[float, str, str]] = [
    (80, "#00e676", "Excellent"),
    (60, "#ffd740", "Good"),
    (40, "#ff9100", "Fair"),
]
_LOWEST = ("#ff4757", "Needs Improvement")


def _band(score: float) -> Tuple[str, str]:
    for lower, color, label in _BANDS:
        if score >= lower:
            return color, label
    return _LOWEST


def score_color(score: float) -> str:
    return _band(score or 0)[0]


def score_label(score: float) -> str:
    return _band(score or 0)[1]
