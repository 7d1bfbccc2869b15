"""Risk level extraction from a free-text review.

The review prompt asks the model to emit ``Risk Level: [level]``. Whatever
follows the label on that line is taken verbatim (lowercased and stripped);
values outside the very low … very high scale are not rejected.
"""

from __future__ import annotations

import re

UNKNOWN_RISK = "unknown"

_RISK_LEVEL_RE = re.compile(r"Risk Level\s?:\s*(.*)", re.IGNORECASE)


def extract_risk_level(narrative: str) -> str:
    """Return the first ``Risk Level:`` value in the narrative, or ``unknown``."""
    match = _RISK_LEVEL_RE.search(narrative)
    if match is None:
        return UNKNOWN_RISK
    return match.group(1).lower().strip()


def should_approve(risk_level: str) -> bool:
    """Substring rule: "low", "very low" and "medium-low" all qualify."""
    return "low" in risk_level
