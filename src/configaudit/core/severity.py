"""Severity classification for normalized checks.

Evaluator findings map onto two severities: warnings stay WARNING, policy
failures become DANGER. Every evaluator finding is filed under the same
category.

Provides:
- Severity: Enum of check severities reported in config audit results
- DEFAULT_CATEGORY: Category assigned to evaluator findings
"""

from enum import Enum

DEFAULT_CATEGORY = "Security"


class Severity(str, Enum):
    """Severity of a normalized check."""

    WARNING = "WARNING"
    DANGER = "DANGER"
