"""
Review Gate

Decides whether a pull request passes based on the extracted score and
whether it carries the label that triggers a review.
"""

import logging
from typing import Iterable, Optional

from ..models.review import GateDecision


logger = logging.getLogger(__name__)

DEFAULT_MINIMUM_SCORE = 75


def evaluate_gate(score: Optional[int], minimum_score: int = DEFAULT_MINIMUM_SCORE) -> GateDecision:
    """
    Compare a score with the configured threshold.

    A missing score never fails the gate; there is nothing to decide on.

    Args:
        score: Extracted score or None
        minimum_score: Lowest passing score

    Returns:
        GateDecision
    """
    if score is None:
        reason = "No score found in the analysis; score gate skipped"
        logger.warning(reason)
        return GateDecision(score=None, minimum_score=minimum_score, passed=True, reason=reason)

    if score < minimum_score:
        reason = f"Score {score} is below the minimum of {minimum_score}"
        logger.warning(reason)
        return GateDecision(score=score, minimum_score=minimum_score, passed=False, reason=reason)

    reason = f"Score {score} meets the minimum of {minimum_score}"
    logger.info(reason)
    return GateDecision(score=score, minimum_score=minimum_score, passed=True, reason=reason)


def has_review_label(labels: Iterable[str], review_label: Optional[str]) -> bool:
    """True when no trigger label is configured or the PR carries it."""
    if not review_label:
        return True
    return review_label in set(labels)
