"""
Score Extractor

Best-effort extraction of a 0-100 quality score from free-text model
output. Returns None when the text carries no recognisable score.
"""

import math
import re
import logging
from typing import Callable, List, Optional, Tuple


logger = logging.getLogger(__name__)

MIN_SCORE = 0
MAX_SCORE = 100
STAR_SCALE = 5

# "Score: 82", "Score: 62.5", "Overall score - 82". Same line only, and not a fraction of five.
NUMERIC_SCORE_PATTERN = re.compile(
    r'score[^\d\n]{0,20}?(\d{1,3}(?:\.\d+)?)(?!\d|\.\d|\s*/\s*5(?!\d))',
    re.IGNORECASE,
)

# "[3.5/5 ⭐]", "[4/5⭐⭐⭐⭐]", "[4 / 5]"
STAR_RATING_PATTERN = re.compile(
    r'\[\s*(\d+(?:\.\d+)?)\s*/\s*5\s*[⭐★☆\ufe0f]*\s*\]'
)

# "Score: 4/5", "Overall score: 4.5 / 5 stars"
INLINE_STAR_PATTERN = re.compile(
    r'score[^\d\n]{0,20}?(\d+(?:\.\d+)?)\s*/\s*5(?!\d)',
    re.IGNORECASE,
)


def _clamp(value: int) -> int:
    if value < MIN_SCORE or value > MAX_SCORE:
        logger.warning(f"Extracted score {value} outside {MIN_SCORE}-{MAX_SCORE}; clamping")
    return max(MIN_SCORE, min(MAX_SCORE, value))


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _parse_numeric(raw: str) -> int:
    # decimals are truncated: 62.5 -> 62
    return _clamp(int(float(raw)))


def _parse_stars(raw: str) -> int:
    return _clamp(_round_half_up(float(raw) / STAR_SCALE * MAX_SCORE))


# Tried in order; the first pattern that yields a value wins.
SCORE_PATTERNS: List[Tuple[str, "re.Pattern[str]", Callable[[str], int]]] = [
    ('numeric', NUMERIC_SCORE_PATTERN, _parse_numeric),
    ('stars', STAR_RATING_PATTERN, _parse_stars),
    ('inline_stars', INLINE_STAR_PATTERN, _parse_stars),
]


def extract_score(analysis: Optional[str]) -> Optional[int]:
    """
    Extract a normalized score from review text.

    Args:
        analysis: Free-text review produced by the model

    Returns:
        Score in 0-100, or None if no score could be found
    """
    if not analysis:
        return None

    for kind, pattern, parse in SCORE_PATTERNS:
        match = pattern.search(analysis)
        if not match:
            continue
        try:
            score = parse(match.group(1))
        except (ValueError, OverflowError) as e:
            logger.warning(f"Could not parse {kind} score '{match.group(1)}': {e}")
            continue
        logger.info(f"Extracted {kind} score: {score}")
        return score

    logger.info("No score found in analysis")
    return None
