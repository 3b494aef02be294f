"""
DiffGuard

AI pull request review for CI: fetches a PR diff, asks a hosted model for a
review, posts it as a comment and gates the job on the extracted score.
"""

__version__ = "1.0.0"

from .api import DiffGuardReviewer
from .review.diff_filter import filter_diff
from .review.score import extract_score

__all__ = ["DiffGuardReviewer", "filter_diff", "extract_score"]
