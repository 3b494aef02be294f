"""
Review Logic

Pure functions behind a review run: diff filtering, score extraction
and gating.
"""

from .diff_filter import filter_diff, parse_exclude_patterns, split_diff
from .score import extract_score
from .gate import evaluate_gate, has_review_label

__all__ = [
    'filter_diff',
    'parse_exclude_patterns',
    'split_diff',
    'extract_score',
    'evaluate_gate',
    'has_review_label',
]
