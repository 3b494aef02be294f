"""
GitHub Comment Formatter

Formats the model's analysis as a GitHub PR comment with the score
summary and the gate result.
"""

import logging
from typing import Optional

from ..models.review import GateDecision


logger = logging.getLogger(__name__)

COMMENT_HEADER = "## DiffGuard AI Analysis"
MAX_COMMENT_LENGTH = 65536  # GitHub's comment limit
TRUNCATION_NOTICE = "\n\n*Analysis truncated to fit GitHub's comment size limit.*"


class GitHubCommentFormatter:
    """
    Formats review comments for GitHub.

    The model id is passed in explicitly so the formatter stays independent
    of the job configuration.
    """

    def __init__(self, max_comment_length: int = MAX_COMMENT_LENGTH):
        self.max_comment_length = max_comment_length

    def format_analysis_comment(
        self,
        analysis: str,
        model_id: str,
        decision: Optional[GateDecision] = None
    ) -> str:
        """
        Build the PR comment body.

        Args:
            analysis: Review text from the model
            model_id: Model that produced the analysis
            decision: Score gate decision, if gating ran

        Returns:
            Markdown comment body
        """
        footer = f"\n\n---\n*Analyzed using {model_id}*"
        header = COMMENT_HEADER + "\n\n"
        summary = self._format_decision(decision)
        if summary:
            header += summary + "\n\n"

        budget = self.max_comment_length - len(header) - len(footer)
        body = self._truncate(analysis.strip(), budget)

        return f"{header}{body}{footer}"

    def _format_decision(self, decision: Optional[GateDecision]) -> str:
        if decision is None:
            return ""

        if not decision.has_score:
            return "> **Note:** No score could be extracted from this analysis, so the score gate was skipped."

        score_line = f"**Score:** {decision.score}/100 (minimum {decision.minimum_score})"
        if decision.passed:
            return f"{score_line} :white_check_mark:"
        return (
            f"> [!WARNING]\n"
            f"> {decision.reason}. This check will fail.\n\n"
            f"{score_line} :x:"
        )

    def _truncate(self, text: str, budget: int) -> str:
        budget = max(budget, 0)
        if len(text) <= budget:
            return text
        logger.warning(f"Analysis is {len(text)} characters; truncating for GitHub")
        notice = TRUNCATION_NOTICE[:budget]
        return text[:budget - len(notice)] + notice
