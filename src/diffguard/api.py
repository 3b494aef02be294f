"""
Main DiffGuard API

Orchestrates a review run from PR diff collection to the posted
GitHub comment and the score gate.
"""

import argparse
import logging
from typing import List, Optional

from .config import AppConfig, setup_logging
from .errors import DiffGuardError
from .github import actions
from .github.client import GitHubClient
from .github.event import PullRequestContext
from .llm.client import OpenRouterClient
from .llm.prompts import PromptBuilder
from .formatting.github import GitHubCommentFormatter
from .models.review import ReviewOutcome
from .review.diff_filter import filter_diff
from .review.gate import evaluate_gate, has_review_label
from .review.score import extract_score


logger = logging.getLogger(__name__)


class DiffGuardReviewer:
    """
    Main DiffGuard interface.

    Runs the complete review process:
    1. Check the trigger label
    2. Fetch the PR diff and drop excluded files
    3. Ask the model for an analysis
    4. Extract the score and evaluate the gate
    5. Post the analysis as a PR comment
    """

    def __init__(
        self,
        config: AppConfig,
        github_client: Optional[GitHubClient] = None,
        llm_client: Optional[OpenRouterClient] = None
    ):
        """
        Initialize the reviewer.

        Args:
            config: Validated application configuration
            github_client: Optional preconfigured GitHub client
            llm_client: Optional preconfigured OpenRouter client
        """
        self.config = config

        self.github_client = github_client or GitHubClient(
            token=config.github.token,
            base_url=config.github.api_base_url,
            timeout=config.github.timeout_seconds
        )
        self.llm_client = llm_client or OpenRouterClient(
            api_key=config.openrouter.api_key,
            base_url=config.openrouter.base_url,
            timeout=config.openrouter.timeout_seconds
        )
        self.prompt_builder = PromptBuilder(custom_prompt=config.review.custom_prompt)
        self.formatter = GitHubCommentFormatter()

    def close(self) -> None:
        self.github_client.close()
        self.llm_client.close()

    def should_review(self, context: PullRequestContext) -> bool:
        """Check the trigger label, fetching labels when the event has none."""
        review_label = self.config.review.review_label
        if not review_label:
            return True

        labels = context.labels
        if labels is None:
            labels = self.github_client.get_issue_labels(context.owner, context.repo, context.pr_number)

        if has_review_label(labels, review_label):
            return True

        logger.info(f"PR {context.repository}#{context.pr_number} lacks label '{review_label}'; skipping review")
        return False

    def review(self, context: PullRequestContext) -> ReviewOutcome:
        """
        Review a pull request.

        Args:
            context: Pull request to review

        Returns:
            ReviewOutcome; its should_fail property carries the gate result

        Raises:
            DiffGuardError: If a GitHub or OpenRouter call fails
        """
        if not self.should_review(context):
            return ReviewOutcome(
                status='skipped',
                repository=context.repository,
                pr_number=context.pr_number,
                message=f"Missing label '{self.config.review.review_label}'"
            )

        diff = self.github_client.get_pull_request_diff(context.owner, context.repo, context.pr_number)

        if self.config.review.exclude_files:
            diff = filter_diff(diff, self.config.review.exclude_files)

        openrouter = self.config.openrouter
        request = self.prompt_builder.build_chat_request(
            diff,
            model_id=openrouter.model_id,
            max_tokens=openrouter.max_tokens,
            reasoning_effort=openrouter.reasoning_effort
        )
        analysis = self.llm_client.complete(request)

        score = extract_score(analysis)
        decision = evaluate_gate(score, self.config.review.minimum_score)

        body = self.formatter.format_analysis_comment(analysis, openrouter.model_id, decision)
        comment = self.github_client.create_issue_comment(context.owner, context.repo, context.pr_number, body)

        return ReviewOutcome(
            status='reviewed',
            repository=context.repository,
            pr_number=context.pr_number,
            analysis=analysis,
            score=score,
            decision=decision,
            comment_url=comment.get('html_url'),
            message=decision.reason
        )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='diffguard',
        description='Review a pull request with a hosted language model and post the result.'
    )
    parser.add_argument('--config', help='YAML configuration file (default: environment / action inputs)')
    parser.add_argument('--repository', help="Repository as 'owner/repo' (default: GITHUB_REPOSITORY)")
    parser.add_argument('--pr', type=int, help='Pull request number (default: from GITHUB_EVENT_PATH)')
    return parser


def _load_context(args: argparse.Namespace) -> PullRequestContext:
    if args.repository:
        return PullRequestContext.from_repository(args.repository, args.pr)
    return PullRequestContext.from_env()


def _write_outputs(outcome: ReviewOutcome) -> None:
    actions.set_output('status', outcome.status)
    actions.set_output('score', '' if outcome.score is None else outcome.score)
    actions.set_output('comment_url', outcome.comment_url or '')


def main(argv: Optional[List[str]] = None) -> int:
    """
    Command line / GitHub Action entry point.

    Returns:
        Process exit code
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    if bool(args.repository) != bool(args.pr):
        parser.error("--repository and --pr must be given together")

    try:
        config = AppConfig.from_yaml(args.config) if args.config else AppConfig.from_env()
        config.validate()
        setup_logging(config.logging)
        context = _load_context(args)

        reviewer = DiffGuardReviewer(config)
        try:
            outcome = reviewer.review(context)
        finally:
            reviewer.close()
    except (DiffGuardError, ValueError, OSError) as e:
        actions.set_output('status', 'failed')
        return actions.set_failed(f"Action failed: {e}")
    except Exception as e:
        logger.exception("Unexpected error during review")
        actions.set_output('status', 'failed')
        return actions.set_failed(f"Action failed: {e}")

    _write_outputs(outcome)

    if outcome.decision is not None and not outcome.decision.has_score:
        actions.warning(outcome.decision.reason)

    if outcome.should_fail:
        return actions.set_failed(f"Action failed: {outcome.message}")

    logger.info(f"DiffGuard finished: {outcome.status} ({outcome.message or 'ok'})")
    return 0
