"""
Workflow Event Context

Reads the pull request a workflow run belongs to from the GitHub Actions
environment.
"""

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Mapping, Optional

from ..errors import EventContextError


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PullRequestContext:
    """리뷰 대상 Pull Request"""
    owner: str
    repo: str
    pr_number: int
    labels: Optional[List[str]] = field(default=None)

    def __post_init__(self):
        """데이터 검증"""
        if not self.owner or not self.repo:
            raise ValueError("Owner and repo are required")
        if self.pr_number <= 0:
            raise ValueError("PR number must be positive")

    @property
    def repository(self) -> str:
        return f"{self.owner}/{self.repo}"

    @classmethod
    def from_repository(cls, repository: str, pr_number: int,
                        labels: Optional[List[str]] = None) -> "PullRequestContext":
        """'owner/repo' 형식 문자열로부터 생성"""
        owner, sep, repo = repository.partition('/')
        if not sep or '/' in repo:
            raise ValueError(f"Repository must be in format 'owner/repo': {repository}")
        return cls(owner=owner, repo=repo, pr_number=pr_number, labels=labels)

    @classmethod
    def from_payload(cls, repository: str, payload: Dict) -> "PullRequestContext":
        """
        Build the context from a workflow event payload.

        Args:
            repository: 'owner/repo'
            payload: Parsed event JSON

        Raises:
            EventContextError: If the event has no pull request
        """
        pull_request = payload.get('pull_request')
        if not pull_request or 'number' not in pull_request:
            raise EventContextError("This workflow event is not associated with a pull request")

        labels = None
        if 'labels' in pull_request:
            labels = [label['name'] for label in pull_request['labels'] if 'name' in label]

        return cls.from_repository(repository, int(pull_request['number']), labels)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "PullRequestContext":
        """
        Build the context from GITHUB_REPOSITORY and GITHUB_EVENT_PATH.

        Raises:
            EventContextError: If the variables are missing or unreadable
        """
        environ = os.environ if environ is None else environ

        repository = environ.get('GITHUB_REPOSITORY')
        event_path = environ.get('GITHUB_EVENT_PATH')
        if not repository or not event_path:
            raise EventContextError("GITHUB_REPOSITORY and GITHUB_EVENT_PATH must be set")

        try:
            payload = json.loads(Path(event_path).read_text(encoding='utf-8'))
        except (OSError, json.JSONDecodeError) as e:
            raise EventContextError(f"Cannot read event payload {event_path}: {e}") from e

        context = cls.from_payload(repository, payload)
        logger.info(f"Running for {context.repository}#{context.pr_number}")
        return context
