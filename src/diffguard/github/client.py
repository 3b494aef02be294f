"""
GitHub API Client

Handles GitHub API authentication and communication.
Provides methods for PR data, diff retrieval, label lookup and PR comments.
"""

import logging
from typing import Dict, List
import requests

from ..errors import GitHubAPIError


logger = logging.getLogger(__name__)

DIFF_MEDIA_TYPE = 'application/vnd.github.v3.diff'


class GitHubClient:
    """
    GitHub API client with authentication and error handling.

    Provides methods for:
    - PR information retrieval
    - PR diff retrieval
    - PR label lookup
    - PR comment creation
    """

    def __init__(self, token: str, base_url: str = "https://api.github.com", timeout: int = 30):
        """
        Initialize GitHub client.

        Args:
            token: GitHub token (Actions token or personal access token)
            base_url: GitHub API base URL (default: https://api.github.com)
            timeout: Request timeout in seconds
        """
        if not token:
            raise ValueError("GitHub token is required")
        self.token = token
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = self._create_session()

    def _create_session(self) -> requests.Session:
        """Create requests session with authentication headers."""
        session = requests.Session()
        session.headers.update({
            'Authorization': f'token {self.token}',
            'Accept': 'application/vnd.github.v3+json',
            'User-Agent': 'DiffGuard/1.0'
        })
        return session

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "GitHubClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _make_request(self, method: str, endpoint: str, **kwargs) -> requests.Response:
        """
        Make authenticated request to GitHub API.

        Args:
            method: HTTP method (GET, POST, etc.)
            endpoint: API endpoint (without base URL)
            **kwargs: Additional arguments for requests

        Returns:
            Response object

        Raises:
            GitHubAPIError: For API and transport errors
        """
        url = f"{self.base_url}/{endpoint.lstrip('/')}"
        kwargs.setdefault('timeout', self.timeout)

        try:
            response = self.session.request(method, url, **kwargs)
        except requests.RequestException as e:
            logger.error(f"Request failed: {e}")
            raise GitHubAPIError(f"Request failed: {str(e)}")

        if not response.ok:
            try:
                error_data = response.json() if response.content else {}
            except ValueError:
                error_data = {'message': response.text}
            raise GitHubAPIError(
                f"GitHub API error: {response.status_code} - {error_data.get('message', 'Unknown error')}",
                status_code=response.status_code,
                response_data=error_data
            )

        return response

    def get_pull_request_diff(self, owner: str, repo: str, pr_number: int) -> str:
        """
        Get the unified diff of a pull request.

        Args:
            owner: Repository owner
            repo: Repository name
            pr_number: Pull request number

        Returns:
            Unified diff text
        """
        logger.info(f"Fetching diff for {owner}/{repo}#{pr_number}")

        try:
            response = self._make_request(
                'GET',
                f'/repos/{owner}/{repo}/pulls/{pr_number}',
                headers={'Accept': DIFF_MEDIA_TYPE}
            )
        except GitHubAPIError as e:
            raise GitHubAPIError(
                f"Failed to fetch PR diff: {e}",
                status_code=e.status_code,
                response_data=e.response_data
            ) from e

        logger.info(f"Fetched diff ({len(response.text)} characters)")
        return response.text

    def get_pull_request(self, owner: str, repo: str, pr_number: int) -> Dict:
        """
        Get pull request information.

        Args:
            owner: Repository owner
            repo: Repository name
            pr_number: Pull request number

        Returns:
            Pull request data
        """
        logger.info(f"Fetching PR {owner}/{repo}#{pr_number}")

        response = self._make_request('GET', f'/repos/{owner}/{repo}/pulls/{pr_number}')
        return response.json()

    def get_issue_labels(self, owner: str, repo: str, pr_number: int) -> List[str]:
        """
        Get label names attached to a pull request.

        Args:
            owner: Repository owner
            repo: Repository name
            pr_number: Pull request number

        Returns:
            List of label names
        """
        pr_data = self.get_pull_request(owner, repo, pr_number)
        return [label['name'] for label in pr_data.get('labels') or [] if 'name' in label]

    def create_issue_comment(self, owner: str, repo: str, pr_number: int, body: str) -> Dict:
        """
        Post a comment on a pull request.

        Args:
            owner: Repository owner
            repo: Repository name
            pr_number: Pull request number
            body: Markdown comment body

        Returns:
            Created comment data
        """
        logger.info(f"Posting comment on {owner}/{repo}#{pr_number}")

        try:
            response = self._make_request(
                'POST',
                f'/repos/{owner}/{repo}/issues/{pr_number}/comments',
                json={'body': body}
            )
        except GitHubAPIError as e:
            raise GitHubAPIError(
                f"Failed to create PR comment: {e}",
                status_code=e.status_code,
                response_data=e.response_data
            ) from e

        comment = response.json()
        logger.info(f"Comment created: {comment.get('html_url')}")
        return comment

