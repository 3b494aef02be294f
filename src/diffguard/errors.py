"""
Error Types

Exceptions raised by the I/O layer. The diff filter and score extractor
never raise; they signal through return values.
"""

from typing import Dict, Optional


class DiffGuardError(Exception):
    """Base class for job-level failures."""


class APIError(DiffGuardError):
    """HTTP API related errors"""
    def __init__(self, message: str, status_code: Optional[int] = None, response_data: Optional[Dict] = None):
        super().__init__(message)
        self.status_code = status_code
        self.response_data = response_data


class GitHubAPIError(APIError):
    """GitHub API related errors"""


class OpenRouterAPIError(APIError):
    """OpenRouter API related errors"""


class EventContextError(DiffGuardError):
    """The workflow event does not describe a pull request."""
