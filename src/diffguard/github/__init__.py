"""
GitHub Integration Layer

This module provides GitHub API integration for PR diff retrieval,
PR comments and the Actions runtime environment.
"""

from .client import GitHubClient
from .event import PullRequestContext

__all__ = ['GitHubClient', 'PullRequestContext']
