"""
Formatting Layer

Formats review output for GitHub PR comments.
"""

from .github import GitHubCommentFormatter

__all__ = ['GitHubCommentFormatter']
