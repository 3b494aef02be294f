"""
LLM Review Engine

This module builds review prompts and talks to the hosted model API.
"""

from .prompts import PromptBuilder, DEFAULT_REVIEW_PROMPT
from .client import OpenRouterClient

__all__ = ['PromptBuilder', 'DEFAULT_REVIEW_PROMPT', 'OpenRouterClient']
