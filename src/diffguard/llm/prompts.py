"""
Prompt Builder

Builds the review prompt and the chat-completions request sent to the
review model.
"""

import logging
from typing import Optional

from ..models.chat import ChatCompletionRequest, ChatMessage


logger = logging.getLogger(__name__)


DEFAULT_REVIEW_PROMPT = """You are a highly skilled software engineer reviewing a pull request.
Analyze the following code changes and provide a detailed review in the following format:

### Potential Issues
[List any bugs, vulnerabilities, or critical issues]

### Improvements Suggested
[List specific code improvements and refactoring suggestions]

### Performance
[Discuss performance implications and optimization opportunities]

### Security Concerns
[List security issues, if any]

### Best Practices
[Suggest adherence to coding standards and best practices]

### Overall Score
[Give a 1-5 star rating for this PR written as [X/5⭐]]
Score: [the same rating as a number from 0 to 100]
[Final comments]

Please be specific and provide actionable feedback."""


class PromptBuilder:
    """
    Builds review prompts.

    A custom prompt replaces the default instructions; the diff framing
    stays the same.
    """

    def __init__(self, custom_prompt: Optional[str] = None):
        """
        Initialize prompt builder.

        Args:
            custom_prompt: Instructions replacing DEFAULT_REVIEW_PROMPT
        """
        self.instructions = custom_prompt or DEFAULT_REVIEW_PROMPT

    def build_review_prompt(self, diff: str) -> str:
        """
        Build the full user prompt for a diff.

        Args:
            diff: Unified diff to review

        Returns:
            Complete prompt string
        """
        return (
            f"{self.instructions}\n\n"
            f"Here's the diff:\n{diff}\n\n"
            "Provide your analysis in the specified format."
        )

    def build_chat_request(
        self,
        diff: str,
        model_id: str,
        max_tokens: Optional[int] = None,
        reasoning_effort: Optional[str] = None
    ) -> ChatCompletionRequest:
        """
        Build the chat-completions request for a diff.

        Args:
            diff: Unified diff to review
            model_id: Model identifier, e.g. 'anthropic/claude-2'
            max_tokens: Optional cap on response tokens
            reasoning_effort: Optional pass-through reasoning effort

        Returns:
            ChatCompletionRequest
        """
        prompt = self.build_review_prompt(diff)
        logger.debug(f"Built review prompt ({len(prompt)} characters) for {model_id}")

        return ChatCompletionRequest(
            model=model_id,
            messages=[ChatMessage(role='user', content=prompt)],
            max_tokens=max_tokens,
            reasoning_effort=reasoning_effort,
        )
