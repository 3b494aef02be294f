"""
Data Models

DiffGuard의 데이터 모델들
"""

from .diff import DiffSection, SECTION_MARKER, PLACEHOLDER_DIFF
from .review import GateDecision, ReviewOutcome
from .chat import ChatMessage, ChatCompletionRequest, ChatCompletionResponse

__all__ = [
    "DiffSection",
    "SECTION_MARKER",
    "PLACEHOLDER_DIFF",
    "GateDecision",
    "ReviewOutcome",
    "ChatMessage",
    "ChatCompletionRequest",
    "ChatCompletionResponse",
]
