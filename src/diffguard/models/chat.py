"""
Chat Completion Models

OpenRouter chat-completions 요청/응답 검증용 Pydantic 모델들
"""

from typing import List, Optional
from pydantic import BaseModel, field_validator


class ChatMessage(BaseModel):
    """대화 메시지"""
    role: str
    content: str

    @field_validator('role')
    @classmethod
    def validate_role(cls, v):
        if v not in {'system', 'user', 'assistant'}:
            raise ValueError(f'Invalid role: {v}')
        return v


class ChatCompletionRequest(BaseModel):
    """chat-completions 요청 본문"""
    model: str
    messages: List[ChatMessage]
    max_tokens: Optional[int] = None
    reasoning_effort: Optional[str] = None

    @field_validator('model')
    @classmethod
    def validate_model(cls, v):
        if not v.strip():
            raise ValueError('Model id cannot be empty')
        return v

    @field_validator('messages')
    @classmethod
    def validate_messages(cls, v):
        if not v:
            raise ValueError('At least one message is required')
        return v

    @field_validator('max_tokens')
    @classmethod
    def validate_max_tokens(cls, v):
        if v is not None and v <= 0:
            raise ValueError('max_tokens must be positive')
        return v

    def to_payload(self) -> dict:
        """API 전송용 딕셔너리 (설정되지 않은 옵션 제외)"""
        return self.model_dump(exclude_none=True)


class ChoiceMessage(BaseModel):
    role: Optional[str] = None
    content: Optional[str] = None


class Choice(BaseModel):
    message: Optional[ChoiceMessage] = None


class ChatCompletionResponse(BaseModel):
    """chat-completions 응답 본문"""
    id: Optional[str] = None
    model: Optional[str] = None
    choices: List[Choice] = []

    @property
    def first_content(self) -> Optional[str]:
        """첫 번째 choice의 메시지 내용"""
        if not self.choices or self.choices[0].message is None:
            return None
        return self.choices[0].message.content
