"""
Review Data Models

리뷰 실행 결과 관련 데이터 모델들
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class GateDecision:
    """점수 기반 게이트 판정"""
    score: Optional[int]
    minimum_score: int
    passed: bool
    reason: str

    def __post_init__(self):
        """데이터 검증"""
        if self.score is not None and not 0 <= self.score <= 100:
            raise ValueError("Score must be between 0 and 100")
        if not 0 <= self.minimum_score <= 100:
            raise ValueError("Minimum score must be between 0 and 100")

    @property
    def has_score(self) -> bool:
        return self.score is not None


@dataclass
class ReviewOutcome:
    """한 번의 리뷰 실행 결과"""
    status: str  # 'reviewed', 'skipped'
    repository: str
    pr_number: int
    analysis: Optional[str] = None
    score: Optional[int] = None
    decision: Optional[GateDecision] = None
    comment_url: Optional[str] = None
    message: str = ""
    created_at: datetime = field(default_factory=datetime.now)

    def __post_init__(self):
        """데이터 검증"""
        valid_statuses = {'reviewed', 'skipped'}
        if self.status not in valid_statuses:
            raise ValueError(f"Invalid status: {self.status}")
        if self.pr_number <= 0:
            raise ValueError("PR number must be positive")
        if '/' not in self.repository:
            raise ValueError("Repository must be in format 'owner/repo'")

    @property
    def should_fail(self) -> bool:
        """잡을 실패 처리해야 하는지 여부"""
        return self.decision is not None and not self.decision.passed
