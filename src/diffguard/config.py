"""
Configuration Management

시스템 설정 관리
"""

import os
import yaml
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List, Mapping
from pathlib import Path
import logging

from .github.actions import get_input
from .review.diff_filter import parse_exclude_patterns
from .review.gate import DEFAULT_MINIMUM_SCORE


DEFAULT_MODEL_ID = "anthropic/claude-2"
DEFAULT_MAX_TOKENS = 2048
VALID_REASONING_EFFORTS = {'minimal', 'low', 'medium', 'high'}


@dataclass
class GitHubConfig:
    """GitHub API 설정"""
    token: Optional[str] = None
    api_base_url: str = "https://api.github.com"
    timeout_seconds: int = 30


@dataclass
class OpenRouterConfig:
    """OpenRouter API 설정"""
    api_key: Optional[str] = None
    base_url: str = "https://openrouter.ai/api/v1"
    model_id: str = DEFAULT_MODEL_ID
    max_tokens: Optional[int] = DEFAULT_MAX_TOKENS
    reasoning_effort: Optional[str] = None
    timeout_seconds: int = 120

    def __post_init__(self):
        # OpenRouter expects lower-case effort levels
        if self.reasoning_effort:
            self.reasoning_effort = self.reasoning_effort.strip().lower()


@dataclass
class ReviewConfig:
    """리뷰 실행 설정"""
    custom_prompt: Optional[str] = None
    review_label: Optional[str] = None
    exclude_files: List[str] = field(default_factory=list)
    minimum_score: int = DEFAULT_MINIMUM_SCORE


@dataclass
class LoggingConfig:
    """로깅 설정"""
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file_path: Optional[str] = None
    max_file_size: int = 10 * 1024 * 1024  # 10MB
    backup_count: int = 5


def _lookup(environ: Mapping[str, str], name: str) -> Optional[str]:
    """Action input (INPUT_NAME) first, then the plain variable (NAME)."""
    value = get_input(name, environ=environ)
    if value:
        return value
    plain = (environ.get(name.upper()) or '').strip()
    return plain or None


def _optional_int(value: Optional[str], name: str) -> Optional[int]:
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got '{value}'") from None


@dataclass
class AppConfig:
    """전체 애플리케이션 설정"""
    github: GitHubConfig
    openrouter: OpenRouterConfig
    review: ReviewConfig
    logging: LoggingConfig

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AppConfig":
        """환경 변수에서 설정 로드 (GitHub Action input 우선)"""
        env = os.environ if environ is None else environ

        max_tokens = _optional_int(_lookup(env, "max_tokens"), "max_tokens")
        minimum_score = _optional_int(_lookup(env, "minimum_score"), "minimum_score")

        return cls(
            github=GitHubConfig(
                token=_lookup(env, "github_token"),
                api_base_url=env.get("GITHUB_API_URL", "https://api.github.com"),
                timeout_seconds=int(env.get("GITHUB_TIMEOUT", "30")),
            ),
            openrouter=OpenRouterConfig(
                api_key=_lookup(env, "open_router_key"),
                base_url=env.get("OPENROUTER_BASE_URL", "https://openrouter.ai/api/v1"),
                model_id=_lookup(env, "model_id") or DEFAULT_MODEL_ID,
                max_tokens=DEFAULT_MAX_TOKENS if max_tokens is None else max_tokens,
                reasoning_effort=_lookup(env, "reasoning_effort"),
                timeout_seconds=int(env.get("OPENROUTER_TIMEOUT", "120")),
            ),
            review=ReviewConfig(
                custom_prompt=_lookup(env, "custom_prompt"),
                review_label=_lookup(env, "review_label"),
                exclude_files=parse_exclude_patterns(_lookup(env, "exclude_files")),
                minimum_score=DEFAULT_MINIMUM_SCORE if minimum_score is None else minimum_score,
            ),
            logging=LoggingConfig(
                level=env.get("LOG_LEVEL", "INFO"),
                format=env.get("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"),
                file_path=env.get("LOG_FILE"),
                max_file_size=int(env.get("LOG_MAX_SIZE", str(10 * 1024 * 1024))),
                backup_count=int(env.get("LOG_BACKUP_COUNT", "5")),
            ),
        )

    @classmethod
    def from_yaml(cls, config_path: str) -> "AppConfig":
        """YAML 파일에서 설정 로드"""
        config_file = Path(config_path)
        if not config_file.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_file, 'r', encoding='utf-8') as f:
            config_data = yaml.safe_load(f) or {}

        review_data = dict(config_data.get('review', {}))
        exclude_files = review_data.get('exclude_files')
        if isinstance(exclude_files, str):
            review_data['exclude_files'] = parse_exclude_patterns(exclude_files)

        return cls(
            github=GitHubConfig(**config_data.get('github', {})),
            openrouter=OpenRouterConfig(**config_data.get('openrouter', {})),
            review=ReviewConfig(**review_data),
            logging=LoggingConfig(**config_data.get('logging', {})),
        )

    def validate(self) -> None:
        """설정 유효성 검사"""
        errors = []

        # 인증 정보 필수 확인
        if not self.github.token:
            errors.append("GitHub token is required")
        if not self.openrouter.api_key:
            errors.append("OpenRouter key is required")
        if not self.openrouter.model_id:
            errors.append("Model id is required")

        if self.openrouter.max_tokens is not None and self.openrouter.max_tokens <= 0:
            errors.append("max_tokens must be positive")

        effort = self.openrouter.reasoning_effort
        if effort and effort not in VALID_REASONING_EFFORTS:
            errors.append(f"Invalid reasoning effort: {effort}")

        if not 0 <= self.review.minimum_score <= 100:
            errors.append("Minimum score must be between 0 and 100")

        # 로그 레벨 검증
        valid_log_levels = {'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}
        if self.logging.level.upper() not in valid_log_levels:
            errors.append(f"Invalid log level: {self.logging.level}")

        if errors:
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

    def to_dict(self) -> Dict[str, Any]:
        """설정을 딕셔너리로 변환"""
        return {
            'github': {
                'api_base_url': self.github.api_base_url,
                'timeout_seconds': self.github.timeout_seconds,
                # 보안상 토큰은 제외
            },
            'openrouter': {
                'base_url': self.openrouter.base_url,
                'model_id': self.openrouter.model_id,
                'max_tokens': self.openrouter.max_tokens,
                'reasoning_effort': self.openrouter.reasoning_effort,
                'timeout_seconds': self.openrouter.timeout_seconds,
            },
            'review': {
                'custom_prompt': self.review.custom_prompt,
                'review_label': self.review.review_label,
                'exclude_files': list(self.review.exclude_files),
                'minimum_score': self.review.minimum_score,
            },
            'logging': {
                'level': self.logging.level,
                'format': self.logging.format,
                'file_path': self.logging.file_path,
                'max_file_size': self.logging.max_file_size,
                'backup_count': self.logging.backup_count,
            },
        }


def setup_logging(config: LoggingConfig) -> None:
    """로깅 설정"""
    logging.basicConfig(
        level=getattr(logging, config.level.upper()),
        format=config.format,
    )

    # 파일 로깅이 설정된 경우 로테이션 설정
    if config.file_path:
        from logging.handlers import RotatingFileHandler

        handler = RotatingFileHandler(
            config.file_path,
            maxBytes=config.max_file_size,
            backupCount=config.backup_count,
        )
        handler.setFormatter(logging.Formatter(config.format))

        # 루트 로거에 핸들러 추가
        logging.getLogger().addHandler(handler)
