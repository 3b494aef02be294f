"""
Unit tests for configuration loading and validation.
"""

import logging

import pytest
import yaml

from diffguard.config import (
    AppConfig,
    DEFAULT_MAX_TOKENS,
    DEFAULT_MODEL_ID,
    GitHubConfig,
    LoggingConfig,
    OpenRouterConfig,
    ReviewConfig,
    setup_logging,
)


def valid_config(**review_kwargs) -> AppConfig:
    return AppConfig(
        github=GitHubConfig(token="ghs_token"),
        openrouter=OpenRouterConfig(api_key="sk-or-key"),
        review=ReviewConfig(**review_kwargs),
        logging=LoggingConfig(),
    )


class TestFromEnv:
    """Unit tests for AppConfig.from_env."""

    def test_action_inputs(self):
        env = {
            "INPUT_GITHUB_TOKEN": "ghs_token",
            "INPUT_OPEN_ROUTER_KEY": "sk-or-key",
            "INPUT_MODEL_ID": "openai/gpt-4",
            "INPUT_CUSTOM_PROMPT": "Be brief.",
            "INPUT_MAX_TOKENS": "1024",
            "INPUT_REVIEW_LABEL": "ai-review",
            "INPUT_EXCLUDE_FILES": "package-lock.json, *.lock",
            "INPUT_REASONING_EFFORT": "high",
            "INPUT_MINIMUM_SCORE": "60",
        }

        config = AppConfig.from_env(env)

        assert config.github.token == "ghs_token"
        assert config.openrouter.api_key == "sk-or-key"
        assert config.openrouter.model_id == "openai/gpt-4"
        assert config.openrouter.max_tokens == 1024
        assert config.openrouter.reasoning_effort == "high"
        assert config.review.custom_prompt == "Be brief."
        assert config.review.review_label == "ai-review"
        assert config.review.exclude_files == ["package-lock.json", "*.lock"]
        assert config.review.minimum_score == 60
        config.validate()

    def test_defaults(self):
        config = AppConfig.from_env({})

        assert config.openrouter.model_id == DEFAULT_MODEL_ID
        assert config.openrouter.max_tokens == DEFAULT_MAX_TOKENS
        assert config.review.minimum_score == 75
        assert config.review.exclude_files == []
        assert config.review.custom_prompt is None
        assert config.review.review_label is None

    def test_blank_inputs_fall_back(self):
        env = {
            "INPUT_GITHUB_TOKEN": "  ",
            "GITHUB_TOKEN": "from-env",
            "INPUT_MODEL_ID": "",
            "INPUT_MINIMUM_SCORE": "",
        }

        config = AppConfig.from_env(env)

        assert config.github.token == "from-env"
        assert config.openrouter.model_id == DEFAULT_MODEL_ID
        assert config.review.minimum_score == 75

    def test_reasoning_effort_is_lowercased(self):
        env = {
            "INPUT_GITHUB_TOKEN": "ghs_token",
            "INPUT_OPEN_ROUTER_KEY": "sk-or-key",
            "INPUT_REASONING_EFFORT": "HIGH",
        }

        config = AppConfig.from_env(env)

        assert config.openrouter.reasoning_effort == "high"
        config.validate()

    def test_non_numeric_minimum_score(self):
        with pytest.raises(ValueError, match="minimum_score"):
            AppConfig.from_env({"INPUT_MINIMUM_SCORE": "high"})


class TestFromYaml:
    """Unit tests for AppConfig.from_yaml."""

    def test_load(self, tmp_path):
        path = tmp_path / "diffguard.yaml"
        path.write_text(yaml.safe_dump({
            "github": {"token": "ghs_token"},
            "openrouter": {"api_key": "sk-or-key", "model_id": "openai/gpt-4o", "max_tokens": 512},
            "review": {"exclude_files": "*.lock, dist/*", "minimum_score": 80},
            "logging": {"level": "DEBUG"},
        }), encoding="utf-8")

        config = AppConfig.from_yaml(str(path))

        assert config.openrouter.model_id == "openai/gpt-4o"
        assert config.openrouter.max_tokens == 512
        assert config.review.exclude_files == ["*.lock", "dist/*"]
        assert config.review.minimum_score == 80
        assert config.logging.level == "DEBUG"
        config.validate()

    def test_list_patterns(self, tmp_path):
        path = tmp_path / "diffguard.yaml"
        path.write_text("review:\n  exclude_files:\n    - yarn.lock\n    - '*.snap'\n", encoding="utf-8")

        assert AppConfig.from_yaml(str(path)).review.exclude_files == ["yarn.lock", "*.snap"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            AppConfig.from_yaml(str(tmp_path / "missing.yaml"))


class TestValidate:
    """Unit tests for AppConfig.validate."""

    def test_valid(self):
        valid_config().validate()

    def test_missing_credentials(self):
        config = AppConfig(
            github=GitHubConfig(),
            openrouter=OpenRouterConfig(),
            review=ReviewConfig(),
            logging=LoggingConfig(),
        )

        with pytest.raises(ValueError) as exc_info:
            config.validate()

        assert "GitHub token is required" in str(exc_info.value)
        assert "OpenRouter key is required" in str(exc_info.value)

    @pytest.mark.parametrize("score", [-1, 101])
    def test_minimum_score_range(self, score):
        with pytest.raises(ValueError, match="Minimum score"):
            valid_config(minimum_score=score).validate()

    def test_invalid_max_tokens(self):
        config = valid_config()
        config.openrouter.max_tokens = 0
        with pytest.raises(ValueError, match="max_tokens"):
            config.validate()

    def test_invalid_reasoning_effort(self):
        config = valid_config()
        config.openrouter.reasoning_effort = "extreme"
        with pytest.raises(ValueError, match="reasoning effort"):
            config.validate()

    def test_invalid_log_level(self):
        config = valid_config()
        config.logging.level = "LOUD"
        with pytest.raises(ValueError, match="log level"):
            config.validate()

    def test_to_dict_omits_secrets(self):
        data = valid_config(exclude_files=["*.lock"]).to_dict()

        assert "token" not in data["github"]
        assert "api_key" not in data["openrouter"]
        assert data["review"]["exclude_files"] == ["*.lock"]


class TestSetupLogging:
    """Unit tests for logging setup."""

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "diffguard.log"
        root = logging.getLogger()
        before = list(root.handlers)

        try:
            setup_logging(LoggingConfig(level="INFO", file_path=str(log_file)))
            added = [h for h in root.handlers if h not in before]
            assert any(getattr(h, "baseFilename", None) == str(log_file) for h in added)
        finally:
            for handler in list(root.handlers):
                if handler not in before:
                    root.removeHandler(handler)
                    handler.close()
