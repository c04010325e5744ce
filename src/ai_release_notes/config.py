"""
Configuration Management

Loads action inputs, environment variables and optional YAML files
into typed configuration sections.
"""

import os
import yaml
from dataclasses import dataclass, field
from typing import Optional, Dict, Any
from pathlib import Path
import logging
from logging.handlers import RotatingFileHandler

from .runner import get_input


DEFAULT_MODELS = {
    "gemini": "gemini-2.0-flash-001",
    "openai": "gpt-4o",
}

PUBLISH_MODES = {"body", "comment"}


def _read_input(name: str, default: str = "") -> str:
    return get_input(name) or default


def _optional_float(value: Optional[str]) -> Optional[float]:
    return float(value) if value not in (None, "") else None


def _optional_int(value: Optional[str]) -> Optional[int]:
    return int(value) if value not in (None, "") else None


@dataclass
class GitHubConfig:
    """GitHub API 설정"""
    token: Optional[str] = None
    repository: Optional[str] = None
    api_base_url: str = "https://api.github.com"
    timeout_seconds: int = 30
    max_retries: int = 3

    @property
    def owner_and_repo(self):
        owner, _, repo = (self.repository or "").partition("/")
        return owner, repo


@dataclass
class LLMConfig:
    """Generative model settings"""
    provider: str = "gemini"
    api_key: Optional[str] = None
    model_name: Optional[str] = None
    temperature: Optional[float] = None
    max_output_tokens: Optional[int] = None

    def __post_init__(self):
        self.provider = (self.provider or "gemini").lower()
        if not self.model_name:
            self.model_name = DEFAULT_MODELS.get(self.provider)


@dataclass
class ReleaseNotesConfig:
    """Release note generation settings"""
    pull_request_number: Optional[int] = None
    language: str = "en"
    publish_mode: str = "body"
    dry_run: bool = False

    def __post_init__(self):
        self.language = (self.language or "en").strip()
        self.publish_mode = (self.publish_mode or "body").strip().lower()


@dataclass
class LoggingConfig:
    """로깅 설정"""
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file_path: Optional[str] = None
    max_file_size: int = 10 * 1024 * 1024  # 10MB
    backup_count: int = 5


@dataclass
class AppConfig:
    """전체 애플리케이션 설정"""
    github: GitHubConfig = field(default_factory=GitHubConfig)
    llm: LLMConfig = field(default_factory=LLMConfig)
    release_notes: ReleaseNotesConfig = field(default_factory=ReleaseNotesConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Load settings from action inputs and environment variables."""
        provider = _read_input("llm-provider", os.getenv("LLM_PROVIDER", "gemini")).lower()
        api_key = (
            _read_input("openai-api-key", os.getenv("OPENAI_API_KEY", ""))
            if provider == "openai"
            else _read_input("gemini-api-key", os.getenv("GEMINI_API_KEY", ""))
        )
        pr_number = _read_input("pull-request-number")

        return cls(
            github=GitHubConfig(
                token=_read_input("github-token", os.getenv("GITHUB_TOKEN", "")) or None,
                repository=_read_input("repository", os.getenv("GITHUB_REPOSITORY", "")) or None,
                api_base_url=os.getenv("GITHUB_API_URL", "https://api.github.com"),
                timeout_seconds=int(os.getenv("GITHUB_TIMEOUT", "30")),
                max_retries=int(os.getenv("GITHUB_MAX_RETRIES", "3")),
            ),
            llm=LLMConfig(
                provider=provider,
                api_key=api_key or None,
                model_name=_read_input("model", os.getenv("LLM_MODEL", "")) or None,
                temperature=_optional_float(os.getenv("LLM_TEMPERATURE")),
                max_output_tokens=_optional_int(os.getenv("LLM_MAX_OUTPUT_TOKENS")),
            ),
            release_notes=ReleaseNotesConfig(
                pull_request_number=int(pr_number) if pr_number else None,
                language=_read_input("language", "en"),
                publish_mode=_read_input("publish-mode", "body"),
                dry_run=_read_input("dry-run", os.getenv("DRY_RUN", "false")).lower() == "true",
            ),
            logging=LoggingConfig(
                level=os.getenv("LOG_LEVEL", "INFO"),
                format=os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"),
                file_path=os.getenv("LOG_FILE"),
                max_file_size=int(os.getenv("LOG_MAX_SIZE", str(10 * 1024 * 1024))),
                backup_count=int(os.getenv("LOG_BACKUP_COUNT", "5")),
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

        return cls(
            github=GitHubConfig(**config_data.get('github', {})),
            llm=LLMConfig(**config_data.get('llm', {})),
            release_notes=ReleaseNotesConfig(**config_data.get('release_notes', {})),
            logging=LoggingConfig(**config_data.get('logging', {})),
        )

    def validate(self) -> None:
        """설정 유효성 검사"""
        errors = []

        if not self.github.token:
            errors.append("GitHub token is required")

        owner, repo = self.github.owner_and_repo
        if not owner or not repo:
            errors.append("Repository must be in format 'owner/repo'")

        if self.llm.provider not in DEFAULT_MODELS:
            errors.append(f"Unknown LLM provider: {self.llm.provider}")

        if not self.llm.api_key:
            errors.append(f"API key for provider '{self.llm.provider}' is required")

        number = self.release_notes.pull_request_number
        if number is None or number <= 0:
            errors.append("Pull request number must be a positive integer")

        if self.release_notes.publish_mode not in PUBLISH_MODES:
            errors.append(f"Invalid publish mode: {self.release_notes.publish_mode}")

        valid_log_levels = {'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}
        if self.logging.level.upper() not in valid_log_levels:
            errors.append(f"Invalid log level: {self.logging.level}")

        if errors:
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

    def to_dict(self) -> Dict[str, Any]:
        """설정을 딕셔너리로 변환"""
        return {
            'github': {
                'repository': self.github.repository,
                'api_base_url': self.github.api_base_url,
                'timeout_seconds': self.github.timeout_seconds,
                'max_retries': self.github.max_retries,
                # 보안상 토큰은 제외
            },
            'llm': {
                'provider': self.llm.provider,
                'model_name': self.llm.model_name,
                'temperature': self.llm.temperature,
                'max_output_tokens': self.llm.max_output_tokens,
            },
            'release_notes': {
                'pull_request_number': self.release_notes.pull_request_number,
                'language': self.release_notes.language,
                'publish_mode': self.release_notes.publish_mode,
                'dry_run': self.release_notes.dry_run,
            },
            'logging': {
                'level': self.logging.level,
                'format': self.logging.format,
                'file_path': self.logging.file_path,
                'max_file_size': self.logging.max_file_size,
                'backup_count': self.logging.backup_count,
            },
        }


def configure_logging(config: LoggingConfig) -> None:
    """로깅 설정"""
    logging.basicConfig(
        level=getattr(logging, config.level.upper()),
        format=config.format,
    )

    # 파일 로깅이 설정된 경우 로테이션 설정
    if config.file_path:
        handler = RotatingFileHandler(
            config.file_path,
            maxBytes=config.max_file_size,
            backupCount=config.backup_count,
        )
        handler.setFormatter(logging.Formatter(config.format))
        logging.getLogger().addHandler(handler)
