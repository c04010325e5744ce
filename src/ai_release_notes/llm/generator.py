"""
Release Notes Generator

Sends the release notes prompt to a hosted generative model and
returns the generated text with its token usage.
"""

import logging
from typing import Dict, Optional

from google import genai
from google.genai import types
from openai import OpenAI

from ..config import LLMConfig
from ..models.generation import GenerationResult


logger = logging.getLogger(__name__)


class GenerationError(Exception):
    """Generative model returned no usable text"""


class GeminiBackend:
    """Gemini models through the google-genai SDK."""

    def __init__(self, config: LLMConfig, client=None):
        self.config = config
        self.client = client or genai.Client(api_key=config.api_key)

    def generate(self, prompt: str) -> GenerationResult:
        response = self.client.models.generate_content(
            model=self.config.model_name,
            contents=prompt,
            config=types.GenerateContentConfig(
                temperature=self.config.temperature,
                max_output_tokens=self.config.max_output_tokens,
            ),
        )

        text = response.text or ""
        if not text.strip():
            raise GenerationError(f"{self.config.model_name} returned an empty response")

        usage = response.usage_metadata
        return GenerationResult(
            text=text,
            model_name=self.config.model_name,
            prompt_tokens=getattr(usage, "prompt_token_count", None),
            completion_tokens=getattr(usage, "candidates_token_count", None),
            total_tokens=getattr(usage, "total_token_count", None),
            usage_available=usage is not None,
        )


class OpenAIBackend:
    """OpenAI chat models."""

    def __init__(self, config: LLMConfig, client=None):
        self.config = config
        self.client = client or OpenAI(api_key=config.api_key)

    def generate(self, prompt: str) -> GenerationResult:
        kwargs = {}
        if self.config.temperature is not None:
            kwargs["temperature"] = self.config.temperature
        if self.config.max_output_tokens is not None:
            kwargs["max_tokens"] = self.config.max_output_tokens

        response = self.client.chat.completions.create(
            model=self.config.model_name,
            messages=[{"role": "user", "content": prompt}],
            **kwargs,
        )

        text = (response.choices[0].message.content or "") if response.choices else ""
        if not text.strip():
            raise GenerationError(f"{self.config.model_name} returned an empty response")

        usage = response.usage
        return GenerationResult(
            text=text,
            model_name=self.config.model_name,
            prompt_tokens=getattr(usage, "prompt_tokens", None),
            completion_tokens=getattr(usage, "completion_tokens", None),
            total_tokens=getattr(usage, "total_tokens", None),
            usage_available=usage is not None,
        )


BACKENDS = {
    "gemini": GeminiBackend,
    "openai": OpenAIBackend,
}


class ReleaseNotesGenerator:
    """
    Generates release notes with the configured provider.

    One content-generation call per run; retries are left to the
    provider SDK.
    """

    def __init__(self, config: LLMConfig, client=None):
        """
        Initialize release notes generator.

        Args:
            config: Provider, model and sampling settings
            client: Optional pre-built SDK client
        """
        if config.provider not in BACKENDS:
            raise ValueError(f"Unknown LLM provider: {config.provider}")

        self.config = config
        logger.info(f"Using model: {self.get_model_info()}")
        self.backend = BACKENDS[config.provider](config, client=client)

    def generate(self, prompt: str) -> GenerationResult:
        """
        Generate release notes for a prompt.

        Raises:
            GenerationError: When the model returns no text
        """
        logger.info(f"Requesting release notes ({len(prompt)} prompt characters)")
        result = self.backend.generate(prompt)
        logger.info(f"Received {len(result.text)} characters from {result.model_name}")
        return result

    def get_model_info(self) -> Dict[str, Optional[object]]:
        return {
            'provider': self.config.provider,
            'model_name': self.config.model_name,
            'temperature': self.config.temperature,
            'max_output_tokens': self.config.max_output_tokens,
        }


def log_token_usage(result: GenerationResult) -> None:
    """Log the token counters reported by the model, when available."""
    if not result.usage_available:
        logger.info("Token usage information not available")
        return

    def _fmt(value):
        return value if value else "N/A"

    logger.info("=== Token Usage Information ===")
    logger.info(f"Prompt tokens: {_fmt(result.prompt_tokens)}")
    logger.info(f"Completion tokens: {_fmt(result.completion_tokens)}")
    logger.info(f"Total tokens: {_fmt(result.total_tokens)}")
    logger.info("===============================")
