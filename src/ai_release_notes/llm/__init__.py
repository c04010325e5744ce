"""
LLM Release Notes Engine

This module provides prompt building and hosted-model generation
of pull request release notes.
"""

from .prompts import PromptBuilder
from .generator import ReleaseNotesGenerator, GenerationError, log_token_usage

__all__ = ['PromptBuilder', 'ReleaseNotesGenerator', 'GenerationError', 'log_token_usage']
