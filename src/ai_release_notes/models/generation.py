"""
Generation Data Models

생성 결과 데이터 모델
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class GenerationResult:
    """Text returned by the generative model together with its token counters"""
    text: str
    model_name: str
    prompt_tokens: Optional[int] = None
    completion_tokens: Optional[int] = None
    total_tokens: Optional[int] = None
    usage_available: bool = False

    def __post_init__(self):
        if not self.text.strip():
            raise ValueError("Generated text cannot be empty")
