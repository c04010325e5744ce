"""
Commit Data Models

커밋 분류 관련 데이터 모델들
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional


@dataclass
class Commit:
    """분류된 개별 커밋"""
    sha: str
    message: str
    full_message: str
    author: str
    date: Optional[datetime]
    is_important: bool = False

    def __post_init__(self):
        """데이터 검증"""
        if len(self.sha) > 7:
            raise ValueError("Commit sha must be abbreviated to 7 characters")

    @property
    def is_merge(self) -> bool:
        return self.message.lower().startswith('merge')

    def format_line(self) -> str:
        return f"{self.sha}: {self.message} (by {self.author})"


@dataclass
class CommitSummary:
    """커밋 목록 집계"""
    all_commits: List[Commit] = field(default_factory=list)
    important_commits: List[Commit] = field(default_factory=list)
    meaningful_commits: List[Commit] = field(default_factory=list)
    contributors: List[str] = field(default_factory=list)

    @property
    def total_commits(self) -> int:
        return len(self.all_commits)

    def __post_init__(self):
        if len(set(self.contributors)) != len(self.contributors):
            raise ValueError("Contributors must be unique")
