"""
Data Models

AI Release Notes 시스템의 핵심 데이터 모델들
"""

from .pull_request import PullRequest, ChangedFile, ReleaseNotesRequest
from .commit import Commit, CommitSummary
from .generation import GenerationResult

__all__ = [
    "PullRequest",
    "ChangedFile",
    "ReleaseNotesRequest",
    "Commit",
    "CommitSummary",
    "GenerationResult",
]
