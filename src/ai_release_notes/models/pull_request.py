"""
Pull Request Data Models

Pull Request 관련 데이터 모델들
"""

from dataclasses import dataclass
from typing import List
from pydantic import BaseModel, field_validator


VALID_FILE_STATUSES = {
    'added', 'modified', 'removed', 'renamed', 'copied', 'changed', 'unchanged'
}


@dataclass
class ChangedFile:
    """PR에서 변경된 파일"""
    filename: str
    status: str
    additions: int
    deletions: int
    changes: int

    def __post_init__(self):
        """데이터 검증"""
        if self.status not in VALID_FILE_STATUSES:
            raise ValueError(f"Invalid status: {self.status}")
        if self.additions < 0 or self.deletions < 0 or self.changes < 0:
            raise ValueError("Addition, deletion and change counts must be non-negative")


@dataclass
class PullRequest:
    """Pull Request 메타데이터"""
    number: int
    title: str
    body: str = ""

    def __post_init__(self):
        """데이터 검증"""
        if self.number <= 0:
            raise ValueError("PR number must be positive")
        if self.body is None:
            self.body = ""


def summarize_changed_files(files: List[ChangedFile]) -> dict:
    """Totals across the changed files of a pull request."""
    return {
        'files': len(files),
        'additions': sum(f.additions for f in files),
        'deletions': sum(f.deletions for f in files),
        'changes': sum(f.changes for f in files),
    }


class ReleaseNotesRequest(BaseModel):
    """Validated request for a single release-notes run"""
    repository: str
    pull_request_number: int
    language: str = "en"
    publish_mode: str = "body"

    @field_validator('repository')
    @classmethod
    def validate_repository(cls, v):
        owner, _, repo = v.partition('/')
        if not owner or not repo:
            raise ValueError('Repository must be in format "owner/repo"')
        return v

    @field_validator('pull_request_number')
    @classmethod
    def validate_pull_request_number(cls, v):
        if v <= 0:
            raise ValueError('PR number must be positive')
        return v

    @field_validator('publish_mode')
    @classmethod
    def validate_publish_mode(cls, v):
        if v not in {'body', 'comment'}:
            raise ValueError('Publish mode must be "body" or "comment"')
        return v

    @property
    def owner(self) -> str:
        return self.repository.split('/', 1)[0]

    @property
    def repo(self) -> str:
        return self.repository.split('/', 1)[1]
