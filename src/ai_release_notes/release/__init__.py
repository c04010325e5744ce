"""
Release Notes Engine

This module provides commit classification and publishing of
generated release notes to pull requests.
"""

from .classifier import CommitClassifier, IMPORTANT_KEYWORDS
from .publisher import (
    BodySectionPublisher,
    CommentPublisher,
    create_publisher,
    merge_release_notes_section,
)

__all__ = [
    'CommitClassifier',
    'IMPORTANT_KEYWORDS',
    'BodySectionPublisher',
    'CommentPublisher',
    'create_publisher',
    'merge_release_notes_section',
]
