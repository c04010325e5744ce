"""
GitHub Integration Layer

This module provides GitHub API integration for pull request retrieval
and publishing release notes back to the pull request.
"""

from .client import GitHubClient, GitHubAPIError, RateLimitExceeded
from .parser import PullRequestParser

__all__ = ['GitHubClient', 'GitHubAPIError', 'RateLimitExceeded', 'PullRequestParser']
