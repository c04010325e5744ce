"""
Commit Classifier

Labels pull request commits as important by keyword matching,
filters merge commits and collects contributors.
"""

import logging
from datetime import datetime
from typing import Dict, Iterable, List, Optional, Sequence

from ..models.commit import Commit, CommitSummary


logger = logging.getLogger(__name__)


IMPORTANT_KEYWORDS = (
    # features
    'feat', 'feature', 'add', 'implement', 'create',
    # fixes
    'fix', 'bug', 'patch', 'resolve', 'solve',
    # breaking changes
    'break', 'breaking', 'major', 'remove', 'delete',
    # refactoring
    'refactor', 'improve', 'optimize', 'enhance',
    # security
    'security', 'vulnerability', 'critical',
    # release
    'release', 'version', 'bump',
    # docs
    'docs', 'documentation', 'readme',
    # tests
    'test', 'testing', 'spec',
    # config
    'config', 'configuration', 'setup',
)

SHORT_SHA_LENGTH = 7


class CommitClassifier:
    """
    Classifies raw GitHub commit records.

    A commit is important when its full message contains any of the
    keywords, compared case-insensitively.
    """

    def __init__(self, keywords: Sequence[str] = IMPORTANT_KEYWORDS):
        self.keywords = tuple(k.lower() for k in keywords)

    def is_important(self, message: str) -> bool:
        message_lower = message.lower()
        return any(keyword in message_lower for keyword in self.keywords)

    def classify(self, raw_commits: Iterable[Dict]) -> CommitSummary:
        """
        Classify commits in the order the host returned them.

        Args:
            raw_commits: Commit records from the GitHub pulls/commits endpoint

        Returns:
            CommitSummary with important, non-merge and contributor views
        """
        commits = [self._parse_commit(raw) for raw in raw_commits]

        important = [c for c in commits if c.is_important]
        meaningful = [c for c in commits if not c.is_merge]

        contributors: List[str] = []
        seen = set()
        for commit in commits:
            if commit.author not in seen:
                seen.add(commit.author)
                contributors.append(commit.author)

        logger.info(
            f"Classified {len(commits)} commits: {len(important)} important, "
            f"{len(commits) - len(meaningful)} merge, {len(contributors)} contributors"
        )

        return CommitSummary(
            all_commits=commits,
            important_commits=important,
            meaningful_commits=meaningful,
            contributors=contributors,
        )

    def _parse_commit(self, raw: Dict) -> Commit:
        git_commit = raw.get('commit') or {}
        author = git_commit.get('author') or {}
        message = git_commit.get('message') or ''

        commit = Commit(
            sha=(raw.get('sha') or '')[:SHORT_SHA_LENGTH],
            message=message.split('\n')[0],
            full_message=message,
            author=author.get('name') or 'unknown',
            date=self._parse_date(author.get('date')),
            is_important=self.is_important(message),
        )
        logger.debug(f"{commit.sha} important={commit.is_important}")
        return commit

    def _parse_date(self, value: Optional[str]) -> Optional[datetime]:
        if not value:
            return None
        return datetime.fromisoformat(value.replace('Z', '+00:00'))
