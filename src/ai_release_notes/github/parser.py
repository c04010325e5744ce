"""
Pull Request Parser

Parses GitHub pull request and file data into structured models.
"""

import logging
from typing import Dict, List

from ..models.pull_request import PullRequest, ChangedFile


logger = logging.getLogger(__name__)


class PullRequestParser:
    """
    Parser for GitHub pull request data.

    Converts GitHub API responses into PullRequest and ChangedFile objects.
    """

    def parse_pull_request(self, pr_data: Dict) -> PullRequest:
        """
        Parse PR data from GitHub API.

        Args:
            pr_data: PR information from GitHub API

        Returns:
            Structured PullRequest object
        """
        logger.debug(f"Parsing PR #{pr_data.get('number')}")

        return PullRequest(
            number=pr_data['number'],
            title=pr_data.get('title') or '',
            body=pr_data.get('body') or '',
        )

    def parse_changed_files(self, files_data: List[Dict]) -> List[ChangedFile]:
        """
        Parse the changed file list of a PR.

        Args:
            files_data: List of file changes from GitHub API

        Returns:
            ChangedFile objects in API order
        """
        files = [self._parse_changed_file(file_data) for file_data in files_data]

        total_additions = sum(f.additions for f in files)
        total_deletions = sum(f.deletions for f in files)
        logger.info(f"Parsed {len(files)} files, +{total_additions}/-{total_deletions}")
        return files

    def _parse_changed_file(self, file_data: Dict) -> ChangedFile:
        return ChangedFile(
            filename=file_data['filename'],
            status=file_data.get('status', 'modified'),
            additions=file_data.get('additions', 0),
            deletions=file_data.get('deletions', 0),
            changes=file_data.get('changes', 0),
        )
