"""
Release Notes Publisher

Writes generated release notes back to a pull request, either as a
marked section of the description or as a new comment.
"""

import logging
import re
from typing import Dict

from ..github.client import GitHubClient
from ..models.pull_request import PullRequest


logger = logging.getLogger(__name__)


SECTION_DELIMITER = "\n\n---\n\n## 🚀 Release Notes\n\n"
SECTION_PATTERN = re.compile(re.escape(SECTION_DELIMITER) + r".*\Z", re.DOTALL)


def merge_release_notes_section(body: str, release_notes: str) -> str:
    """
    Replace the release notes section of a PR body, or append it.

    Everything from the first delimiter to the end of the body is the
    section; text before it is kept as is.
    """
    body = body or ''
    section = SECTION_DELIMITER + release_notes

    if SECTION_PATTERN.search(body):
        return SECTION_PATTERN.sub(lambda _: section, body, count=1)
    return body + section


class ReleaseNotesPublisher:
    """Base class for the publish channels."""

    mode = ""

    def __init__(self, client: GitHubClient, owner: str, repo: str):
        self.client = client
        self.owner = owner
        self.repo = repo

    def publish(self, pull_request: PullRequest, release_notes: str) -> Dict:
        raise NotImplementedError


class BodySectionPublisher(ReleaseNotesPublisher):
    """Keeps one release notes section at the end of the PR description."""

    mode = "body"

    def publish(self, pull_request: PullRequest, release_notes: str) -> Dict:
        new_body = merge_release_notes_section(pull_request.body, release_notes)
        replaced = SECTION_PATTERN.search(pull_request.body or '') is not None
        logger.info(
            f"{'Replacing' if replaced else 'Appending'} release notes section "
            f"in PR #{pull_request.number}"
        )

        result = self.client.update_pull_request_body(
            self.owner, self.repo, pull_request.number, new_body
        )
        pull_request.body = new_body
        return result


class CommentPublisher(ReleaseNotesPublisher):
    """Posts the release notes as a new PR comment."""

    mode = "comment"

    def publish(self, pull_request: PullRequest, release_notes: str) -> Dict:
        logger.info(f"Posting release notes comment on PR #{pull_request.number}")
        return self.client.create_issue_comment(
            self.owner, self.repo, pull_request.number, release_notes
        )


PUBLISHERS = {
    BodySectionPublisher.mode: BodySectionPublisher,
    CommentPublisher.mode: CommentPublisher,
}


def create_publisher(mode: str, client: GitHubClient, owner: str, repo: str) -> ReleaseNotesPublisher:
    """Build the publisher for a publish mode ("body" or "comment")."""
    try:
        publisher_class = PUBLISHERS[mode]
    except KeyError:
        raise ValueError(f"Unknown publish mode: {mode}") from None
    return publisher_class(client, owner, repo)
