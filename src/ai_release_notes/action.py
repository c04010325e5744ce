"""
Release Notes Action

Main interface that runs the complete pipeline from pull request
retrieval to published release notes.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Optional

from .config import AppConfig
from .github.client import GitHubClient
from .github.parser import PullRequestParser
from .llm.generator import ReleaseNotesGenerator, log_token_usage
from .llm.prompts import PromptBuilder
from .models.pull_request import ReleaseNotesRequest, summarize_changed_files
from .release.classifier import CommitClassifier
from .release.publisher import create_publisher
from .runner import set_failed, set_output


logger = logging.getLogger(__name__)

OUTPUT_NAME = "release-notes"


@dataclass
class ActionResult:
    """Result of a single release notes run."""
    status: str
    pull_request_number: Optional[int]
    publish_mode: str
    release_notes: str = ""
    usage: Dict[str, Optional[int]] = field(default_factory=dict)
    error: Optional[str] = None
    processing_time: float = 0.0

    @property
    def succeeded(self) -> bool:
        return self.status == "completed"


class ReleaseNotesAction:
    """
    Release notes pipeline.

    Runs sequentially:
    1. Fetch PR metadata, changed files and commits
    2. Classify commits
    3. Build the prompt and generate release notes
    4. Publish to the PR and set the action output
    """

    def __init__(
        self,
        config: AppConfig,
        github_client: Optional[GitHubClient] = None,
        generator: Optional[ReleaseNotesGenerator] = None,
    ):
        """
        Initialize release notes action.

        Args:
            config: Application configuration
            github_client: Optional pre-built GitHub client
            generator: Optional pre-built release notes generator
        """
        self.config = config
        self._github_client = github_client
        self._generator = generator

        self.parser = PullRequestParser()
        self.classifier = CommitClassifier()
        self.prompt_builder = PromptBuilder()

    @property
    def github_client(self) -> GitHubClient:
        if self._github_client is None:
            github = self.config.github
            self._github_client = GitHubClient(
                github.token,
                base_url=github.api_base_url,
                timeout_seconds=github.timeout_seconds,
                max_retries=github.max_retries,
            )
        return self._github_client

    @property
    def generator(self) -> ReleaseNotesGenerator:
        if self._generator is None:
            self._generator = ReleaseNotesGenerator(self.config.llm)
        return self._generator

    def run(self) -> ActionResult:
        """
        Run the pipeline once.

        Any error from any stage ends the run and is reported as an
        action failure; nothing is published or output in that case.
        """
        start_time = datetime.now()
        settings = self.config.release_notes

        try:
            request = ReleaseNotesRequest(
                repository=self.config.github.repository or "",
                pull_request_number=settings.pull_request_number or 0,
                language=settings.language,
                publish_mode=settings.publish_mode,
            )
            logger.info(f"Generating release notes for {request.repository}#{request.pull_request_number}")

            pull_request, changed_files, commit_summary = self._collect_pr_data(request)

            prompt = self.prompt_builder.build_release_notes_prompt(
                pull_request, changed_files, commit_summary, request.language
            )
            result = self.generator.generate(prompt)
            log_token_usage(result)
            release_notes = result.text

            if settings.dry_run:
                logger.info("Dry run enabled, skipping publish")
            else:
                publisher = create_publisher(
                    request.publish_mode, self.github_client, request.owner, request.repo
                )
                publisher.publish(pull_request, release_notes)

            set_output(OUTPUT_NAME, release_notes)

            if request.publish_mode == "comment":
                logger.info("Release notes generated and posted as a PR comment successfully!")
            else:
                logger.info("Release notes generated and updated in PR description successfully!")

            return ActionResult(
                status="completed",
                pull_request_number=request.pull_request_number,
                publish_mode=request.publish_mode,
                release_notes=release_notes,
                usage={
                    'prompt_tokens': result.prompt_tokens,
                    'completion_tokens': result.completion_tokens,
                    'total_tokens': result.total_tokens,
                },
                processing_time=(datetime.now() - start_time).total_seconds(),
            )

        except Exception as e:
            set_failed(f"Action failed with error: {e}")
            return ActionResult(
                status="failed",
                pull_request_number=settings.pull_request_number,
                publish_mode=settings.publish_mode,
                error=str(e),
                processing_time=(datetime.now() - start_time).total_seconds(),
            )

    def _collect_pr_data(self, request: ReleaseNotesRequest):
        """Fetch the PR, its changed files and its classified commits."""
        client = self.github_client
        owner, repo, number = request.owner, request.repo, request.pull_request_number

        pr_data = client.get_pull_request(owner, repo, number)
        files_data = client.get_pull_request_files(owner, repo, number)
        commits_data = client.get_pull_request_commits(owner, repo, number)

        pull_request = self.parser.parse_pull_request(pr_data)
        changed_files = self.parser.parse_changed_files(files_data)
        logger.debug(f"Changed files: {summarize_changed_files(changed_files)}")

        commit_summary = self.classifier.classify(commits_data)
        return pull_request, changed_files, commit_summary
