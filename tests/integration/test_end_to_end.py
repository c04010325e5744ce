"""
End-to-end tests for the release notes action.

The GitHub API and the generative model are mocked; everything in
between runs for real.
"""

import time
import pytest
from types import SimpleNamespace
from unittest.mock import Mock, patch

from ai_release_notes.action import ReleaseNotesAction
from ai_release_notes.cli import main
from ai_release_notes.config import AppConfig, GitHubConfig, LLMConfig, ReleaseNotesConfig
from ai_release_notes.github.client import GitHubClient
from ai_release_notes.llm.generator import ReleaseNotesGenerator
from ai_release_notes.release.publisher import SECTION_DELIMITER


GENERATED_NOTES = "## 要約\n- null pointer を修正\n\n## 貢献者\n- alice"

PR_DATA = {"number": 7, "title": "Fix crash", "body": "Fixes the crash on start."}
FILES_DATA = [
    {"filename": "src/app.py", "status": "modified", "additions": 3, "deletions": 1, "changes": 4},
]
COMMITS_DATA = [
    {"sha": "a" * 40, "commit": {"message": "fix: null pointer", "author": {"name": "alice", "date": "2024-05-01T00:00:00Z"}}},
    {"sha": "b" * 40, "commit": {"message": "Merge branch x", "author": {"name": "bob", "date": "2024-05-02T00:00:00Z"}}},
    {"sha": "c" * 40, "commit": {"message": "chore: bump deps", "author": {"name": "alice", "date": "2024-05-03T00:00:00Z"}}},
]


def make_config(publish_mode="body", dry_run=False, language="en"):
    return AppConfig(
        github=GitHubConfig(token="ghs_token", repository="octo/repo"),
        llm=LLMConfig(provider="gemini", api_key="key"),
        release_notes=ReleaseNotesConfig(
            pull_request_number=7, language=language, publish_mode=publish_mode, dry_run=dry_run
        ),
    )


def make_github_client(pr_data=None):
    client = Mock(spec=GitHubClient)
    client.get_pull_request.return_value = pr_data or dict(PR_DATA)
    client.get_pull_request_files.return_value = FILES_DATA
    client.get_pull_request_commits.return_value = COMMITS_DATA
    return client


def make_generator():
    model_client = Mock()
    model_client.models.generate_content.return_value = SimpleNamespace(
        text=GENERATED_NOTES,
        usage_metadata=SimpleNamespace(prompt_token_count=300, candidates_token_count=50, total_token_count=350),
    )
    return ReleaseNotesGenerator(LLMConfig(provider="gemini", api_key="key"), client=model_client), model_client


@pytest.fixture
def github_output(tmp_path, monkeypatch):
    output_file = tmp_path / "github_output"
    output_file.write_text("", encoding="utf-8")
    monkeypatch.setenv("GITHUB_OUTPUT", str(output_file))
    return output_file


class TestReleaseNotesAction:
    """Full pipeline runs."""

    def test_body_mode(self, github_output):
        github_client = make_github_client()
        generator, model_client = make_generator()

        result = ReleaseNotesAction(make_config(), github_client=github_client, generator=generator).run()

        assert result.succeeded
        assert result.release_notes == GENERATED_NOTES
        assert result.usage == {'prompt_tokens': 300, 'completion_tokens': 50, 'total_tokens': 350}

        github_client.get_pull_request.assert_called_once_with("octo", "repo", 7)
        github_client.update_pull_request_body.assert_called_once_with(
            "octo", "repo", 7, "Fixes the crash on start." + SECTION_DELIMITER + GENERATED_NOTES
        )
        github_client.create_issue_comment.assert_not_called()

        prompt = model_client.models.generate_content.call_args[1]["contents"]
        assert "Please generate release notes in English." in prompt
        assert "**重要なコミット (2/3):**" in prompt
        assert "- ccccccc: chore: bump deps (by alice)" in prompt
        assert "Merge branch x" not in prompt

        output = github_output.read_text(encoding="utf-8")
        assert output.startswith("release-notes<<")
        assert GENERATED_NOTES in output

    def test_body_mode_replaces_previous_section(self, github_output):
        pr_data = dict(PR_DATA, body="Intro" + SECTION_DELIMITER + "stale notes")
        github_client = make_github_client(pr_data)
        generator, _ = make_generator()

        ReleaseNotesAction(make_config(), github_client=github_client, generator=generator).run()

        github_client.update_pull_request_body.assert_called_once_with(
            "octo", "repo", 7, "Intro" + SECTION_DELIMITER + GENERATED_NOTES
        )

    def test_comment_mode(self, github_output):
        github_client = make_github_client()
        generator, _ = make_generator()

        result = ReleaseNotesAction(
            make_config(publish_mode="comment"), github_client=github_client, generator=generator
        ).run()

        assert result.succeeded
        github_client.create_issue_comment.assert_called_once_with("octo", "repo", 7, GENERATED_NOTES)
        github_client.update_pull_request_body.assert_not_called()

    def test_dry_run_skips_publish(self, github_output):
        github_client = make_github_client()
        generator, _ = make_generator()

        result = ReleaseNotesAction(
            make_config(dry_run=True), github_client=github_client, generator=generator
        ).run()

        assert result.succeeded
        github_client.update_pull_request_body.assert_not_called()
        github_client.create_issue_comment.assert_not_called()
        assert GENERATED_NOTES in github_output.read_text(encoding="utf-8")

    def test_failure_is_reported_without_output(self, github_output, capsys):
        github_client = make_github_client()
        github_client.get_pull_request_commits.side_effect = RuntimeError("connection reset")
        generator, model_client = make_generator()

        result = ReleaseNotesAction(make_config(), github_client=github_client, generator=generator).run()

        assert result.status == "failed"
        assert result.error == "connection reset"
        assert "::error::Action failed with error: connection reset" in capsys.readouterr().out
        model_client.models.generate_content.assert_not_called()
        github_client.update_pull_request_body.assert_not_called()
        assert github_output.read_text(encoding="utf-8") == ""

    def test_publish_failure_aborts_run(self, github_output):
        github_client = make_github_client()
        github_client.update_pull_request_body.side_effect = RuntimeError("forbidden")
        generator, _ = make_generator()

        result = ReleaseNotesAction(make_config(), github_client=github_client, generator=generator).run()

        assert result.status == "failed"
        assert github_output.read_text(encoding="utf-8") == ""

    def test_invalid_request_fails(self, github_output):
        config = make_config()
        config.github.repository = "not-a-repo"

        result = ReleaseNotesAction(config, github_client=make_github_client(), generator=Mock()).run()

        assert result.status == "failed"

    @patch('requests.Session.request')
    def test_with_real_github_client(self, mock_request, github_output):
        def respond(method, url, **kwargs):
            response = Mock()
            response.ok = True
            response.status_code = 200
            response.headers = {"X-RateLimit-Remaining": "4999", "X-RateLimit-Reset": str(int(time.time()) + 3600)}
            if method == "PATCH":
                response.json.return_value = dict(PR_DATA, body=kwargs["json"]["body"])
            elif url.endswith("/files"):
                response.json.return_value = FILES_DATA
            elif url.endswith("/commits"):
                response.json.return_value = COMMITS_DATA
            else:
                response.json.return_value = PR_DATA
            return response

        mock_request.side_effect = respond
        generator, _ = make_generator()

        result = ReleaseNotesAction(make_config(), generator=generator).run()

        assert result.succeeded
        methods = [c[0][0] for c in mock_request.call_args_list]
        assert methods == ["GET", "GET", "GET", "PATCH"]


class TestCommandLine:
    """Command line entry point."""

    def test_invalid_configuration_exits_with_error(self, tmp_path, capsys):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("github:\n  repository: octo/repo\n", encoding="utf-8")

        assert main(["--config", str(config_file)]) == 1
        assert "::error::Action failed with error: Configuration validation failed" in capsys.readouterr().out

    def test_overrides_and_run(self, tmp_path, github_output):
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            "github:\n  token: ghs_token\n  repository: octo/other\n"
            "llm:\n  api_key: key\n"
            "release_notes:\n  pull_request_number: 1\n",
            encoding="utf-8",
        )

        with patch("ai_release_notes.cli.ReleaseNotesAction") as mock_action:
            mock_action.return_value.run.return_value = Mock(succeeded=True)
            exit_code = main([
                "--config", str(config_file),
                "--repository", "octo/repo",
                "--pull-request-number", "7",
                "--publish-mode", "comment",
                "--language", "JA",
                "--dry-run",
            ])

        assert exit_code == 0
        config = mock_action.call_args[0][0]
        assert config.github.repository == "octo/repo"
        assert config.release_notes.pull_request_number == 7
        assert config.release_notes.publish_mode == "comment"
        assert config.release_notes.language == "JA"
        assert config.release_notes.dry_run is True

    def test_failed_run_exits_with_error(self, tmp_path, github_output):
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            "github:\n  token: ghs_token\n  repository: octo/repo\n"
            "llm:\n  api_key: key\n"
            "release_notes:\n  pull_request_number: 1\n",
            encoding="utf-8",
        )

        with patch("ai_release_notes.cli.ReleaseNotesAction") as mock_action:
            mock_action.return_value.run.return_value = Mock(succeeded=False)
            assert main(["--config", str(config_file)]) == 1
