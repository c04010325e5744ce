#!/usr/bin/env python3
"""
Commit Summary Demo

Fetches a pull request, classifies its commits and prints the prompt
that would be sent to the model. Nothing is generated or published.

Usage:
    python examples/commit_summary_demo.py <owner> <repo> <pr_number> [language]

Example:
    GITHUB_TOKEN=... python examples/commit_summary_demo.py octo repo 42 ja
"""

import sys
import os
import logging

from ai_release_notes.github.client import GitHubClient, GitHubAPIError
from ai_release_notes.github.parser import PullRequestParser
from ai_release_notes.llm.prompts import PromptBuilder
from ai_release_notes.release.classifier import CommitClassifier


def main():
    """Main demo function."""
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if len(sys.argv) not in (4, 5):
        print("Usage: python commit_summary_demo.py <owner> <repo> <pr_number> [language]")
        sys.exit(1)

    owner, repo = sys.argv[1], sys.argv[2]
    try:
        pr_number = int(sys.argv[3])
    except ValueError:
        print("Error: PR number must be an integer")
        sys.exit(1)
    language = sys.argv[4] if len(sys.argv) == 5 else "en"

    token = os.getenv('GITHUB_TOKEN')
    if not token:
        print("Error: GitHub token not found. Set GITHUB_TOKEN environment variable.")
        sys.exit(1)

    client = GitHubClient(token)
    parser = PullRequestParser()

    try:
        pull_request = parser.parse_pull_request(client.get_pull_request(owner, repo, pr_number))
        changed_files = parser.parse_changed_files(client.get_pull_request_files(owner, repo, pr_number))
        commits = client.get_pull_request_commits(owner, repo, pr_number)
    except GitHubAPIError as e:
        print(f"GitHub API error: {e}")
        sys.exit(1)

    summary = CommitClassifier().classify(commits)

    print(f"\n📋 {pull_request.title} (#{pull_request.number})")
    print(f"   Files changed: {len(changed_files)}")
    print(f"   Commits: {summary.total_commits} ({len(summary.important_commits)} important)")
    print(f"   Contributors: {', '.join(summary.contributors)}")

    print("\n--- Prompt ---")
    print(PromptBuilder().build_release_notes_prompt(pull_request, changed_files, summary, language))


if __name__ == "__main__":
    main()
