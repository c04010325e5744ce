"""
Prompt Builder

Builds the release notes prompt from pull request metadata and
classified commits.
"""

import logging
from typing import Dict, List

from ..models.commit import Commit, CommitSummary
from ..models.pull_request import PullRequest, ChangedFile


logger = logging.getLogger(__name__)


LANGUAGE_INSTRUCTIONS = {
    "en": "Please generate release notes in English.",
    "ja": "リリースノートを日本語で生成してください。",
    "es": "Por favor, genere notas de lanzamiento en español.",
    "fr": "Veuillez générer des notes de version en français.",
    "de": "Bitte erstellen Sie Release-Notizen auf Deutsch.",
}

FALLBACK_LANGUAGE = "ja"


class PromptBuilder:
    """
    Builds the prompt sent to the generative model.

    The output is deterministic for identical inputs. Only the leading
    instruction sentence depends on the language code.
    """

    def __init__(self):
        self.templates = self._load_templates()

    def language_instruction(self, language: str) -> str:
        return LANGUAGE_INSTRUCTIONS.get(language, LANGUAGE_INSTRUCTIONS[FALLBACK_LANGUAGE])

    def build_release_notes_prompt(
        self,
        pull_request: PullRequest,
        changed_files: List[ChangedFile],
        commit_summary: CommitSummary,
        language: str,
    ) -> str:
        """
        Build the complete release notes prompt.

        Args:
            pull_request: PR metadata
            changed_files: Changed files of the PR (not rendered in the prompt)
            commit_summary: Classified commits
            language: Language code for the generated notes

        Returns:
            Complete prompt string
        """
        logger.debug(
            f"Building release notes prompt for PR #{pull_request.number} "
            f"({len(changed_files)} files, language={language})"
        )

        template = self.templates
        sections = [
            "",
            self.language_instruction(language),
            "",
            template["intro"],
            "",
            template["rules"],
            "",
            template["contributors_header"],
            self._format_contributors(commit_summary.contributors),
            "",
            template["important_commits_header"].format(
                important=len(commit_summary.important_commits),
                total=commit_summary.total_commits,
            ),
            self._format_commits(commit_summary.important_commits),
            "",
            template["all_commits_header"],
            self._format_commits(commit_summary.meaningful_commits),
            "",
            template["output_structure"],
            "",
            template["closing"],
            "",
        ]
        return "\n".join(sections)

    def _format_contributors(self, contributors: List[str]) -> str:
        return "\n".join(f"- {name}" for name in contributors)

    def _format_commits(self, commits: List[Commit]) -> str:
        return "\n".join(f"- {commit.format_line()}" for commit in commits)

    def _load_templates(self) -> Dict[str, str]:
        """Load the fixed prompt sections."""
        return {
            "intro": "以下のプルリクエスト情報に基づいて、具体的なリリースノートをマークダウン形式で生成してください：",

            "rules": """**厳守事項：**
- バージョン番号、バージョン表記、[バージョン番号を挿入]などは一切含めないでください
- 「このリリースでは」「ユーザー体験の大幅な向上」などの抽象的な表現は使用しないでください
- プレースホルダーやテンプレート文字列は絶対に使用しないでください
- 具体的な変更内容のみを記述してください""",

            "contributors_header": "**貢献者:**",

            "important_commits_header": "**重要なコミット ({important}/{total}):**",

            "all_commits_header": "**すべてのコミット:**",

            "output_structure": """上記のコミット情報を基に、以下の構成でリリースノートを作成してください：

## 要約
（変更を元にプルリクエストの概要を記述）

## 新機能
（該当するコミットがある場合のみ、具体的な機能を記述）

## バグ修正
（該当するコミットがある場合のみ、修正内容を記述）

## 改善
（該当するコミットがある場合のみ、改善内容を記述）

## 破壊的変更
（該当するコミットがある場合のみ、変更内容を記述）

## 貢献者
（貢献者一覧）""",

            "closing": "抽象的な表現は避け、コミットメッセージから読み取れる具体的な変更内容のみを記述してください。",
        }
