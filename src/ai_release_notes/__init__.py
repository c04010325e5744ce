"""
AI Release Notes

Pull Request 릴리스 노트를 생성하여 PR에 게시하는 GitHub Action
"""

__version__ = "1.0.0"

from .action import ReleaseNotesAction, ActionResult

__all__ = ["ReleaseNotesAction", "ActionResult"]
