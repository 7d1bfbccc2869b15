from __future__ import annotations

import logging

from github import Github
from rich.console import Console

console = Console()
logger = logging.getLogger(__name__)

APPROVAL_COMMENT = "✅ LGTM!"


class ActionExecutor:
    """Side-effecting writes against a pull request.

    Failures are logged and swallowed. Nothing is retried or rolled back, so an
    approval whose follow-up comment fails stays approved without a comment.
    """

    def __init__(self, client: Github):
        self.client = client

    def _get_pull(self, owner: str, repo: str, number: int):
        return self.client.get_repo(f"{owner}/{repo}", lazy=True).get_pull(number)

    def approve_and_comment(self, owner: str, repo: str, number: int) -> bool:
        try:
            pull = self._get_pull(owner, repo, number)
            pull.create_review(event="APPROVE")
            pull.create_issue_comment(APPROVAL_COMMENT)
        except Exception as e:
            # Write failures never end the cycle; the item stays recorded.
            logger.error("Error approving or commenting on pull request #%d: %s", number, e)
            return False
        console.print(f"[bright_green]Approve PR #{number}: {APPROVAL_COMMENT}[/bright_green]")
        return True

    def comment(self, owner: str, repo: str, number: int, text: str) -> bool:
        try:
            created = self._get_pull(owner, repo, number).create_issue_comment(text)
        except Exception as e:
            logger.error("Error commenting on pull request #%d: %s", number, e)
            return False
        logger.info("Commented on PR #%d: %s", number, created.body)
        return True
