"""Pull request data models shared by the source, the actions and the triage loop."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PullRequestSummary:
    """One entry of the assigned-pull-requests search.

    ``identifier`` is the canonical API URL of the pull request's issue
    resource. It is stable across polls and is what the dedupe tracker keys on.
    """

    identifier: str
    number: int
    title: str
    repository_url: str  # https://api.github.com/repos/<owner>/<repo>
    html_url: str

    @property
    def owner(self) -> str:
        return self.repository_url.rstrip("/").split("/")[-2]

    @property
    def repo(self) -> str:
        return self.repository_url.rstrip("/").split("/")[-1]


@dataclass(frozen=True)
class PullRequestDetail:
    """Title, description and raw diff of a single pull request."""

    title: str
    description: str | None
    diff: str
