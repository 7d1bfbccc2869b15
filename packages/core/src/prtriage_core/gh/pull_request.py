from __future__ import annotations

import json
import logging

import requests
from github import Github, GithubException

from prtriage_core.models import PullRequestDetail, PullRequestSummary

logger = logging.getLogger(__name__)

GITHUB_API_VERSION = "2022-11-28"
DIFF_MEDIA_TYPE = "application/vnd.github.v3.diff"


def _summary_from_issue(issue) -> PullRequestSummary:
    # Search results are issues; their API url is .../repos/<owner>/<repo>/issues/<n>
    return PullRequestSummary(
        identifier=issue.url,
        number=issue.number,
        title=issue.title,
        repository_url=issue.url.rsplit("/issues/", 1)[0],
        html_url=issue.html_url,
    )


def _log_fetch_error(error: Exception) -> None:
    """Log whatever diagnostic context the failed read carries."""
    if isinstance(error, GithubException):
        logger.error("Response data: %s", json.dumps(error.data))
        logger.error("Response status: %s", error.status)
        logger.error("Response headers: %s", json.dumps(dict(error.headers or {})))
    elif isinstance(error, requests.RequestException) and error.response is not None:
        logger.error("Response data: %s", error.response.text)
        logger.error("Response status: %s", error.response.status_code)
        logger.error("Response headers: %s", json.dumps(dict(error.response.headers)))
    elif isinstance(error, requests.RequestException):
        logger.error("No response received: %s", error)
    else:
        logger.error("Error message: %s", error)


class PullRequestSource:
    """Reads the reviewer's queue of open pull requests from GitHub."""

    def __init__(self, client: Github, username: str | None, token: str | None):
        self.client = client
        self.username = username
        self.session = requests.Session()
        self.session.headers.update(
            {
                "Authorization": f"Bearer {token}",
                "Accept": DIFF_MEDIA_TYPE,
                "X-GitHub-Api-Version": GITHUB_API_VERSION,
            }
        )

    def list_assigned(self) -> list[PullRequestSummary]:
        """Return open pull requests assigned to the reviewer, in search order.

        Transport errors are raised, never turned into an empty list: an empty
        result would read as "nothing new" to the triage loop.
        """
        issues = self.client.search_issues("", type="pr", assignee=self.username, state="open")
        return [_summary_from_issue(issue) for issue in issues]

    def fetch_detail(self, owner: str, repo: str, number: int) -> PullRequestDetail | None:
        """Fetch title, description and diff, or None if either read fails."""
        try:
            pull = self.client.get_repo(f"{owner}/{repo}", lazy=True).get_pull(number)
            response = self.session.get(pull.url)
            if response.status_code != 200:
                raise requests.HTTPError(
                    f"GitHub PR diff request: received status code {response.status_code}",
                    response=response,
                )
            return PullRequestDetail(title=pull.title, description=pull.body, diff=response.text)
        except Exception as e:
            # Non-fatal: the item is skipped this cycle and retried on the next.
            _log_fetch_error(e)
            return None
