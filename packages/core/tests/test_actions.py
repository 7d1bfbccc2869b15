"""Tests for approve/comment writes against GitHub."""

import logging
from unittest.mock import MagicMock

import requests
from github import GithubException

from prtriage_core.gh.actions import APPROVAL_COMMENT, ActionExecutor


def _executor():
    client = MagicMock()
    pull = client.get_repo.return_value.get_pull.return_value
    return ActionExecutor(client), client, pull


class TestApproveAndComment:
    def test_approves_then_comments(self):
        executor, client, pull = _executor()

        assert executor.approve_and_comment("acme", "widgets", 7) is True

        client.get_repo.assert_called_once_with("acme/widgets", lazy=True)
        client.get_repo.return_value.get_pull.assert_called_once_with(7)
        pull.create_review.assert_called_once_with(event="APPROVE")
        pull.create_issue_comment.assert_called_once_with("✅ LGTM!")

    def test_approval_comment_text(self):
        assert APPROVAL_COMMENT == "✅ LGTM!"

    def test_approval_failure_is_swallowed_and_skips_comment(self, caplog):
        executor, _, pull = _executor()
        pull.create_review.side_effect = GithubException(422, {"message": "Can not approve your own pull request"}, {})

        with caplog.at_level(logging.ERROR):
            assert executor.approve_and_comment("acme", "widgets", 7) is False

        pull.create_issue_comment.assert_not_called()
        assert "#7" in caplog.text

    def test_comment_failure_leaves_approval_in_place(self):
        executor, _, pull = _executor()
        pull.create_issue_comment.side_effect = requests.ConnectionError("reset")

        assert executor.approve_and_comment("acme", "widgets", 7) is False

        pull.create_review.assert_called_once_with(event="APPROVE")
        # nothing undoes the approval
        assert not any(name.startswith("dismiss") for name, _, _ in pull.method_calls)

    def test_non_github_error_is_swallowed(self, caplog):
        executor, _, pull = _executor()
        pull.create_review.side_effect = RuntimeError("boom")

        with caplog.at_level(logging.ERROR):
            assert executor.approve_and_comment("acme", "widgets", 7) is False

        pull.create_issue_comment.assert_not_called()
        assert "boom" in caplog.text


class TestComment:
    def test_posts_single_comment(self):
        executor, _, pull = _executor()
        pull.create_issue_comment.return_value.body = "Needs more context."

        assert executor.comment("acme", "widgets", 7, "Needs more context.") is True

        pull.create_issue_comment.assert_called_once_with("Needs more context.")
        pull.create_review.assert_not_called()

    def test_failure_is_logged_and_swallowed(self, caplog):
        executor, _, pull = _executor()
        pull.create_issue_comment.side_effect = GithubException(403, {"message": "Forbidden"}, {})

        with caplog.at_level(logging.ERROR):
            assert executor.comment("acme", "widgets", 7, "hello") is False

        assert "Error commenting on pull request #7" in caplog.text

    def test_unexpected_error_is_swallowed(self, caplog):
        executor, _, pull = _executor()
        pull.create_issue_comment.side_effect = TypeError("unexpected payload")

        with caplog.at_level(logging.ERROR):
            assert executor.comment("acme", "widgets", 7, "hello") is False

        assert "unexpected payload" in caplog.text
