"""Base review generator implementing the Template Method pattern.

Every provider shares the same algorithm:
    generate() → _build_system_prompt() + _build_user_prompt()
               → _call_api()   ← only this differs per provider
               → sentinel handling

The user prompt asks the model to emit a ``Risk Level: [level]`` line.
prtriage_core.risk depends on that exact shape, so the template is fixed and
not configurable per call.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)

_MAX_TOKENS = 3000
_TEMPERATURE = 0.1


class BaseReviewGenerator(ABC):
    SERVICE_NAME: str = "the review service"
    MAX_TOKENS: int = _MAX_TOKENS
    TEMPERATURE: float = _TEMPERATURE

    @property
    def no_response_message(self) -> str:
        return f"No response from {self.SERVICE_NAME}."

    @property
    def error_message(self) -> str:
        return f"Error getting code review from {self.SERVICE_NAME}."

    def generate(self, title: str, description: str | None, diff: str) -> str:
        """Return a free-text review of the pull request.

        Never raises. A missing completion yields ``no_response_message`` and
        any failure of the call yields ``error_message``; neither contains a
        risk level, so the item is never approved on the back of them.
        """
        system = self._build_system_prompt()
        user = self._build_user_prompt(title, description, diff)
        try:
            raw = self._call_api(system, user)
        except Exception as e:
            logger.error("Error getting code review from %s: %s", self.SERVICE_NAME, e)
            return self.error_message
        if raw is None:
            return self.no_response_message
        return raw.strip()

    @abstractmethod
    def _call_api(self, system_prompt: str, user_prompt: str) -> str | None:
        """Make a single API call and return the completion text.

        Return None when the service answered without a completion. Raise on
        transport or service errors; generate() turns them into a sentinel.
        """

    def _build_system_prompt(self) -> str:
        return "You are a 10x programmer knowledgeable in code reviews."

    def _build_user_prompt(self, title: str, description: str | None, diff: str) -> str:
        return f"""Please assist me with a code review for this PR, focusing on the following aspects:

1. Clearly outline the intentions of the PR.
2. Assess the risk level of the PR based on the impact of the changes, using the following scale: very low, low, medium-low, medium, medium-high, high, very high. Identify and highlight any risky code changes. Output the risk level as Risk Level: [level].
    2.1 If in the PR description, the author mentions that they have tested the changes, lower the risk level.
    2.2 If the PR is small and contains minimal changes, lower the risk level.
    2.3 If the PR contains unit tests or integration tests, lower the risk level.
    2.4 If this PR is for bootcamp tasks under /learning_playground folder, lower the risk level unless some crucial issues.
    2.5 If the PR is related to documentation, lower the risk level.
    2.6 If the PR is about refactoring, code cleanup or adding tests, reduce the risk level by one level unless critical issues are identified.
3. If the PR is missing any context for determining the risk level, highlight it and ask for more information. Also increase the risk level accordingly if the context is extremely crucial for risk level assessment.
4. If the PR contains potential bugs, please highlight them in a designated 'Bug' section.
5. Show only highly relevant suggestions and improvements in the 'Improvement' section.

PR Title:
{title}

PR Description:
{description or ""}

Code Diff:
{diff}
"""  # noqa: E501
