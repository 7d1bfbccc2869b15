from __future__ import annotations

from openai import OpenAI

from prtriage_core.providers.base import BaseReviewGenerator


class OpenAIReviewGenerator(BaseReviewGenerator):
    SERVICE_NAME = "OpenAI"
    MODEL = "gpt-3.5-turbo"

    def __init__(
        self,
        api_key: str | None,
        model: str | None = None,
        max_tokens: int | None = None,
        temperature: float | None = None,
    ):
        self.api_key = api_key
        # Built on first use so a missing key fails the call, not start-up.
        self.client: OpenAI | None = None
        self.model = model or self.MODEL
        self.max_tokens = max_tokens if max_tokens is not None else self.MAX_TOKENS
        self.temperature = temperature if temperature is not None else self.TEMPERATURE

    @classmethod
    def from_config(cls, config: dict) -> OpenAIReviewGenerator:
        return cls(
            api_key=config.get("openai_api_key"),
            model=config.get("model"),
            max_tokens=config.get("max_tokens"),
            temperature=config.get("temperature"),
        )

    def _call_api(self, system_prompt: str, user_prompt: str) -> str | None:
        if self.client is None:
            self.client = OpenAI(api_key=self.api_key)
        response = self.client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            max_tokens=self.max_tokens,
            temperature=self.temperature,
        )
        if not response or not response.choices:
            return None
        return getattr(response.choices[0].message, "content", None)
