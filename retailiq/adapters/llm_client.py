"""LLM Client — chat completions for SQL generation and insight writing.

Talks to any OpenAI-compatible /chat/completions endpoint over httpx. One
client is created at startup and shared by all requests.

Failures are not swallowed: timeouts, connection errors and non-2xx
responses (auth, rate limit) propagate to the caller unchanged.

Setup:
  Add to .env: OPENAI_API_KEY=sk-...
  Optional:    OPENAI_MODEL, OPENAI_BASE_URL, LLM_TIMEOUT
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

import httpx

from retailiq.config import Settings
from retailiq.errors import LLMNotConfiguredError


class LLMClient:
    def __init__(
        self,
        api_key: str,
        model: str = "gpt-3.5-turbo",
        base_url: str = "https://api.openai.com/v1",
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ):
        self.api_key = api_key
        self.model = model
        self._http = httpx.Client(
            base_url=base_url.rstrip("/"),
            timeout=timeout,
            transport=transport,
        )
        self.call_count = 0
        self.last_used: datetime | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "LLMClient":
        return cls(
            api_key=settings.openai_api_key,
            model=settings.openai_model,
            base_url=settings.openai_base_url,
            timeout=settings.llm_timeout,
        )

    def is_available(self) -> bool:
        return bool(self.api_key)

    def get_status(self) -> dict[str, Any]:
        return {
            "available": self.is_available(),
            "model": self.model,
            "call_count": self.call_count,
            "last_used": self.last_used.isoformat() if self.last_used else None,
        }

    def chat(self, messages: list[dict[str, str]], temperature: float = 0.3, purpose: str = "") -> str:
        """Send a chat completion request and return the top completion's text.

        Args:
            messages: OpenAI-format messages [{"role": ..., "content": ...}]
            temperature: sampling temperature
            purpose: why this call is being made (for logging)
        """
        if not self.is_available():
            raise LLMNotConfiguredError("OPENAI_API_KEY is not configured")

        print(f"  [llm_client] {purpose or 'chat'} -> {self.model}")
        resp = self._http.post(
            "/chat/completions",
            headers={
                "Authorization": f"Bearer {self.api_key}",
                "Content-Type": "application/json",
            },
            json={
                "model": self.model,
                "messages": messages,
                "temperature": temperature,
            },
        )
        resp.raise_for_status()
        self.last_used = datetime.utcnow()
        self.call_count += 1
        return resp.json()["choices"][0]["message"]["content"]

    def close(self) -> None:
        self._http.close()
