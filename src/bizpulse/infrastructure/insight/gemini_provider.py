"""
Gemini Insight Provider

Sends the report prompt to the Gemini ``generateContent`` REST endpoint
and returns the model's text untouched.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from bizpulse.domain.exceptions import ExternalServiceError
from bizpulse.domain.service.insight_provider import BusinessSnapshot, InsightProvider
from bizpulse.infrastructure.insight.prompt import build_prompt

logger = logging.getLogger(__name__)

GEMINI_API_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_MODEL = "gemini-1.5-pro"


class GeminiInsightProvider(InsightProvider):
    """
    Gemini API provider for the business-coach report.

    The HTTP client is created lazily and reused; call ``close()`` when
    done. Pass ``transport`` to swap the network layer (tests).
    """

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        timeout: float = 60.0,
        base_url: str = GEMINI_API_BASE_URL,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        if not api_key:
            raise ValueError("Gemini API key is required")
        self.model = model
        self.timeout = timeout
        self.base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._transport = transport
        self._client: httpx.Client | None = None

    def _get_client(self) -> httpx.Client:
        """Get or create HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(
                timeout=self.timeout,
                headers={"Content-Type": "application/json"},
                transport=self._transport,
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            self._client.close()

    def generate_insight(self, snapshot: BusinessSnapshot) -> str:
        url = f"{self.base_url}/models/{self.model}:generateContent"
        payload: dict[str, Any] = {
            "contents": [{"role": "user", "parts": [{"text": build_prompt(snapshot)}]}],
        }

        try:
            response = self._get_client().post(
                url, json=payload, headers={"x-goog-api-key": self._api_key}
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(f"Gemini request failed: {e}")
            raise ExternalServiceError(f"HTTP request failed: {e}", retryable=True) from e

        if response.status_code >= 400:
            raise ExternalServiceError(
                f"Gemini returned HTTP {response.status_code}: {self._error_message(response)}",
                retryable=response.status_code >= 500 or response.status_code == 429,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise ExternalServiceError("Gemini returned a non-JSON body") from e

        text = self._extract_text(data)
        if not text:
            raise ExternalServiceError("Gemini response contained no text")

        logger.info(
            "Generated insight via Gemini",
            extra={"model": self.model, "chars": len(text)},
        )
        return text

    @staticmethod
    def _extract_text(data: Any) -> str:
        """
        Concatenate the text parts of the first candidate.

        Any shape other than ``{"candidates": [{"content": {"parts": [...]}}]}``
        yields an empty string; parts whose ``text`` is not a string are skipped.
        """
        if not isinstance(data, dict):
            return ""
        candidates = data.get("candidates")
        if not isinstance(candidates, list) or not candidates:
            return ""
        first = candidates[0]
        content = first.get("content") if isinstance(first, dict) else None
        if not isinstance(content, dict):
            return ""
        parts = content.get("parts")
        if not isinstance(parts, list):
            return ""
        texts = []
        for part in parts:
            text = part.get("text") if isinstance(part, dict) else None
            if isinstance(text, str):
                texts.append(text)
        return "".join(texts)

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            error = response.json().get("error", {})
        except (ValueError, AttributeError):
            return response.text[:200]
        if isinstance(error, dict):
            return error.get("message", "Unknown error")
        return "Unknown error"
