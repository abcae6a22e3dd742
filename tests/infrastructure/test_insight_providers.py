"""Tests for the insight providers.

The Gemini provider talks to an ``httpx.MockTransport``; nothing leaves
the process.
"""

import json

import httpx
import pytest

from bizpulse.application.generate_insight import FALLBACK_MESSAGE, GenerateInsightHandler
from bizpulse.domain.exceptions import ExternalServiceError
from bizpulse.domain.service.insight_provider import BusinessSnapshot
from bizpulse.infrastructure.insight.gemini_provider import GeminiInsightProvider
from bizpulse.infrastructure.insight.prompt import build_prompt
from bizpulse.infrastructure.insight.stub_provider import StubInsightProvider
from tests.fakes import ad, product, sale


def _snapshot() -> BusinessSnapshot:
    return BusinessSnapshot(
        products=[product(id="1", name="Coffee", stock=3)],
        sales=[sale(product_id="1", quantity=2, revenue="40")],
        ads=[ad(amount="15")],
    )


def _provider(handler) -> GeminiInsightProvider:
    return GeminiInsightProvider(
        api_key="test-key",
        model="test-model",
        transport=httpx.MockTransport(handler),
    )


def _reply(*texts: str) -> dict:
    return {"candidates": [{"content": {"parts": [{"text": t} for t in texts]}}]}


class TestPrompt:

    def test_embeds_collections_as_json(self):
        prompt = build_prompt(_snapshot())
        assert '"name": "Coffee"' in prompt
        assert '"productId": "1"' in prompt
        assert '"amount": "15"' in prompt

    def test_asks_for_the_four_sections(self):
        prompt = build_prompt(BusinessSnapshot())
        for heading in ("Profitability", "ROAS", "dead stock", "Growth Plan"):
            assert heading in prompt
        assert "Current Inventory: []" in prompt


class TestGeminiInsightProvider:

    def test_posts_prompt_and_returns_text(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["key"] = request.headers["x-goog-api-key"]
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json=_reply("## Report\n", "1. Act"))

        text = _provider(handler).generate_insight(_snapshot())

        assert text == "## Report\n1. Act"
        assert seen["url"].endswith("/models/test-model:generateContent")
        assert seen["key"] == "test-key"
        assert "Coffee" in seen["body"]["contents"][0]["parts"][0]["text"]

    def test_http_error_raises(self):
        def handler(request):
            return httpx.Response(429, json={"error": {"message": "Quota exceeded"}})

        with pytest.raises(ExternalServiceError, match="Quota exceeded") as exc_info:
            _provider(handler).generate_insight(_snapshot())
        assert exc_info.value.retryable

    def test_client_error_is_not_retryable(self):
        def handler(request):
            return httpx.Response(400, json={"error": {"message": "Bad key"}})

        with pytest.raises(ExternalServiceError) as exc_info:
            _provider(handler).generate_insight(_snapshot())
        assert not exc_info.value.retryable

    def test_network_error_raises(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(ExternalServiceError, match="HTTP request failed"):
            _provider(handler).generate_insight(_snapshot())

    def test_non_json_body_raises(self):
        def handler(request):
            return httpx.Response(200, text="<html>")

        with pytest.raises(ExternalServiceError, match="non-JSON"):
            _provider(handler).generate_insight(_snapshot())

    def test_empty_candidates_raise(self):
        def handler(request):
            return httpx.Response(200, json={"candidates": []})

        with pytest.raises(ExternalServiceError, match="no text"):
            _provider(handler).generate_insight(_snapshot())

    @pytest.mark.parametrize(
        "body",
        [
            {"candidates": [{"content": {"parts": [{"text": None}]}}]},
            {"candidates": [{"content": {"parts": [{"text": 5}]}}]},
            {"candidates": [{"content": ["x"]}]},
            {"candidates": [{"content": {"parts": "x"}}]},
            {"candidates": {"first": {}}},
            ["candidates"],
        ],
        ids=["null-text", "int-text", "content-list", "parts-str", "candidates-dict", "list-body"],
    )
    def test_malformed_reply_raises_external_error(self, body):
        def handler(request):
            return httpx.Response(200, json=body)

        with pytest.raises(ExternalServiceError, match="no text"):
            _provider(handler).generate_insight(_snapshot())

    @pytest.mark.parametrize(
        "body",
        [
            {"candidates": [{"content": {"parts": [{"text": None}]}}]},
            {"candidates": [{"content": ["x"]}]},
        ],
    )
    def test_malformed_reply_falls_back_in_handler(self, body):
        provider = _provider(lambda request: httpx.Response(200, json=body))
        assert GenerateInsightHandler(provider).handle(_snapshot()) == FALLBACK_MESSAGE

    def test_non_string_parts_are_skipped(self):
        body = {"candidates": [{"content": {"parts": [{"text": 5}, {"text": "ok"}, "x"]}}]}
        provider = _provider(lambda request: httpx.Response(200, json=body))
        assert provider.generate_insight(_snapshot()) == "ok"

    @pytest.mark.parametrize(
        "error",
        [
            httpx.InvalidURL("Invalid URL"),
            httpx.HTTPStatusError(
                "bad gateway",
                request=httpx.Request("POST", "https://example.test"),
                response=httpx.Response(502),
            ),
        ],
        ids=["invalid-url", "status-error"],
    )
    def test_any_httpx_error_raises_external_error(self, error):
        def handler(request):
            raise error

        with pytest.raises(ExternalServiceError, match="HTTP request failed"):
            _provider(handler).generate_insight(_snapshot())

    def test_requires_api_key(self):
        with pytest.raises(ValueError):
            GeminiInsightProvider(api_key="")

    def test_close_is_idempotent(self):
        provider = _provider(lambda request: httpx.Response(200, json=_reply("ok")))
        provider.generate_insight(_snapshot())
        provider.close()
        provider.close()


class TestStubInsightProvider:

    def test_summarises_metrics(self):
        text = StubInsightProvider().generate_insight(_snapshot())
        assert "Revenue: $40.00" in text
        assert "Net profit: $5.00" in text
        assert "Restock before you run out: Coffee." in text

    def test_empty_data_still_gives_a_plan(self):
        text = StubInsightProvider().generate_insight(BusinessSnapshot())
        assert "1. Keep logging" in text

    def test_flags_unprofitable_ads(self):
        snapshot = BusinessSnapshot(ads=[ad(amount="100")])
        text = StubInsightProvider().generate_insight(snapshot)
        assert "pause the weakest campaign" in text
        assert "losing money" in text

    def test_is_stateless_across_calls(self):
        provider = StubInsightProvider()
        first = provider.generate_insight(_snapshot())
        assert provider.generate_insight(_snapshot()) == first
        assert not hasattr(provider, "requests")
