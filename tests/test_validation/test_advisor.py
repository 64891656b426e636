"""Unit tests for the advisory reviewer (kickoff.validation.advisor).

Tests cover:
- format_config_for_review
- parse_advisory_response (plain JSON, fenced JSON, prose, per-issue validation,
  confidence defaults and clamping)
- failed_review
- format_advisory_result
- OllamaAdvisor.review: server and model checks, mocked Ollama server, stub client
"""

from __future__ import annotations

import json
from unittest.mock import AsyncMock

import httpx
import pytest

from kickoff.ollama_client import OllamaClient, OllamaResponse
from kickoff.validation import (
    AdvisoryIssue,
    AdvisoryResult,
    IssueSeverity,
    OllamaAdvisor,
    SecondaryValidator,
    format_advisory_result,
    parse_advisory_response,
    validate_stack,
)
from kickoff.validation.advisor import (
    REPORTED_CONFIDENCE_DEFAULT,
    SYSTEM_PROMPT,
    UNPARSEABLE_CONFIDENCE,
    failed_review,
    format_config_for_review,
)

pytestmark = pytest.mark.unit

_REVIEW = {
    "analysis": "Looks reasonable",
    "issues": [
        {
            "severity": "error",
            "title": "Edge mismatch",
            "description": "Prisma on D1",
            "suggestion": "Use Drizzle",
        },
        {"severity": "info", "title": "Note", "description": "Consider caching"},
    ],
    "recommendations": ["Add rate limiting"],
    "confidence": 0.9,
}


class TestFormatConfigForReview:
    def test_contains_every_section(self, saas_config):
        text = format_config_for_review(saas_config)
        assert text.startswith("Project: my-saas\n")
        assert "Type: nextjs" in text
        assert "  Provider: supabase" in text
        assert "  ORM: drizzle" in text
        assert "  Domain: not set" in text
        assert text.endswith("Design System: True")


class TestParseAdvisoryResponse:
    def test_plain_json(self):
        result = parse_advisory_response(json.dumps(_REVIEW), provider="test")
        assert result.success is True
        assert result.provider == "test"
        assert result.confidence == 0.9
        assert [issue.severity for issue in result.issues] == [
            IssueSeverity.ERROR,
            IssueSeverity.INFO,
        ]
        assert result.recommendations == ["Add rate limiting"]

    def test_markdown_fence_tolerated(self):
        text = "```json\n" + json.dumps(_REVIEW) + "\n```"
        result = parse_advisory_response(text)
        assert result.confidence == 0.9
        assert len(result.issues) == 2

    def test_bare_fence_tolerated(self):
        text = "```\n" + json.dumps({"confidence": 0.4}) + "\n```"
        assert parse_advisory_response(text).confidence == 0.4

    def test_prose_falls_back(self):
        result = parse_advisory_response("The stack looks fine to me.")
        assert result.success is True
        assert result.issues == []
        assert result.confidence == UNPARSEABLE_CONFIDENCE
        assert result.analysis == "The stack looks fine to me."

    def test_non_object_json_falls_back(self):
        result = parse_advisory_response("[1, 2, 3]")
        assert result.confidence == UNPARSEABLE_CONFIDENCE

    def test_unknown_severity_read_as_warning(self):
        reply = {
            "issues": [
                {"severity": "error", "title": "Edge mismatch", "description": "Prisma on D1"},
                {"severity": "critical", "title": "Cold starts", "description": "Slow"},
            ],
            "confidence": 0.95,
        }
        result = parse_advisory_response(json.dumps(reply))
        assert result.confidence == 0.95
        assert [issue.severity for issue in result.issues] == [
            IssueSeverity.ERROR,
            IssueSeverity.WARNING,
        ]
        assert result.issues[1].title == "Cold starts"

    def test_severity_case_insensitive(self):
        reply = {"issues": [{"severity": "ERROR", "title": "x"}], "confidence": 0.9}
        assert parse_advisory_response(json.dumps(reply)).issues[0].severity == IssueSeverity.ERROR

    def test_malformed_issue_skipped_alone(self):
        reply = {
            "issues": ["not an object", {"title": ["bad"]}, {"severity": "error", "title": "Real"}],
            "confidence": 0.9,
        }
        result = parse_advisory_response(json.dumps(reply))
        assert [issue.title for issue in result.issues] == ["Real"]
        assert result.confidence == 0.9

    def test_missing_confidence_defaults(self):
        result = parse_advisory_response(json.dumps({"issues": []}))
        assert result.confidence == REPORTED_CONFIDENCE_DEFAULT
        assert REPORTED_CONFIDENCE_DEFAULT == 0.8

    def test_non_numeric_confidence_defaults(self):
        result = parse_advisory_response('{"confidence": "high"}')
        assert result.confidence == REPORTED_CONFIDENCE_DEFAULT

    @pytest.mark.asyncio
    async def test_error_without_confidence_blocks(self, saas_config):
        reply = {"issues": [{"severity": "error", "title": "Broken", "description": "No deploy"}]}

        class _Advisor:
            async def review(self, config):
                return parse_advisory_response(json.dumps(reply), provider="stub")

        result = await validate_stack(saas_config, advisor=_Advisor())
        assert result.advisory_result.confidence == 0.8
        assert result.valid is False

    def test_confidence_clamped(self):
        assert parse_advisory_response('{"confidence": 7}').confidence == 1.0
        assert parse_advisory_response('{"confidence": -2}').confidence == 0.0


class TestFailedReview:
    def test_shape(self):
        result = failed_review("server down", provider="ollama:x")
        assert result.success is False
        assert result.confidence == 0.0
        assert result.analysis == "Advisory validation failed: server down"
        assert len(result.issues) == 1
        issue = result.issues[0]
        assert issue.severity == IssueSeverity.WARNING
        assert issue.title == "Advisory Validation Failed"
        assert issue.suggestion == "Falling back to rule-based validation only"


class TestFormatAdvisoryResult:
    def test_failure(self):
        text = format_advisory_result(failed_review("nope"))
        assert text == "⚠️  Advisory Validation: Advisory validation failed: nope"

    def test_sections(self):
        result = parse_advisory_response(json.dumps(_REVIEW), provider="ollama:llama3.1:8b")
        text = format_advisory_result(result)
        assert "ollama:llama3.1:8b (90% confidence)" in text
        assert "❌ Critical Issues:" in text
        assert "  • Edge mismatch: Prisma on D1" in text
        assert "    💡 Use Drizzle" in text
        assert "ℹ️  Notes:" in text
        assert "💡 Recommendations:" in text
        assert "No issues detected" not in text

    def test_no_issues(self):
        result = AdvisoryResult(success=True, confidence=0.8)
        assert "✅ No issues detected - stack looks good!" in format_advisory_result(result)


class TestOllamaAdvisor:
    def test_is_a_secondary_validator(self):
        assert isinstance(OllamaAdvisor(), SecondaryValidator)

    def test_provider_label(self):
        assert OllamaAdvisor(model="qwen2.5:7b").provider == "ollama:qwen2.5:7b"

    @pytest.mark.asyncio
    async def test_review_over_http(self, saas_config, mock_ollama):
        with mock_ollama(_REVIEW) as http_client:
            result = await OllamaAdvisor().review(saas_config)

        assert result.success is True
        assert result.provider == "ollama:llama3.1:8b"
        assert result.confidence == 0.9
        assert http_client.get.await_args_list[0].args == ("/api/tags",)
        payload = http_client.post.call_args[1]["json"]
        assert payload["system"] == SYSTEM_PROMPT
        assert payload["format"] == "json"
        assert payload["options"] == {"temperature": 0.1}
        assert "Project: my-saas" in payload["prompt"]

    @pytest.mark.asyncio
    async def test_missing_model_is_failed_review(self, saas_config, mock_ollama):
        with mock_ollama(_REVIEW, models=("qwen2.5:7b",)) as http_client:
            result = await OllamaAdvisor().review(saas_config)

        http_client.post.assert_not_awaited()
        assert result.success is False
        assert result.confidence == 0.0
        assert result.issues[0].description == (
            "Model 'llama3.1:8b' is not pulled. Run: ollama pull llama3.1:8b"
        )

    @pytest.mark.asyncio
    async def test_unreachable_server_is_failed_review(self, saas_config):
        client = OllamaClient(base_url="http://ollama.test:11434")
        client.is_available = AsyncMock(return_value=False)
        client.generate = AsyncMock()
        result = await OllamaAdvisor(client=client).review(saas_config)

        client.generate.assert_not_awaited()
        assert result.success is False
        assert result.issues[0].description == (
            "Cannot connect to Ollama at http://ollama.test:11434. Is the server running?"
        )

    @pytest.mark.asyncio
    async def test_transport_failure_becomes_failed_review(self, saas_config):
        client = OllamaClient()
        client.is_available = AsyncMock(return_value=True)
        client.has_model = AsyncMock(return_value=True)
        client.generate = AsyncMock(
            return_value=OllamaResponse(success=False, error="Request timed out")
        )
        result = await OllamaAdvisor(client=client).review(saas_config)

        client.has_model.assert_awaited_once_with("llama3.1:8b")
        assert result.success is False
        assert result.confidence == 0.0
        assert result.issues[0].description == "Request timed out"

    @pytest.mark.asyncio
    async def test_empty_response(self, saas_config):
        client = OllamaClient()
        client.is_available = AsyncMock(return_value=True)
        client.has_model = AsyncMock(return_value=True)
        client.generate = AsyncMock(return_value=OllamaResponse(text="   "))
        result = await OllamaAdvisor(client=client).review(saas_config)

        assert result.success is False
        assert result.issues[0].description == "Empty response from model"

    @pytest.mark.asyncio
    async def test_connect_error_never_raises(self, saas_config, monkeypatch):
        mock_client = AsyncMock()
        mock_client.get = AsyncMock(side_effect=httpx.ConnectError("refused"))
        mock_client.post = AsyncMock(side_effect=httpx.ConnectError("refused"))
        mock_client.__aenter__ = AsyncMock(return_value=mock_client)
        mock_client.__aexit__ = AsyncMock(return_value=False)
        monkeypatch.setattr(httpx, "AsyncClient", lambda **kwargs: mock_client)

        result = await OllamaAdvisor().review(saas_config)

        assert result.success is False
        assert "Cannot connect" in result.issues[0].description


class TestAdvisoryModels:
    def test_issue_defaults(self):
        issue = AdvisoryIssue()
        assert issue.severity == IssueSeverity.WARNING
        assert issue.suggestion is None
