"""Tests for the FastAPI routes (mocked summarizer)."""

from __future__ import annotations

import os
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi.testclient import TestClient

# Ensure auth is disabled for tests (no INTERNAL_TOKEN set)
os.environ.pop("INTERNAL_TOKEN", None)

import main
from engine.errors import (
    ConfigurationError,
    EmptyResponseError,
    InvalidInputError,
    ResponseFormatError,
)
from main import app
from schemas.response import Summary


client = TestClient(app)


@pytest.fixture
def summarizer():
    stub = MagicMock()
    stub.ready = True
    stub.summarize = AsyncMock(
        return_value=Summary(
            title="新品发布引关注",
            content="公司今日发布新产品。",
            keywords=["新品", "发布", "行业"],
            score=76.45,
        )
    )
    stub.generate_title = AsyncMock(return_value="新品发布")
    with patch.object(main, "_summarizer", stub):
        yield stub


class TestHealthEndpoint:
    def test_health(self, summarizer):
        resp = client.get("/health")
        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "ok"
        assert data["version"] == "0.1.0"
        assert data["summarizer_ready"] is True

    def test_health_without_summarizer(self):
        with patch.object(main, "_summarizer", None):
            resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json()["summarizer_ready"] is False


class TestSummarizeEndpoint:
    def test_successful_summary(self, summarizer):
        resp = client.post("/summarize", json={"content": "公司发布新产品"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["title"] == "新品发布引关注"
        assert data["keywords"] == ["新品", "发布", "行业"]
        assert data["score"] == 76.45

    def test_default_options_come_from_settings(self, summarizer):
        client.post("/summarize", json={"content": "公司发布新产品"})
        content, options = summarizer.summarize.await_args.args
        assert content == "公司发布新产品"
        assert options == {"language": "中文", "min_length": 200}

    def test_camel_case_options_accepted(self, summarizer):
        resp = client.post(
            "/summarize",
            json={"content": "公司发布新产品", "language": "English", "minLength": 100},
        )
        assert resp.status_code == 200
        _, options = summarizer.summarize.await_args.args
        assert options == {"language": "English", "min_length": 100}

    def test_empty_content_rejected(self, summarizer):
        resp = client.post("/summarize", json={"content": ""})
        assert resp.status_code == 422
        summarizer.summarize.assert_not_awaited()

    @pytest.mark.parametrize(
        ("error", "status"),
        [
            (InvalidInputError("Content is required"), 422),
            (ConfigurationError("DeepSeek API key is required"), 503),
            (EmptyResponseError("LLM returned empty content."), 502),
            (ResponseFormatError("Failed to parse summary result"), 502),
            (ConnectionError("reset by peer"), 500),
        ],
    )
    def test_errors_mapped_to_status(self, summarizer, error, status):
        summarizer.summarize.side_effect = error
        resp = client.post("/summarize", json={"content": "公司发布新产品"})
        assert resp.status_code == status
        assert resp.json()["detail"] == str(error)

    def test_unavailable_without_summarizer(self):
        with patch.object(main, "_summarizer", None):
            resp = client.post("/summarize", json={"content": "公司发布新产品"})
        assert resp.status_code == 503


class TestTitleEndpoint:
    def test_returns_title(self, summarizer):
        resp = client.post("/title", json={"content": "公司发布新产品", "language": "中文"})
        assert resp.status_code == 200
        assert resp.json() == {"title": "新品发布"}

    def test_empty_reply_maps_to_502(self, summarizer):
        summarizer.generate_title.side_effect = EmptyResponseError("LLM returned empty content.")
        resp = client.post("/title", json={"content": "公司发布新产品"})
        assert resp.status_code == 502


class TestInternalAuth:
    def test_no_auth_when_token_not_configured(self, summarizer):
        resp = client.post("/summarize", json={"content": "Test content."})
        assert resp.status_code == 200

    def test_auth_rejects_bad_token_when_configured(self, summarizer):
        from config import settings
        original = settings.internal_token
        try:
            settings.internal_token = "super-secret-token"
            resp = client.post(
                "/summarize",
                json={"content": "Test content."},
                headers={"X-Internal-Token": "wrong-token"},
            )
            assert resp.status_code == 401
        finally:
            settings.internal_token = original

    def test_auth_accepts_correct_token_when_configured(self, summarizer):
        from config import settings
        original = settings.internal_token
        try:
            settings.internal_token = "super-secret-token"
            resp = client.post(
                "/title",
                json={"content": "Test content."},
                headers={"X-Internal-Token": "super-secret-token"},
            )
            assert resp.status_code == 200
        finally:
            settings.internal_token = original

    def test_auth_rejects_missing_token_when_configured(self, summarizer):
        from config import settings
        original = settings.internal_token
        try:
            settings.internal_token = "super-secret-token"
            resp = client.post("/summarize", json={"content": "Test content."})
            assert resp.status_code == 401
        finally:
            settings.internal_token = original
