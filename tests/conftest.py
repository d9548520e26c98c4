"""
Shared test fixtures for the company briefing function.

Provides:
- RelayConfig instances with and without secrets
- A fake Gemini client that records every outbound payload
- Flask request builder
"""

import json
from typing import Any, Dict, List, Optional

import pytest
from flask import Flask, request as flask_request

from company_briefing_function.config import RelayConfig
from company_briefing_function.gemini_client import UpstreamResponse


TEST_API_KEY = "test-gemini-key"
TEST_SYSTEM_PROMPT = "You are a corporate intelligence analyst. Answer in JSON."


# ============================================================================
# CONFIGURATION
# ============================================================================

@pytest.fixture
def relay_config() -> RelayConfig:
    """Provides a complete relay configuration."""
    return RelayConfig(api_key=TEST_API_KEY, system_prompt=TEST_SYSTEM_PROMPT)


# ============================================================================
# GEMINI MOCKING
# ============================================================================

class FakeGeminiClient:
    """Stands in for GeminiClient; returns a canned response or raises."""

    def __init__(
        self,
        response: Optional[UpstreamResponse] = None,
        error: Optional[Exception] = None,
    ):
        self.response = response or UpstreamResponse(200, "OK", json.dumps({"candidates": []}))
        self.error = error
        self.payloads: List[Dict[str, Any]] = []

    @property
    def call_count(self) -> int:
        return len(self.payloads)

    def generate(self, payload: Dict[str, Any]) -> UpstreamResponse:
        # Round-trip through JSON like a real POST body would.
        self.payloads.append(json.loads(json.dumps(payload, ensure_ascii=False)))
        if self.error:
            raise self.error
        return self.response


@pytest.fixture
def fake_gemini():
    """Provides a fake Gemini client returning 200 by default."""
    return FakeGeminiClient()


# ============================================================================
# FLASK REQUESTS
# ============================================================================

@pytest.fixture
def flask_app():
    return Flask(__name__)


@pytest.fixture
def make_request(flask_app):
    """
    Build a Flask Request inside a pushed request context.

    Pass json_body for a serialized object or raw_body for exact bytes.
    """
    contexts = []

    def _make(method: str = "POST", json_body: Any = None, raw_body: Optional[str] = None):
        if raw_body is not None:
            data = raw_body
        elif json_body is not None:
            data = json.dumps(json_body, ensure_ascii=False)
        else:
            data = ""

        ctx = flask_app.test_request_context(
            "/",
            method=method,
            data=data.encode("utf-8"),
            content_type="application/json",
        )
        ctx.push()
        contexts.append(ctx)
        return flask_request._get_current_object()

    yield _make

    for ctx in reversed(contexts):
        ctx.pop()
