"""
Gemini REST client for the Company Briefing Function.

One generateContent call per invocation. No retries: callers decide what to
do with a failed response.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests

logger = logging.getLogger(__name__)


@dataclass
class UpstreamResponse:
    """Status line and raw body of an upstream reply."""
    status_code: int
    reason: str
    text: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def json(self) -> Any:
        return json.loads(self.text)


class GeminiClient:
    """
    Thin wrapper around the Gemini generateContent REST endpoint.

    The API key travels as the `key` query parameter.
    """

    def __init__(
        self,
        api_key: str,
        api_url: str,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.api_key = api_key
        self.api_url = api_url
        self.timeout = timeout
        self.session = session

    def generate(self, payload: Dict[str, Any]) -> UpstreamResponse:
        """
        POST a payload to Gemini once.

        Args:
            payload: generateContent request body

        Returns:
            UpstreamResponse for any HTTP status

        Raises:
            requests.RequestException: on network failure
        """
        http = self.session or requests
        response = http.post(
            self.api_url,
            params={'key': self.api_key},
            headers={'Content-Type': 'application/json'},
            data=json.dumps(payload, ensure_ascii=False).encode('utf-8'),
            timeout=self.timeout,
        )
        logger.info(f"Gemini responded with {response.status_code}")

        return UpstreamResponse(
            status_code=response.status_code,
            reason=response.reason or '',
            text=response.text,
        )
