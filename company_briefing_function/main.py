"""
Company Briefing Cloud Function

Relays a company name to Gemini and returns the structured intelligence
briefing it generates. The Gemini API key and the persona prompt stay on the
server.

Endpoint:
  POST /  {"companyName": "..."}  - Generate a briefing

Flow:
1. Reject anything but POST (405, plain text)
2. Check that GEMINI_API_KEY and SYSTEM_PROMPT are configured (500)
3. Parse the JSON body and read companyName (400 if missing)
4. Build the three-turn conversation with the response schema
5. Call Gemini once (no retries)
6. Return Gemini's JSON as-is, or translate its failure status
"""

import sys
import json
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Union

import functions_framework
from flask import Request
from pydantic import ValidationError

from .config import RelayConfig
from .gemini_client import GeminiClient, UpstreamResponse
from .models import BriefingRequest, build_gemini_payload

# Logging Configuration
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    stream=sys.stdout,
    force=True
)
logger = logging.getLogger(__name__)

CONFIG_MISSING_MESSAGE = 'Server configuration error: missing API key or system prompt'
COMPANY_NAME_REQUIRED_MESSAGE = 'companyName is required'


# =============================================================================
# RESPONSE HELPERS
# =============================================================================

def cors_headers() -> Dict[str, str]:
    """Return CORS headers for JSON responses."""
    return {
        'Access-Control-Allow-Origin': '*',
        'Content-Type': 'application/json'
    }


def json_response(data: Any, status: int = 200):
    """Create JSON response with CORS headers."""
    return (json.dumps(data, ensure_ascii=False, separators=(',', ':')), status, cors_headers())


def error_response(message: str, status: int = 400):
    """Create error response."""
    return json_response({'error': message}, status)


@dataclass
class RelayFailure:
    """An expected failure at one pipeline stage."""
    status: int
    message: str
    plain_text: bool = False

    def to_response(self):
        if self.plain_text:
            return (self.message, self.status, {'Content-Type': 'text/plain; charset=utf-8'})
        return error_response(self.message, self.status)


def default_client_factory(config: RelayConfig) -> GeminiClient:
    return GeminiClient(config.api_key, config.api_url, timeout=config.timeout)


# =============================================================================
# RELAY HANDLER
# =============================================================================

class BriefingRelay:
    """
    Validates briefing requests and forwards them to Gemini.

    Holds no per-request state, so one instance serves concurrent requests.
    """

    def __init__(
        self,
        config: RelayConfig,
        client_factory: Callable[[RelayConfig], Any] = default_client_factory,
    ):
        self.config = config
        self.client_factory = client_factory

    def check_method(self, request: Request) -> Optional[RelayFailure]:
        if request.method != 'POST':
            return RelayFailure(405, 'Method Not Allowed', plain_text=True)
        return None

    def check_config(self) -> Optional[RelayFailure]:
        if not self.config.is_complete():
            logger.error(f"Relay misconfigured: {self.config.describe()}")
            return RelayFailure(500, CONFIG_MISSING_MESSAGE)
        return None

    def parse_company_name(self, request: Request) -> Union[str, RelayFailure]:
        """
        Read companyName from the JSON body.

        Malformed JSON raises json.JSONDecodeError and is left to the
        caller's catch-all; well-formed JSON without the field is a 400.
        """
        body = json.loads(request.get_data(as_text=True))
        if not isinstance(body, dict):
            return RelayFailure(400, COMPANY_NAME_REQUIRED_MESSAGE)

        try:
            return BriefingRequest.model_validate(body).companyName
        except ValidationError:
            return RelayFailure(400, COMPANY_NAME_REQUIRED_MESSAGE)

    def call_upstream(self, payload: Dict[str, Any]) -> Union[str, RelayFailure]:
        """
        Send the payload to Gemini and return its raw success body.

        The body is decoded only to confirm it is JSON; an undecodable body
        raises and is left to the caller's catch-all.
        """
        client = self.client_factory(self.config)
        upstream: UpstreamResponse = client.generate(payload)

        if not upstream.ok:
            logger.error(f"Gemini API error {upstream.status_code}: {upstream.text}")
            return RelayFailure(
                upstream.status_code,
                f"Gemini API request failed: {upstream.reason}"
            )

        upstream.json()
        return upstream.text

    def handle(self, request: Request):
        """Run the pipeline for one request and return a Flask response tuple."""
        failure = self.check_method(request)
        if failure:
            return failure.to_response()

        try:
            failure = self.check_config()
            if failure:
                return failure.to_response()

            company_name = self.parse_company_name(request)
            if isinstance(company_name, RelayFailure):
                return company_name.to_response()

            logger.info(f"Generating briefing for company: {company_name}")
            payload = build_gemini_payload(self.config.system_prompt, company_name)

            result = self.call_upstream(payload)
            if isinstance(result, RelayFailure):
                return result.to_response()

            return (result, 200, cors_headers())

        except Exception as e:
            logger.exception(f"Error generating briefing: {e}")
            return error_response(str(e), 500)


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

relay = BriefingRelay(RelayConfig.from_env())


@functions_framework.http
def main(request: Request):
    """HTTP Cloud Function entry point."""
    logger.info(f"{request.method} {request.path}")
    return relay.handle(request)
