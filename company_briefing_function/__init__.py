"""
Company Briefing Function

Single-endpoint Cloud Function that relays a company name to Gemini and
returns a structured intelligence briefing.
"""

from .config import RelayConfig
from .gemini_client import GeminiClient, UpstreamResponse

__all__ = [
    "RelayConfig",
    "GeminiClient",
    "UpstreamResponse",
]
