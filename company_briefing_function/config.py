"""
Configuration for the Company Briefing Function.

Secrets come from the process environment, which Cloud Functions populates
from Secret Manager at deploy time. Local runs can use a .env file.
"""

import os
import logging
from dataclasses import dataclass, field
from typing import Mapping, Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

GEMINI_API_URL = (
    "https://generativelanguage.googleapis.com/v1beta/models/"
    "gemini-2.5-flash:generateContent"
)

API_KEY_ENV = 'GEMINI_API_KEY'
SYSTEM_PROMPT_ENV = 'SYSTEM_PROMPT'


def _mask(value: str) -> str:
    return '<set>' if value else '<missing>'


@dataclass(frozen=True)
class RelayConfig:
    """Read-only settings shared by every invocation."""

    api_key: str = field(default='', repr=False)
    system_prompt: str = field(default='', repr=False)
    api_url: str = GEMINI_API_URL
    timeout: Optional[float] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'RelayConfig':
        """
        Resolve configuration from environment variables.

        Missing secrets do not raise; check is_complete() before use.

        Args:
            environ: Mapping to read from (defaults to os.environ)
        """
        if environ is None:
            if os.getenv('ENVIRONMENT', 'development') == 'local':
                load_dotenv()
            environ = os.environ

        timeout_raw = environ.get('GEMINI_TIMEOUT_SECONDS', '').strip()
        timeout = None
        if timeout_raw:
            try:
                timeout = float(timeout_raw)
            except ValueError:
                logger.warning(f"Ignoring invalid GEMINI_TIMEOUT_SECONDS: {timeout_raw!r}")

        return cls(
            api_key=environ.get(API_KEY_ENV, ''),
            system_prompt=environ.get(SYSTEM_PROMPT_ENV, ''),
            api_url=environ.get('GEMINI_API_URL') or GEMINI_API_URL,
            timeout=timeout,
        )

    def is_complete(self) -> bool:
        """True when both required secrets are non-empty."""
        return bool(self.api_key) and bool(self.system_prompt)

    def describe(self) -> str:
        """Loggable summary that never exposes secret values."""
        return (
            f"api_key={_mask(self.api_key)}, system_prompt={_mask(self.system_prompt)}, "
            f"api_url={self.api_url}, timeout={self.timeout}"
        )
