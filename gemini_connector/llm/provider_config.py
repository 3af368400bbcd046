"""Runtime configuration for the connector and its model client.

Architectural role:
    Centralizes the settings key for credentials, default model selection,
    outbound fetch timeout and log level for `gemini_connector.core.engine`,
    the attachment loader and the CLI/HTTP entrypoints.

Determinism:
    Values are resolved at import time from the process environment (after
    `.env` loading). `resolve_api_key` is a pure function of its argument.

Failure behavior:
    Missing or blank credentials resolve to `None`, leaving credential
    discovery to the model SDK.
"""

import logging
import os
from typing import Any, Mapping, Optional

from dotenv import load_dotenv

load_dotenv()

# Settings key carrying the model API key.
API_KEY_SETTING = "API_KEY"

# Model used when the CLI is invoked without `--model`.
DEFAULT_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")

# Timeout for each remote attachment fetch, in seconds.
FETCH_TIMEOUT_SECONDS = float(os.getenv("CONNECTOR_FETCH_TIMEOUT", "120"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def resolve_api_key(settings: Optional[Mapping[str, Any]]) -> Optional[str]:
    """Return the trimmed API key from `settings`, or `None`.

    Non-string and blank values are treated as absent.
    """
    if not settings:
        return None
    raw_api_key = settings.get(API_KEY_SETTING)
    if isinstance(raw_api_key, str) and raw_api_key.strip():
        return raw_api_key.strip()
    return None


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Configure root logging for CLI and HTTP entrypoints."""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="[%(asctime)s] %(levelname)s in %(name)s: %(message)s",
    )
