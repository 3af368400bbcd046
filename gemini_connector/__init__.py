"""Gemini connector: batch prompt completion with inline file attachments.

Architectural role:
    Turns free-text prompts into model completions, attaching files the prompt
    text references (local paths, `file://` URLs, HTTP(S) URLs) as inline
    content.

Package split:
    - `api.multimodal`: reference scanning, resolution, loading, part assembly.
    - `core`: batch orchestration and result contracts.
    - `llm`: model-client collaborator and runtime configuration.
    - `api`: CLI and HTTP adapters.
"""

from gemini_connector.core.engine import run
from gemini_connector.core.result_types import Completion, ConnectorResponse, ErrorCompletion

__all__ = ["run", "Completion", "ConnectorResponse", "ErrorCompletion"]
