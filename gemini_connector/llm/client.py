"""Model-client collaborator for the connector.

Architectural role:
    Defines the minimal session interface the completion engine needs and a
    default implementation backed by the `google-genai` SDK.

Model invocation flow:
    `engine.run` -> `client_factory(api_key)` -> `create_chat(model, config)`
    -> per prompt: `send_message(parts)` and `count_tokens(model, parts)`.

Conversation state:
    One chat session is created per `run` call and reused for every prompt in
    it, so later prompts see earlier turns as history.

Failure handling model:
    SDK exceptions propagate unchanged. The engine decides whether a failure is
    per-prompt or fatal.
"""

import base64
import logging
from typing import Any, Mapping, Optional, Protocol, Sequence

from gemini_connector.api.multimodal.parts import AttachmentPart, MessagePart, TextPart


logger = logging.getLogger(__name__)


class ChatSession(Protocol):
    """Stateful chat session returned by `ModelClient.create_chat`."""

    def send_message(self, parts: Sequence[MessagePart]) -> str:
        """Send one user turn and return the response text."""
        ...


class ModelClient(Protocol):
    """Minimal model interface required by `engine.run`."""

    def create_chat(self, model: str, config: Optional[Mapping[str, Any]]) -> ChatSession:
        """Open a chat session; `config` is `None` when no overrides apply."""
        ...

    def count_tokens(self, model: str, parts: Sequence[MessagePart]) -> Optional[int]:
        """Return the token count of `parts` for `model`."""
        ...


def to_sdk_parts(parts: Sequence[MessagePart]) -> list:
    """Convert message parts into `google.genai.types.Part` objects."""
    from google.genai import types

    sdk_parts = []
    for part in parts:
        if isinstance(part, TextPart):
            sdk_parts.append(types.Part.from_text(text=part.text))
        elif isinstance(part, AttachmentPart):
            sdk_parts.append(types.Part.from_bytes(
                data=base64.b64decode(part.data),
                mime_type=part.mime_type,
            ))
        else:
            raise TypeError(f"Unsupported message part: {type(part).__name__}")
    return sdk_parts


class GenAIChatSession:
    """`ChatSession` over a `google.genai` chat."""

    def __init__(self, chat: Any) -> None:
        self._chat = chat

    def send_message(self, parts: Sequence[MessagePart]) -> str:
        response = self._chat.send_message(to_sdk_parts(parts))
        return response.text or ""


class GenAIModelClient:
    """`ModelClient` backed by `google.genai.Client`.

    Args:
        api_key: Explicit API key. When `None`, the SDK performs its own
            credential discovery (environment variables, Vertex AI settings).
    """

    def __init__(self, api_key: Optional[str] = None) -> None:
        from google import genai

        self._client = genai.Client(api_key=api_key) if api_key else genai.Client()

    def create_chat(self, model: str, config: Optional[Mapping[str, Any]] = None) -> GenAIChatSession:
        if config:
            chat = self._client.chats.create(model=model, config=dict(config))
        else:
            chat = self._client.chats.create(model=model)
        logger.debug("Created chat session for model %s", model)
        return GenAIChatSession(chat)

    def count_tokens(self, model: str, parts: Sequence[MessagePart]) -> Optional[int]:
        result = self._client.models.count_tokens(model=model, contents=to_sdk_parts(parts))
        return result.total_tokens
