"""Batch completion orchestration.

Architectural role:
    Provides `run`, the connector entrypoint used by the CLI and HTTP adapters:
    a batch of prompts in, one completion result per prompt out.

Control-flow model:
    1. Setup: resolve the API key from settings, build the model client, open
       one chat session (with `properties` as model configuration when given).
    2. For each prompt, in input order: build message parts (attaching any
       referenced files), send them, count their tokens, record the result.
    3. Return the collected results.

Error handling strategy:
    - Attachment failures never reach this module; the loader drops them.
    - Any exception while handling one prompt becomes an `ErrorCompletion` for
      that prompt and the loop continues.
    - Any exception during setup collapses the batch into a single
      `ErrorCompletion`, whatever the number of prompts.

Concurrency:
    Strictly sequential. Each prompt, including all of its attachment loads,
    completes before the next starts, which keeps results in input order and
    bounds memory to one prompt's attachments.
"""

import logging
from typing import Any, Callable, Mapping, Optional, Sequence

from gemini_connector.api.multimodal.file_input_manager import build_message_parts
from gemini_connector.core.result_types import (
    Completion,
    CompletionResult,
    ConnectorResponse,
    ErrorCompletion,
)
from gemini_connector.llm.client import GenAIModelClient, ModelClient
from gemini_connector.llm.provider_config import resolve_api_key


logger = logging.getLogger(__name__)

ClientFactory = Callable[[Optional[str]], ModelClient]


def map_error_to_completion(error: BaseException) -> ErrorCompletion:
    """Convert an exception into an `ErrorCompletion`.

    Uses the exception text, or its `repr` when the text is empty.
    """
    return ErrorCompletion(error=str(error) or repr(error))


def run(
    model: str,
    prompts: Sequence[str],
    properties: Optional[Mapping[str, Any]] = None,
    settings: Optional[Mapping[str, Any]] = None,
    client_factory: Optional[ClientFactory] = None,
) -> ConnectorResponse:
    """Produce one completion per prompt.

    Args:
        model: Model identifier forwarded to the model client.
        prompts: Prompt texts, processed in order.
        properties: Model configuration forwarded verbatim to chat creation;
            empty or `None` means no override.
        settings: Connector settings. `API_KEY` (non-blank) is used as the
            model API key.
        client_factory: Builds the model client from the resolved API key.
            Defaults to `GenAIModelClient`.

    Returns:
        `ConnectorResponse` with `len(prompts)` results, or a single
        `ErrorCompletion` when setup fails.
    """
    try:
        api_key = resolve_api_key(settings)
        factory = client_factory or GenAIModelClient
        client = factory(api_key)

        chat_config = dict(properties) if properties else None
        chat = client.create_chat(model, chat_config)

        outputs: list[CompletionResult] = []

        for index, prompt in enumerate(prompts):
            try:
                message_parts = build_message_parts(prompt)
                text = chat.send_message(message_parts)
                total_tokens = client.count_tokens(model, message_parts)
                outputs.append(Completion(content=text, token_usage=total_tokens))
            except Exception as error:
                logger.warning("Prompt %d failed: %s", index, error)
                outputs.append(map_error_to_completion(error))

        return ConnectorResponse(completions=outputs)

    except Exception as error:
        logger.exception("Connector run failed during setup")
        return ConnectorResponse(completions=[map_error_to_completion(error)])
