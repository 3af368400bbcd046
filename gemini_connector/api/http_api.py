"""
HTTP API adapter for the Gemini connector.

Architectural role:
- Expose the batch completion entrypoint over HTTP.
- Enforce adapter-level input validation.
- Delegate processing to `gemini_connector.core.engine.run`.

Endpoint responsibilities:
- `GET /health`: liveness probe.
- `POST /v1/completions`: validate the batch request, run it, return the
  connector response contract.

Input validation behavior:
- Body shape is validated by `CompletionRequest` (FastAPI returns 422).
- Blank `model` -> HTTP 400.

Error handling strategy:
- Per-prompt and setup failures are already folded into the response body by
  the engine, so a processed batch always returns HTTP 200.

Side effects:
- Loads environment variables at import time via `load_dotenv()`.
"""

from dotenv import load_dotenv

load_dotenv()

import logging
from typing import Any, Dict, List

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from gemini_connector.core.engine import run
from gemini_connector.llm.provider_config import configure_logging

configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title="gemini-connector")


# ============================================================
# Request Schema
# ============================================================

class CompletionRequest(BaseModel):
    """Batch completion request body."""

    model: str
    prompts: List[str]
    properties: Dict[str, Any] = Field(default_factory=dict)
    settings: Dict[str, Any] = Field(default_factory=dict)


# ============================================================
# Health
# ============================================================

@app.get("/health")
def health():
    return {"status": "ok"}


# ============================================================
# Batch Completions
# ============================================================

@app.post("/v1/completions")
def completions(request: CompletionRequest):
    """
    Run one batch of prompts and return the connector response.

    Response formatting:
    - `{"Completions": [...], "ModelType"?: ...}` with one entry per prompt,
      or a single error entry when batch setup failed.
    """
    if not request.model.strip():
        return JSONResponse(status_code=400, content={"error": "No model provided"})

    logger.info("Running %d prompt(s) on %s", len(request.prompts), request.model)

    response = run(
        request.model.strip(),
        request.prompts,
        request.properties,
        request.settings,
    )
    return response.to_dict()
