"""Best-effort loading of referenced files into inline attachment parts.

Architectural role:
    Retrieves the bytes behind one validated reference (HTTP fetch or
    filesystem read), base64-encodes them, and decides the media type.

Media type selection:
    - Local paths and file URLs: the extension-based type from the allowlist.
    - HTTP(S): the extension-based type, overridden by the server's declared
      `Content-Type` (MIME portion only) when it is non-empty and different.

Error handling strategy:
    Every failure (network error, non-2xx status, missing or unreadable file,
    malformed file URL) is logged as a warning and yields `None`. Nothing is
    raised to the caller, so a broken reference never fails a prompt.

Side effects:
    Outbound HTTP GET requests with default headers; local file reads.
"""

import base64
import logging
from typing import Optional

import requests

from gemini_connector.api.multimodal.parts import AttachmentPart
from gemini_connector.api.multimodal.path_resolver import (
    effective_path,
    is_http_url,
    resolve_local_path,
)
from gemini_connector.api.multimodal.reference_scanner import strip_wrapping_characters
from gemini_connector.api.multimodal.supported_types import (
    SUPPORTED_FILE_TYPES,
    get_extension,
    guess_mime_type,
    is_supported_extension,
)
from gemini_connector.llm.provider_config import FETCH_TIMEOUT_SECONDS


logger = logging.getLogger(__name__)


def _encode(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def _declared_mime_type(response: requests.Response) -> str:
    """Return the MIME portion of the response `Content-Type`, trimmed."""
    header = response.headers.get("Content-Type") or ""
    return header.split(";", 1)[0].strip()


def _load_remote(reference: str, ext: str) -> Optional[AttachmentPart]:
    response = requests.get(reference, timeout=FETCH_TIMEOUT_SECONDS)

    if not 200 <= response.status_code < 300:
        logger.warning(
            "Failed to fetch remote file: %s (%s)", reference, response.status_code
        )
        return None

    guessed = SUPPORTED_FILE_TYPES[ext]
    declared = _declared_mime_type(response)
    mime_type = declared if declared and declared != guessed else guessed

    return AttachmentPart(mime_type=mime_type, data=_encode(response.content))


def _load_local(reference: str, ext: str) -> AttachmentPart:
    file_path = resolve_local_path(reference)
    with open(file_path, "rb") as f:
        data = f.read()
    return AttachmentPart(mime_type=guess_mime_type(file_path, ext), data=_encode(data))


def load_inline_data_part(reference: str) -> Optional[AttachmentPart]:
    """Load one reference as an inline attachment.

    Args:
        reference: Normalized reference produced by the scanner.

    Returns:
        The attachment, or `None` when the reference is unsupported or could
        not be loaded.
    """
    resolved_ref = strip_wrapping_characters(reference)

    try:
        ext = get_extension(effective_path(resolved_ref))
        if not is_supported_extension(ext):
            return None

        if is_http_url(resolved_ref):
            return _load_remote(resolved_ref, ext)

        return _load_local(resolved_ref, ext)

    except Exception as err:
        logger.warning("Unable to load file reference %r: %s", resolved_ref, err)
        return None
