"""Prompt text scanning for file and URL references.

Architectural role:
    Finds candidate attachment references inside free-text prompts and returns
    them normalized and deduplicated for the attachment loader.

Scanning passes:
    1. Explicit links: `http://`, `https://` and `file://` substrings running
       until whitespace or one of `<>"')`. The effective extension of a file
       URL is taken from its resolved path; an HTTP URL uses its own path.
    2. Bare tokens: whitespace-delimited tokens that are not URLs. This pass
       catches local paths such as `./notes/scan.pdf`.

    Both passes keep a candidate only when its extension is in the supported
    type table.

Deduplication:
    Identical normalized strings collapse into one reference. A URL and a local
    path that point at the same file but differ textually stay distinct.

Determinism:
    Pure text processing. Results follow first-encounter order.
"""

import logging
import re
from typing import List

from gemini_connector.api.multimodal.path_resolver import (
    effective_path,
    is_file_url,
    is_http_url,
)
from gemini_connector.api.multimodal.supported_types import (
    get_extension,
    is_supported_extension,
)


logger = logging.getLogger(__name__)

REMOTE_LINK_PATTERN = re.compile(r"\b(?:https?://|file://)[^\s<>\"')]+", re.IGNORECASE)

_LEADING_WRAPPERS = re.compile(r"^[<({\['\"]+")
_TRAILING_CHARACTERS = ">)}]'\".,;!"


# ============================================================
# NORMALIZATION
# ============================================================

def strip_wrapping_characters(value: str) -> str:
    """Strip quoting and punctuation artifacts around a raw match.

    `(see file.pdf).` tokenizes to `file.pdf).`, which normalizes to
    `file.pdf`.
    """
    candidate = value
    while True:
        stripped = _LEADING_WRAPPERS.sub("", candidate.strip())
        stripped = stripped.rstrip(_TRAILING_CHARACTERS).strip()
        if stripped == candidate:
            return stripped
        candidate = stripped


# ============================================================
# EXTRACTION
# ============================================================

def _link_extension(candidate: str):
    try:
        return get_extension(effective_path(candidate))
    except ValueError:
        # Unresolvable file URL: judge it by its own text and let the loader
        # report the failure.
        return get_extension(candidate)


def extract_file_references(text: str) -> List[str]:
    """Return the supported references mentioned in `text`.

    Args:
        text: Raw prompt text.

    Returns:
        Normalized reference strings, deduplicated, in first-encounter order.
    """
    references = {}

    for match in REMOTE_LINK_PATTERN.finditer(text):
        candidate = strip_wrapping_characters(match.group(0))
        if is_supported_extension(_link_extension(candidate)):
            references.setdefault(candidate, None)

    for raw_token in text.split():
        candidate = strip_wrapping_characters(raw_token)
        if not candidate or is_http_url(candidate) or is_file_url(candidate):
            continue
        if is_supported_extension(get_extension(candidate)):
            references.setdefault(candidate, None)

    if references:
        logger.debug("Found %d file reference(s) in prompt", len(references))

    return list(references)
