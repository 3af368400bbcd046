"""Supported attachment media types and extension classification.

Architectural role:
    Holds the closed extension allowlist that gates which prompt references are
    eligible for inline attachment, and the helpers that classify a candidate
    string against it.

Classification rules:
    - The extension is taken from the path component only (text before the first
      `?` or `#`), lower-cased, including the leading dot.
    - A reference is supported iff its extension is a key of
      `SUPPORTED_FILE_TYPES`. Content is never sniffed.

Determinism:
    Pure functions over a static, read-only table.
"""

import os
from types import MappingProxyType
from typing import Optional


# ============================================================
# SUPPORTED TYPES
# ============================================================

SUPPORTED_FILE_TYPES = MappingProxyType({
    ".pdf": "application/pdf",
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
    ".bmp": "image/bmp",
    ".webp": "image/webp",
    ".svg": "image/svg+xml",
    ".heic": "image/heic",
    ".heif": "image/heif",
})

DEFAULT_MIME_TYPE = "application/octet-stream"


# ============================================================
# CLASSIFICATION
# ============================================================

def get_extension(value: str) -> Optional[str]:
    """Return the lower-cased extension of `value`, or `None` when it has none.

    Query strings and fragments are ignored, so
    `https://host/scan.PDF?dl=1#p2` yields `.pdf`.
    """
    base = value.split("?", 1)[0].split("#", 1)[0]
    base = base.rstrip("/\\")
    _, ext = os.path.splitext(base)
    return ext.lower() if ext else None


def is_supported_extension(ext: Optional[str]) -> bool:
    """Return whether `ext` is a key of the allowlist."""
    return bool(ext) and ext in SUPPORTED_FILE_TYPES


def guess_mime_type(reference: str, fallback_ext: Optional[str] = None) -> str:
    """Map a reference to its media type using the allowlist.

    Falls back to the type of `fallback_ext`, then to
    `application/octet-stream`.
    """
    ext = get_extension(reference)
    if is_supported_extension(ext):
        return SUPPORTED_FILE_TYPES[ext]
    return SUPPORTED_FILE_TYPES.get(fallback_ext or "", DEFAULT_MIME_TYPE)
