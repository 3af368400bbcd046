"""Reference classification and local path resolution.

Architectural role:
    Decides whether a normalized candidate is an HTTP(S) URL, a `file://` URL,
    or a local filesystem path, and converts the latter two into a concrete
    filesystem path for the attachment loader.

Classification order:
    1. HTTP(S) URL: parses with scheme `http`/`https` and a non-empty host.
    2. File URL: parses with scheme `file`.
    3. Anything else is a local path.

Local path resolution:
    - `~` prefix -> caller's home directory joined with the remainder.
    - Absolute paths are used as-is.
    - Relative paths resolve against the process working directory.

Failure behavior:
    `file_url_to_path` raises `ValueError` for malformed file URLs (remote host,
    encoded path separators). Callers in the loader absorb it per reference.
"""

import os
from enum import Enum
from urllib.parse import unquote, urlparse


class ReferenceKind(str, Enum):
    """Provenance tag of a normalized reference."""

    REMOTE_HTTP = "remote-http"
    REMOTE_FILE = "remote-file"
    LOCAL = "local"


def _scheme_and_host(value: str):
    try:
        parsed = urlparse(value)
    except ValueError:
        return None, None
    return parsed.scheme.lower(), parsed.netloc


def is_http_url(value: str) -> bool:
    """Return whether `value` is an absolute http/https URL with a host."""
    scheme, host = _scheme_and_host(value)
    return scheme in ("http", "https") and bool(host)


def is_file_url(value: str) -> bool:
    """Return whether `value` uses the `file` scheme."""
    scheme, _ = _scheme_and_host(value)
    return scheme == "file"


def classify_reference(value: str) -> ReferenceKind:
    """Tag a normalized candidate with its provenance."""
    if is_http_url(value):
        return ReferenceKind.REMOTE_HTTP
    if is_file_url(value):
        return ReferenceKind.REMOTE_FILE
    return ReferenceKind.LOCAL


def file_url_to_path(url: str) -> str:
    """Convert a `file://` URL into a local filesystem path.

    Only an empty or `localhost` host is accepted.

    Raises:
        ValueError: If `url` is not a usable local file URL.
    """
    parsed = urlparse(url)

    if parsed.scheme.lower() != "file":
        raise ValueError(f"Not a file URL: {url}")

    if parsed.netloc not in ("", "localhost"):
        raise ValueError(f"File URL host must be empty or localhost: {url}")

    if "%2f" in parsed.path.lower():
        raise ValueError(f"File URL path must not include encoded separators: {url}")

    path = unquote(parsed.path)
    if not path:
        raise ValueError(f"File URL has no path: {url}")

    return path


def _home_directory() -> str:
    return os.path.expanduser("~")


def resolve_local_path(reference: str) -> str:
    """Resolve a file URL or local path reference to a filesystem path."""
    if is_file_url(reference):
        return file_url_to_path(reference)

    if reference.startswith("~"):
        # "~/docs/a.pdf" and "~docs/a.pdf" both land under the home directory.
        remainder = reference[1:].lstrip("/\\")
        return os.path.normpath(os.path.join(_home_directory(), remainder))

    if os.path.isabs(reference):
        return reference

    return os.path.abspath(reference)


def effective_path(reference: str) -> str:
    """Return the string whose extension decides support for `reference`.

    File URLs are resolved to their filesystem path first; everything else is
    returned unchanged.
    """
    if reference.lower().startswith("file://"):
        return file_url_to_path(reference)
    return reference
