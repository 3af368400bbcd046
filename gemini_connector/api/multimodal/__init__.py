"""Multimodal attachment pipeline.

Architectural role:
- Finds file and URL references in prompt text.
- Validates them against the supported media-type allowlist.
- Loads their bytes as inline base64 parts next to the prompt text.

Scope:
- Best-effort enrichment only; failed references are dropped, never raised.
"""
