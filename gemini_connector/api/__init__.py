"""Connector adapter package.

Architectural role:
- Defines the external interaction boundary for CLI and HTTP interfaces.
- Performs transport-level validation and response shaping.
- Delegates batch processing to `gemini_connector.core.engine.run`.

Scope:
- `multimodal` holds the prompt attachment pipeline used by the core.
"""
