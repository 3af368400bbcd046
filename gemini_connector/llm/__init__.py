"""LLM access package.

Architectural role:
    Provides runtime configuration and the model-client collaborator used by
    the core engine.

Module split:
    - `provider_config`: environment-driven settings and credential lookup.
    - `client`: session protocol and the `google-genai` implementation.
"""
