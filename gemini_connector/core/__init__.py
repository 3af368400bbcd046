"""Core orchestration package.

Architectural role:
    Drives one model round-trip per prompt and isolates failures per prompt
    and per batch.

Composition:
    - `engine`: `run`, the batch completion entrypoint.
    - `result_types`: completion result and response contracts.
"""
