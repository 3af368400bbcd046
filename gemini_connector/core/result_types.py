"""Completion result contracts returned by `gemini_connector.core.engine`.

Architectural role:
    Defines the tagged per-prompt outcome (`Completion` or `ErrorCompletion`)
    and the batch envelope (`ConnectorResponse`).

Serialization:
    `to_dict` renders the response contract:
    `{"Completions": [{"Content", "TokenUsage"?} | {"Error"}], "ModelType"?}`.
    Optional fields are omitted when unset.

Determinism:
    Purely structural, state-free value objects.
"""

from dataclasses import dataclass, field
from typing import ClassVar, List, Optional, Union


@dataclass(frozen=True)
class Completion:
    """Successful model round-trip for one prompt.

    Attributes:
        content: Response text.
        token_usage: Token count of the sent parts, when reported.
    """

    content: str
    token_usage: Optional[int] = None

    kind: ClassVar[str] = "success"

    @property
    def ok(self) -> bool:
        return True

    def to_dict(self) -> dict:
        data = {"Content": self.content}
        if self.token_usage is not None:
            data["TokenUsage"] = self.token_usage
        return data


@dataclass(frozen=True)
class ErrorCompletion:
    """Failed round-trip for one prompt, or for the whole batch."""

    error: str

    kind: ClassVar[str] = "error"

    @property
    def ok(self) -> bool:
        return False

    def to_dict(self) -> dict:
        return {"Error": self.error}


CompletionResult = Union[Completion, ErrorCompletion]


@dataclass
class ConnectorResponse:
    """Batch outcome: one result per prompt, in input order."""

    completions: List[CompletionResult] = field(default_factory=list)
    model_type: Optional[str] = None

    def to_dict(self) -> dict:
        data = {"Completions": [c.to_dict() for c in self.completions]}
        if self.model_type is not None:
            data["ModelType"] = self.model_type
        return data
