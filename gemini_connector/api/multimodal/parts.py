"""Message part contracts sent to the model collaborator.

A message is an ordered list of parts: the prompt text first, then zero or
more inline attachments. `to_dict` renders the wire shape used in responses
and logs.
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class TextPart:
    """Plain-text part carrying the original prompt."""

    text: str

    def to_dict(self) -> dict:
        return {"text": self.text}


@dataclass(frozen=True)
class AttachmentPart:
    """Inline attachment: media type plus base64-encoded bytes."""

    mime_type: str
    data: str

    def to_dict(self) -> dict:
        return {"inlineData": {"mimeType": self.mime_type, "data": self.data}}


MessagePart = Union[TextPart, AttachmentPart]
