"""
Message part assembly for prompts that mention files.

Architectural role:
- Turn one raw prompt into the ordered part list sent to the model.
- Attach every supported file the prompt references (local path, `file://`
  URL or HTTP(S) URL) as inline base64 content.

Processing lifecycle:
1. Scan the prompt for supported references (`reference_scanner`).
2. Load each distinct reference in encounter order (`attachment_loader`).
3. Return the prompt text part followed by every attachment that loaded.

Error handling strategy:
- Per-reference failures are logged by the loader and dropped.
- The text part is always present, so a prompt never loses its text because
  of a broken reference.

Determinism considerations:
- Part order follows reference encounter order.
- Attachment content depends on filesystem and network state at call time.
"""

from typing import List

from gemini_connector.api.multimodal.attachment_loader import load_inline_data_part
from gemini_connector.api.multimodal.parts import MessagePart, TextPart
from gemini_connector.api.multimodal.reference_scanner import extract_file_references


# ============================================================
# PUBLIC ENTRYPOINT
# ============================================================

def build_message_parts(prompt: str) -> List[MessagePart]:
    """
    Build the parts list for one prompt.

    Returns:
    - `[TextPart(prompt)]` when the prompt references no supported file.
    - Otherwise the text part followed by each attachment that loaded.
    """
    references = extract_file_references(prompt)
    if not references:
        return [TextPart(text=prompt)]

    inline_parts = []
    for reference in references:
        part = load_inline_data_part(reference)
        if part is not None:
            inline_parts.append(part)

    return [TextPart(text=prompt), *inline_parts]
