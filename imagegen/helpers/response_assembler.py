"""
Turn a generate_content response into text plus at most one image payload.

Two response shapes are accepted: ``google.genai.types.GenerateContentResponse``
objects (snake_case attributes, inline data already decoded to bytes) and the
REST JSON form as plain mappings (camelCase keys, inline data as base64 text).

Only the first candidate is read, and inside it only the first inline-data
part is kept. Callers depend on getting at most one image per result, so
later images are dropped on purpose rather than aggregated.

The walk assumes a single nesting level: candidates -> content -> parts. If
the backend ever returns several content blocks per candidate this needs to
be extended.
"""

import logging
from collections.abc import Mapping
from typing import Any

from imagegen.entities.generation import AssembledResponse, ImageData


_logger = logging.getLogger(__name__)


def _field(obj: Any, *names: str) -> Any:
    """Return the first present, non-None field among ``names``."""
    if obj is None:
        return None
    for name in names:
        if isinstance(obj, Mapping):
            value = obj.get(name)
        else:
            value = getattr(obj, name, None)
        if value is not None:
            return value
    return None


def _extract_image_data(inline_data: Any) -> ImageData | None:
    data = _field(inline_data, "data")
    if data is None:
        return None
    mime_type = _field(inline_data, "mime_type", "mimeType") or ""
    return ImageData(mime_type=mime_type, data=data)


def assemble_response(response: Any) -> AssembledResponse:
    """
    Concatenate the text parts of the first candidate and capture its first image.

    Never raises on a missing or empty field: no candidates, no content and no
    parts all degrade to an empty result. MIME types and payloads are passed
    through unvalidated.

    Args:
        response: SDK response object or REST JSON mapping

    Returns:
        AssembledResponse with the joined text and the first ImageData, if any
    """
    candidates = _field(response, "candidates") or []
    if not candidates:
        _logger.warning("Response contained no candidates")
        return AssembledResponse(text="", image_data=None)

    content = _field(candidates[0], "content")
    parts = _field(content, "parts") or []

    text = ""
    image_data: ImageData | None = None

    for part in parts:
        part_text = _field(part, "text")
        if isinstance(part_text, str):
            text += part_text

        if image_data is None:
            inline_data = _field(part, "inline_data", "inlineData")
            if inline_data is not None:
                image_data = _extract_image_data(inline_data)

    if len(candidates) > 1:
        _logger.info("Ignoring %d extra candidate(s)", len(candidates) - 1)

    return AssembledResponse(text=text, image_data=image_data)
