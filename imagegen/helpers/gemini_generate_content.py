from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from google.genai import types

from imagegen.errors import GenerationError

if TYPE_CHECKING:
    from google.genai import Client


_logger = logging.getLogger(__name__)


async def gemini_generate_content(
    client: Client,
    model: str,
    contents: Any,
    config: types.GenerateContentConfig | None = None,
) -> types.GenerateContentResponse:
    """
    Call ``generate_content`` on the given client.

    Raises:
        GenerationError: If the backend call fails for any reason
    """
    _logger.info("Calling generate_content with model %s", model)
    try:
        return await client.aio.models.generate_content(
            model=model,
            contents=contents,
            config=config,
        )
    except Exception as e:
        _logger.error("generate_content failed for model %s: %s", model, e, exc_info=True)
        raise GenerationError(f"Content generation failed: {e}") from e
