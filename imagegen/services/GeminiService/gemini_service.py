"""
GeminiService ties attachment upload, generation and image persistence together.

The GenAI client is an argument of every call rather than state of the
service, so requests that use different credentials can run side by side.
Each stage depends on the previous one, so a request is one sequential chain
of awaits; any failure ends it and is raised to the caller unchanged.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from google.genai import types
from langfuse import observe

from imagegen.config.defaults import (
    DEFAULT_BASIC_MODEL_NAME,
    DEFAULT_IMAGE_MODEL_NAME,
    DEFAULT_SYSTEM_INSTRUCTION,
)
from imagegen.entities.generation import (
    GenerationRequest,
    GenerationResult,
    PersistedImage,
)
from imagegen.helpers.gemini_generate_content import gemini_generate_content
from imagegen.helpers.gemini_upload_files import gemini_upload_files
from imagegen.helpers.prompt_builder import build_content_parts
from imagegen.helpers.response_assembler import assemble_response
from imagegen.helpers.result_composer import compose_result
from imagegen.services.GeminiService.gemini_service_interface import (
    GeminiServiceInterface,
)
from imagegen.services.ImageStorageService.image_storage_service_interface import (
    ImageStorageServiceInterface,
)

if TYPE_CHECKING:
    from google.genai import Client


IMAGE_RESPONSE_MODALITIES = ["TEXT", "IMAGE"]


class GeminiService(GeminiServiceInterface):
    def __init__(
        self,
        image_storage: ImageStorageServiceInterface,
        logger: logging.Logger,
        basic_model_name: str = DEFAULT_BASIC_MODEL_NAME,
        image_model_name: str = DEFAULT_IMAGE_MODEL_NAME,
        system_instruction: str = DEFAULT_SYSTEM_INSTRUCTION,
    ) -> None:
        """
        Args:
            image_storage: Persists the generated image
            logger: Logger instance
            basic_model_name: Default model for text-only prompts
            image_model_name: Default model for image generation
            system_instruction: Default system instruction for text-only prompts
        """
        self.image_storage = image_storage
        self.logger = logger
        self.basic_model_name = basic_model_name
        self.image_model_name = image_model_name
        self.system_instruction = system_instruction

    @observe()
    async def basic_prompt(
        self,
        client: Client,
        request: GenerationRequest,
        model_name: str | None = None,
        system_instruction: str | None = None,
    ) -> str:
        current_model = model_name or self.basic_model_name

        uploaded_files = await gemini_upload_files(client, request.attachments)

        # The bare prompt is sent as-is when there is nothing to attach
        contents: Any = request.prompt
        if uploaded_files:
            contents = build_content_parts(request.prompt, uploaded_files)

        config = types.GenerateContentConfig(
            system_instruction=system_instruction or self.system_instruction,
        )

        response = await gemini_generate_content(
            client, current_model, contents, config
        )

        text = response.text if response is not None else None
        if not text:
            self.logger.warning("Model %s returned an empty answer", current_model)
            return ""
        return text

    @observe()
    async def image_generation(
        self,
        client: Client,
        request: GenerationRequest,
        model_name: str | None = None,
    ) -> GenerationResult:
        current_model = model_name or self.image_model_name

        uploaded_files = await gemini_upload_files(client, request.attachments)
        content_parts = build_content_parts(request.prompt, uploaded_files)

        config = types.GenerateContentConfig(
            response_modalities=IMAGE_RESPONSE_MODALITIES,
        )
        response = await gemini_generate_content(
            client, current_model, content_parts, config
        )

        assembled = assemble_response(response)

        persisted_image: PersistedImage | None = None
        if assembled.image_data is not None:
            persisted_image = await self.image_storage.persist(assembled.image_data)
        else:
            self.logger.info("Model %s returned no image", current_model)

        return compose_result(assembled.text, persisted_image)
