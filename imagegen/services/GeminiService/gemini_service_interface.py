from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from imagegen.entities.generation import GenerationRequest, GenerationResult

if TYPE_CHECKING:
    from google.genai import Client


class GeminiServiceInterface(ABC):
    @abstractmethod
    async def basic_prompt(
        self,
        client: Client,
        request: GenerationRequest,
        model_name: str | None = None,
        system_instruction: str | None = None,
    ) -> str:
        """Return the model's text answer for the prompt and its attachments."""

    @abstractmethod
    async def image_generation(
        self,
        client: Client,
        request: GenerationRequest,
        model_name: str | None = None,
    ) -> GenerationResult:
        """
        Generate text and at most one image for the prompt and its attachments.

        The image, if the model returned one, is persisted and exposed through
        ``GenerationResult.image_url``; otherwise ``image_url`` is empty.
        """
