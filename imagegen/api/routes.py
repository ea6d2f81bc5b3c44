"""Gemini generation endpoints."""

import logging

from fastapi import APIRouter, Depends, File, Form, HTTPException, Request, UploadFile
from google import genai

from imagegen.api.schemas import (
    BasicPromptResponse,
    ErrorResponse,
    ImageGenerationResponse,
)
from imagegen.entities.generation import FileAttachment, GenerationRequest
from imagegen.services.GeminiService.gemini_service_interface import (
    GeminiServiceInterface,
)


router = APIRouter(prefix="/gemini")

_logger = logging.getLogger(__name__)

DEFAULT_ATTACHMENT_MIME_TYPE = "application/octet-stream"

ERROR_RESPONSES: dict[int | str, dict] = {
    400: {"model": ErrorResponse, "description": "Bad Request"},
    500: {"model": ErrorResponse, "description": "Internal Server Error"},
    502: {"model": ErrorResponse, "description": "Bad Gateway"},
}


def get_gemini_service(request: Request) -> GeminiServiceInterface:
    return request.app.state.gemini_service


def get_genai_client(request: Request) -> genai.Client:
    return request.app.state.genai_client


def _bad_request(message: str) -> HTTPException:
    return HTTPException(
        status_code=400,
        detail={
            "error": {
                "code": 400,
                "message": message,
                "status": "INVALID_ARGUMENT",
            }
        },
    )


async def _build_request(
    http_request: Request, prompt: str, files: list[UploadFile] | None
) -> GenerationRequest:
    if not prompt.strip():
        raise _bad_request("Prompt must not be empty")

    files = files or []
    max_files: int = http_request.app.state.max_upload_files
    if len(files) > max_files:
        raise _bad_request(f"At most {max_files} files can be attached")

    attachments = []
    for upload in files:
        attachments.append(
            FileAttachment(
                name=upload.filename or "attachment",
                data=await upload.read(),
                mime_type=upload.content_type or DEFAULT_ATTACHMENT_MIME_TYPE,
            )
        )

    return GenerationRequest(prompt=prompt, attachments=tuple(attachments))


@router.post(
    "/basic-prompt",
    response_model=BasicPromptResponse,
    responses=ERROR_RESPONSES,
    summary="Text answer for a prompt",
)
async def basic_prompt(
    request: Request,
    prompt: str = Form(..., description="Prompt text"),
    files: list[UploadFile] | None = File(default=None, description="Attachments"),
    service: GeminiServiceInterface = Depends(get_gemini_service),
    client: genai.Client = Depends(get_genai_client),
) -> BasicPromptResponse:
    generation_request = await _build_request(request, prompt, files)
    _logger.info(
        "Basic prompt request with %d attachment(s)",
        len(generation_request.attachments),
    )

    text = await service.basic_prompt(client, generation_request)
    return BasicPromptResponse(text=text)


@router.post(
    "/image-generation",
    response_model=ImageGenerationResponse,
    responses=ERROR_RESPONSES,
    summary="Generate text and an image for a prompt",
)
async def image_generation(
    request: Request,
    prompt: str = Form(..., description="Prompt text"),
    files: list[UploadFile] | None = File(default=None, description="Attachments"),
    service: GeminiServiceInterface = Depends(get_gemini_service),
    client: genai.Client = Depends(get_genai_client),
) -> ImageGenerationResponse:
    generation_request = await _build_request(request, prompt, files)
    _logger.info(
        "Image generation request with %d attachment(s)",
        len(generation_request.attachments),
    )

    result = await service.image_generation(client, generation_request)
    return ImageGenerationResponse(text=result.text, imageUrl=result.image_url)
