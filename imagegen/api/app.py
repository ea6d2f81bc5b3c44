"""FastAPI application factory."""

import logging
import os

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from google import genai

from imagegen import __version__
from imagegen.api.routes import router as gemini_router
from imagegen.errors import (
    DecodeError,
    GenerationError,
    ImageGenError,
    StorageWriteError,
    UnsupportedMimeTypeError,
    UploadError,
)
from imagegen.services.GeminiService.gemini_service_interface import (
    GeminiServiceInterface,
)
from imagegen.services.ImageStorageService.image_storage_service import (
    PUBLIC_IMAGES_PATH,
)


# (status code, status) per error type; the first matching entry wins
ERROR_STATUS: list[tuple[type[ImageGenError], int, str]] = [
    (UploadError, 502, "UPLOAD_FAILED"),
    (GenerationError, 502, "GENERATION_FAILED"),
    (DecodeError, 502, "INVALID_IMAGE_PAYLOAD"),
    (UnsupportedMimeTypeError, 502, "UNSUPPORTED_MIME_TYPE"),
    (StorageWriteError, 500, "STORAGE_WRITE_FAILED"),
]


def _status_for(error: ImageGenError) -> tuple[int, str]:
    for error_type, status_code, status in ERROR_STATUS:
        if isinstance(error, error_type):
            return status_code, status
    return 500, "INTERNAL"


def create_app(
    gemini_service: GeminiServiceInterface,
    genai_client: genai.Client,
    storage_dir: str,
    max_upload_files: int = 10,
    logger: logging.Logger | None = None,
) -> FastAPI:
    """
    Build the HTTP application around an already wired GeminiService.

    Generated images are served as static files from ``storage_dir`` under
    ``/ai-images``, which is where ImageStorageService points its URLs.
    """
    app_logger = logger or logging.getLogger(__name__)

    app = FastAPI(
        title="Gemini image generation gateway",
        description="Prompt plus attachments in, text plus a hosted image URL out",
        version=__version__,
    )

    app.state.gemini_service = gemini_service
    app.state.genai_client = genai_client
    app.state.max_upload_files = max_upload_files

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(ImageGenError)
    async def handle_generation_error(
        request: Request, exc: ImageGenError
    ) -> JSONResponse:
        status_code, status = _status_for(exc)
        app_logger.error(
            "%s on %s: %s", type(exc).__name__, request.url.path, exc
        )
        return JSONResponse(
            status_code=status_code,
            content={
                "error": {
                    "code": status_code,
                    "message": str(exc),
                    "status": status,
                }
            },
        )

    app.include_router(gemini_router, tags=["Gemini"])

    os.makedirs(storage_dir, exist_ok=True)
    app.mount(
        f"/{PUBLIC_IMAGES_PATH}",
        StaticFiles(directory=storage_dir),
        name=PUBLIC_IMAGES_PATH,
    )

    @app.get("/health", tags=["Health"])
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app
