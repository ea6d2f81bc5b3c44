import logging

from fastapi import FastAPI
from google import genai

from imagegen.api.app import create_app
from imagegen.config.settings import Settings
from imagegen.dependencies.components import get_components
from imagegen.dependencies.services import get_gemini_service
from imagegen.services.GeminiService.gemini_service_interface import (
    GeminiServiceInterface,
)


def bootstrap_app(env: str = "development") -> FastAPI:
    components = get_components(env=env)
    settings = components.get_component(Settings)
    gemini: GeminiServiceInterface = get_gemini_service(components)

    return create_app(
        gemini_service=gemini,
        genai_client=components.get_component(genai.Client),
        storage_dir=settings.storage_dir,
        max_upload_files=settings.max_upload_files,
        logger=components.get_component(logging.Logger).getChild("api"),
    )
