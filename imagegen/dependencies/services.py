import logging

from imagegen.bootstrap.components import Components
from imagegen.components.storage.storage_interface import StorageInterface
from imagegen.config.settings import Settings
from imagegen.services.GeminiService.gemini_service import GeminiService
from imagegen.services.GeminiService.gemini_service_interface import (
    GeminiServiceInterface,
)
from imagegen.services.ImageStorageService.image_storage_service import (
    ImageStorageService,
)
from imagegen.services.ImageStorageService.image_storage_service_interface import (
    ImageStorageServiceInterface,
)


def get_image_storage_service(components: Components) -> ImageStorageServiceInterface:
    settings = components.get_component(Settings)

    return ImageStorageService(
        storage=components.get_component(StorageInterface),
        storage_dir=settings.storage_dir,
        public_base_url=settings.api_url,
        logger=components.get_component(logging.Logger).getChild(
            "ImageStorageService"
        ),
    )


def get_gemini_service(components: Components) -> GeminiServiceInterface:
    settings = components.get_component(Settings)

    return GeminiService(
        image_storage=get_image_storage_service(components),
        logger=components.get_component(logging.Logger).getChild("GeminiService"),
        basic_model_name=settings.basic_model_name,
        image_model_name=settings.image_model_name,
        system_instruction=settings.system_instruction,
    )
