"""
ImageStorageService persists generated images and builds their public URLs.

Files land at ``{storage_dir}/{identifier}.{extension}`` and are served by the
HTTP layer under ``{public_base_url}/ai-images/``. The identifier comes from an
injectable generator so tests can pin it; production uses uuid4, which draws
from the OS CSPRNG.
"""

from __future__ import annotations

import asyncio
import base64
import binascii
import logging
import os
import re
import uuid
from collections.abc import Callable

from imagegen.components.storage.storage_interface import StorageInterface
from imagegen.entities.generation import ImageData, PersistedImage
from imagegen.errors import DecodeError, StorageWriteError, UnsupportedMimeTypeError
from imagegen.services.ImageStorageService.image_storage_service_interface import (
    ImageStorageServiceInterface,
)


PUBLIC_IMAGES_PATH = "ai-images"

_IMAGE_MIME_PATTERN = re.compile(r"^image/([a-z0-9][a-z0-9.-]*)(?:\+[a-z0-9.-]+)?$")


def default_id_generator() -> str:
    return str(uuid.uuid4())


def decode_payload(data: str | bytes) -> bytes:
    """
    Return the raw image bytes for an inline payload.

    Strings are strict base64. Bytes come from the SDK, which has already
    decoded the wire base64, and are returned unchanged.

    Raises:
        DecodeError: If the payload is not text or bytes, is not valid base64,
            or is empty
    """
    if isinstance(data, (bytes, bytearray, memoryview)):
        decoded = bytes(data)
    elif isinstance(data, str):
        try:
            decoded = base64.b64decode(data.strip(), validate=True)
        except (binascii.Error, ValueError) as e:
            raise DecodeError(f"Image payload is not valid base64: {e}") from e
    else:
        raise DecodeError(
            f"Image payload must be base64 text or bytes, got {type(data).__name__}"
        )

    if not decoded:
        raise DecodeError("Image payload is empty")
    return decoded


def extension_for_mime_type(mime_type: str) -> str:
    """
    Derive the file extension from the MIME subtype (``image/png`` -> ``png``).

    Raises:
        UnsupportedMimeTypeError: If the MIME type is not image/<subtype>
    """
    if not isinstance(mime_type, str):
        raise UnsupportedMimeTypeError(f"Unsupported image MIME type: {mime_type!r}")
    essence = mime_type.split(";", 1)[0].strip().lower()
    match = _IMAGE_MIME_PATTERN.match(essence)
    if not match:
        raise UnsupportedMimeTypeError(f"Unsupported image MIME type: {mime_type!r}")
    return match.group(1)


class ImageStorageService(ImageStorageServiceInterface):
    def __init__(
        self,
        storage: StorageInterface,
        storage_dir: str,
        public_base_url: str,
        logger: logging.Logger,
        id_generator: Callable[[], str] = default_id_generator,
    ) -> None:
        """
        Args:
            storage: Write target for the decoded bytes
            storage_dir: Directory the images are written to
            public_base_url: Externally resolvable base URL, already normalized
            logger: Logger instance
            id_generator: Returns a fresh unique filename stem on every call
        """
        self.storage = storage
        self.storage_dir = storage_dir
        self.public_base_url = public_base_url
        self.logger = logger
        self.id_generator = id_generator

    async def persist(self, image_data: ImageData) -> PersistedImage:
        """
        Validate first, then write off the event loop.

        Cancelling the caller does not stop a write that has already started:
        the worker thread still completes it, so the file can land on disk
        even though no result ever refers to it.
        """
        image_bytes = decode_payload(image_data.data)
        extension = extension_for_mime_type(image_data.mime_type)

        file_name = f"{self.id_generator()}.{extension}"
        path = os.path.join(self.storage_dir, file_name)

        try:
            await asyncio.to_thread(self.storage.write, path, image_bytes)
        except OSError as e:
            self.logger.error("Failed to write image to %s: %s", path, e, exc_info=True)
            raise StorageWriteError(f"Failed to write image {file_name}: {e}") from e

        public_url = f"{self.public_base_url}/{PUBLIC_IMAGES_PATH}/{file_name}"
        self.logger.info(
            "Persisted %d byte image at %s (%s)", len(image_bytes), path, public_url
        )
        return PersistedImage(path=path, public_url=public_url)
