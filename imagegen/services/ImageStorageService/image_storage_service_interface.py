from abc import ABC, abstractmethod

from imagegen.entities.generation import ImageData, PersistedImage


class ImageStorageServiceInterface(ABC):
    @abstractmethod
    async def persist(self, image_data: ImageData) -> PersistedImage:
        """
        Decode an inline image, write it under a fresh unique name and return its URL.

        Raises:
            DecodeError: The payload is not valid base64
            UnsupportedMimeTypeError: The MIME type is not image/<subtype>
            StorageWriteError: The write could not complete
        """
