from .generation import (
    AssembledResponse,
    FileAttachment,
    GenerationRequest,
    GenerationResult,
    ImageData,
    PersistedImage,
    UploadedFileRef,
)

__all__ = [
    "AssembledResponse",
    "FileAttachment",
    "GenerationRequest",
    "GenerationResult",
    "ImageData",
    "PersistedImage",
    "UploadedFileRef",
]
