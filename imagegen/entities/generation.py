from dataclasses import dataclass


@dataclass(frozen=True)
class FileAttachment:
    """Caller-supplied file to be staged on the backend before generation."""

    name: str
    data: bytes
    mime_type: str


@dataclass(frozen=True)
class GenerationRequest:
    """Prompt text plus the attachments that go with it."""

    prompt: str
    attachments: tuple[FileAttachment, ...] = ()


@dataclass(frozen=True)
class UploadedFileRef:
    """Backend-resident file produced by the uploader."""

    uri: str
    mime_type: str


@dataclass(frozen=True)
class ImageData:
    """
    First inline-data part of a response, not yet validated.

    ``data`` is a base64 string when the response came in as REST JSON and raw
    bytes when it came from the SDK (which decodes the wire base64 itself).
    """

    mime_type: str
    data: str | bytes


@dataclass(frozen=True)
class AssembledResponse:
    text: str
    image_data: ImageData | None = None


@dataclass(frozen=True)
class PersistedImage:
    path: str
    public_url: str


@dataclass(frozen=True)
class GenerationResult:
    """Caller-facing result of an image generation request."""

    text: str = ""
    image_url: str = ""
