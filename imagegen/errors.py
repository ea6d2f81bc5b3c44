class ImageGenError(Exception):
    """Base class for every failure raised while serving a generation request."""

    pass


class UploadError(ImageGenError):
    """Raise when a caller attachment cannot be staged on the backend."""

    pass


class GenerationError(ImageGenError):
    """Raise when the generation backend call fails."""

    pass


class DecodeError(ImageGenError):
    """Raise when an inline image payload is not valid base64."""

    pass


class UnsupportedMimeTypeError(ImageGenError):
    """Raise when an inline image MIME type is not of the form image/<subtype>."""

    pass


class StorageWriteError(ImageGenError):
    """Raise when a persisted image cannot be written to storage."""

    pass
