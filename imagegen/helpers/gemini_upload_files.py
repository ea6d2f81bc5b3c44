"""
Stage caller attachments on the Gemini Files API.

Uploaded files are referenced by URI in the generation request instead of
being inlined, which keeps request bodies small for large attachments.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from io import BytesIO
from typing import TYPE_CHECKING

from google.genai import types

from imagegen.entities.generation import FileAttachment, UploadedFileRef
from imagegen.errors import UploadError

if TYPE_CHECKING:
    from google.genai import Client


_logger = logging.getLogger(__name__)


async def _upload_file(client: Client, attachment: FileAttachment) -> UploadedFileRef:
    try:
        uploaded = await client.aio.files.upload(
            file=BytesIO(attachment.data),
            config=types.UploadFileConfig(
                mime_type=attachment.mime_type,
                display_name=attachment.name,
            ),
        )
    except Exception as e:
        _logger.error(
            "Failed to upload attachment %s: %s", attachment.name, e, exc_info=True
        )
        raise UploadError(f"Failed to upload {attachment.name}: {e}") from e

    if not uploaded.uri:
        raise UploadError(f"Upload of {attachment.name} returned no file URI")

    return UploadedFileRef(
        uri=uploaded.uri,
        mime_type=uploaded.mime_type or attachment.mime_type,
    )


async def gemini_upload_files(
    client: Client, attachments: Sequence[FileAttachment]
) -> list[UploadedFileRef]:
    """
    Upload every attachment and return the backend references in input order.

    Args:
        client: GenAI client used for this request
        attachments: Files supplied by the caller (may be empty)

    Returns:
        One UploadedFileRef per attachment, same order as the input

    Raises:
        UploadError: If any attachment cannot be staged
    """
    if not attachments:
        return []

    _logger.info("Uploading %d attachment(s)", len(attachments))
    # The first failure cancels the uploads still in flight
    try:
        async with asyncio.TaskGroup() as group:
            tasks = [
                group.create_task(_upload_file(client, attachment))
                for attachment in attachments
            ]
    except BaseExceptionGroup as eg:
        raise eg.exceptions[0]

    return [task.result() for task in tasks]
