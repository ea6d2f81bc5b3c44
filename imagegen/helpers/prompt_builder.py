from collections.abc import Sequence

from google.genai import types

from imagegen.entities.generation import UploadedFileRef


def build_content_parts(
    prompt: str, uploaded_files: Sequence[UploadedFileRef]
) -> list[types.Part]:
    """Prompt text first, then one file part per uploaded reference in order."""
    parts = [types.Part.from_text(text=prompt)]
    for uploaded_file in uploaded_files:
        parts.append(
            types.Part.from_uri(
                file_uri=uploaded_file.uri, mime_type=uploaded_file.mime_type
            )
        )
    return parts
