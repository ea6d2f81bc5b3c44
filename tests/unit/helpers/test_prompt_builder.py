from imagegen.entities.generation import UploadedFileRef
from imagegen.helpers.prompt_builder import build_content_parts


def test_prompt_only() -> None:
    parts = build_content_parts("A beautiful sunset over the mountains", [])

    assert len(parts) == 1
    assert parts[0].text == "A beautiful sunset over the mountains"


def test_prompt_precedes_files_in_input_order() -> None:
    uploaded = [
        UploadedFileRef(uri="https://files.example/a", mime_type="image/png"),
        UploadedFileRef(uri="https://files.example/b", mime_type="application/pdf"),
    ]

    parts = build_content_parts("Compare these", uploaded)

    assert [part.text for part in parts] == ["Compare these", None, None]
    assert parts[1].file_data.file_uri == "https://files.example/a"
    assert parts[1].file_data.mime_type == "image/png"
    assert parts[2].file_data.file_uri == "https://files.example/b"
    assert parts[2].file_data.mime_type == "application/pdf"


def test_empty_prompt_is_still_first_part() -> None:
    parts = build_content_parts("", [UploadedFileRef(uri="u", mime_type="image/jpeg")])

    assert parts[0].text == ""
    assert parts[1].file_data.file_uri == "u"
