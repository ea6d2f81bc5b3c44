"""
Unit tests for assemble_response.

Both accepted response shapes are covered: SDK objects and REST JSON mappings.
"""

from google.genai import types

from imagegen.entities.generation import AssembledResponse, ImageData
from imagegen.helpers.response_assembler import assemble_response


def _sdk_response(*parts: types.Part) -> types.GenerateContentResponse:
    return types.GenerateContentResponse(
        candidates=[
            types.Candidate(content=types.Content(role="model", parts=list(parts)))
        ]
    )


def _text(value: str) -> types.Part:
    return types.Part(text=value)


def _image(data: bytes, mime_type: str = "image/png") -> types.Part:
    return types.Part(inline_data=types.Blob(mime_type=mime_type, data=data))


class TestEmptyResponses:
    """Responses that carry nothing degrade to an empty result."""

    def test_no_candidates(self) -> None:
        result = assemble_response(types.GenerateContentResponse())

        assert result == AssembledResponse(text="", image_data=None)

    def test_empty_candidate_list(self) -> None:
        result = assemble_response(types.GenerateContentResponse(candidates=[]))

        assert result.text == ""
        assert result.image_data is None

    def test_candidate_without_content(self) -> None:
        response = types.GenerateContentResponse(
            candidates=[types.Candidate(finish_reason=types.FinishReason.SAFETY)]
        )

        result = assemble_response(response)

        assert result == AssembledResponse(text="", image_data=None)

    def test_candidate_without_parts(self) -> None:
        result = assemble_response(_sdk_response())

        assert result == AssembledResponse(text="", image_data=None)

    def test_none_response(self) -> None:
        assert assemble_response(None) == AssembledResponse(text="", image_data=None)

    def test_empty_mapping(self) -> None:
        assert assemble_response({}) == AssembledResponse(text="", image_data=None)


class TestSdkResponses:
    """Responses built from google.genai types."""

    def test_text_parts_concatenated_in_order_without_separator(self) -> None:
        result = assemble_response(
            _sdk_response(_text("Hello"), _text(", "), _text("world\n"), _text("!"))
        )

        assert result.text == "Hello, world\n!"
        assert result.image_data is None

    def test_text_and_image(self) -> None:
        result = assemble_response(
            _sdk_response(_text("Generated text description"), _image(b"\x89PNGdata"))
        )

        assert result.text == "Generated text description"
        assert result.image_data == ImageData(mime_type="image/png", data=b"\x89PNGdata")

    def test_image_only(self) -> None:
        result = assemble_response(_sdk_response(_image(b"jpeg-bytes", "image/jpeg")))

        assert result.text == ""
        assert result.image_data == ImageData(mime_type="image/jpeg", data=b"jpeg-bytes")

    def test_first_image_wins(self) -> None:
        result = assemble_response(
            _sdk_response(
                _image(b"first", "image/png"),
                _text("between"),
                _image(b"second", "image/jpeg"),
                _image(b"third", "image/webp"),
            )
        )

        assert result.image_data == ImageData(mime_type="image/png", data=b"first")
        assert result.text == "between"

    def test_text_after_image_is_still_collected(self) -> None:
        result = assemble_response(
            _sdk_response(_text("a"), _image(b"img"), _text("b"), _image(b"other"), _text("c"))
        )

        assert result.text == "abc"
        assert result.image_data is not None
        assert result.image_data.data == b"img"

    def test_only_first_candidate_is_used(self) -> None:
        response = types.GenerateContentResponse(
            candidates=[
                types.Candidate(
                    content=types.Content(role="model", parts=[_text("first")])
                ),
                types.Candidate(
                    content=types.Content(
                        role="model", parts=[_text("second"), _image(b"img")]
                    )
                ),
            ]
        )

        result = assemble_response(response)

        assert result.text == "first"
        assert result.image_data is None

    def test_invalid_mime_type_is_not_validated_here(self) -> None:
        result = assemble_response(_sdk_response(_image(b"data", "text/plain")))

        assert result.image_data == ImageData(mime_type="text/plain", data=b"data")


class TestRestJsonResponses:
    """Responses in the REST JSON form, with base64 text payloads."""

    def test_camel_case_inline_data(self) -> None:
        response = {
            "candidates": [
                {
                    "content": {
                        "parts": [
                            {"text": "Description with image"},
                            {
                                "inlineData": {
                                    "mimeType": "image/png",
                                    "data": "aW1hZ2U=",
                                }
                            },
                        ]
                    }
                }
            ]
        }

        result = assemble_response(response)

        assert result.text == "Description with image"
        assert result.image_data == ImageData(mime_type="image/png", data="aW1hZ2U=")

    def test_snake_case_inline_data(self) -> None:
        response = {
            "candidates": [
                {
                    "content": {
                        "parts": [
                            {"inline_data": {"mime_type": "image/webp", "data": "Zmlyc3Q="}},
                            {"inline_data": {"mime_type": "image/png", "data": "c2Vjb25k"}},
                        ]
                    }
                }
            ]
        }

        result = assemble_response(response)

        assert result.text == ""
        assert result.image_data == ImageData(mime_type="image/webp", data="Zmlyc3Q=")

    def test_corrupt_base64_is_passed_through(self) -> None:
        response = {
            "candidates": [
                {"content": {"parts": [{"inlineData": {"mimeType": "image/png", "data": "%%%"}}]}}
            ]
        }

        result = assemble_response(response)

        assert result.image_data == ImageData(mime_type="image/png", data="%%%")

    def test_missing_mime_type_defaults_to_empty(self) -> None:
        response = {"candidates": [{"content": {"parts": [{"inlineData": {"data": "aW1n"}}]}}]}

        result = assemble_response(response)

        assert result.image_data == ImageData(mime_type="", data="aW1n")

    def test_inline_data_without_payload_is_ignored(self) -> None:
        response = {
            "candidates": [
                {
                    "content": {
                        "parts": [
                            {"inlineData": {"mimeType": "image/png"}},
                            {"inlineData": {"mimeType": "image/jpeg", "data": "aW1n"}},
                        ]
                    }
                }
            ]
        }

        result = assemble_response(response)

        assert result.image_data == ImageData(mime_type="image/jpeg", data="aW1n")

    def test_parts_with_unknown_fields_are_skipped(self) -> None:
        response = {
            "candidates": [
                {
                    "content": {
                        "parts": [
                            {"functionCall": {"name": "noop"}},
                            {"text": "ok"},
                        ]
                    }
                }
            ]
        }

        assert assemble_response(response) == AssembledResponse(text="ok", image_data=None)
