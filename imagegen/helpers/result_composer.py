from imagegen.entities.generation import GenerationResult, PersistedImage


def compose_result(
    text: str, persisted_image: PersistedImage | None
) -> GenerationResult:
    image_url = persisted_image.public_url if persisted_image else ""
    return GenerationResult(text=text, image_url=image_url)
