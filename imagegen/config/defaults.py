"""Default model names and instructions shared by the settings and the services."""

DEFAULT_BASIC_MODEL_NAME = "gemini-2.0-flash"
DEFAULT_IMAGE_MODEL_NAME = "gemini-2.0-flash-preview-image-generation"

DEFAULT_SYSTEM_INSTRUCTION = """
      Responde únicamente en español
      En formato markdown
      Usa negritas de esta forma __
      Usa el sistema métrico decimal
  """
