"""Response models for the HTTP API."""

from pydantic import BaseModel, Field


class BasicPromptResponse(BaseModel):
    """Response model for the basic-prompt endpoint."""

    text: str = Field(default="", description="Model answer")


class ImageGenerationResponse(BaseModel):
    """Response model for the image-generation endpoint."""

    text: str = Field(default="", description="Text returned alongside the image")
    imageUrl: str = Field(default="", description="Public URL of the image, or empty")


class ErrorDetail(BaseModel):
    """Error detail in response."""

    code: int = Field(..., description="Error code")
    message: str = Field(..., description="Error message")
    status: str = Field(..., description="Error status")


class ErrorResponse(BaseModel):
    """Error response model."""

    error: ErrorDetail = Field(..., description="Error details")
