"""Pydantic request/response schemas for the Reviews API."""

from __future__ import annotations

from pydantic import BaseModel, Field


class CreateReviewRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "product_id": "b2c3d4e5-f6a7-8901-bcde-f12345678901",
                    "rating": 5,
                    "text": "Battery lasts two days, camera is great in daylight.",
                    "images": ["reviews/phone-x-1.jpg"],
                    "show_on_main": False,
                }
            ]
        }
    }

    product_id: str
    rating: int = Field(..., ge=1, le=5)
    text: str | None = None
    images: list[str] | None = None
    show_on_main: bool = False


class UpdateReviewRequest(BaseModel):
    """Partial update. A ``product_id`` in the payload is ignored."""

    model_config = {"json_schema_extra": {"examples": [{"rating": 4, "text": "Camera is weaker at night."}]}}

    rating: int | None = Field(None, ge=1, le=5)
    text: str | None = None
    images: list[str] | None = None
    show_on_main: bool | None = None


class CreateReactionRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"reaction": "like"}]}}

    reaction: str = Field(..., max_length=50)


class CommentRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"text": "Same experience here."}]}}

    text: str = Field(..., min_length=1)


class IdResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"id": "e5f6a7b8-c9d0-1234-efab-345678901234"}]}}

    id: str


class StatusResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"status": "ok"}]}}

    status: str = "ok"
