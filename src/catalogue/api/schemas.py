"""Pydantic request/response schemas for the Catalogue API."""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- Category Request Schemas ---


class CreateCategoryRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Smartphones",
                    "url": "smartphones",
                    "image": "categories/smartphones.png",
                    "parent_id": "a1b2c3d4-e5f6-7890-abcd-ef1234567890",
                    "parameter_ids": ["d4e5f6a7-b8c9-0123-defa-234567890123"],
                }
            ]
        }
    }

    name: str = Field(..., max_length=100)
    url: str = Field(..., max_length=200)
    image: str | None = Field(None, max_length=500)
    parent_id: str | None = None
    parameter_ids: list[str] | None = None


class UpdateCategoryRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"name": "Phones", "image": "categories/phones.png"}]}}

    name: str | None = Field(None, max_length=100)
    url: str | None = Field(None, max_length=200)
    image: str | None = Field(None, max_length=500)
    parent_id: str | None = None
    parameter_ids: list[str] | None = None


# --- Parameter / Tag / Color / Brand Request Schemas ---


class CreateParameterRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"name": "Screen size", "url": "screen-size"}]}}

    name: str = Field(..., max_length=100)
    url: str | None = Field(None, max_length=200)


class UpdateParameterRequest(BaseModel):
    name: str | None = Field(None, max_length=100)
    url: str | None = Field(None, max_length=200)


class CreateTagRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"name": "Under 1000", "url": "UnderOneThousand"}]}}

    name: str = Field(..., max_length=100)
    url: str = Field(..., max_length=200)


class UpdateTagRequest(BaseModel):
    name: str | None = Field(None, max_length=100)
    url: str | None = Field(None, max_length=200)


class CreateColorRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"name": "Midnight", "url": "midnight", "code": "#191970"}]}}

    name: str = Field(..., max_length=100)
    url: str = Field(..., max_length=200)
    code: str | None = Field(None, max_length=20)


class UpdateColorRequest(BaseModel):
    name: str | None = Field(None, max_length=100)
    url: str | None = Field(None, max_length=200)
    code: str | None = Field(None, max_length=20)


class CreateBrandRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [{"name": "Acme", "url": "acme", "image": "brands/acme.svg", "show_on_main": True}]
        }
    }

    name: str = Field(..., max_length=100)
    url: str = Field(..., max_length=200)
    image: str | None = Field(None, max_length=500)
    show_on_main: bool = False


class UpdateBrandRequest(BaseModel):
    name: str | None = Field(None, max_length=100)
    url: str | None = Field(None, max_length=200)
    image: str | None = Field(None, max_length=500)
    show_on_main: bool | None = None


# --- Product Request Schemas ---


class ParameterValue(BaseModel):
    parameter_id: str
    value: str = Field(..., max_length=255)


class CreateProductRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Acme Phone X",
                    "url": "acme-phone-x",
                    "price": 799.0,
                    "old_price": 899.0,
                    "description": "6.1 inch display, 128 GB.",
                    "available": True,
                    "images": ["products/phone-x-front.png"],
                    "category_id": "a1b2c3d4-e5f6-7890-abcd-ef1234567890",
                    "brand_id": "b2c3d4e5-f6a7-8901-bcde-f12345678901",
                    "color_ids": ["c3d4e5f6-a7b8-9012-cdef-123456789012"],
                    "tag_ids": [],
                    "parameters": [{"parameter_id": "d4e5f6a7-b8c9-0123-defa-234567890123", "value": "6.1"}],
                }
            ]
        }
    }

    name: str = Field(..., max_length=255)
    url: str = Field(..., max_length=255)
    price: float
    old_price: float | None = None
    description: str | None = None
    available: bool = True
    images: list[str] | None = None
    category_id: str | None = None
    brand_id: str | None = None
    color_ids: list[str] | None = None
    tag_ids: list[str] | None = None
    parameters: list[ParameterValue] | None = None


class UpdateProductRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"price": 749.0, "old_price": 799.0}]}}

    name: str | None = Field(None, max_length=255)
    url: str | None = Field(None, max_length=255)
    price: float | None = None
    old_price: float | None = None
    description: str | None = None
    available: bool | None = None
    images: list[str] | None = None
    category_id: str | None = None
    brand_id: str | None = None
    color_ids: list[str] | None = None
    tag_ids: list[str] | None = None
    parameters: list[ParameterValue] | None = None


class AddVariantRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [{"price": 819.0, "color_id": "c3d4e5f6-a7b8-9012-cdef-123456789012", "available": True}]
        }
    }

    price: float
    old_price: float | None = None
    available: bool = True
    color_id: str
    images: list[str] | None = None


class UpdateVariantRequest(BaseModel):
    price: float | None = None
    old_price: float | None = None
    available: bool | None = None
    color_id: str | None = None
    images: list[str] | None = None


# --- Response Schemas ---


class IdResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"id": "b2c3d4e5-f6a7-8901-bcde-f12345678901"}]}}

    id: str


class PriceRangeResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"min": 199.0, "max": 1299.0}]}}

    min: float | None = None
    max: float | None = None


class StatusResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"status": "ok"}]}}

    status: str = "ok"
