"""Pydantic request/response schemas for the Ordering API."""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- Basket Schemas ---


class CreateBasketRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{}]}}

    # Admins may open a basket on behalf of another user
    user_id: str | None = None


class ChangeBasketStatusRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"status": "Paid"}]}}

    status: str


# --- Order Product Schemas ---


class AddOrderProductRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "basket_id": "a1b2c3d4-e5f6-7890-abcd-ef1234567890",
                    "product_id": "b2c3d4e5-f6a7-8901-bcde-f12345678901",
                    "product_variant_id": "c3d4e5f6-a7b8-9012-cdef-123456789012",
                    "quantity": 2,
                }
            ]
        }
    }

    basket_id: str
    product_id: str
    product_variant_id: str
    quantity: int = Field(1, ge=1)


class ChangeQuantityRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"quantity": 3}]}}

    quantity: int = Field(..., ge=1)


# --- Address Schemas ---


class CreateAddressRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "receiver_name": "Jane Doe",
                    "receiver_phone": "+1-555-0100",
                    "address": "742 Evergreen Terrace, Springfield",
                    "floor": "2",
                    "ring_bell": True,
                    "zip_code": "49007",
                }
            ]
        }
    }

    user_id: str | None = None
    receiver_name: str = Field(..., max_length=150)
    receiver_phone: str = Field(..., max_length=30)
    address: str = Field(..., max_length=500)
    room_or_office: str | None = Field(None, max_length=50)
    door: str | None = Field(None, max_length=50)
    floor: str | None = Field(None, max_length=20)
    ring_bell: bool = False
    zip_code: str | None = Field(None, max_length=20)


class UpdateAddressRequest(BaseModel):
    receiver_name: str | None = Field(None, max_length=150)
    receiver_phone: str | None = Field(None, max_length=30)
    address: str | None = Field(None, max_length=500)
    room_or_office: str | None = Field(None, max_length=50)
    door: str | None = Field(None, max_length=50)
    floor: str | None = Field(None, max_length=20)
    ring_bell: bool | None = None
    zip_code: str | None = Field(None, max_length=20)


# --- Checkout Schemas ---


class CreateCheckoutRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "address_id": "d4e5f6a7-b8c9-0123-defa-234567890123",
                    "basket_id": "a1b2c3d4-e5f6-7890-abcd-ef1234567890",
                    "comment": "Leave at the door",
                }
            ]
        }
    }

    user_id: str | None = None
    address_id: str
    basket_id: str
    comment: str | None = None


class UpdateCheckoutRequest(BaseModel):
    address_id: str | None = None
    comment: str | None = None


# --- Response Schemas ---


class IdResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"id": "a1b2c3d4-e5f6-7890-abcd-ef1234567890"}]}}

    id: str


class StatusResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"status": "ok"}]}}

    status: str = "ok"
