"""Pydantic request/response schemas for the Customer API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

# --- Request Schemas ---


class RegisterCustomerRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Wanjiru Kamau",
                    "email": "wanjiru@example.com",
                    "phone": "+254712345678",
                    "address": "12 Moi Avenue, Nairobi",
                }
            ]
        }
    }

    name: str
    email: str
    phone: str | None = None
    address: str | None = None


class UpdateCustomerRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"address": "4 Kenyatta Road, Nairobi"}]}}

    name: str | None = None
    email: str | None = None
    phone: str | None = None
    address: str | None = None


# --- Response Schemas ---


class CustomerIdResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"customer_id": "a1b2c3d4-e5f6-7890-abcd-ef1234567890"}]}}

    customer_id: str


class StatusResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"status": "ok"}]}}

    status: str = "ok"


class CustomerResponse(BaseModel):
    customer_id: str
    name: str
    email: str
    phone: str | None = None
    address: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_customer(cls, customer) -> CustomerResponse:
        return cls(
            customer_id=str(customer.id),
            name=customer.name,
            email=customer.email,
            phone=customer.phone,
            address=customer.address,
            created_at=customer.created_at,
            updated_at=customer.updated_at,
        )
