"""Pydantic request/response schemas for the Catalogue API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

# --- Category Request Schemas ---


class CreateCategoryRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Citrus",
                    "description": "Oranges, lemons, limes and grapefruit.",
                    "parent_category_id": "b7c1e2a4-0f3d-4c55-9a51-2f6e8d9c1a00",
                }
            ]
        }
    }

    name: str
    description: str | None = None
    parent_category_id: str | None = None


class UpdateCategoryRequest(BaseModel):
    name: str | None = None
    description: str | None = None


# --- Product Request Schemas ---


class CreateProductRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Navel Oranges (1kg)",
                    "description": "Seedless, sweet and easy to peel.",
                    "price": 3.49,
                    "stock": 120,
                    "category_id": "b7c1e2a4-0f3d-4c55-9a51-2f6e8d9c1a00",
                }
            ]
        }
    }

    name: str
    description: str | None = None
    price: float
    stock: int = 0
    category_id: str


class UpdateProductRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"price": 3.99}]}}

    name: str | None = None
    description: str | None = None
    price: float | None = None
    category_id: str | None = None


class SetProductStockRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"stock": 80}]}}

    stock: int


# --- Response Schemas ---


class CategoryIdResponse(BaseModel):
    category_id: str


class ProductIdResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"product_id": "0c6f3b8e-5a4d-4e2b-8f1c-7d9a2b3c4e5f"}]}}

    product_id: str


class StatusResponse(BaseModel):
    status: str = "ok"


class CategoryResponse(BaseModel):
    category_id: str
    name: str
    description: str | None = None
    parent_category_id: str | None = None
    level: int
    path: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_category(cls, category) -> CategoryResponse:
        return cls(
            category_id=str(category.id),
            name=category.name,
            description=category.description,
            parent_category_id=str(category.parent_category_id) if category.parent_category_id else None,
            level=category.level,
            path=category.path,
            created_at=category.created_at,
            updated_at=category.updated_at,
        )


class ProductResponse(BaseModel):
    product_id: str
    name: str
    description: str | None = None
    price: float
    stock: int
    category_id: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_product(cls, product) -> ProductResponse:
        return cls(
            product_id=str(product.id),
            name=product.name,
            description=product.description,
            price=product.price,
            stock=product.stock,
            category_id=str(product.category_id),
            created_at=product.created_at,
            updated_at=product.updated_at,
        )
