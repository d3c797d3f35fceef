"""FastAPI endpoints for the Catalogue.

Reads of categories and the product list are public. Product detail needs
any authenticated caller; every write needs the admin role.
"""

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from grocery.auth.dependencies import get_principal, require_admin
from grocery.auth.principal import Principal
from grocery.catalogue.api.schemas import (
    CategoryIdResponse,
    CategoryResponse,
    CreateCategoryRequest,
    CreateProductRequest,
    ProductIdResponse,
    ProductResponse,
    SetProductStockRequest,
    StatusResponse,
    UpdateCategoryRequest,
    UpdateProductRequest,
)
from grocery.catalogue.category.category import Category
from grocery.catalogue.category.management import CreateCategory, DeleteCategory, UpdateCategory
from grocery.catalogue.product.management import (
    CreateProduct,
    DeleteProduct,
    SetProductStock,
    UpdateProduct,
)
from grocery.catalogue.product.product import Product

product_router = APIRouter(prefix="/products", tags=["products"])
category_router = APIRouter(prefix="/categories", tags=["categories"])


# --- Product endpoints ---


@product_router.get("", response_model=list[ProductResponse])
async def list_products(category_id: str | None = None) -> list[ProductResponse]:
    repo = current_domain.repository_for(Product)
    if category_id:
        current_domain.repository_for(Category).get_category(category_id)
        products = repo.list_by_category(category_id)
    else:
        products = repo.list_all()
    return [ProductResponse.from_product(product) for product in products]


@product_router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str, principal: Principal = Depends(get_principal)) -> ProductResponse:
    product = current_domain.repository_for(Product).get_product(product_id)
    return ProductResponse.from_product(product)


@product_router.post("", status_code=201, response_model=ProductIdResponse)
async def create_product(
    body: CreateProductRequest, principal: Principal = Depends(require_admin)
) -> ProductIdResponse:
    command = CreateProduct(
        name=body.name,
        description=body.description,
        price=body.price,
        stock=body.stock,
        category_id=body.category_id,
        requested_by=principal.user_id,
    )
    result = current_domain.process(command, asynchronous=False)
    return ProductIdResponse(product_id=result)


@product_router.put("/{product_id}", response_model=StatusResponse)
async def update_product(
    product_id: str, body: UpdateProductRequest, principal: Principal = Depends(require_admin)
) -> StatusResponse:
    command = UpdateProduct(
        product_id=product_id,
        name=body.name,
        description=body.description,
        price=body.price,
        category_id=body.category_id,
        requested_by=principal.user_id,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@product_router.put("/{product_id}/stock", response_model=StatusResponse)
async def set_product_stock(
    product_id: str, body: SetProductStockRequest, principal: Principal = Depends(require_admin)
) -> StatusResponse:
    command = SetProductStock(product_id=product_id, stock=body.stock, requested_by=principal.user_id)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@product_router.delete("/{product_id}", response_model=StatusResponse)
async def delete_product(product_id: str, principal: Principal = Depends(require_admin)) -> StatusResponse:
    current_domain.process(DeleteProduct(product_id=product_id), asynchronous=False)
    return StatusResponse()


# --- Category endpoints ---


@category_router.get("", response_model=list[CategoryResponse])
async def list_categories() -> list[CategoryResponse]:
    categories = current_domain.repository_for(Category).list_all()
    return [CategoryResponse.from_category(category) for category in categories]


@category_router.get("/{category_id}", response_model=CategoryResponse)
async def get_category(category_id: str) -> CategoryResponse:
    category = current_domain.repository_for(Category).get_category(category_id)
    return CategoryResponse.from_category(category)


@category_router.get("/{category_id}/subcategories", response_model=list[CategoryResponse])
async def list_subcategories(category_id: str) -> list[CategoryResponse]:
    repo = current_domain.repository_for(Category)
    repo.get_category(category_id)
    return [CategoryResponse.from_category(category) for category in repo.list_by_parent(category_id)]


@category_router.post("", status_code=201, response_model=CategoryIdResponse)
async def create_category(
    body: CreateCategoryRequest, principal: Principal = Depends(require_admin)
) -> CategoryIdResponse:
    command = CreateCategory(
        name=body.name,
        description=body.description,
        parent_category_id=body.parent_category_id,
        requested_by=principal.user_id,
    )
    result = current_domain.process(command, asynchronous=False)
    return CategoryIdResponse(category_id=result)


@category_router.put("/{category_id}", response_model=StatusResponse)
async def update_category(
    category_id: str, body: UpdateCategoryRequest, principal: Principal = Depends(require_admin)
) -> StatusResponse:
    command = UpdateCategory(
        category_id=category_id,
        name=body.name,
        description=body.description,
        requested_by=principal.user_id,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@category_router.delete("/{category_id}", response_model=StatusResponse)
async def delete_category(category_id: str, principal: Principal = Depends(require_admin)) -> StatusResponse:
    current_domain.process(DeleteCategory(category_id=category_id), asynchronous=False)
    return StatusResponse()
