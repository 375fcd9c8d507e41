"""Product listing pages and JSON endpoints."""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Form, HTTPException, Query, Request
from loguru import logger
from pydantic import BaseModel, Field, ValidationError, field_validator
from starlette.responses import HTMLResponse

from catalog_demo.api.http.deps import get_optional_auth_session, get_product_service
from catalog_demo.api.http.templating import render
from catalog_demo.core.security import sanitize_return_url
from catalog_demo.core.services import ProductService, sample_products
from catalog_demo.entities.core._base import utc_now
from catalog_demo.entities.service.product import (
    SORT_COLUMNS,
    Product,
    ProductPage,
    ProductQuery,
    StockStatus,
)
from catalog_demo.runtime.context import get_config

router = APIRouter(tags=["products"], dependencies=[Depends(get_optional_auth_session)])


class ProductEdit(BaseModel):
    """Edited values from the listing's edit form. Never persisted."""

    name: str = Field(min_length=1, max_length=255)
    category: str = Field(min_length=1, max_length=100)
    price: float = Field(ge=0)
    quantity: int = Field(ge=0)
    status: StockStatus

    @field_validator("name", "category", mode="before")
    @classmethod
    def _strip(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value


def _listing_query(
    page: str | None, search: str | None, sort_by: str | None, sort_order: str | None
) -> ProductQuery:
    return ProductQuery.from_params(
        page=page,
        search=search,
        sort_by=sort_by,
        sort_order=sort_order,
        limit=get_config().products.items_per_page,
    )


@router.get("/products", response_class=HTMLResponse)
def list_products(
    request: Request,
    page: str | None = None,
    search: str | None = None,
    sort_by: Annotated[str | None, Query(alias="sortBy")] = None,
    sort_order: Annotated[str | None, Query(alias="sortOrder")] = None,
    service: ProductService = Depends(get_product_service),
):
    query = _listing_query(page, search, sort_by, sort_order)
    result = service.get_products(query)
    return render(
        request,
        "products.html",
        title="Products",
        result=result,
        query=query,
        columns=SORT_COLUMNS,
        statuses=list(StockStatus),
        static_url=None,
    )


@router.get("/products/sample", response_class=HTMLResponse)
def list_sample_products(request: Request):
    products = sample_products(utc_now())
    result = ProductPage(
        products=products, total_count=len(products), page=1, limit=len(products)
    )
    return render(
        request,
        "products.html",
        title="Sample products",
        result=result,
        query=ProductQuery(limit=len(products)),
        columns=SORT_COLUMNS,
        statuses=list(StockStatus),
        static_url="/products/sample",
        description="In-memory products stamped with the server time. "
        "Edits are previewed, never saved.",
    )


@router.get("/products/all", response_class=HTMLResponse)
def list_all_products(
    request: Request,
    service: ProductService = Depends(get_product_service),
):
    """Every stored product in id order, without search, sorting or paging."""
    products = service.get_all_products()
    result = ProductPage(
        products=products, total_count=len(products), page=1, limit=max(len(products), 1)
    )
    return render(
        request,
        "products.html",
        title="All products",
        result=result,
        query=ProductQuery(limit=result.limit),
        columns=SORT_COLUMNS,
        statuses=list(StockStatus),
        static_url="/products/all",
        description=f"{len(products)} stored products in id order. "
        "Edits are previewed, never saved.",
    )


@router.post("/products/{product_id}/preview", response_class=HTMLResponse)
def preview_product_edit(
    request: Request,
    product_id: int,
    name: Annotated[str, Form()] = "",
    category: Annotated[str, Form()] = "",
    price: Annotated[str, Form()] = "",
    quantity: Annotated[str, Form()] = "",
    status: Annotated[str, Form()] = "",
    back: Annotated[str, Form()] = "/products",
):
    submitted = {
        "name": name,
        "category": category,
        "price": price,
        "quantity": quantity,
        "status": status,
    }
    back_url = sanitize_return_url(back)

    try:
        edit = ProductEdit.model_validate(submitted)
    except ValidationError as e:
        errors = {str(item["loc"][0]): item["msg"] for item in e.errors() if item["loc"]}
        return render(
            request,
            "product_preview.html",
            status_code=422,
            product_id=product_id,
            product=None,
            submitted=submitted,
            errors=errors,
            back_url=back_url,
        )

    product = Product(id=product_id, last_checked=utc_now(), **edit.model_dump())
    logger.info("Previewed edit of product {} (not saved)", product_id)
    return render(
        request,
        "product_preview.html",
        product_id=product_id,
        product=product,
        submitted=submitted,
        errors={},
        back_url=back_url,
    )


@router.get("/api/products")
def api_list_products(
    page: str | None = None,
    search: str | None = None,
    sort_by: Annotated[str | None, Query(alias="sortBy")] = None,
    sort_order: Annotated[str | None, Query(alias="sortOrder")] = None,
    service: ProductService = Depends(get_product_service),
) -> dict[str, Any]:
    query = _listing_query(page, search, sort_by, sort_order)
    result = service.get_products(query)
    return {
        "products": [
            product.model_dump(mode="json", by_alias=True) for product in result.products
        ],
        "totalCount": result.total_count,
        "currentPage": result.page,
        "totalPages": result.total_pages,
        "sortBy": query.safe_column,
        "sortOrder": query.safe_order.lower(),
        "search": query.search,
    }


@router.get("/api/products/{product_id}")
def api_get_product(
    product_id: int,
    service: ProductService = Depends(get_product_service),
) -> dict[str, Any]:
    product = service.get_product(product_id)
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return product.model_dump(mode="json", by_alias=True)
