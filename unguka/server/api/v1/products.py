"""
API endpoints for products, their stock and the cooperative cash balance.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, status

from unguka.core.models.io.cash import CashRead, CashSet
from unguka.core.models.io.products import ProductCreate, ProductRead, ProductUpdate, StockRead
from unguka.server.services.deps import CashServiceDep, ProductServiceDep

router = APIRouter(tags=["products"])
stocks_router = APIRouter(tags=["stocks"])
cash_router = APIRouter(tags=["cash"])


@router.post(
    "",
    response_model=ProductRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Product",
    description="Create a product. Names are stored lower-cased and are unique within the cooperative.",
    responses={
        201: {"description": "Product created successfully"},
        409: {"description": "Product already exists"},
    },
)
async def create_product(cooperative_id: int, data: ProductCreate, service: ProductServiceDep) -> ProductRead:
    return ProductRead.model_validate(await service.create(cooperative_id, data))


@router.get("", response_model=list[ProductRead], summary="List Products")
async def list_products(cooperative_id: int, service: ProductServiceDep) -> list[ProductRead]:
    return [ProductRead.model_validate(product) for product in await service.list(cooperative_id)]


@router.get(
    "/{product_id}",
    response_model=ProductRead,
    summary="Get Product",
    responses={404: {"description": "Product not found in this cooperative"}},
)
async def get_product(cooperative_id: int, product_id: int, service: ProductServiceDep) -> ProductRead:
    return ProductRead.model_validate(await service.get(cooperative_id, product_id))


@router.patch(
    "/{product_id}",
    response_model=ProductRead,
    summary="Update Product",
    responses={
        404: {"description": "Product not found in this cooperative"},
        409: {"description": "Product already exists"},
    },
)
async def update_product(
    cooperative_id: int, product_id: int, data: ProductUpdate, service: ProductServiceDep
) -> ProductRead:
    return ProductRead.model_validate(await service.update(cooperative_id, product_id, data))


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Product",
    description="Delete a product with its stock, sales, productions, purchases and the loans opened for them.",
    responses={404: {"description": "Product not found in this cooperative"}},
)
async def delete_product(cooperative_id: int, product_id: int, service: ProductServiceDep) -> None:
    await service.delete(cooperative_id, product_id)


@stocks_router.get(
    "",
    response_model=list[StockRead],
    summary="List Stock",
    description="Quantity and book value held for each product.",
)
async def list_stocks(
    cooperative_id: int, service: ProductServiceDep, product_id: Optional[int] = None
) -> list[StockRead]:
    stocks = await service.list_stocks(cooperative_id, product_id=product_id)
    return [StockRead.model_validate(stock) for stock in stocks]


@stocks_router.get(
    "/{stock_id}",
    response_model=StockRead,
    summary="Get Stock",
    responses={404: {"description": "Stock not found in this cooperative"}},
)
async def get_stock(cooperative_id: int, stock_id: int, service: ProductServiceDep) -> StockRead:
    return StockRead.model_validate(await service.get_stock(cooperative_id, stock_id))


@cash_router.get(
    "",
    response_model=CashRead,
    summary="Get Cash Balance",
    description="The cash held by the cooperative. Zero until the first cash movement.",
)
async def get_cash(cooperative_id: int, service: CashServiceDep) -> CashRead:
    return await service.get(cooperative_id)


@cash_router.put(
    "",
    response_model=CashRead,
    summary="Set Cash Balance",
    description="Initialize or correct the cash balance of the cooperative.",
)
async def set_cash(cooperative_id: int, data: CashSet, service: CashServiceDep) -> CashRead:
    return await service.set(cooperative_id, data.amount)
