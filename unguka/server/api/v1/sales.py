"""
API endpoints for sales of stock to buyers.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, status

from unguka.core.models.io.sales import SaleCreate, SaleRead, SaleUpdate
from unguka.server.services.deps import SaleServiceDep

router = APIRouter(tags=["sales"])


@router.post(
    "",
    response_model=SaleRead,
    status_code=status.HTTP_201_CREATED,
    summary="Record Sale",
    description="Sell from a stock. Cash sales are paid at once and credit the cash balance; loan sales stay unpaid.",
    responses={
        201: {"description": "Sale recorded"},
        400: {"description": "Insufficient stock"},
        404: {"description": "Stock or season not found in this cooperative"},
    },
)
async def create_sale(cooperative_id: int, data: SaleCreate, service: SaleServiceDep) -> SaleRead:
    return SaleRead.model_validate(await service.create(cooperative_id, data))


@router.get("", response_model=list[SaleRead], summary="List Sales")
async def list_sales(
    cooperative_id: int,
    service: SaleServiceDep,
    phone_number: Optional[str] = None,
    season_id: Optional[int] = None,
) -> list[SaleRead]:
    sales = await service.list(cooperative_id, phone_number=phone_number, season_id=season_id)
    return [SaleRead.model_validate(sale) for sale in sales]


@router.get(
    "/{sale_id}",
    response_model=SaleRead,
    summary="Get Sale",
    responses={404: {"description": "Sale not found in this cooperative"}},
)
async def get_sale(cooperative_id: int, sale_id: int, service: SaleServiceDep) -> SaleRead:
    return SaleRead.model_validate(await service.get(cooperative_id, sale_id))


@router.patch(
    "/{sale_id}",
    response_model=SaleRead,
    summary="Update Sale",
    description="Update a sale. Stock follows the quantity; cash follows the paid total.",
    responses={
        400: {"description": "Insufficient stock or funds"},
        404: {"description": "Sale not found in this cooperative"},
    },
)
async def update_sale(cooperative_id: int, sale_id: int, data: SaleUpdate, service: SaleServiceDep) -> SaleRead:
    return SaleRead.model_validate(await service.update(cooperative_id, sale_id, data))


@router.post(
    "/{sale_id}/mark-paid",
    response_model=SaleRead,
    summary="Mark Sale Paid",
    description="Record that the buyer of a loan sale has paid. The total is credited to cash.",
    responses={
        400: {"description": "Sale already paid"},
        404: {"description": "Sale not found in this cooperative"},
    },
)
async def mark_sale_paid(cooperative_id: int, sale_id: int, service: SaleServiceDep) -> SaleRead:
    return SaleRead.model_validate(await service.mark_paid(cooperative_id, sale_id))


@router.delete(
    "/{sale_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Sale",
    description="Return the quantity to stock; a paid sale's total is taken back out of cash.",
    responses={404: {"description": "Sale not found in this cooperative"}},
)
async def delete_sale(cooperative_id: int, sale_id: int, service: SaleServiceDep) -> None:
    await service.delete(cooperative_id, sale_id)
