"""
API endpoints for purchase inputs and purchase outs.

Purchase inputs are farm inputs a member takes out of the cooperative
stock, paid in cash or on loan. Purchase outs are produce the cooperative
delivers out of its stock and pays for out of its cash.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, status

from unguka.core.models.io.purchases import (
    PurchaseInputCreate,
    PurchaseInputRead,
    PurchaseInputUpdate,
    PurchaseOutCreate,
    PurchaseOutRead,
    PurchaseOutUpdate,
)
from unguka.server.services.deps import PurchaseInputServiceDep, PurchaseOutServiceDep

inputs_router = APIRouter(tags=["purchase-inputs"])
outs_router = APIRouter(tags=["purchase-outs"])


@inputs_router.post(
    "",
    response_model=PurchaseInputRead,
    status_code=status.HTTP_201_CREATED,
    summary="Record Purchase Input",
    description="Release inputs from stock to a member. Cash purchases credit the cash balance; loan purchases open a loan.",
    responses={
        201: {"description": "Purchase recorded"},
        400: {"description": "Insufficient stock"},
        404: {"description": "Member, product or season not found in this cooperative"},
    },
)
async def create_purchase_input(
    cooperative_id: int, data: PurchaseInputCreate, service: PurchaseInputServiceDep
) -> PurchaseInputRead:
    """
    Record a purchase input.

    - **payment_type**: `cash` credits the cooperative with the total;
      `loan` opens a pending loan for the total, returned as `loan_id`.
    """
    return await service.create(cooperative_id, data)


@inputs_router.get("", response_model=list[PurchaseInputRead], summary="List Purchase Inputs")
async def list_purchase_inputs(
    cooperative_id: int,
    service: PurchaseInputServiceDep,
    user_id: Optional[int] = None,
    season_id: Optional[int] = None,
) -> list[PurchaseInputRead]:
    return await service.list(cooperative_id, user_id=user_id, season_id=season_id)


@inputs_router.get(
    "/{purchase_id}",
    response_model=PurchaseInputRead,
    summary="Get Purchase Input",
    responses={404: {"description": "Purchase input not found in this cooperative"}},
)
async def get_purchase_input(
    cooperative_id: int, purchase_id: int, service: PurchaseInputServiceDep
) -> PurchaseInputRead:
    return await service.get(cooperative_id, purchase_id)


@inputs_router.patch(
    "/{purchase_id}",
    response_model=PurchaseInputRead,
    summary="Update Purchase Input",
    description="Change the quantity or payment type. Stock, cash and the linked loan move by the differences.",
    responses={
        400: {"description": "Insufficient stock or funds, or a partly repaid loan would be lost"},
        404: {"description": "Purchase input not found in this cooperative"},
    },
)
async def update_purchase_input(
    cooperative_id: int, purchase_id: int, data: PurchaseInputUpdate, service: PurchaseInputServiceDep
) -> PurchaseInputRead:
    """
    Correct a purchase input.

    - **quantity**: priced at the unit price recorded at purchase.
    - **payment_type**: switching to `loan` opens a loan for the total;
      switching to `cash` removes the loan if nothing was repaid on it.
    """
    return await service.update(cooperative_id, purchase_id, data)


@inputs_router.delete(
    "/{purchase_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Purchase Input",
    description="Return the inputs to stock, and reverse the cash credit or delete the loan it opened.",
    responses={404: {"description": "Purchase input not found in this cooperative"}},
)
async def delete_purchase_input(cooperative_id: int, purchase_id: int, service: PurchaseInputServiceDep) -> None:
    await service.delete(cooperative_id, purchase_id)


@outs_router.post(
    "",
    response_model=PurchaseOutRead,
    status_code=status.HTTP_201_CREATED,
    summary="Record Purchase Out",
    description="Take produce out of stock and pay for it out of cash.",
    responses={
        201: {"description": "Purchase out recorded"},
        400: {"description": "Insufficient stock or funds"},
        404: {"description": "Product or season not found in this cooperative"},
    },
)
async def create_purchase_out(
    cooperative_id: int, data: PurchaseOutCreate, service: PurchaseOutServiceDep
) -> PurchaseOutRead:
    return PurchaseOutRead.model_validate(await service.create(cooperative_id, data))


@outs_router.get("", response_model=list[PurchaseOutRead], summary="List Purchase Outs")
async def list_purchase_outs(
    cooperative_id: int,
    service: PurchaseOutServiceDep,
    product_id: Optional[int] = None,
    season_id: Optional[int] = None,
) -> list[PurchaseOutRead]:
    purchases = await service.list(cooperative_id, product_id=product_id, season_id=season_id)
    return [PurchaseOutRead.model_validate(purchase) for purchase in purchases]


@outs_router.get(
    "/{purchase_id}",
    response_model=PurchaseOutRead,
    summary="Get Purchase Out",
    responses={404: {"description": "Purchase out not found in this cooperative"}},
)
async def get_purchase_out(cooperative_id: int, purchase_id: int, service: PurchaseOutServiceDep) -> PurchaseOutRead:
    return PurchaseOutRead.model_validate(await service.get(cooperative_id, purchase_id))


@outs_router.patch(
    "/{purchase_id}",
    response_model=PurchaseOutRead,
    summary="Update Purchase Out",
    description="Change the quantity or unit price. Stock and cash move by the differences.",
    responses={
        400: {"description": "Insufficient stock or funds"},
        404: {"description": "Purchase out not found in this cooperative"},
    },
)
async def update_purchase_out(
    cooperative_id: int, purchase_id: int, data: PurchaseOutUpdate, service: PurchaseOutServiceDep
) -> PurchaseOutRead:
    return PurchaseOutRead.model_validate(await service.update(cooperative_id, purchase_id, data))


@outs_router.delete(
    "/{purchase_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Purchase Out",
    description="Return the quantity to stock and the total to cash.",
    responses={404: {"description": "Purchase out not found in this cooperative"}},
)
async def delete_purchase_out(cooperative_id: int, purchase_id: int, service: PurchaseOutServiceDep) -> None:
    await service.delete(cooperative_id, purchase_id)
