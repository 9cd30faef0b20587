"""
API endpoints for productions delivered by members.

Recording a production adds its quantity and value to the product's stock.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, status

from unguka.core.models.io.productions import ProductionCreate, ProductionRead, ProductionUpdate
from unguka.server.services.deps import ProductionServiceDep

router = APIRouter(tags=["productions"])


@router.post(
    "",
    response_model=ProductionRead,
    status_code=status.HTTP_201_CREATED,
    summary="Record Production",
    description="Record what a member delivered for a product in a season, priced at the product's unit price.",
    responses={
        201: {"description": "Production recorded and stock received"},
        400: {"description": "Already recorded for this member, product and season, or product has no price"},
        404: {"description": "Member, product or season not found in this cooperative"},
    },
)
async def create_production(
    cooperative_id: int, data: ProductionCreate, service: ProductionServiceDep
) -> ProductionRead:
    """
    Record a production.

    - **user_id**: the member who delivered.
    - **product_id**: the product delivered; its unit price is used.
    - **season_id**: the season of the harvest.
    - **quantity**: whole units delivered, at least 1.
    """
    return ProductionRead.model_validate(await service.create(cooperative_id, data))


@router.get("", response_model=list[ProductionRead], summary="List Productions")
async def list_productions(
    cooperative_id: int,
    service: ProductionServiceDep,
    user_id: Optional[int] = None,
    season_id: Optional[int] = None,
) -> list[ProductionRead]:
    productions = await service.list(cooperative_id, user_id=user_id, season_id=season_id)
    return [ProductionRead.model_validate(production) for production in productions]


@router.get(
    "/{production_id}",
    response_model=ProductionRead,
    summary="Get Production",
    responses={404: {"description": "Production not found in this cooperative"}},
)
async def get_production(cooperative_id: int, production_id: int, service: ProductionServiceDep) -> ProductionRead:
    return ProductionRead.model_validate(await service.get(cooperative_id, production_id))


@router.patch(
    "/{production_id}",
    response_model=ProductionRead,
    summary="Correct Production Quantity",
    description="Change the quantity of a production. The stock moves by the difference.",
    responses={
        400: {"description": "Production already paid for, or stock too short for the decrease"},
        404: {"description": "Production not found in this cooperative"},
    },
)
async def update_production(
    cooperative_id: int, production_id: int, data: ProductionUpdate, service: ProductionServiceDep
) -> ProductionRead:
    return ProductionRead.model_validate(await service.update(cooperative_id, production_id, data))


@router.delete(
    "/{production_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Production",
    description="Delete a production, releasing its quantity from stock and removing its payment.",
    responses={404: {"description": "Production not found in this cooperative"}},
)
async def delete_production(cooperative_id: int, production_id: int, service: ProductionServiceDep) -> None:
    await service.delete(cooperative_id, production_id)
