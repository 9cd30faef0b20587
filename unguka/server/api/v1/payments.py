"""
API endpoints for member payments.

A payment pays a member for one production, after withholding what the
member owes in fees and loans. It may be settled in installments.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Response, status

from unguka.core.models.domain.enums import PaymentStatus
from unguka.core.models.io.payments import PaymentPreview, PaymentProcess, PaymentRead, PaymentTransactionRead
from unguka.server.services.deps import PaymentServiceDep

router = APIRouter(tags=["payments"])
transactions_router = APIRouter(tags=["payment-transactions"])


@router.get(
    "/preview/{production_id}",
    response_model=PaymentPreview,
    summary="Preview Payment",
    description="Show what processing a payment for this production would withhold and pay, without writing anything.",
    responses={404: {"description": "Production not found in this cooperative"}},
)
async def preview_payment(cooperative_id: int, production_id: int, service: PaymentServiceDep) -> PaymentPreview:
    return await service.preview(cooperative_id, production_id)


@router.post(
    "",
    response_model=PaymentRead,
    status_code=status.HTTP_201_CREATED,
    summary="Process Payment",
    description="Pay a member for a production. The first call creates the payment; later calls pay installments.",
    responses={
        200: {"description": "Installment paid on an existing payment"},
        201: {"description": "Payment created"},
        400: {"description": "Amount above what is due, payment already settled, or insufficient funds"},
        404: {"description": "Production not found in this cooperative"},
    },
)
async def process_payment(
    cooperative_id: int, data: PaymentProcess, response: Response, service: PaymentServiceDep
) -> PaymentRead:
    """
    Process a payment.

    On the first call for a production, the member's outstanding fees and
    pending loans (same season, or without a season) are withheld from the
    production value and settled, oldest first. `amount_paid` is then
    handed to the member out of the cash balance and must not exceed the
    amount due.

    Later calls pay installments of the remaining balance.
    """
    payment, created = await service.process(cooperative_id, data)
    if not created:
        response.status_code = status.HTTP_200_OK
    return PaymentRead.model_validate(payment)


@router.get("", response_model=list[PaymentRead], summary="List Payments")
async def list_payments(
    cooperative_id: int,
    service: PaymentServiceDep,
    user_id: Optional[int] = None,
    season_id: Optional[int] = None,
    status: Optional[PaymentStatus] = None,
) -> list[PaymentRead]:
    payments = await service.list(cooperative_id, user_id=user_id, season_id=season_id, status=status)
    return [PaymentRead.model_validate(payment) for payment in payments]


@router.get(
    "/{payment_id}",
    response_model=PaymentRead,
    summary="Get Payment",
    responses={404: {"description": "Payment not found in this cooperative"}},
)
async def get_payment(cooperative_id: int, payment_id: int, service: PaymentServiceDep) -> PaymentRead:
    return PaymentRead.model_validate(await service.get(cooperative_id, payment_id))


@router.delete(
    "/{payment_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Payment",
    description="Refund what was paid out back to cash and set the production back to pending. Withheld fees and loans stay settled.",
    responses={404: {"description": "Payment not found in this cooperative"}},
)
async def delete_payment(cooperative_id: int, payment_id: int, service: PaymentServiceDep) -> None:
    await service.delete(cooperative_id, payment_id)


@transactions_router.get(
    "",
    response_model=list[PaymentTransactionRead],
    summary="List Payment Transactions",
    description="Payout installments, newest first.",
)
async def list_payment_transactions(
    cooperative_id: int,
    service: PaymentServiceDep,
    user_id: Optional[int] = None,
    payment_id: Optional[int] = None,
) -> list[PaymentTransactionRead]:
    transactions = await service.list_transactions(cooperative_id, user_id=user_id, payment_id=payment_id)
    return [PaymentTransactionRead.model_validate(transaction) for transaction in transactions]
