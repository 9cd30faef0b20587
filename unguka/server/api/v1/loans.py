"""
API endpoints for member loans and their repayments.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, status

from unguka.core.models.domain.enums import LoanStatus
from unguka.core.models.io.loans import LoanCreate, LoanRead, LoanRepayment, LoanTransactionRead, LoanUpdate
from unguka.server.services.deps import LoanServiceDep

router = APIRouter(tags=["loans"])
transactions_router = APIRouter(tags=["loan-transactions"])


@router.post(
    "",
    response_model=LoanRead,
    status_code=status.HTTP_201_CREATED,
    summary="Grant Loan",
    description="Grant a loan to a member. Interest is a percentage added once to the principal.",
    responses={
        201: {"description": "Loan granted"},
        404: {"description": "Member or season not found in this cooperative"},
    },
)
async def create_loan(cooperative_id: int, data: LoanCreate, service: LoanServiceDep) -> LoanRead:
    return LoanRead.model_validate(await service.create(cooperative_id, data))


@router.get("", response_model=list[LoanRead], summary="List Loans")
async def list_loans(
    cooperative_id: int,
    service: LoanServiceDep,
    user_id: Optional[int] = None,
    status: Optional[LoanStatus] = None,
    season_id: Optional[int] = None,
) -> list[LoanRead]:
    loans = await service.list(cooperative_id, user_id=user_id, status=status, season_id=season_id)
    return [LoanRead.model_validate(loan) for loan in loans]


@router.get(
    "/{loan_id}",
    response_model=LoanRead,
    summary="Get Loan",
    responses={404: {"description": "Loan not found in this cooperative"}},
)
async def get_loan(cooperative_id: int, loan_id: int, service: LoanServiceDep) -> LoanRead:
    return LoanRead.model_validate(await service.get(cooperative_id, loan_id))


@router.patch(
    "/{loan_id}",
    response_model=LoanRead,
    summary="Update Loan",
    description="Reassign the borrower or the season of a loan, or set its status.",
    responses={404: {"description": "Loan, member or season not found in this cooperative"}},
)
async def update_loan(cooperative_id: int, loan_id: int, data: LoanUpdate, service: LoanServiceDep) -> LoanRead:
    return LoanRead.model_validate(await service.update(cooperative_id, loan_id, data))


@router.post(
    "/{loan_id}/repay",
    response_model=LoanRead,
    summary="Repay Loan",
    description="Record a repayment. The amount owed never drops below zero.",
    responses={
        400: {"description": "Loan already repaid"},
        404: {"description": "Loan not found in this cooperative"},
    },
)
async def repay_loan(cooperative_id: int, loan_id: int, data: LoanRepayment, service: LoanServiceDep) -> LoanRead:
    """
    Repay a loan.

    A loan transaction records the amount applied and what remains owed.
    The loan becomes `repaid` once nothing is owed.
    """
    return LoanRead.model_validate(await service.repay(cooperative_id, loan_id, data.amount))


@router.delete(
    "/{loan_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Loan",
    responses={404: {"description": "Loan not found in this cooperative"}},
)
async def delete_loan(cooperative_id: int, loan_id: int, service: LoanServiceDep) -> None:
    await service.delete(cooperative_id, loan_id)


@transactions_router.get(
    "",
    response_model=list[LoanTransactionRead],
    summary="List Loan Transactions",
    description="Loan repayments, newest first.",
)
async def list_loan_transactions(
    cooperative_id: int,
    service: LoanServiceDep,
    loan_id: Optional[int] = None,
    user_id: Optional[int] = None,
) -> list[LoanTransactionRead]:
    transactions = await service.list_transactions(cooperative_id, loan_id=loan_id, user_id=user_id)
    return [LoanTransactionRead.model_validate(transaction) for transaction in transactions]
