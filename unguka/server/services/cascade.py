"""
Cascading deletes.

Dependents are removed leaf-first so foreign keys hold on databases that
enforce them. Counters (stock, cash) are not reversed here: deleting a
member, season, product or cooperative discards its history as a whole.
"""

from __future__ import annotations

from typing import Iterable

from unguka.core.database.repositories import SqlRepoBundle
from unguka.core.logging_config import get_logger

logger = get_logger(__name__)


async def _delete_payments(repos: SqlRepoBundle, payment_ids: Iterable[int]) -> None:
    payment_ids = list(payment_ids)
    if not payment_ids:
        return
    await repos.payment_transactions.delete_where(payment_id=payment_ids)
    await repos.payments.delete_where(id=payment_ids)


async def _delete_loans(repos: SqlRepoBundle, loan_ids: Iterable[int]) -> None:
    loan_ids = list(loan_ids)
    if not loan_ids:
        return
    await repos.loan_transactions.delete_where(loan_id=loan_ids)
    await repos.loans.delete_where(id=loan_ids)


async def delete_loan_dependents(repos: SqlRepoBundle, loan_id: int) -> None:
    await repos.loan_transactions.delete_where(loan_id=loan_id)


async def delete_payment_dependents(repos: SqlRepoBundle, payment_id: int) -> None:
    await repos.payment_transactions.delete_where(payment_id=payment_id)


async def delete_production_dependents(repos: SqlRepoBundle, production_id: int) -> None:
    await _delete_payments(repos, await repos.payments.list_ids(production_id=production_id))


async def delete_purchase_input_dependents(repos: SqlRepoBundle, purchase_input_id: int) -> None:
    await _delete_loans(repos, await repos.loans.list_ids(purchase_input_id=purchase_input_id))


async def delete_fee_type_dependents(repos: SqlRepoBundle, fee_type_id: int) -> None:
    await repos.fees.delete_where(fee_type_id=fee_type_id)


async def delete_user_dependents(repos: SqlRepoBundle, user_id: int) -> None:
    """Remove everything recorded for a member."""
    await _delete_payments(repos, await repos.payments.list_ids(user_id=user_id))
    purchase_input_ids = [p.id for p in await repos.purchase_inputs.list(filters={"user_id": user_id})]
    loan_ids = set(await repos.loans.list_ids(user_id=user_id))
    for purchase_input_id in purchase_input_ids:
        loan_ids.update(await repos.loans.list_ids(purchase_input_id=purchase_input_id))
    await _delete_loans(repos, loan_ids)
    await repos.fees.delete_where(user_id=user_id)
    await repos.purchase_inputs.delete_where(user_id=user_id)
    await repos.productions.delete_where(user_id=user_id)
    await repos.plots.delete_where(user_id=user_id)
    await repos.announcements.delete_where(user_id=user_id)
    logger.info(f"Deleted records of user {user_id}")


async def delete_season_dependents(repos: SqlRepoBundle, season_id: int) -> None:
    """Remove everything recorded in a season."""
    await _delete_payments(repos, await repos.payments.list_ids(season_id=season_id))
    purchase_input_ids = [p.id for p in await repos.purchase_inputs.list(filters={"season_id": season_id})]
    loan_ids = set(await repos.loans.list_ids(season_id=season_id))
    for purchase_input_id in purchase_input_ids:
        loan_ids.update(await repos.loans.list_ids(purchase_input_id=purchase_input_id))
    await _delete_loans(repos, loan_ids)
    await repos.fees.delete_where(season_id=season_id)
    await repos.sales.delete_where(season_id=season_id)
    await repos.purchase_outs.delete_where(season_id=season_id)
    await repos.purchase_inputs.delete_where(season_id=season_id)
    await repos.productions.delete_where(season_id=season_id)
    logger.info(f"Deleted records of season {season_id}")


async def delete_product_dependents(repos: SqlRepoBundle, cooperative_id: int, product_id: int) -> None:
    """Remove the stock, trades and productions of a product."""
    stock = await repos.stocks.get_for_product(cooperative_id, product_id)
    if stock is not None:
        await repos.sales.delete_where(stock_id=stock.id)
        await repos.stocks.delete_where(id=stock.id)

    production_ids = [p.id for p in await repos.productions.list(filters={"product_id": product_id})]
    if production_ids:
        await _delete_payments(repos, await repos.payments.list_ids(production_id=production_ids))
        await repos.productions.delete_where(id=production_ids)

    purchase_input_ids = [p.id for p in await repos.purchase_inputs.list(filters={"product_id": product_id})]
    if purchase_input_ids:
        loan_ids = []
        for purchase_input_id in purchase_input_ids:
            loan_ids.extend(await repos.loans.list_ids(purchase_input_id=purchase_input_id))
        await _delete_loans(repos, loan_ids)
        await repos.purchase_inputs.delete_where(id=purchase_input_ids)

    await repos.purchase_outs.delete_where(product_id=product_id)
    logger.info(f"Deleted records of product {product_id}")


async def delete_cooperative_dependents(repos: SqlRepoBundle, cooperative_id: int) -> None:
    """Remove every row owned by a cooperative."""
    for repo in (
        repos.payment_transactions,
        repos.payments,
        repos.loan_transactions,
        repos.loans,
        repos.fees,
        repos.fee_types,
        repos.sales,
        repos.purchase_outs,
        repos.purchase_inputs,
        repos.productions,
        repos.stocks,
        repos.plots,
        repos.announcements,
        repos.cash,
        repos.seasons,
        repos.products,
        repos.users,
    ):
        await repo.delete_where(cooperative_id=cooperative_id)
    logger.info(f"Deleted records of cooperative {cooperative_id}")
