"""API tests for products, stock, cash, sales and purchases."""

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


@pytest.fixture
def base(cooperative) -> str:
    return f"/api/v1/cooperatives/{cooperative.id}"


async def test_products_are_normalized_and_unique(client: AsyncClient, base):
    response = await client.post(f"{base}/products", json={"product_name": " Beans ", "unit_price": 800})
    assert response.status_code == 201
    assert response.json()["product_name"] == "beans"

    response = await client.post(f"{base}/products", json={"product_name": "BEANS"})
    assert response.status_code == 409


async def test_cash_balance(client: AsyncClient, base):
    response = await client.get(f"{base}/cash")
    assert response.json()["amount"] == 0.0

    response = await client.put(f"{base}/cash", json={"amount": 2500.567})
    assert response.status_code == 200
    assert response.json()["amount"] == 2500.57

    response = await client.put(f"{base}/cash", json={"amount": -1})
    assert response.status_code == 422


async def test_production_sale_and_purchase_out(client: AsyncClient, base, member, product, season):
    ids = {"user_id": member.id, "product_id": product.id, "season_id": season.id}

    response = await client.post(f"{base}/productions", json={**ids, "quantity": 100})
    assert response.status_code == 201
    assert response.json()["total_price"] == 50000.0

    [stock] = (await client.get(f"{base}/stocks")).json()
    assert (stock["quantity"], stock["total_price"]) == (100, 50000.0)

    sale = {
        "stock_id": stock["id"],
        "season_id": ids["season_id"],
        "quantity": 10,
        "unit_price": 600,
        "buyer": "Kigali Millers",
        "phone_number": "0788123456",
        "payment_type": "loan",
    }
    response = await client.post(f"{base}/sales", json=sale)
    assert response.status_code == 201
    assert response.json()["status"] == "unpaid"

    response = await client.post(f"{base}/sales/{response.json()['id']}/mark-paid")
    assert response.json()["status"] == "paid"
    assert (await client.get(f"{base}/cash")).json()["amount"] == 6000.0

    response = await client.post(f"{base}/sales", json={**sale, "quantity": 1000})
    assert response.status_code == 400
    assert response.json()["error_type"] == "InsufficientStockError"

    purchase_out = {"product_id": ids["product_id"], "season_id": ids["season_id"], "quantity": 20, "unit_price": 550}
    response = await client.post(f"{base}/purchase-outs", json=purchase_out)
    assert response.status_code == 400
    assert response.json()["error_type"] == "InsufficientFundsError"

    response = await client.post(f"{base}/purchase-outs", json={**purchase_out, "quantity": 10})
    assert response.status_code == 201
    assert (await client.get(f"{base}/cash")).json()["amount"] == 500.0


async def test_loan_purchase_input_and_repayment(client: AsyncClient, base, member, product, season):
    ids = {"user_id": member.id, "product_id": product.id, "season_id": season.id}
    await client.post(f"{base}/productions", json={**ids, "quantity": 100})

    response = await client.post(f"{base}/purchase-inputs", json={**ids, "quantity": 4, "payment_type": "loan"})
    assert response.status_code == 201
    loan_id = response.json()["loan_id"]

    response = await client.post(f"{base}/loans/{loan_id}/repay", json={"amount": 500})
    assert response.json()["amount_owed"] == 1500.0

    response = await client.get(f"{base}/loan-transactions", params={"loan_id": loan_id})
    assert [item["amount_paid"] for item in response.json()] == [500.0]

    response = await client.post(f"{base}/loans/{loan_id}/repay", json={"amount": 0})
    assert response.status_code == 422


async def test_update_purchase_input(client: AsyncClient, base, member, product, season):
    ids = {"user_id": member.id, "product_id": product.id, "season_id": season.id}
    await client.post(f"{base}/productions", json={**ids, "quantity": 100})
    response = await client.post(f"{base}/purchase-inputs", json={**ids, "quantity": 4, "payment_type": "loan"})
    purchase_id, loan_id = response.json()["id"], response.json()["loan_id"]

    response = await client.patch(f"{base}/purchase-inputs/{purchase_id}", json={"quantity": 6})
    assert response.status_code == 200
    assert response.json()["total_price"] == 3000.0
    assert response.json()["loan_id"] == loan_id
    assert (await client.get(f"{base}/loans/{loan_id}")).json()["amount_owed"] == 3000.0

    await client.post(f"{base}/loans/{loan_id}/repay", json={"amount": 100})
    response = await client.patch(f"{base}/purchase-inputs/{purchase_id}", json={"payment_type": "cash"})
    assert response.status_code == 400
    assert response.json()["error_type"] == "BusinessRuleError"

    response = await client.patch(f"{base}/purchase-inputs/{purchase_id}", json={"quantity": 0})
    assert response.status_code == 422

    response = await client.patch(f"{base}/purchase-inputs/999", json={"quantity": 1})
    assert response.status_code == 404
