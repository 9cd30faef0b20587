"""API tests for members, plots and announcements of a cooperative."""

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


def _members(cooperative_id: int) -> str:
    return f"/api/v1/cooperatives/{cooperative_id}/members"


async def test_register_and_fetch_member(client: AsyncClient, cooperative):
    coop_id = cooperative.id
    payload = {"names": "Mukamana Jeanne", "phone_number": "+250788111111", "national_id": "1198070000000001"}

    response = await client.post(_members(coop_id), json=payload)
    assert response.status_code == 201
    member = response.json()
    assert member["role"] == "member"
    assert member["profile_picture"]

    response = await client.get(f"{_members(coop_id)}/{member['id']}")
    assert response.json()["names"] == "Mukamana Jeanne"

    response = await client.post(_members(coop_id), json={**payload, "national_id": "1198070000000002"})
    assert response.status_code == 409


@pytest.mark.parametrize("phone_number", ["0712345678", "078812345", "+250688123456"])
async def test_invalid_phone_rejected(client: AsyncClient, cooperative, phone_number):
    response = await client.post(
        _members(cooperative.id),
        json={"names": "Mukamana Jeanne", "phone_number": phone_number, "national_id": "1198070000000001"},
    )

    assert response.status_code == 422


async def test_list_by_role_and_delete(client: AsyncClient, member, make_user):
    from unguka.core.models.domain.enums import UserRole

    coop_id, member_id = member.cooperative_id, member.id
    await make_user(role=UserRole.ACCOUNTANT)

    response = await client.get(_members(coop_id), params={"role": "member"})
    assert [item["id"] for item in response.json()] == [member_id]

    assert (await client.delete(f"{_members(coop_id)}/{member_id}")).status_code == 204
    assert (await client.get(f"{_members(coop_id)}/{member_id}")).status_code == 404


async def test_member_is_scoped_to_cooperative(client: AsyncClient, member):
    response = await client.get(f"{_members(member.cooperative_id + 1)}/{member.id}")

    assert response.status_code == 404


async def test_plots_and_announcements(client: AsyncClient, member):
    coop_id, member_id = member.cooperative_id, member.id
    base = f"/api/v1/cooperatives/{coop_id}"

    response = await client.post(f"{base}/plots", json={"user_id": member_id, "size": 12.5, "upi": "3/01/04/02/1234"})
    assert response.status_code == 201
    response = await client.post(f"{base}/plots", json={"user_id": member_id, "size": 3, "upi": "3/01/04/02/1234"})
    assert response.status_code == 409

    response = await client.post(
        f"{base}/announcements",
        json={"user_id": member_id, "title": "General assembly", "description": "Saturday at the office."},
    )
    assert response.status_code == 201
    response = await client.get(f"{base}/announcements")
    assert [item["title"] for item in response.json()] == ["General assembly"]
