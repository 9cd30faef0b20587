"""Unit tests for cooperatives, members, plots, products, cash and announcements."""

from __future__ import annotations

import pytest

from unguka.core.errors import ConflictError, NotFoundError
from unguka.core.models.domain.enums import PaymentType, UserRole
from unguka.core.models.io.announcements import AnnouncementCreate, AnnouncementUpdate
from unguka.core.models.io.cooperatives import CooperativeCreate, CooperativeUpdate
from unguka.core.models.io.loans import LoanCreate, LoanUpdate
from unguka.core.models.io.members import MemberCreate, MemberUpdate
from unguka.core.models.io.plots import PlotCreate, PlotUpdate
from unguka.core.models.io.productions import ProductionCreate
from unguka.core.models.io.products import ProductCreate
from unguka.core.models.io.purchases import PurchaseInputCreate
from unguka.core.models.io.sales import SaleCreate
from unguka.server.services.announcements import AnnouncementService
from unguka.server.services.cooperatives import CooperativeService
from unguka.server.services.loans import LoanService
from unguka.server.services.members import MemberService
from unguka.server.services.plots import PlotService
from unguka.server.services.productions import ProductionService
from unguka.server.services.products import CashService, ProductService
from unguka.server.services.purchases import PurchaseInputService
from unguka.server.services.sales import SaleService


def _cooperative(name="Twisungane", registration_number="CF00999") -> CooperativeCreate:
    return CooperativeCreate(
        name=name,
        registration_number=registration_number,
        district="Gicumbi",
        sector="Byumba",
        contact_email="Contact@Twisungane.RW",
        contact_phone="+250788111222",
    )


class TestCooperativeService:
    async def test_create_and_conflicts(self, session, cooperative):
        service = CooperativeService(session)

        created = await service.create(_cooperative())
        assert created.contact_email == "contact@twisungane.rw"
        assert created.is_active is True

        with pytest.raises(ConflictError, match="name"):
            await service.create(_cooperative(name="Abahuzamugambi"))
        with pytest.raises(ConflictError, match="Registration number"):
            await service.create(_cooperative(name="Another coop", registration_number="CF00123"))

    async def test_update_keeps_own_name(self, session, cooperative):
        updated = await CooperativeService(session).update(
            cooperative.id, CooperativeUpdate(name="Abahuzamugambi", district="Nyanza")
        )

        assert updated.district == "Nyanza"

    async def test_unknown_cooperative(self, session):
        with pytest.raises(NotFoundError, match="Cooperative 7"):
            await CooperativeService(session).get(7)

    async def test_delete_removes_everything_owned(self, session, repos, member, product, season):
        coop_id = member.cooperative_id
        await ProductionService(session).create(
            coop_id, ProductionCreate(user_id=member.id, product_id=product.id, season_id=season.id, quantity=10)
        )
        await LoanService(session).create(coop_id, LoanCreate(user_id=member.id, principal=1000))
        await CashService(session).set(coop_id, 5000)

        await CooperativeService(session).delete(coop_id)

        assert await repos.cooperatives.get_by_id(coop_id) is None
        assert await repos.users.list(filters={"cooperative_id": coop_id}) == []
        assert await repos.productions.list(filters={"cooperative_id": coop_id}) == []
        assert await repos.stocks.list(filters={"cooperative_id": coop_id}) == []
        assert await repos.cash.get_for_cooperative(coop_id) is None


class TestMemberService:
    async def test_register_with_default_picture(self, session, cooperative):
        user = await MemberService(session).register(
            cooperative.id,
            MemberCreate(names="Mukamana Jeanne", phone_number="0788111111", national_id="1198070000000001"),
        )

        assert user.role == UserRole.MEMBER.value
        assert user.profile_picture

    async def test_phone_and_national_id_are_unique(self, session, cooperative, member):
        service = MemberService(session)

        with pytest.raises(ConflictError, match="Phone number"):
            await service.register(
                cooperative.id,
                MemberCreate(names="Someone", phone_number=member.phone_number, national_id="1198070000000001"),
            )
        with pytest.raises(ConflictError, match="National ID"):
            await service.register(
                cooperative.id,
                MemberCreate(names="Someone", phone_number="0788111111", national_id="1199080000000001"),
            )

    async def test_update_and_filter_by_role(self, session, cooperative, member, make_user):
        service = MemberService(session)
        await make_user(role=UserRole.MANAGER)

        await service.update(cooperative.id, member.id, MemberUpdate(names="Uwase Aline M."))

        members = await service.list(cooperative.id, role=UserRole.MEMBER)
        assert [(user.id, user.names) for user in members] == [(member.id, "Uwase Aline M.")]

    async def test_member_of_other_cooperative_is_not_found(self, session, cooperative, member):
        other = await CooperativeService(session).create(_cooperative())

        with pytest.raises(NotFoundError):
            await MemberService(session).get(other.id, member.id)

    async def test_delete_removes_member_records(self, session, repos, member, product, season):
        coop_id, user_id = member.cooperative_id, member.id
        await PlotService(session).create(coop_id, PlotCreate(user_id=user_id, size=12.5, upi="3/01/04/02/1234"))
        await ProductionService(session).create(
            coop_id, ProductionCreate(user_id=user_id, product_id=product.id, season_id=season.id, quantity=10)
        )
        await LoanService(session).create(coop_id, LoanCreate(user_id=user_id, principal=1000))

        await MemberService(session).delete(coop_id, user_id)

        assert await repos.users.get_by_id(user_id) is None
        assert await repos.plots.list(filters={"user_id": user_id}) == []
        assert await repos.productions.list(filters={"user_id": user_id}) == []
        assert await repos.loans.list(filters={"user_id": user_id}) == []

    async def test_delete_removes_reassigned_loan_of_member_purchase(
        self, session, repos, member, make_user, product, season
    ):
        coop_id, user_id = member.cooperative_id, member.id
        other = await make_user()
        await ProductionService(session).create(
            coop_id, ProductionCreate(user_id=user_id, product_id=product.id, season_id=season.id, quantity=10)
        )
        purchase = await PurchaseInputService(session).create(
            coop_id,
            PurchaseInputCreate(
                user_id=user_id, product_id=product.id, season_id=season.id, quantity=2, payment_type=PaymentType.LOAN
            ),
        )
        purchase_id, loan_id = purchase.id, purchase.loan_id
        await LoanService(session).update(coop_id, loan_id, LoanUpdate(user_id=other.id))

        await MemberService(session).delete(coop_id, user_id)

        assert await repos.purchase_inputs.get_by_id(purchase_id) is None
        assert await repos.loans.get_by_id(loan_id) is None
        assert await repos.users.get_by_id(other.id) is not None


class TestPlotService:
    async def test_upi_is_unique(self, session, member, make_user):
        coop_id = member.cooperative_id
        other = await make_user()
        service = PlotService(session)
        plot = await service.create(coop_id, PlotCreate(user_id=member.id, size=10, upi="3/01/04/02/1234"))
        await service.create(coop_id, PlotCreate(user_id=other.id, size=5, upi="3/01/04/02/9999"))

        with pytest.raises(ConflictError, match="UPI"):
            await service.create(coop_id, PlotCreate(user_id=other.id, size=5, upi="3/01/04/02/1234"))
        with pytest.raises(ConflictError):
            await service.update(coop_id, plot.id, PlotUpdate(upi="3/01/04/02/9999"))

    async def test_list_for_member(self, session, member, make_user):
        coop_id = member.cooperative_id
        other = await make_user()
        service = PlotService(session)
        await service.create(coop_id, PlotCreate(user_id=member.id, size=10, upi="3/01/04/02/1234"))
        await service.create(coop_id, PlotCreate(user_id=other.id, size=5, upi="3/01/04/02/9999"))

        plots = await service.list(coop_id, user_id=other.id)

        assert [plot.upi for plot in plots] == ["3/01/04/02/9999"]


class TestProductService:
    async def test_names_are_normalized_and_unique(self, session, cooperative, product):
        service = ProductService(session)

        beans = await service.create(cooperative.id, ProductCreate(product_name="  Beans ", unit_price=800))
        assert beans.product_name == "beans"

        with pytest.raises(ConflictError):
            await service.create(cooperative.id, ProductCreate(product_name="MAIZE"))

    async def test_delete_removes_stock_and_trades(self, session, repos, member, product, season):
        coop_id = member.cooperative_id
        await ProductionService(session).create(
            coop_id, ProductionCreate(user_id=member.id, product_id=product.id, season_id=season.id, quantity=10)
        )
        stock = await repos.stocks.get_for_product(coop_id, product.id)
        await SaleService(session).create(
            coop_id,
            SaleCreate(
                stock_id=stock.id,
                season_id=season.id,
                quantity=2,
                unit_price=600,
                buyer="Kigali Millers",
                phone_number="0788123456",
                payment_type=PaymentType.LOAN,
            ),
        )

        await ProductService(session).delete(coop_id, product.id)

        assert await ProductService(session).list(coop_id) == []
        assert await ProductService(session).list_stocks(coop_id) == []
        assert await SaleService(session).list(coop_id) == []
        assert await ProductionService(session).list(coop_id) == []


class TestCashService:
    async def test_missing_cash_reads_as_zero(self, session, cooperative):
        cash = await CashService(session).get(cooperative.id)

        assert cash.amount == 0.0
        assert cash.updated_at is None

    async def test_set_balance(self, session, cooperative):
        service = CashService(session)

        await service.set(cooperative.id, 1234.567)

        assert (await service.get(cooperative.id)).amount == 1234.57


class TestAnnouncementService:
    async def test_crud(self, session, member):
        coop_id = member.cooperative_id
        service = AnnouncementService(session)

        announcement = await service.create(
            coop_id,
            AnnouncementCreate(user_id=member.id, title="General assembly", description="Saturday at the office."),
        )
        await service.update(coop_id, announcement.id, AnnouncementUpdate(title="Assembly moved"))
        assert [item.title for item in await service.list(coop_id)] == ["Assembly moved"]

        await service.delete(coop_id, announcement.id)
        assert await service.list(coop_id) == []

    async def test_author_must_belong_to_cooperative(self, session, cooperative):
        with pytest.raises(NotFoundError, match="User 404"):
            await AnnouncementService(session).create(
                cooperative.id,
                AnnouncementCreate(user_id=404, title="Notice", description="Nobody wrote this."),
            )
