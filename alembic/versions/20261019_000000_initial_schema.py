"""Initial schema for Unguka

Revision ID: 20261019_000000
Revises: None
Create Date: 2026-10-19 00:00:00.000000

This is the initial migration that creates every table of the Unguka
service:
- Tenants and people (cooperatives, users, announcements)
- Calendar and land (seasons, plots)
- Stock and cash ledgers (products, stocks, cash)
- Operations (productions, purchase inputs, purchase outs, sales)
- Member finance (loans, loan transactions, fee types, fees, payments,
  payment transactions)

Revision format: YYYYMMDD_HHMMSS_description

"""

from typing import List, Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "20261019_000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _id() -> sa.Column:
    return sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True)


def _cooperative_fk(unique: bool = False) -> sa.Column:
    return sa.Column(
        "cooperative_id", sa.Integer(), sa.ForeignKey("cooperatives.id"), nullable=False, unique=unique
    )


def _timestamps(updated: bool = True) -> List[sa.Column]:
    columns = [sa.Column("created_at", sa.DateTime(timezone=True), nullable=False)]
    if updated:
        columns.append(sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False))
    return columns


def _priced() -> List[sa.Column]:
    return [
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.Column("unit_price", sa.Float(), nullable=False),
        sa.Column("total_price", sa.Float(), nullable=False),
    ]


def upgrade() -> None:
    """Create all tables."""

    op.create_table(
        "cooperatives",
        _id(),
        sa.Column("name", sa.String(50), nullable=False),
        sa.Column("registration_number", sa.String(7), nullable=False),
        sa.Column("district", sa.String(50), nullable=False),
        sa.Column("sector", sa.String(50), nullable=False),
        sa.Column("contact_email", sa.String(254), nullable=True),
        sa.Column("contact_phone", sa.String(16), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.UniqueConstraint("registration_number"),
    )
    op.create_index("ix_cooperatives_name", "cooperatives", ["name"], unique=True)

    op.create_table(
        "users",
        _id(),
        _cooperative_fk(),
        sa.Column("names", sa.String(50), nullable=False),
        sa.Column("phone_number", sa.String(13), nullable=False),
        sa.Column("national_id", sa.String(16), nullable=False),
        sa.Column("role", sa.String(16), nullable=False),
        sa.Column("profile_picture", sa.String(512), nullable=False),
        *_timestamps(),
        sa.UniqueConstraint("national_id"),
    )
    op.create_index("ix_users_cooperative_id", "users", ["cooperative_id"])
    op.create_index("ix_users_phone_number", "users", ["phone_number"], unique=True)
    op.create_index("ix_users_role", "users", ["role"])

    op.create_table(
        "seasons",
        _id(),
        _cooperative_fk(),
        sa.Column("name", sa.String(16), nullable=False),
        sa.Column("year", sa.Integer(), nullable=False),
        sa.Column("status", sa.String(16), nullable=False),
        *_timestamps(),
        sa.UniqueConstraint("cooperative_id", "name", "year", name="uq_seasons_cooperative_name_year"),
    )
    op.create_index("ix_seasons_cooperative_id", "seasons", ["cooperative_id"])

    op.create_table(
        "products",
        _id(),
        _cooperative_fk(),
        sa.Column("product_name", sa.String(100), nullable=False),
        sa.Column("unit_price", sa.Float(), nullable=False),
        *_timestamps(),
        sa.UniqueConstraint("cooperative_id", "product_name", name="uq_products_cooperative_name"),
    )
    op.create_index("ix_products_cooperative_id", "products", ["cooperative_id"])

    op.create_table(
        "stocks",
        _id(),
        _cooperative_fk(),
        sa.Column("product_id", sa.Integer(), sa.ForeignKey("products.id"), nullable=False),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.Column("total_price", sa.Float(), nullable=False),
        *_timestamps(),
        sa.UniqueConstraint("cooperative_id", "product_id", name="uq_stocks_cooperative_product"),
    )
    op.create_index("ix_stocks_cooperative_id", "stocks", ["cooperative_id"])
    op.create_index("ix_stocks_product_id", "stocks", ["product_id"])

    op.create_table(
        "cash",
        _id(),
        _cooperative_fk(unique=True),
        sa.Column("amount", sa.Float(), nullable=False),
        *_timestamps(),
    )

    op.create_table(
        "plots",
        _id(),
        _cooperative_fk(),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("size", sa.Float(), nullable=False),
        sa.Column("upi", sa.String(20), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_plots_cooperative_id", "plots", ["cooperative_id"])
    op.create_index("ix_plots_user_id", "plots", ["user_id"])
    op.create_index("ix_plots_upi", "plots", ["upi"], unique=True)

    op.create_table(
        "productions",
        _id(),
        _cooperative_fk(),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("product_id", sa.Integer(), sa.ForeignKey("products.id"), nullable=False),
        sa.Column("season_id", sa.Integer(), sa.ForeignKey("seasons.id"), nullable=False),
        *_priced(),
        sa.Column("payment_status", sa.String(16), nullable=False),
        *_timestamps(),
        sa.UniqueConstraint("user_id", "product_id", "season_id", name="uq_productions_user_product_season"),
    )
    for column in ("cooperative_id", "user_id", "product_id", "season_id"):
        op.create_index(f"ix_productions_{column}", "productions", [column])

    op.create_table(
        "purchase_inputs",
        _id(),
        _cooperative_fk(),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("product_id", sa.Integer(), sa.ForeignKey("products.id"), nullable=False),
        sa.Column("season_id", sa.Integer(), sa.ForeignKey("seasons.id"), nullable=False),
        *_priced(),
        sa.Column("payment_type", sa.String(8), nullable=False),
        *_timestamps(updated=False),
    )
    for column in ("cooperative_id", "user_id", "product_id", "season_id"):
        op.create_index(f"ix_purchase_inputs_{column}", "purchase_inputs", [column])

    op.create_table(
        "purchase_outs",
        _id(),
        _cooperative_fk(),
        sa.Column("product_id", sa.Integer(), sa.ForeignKey("products.id"), nullable=False),
        sa.Column("season_id", sa.Integer(), sa.ForeignKey("seasons.id"), nullable=False),
        *_priced(),
        *_timestamps(),
    )
    for column in ("cooperative_id", "product_id", "season_id"):
        op.create_index(f"ix_purchase_outs_{column}", "purchase_outs", [column])

    op.create_table(
        "sales",
        _id(),
        _cooperative_fk(),
        sa.Column("stock_id", sa.Integer(), sa.ForeignKey("stocks.id"), nullable=False),
        sa.Column("season_id", sa.Integer(), sa.ForeignKey("seasons.id"), nullable=False),
        *_priced(),
        sa.Column("buyer", sa.String(100), nullable=False),
        sa.Column("phone_number", sa.String(13), nullable=False),
        sa.Column("payment_type", sa.String(8), nullable=False),
        sa.Column("status", sa.String(8), nullable=False),
        *_timestamps(),
    )
    for column in ("cooperative_id", "stock_id", "season_id", "phone_number"):
        op.create_index(f"ix_sales_{column}", "sales", [column])

    op.create_table(
        "loans",
        _id(),
        _cooperative_fk(),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("season_id", sa.Integer(), sa.ForeignKey("seasons.id"), nullable=True),
        sa.Column("purchase_input_id", sa.Integer(), sa.ForeignKey("purchase_inputs.id"), nullable=True),
        sa.Column("principal", sa.Float(), nullable=False),
        sa.Column("interest", sa.Float(), nullable=False),
        sa.Column("amount_owed", sa.Float(), nullable=False),
        sa.Column("status", sa.String(16), nullable=False),
        *_timestamps(),
    )
    for column in ("cooperative_id", "user_id", "season_id", "purchase_input_id", "status"):
        op.create_index(f"ix_loans_{column}", "loans", [column])

    op.create_table(
        "loan_transactions",
        _id(),
        _cooperative_fk(),
        sa.Column("loan_id", sa.Integer(), sa.ForeignKey("loans.id"), nullable=False),
        sa.Column("amount_paid", sa.Float(), nullable=False),
        sa.Column("amount_remaining_to_pay", sa.Float(), nullable=False),
        sa.Column("transaction_date", sa.DateTime(timezone=True), nullable=False),
    )
    for column in ("cooperative_id", "loan_id", "transaction_date"):
        op.create_index(f"ix_loan_transactions_{column}", "loan_transactions", [column])

    op.create_table(
        "fee_types",
        _id(),
        _cooperative_fk(),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("amount", sa.Float(), nullable=False),
        sa.Column("description", sa.String(500), nullable=True),
        sa.Column("status", sa.String(16), nullable=False),
        sa.Column("is_per_season", sa.Boolean(), nullable=False),
        sa.Column("auto_apply_on_create", sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.UniqueConstraint("cooperative_id", "name", name="uq_fee_types_cooperative_name"),
    )
    op.create_index("ix_fee_types_cooperative_id", "fee_types", ["cooperative_id"])

    op.create_table(
        "fees",
        _id(),
        _cooperative_fk(),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("season_id", sa.Integer(), sa.ForeignKey("seasons.id"), nullable=True),
        sa.Column("fee_type_id", sa.Integer(), sa.ForeignKey("fee_types.id"), nullable=False),
        sa.Column("amount_owed", sa.Float(), nullable=False),
        sa.Column("amount_paid", sa.Float(), nullable=False),
        sa.Column("status", sa.String(16), nullable=False),
        sa.Column("paid_at", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
    )
    for column in ("cooperative_id", "user_id", "season_id", "fee_type_id", "status"):
        op.create_index(f"ix_fees_{column}", "fees", [column])

    op.create_table(
        "payments",
        _id(),
        _cooperative_fk(),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("production_id", sa.Integer(), sa.ForeignKey("productions.id"), nullable=False),
        sa.Column("season_id", sa.Integer(), sa.ForeignKey("seasons.id"), nullable=False),
        sa.Column("gross_amount", sa.Float(), nullable=False),
        sa.Column("total_deductions", sa.Float(), nullable=False),
        sa.Column("amount_due", sa.Float(), nullable=False),
        sa.Column("amount_paid", sa.Float(), nullable=False),
        sa.Column("amount_remaining_to_pay", sa.Float(), nullable=False),
        sa.Column("status", sa.String(16), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_payments_production_id", "payments", ["production_id"], unique=True)
    for column in ("cooperative_id", "user_id", "season_id", "status"):
        op.create_index(f"ix_payments_{column}", "payments", [column])

    op.create_table(
        "payment_transactions",
        _id(),
        _cooperative_fk(),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("payment_id", sa.Integer(), sa.ForeignKey("payments.id"), nullable=False),
        sa.Column("amount_paid", sa.Float(), nullable=False),
        sa.Column("amount_remaining_to_pay", sa.Float(), nullable=False),
        sa.Column("transaction_date", sa.DateTime(timezone=True), nullable=False),
    )
    for column in ("cooperative_id", "user_id", "payment_id", "transaction_date"):
        op.create_index(f"ix_payment_transactions_{column}", "payment_transactions", [column])

    op.create_table(
        "announcements",
        _id(),
        _cooperative_fk(),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("title", sa.String(100), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        *_timestamps(),
    )
    for column in ("cooperative_id", "user_id", "created_at"):
        op.create_index(f"ix_announcements_{column}", "announcements", [column])


def downgrade() -> None:
    """Drop all tables created in upgrade, dependents first."""
    for table in (
        "announcements",
        "payment_transactions",
        "payments",
        "fees",
        "fee_types",
        "loan_transactions",
        "loans",
        "sales",
        "purchase_outs",
        "purchase_inputs",
        "productions",
        "plots",
        "cash",
        "stocks",
        "products",
        "seasons",
        "users",
        "cooperatives",
    ):
        op.drop_table(table)
