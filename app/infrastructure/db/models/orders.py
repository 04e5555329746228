from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from sqlalchemy import DateTime, ForeignKey, Integer, Numeric, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.db.engine import Base


class OrderModel(Base):
    __tablename__ = "orders"
    __table_args__ = ({"schema": "public"},)

    id: Mapped[str] = mapped_column(Text, primary_key=True)
    user_id: Mapped[int | None] = mapped_column(Integer, nullable=True)
    total_data: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    total_count: Mapped[int] = mapped_column(Integer, nullable=False, server_default=text("0"))
    status: Mapped[str] = mapped_column(Text, nullable=False, server_default=text("'pending'"))
    cost: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    estimated_cost: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    pricing_profile_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("public.pricing_profiles.id", ondelete="SET NULL"),
        nullable=True,
    )
    pricing_profile_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, server_default=text("now()"))


class OrderEntryModel(Base):
    __tablename__ = "order_entries"
    __table_args__ = ({"schema": "public"},)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    order_id: Mapped[str] = mapped_column(
        Text,
        ForeignKey("public.orders.id", ondelete="CASCADE"),
        nullable=False,
    )
    number: Mapped[str] = mapped_column(Text, nullable=False)
    allocation_gb: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    status: Mapped[str | None] = mapped_column(Text, nullable=True)
    cost: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
