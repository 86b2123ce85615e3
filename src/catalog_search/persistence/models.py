"""SQLAlchemy models for the catalog entities."""

from __future__ import annotations

from typing import Any

from sqlalchemy import Boolean, Float, ForeignKey, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    """Declarative base for all catalog models."""


class Supplier(Base):
    __tablename__ = "suppliers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(255))
    address: Mapped[str | None] = mapped_column(String(255), nullable=True)
    zip: Mapped[str | None] = mapped_column(String(20), nullable=True)
    city: Mapped[str | None] = mapped_column(String(120), nullable=True)
    country: Mapped[str | None] = mapped_column(String(120), nullable=True)

    activities: Mapped[list[Activity]] = relationship(back_populates="supplier")

    def __repr__(self) -> str:
        return f"Supplier(id={self.id!r}, name={self.name!r})"


class Activity(Base):
    __tablename__ = "activities"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(String(255))
    price: Mapped[int] = mapped_column(Integer)
    currency: Mapped[str] = mapped_column(String(3), default="EUR")
    rating: Mapped[float] = mapped_column(Float, default=0.0)
    special_offer: Mapped[bool] = mapped_column(Boolean, default=False)
    supplier_id: Mapped[int | None] = mapped_column(
        ForeignKey("suppliers.id"), nullable=True
    )

    supplier: Mapped[Supplier | None] = relationship(back_populates="activities")

    def __init__(self, **kwargs: Any) -> None:
        # Column defaults only apply on INSERT; objects that never reach a
        # session still need them.
        kwargs.setdefault("currency", "EUR")
        kwargs.setdefault("rating", 0.0)
        kwargs.setdefault("special_offer", False)
        super().__init__(**kwargs)

    def __repr__(self) -> str:
        return f"Activity(id={self.id!r}, title={self.title!r})"
