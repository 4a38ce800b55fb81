"""
SQLAlchemy ORM models for persistent storage.

Models mirror the dataclass models in cardledger.models.card but add
database persistence.
"""

from datetime import date

from sqlalchemy import (
    CheckConstraint,
    Date,
    ForeignKey,
    Integer,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class RarityDB(Base):
    """A rarity name. Created by seeding or `add rarity`, never deleted."""

    __tablename__ = "rarity"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), unique=True)

    def __repr__(self) -> str:
        return f"<RarityDB(id={self.id}, name={self.name})>"


class CardTypeDB(Base):
    """A (main, sub) card type pair."""

    __tablename__ = "card_type"
    __table_args__ = (UniqueConstraint("maintype", "subtype", name="uq_card_type"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    maintype: Mapped[str] = mapped_column(String(100))
    subtype: Mapped[str] = mapped_column(String(100))

    def __repr__(self) -> str:
        return f"<CardTypeDB(id={self.id}, main={self.maintype}, sub={self.subtype})>"


class SeriesDB(Base):
    """
    A series (set) of cards.

    The name is the natural key. Rows are never updated after insert.
    """

    __tablename__ = "series"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), unique=True)
    release_date: Mapped[date] = mapped_column(Date)
    prefix: Mapped[str | None] = mapped_column(String(20), nullable=True)
    n_cards: Mapped[int] = mapped_column(Integer, default=0, server_default="0")

    cards: Mapped[list["CardDB"]] = relationship(back_populates="series")

    def __repr__(self) -> str:
        return f"<SeriesDB(id={self.id}, name={self.name})>"


class CardDB(Base):
    """
    A single card printing.

    `number` is the natural key used by collect/sell. `in_collection`
    counts owned copies and is the only column mutated after insert.
    """

    __tablename__ = "cards"
    __table_args__ = (CheckConstraint("in_collection >= 0", name="ck_in_collection_non_negative"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), index=True)
    series_id: Mapped[int] = mapped_column(Integer, ForeignKey("series.id"), index=True)
    collection_number: Mapped[int] = mapped_column(Integer)
    number: Mapped[str] = mapped_column(String(50), unique=True)
    in_collection: Mapped[int] = mapped_column(Integer, default=0, server_default="0")
    rarity_id: Mapped[int] = mapped_column(Integer, ForeignKey("rarity.id"))
    card_type_id: Mapped[int] = mapped_column(Integer, ForeignKey("card_type.id"))

    series: Mapped["SeriesDB"] = relationship(back_populates="cards")
    rarity: Mapped["RarityDB"] = relationship()
    card_type: Mapped["CardTypeDB"] = relationship()

    def __repr__(self) -> str:
        return f"<CardDB(number={self.number}, owned={self.in_collection})>"
