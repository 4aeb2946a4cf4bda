"""Item models."""

from typing import TYPE_CHECKING

from sqlalchemy import Boolean, Enum, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from dentalcare.database.models.base import Base, TimestampMixin
from dentalcare.database.models.enums import ItemType

if TYPE_CHECKING:
    from dentalcare.database.models.entities import Entity


class Item(Base, TimestampMixin):
    """A stack of items held by an entity."""

    __tablename__ = "items"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    session_id: Mapped[int] = mapped_column(
        ForeignKey("game_sessions.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Identity
    item_key: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        index=True,
        comment="Item type identifier (e.g., 'dental.zombie_tooth')",
    )
    display_name: Mapped[str] = mapped_column(
        String(200),
        nullable=False,
        comment="Display name",
    )
    description: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
    )
    item_type: Mapped[ItemType] = mapped_column(
        Enum(ItemType, values_callable=lambda obj: [e.value for e in obj]),
        default=ItemType.MISC,
        nullable=False,
    )

    # Current holder (who HAS it right now)
    holder_id: Mapped[int | None] = mapped_column(
        ForeignKey("entities.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
        comment="Entity who currently possesses the item",
    )

    # Stacking
    quantity: Mapped[int] = mapped_column(default=1, nullable=False)
    is_stackable: Mapped[bool] = mapped_column(
        Boolean,
        default=True,
        nullable=False,
    )

    # Relationships
    holder: Mapped["Entity | None"] = relationship(foreign_keys=[holder_id])

    def __repr__(self) -> str:
        qty_str = f" x{self.quantity}" if self.quantity > 1 else ""
        return f"<Item {self.item_key}{qty_str}>"
