"""ItemManager for dental items and inventory."""

import logging
from dataclasses import dataclass

from dentalcare.database.models.enums import ItemType
from dentalcare.database.models.items import Item
from dentalcare.managers.base import BaseManager

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ItemDefinition:
    """Static description of an item type."""

    display_name: str
    item_type: ItemType = ItemType.MISC
    description: str | None = None
    is_stackable: bool = True


ZOMBIE_TOOTH = "dental.zombie_tooth"
PLIERS = "dental.pliers"
ANESTHETIC = "dental.anesthetic"
FILLING = "dental.filling"

ITEM_CATALOG: dict[str, ItemDefinition] = {
    ZOMBIE_TOOTH: ItemDefinition(
        "Zombie Tooth",
        description="A tooth pulled from a corpse during practice.",
    ),
    PLIERS: ItemDefinition("Pliers", ItemType.TOOL, is_stackable=False),
    ANESTHETIC: ItemDefinition("Anesthetic", ItemType.CONSUMABLE),
    FILLING: ItemDefinition("Dental Filling", ItemType.CONSUMABLE),
}


class ItemManager(BaseManager):
    """Manager for item operations.

    Handles:
    - Granting items (stacking onto held stacks)
    - Inventory queries
    """

    def add_item(self, entity_id: int, item_key: str, quantity: int = 1) -> Item | None:
        """Give an entity one or more items.

        Stackable items join an existing stack the entity holds.

        Args:
            entity_id: Entity receiving the item.
            item_key: Item type identifier, e.g. 'dental.zombie_tooth'.
            quantity: How many to add.

        Returns:
            The stack holding the new items, or None if the entity is
            missing or quantity is not positive.
        """
        if quantity <= 0 or self.get_entity(entity_id) is None:
            return None

        definition = ITEM_CATALOG.get(item_key) or ItemDefinition(display_name=item_key)

        if definition.is_stackable:
            stack = self._get_stack(entity_id, item_key)
            if stack is not None:
                stack.quantity += quantity
                self.db.flush()
                return stack
            item = self._create_item(entity_id, item_key, definition, quantity)
        else:
            for _ in range(quantity):
                item = self._create_item(entity_id, item_key, definition, 1)

        logger.debug(f"Gave {quantity}x {item_key} to entity {entity_id}")
        return item

    def get_inventory(self, entity_id: int) -> list[Item]:
        """Get all items held by entity.

        Args:
            entity_id: Entity ID.

        Returns:
            List of Items held by the entity.
        """
        return (
            self.db.query(Item)
            .filter(
                Item.session_id == self.session_id,
                Item.holder_id == entity_id,
            )
            .order_by(Item.id)
            .all()
        )

    def count_items(self, entity_id: int, item_key: str) -> int:
        """Total quantity of an item type held by an entity."""
        return sum(
            item.quantity
            for item in self.get_inventory(entity_id)
            if item.item_key == item_key
        )

    def _get_stack(self, entity_id: int, item_key: str) -> Item | None:
        return (
            self.db.query(Item)
            .filter(
                Item.session_id == self.session_id,
                Item.holder_id == entity_id,
                Item.item_key == item_key,
                Item.is_stackable == True,
            )
            .first()
        )

    def _create_item(
        self,
        entity_id: int,
        item_key: str,
        definition: ItemDefinition,
        quantity: int,
    ) -> Item:
        item = Item(
            session_id=self.session_id,
            item_key=item_key,
            display_name=definition.display_name,
            description=definition.description,
            item_type=definition.item_type,
            holder_id=entity_id,
            quantity=quantity,
            is_stackable=definition.is_stackable,
        )
        self.db.add(item)
        self.db.flush()
        return item
