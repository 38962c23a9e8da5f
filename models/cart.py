# models/cart.py
import logging

from models.costing import Costing
from models.item import Item

logger = logging.getLogger("shopping_cart.cart")


# Cart model representing a shopping cart.
# Entries are kept in insertion order and names are unique:
# adding a name that is already there merges the quantity instead.
class Cart(Costing):
    def __init__(self):
        self._items: list[Item] = []

    @property
    def items(self) -> list[Item]:
        # copies, so callers can't change the cart behind its back
        return [it.copy() for it in self._items]

    def find(self, name: str) -> tuple[Item | None, int]:
        """
        Look up an entry by name.

        Returns (entry, index) for the first match. The entry is the stored
        object itself, so changing it changes the cart.
        Returns (None, -1) when no entry has that name.
        """
        for index, current in enumerate(self._items):
            if current.name == name:
                return current, index
        return None, -1

    def increase_quantity(self, name: str, delta: int) -> bool:
        existing, _ = self.find(name)
        if existing is None:
            return False
        existing.quantity += delta
        return True

    def add(self, item: Item) -> None:
        # Same name already in cart -> just bump the quantity.
        # The existing price wins, the new item's price is ignored.
        if self.increase_quantity(item.name, item.quantity):
            logger.debug("Merged %s into existing entry", item)
            return
        self._items.append(item.copy())
        logger.debug("Added %s", item)

    def remove(self, name: str) -> None:
        # unknown name is a no-op
        _, index = self.find(name)
        if index >= 0:
            del self._items[index]
            logger.debug("Removed %s", name)

    def size(self) -> int:
        # distinct entries, not units
        return len(self._items)

    def cost(self) -> int:
        return sum(it.cost() for it in self._items)

    def clear(self):
        self._items.clear()

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, name: str) -> bool:
        return self.find(name)[1] >= 0

    def __str__(self) -> str:
        # "[banana 7 x 1$ eggs 3 x 2$]"
        return "[" + " ".join(str(it) for it in self._items) + "]"
