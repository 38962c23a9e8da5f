# models/item.py
from dataclasses import dataclass, replace

from models.costing import Costing
# Item model: one named line in a cart (unit price x quantity).
@dataclass
class Item(Costing):
    name: str
    price: int      # unit price, smallest currency unit
    quantity: int

    def cost(self) -> int:
        return self.price * self.quantity

    def copy(self) -> "Item":
        return replace(self)

    def __str__(self) -> str:
        # "banana 7 x 1$"
        return f"{self.name} {self.quantity} x {self.price}$"
