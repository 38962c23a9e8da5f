# models/costing.py
from abc import ABC, abstractmethod


class Costing(ABC):
    # Anything that can report its current cost as a whole number.
    # Item and Cart both implement it, so a Discount can price either one.

    @abstractmethod
    def cost(self) -> int:
        pass
