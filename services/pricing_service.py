# services/pricing_service.py

from __future__ import annotations
import logging
from dataclasses import dataclass

from models.costing import Costing

logger = logging.getLogger("shopping_cart.pricing")


@dataclass
class Discount:
    """
    Percentage discount that can price anything implementing Costing
    (a single Item or a whole Cart).

    percent is meant to be 0..100 but is not checked.
    """

    percent: int

    def calc(self, costing: Costing) -> int:
        # Amount saved, with the fractional part cut off (truncation, not rounding):
        # Discount(7).calc(<cost 20>) == 1, not 2.
        # Integer math only, so there is no float error to worry about.
        product = self.percent * costing.cost()
        # // floors, so handle the sign to truncate toward zero
        saved = abs(product) // 100
        if product < 0:
            saved = -saved
        logger.debug("%d%% of %d -> %d", self.percent, costing.cost(), saved)
        return saved
