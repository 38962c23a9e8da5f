"""Shared fixtures for the shopping cart tests."""

import pytest

from models.cart import Cart
from models.item import Item


@pytest.fixture
def banana() -> Item:
    return Item(name="banana", price=1, quantity=7)


@pytest.fixture
def ice_cream() -> Item:
    return Item(name="ice cream", price=2, quantity=10)


@pytest.fixture
def eggs() -> Item:
    return Item(name="eggs", price=2, quantity=3)


@pytest.fixture
def cart(ice_cream: Item, banana: Item) -> Cart:
    """Cart holding ice cream (2 x 10) and banana (1 x 7), cost 27."""
    c = Cart()
    c.add(ice_cream)
    c.add(banana)
    return c
