"""Cart: the transient basket a sale is built from.

Nothing here is persisted.  At checkout each line is frozen into a
``SaleLineItem`` carrying a product snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from posledger.domain.exceptions import NotFoundError
from posledger.domain.model.product import Product
from posledger.domain.model.sale import SaleLineItem
from posledger.domain.model.value_objects import Money, Quantity


@dataclass
class CartItem:
    product: Product
    quantity: Quantity

    @property
    def line_total(self) -> Money:
        return self.product.price * self.quantity.value

    @property
    def line_profit(self) -> Money:
        return (self.product.price - self.product.cost) * self.quantity.value

    def to_line_item(self) -> SaleLineItem:
        return SaleLineItem(product=self.product.snapshot(), quantity=self.quantity)


@dataclass
class Cart:
    """Ordered cart lines, at most one per product id."""

    _items: dict[str, CartItem] = field(default_factory=dict)

    @property
    def items(self) -> list[CartItem]:
        return list(self._items.values())

    @property
    def is_empty(self) -> bool:
        return not self._items

    def add(self, product: Product, quantity: int = 1) -> CartItem:
        """Add a product, merging with an existing line for the same id."""
        existing = self._items.get(product.id)
        if existing is not None:
            existing.quantity = Quantity(existing.quantity.value + Quantity(quantity).value)
            return existing
        item = CartItem(product=product, quantity=Quantity(quantity))
        self._items[product.id] = item
        return item

    def set_quantity(self, product_id: str, quantity: int) -> None:
        """Set a line's quantity; zero or less removes the line."""
        if quantity <= 0:
            self.remove(product_id)
            return
        item = self._items.get(product_id)
        if item is None:
            raise NotFoundError(f"Product ID '{product_id}' is not in the cart")
        item.quantity = Quantity(quantity)

    def remove(self, product_id: str) -> None:
        if self._items.pop(product_id, None) is None:
            raise NotFoundError(f"Product ID '{product_id}' is not in the cart")

    def clear(self) -> None:
        self._items.clear()

    @property
    def total(self) -> Money:
        result = Money.zero()
        for item in self._items.values():
            result = result + item.line_total
        return result

    @property
    def profit(self) -> Money:
        result = Money.zero()
        for item in self._items.values():
            result = result + item.line_profit
        return result

    def to_line_items(self) -> list[SaleLineItem]:
        return [item.to_line_item() for item in self._items.values()]
