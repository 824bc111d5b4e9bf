"""Application service: Checkout use case.

Turns a cart into a recorded sale and hands back the receipt payload:

1. Issue an order number (skipping any already in the ledger).
2. Freeze every cart line into a product snapshot.
3. Audit and append the sale.
4. Optionally take the sold units out of stock.

Stock is left alone by default; shops that want checkout to decrement
inventory turn on ``decrement_inventory``.
"""

from __future__ import annotations

import logging

from posledger.application.dto import CartItemSpec, ReceiptDTO, ReceiptLineDTO
from posledger.application.record_sale import RecordSaleHandler
from posledger.domain.exceptions import NotFoundError, ValidationError
from posledger.domain.model.cart import Cart
from posledger.domain.model.clock import Clock, local_now
from posledger.domain.model.product import AdjustmentDirection, Product
from posledger.domain.model.sale import PaymentMethod, Sale
from posledger.domain.repository.company_repository import CompanyRepository
from posledger.domain.repository.counter_repository import CounterRepository
from posledger.domain.repository.product_repository import ProductRepository
from posledger.domain.repository.sale_repository import SaleRepository
from posledger.domain.service.inventory_reconciler import InventoryReconciler
from posledger.domain.service.order_sequencer import OrderSequencer

logger = logging.getLogger(__name__)


class CheckoutHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        sale_repo: SaleRepository,
        counter_repo: CounterRepository,
        company_repo: CompanyRepository,
        clock: Clock = local_now,
        decrement_inventory: bool = False,
    ) -> None:
        self._product_repo = product_repo
        self._sale_repo = sale_repo
        self._company_repo = company_repo
        self._clock = clock
        self._decrement_inventory = decrement_inventory
        self._sequencer = OrderSequencer(counter_repo, clock)

    def build_cart(self, specs: list[CartItemSpec]) -> Cart:
        """Resolve each reference (product id, then barcode) into a cart line."""
        cart = Cart()
        for spec in specs:
            cart.add(self._resolve(spec.product_ref), spec.quantity)
        return cart

    def handle(
        self,
        cart: Cart,
        payment_method: PaymentMethod | str | None = None,
    ) -> ReceiptDTO:
        if cart.is_empty:
            raise ValidationError("Cart is empty")
        payment = PaymentMethod.parse(payment_method)

        sale = Sale.create(
            order_number=self._issue_order_number(),
            items=cart.to_line_items(),
            payment_method=payment,
            timestamp=self._clock(),
        )
        RecordSaleHandler(self._sale_repo).handle(sale)

        if self._decrement_inventory:
            self._take_stock(sale)

        return self._to_receipt(sale)

    # --- Internal helpers -----------------------------------------------------

    def _resolve(self, ref: str) -> Product:
        product = self._product_repo.get_by_id(ref)
        if product is None:
            product = self._product_repo.get_by_barcode(ref)
        if product is None:
            raise NotFoundError(f"No product with ID or barcode '{ref}'")
        return product

    def _issue_order_number(self) -> str:
        # A counter map that was lost or reset can re-issue numbers that
        # are already in the ledger.  The counter strictly increases, so
        # len(taken) + 1 attempts always reach a free number.
        taken = self._sale_repo.ids()
        for _ in range(len(taken) + 1):
            number = self._sequencer.next_order_number()
            if number not in taken:
                return number
            logger.warning("Order number %s is already in the ledger; issuing another", number)
        raise ValidationError("Could not issue an unused order number")

    def _take_stock(self, sale: Sale) -> None:
        reconciler = InventoryReconciler(self._product_repo)
        for item in sale.items:
            try:
                reconciler.adjust(item.product.id, item.quantity.value, AdjustmentDirection.SUBTRACT)
            except NotFoundError:
                logger.warning(
                    "Product %s left the catalog before checkout; stock not adjusted",
                    item.product.id,
                )

    def _to_receipt(self, sale: Sale) -> ReceiptDTO:
        return ReceiptDTO(
            order_number=sale.id,
            items=[
                ReceiptLineDTO(
                    name=item.product.name,
                    quantity=item.quantity.value,
                    price=str(item.product.price),
                    total=str(item.line_total),
                )
                for item in sale.items
            ],
            total=str(sale.total),
            timestamp=sale.timestamp.isoformat(),
            payment_method=sale.payment_method.value,
            company=self._company_repo.get(),
        )
