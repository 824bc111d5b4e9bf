"""Money and Quantity: immutable values validated on construction."""

from __future__ import annotations

import functools
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from posledger.domain.exceptions import ValidationError

CENT = Decimal("0.01")


@functools.total_ordering
@dataclass(frozen=True)
class Money:
    """A Decimal amount in one currency.

    Amounts are signed: a sale line priced below cost carries a negative
    profit.  Only ``rounded()`` and ``__str__`` round; sums stay exact.
    """

    amount: Decimal
    currency: str = "USD"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0.00"))

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Build Money from user input or a stored JSON value.

        Floats go through ``str`` so 2.49 stays 2.49 rather than its
        binary expansion.
        """
        if isinstance(amount, bool):
            raise ValidationError(f"Invalid money amount: {amount!r}")
        try:
            return Money(Decimal(str(amount).strip()))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc

    # --- Arithmetic -----------------------------------------------------------

    def __add__(self, other: Money) -> Money:
        return Money(self.amount + self._same_currency(other).amount, self.currency)

    def __sub__(self, other: Money) -> Money:
        return Money(self.amount - self._same_currency(other).amount, self.currency)

    def __mul__(self, factor: int) -> Money:
        _require_int(factor, "multiply")
        return Money(self.amount * factor, self.currency)

    def __truediv__(self, divisor: int) -> Money:
        _require_int(divisor, "divide")
        if divisor == 0:
            raise ZeroDivisionError("Cannot divide Money by zero")
        return Money(self.amount / divisor, self.currency)

    def __lt__(self, other: Money) -> bool:
        return self.amount < self._same_currency(other).amount

    @property
    def is_negative(self) -> bool:
        return self.amount < 0

    def rounded(self) -> Money:
        """Round to whole cents."""
        return Money(self.amount.quantize(CENT, rounding=ROUND_HALF_UP), self.currency)

    def __str__(self) -> str:
        sign = "-" if self.amount < 0 else ""
        return f"{sign}${abs(self.amount):.2f}"

    def _same_currency(self, other: Money) -> Money:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )
        return other


def _require_int(value: object, verb: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Can only {verb} Money by int, got {type(value).__name__}")


@dataclass(frozen=True)
class Quantity:
    """Units of one product on a sale or cart line; always at least 1."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    def __str__(self) -> str:
        return str(self.value)
