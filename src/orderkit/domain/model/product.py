"""Product value object and the fixed-price catalog entries.

Products are immutable and compared by value: two ``Laptop`` instances
are interchangeable.  Prices are held as ``Decimal`` so discount factors
multiply exactly.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from orderkit.domain.exceptions import ValidationError


def to_decimal(amount: str | float | int | Decimal) -> Decimal:
    """Coerce a numeric amount to Decimal via its string form."""
    if isinstance(amount, Decimal):
        value = amount
    else:
        try:
            value = Decimal(str(amount))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid price: {amount!r}") from exc
    if not value.is_finite():
        raise ValidationError(f"Invalid price: {amount!r}")
    return value


@dataclass(frozen=True)
class Product:
    """A named, priced catalog item.

    Negative prices are accepted; there is no validation layer.
    """

    name: str
    price: Decimal

    def __post_init__(self) -> None:
        # frozen dataclass: bypass __setattr__ to normalise the price
        object.__setattr__(self, "price", to_decimal(self.price))

    def __str__(self) -> str:
        return f"{self.name} ({self.price})"


LAPTOP = Product("Laptop", Decimal("1000"))
PHONE = Product("Phone", Decimal("500"))
TABLET = Product("Tablet", Decimal("300"))

DEFAULT_CATALOG: tuple[Product, ...] = (LAPTOP, PHONE, TABLET)
