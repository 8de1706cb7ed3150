"""
Price reconciliation helper.

Derives unit price from total price or the reverse while a batch is being
entered. Unit prices are kept at 4 decimal places and totals at 2, using
Decimal arithmetic throughout.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum

from stockledger.core.entities.inventory import Batch, Role

ZERO = Decimal("0")

PRICE_PLACES = 4
MONEY_PLACES = 2


class PriceMode(str, Enum):
    """Which price field the user is typing into."""

    UNIT = "unit"  # total derived from unit
    TOTAL = "total"  # unit derived from total


def to_decimal(value: Decimal | int | float | str | None) -> Decimal:
    """Coerce a number to Decimal without binary float noise."""
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def round_price(value: Decimal | int | float | str, places: int = PRICE_PLACES) -> Decimal:
    """Round a unit price to its stored precision."""
    return to_decimal(value).quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)


def round_money(value: Decimal | int | float | str, places: int = MONEY_PLACES) -> Decimal:
    """Round a monetary total to its stored precision."""
    return to_decimal(value).quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)


def total_from_unit(
    quantity: Decimal,
    unit_price: Decimal,
    places: int = MONEY_PLACES,
) -> Decimal:
    """Unit-driven derivation: total = round(quantity * unit, 2)."""
    return round_money(to_decimal(quantity) * to_decimal(unit_price), places)


def unit_from_total(
    quantity: Decimal,
    total_price: Decimal,
    places: int = PRICE_PLACES,
) -> Decimal:
    """Total-driven derivation: unit = round(total / quantity, 4), or 0 for no quantity."""
    quantity = to_decimal(quantity)
    if quantity <= 0:
        return ZERO
    return round_price(to_decimal(total_price) / quantity, places)


@dataclass
class PriceEntry:
    """
    Editing state of the price fields on a batch entry form.

    Exactly one field drives the other. Switching mode never re-derives
    anything by itself; it only changes the direction of later derivations.
    Quantity edits always re-derive the dependent field.
    """

    quantity: Decimal = ZERO
    unit_price: Decimal = ZERO
    total_price: Decimal = ZERO
    mode: PriceMode = PriceMode.UNIT
    price_places: int = PRICE_PLACES
    money_places: int = MONEY_PLACES

    @classmethod
    def for_batch(cls, batch: Batch | None = None, **kwargs) -> "PriceEntry":
        """Start an entry from an existing batch, or blank for a new one."""
        if batch is None:
            return cls(**kwargs)
        entry = cls(quantity=batch.quantity, unit_price=batch.price, **kwargs)
        if batch.quantity and batch.price:
            entry.total_price = total_from_unit(
                batch.quantity, batch.price, entry.money_places
            )
        return entry

    def switch_mode(self, mode: PriceMode) -> None:
        self.mode = PriceMode(mode)

    def set_quantity(self, quantity: Decimal | int | float | str) -> None:
        self.quantity = to_decimal(quantity)
        self._derive()

    def set_unit_price(self, unit_price: Decimal | int | float | str) -> None:
        self.unit_price = to_decimal(unit_price)
        if self.mode is PriceMode.UNIT:
            self._derive()

    def set_total_price(self, total_price: Decimal | int | float | str) -> None:
        self.total_price = to_decimal(total_price)
        if self.mode is PriceMode.TOTAL:
            self._derive()

    def _derive(self) -> None:
        if self.mode is PriceMode.UNIT:
            self.total_price = total_from_unit(
                self.quantity, self.unit_price, self.money_places
            )
        else:
            self.unit_price = unit_from_total(
                self.quantity, self.total_price, self.price_places
            )


def reconcile(
    quantity: Decimal | int | float | str,
    mode: PriceMode,
    unit_price: Decimal | int | float | str | None = None,
    total_price: Decimal | int | float | str | None = None,
    price_places: int = PRICE_PLACES,
    money_places: int = MONEY_PLACES,
) -> tuple[Decimal, Decimal]:
    """Stateless derivation. Returns ``(unit_price, total_price)``."""
    entry = PriceEntry(
        quantity=to_decimal(quantity),
        unit_price=to_decimal(unit_price),
        total_price=to_decimal(total_price),
        mode=PriceMode(mode),
        price_places=price_places,
        money_places=money_places,
    )
    entry._derive()
    if entry.mode is PriceMode.UNIT:
        entry.unit_price = round_price(entry.unit_price, price_places)
    return entry.unit_price, entry.total_price


def resolve_stored_price(
    role: Role,
    entered_unit_price: Decimal | None,
    prior_price: Decimal | None,
) -> Decimal:
    """
    Pick the unit price to persist for a batch.

    Roles without pricing visibility never set a price: the prior stored
    value is kept, or 0 for a brand-new batch.
    """
    if role.can_view_pricing and entered_unit_price is not None:
        return to_decimal(entered_unit_price)
    return to_decimal(prior_price)
