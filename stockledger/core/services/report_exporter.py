"""
CSV report exporter for aggregated inventory.

Output is UTF-8 text prefixed with a byte-order mark so spreadsheet tools
detect the encoding. Pricing columns are only written when the caller may
see pricing. Fields that a spreadsheet would evaluate as a formula are
neutralised with a leading apostrophe.
"""

import csv
import io
from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from stockledger.core.entities.inventory import GroupedItem
from stockledger.core.services.pricing import (
    MONEY_PLACES,
    PRICE_PLACES,
    round_money,
    round_price,
)

BOM = "\ufeff"
FORMULA_PREFIXES = ("=", "+", "-", "@")
FORMULA_GUARD = "'"

BASE_HEADERS = ["Item Name", "Total Quantity"]
PRICING_HEADERS = ["Total Value", "Average Price"]


def neutralize_formula(value: object) -> str:
    text = "" if value is None else str(value)
    if text.startswith(FORMULA_PREFIXES):
        return FORMULA_GUARD + text
    return text


def format_quantity(quantity: Decimal) -> str:
    """Plain decimal notation with no trailing zeros (``2``, ``2.5``)."""
    text = format(quantity, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def export_csv(
    groups: Iterable[GroupedItem],
    include_pricing: bool,
    delimiter: str = ",",
    price_places: int = PRICE_PLACES,
    money_places: int = MONEY_PLACES,
) -> str:
    """
    Render grouped items as CSV, largest total quantity first.

    Args:
        groups: Aggregated items.
        include_pricing: Add total value and average price columns.
        delimiter: Field delimiter.

    Returns:
        CSV text including the leading byte-order mark.
    """
    rows = sorted(groups, key=lambda g: g.total_quantity, reverse=True)

    output = io.StringIO()
    writer = csv.writer(
        output,
        delimiter=delimiter,
        quoting=csv.QUOTE_MINIMAL,
        lineterminator="\r\n",
    )

    headers = BASE_HEADERS + (PRICING_HEADERS if include_pricing else [])
    writer.writerow([neutralize_formula(h) for h in headers])

    for group in rows:
        row = [group.name, format_quantity(group.total_quantity)]
        if include_pricing:
            if group.total_quantity > 0:
                average = str(round_price(group.average_price, price_places))
            else:
                average = "0"
            row += [str(round_money(group.total_value, money_places)), average]
        writer.writerow([neutralize_formula(field) for field in row])

    return BOM + output.getvalue()


def export_filename(include_pricing: bool, on: date, prefix: str = "inventory") -> str:
    """File name embedding the visibility tag and the ISO date."""
    tag = "full" if include_pricing else "redacted"
    return f"{prefix}_{tag}_{on.isoformat()}.csv"
