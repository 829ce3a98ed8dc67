"""
Line-Item Tax Calculator

Computes subtotal, discount, net amount, VAT and line total for one
sale/purchase line, and aggregates line results into document totals.

Prices are ALWAYS VAT-inclusive:
- discriminate_vat=True (Factura A): the VAT is unbundled from the price,
  net = after_discount / (1 + rate/100), tax = after_discount - net
- discriminate_vat=False (Factura B/C): the price is final, VAT stays
  bundled, tax_amount = 0

INVARIANTS:
1. line_total == round(subtotal - discount_amount, 2)
2. Discriminated: net_amount * (1 + rate/100) == line_total within 1 cent
3. Not discriminated: tax_amount == 0 and line_total == net_amount
4. Rounding happens once, at return time
"""

from decimal import Decimal
from typing import Iterable

from fiscal.core.domain.line_item import DocumentTotals, LineItemInput, LineItemResult
from fiscal.core.math.money import (
    MONEY_PLACES,
    ZERO,
    money_div,
    money_mul,
    money_sub,
    percent_of,
    round_money,
    sum_money,
    vat_divisor,
)


def calculate_line_item(item: LineItemInput, places: int = MONEY_PLACES) -> LineItemResult:
    """
    Calculate the amounts of one line.

    Args:
        item: Validated line input
        places: Decimal places of the returned amounts (default 2)

    Returns:
        LineItemResult with every amount rounded to `places`

    Examples:
        2 x 100.00, 10% discount, IVA 21%, discriminated:
        subtotal=200.00, discount=20.00, net=148.76, tax=31.24, total=180.00
    """
    # 1-3. Gross subtotal, discount, amount after discount
    subtotal, discount_amount, after_discount = _discounted_amounts(item)

    # 4. Total cost, only when the unit cost is known
    total_cost = None
    if item.unit_cost is not None:
        total_cost = round_money(money_mul(item.quantity, item.unit_cost), places)

    if item.discriminate_vat:
        # 5. Factura A: unbundle VAT from the VAT-inclusive amount
        net_amount = _unbundle_vat(after_discount, item.tax_rate)

        # Tax is taken from the rounded figures so net + tax == total to the cent
        line_total = round_money(after_discount, places)
        net_rounded = round_money(net_amount, places)
        tax_rounded = money_sub(line_total, net_rounded)

        return LineItemResult(
            subtotal=round_money(subtotal, places),
            discount_amount=round_money(discount_amount, places),
            net_amount=net_rounded,
            tax_amount=tax_rounded,
            line_total=line_total,
            total_cost=total_cost,
            display_net_price=net_rounded,
            display_tax_amount=tax_rounded,
        )

    # 6. Factura B/C: final price, VAT included and not shown
    return LineItemResult(
        subtotal=round_money(subtotal, places),
        discount_amount=round_money(discount_amount, places),
        net_amount=round_money(after_discount, places),
        tax_amount=round_money(ZERO, places),
        line_total=round_money(after_discount, places),
        total_cost=total_cost,
    )


def calculate_document_totals(
    items: Iterable[LineItemResult],
    places: int = MONEY_PLACES,
) -> DocumentTotals:
    """
    Aggregate line results into document totals.

    Each field is summed independently and rounded once at the end:
    subtotal is the sum of net amounts (before VAT when discriminated),
    total_amount the sum of line totals.

    Args:
        items: Line results
        places: Decimal places of the totals

    Returns:
        DocumentTotals (all zero for an empty document)
    """
    items = list(items)

    return DocumentTotals(
        subtotal=round_money(sum_money(i.net_amount for i in items), places),
        discount_amount=round_money(sum_money(i.discount_amount for i in items), places),
        tax_amount=round_money(sum_money(i.tax_amount for i in items), places),
        total_amount=round_money(sum_money(i.line_total for i in items), places),
    )


def calculate_pre_vat_amount(item: LineItemInput, places: int = MONEY_PLACES) -> Decimal:
    """
    Amount of the line before VAT, whatever the voucher shows.

    Prices carry VAT even when it is not discriminated, so every other tax
    (perceptions, internal taxes) is computed on this amount. With
    discriminate_vat=True it equals the line's net_amount.

    Examples:
        2 x 100.00, 10% discount, IVA 21% → 148.76
    """
    _, _, after_discount = _discounted_amounts(item)
    return round_money(_unbundle_vat(after_discount, item.tax_rate), places)


def _discounted_amounts(item: LineItemInput) -> tuple[Decimal, Decimal, Decimal]:
    subtotal = money_mul(item.quantity, item.unit_price)
    discount_amount = percent_of(subtotal, item.discount_percent)
    return subtotal, discount_amount, money_sub(subtotal, discount_amount)


def _unbundle_vat(amount: Decimal, rate: Decimal) -> Decimal:
    return money_div(amount, vat_divisor(rate))
