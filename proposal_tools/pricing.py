"""
Line totals and proposal totals (subtotal, discount, VAT, grand total).

Pure functions, no I/O. Every numeric field is coerced with to_number(), so
malformed YAML (missing qty, "abc" as a price, null pricing block) yields 0
instead of an exception.
"""
import math
from decimal import Decimal


def to_number(value):
    """Coerce a YAML scalar to int/float; anything missing, non-numeric or non-finite becomes 0."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        n = value
    elif isinstance(value, Decimal):
        n = float(value)
    elif isinstance(value, str):
        s = value.strip()
        if not s:
            return 0
        try:
            n = float(s)
        except ValueError:
            return 0
    else:
        return 0
    if isinstance(n, float) and not math.isfinite(n):
        return 0
    return n


def item_total(item: dict):
    return to_number(item.get("qty")) * to_number(item.get("unit_price"))


def attach_item_totals(items) -> list[dict]:
    """Return copies of the items with `total` set; input items are left untouched."""
    if not isinstance(items, (list, tuple)):
        return []
    result = []
    for it in items:
        it = dict(it) if isinstance(it, dict) else {}
        it["total"] = item_total(it)
        result.append(it)
    return result


def compute_totals(items, pricing: dict | None = None) -> dict:
    """
    Aggregate item totals into the pricing summary.

    taxable = max(subtotal - discount, 0); vat is exactly 0 unless vat_rate > 0;
    grand = taxable + vat. Returns
    {subtotal, discount, taxable, vat_rate, vat, grand}.
    """
    pricing = pricing if isinstance(pricing, dict) else {}
    subtotal = sum(
        (to_number(it.get("total")) if isinstance(it, dict) else 0 for it in (items or [])),
        0,
    )
    discount = to_number(pricing.get("discount"))
    vat_rate = to_number(pricing.get("vat_rate"))
    taxable = max(subtotal - discount, 0)
    vat = taxable * vat_rate / 100 if vat_rate > 0 else 0
    return {
        "subtotal": subtotal,
        "discount": discount,
        "taxable": taxable,
        "vat_rate": vat_rate,
        "vat": vat,
        "grand": taxable + vat,
    }
