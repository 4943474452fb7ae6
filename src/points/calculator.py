import math
import re
import unicodedata
from datetime import date
from typing import Dict, Optional, Tuple

from src.model.ReceiptModel import Receipt

ROUND_DOLLAR_POINTS = 50
QUARTER_MULTIPLE_POINTS = 25
ITEM_PAIR_POINTS = 5
DESCRIPTION_PRICE_MULTIPLIER = 0.2
ODD_DAY_POINTS = 6
AFTERNOON_POINTS = 10
AFTERNOON_START_HOUR = 14
AFTERNOON_END_HOUR = 16

DATE_PATTERN = re.compile(r'(\d{4})-(\d{2})-(\d{2})', re.ASCII)
TIME_PATTERN = re.compile(r'(\d{1,2}):(\d{2})', re.ASCII)
AMOUNT_PATTERN = re.compile(r'[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?', re.ASCII)

# Proleptic Gregorian year 0 is a leap year, like 2000
YEAR_ZERO_STAND_IN = 2000


def parse_amount(value: str) -> Optional[float]:
    """Parse a monetary string, returning None if it is not a finite number.

    Only plain ASCII decimal notation is accepted: no padding, underscores
    or other digit scripts.
    """
    if not isinstance(value, str) or not AMOUNT_PATTERN.fullmatch(value):
        return None
    amount = float(value)
    if not math.isfinite(amount):
        return None
    return amount


def parse_purchase_date(value: str) -> Optional[Tuple[int, int, int]]:
    match = DATE_PATTERN.fullmatch(value or "")
    if not match:
        return None
    year, month, day = (int(part) for part in match.groups())
    try:
        date(year or YEAR_ZERO_STAND_IN, month, day)
    except ValueError:
        return None
    return year, month, day


def parse_purchase_hour(value: str) -> Optional[int]:
    match = TIME_PATTERN.fullmatch(value or "")
    if not match:
        return None
    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        return None
    return hour


def retailer_points(retailer: str) -> int:
    # General category L* or N*, so non-Latin scripts count too
    return sum(1 for ch in retailer if unicodedata.category(ch)[0] in ("L", "N"))


def round_dollar_points(total: str) -> int:
    amount = parse_amount(total)
    if amount is not None and amount == math.floor(amount):
        return ROUND_DOLLAR_POINTS
    return 0


def quarter_multiple_points(total: str) -> int:
    amount = parse_amount(total)
    if amount is None or amount == math.floor(amount):
        return 0
    if math.fmod(amount * 100, 25) == 0:
        return QUARTER_MULTIPLE_POINTS
    return 0


def item_pair_points(receipt: Receipt) -> int:
    return (len(receipt.items) // 2) * ITEM_PAIR_POINTS


def item_description_points(receipt: Receipt) -> int:
    points = 0
    for item in receipt.items:
        # An empty trimmed description has length 0 and still qualifies
        if len(item.short_description.strip()) % 3 != 0:
            continue
        price = parse_amount(item.price)
        if price is not None:
            points += int(math.ceil(price * DESCRIPTION_PRICE_MULTIPLIER))
    return points


def odd_day_points(purchase_date: str) -> int:
    parsed = parse_purchase_date(purchase_date)
    if parsed is not None and parsed[2] % 2 == 1:
        return ODD_DAY_POINTS
    return 0


def afternoon_points(purchase_time: str) -> int:
    hour = parse_purchase_hour(purchase_time)
    if hour is not None and AFTERNOON_START_HOUR < hour < AFTERNOON_END_HOUR:
        return AFTERNOON_POINTS
    return 0


def points_breakdown(receipt: Receipt) -> Dict[str, int]:
    """Return the contribution of every rule, keyed by rule name."""
    return {
        "retailer": retailer_points(receipt.retailer),
        "round_dollar": round_dollar_points(receipt.total),
        "quarter_multiple": quarter_multiple_points(receipt.total),
        "item_pairs": item_pair_points(receipt),
        "item_descriptions": item_description_points(receipt),
        "odd_day": odd_day_points(receipt.purchase_date),
        "afternoon": afternoon_points(receipt.purchase_time),
    }


def calculate_points(receipt: Receipt) -> int:
    return sum(points_breakdown(receipt).values())
