import pytest

from src.model.ReceiptItemModel import ReceiptItem
from src.model.ReceiptModel import Receipt


def make_receipt(
    retailer="",
    purchase_date="",
    purchase_time="",
    total="",
    items=(),
):
    return Receipt(
        retailer=retailer,
        purchase_date=purchase_date,
        purchase_time=purchase_time,
        total=total,
        items=tuple(ReceiptItem(short_description=d, price=p) for d, p in items),
    )


@pytest.fixture
def target_receipt():
    return make_receipt(
        retailer="Target",
        purchase_date="2022-01-01",
        purchase_time="13:01",
        total="35.35",
        items=[
            ("Mountain Dew 12PK", "6.49"),
            ("Emils Cheese Pizza", "12.25"),
            ("Knorr Creamy Chicken", "1.26"),
            ("Doritos Nacho Cheese", "3.35"),
            ("   Klarbrunn 12-PK 12 FL OZ  ", "12.00"),
        ],
    )


@pytest.fixture
def corner_market_receipt():
    return make_receipt(
        retailer="M&M Corner Market",
        purchase_date="2022-03-20",
        purchase_time="14:33",
        total="9.00",
        items=[("Gatorade", "2.25")] * 4,
    )
