from typing import List

from pydantic import BaseModel, ConfigDict, Field

from src.model.ReceiptItemModel import ReceiptItem
from src.model.ReceiptModel import Receipt


class ItemIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    short_description: str = Field(alias="shortDescription")
    price: str


class ReceiptIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    retailer: str
    purchase_date: str = Field(alias="purchaseDate")
    purchase_time: str = Field(alias="purchaseTime")
    total: str
    items: List[ItemIn]

    def to_receipt(self) -> Receipt:
        return Receipt(
            retailer=self.retailer,
            purchase_date=self.purchase_date,
            purchase_time=self.purchase_time,
            total=self.total,
            items=tuple(
                ReceiptItem(short_description=item.short_description, price=item.price)
                for item in self.items
            ),
        )


class ReceiptIdOut(BaseModel):
    id: str


class PointsOut(BaseModel):
    points: int
