import logging
from typing import Optional

from src.model.ReceiptModel import Receipt
from src.points.calculator import points_breakdown
from src.store.ReceiptStore import ReceiptStore

logger = logging.getLogger(__name__)


class ReceiptProcessor:
    """Stores submitted receipts and scores them on request."""

    def __init__(self, store: Optional[ReceiptStore] = None):
        self.store = store if store is not None else ReceiptStore()

    def submit_receipt(self, receipt: Receipt) -> str:
        receipt_id = self.store.put(receipt)
        logger.info("Stored receipt %s (%d items)", receipt_id, len(receipt.items))
        return receipt_id

    def compute_points(self, receipt_id: str) -> int:
        """Score the receipt stored under ``receipt_id``.

        Raises ReceiptNotFoundError if the id was never issued.
        """
        receipt = self.store.get(receipt_id)
        breakdown = points_breakdown(receipt)
        logger.debug("Points for receipt %s: %s", receipt_id, breakdown)
        return sum(breakdown.values())
