import threading
import uuid
from typing import Dict

from src.errors import ReceiptNotFoundError
from src.model.ReceiptModel import Receipt


class ReceiptStore:
    """In-memory receipt storage keyed by generated id.

    Entries are never removed or replaced. All access to the mapping goes
    through a single lock, held for one dict operation at a time.
    """

    def __init__(self):
        self._receipts: Dict[str, Receipt] = {}
        self._lock = threading.Lock()

    def put(self, receipt: Receipt) -> str:
        receipt_id = str(uuid.uuid4())
        with self._lock:
            self._receipts[receipt_id] = receipt
        return receipt_id

    def get(self, receipt_id: str) -> Receipt:
        with self._lock:
            receipt = self._receipts.get(receipt_id)
        if receipt is None:
            raise ReceiptNotFoundError(receipt_id)
        return receipt

    def __contains__(self, receipt_id) -> bool:
        with self._lock:
            return receipt_id in self._receipts

    def __len__(self) -> int:
        with self._lock:
            return len(self._receipts)
