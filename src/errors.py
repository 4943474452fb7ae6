class ReceiptNotFoundError(KeyError):
    """Raised when no receipt is stored under the requested id."""

    def __init__(self, receipt_id: str):
        super().__init__(receipt_id)
        self.receipt_id = receipt_id

    def __str__(self):
        return f"No receipt found for id {self.receipt_id}"
