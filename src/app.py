import logging

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.errors import ReceiptNotFoundError
from src.schemas.receipt import PointsOut, ReceiptIdOut, ReceiptIn
from src.service.processor import ReceiptProcessor

logger = logging.getLogger(__name__)

app = FastAPI(title="Receipt Processor")

processor = ReceiptProcessor()


def get_processor() -> ReceiptProcessor:
    return processor


@app.exception_handler(RequestValidationError)
async def invalid_receipt_handler(request: Request, exc: RequestValidationError):
    logger.warning("Rejected payload for %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"detail": "The receipt is invalid."})


@app.post("/receipts/process", response_model=ReceiptIdOut)
def process_receipt(payload: ReceiptIn, receipts: ReceiptProcessor = Depends(get_processor)):
    receipt_id = receipts.submit_receipt(payload.to_receipt())
    return ReceiptIdOut(id=receipt_id)


@app.get("/receipts/{receipt_id}/points", response_model=PointsOut)
def get_points(receipt_id: str, receipts: ReceiptProcessor = Depends(get_processor)):
    try:
        points = receipts.compute_points(receipt_id)
    except ReceiptNotFoundError:
        logger.warning("Points requested for unknown receipt %s", receipt_id)
        raise HTTPException(status_code=404, detail="No receipt found for that ID.")
    return PointsOut(points=points)


if __name__ == "__main__":
    import uvicorn

    from src.config import configure_logging, load_settings

    settings = load_settings()
    configure_logging(settings.log_level)
    logger.info("Server is running on %s:%s", settings.host, settings.port)
    uvicorn.run("src.app:app", host=settings.host, port=settings.port)
