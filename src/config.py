import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


@dataclass(frozen=True)
class Settings:
    host: str
    port: int
    log_level: str


def load_settings() -> Settings:
    load_dotenv()

    port = os.environ.get("PORT") or str(DEFAULT_PORT)
    try:
        port_number = int(port)
    except ValueError:
        raise ValueError(f"PORT must be an integer, got {port!r}")

    return Settings(
        host=os.environ.get("HOST") or DEFAULT_HOST,
        port=port_number,
        log_level=(os.environ.get("LOG_LEVEL") or "INFO").upper(),
    )


def configure_logging(level: str = "INFO") -> None:
    root = logging.getLogger()
    if root.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(level)
