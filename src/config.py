import os
import logging
from typing import Optional

from dotenv import load_dotenv

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 5000


def env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


def load_env(dotenv_path: Optional[str] = None) -> None:
    """Load `.env` from the project root (or `dotenv_path`) without overriding real env vars."""
    if dotenv_path is None:
        dotenv_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), ".env")
    load_dotenv(dotenv_path=dotenv_path)


def configure_logging(level: Optional[str] = None) -> None:
    level_name = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def server_address() -> tuple:
    host = os.getenv("APP_HOST", DEFAULT_HOST)
    port = int(os.getenv("APP_PORT", str(DEFAULT_PORT)))
    return host, port
