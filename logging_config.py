import logging
import os
from typing import Optional

from dotenv import load_dotenv
from rich.logging import RichHandler

load_dotenv()


def configure(level: Optional[str] = None) -> None:
    level = level or os.getenv("LOG_LEVEL", "INFO")
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, show_time=False, show_path=False)],
    )
