import logging
import os
from logging import Logger as StdLogger
from typing import Optional

DEFAULT_NOISY_LIBS = {
    "sqlalchemy.engine": logging.WARNING,
    "httpx": logging.WARNING,
}


def setup_logging(noisy_libs: Optional[dict[str, int]] = None):
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S")
    )
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        handlers=[handler],
        force=True,
    )

    for lib, level in (noisy_libs if noisy_libs is not None else DEFAULT_NOISY_LIBS).items():
        logging.getLogger(lib).setLevel(level)


class Logger:
    @staticmethod
    def get_logger(name: Optional[str] = None) -> StdLogger:
        return logging.getLogger(name)
