import logging
from typing import Optional

from catalog_api.domain.ports.services.logger import LoggerPort


class StdLoggerAdapter(LoggerPort):
    """LoggerPort backed by a stdlib logger; records point at the adapter's caller."""

    def __init__(self, name: Optional[str] = None):
        self._logger = logging.getLogger(name)

    def _log(self, level: int, msg: str, *args, **kwargs) -> None:
        kwargs.setdefault("stacklevel", 3)
        self._logger.log(level, msg, *args, **kwargs)

    def debug(self, msg: str, *args, **kwargs) -> None:
        self._log(logging.DEBUG, msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs) -> None:
        self._log(logging.INFO, msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs) -> None:
        self._log(logging.WARNING, msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs) -> None:
        self._log(logging.ERROR, msg, *args, **kwargs)

    def exception(self, msg: str, *args, **kwargs) -> None:
        kwargs.setdefault("exc_info", True)
        self._log(logging.ERROR, msg, *args, **kwargs)
