from abc import ABC, abstractmethod


class LoggerPort(ABC):
    """Logging sink used by use cases. Accepts ``logging``-style args, including ``extra``."""

    @abstractmethod
    def debug(self, msg: str, *args, **kwargs) -> None:
        pass

    @abstractmethod
    def info(self, msg: str, *args, **kwargs) -> None:
        pass

    @abstractmethod
    def warning(self, msg: str, *args, **kwargs) -> None:
        pass

    @abstractmethod
    def error(self, msg: str, *args, **kwargs) -> None:
        pass

    @abstractmethod
    def exception(self, msg: str, *args, **kwargs) -> None:
        pass
