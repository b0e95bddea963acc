from abc import ABC, abstractmethod
from typing import Optional


class UriComposer(ABC):
    @abstractmethod
    def compose_pic_uri(self, uri_template: Optional[str]) -> Optional[str]:
        """Resolve a stored picture reference into an absolute URI. Must not raise."""
        pass
