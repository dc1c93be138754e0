from abc import ABC, abstractmethod
from typing import Any


class IClient(ABC):
    """Interface every source client exposes to its data source"""

    @abstractmethod
    def get_client(self) -> Any:
        pass
