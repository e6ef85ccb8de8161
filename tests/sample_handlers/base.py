from abc import ABC, abstractmethod
from typing import Any

from objectfactory import ObjectFactory


class FormatHandler(ABC):
    """
    Abstract format handler
    """

    @abstractmethod
    def dumps(self, data: Any) -> str:
        """
        Serialize ``data`` to text
        """


HANDLERS = ObjectFactory.instance(FormatHandler)
