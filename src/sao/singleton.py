from threading import Lock
from typing import Optional
import logging

from sao.trace import emit

logger = logging.getLogger(__name__)


class Singleton:
    """Process-wide shared instance, created on the first `get_instance` call."""

    _instance: Optional["Singleton"] = None
    _lock = Lock()

    @classmethod
    def get_instance(cls) -> "Singleton":
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
                    logger.debug(f'created {cls._instance=}')
        return cls._instance

    def some_business_logic(self) -> None:
        emit("Singleton: business logic executed.")
