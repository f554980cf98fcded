from abc import ABC, abstractmethod
from threading import Lock
from typing import Any, Protocol
import logging

from sao.trace import emit

logger = logging.getLogger(__name__)


class SubjectView(Protocol):
    """Read-only view of a subject handed to observers on every update."""

    @property
    def state(self) -> int: ...


class Observable(ABC):
    """Ordered collection of observers broadcast to on `notify`.

    The same observer may be attached more than once, in which case it gets
    one update per attachment. `notify` walks a copy of the collection taken
    when the broadcast starts, so observers attached or detached from inside
    an update only see the change on the next broadcast.
    """

    def __init__(self) -> None:
        self._observers: list[Observer] = []
        self._lock = Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._observers)

    @property
    def observers(self) -> tuple['Observer', ...]:
        with self._lock:
            return tuple(self._observers)

    def attach(self, observer: 'Observer') -> None:
        emit("Subject: Attached an observer.")
        with self._lock:
            self._observers.append(observer)
        logger.debug(f'attached {observer=}')

    def detach(self, observer: 'Observer') -> None:
        with self._lock:
            for i, attached in enumerate(self._observers):
                if attached is observer:
                    del self._observers[i]
                    logger.debug(f'detached {observer=}')
                    break
        emit("Subject: Detached an observer.")

    @abstractmethod
    def view(self) -> SubjectView:
        pass

    def notify(self) -> None:
        emit("Subject: Notifying observers...")
        with self._lock:
            observers = tuple(self._observers)
            view = self.view()
        logger.debug(f'broadcasting to {len(observers)} observers')
        for observer in observers:
            observer.update(view)


class Observer(ABC):
    @abstractmethod
    def update(self, subject: SubjectView) -> Any:
        pass
