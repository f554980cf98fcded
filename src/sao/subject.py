from collections.abc import Callable
from dataclasses import dataclass
from datetime import timedelta
from random import Random
from time import sleep
from typing import Optional
import logging

from sao.config import Settings, settings as default_settings
from sao.observer import Observable
from sao.trace import emit

logger = logging.getLogger(__name__)

StateSource = Callable[[], int]


@dataclass(frozen=True)
class StateView:
    state: int


def random_state_source(settings: Settings) -> StateSource:
    rng = Random(settings.seed)
    return lambda: rng.randrange(settings.state_min, settings.state_max)


class Subject(Observable):
    def __init__(
        self,
        state_source: Optional[StateSource] = None,
        settle_delay: Optional[timedelta] = None,
        settings: Settings = default_settings,
    ) -> None:
        super().__init__()
        self._state = 0
        if state_source is None:
            state_source = random_state_source(settings)
        self.state_source = state_source
        if settle_delay is None:
            settle_delay = settings.settle_delay
        self.settle_delay = settle_delay

    @property
    def state(self) -> int:
        return self._state

    @state.setter
    def state(self, value: int) -> None:
        with self._lock:
            self._state = value

    def view(self) -> StateView:
        return StateView(state=self._state)

    def run_business_logic(self, value: Optional[int] = None) -> None:
        """Move to a new state and broadcast it.

        `value` overrides the state source for this call. The settling delay
        between the change and the broadcast carries no meaning of its own and
        may be zero.
        """
        emit("")
        emit("Subject: I'm doing something important.")
        state = self.state_source() if value is None else value
        self.state = state
        logger.debug(f'{state=}')

        if self.settle_delay:
            sleep(self.settle_delay.total_seconds())

        emit(f"Subject: My state has just changed to: {state}")
        self.notify()
