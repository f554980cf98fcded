from abc import abstractmethod

from sao.observer import Observer, SubjectView
from sao.trace import emit


class PredicateObserver(Observer):
    """Reacts to an update when `should_react` holds for the subject's state."""

    name = "Observer"

    @abstractmethod
    def should_react(self, state: int) -> bool:
        pass

    def react(self) -> None:
        emit(f"{self.name}: Reacted to the event.")

    def update(self, subject: SubjectView) -> bool:
        if self.should_react(subject.state):
            self.react()
            return True
        return False


class ObserverA(PredicateObserver):
    name = "ObserverA"

    def should_react(self, state: int) -> bool:
        return state < 3


class ObserverB(PredicateObserver):
    name = "ObserverB"

    def should_react(self, state: int) -> bool:
        return state == 0 or state >= 2
