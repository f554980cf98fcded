from collections.abc import Iterator
from datetime import timedelta
from typing import Any

import pytest
from sao.observer import Observer, SubjectView
from sao.observers import ObserverA, ObserverB
from sao.singleton import Singleton
from sao.subject import Subject


class RecordingObserver(Observer):
    """Appends `(name, state)` to a shared log on every update."""

    def __init__(self, name: str, log: list[tuple[str, int]]) -> None:
        self.name = name
        self.log = log

    def update(self, subject: SubjectView) -> Any:
        self.log.append((self.name, subject.state))


@pytest.fixture
def subject() -> Subject:
    return Subject(state_source=lambda: 0, settle_delay=timedelta(0))


@pytest.fixture
def observer_a() -> ObserverA:
    return ObserverA()


@pytest.fixture
def observer_b() -> ObserverB:
    return ObserverB()


@pytest.fixture
def log() -> list[tuple[str, int]]:
    return []


@pytest.fixture
def make_recorder(log: list[tuple[str, int]]):
    def make(name: str) -> RecordingObserver:
        return RecordingObserver(name, log)
    return make


@pytest.fixture(autouse=True)
def fresh_singleton() -> Iterator[None]:
    Singleton._instance = None
    yield
    Singleton._instance = None
