import logging

from sao.adapter import Adaptee, Adapter, Target
from sao.observers import ObserverA, ObserverB
from sao.singleton import Singleton
from sao.subject import Subject
from sao.trace import emit

logger = logging.getLogger(__name__)


def run_singleton() -> None:
    singleton = Singleton.get_instance()
    singleton.some_business_logic()


def run_adapter() -> None:
    target: Target = Adapter(Adaptee())
    emit("")
    emit("Adaptee interface is incompatible with the client.")
    emit("But with the adapter the client can call its method.")
    emit(target.get_request())


def run_observer(subject: Subject) -> None:
    observer_a = ObserverA()
    subject.attach(observer_a)
    observer_b = ObserverB()
    subject.attach(observer_b)

    subject.run_business_logic()
    subject.run_business_logic()

    subject.detach(observer_b)

    subject.run_business_logic()


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    run_singleton()
    run_adapter()
    run_observer(Subject())


if __name__ == "__main__":
    main()
