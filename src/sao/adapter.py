from typing import Protocol


class Target(Protocol):
    def get_request(self) -> str: ...


class Adaptee:
    """Legacy interface the client cannot call directly."""

    def get_specific_request(self) -> str:
        return "Specific request."


class Adapter:
    def __init__(self, adaptee: Adaptee) -> None:
        self._adaptee = adaptee

    def get_request(self) -> str:
        return f"This is '{self._adaptee.get_specific_request()}'"
