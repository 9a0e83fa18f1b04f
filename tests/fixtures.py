"""
Test Fixtures

Common test classes used across test modules
"""

from abc import ABC, abstractmethod
from typing import overload


class Widget:
    """Component with a single run() method"""

    def __init__(self, color: str = "red"):
        self.color = color

    def run(self):
        return "running"

    def close(self):
        pass


class Part:
    """Component returned by lookup methods"""
    pass


class PartFactory(ABC):
    """Abstract component with a lookup method"""

    @abstractmethod
    def create_part(self) -> Part:
        ...


class BaseTask:
    """Task with a no-argument run()"""

    def run(self):
        return None


class OverloadedTask(BaseTask):
    """Task redefining run() with a different arity"""

    def run(self, times: int = 1):
        return times


class Formatter:
    """Component with typing.overload signatures"""

    @overload
    def format(self, value: int) -> str: ...

    @overload
    def format(self, value: str) -> str: ...

    def format(self, value):
        return str(value)


class Connection:
    """Component that requires constructor arguments"""

    def __init__(self, host: str, port: int):
        self.host = host
        self.port = port


class Named:
    """Qualifier type"""
    pass


class Outer:
    """Holder for a nested component class"""

    class Inner:
        pass
