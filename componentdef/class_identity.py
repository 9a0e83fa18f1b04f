"""
Class Identity

The class slot of a component definition holds either an unresolved
class name or an already resolved class. Both variants are immutable,
so replacing the slot with a single attribute assignment publishes a
complete value to every reader.
"""

from dataclasses import dataclass
from typing import Optional, Type, Union


def qualified_class_name(cls: Type) -> str:
    """Return the fully qualified name of a class.

    Args:
        cls: The class to name

    Returns:
        The dotted name "<module>.<qualname>", e.g. "builtins.str"
    """
    return f"{cls.__module__}.{cls.__qualname__}"


@dataclass(frozen=True)
class UnresolvedClass:
    """A class known only by its fully qualified name"""
    name: str


@dataclass(frozen=True)
class ResolvedClass:
    """A loaded class, together with the name it was loaded from

    When no name is given, the fully qualified name of the class is used.
    """
    handle: Type
    name: Optional[str] = None

    def __post_init__(self):
        if self.name is None:
            object.__setattr__(self, "name", qualified_class_name(self.handle))


ClassIdentity = Union[UnresolvedClass, ResolvedClass]
