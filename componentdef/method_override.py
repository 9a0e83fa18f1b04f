"""
Method Overrides

Declarations that a method of the constructed component should be
intercepted by the container instead of running the class's own code.

Two kinds of overrides exist:

- LookupOverride: the method returns a container-managed component
- ReplaceOverride: the method is replaced by a replacer component

Methods passed to ``matches()`` are looked up on the class, e.g.
``getattr(Widget, "create_part")``, so a leading ``self`` (or ``cls``)
parameter is not counted as an argument.
"""

import inspect
from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional

from .class_identity import qualified_class_name


def _parameters(method: Callable) -> List[inspect.Parameter]:
    parameters = list(inspect.signature(method).parameters.values())
    if not inspect.ismethod(method) and parameters and parameters[0].name in ("self", "cls"):
        parameters = parameters[1:]
    return parameters


def _annotation_name(parameter: inspect.Parameter) -> str:
    annotation = parameter.annotation
    if annotation is inspect.Parameter.empty:
        return ""
    if isinstance(annotation, str):
        return annotation
    if isinstance(annotation, type):
        return qualified_class_name(annotation)
    return repr(annotation)


class MethodOverride(ABC):
    """Base class for method overrides.

    Attributes:
        method_name: Name of the overridden method
        overloaded: Whether several methods share this name. True until
            validation proves otherwise, so the construction engine only
            skips argument matching once the class has been inspected.
        source: Configuration source object, if any
    """

    def __init__(self, method_name: str):
        if not method_name:
            raise ValueError("Method name must not be empty")
        self.method_name = method_name
        self.overloaded: bool = True
        self.source: Optional[Any] = None

    @abstractmethod
    def matches(self, method: Callable) -> bool:
        """Whether this override applies to the given method."""
        raise NotImplementedError

    @abstractmethod
    def copy(self) -> 'MethodOverride':
        raise NotImplementedError

    def _copy_state_to(self, duplicate: 'MethodOverride') -> 'MethodOverride':
        duplicate.overloaded = self.overloaded
        duplicate.source = self.source
        return duplicate

    def _base_equals(self, other: 'MethodOverride') -> bool:
        return (
            self.method_name == other.method_name
            and self.overloaded == other.overloaded
            and self.source == other.source
        )

    def __hash__(self):
        return hash((type(self).__name__, self.method_name))


class LookupOverride(MethodOverride):
    """Override making a method return a container-managed component.

    Attributes:
        component_name: Name of the component to return; None means the
            component is looked up by the method's return type
        method: The exact method to match, when declared on a method

    Example::

        class Widget(ABC):
            @abstractmethod
            def create_part(self) -> Part: ...

        LookupOverride("create_part", "part")
    """

    def __init__(self, method_name: str, component_name: Optional[str] = None,
                 method: Optional[Callable] = None):
        super().__init__(method_name)
        self.component_name = component_name
        self.method = method

    def matches(self, method: Callable) -> bool:
        if self.method is not None:
            return getattr(method, "__func__", method) == getattr(self.method, "__func__", self.method)
        if getattr(method, "__name__", None) != self.method_name:
            return False
        if not self.overloaded:
            return True
        return getattr(method, "__isabstractmethod__", False) or not _parameters(method)

    def copy(self) -> 'LookupOverride':
        return self._copy_state_to(LookupOverride(self.method_name, self.component_name, self.method))

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, LookupOverride):
            return NotImplemented
        return (
            self._base_equals(other)
            and self.component_name == other.component_name
            and self.method == other.method
        )

    __hash__ = MethodOverride.__hash__

    def __repr__(self) -> str:
        return f"LookupOverride(method={self.method_name!r}, component={self.component_name!r})"


class ReplaceOverride(MethodOverride):
    """Override replacing a method with a replacer component.

    Type identifiers narrow an overloaded method down by its parameters:
    each identifier must be contained in the name of the corresponding
    parameter annotation, e.g. "str" matches ``builtins.str``.

    Attributes:
        replacer_component_name: Name of the component implementing the
            replacement
        type_identifiers: Parameter type name fragments, in order
    """

    def __init__(self, method_name: str, replacer_component_name: str):
        super().__init__(method_name)
        if not replacer_component_name:
            raise ValueError("Replacer component name must not be empty")
        self.replacer_component_name = replacer_component_name
        self.type_identifiers: List[str] = []

    def add_type_identifier(self, identifier: str) -> None:
        self.type_identifiers.append(identifier)

    def matches(self, method: Callable) -> bool:
        if getattr(method, "__name__", None) != self.method_name:
            return False
        if not self.overloaded:
            return True
        parameters = _parameters(method)
        if len(parameters) != len(self.type_identifiers):
            return False
        return all(
            identifier in _annotation_name(parameter)
            for identifier, parameter in zip(self.type_identifiers, parameters)
        )

    def copy(self) -> 'ReplaceOverride':
        duplicate = ReplaceOverride(self.method_name, self.replacer_component_name)
        duplicate.type_identifiers = list(self.type_identifiers)
        return self._copy_state_to(duplicate)

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, ReplaceOverride):
            return NotImplemented
        return (
            self._base_equals(other)
            and self.replacer_component_name == other.replacer_component_name
            and self.type_identifiers == other.type_identifiers
        )

    __hash__ = MethodOverride.__hash__

    def __repr__(self) -> str:
        return (
            f"ReplaceOverride(method={self.method_name!r}, "
            f"replacer={self.replacer_component_name!r})"
        )
