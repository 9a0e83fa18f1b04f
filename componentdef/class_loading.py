"""
Class Loading

Loading contexts that turn fully qualified class names into classes,
plus the method introspection used when preparing method overrides.

Two loaders are provided:

- ImportClassLoader: resolves dotted names through importlib
- MappingClassLoader: resolves names from an explicit registry

Example::

    loader = ImportClassLoader()
    cls = loader.load_class("collections.OrderedDict")
"""

import importlib
import inspect
import typing
from abc import ABC, abstractmethod
from typing import Dict, Iterable, Mapping, Optional, Type, Union

from .class_identity import qualified_class_name
from .exceptions import ClassResolutionError


class ClassLoader(ABC):
    """Abstract class loading context.

    Implementations must be safe to call from several threads at once:
    resolving the same name twice is expected to yield the same class.
    """

    @abstractmethod
    def load_class(self, name: str) -> Type:
        """Load the class with the given fully qualified name.

        Args:
            name: Dotted class name, e.g. "myapp.services.Widget"

        Returns:
            The loaded class

        Raises:
            ClassResolutionError: When the class cannot be located
        """
        raise NotImplementedError


class ImportClassLoader(ClassLoader):
    """Class loader backed by importlib.

    The longest importable module prefix of the name is imported and the
    remaining parts are looked up as attributes, so nested classes such
    as "myapp.models.Outer.Inner" resolve as well.
    """

    def load_class(self, name: str) -> Type:
        if not name:
            raise ClassResolutionError("Cannot load a class from an empty name")

        parts = name.split(".")
        for split in range(len(parts) - 1, 0, -1):
            module_name = ".".join(parts[:split])
            try:
                module = importlib.import_module(module_name)
            except ModuleNotFoundError as e:
                # Only a missing prefix means "try a shorter one"; anything
                # else is a broken module and is reported as such.
                if e.name is not None and module_name.startswith(e.name):
                    continue
                raise ClassResolutionError(
                    f"Cannot load class [{name}]: importing '{module_name}' failed: {e}"
                ) from e
            except ImportError as e:
                raise ClassResolutionError(
                    f"Cannot load class [{name}]: importing '{module_name}' failed: {e}"
                ) from e
            return self._walk_attributes(name, module, parts[split:])

        raise ClassResolutionError(
            f"Cannot load class [{name}]: no importable module found"
        )

    @staticmethod
    def _walk_attributes(name: str, module, attributes) -> Type:
        obj = module
        for attribute in attributes:
            try:
                obj = getattr(obj, attribute)
            except AttributeError as e:
                raise ClassResolutionError(
                    f"Cannot load class [{name}]: '{attribute}' not found in {obj!r}"
                ) from e
        if not isinstance(obj, type):
            raise ClassResolutionError(f"[{name}] does not name a class: {obj!r}")
        return obj

    def __repr__(self) -> str:
        return "ImportClassLoader()"


class MappingClassLoader(ClassLoader):
    """Class loader resolving names from an explicit registry.

    Unknown names are delegated to the parent loader when one is given.

    Attributes:
        _classes: Registered classes keyed by name
        _parent: Optional fallback loader

    Example::

        loader = MappingClassLoader([Widget, Gadget])
        loader.register(LegacyWidget, name="legacy.Widget")
        loader.load_class(qualified_class_name(Widget))  # Widget
    """

    def __init__(
        self,
        classes: Union[Mapping[str, Type], Iterable[Type], None] = None,
        parent: Optional[ClassLoader] = None,
    ):
        self._classes: Dict[str, Type] = {}
        self._parent = parent
        if isinstance(classes, Mapping):
            self._classes.update(classes)
        elif classes is not None:
            for cls in classes:
                self.register(cls)

    def register(self, cls: Type, name: Optional[str] = None) -> None:
        """Register a class under its qualified name or an alias."""
        self._classes[name or qualified_class_name(cls)] = cls

    def load_class(self, name: str) -> Type:
        cls = self._classes.get(name)
        if cls is not None:
            return cls
        if self._parent is not None:
            return self._parent.load_class(name)
        registered = ", ".join(sorted(self._classes)) or "None"
        raise ClassResolutionError(
            f"Cannot load class [{name}]\n"
            f"Registered classes: {registered}"
        )

    def __repr__(self) -> str:
        return f"MappingClassLoader({sorted(self._classes)!r}, parent={self._parent!r})"


def _is_method_declaration(attribute) -> bool:
    return isinstance(attribute, (staticmethod, classmethod)) or inspect.isroutine(attribute)


def method_count_for_name(cls: Type, name: str) -> int:
    """Count the method declarations with the given name visible on a class.

    Every class in the MRO that declares a method with this name in its own
    namespace counts once, except that a method declared with
    ``typing.overload`` signatures counts once per signature.

    Args:
        cls: The class to inspect
        name: The method name

    Returns:
        0 when no such method exists, 1 when it is not overloaded
    """
    count = 0
    for klass in inspect.getmro(cls):
        attribute = vars(klass).get(name)
        if attribute is None or not _is_method_declaration(attribute):
            continue
        function = getattr(attribute, "__func__", attribute)
        if inspect.isfunction(function):
            count += max(len(typing.get_overloads(function)), 1)
        else:
            count += 1
    return count
