"""
Resource

Descriptors recording where a definition came from, for diagnostics.

A definition derived from another one (e.g. a decorated definition) can
record its origin with DefinitionResource. The reference back to the
original is weak: the chain never keeps older definitions alive, and
walking it is an explicit, bounded operation.
"""

import weakref
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Iterator, Optional

if TYPE_CHECKING:
    from .definition import ComponentDefinition

# Upper bound for origin chain walks
DEFAULT_MAX_ORIGIN_DEPTH = 64


class Resource(ABC):
    """Describes the origin of a definition"""

    @property
    @abstractmethod
    def description(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.description


class DescriptiveResource(Resource):
    """Resource known only by a free-form description"""

    def __init__(self, description: Optional[str]):
        self._description = description or ""

    @property
    def description(self) -> str:
        return self._description

    def __eq__(self, other):
        if not isinstance(other, DescriptiveResource):
            return NotImplemented
        return self._description == other._description

    def __hash__(self):
        return hash(self._description)


class LocatedResource(Resource):
    """Resource pointing at a configuration location and optional line

    Example::

        LocatedResource("config/components.yaml", line=12).description
        # "config/components.yaml [line 12]"
    """

    def __init__(self, location: str, line: Optional[int] = None):
        self.location = location
        self.line = line

    @property
    def description(self) -> str:
        if self.line is None:
            return self.location
        return f"{self.location} [line {self.line}]"

    def __eq__(self, other):
        if not isinstance(other, LocatedResource):
            return NotImplemented
        return self.location == other.location and self.line == other.line

    def __hash__(self):
        return hash((self.location, self.line))


class DefinitionResource(Resource):
    """Resource wrapping the definition another definition was derived from.

    Attributes:
        _definition: Weak reference to the originating definition
    """

    def __init__(self, definition: 'ComponentDefinition'):
        if definition is None:
            raise ValueError("Originating definition must not be None")
        self._definition = weakref.ref(definition)
        self._summary = repr(definition)

    @property
    def definition(self) -> Optional['ComponentDefinition']:
        """The originating definition, or None once it has been discarded."""
        return self._definition()

    @property
    def description(self) -> str:
        return f"component definition {self._summary}"

    def __eq__(self, other):
        if not isinstance(other, DefinitionResource):
            return NotImplemented
        mine, theirs = self.definition, other.definition
        if mine is None or theirs is None:
            return self is other
        return mine is theirs

    def __hash__(self):
        return hash(self._summary)


def iter_origin_chain(
    definition: 'ComponentDefinition',
    max_depth: int = DEFAULT_MAX_ORIGIN_DEPTH,
) -> Iterator['ComponentDefinition']:
    """Yield the originating definitions of a definition, nearest first.

    The walk stops at the first definition without a live origin, after
    ``max_depth`` steps, or when a definition repeats.
    """
    seen = {id(definition)}
    current = definition
    for _ in range(max_depth):
        current = current.originating_definition
        if current is None or id(current) in seen:
            return
        seen.add(id(current))
        yield current


def original_definition(
    definition: 'ComponentDefinition',
    max_depth: int = DEFAULT_MAX_ORIGIN_DEPTH,
) -> 'ComponentDefinition':
    """Return the end of the origin chain, or the definition itself."""
    original = definition
    for original in iter_origin_chain(definition, max_depth):
        pass
    return original
