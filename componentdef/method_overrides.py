"""
MethodOverrides

Ordered set of method overrides attached to a component definition.
"""

import threading
from typing import Callable, Iterator, Optional, Tuple

from .method_override import MethodOverride


class MethodOverrides:
    """Ordered, set-like collection of method overrides.

    An override equal to one already held is not added again. Distinct
    overrides for the same method name are kept; which one applies is
    decided later by ``get_override()``.

    Updates replace the internal tuple under a lock, so readers on other
    threads always iterate a complete snapshot.

    Attributes:
        _overrides: Current snapshot of overrides
        _lock: Serializes writers

    Example::

        overrides = MethodOverrides()
        overrides.add_override(LookupOverride("create_part", "part"))
        overrides.get_override(Widget.create_part)
    """

    def __init__(self, original: Optional['MethodOverrides'] = None):
        """Create an empty set, or a copy of another set.

        Args:
            original: Overrides to copy; each override is copied so that
                preparing one set never changes the other
        """
        self._lock = threading.Lock()
        self._overrides: Tuple[MethodOverride, ...] = ()
        if original is not None:
            self._overrides = tuple(override.copy() for override in original)

    def add_overrides(self, other: Optional['MethodOverrides']) -> None:
        """Append all overrides of another set."""
        if other is None:
            return
        for override in other:
            self.add_override(override.copy())

    def add_override(self, override: MethodOverride) -> None:
        with self._lock:
            if override not in self._overrides:
                self._overrides = self._overrides + (override,)

    @property
    def overrides(self) -> Tuple[MethodOverride, ...]:
        return self._overrides

    def get_override(self, method: Callable) -> Optional[MethodOverride]:
        """Return the override for a method, or None.

        When several overrides match, the one added last wins.
        """
        match = None
        for override in self._overrides:
            if override.matches(method):
                match = override
        return match

    def is_empty(self) -> bool:
        return not self._overrides

    def __iter__(self) -> Iterator[MethodOverride]:
        return iter(self._overrides)

    def __len__(self) -> int:
        return len(self._overrides)

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, MethodOverrides):
            return NotImplemented
        return set(self._overrides) == set(other._overrides)

    def __hash__(self):
        return hash(frozenset(self._overrides))

    def __repr__(self) -> str:
        return f"MethodOverrides({list(self._overrides)!r})"
