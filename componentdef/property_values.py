"""
Property Values

Ordered (name, value) pairs applied to a component after construction.
"""

from typing import Any, Iterator, List, Mapping, Optional, Tuple, Union


class PropertyValue:
    """A single property name and the value to inject.

    Attributes:
        name: The property name
        value: The value; may be a plain object or a reference understood
            by the construction engine
        optional: Whether a missing property on the target is ignored
        source: Configuration source object, if any
    """

    def __init__(self, name: str, value: Any, optional: bool = False, source: Optional[Any] = None):
        if not name:
            raise ValueError("Property name must not be empty")
        self.name = name
        self.value = value
        self.optional = optional
        self.source = source

    def copy(self) -> 'PropertyValue':
        return PropertyValue(self.name, self.value, self.optional, self.source)

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, PropertyValue):
            return NotImplemented
        return (
            self.name == other.name
            and self.value == other.value
            and self.optional == other.optional
        )

    def __hash__(self):
        return hash(self.name)

    def __repr__(self) -> str:
        return f"PropertyValue({self.name!r}, {self.value!r})"


class MutablePropertyValues:
    """Ordered collection of property values, unique by name.

    Adding a value for a name that is already present replaces the existing
    entry in place, so the position of the first definition is kept.

    Attributes:
        _values: The property values in insertion order

    Example::

        pvs = MutablePropertyValues({"color": "red"})
        pvs.add("size", "large").add("color", "blue")
        pvs.get("color")  # "blue"
    """

    def __init__(self, original: Union['MutablePropertyValues', Mapping[str, Any], None] = None):
        """Create a collection, optionally as a deep copy of another one.

        Args:
            original: Property values to copy entry by entry, or a mapping
                of property names to values
        """
        self._values: List[PropertyValue] = []
        if isinstance(original, MutablePropertyValues):
            self._values = [pv.copy() for pv in original]
        elif original is not None:
            for name, value in original.items():
                self.add_property_value(PropertyValue(name, value))

    @property
    def property_values(self) -> Tuple[PropertyValue, ...]:
        return tuple(self._values)

    def add_property_value(self, pv: PropertyValue) -> 'MutablePropertyValues':
        """Add a property value, replacing any entry with the same name."""
        for index, current in enumerate(self._values):
            if current.name == pv.name:
                self._values[index] = pv
                return self
        self._values.append(pv)
        return self

    def add(self, name: str, value: Any) -> 'MutablePropertyValues':
        return self.add_property_value(PropertyValue(name, value))

    def add_property_values(
        self, other: Union['MutablePropertyValues', Mapping[str, Any], None]
    ) -> 'MutablePropertyValues':
        """Copy all entries of another collection on top of this one.

        Entries of ``other`` win over existing entries with the same name.
        """
        if isinstance(other, MutablePropertyValues):
            for pv in other:
                self.add_property_value(pv.copy())
        elif other is not None:
            for name, value in other.items():
                self.add_property_value(PropertyValue(name, value))
        return self

    def set_property_value(self, index: int, pv: PropertyValue) -> None:
        self._values[index] = pv

    def remove_property_value(self, pv: Union[PropertyValue, str]) -> None:
        name = pv.name if isinstance(pv, PropertyValue) else pv
        self._values = [current for current in self._values if current.name != name]

    def get_property_value(self, name: str) -> Optional[PropertyValue]:
        for pv in self._values:
            if pv.name == name:
                return pv
        return None

    def get(self, name: str, default: Any = None) -> Any:
        pv = self.get_property_value(name)
        return pv.value if pv is not None else default

    def contains(self, name: str) -> bool:
        return self.get_property_value(name) is not None

    def changes_since(self, old: 'MutablePropertyValues') -> 'MutablePropertyValues':
        """Return the entries that are new or changed compared to ``old``."""
        changes = MutablePropertyValues()
        if old is self:
            return changes
        for pv in self._values:
            previous = old.get_property_value(pv.name)
            if previous is None or previous != pv:
                changes.add_property_value(pv)
        return changes

    def is_empty(self) -> bool:
        return not self._values

    def __contains__(self, name: str) -> bool:
        return self.contains(name)

    def __iter__(self) -> Iterator[PropertyValue]:
        return iter(tuple(self._values))

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, MutablePropertyValues):
            return NotImplemented
        return self._values == other._values

    def __hash__(self):
        return hash(tuple(pv.name for pv in self._values))

    def __repr__(self) -> str:
        entries = ", ".join(f"{pv.name}={pv.value!r}" for pv in self._values)
        return f"MutablePropertyValues({entries})"
