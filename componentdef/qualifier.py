"""
Qualifier

Qualifier descriptor used to tell apart several candidate components
of the same type during dependency resolution.
"""

from typing import Any, Optional, Type, Union

from .attributes import AttributeAccessor
from .class_identity import qualified_class_name


class Qualifier(AttributeAccessor):
    """Qualifier attached to a component definition.

    A definition holds at most one qualifier per type name; adding another
    qualifier with the same type name replaces the first one.

    Attributes:
        type_name: Fully qualified name of the qualifier type

    Example::

        definition.add_qualifier(Qualifier(Named, "primary-db"))
        definition.get_qualifier(qualified_class_name(Named)).value
    """

    VALUE_KEY = "value"

    def __init__(self, qualifier_type: Union[str, Type], value: Optional[Any] = None):
        """Create a qualifier.

        Args:
            qualifier_type: The qualifier type, or its fully qualified name
            value: Optional qualifier value, stored under VALUE_KEY

        Raises:
            ValueError: When the type name is empty
        """
        super().__init__()
        if isinstance(qualifier_type, type):
            qualifier_type = qualified_class_name(qualifier_type)
        if not qualifier_type:
            raise ValueError("Qualifier type name must not be empty")
        self.type_name: str = qualifier_type
        self.set_attribute(self.VALUE_KEY, value)

    @property
    def value(self) -> Optional[Any]:
        return self.get_attribute(self.VALUE_KEY)

    def copy(self) -> 'Qualifier':
        """Return an independent copy sharing the attribute values."""
        duplicate = Qualifier(self.type_name)
        duplicate.copy_attributes_from(self)
        duplicate.source = self.source
        return duplicate

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, Qualifier):
            return NotImplemented
        return self.type_name == other.type_name and self._attributes_equal(other)

    def __hash__(self):
        return hash(self.type_name)

    def __repr__(self) -> str:
        return f"Qualifier({self.type_name!r}, value={self.value!r})"
