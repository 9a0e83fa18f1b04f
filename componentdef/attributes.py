"""
AttributeAccessor

Generic metadata attributes attached to definitions and qualifiers.
"""

from typing import Any, Dict, List, Optional


class AttributeAccessor:
    """Opaque key/value metadata plus the configuration source element.

    Attributes are not interpreted by the definition model; infrastructure
    code uses them to carry extra information alongside a definition.

    Attributes:
        source: Configuration source object (e.g. a parsed element), if any
        _attributes: The attribute map

    Example::

        definition.set_attribute("preserveTargetClass", True)
        definition.get_attribute("preserveTargetClass")  # True
    """

    def __init__(self):
        self._attributes: Dict[str, Any] = {}
        self.source: Optional[Any] = None

    def set_attribute(self, name: str, value: Any) -> None:
        """Set an attribute; a value of None removes it."""
        if value is not None:
            self._attributes[name] = value
        else:
            self.remove_attribute(name)

    def get_attribute(self, name: str, default: Any = None) -> Any:
        return self._attributes.get(name, default)

    def remove_attribute(self, name: str) -> Any:
        """Remove an attribute and return its previous value, if any."""
        return self._attributes.pop(name, None)

    def has_attribute(self, name: str) -> bool:
        return name in self._attributes

    def attribute_names(self) -> List[str]:
        return list(self._attributes)

    def copy_attributes_from(self, other: 'AttributeAccessor') -> None:
        """Copy every attribute of another accessor, overwriting same keys."""
        for name in other.attribute_names():
            self._attributes[name] = other.get_attribute(name)

    def _attributes_equal(self, other: 'AttributeAccessor') -> bool:
        return self._attributes == other._attributes
