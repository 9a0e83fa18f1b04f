"""
Test Configuration and Utilities

Helper functions for building definitions in tests
"""

from typing import Any, Dict, Optional, Type, Union

from componentdef import ComponentDefinition, ConstructorArgumentValues, MutablePropertyValues, Role


def create_definition(
    component_class: Union[Type, str, None] = None,
    scope: str = "",
    properties: Optional[Dict[str, Any]] = None,
    **attributes: Any,
) -> ComponentDefinition:
    """
    Create a definition with the given class, scope and property values.

    Extra keyword arguments are set as definition attributes.

    Args:
        component_class: Class or class name
        scope: Scope name
        properties: Property names and values
        **attributes: Other definition settings, e.g. primary=True

    Returns:
        The configured ComponentDefinition

    Example:
        >>> definition = create_definition("myapp.Widget", properties={"color": "red"})
    """
    definition = ComponentDefinition(component_class)
    definition.scope = scope
    if properties:
        for name, value in properties.items():
            definition.property_values.add(name, value)
    for name, value in attributes.items():
        setattr(definition, name, value)
    return definition


class MinimalDefinition:
    """
    Definition-like object implementing only the minimal definition view.

    Used to exercise the fallback copy and merge paths.
    """

    def __init__(self, class_name: Optional[str] = None):
        self.parent_name = None
        self.class_name = class_name
        self.scope = ""
        self.is_abstract = False
        self.lazy_init = False
        self.factory_component_name = None
        self.factory_method_name = None
        self.role = Role.APPLICATION
        self.description = None
        self.source = None
        self.resource_description = None
        self.constructor_argument_values = ConstructorArgumentValues()
        self.property_values = MutablePropertyValues()
        self._attributes: Dict[str, Any] = {}

    def attribute_names(self):
        return list(self._attributes)

    def get_attribute(self, name, default=None):
        return self._attributes.get(name, default)
