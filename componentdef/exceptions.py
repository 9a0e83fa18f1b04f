"""
componentdef Exceptions

Custom exception hierarchy for component definitions
"""


class ComponentDefinitionError(Exception):
    """
    Base exception for all componentdef errors.

    All componentdef-specific exceptions inherit from this class.
    You can catch this to handle any definition error generically.

    Example:
        >>> try:
        ...     definition.validate()
        ... except ComponentDefinitionError as e:
        ...     print(f"Invalid definition: {e}")
    """

    pass


class DefinitionValidationError(ComponentDefinitionError):
    """
    Raised when a definition fails validation.

    This error occurs during ``validate()`` when a declared method override
    names a method that does not exist on the resolved component class.

    Common causes:
        - Typo in the method name of a lookup or replace override
        - Override declared against the wrong class
        - Method was renamed or removed from the class

    Solution:
        Make sure every overridden method exists on the class::

            class Widget:
                def create_part(self): ...

            definition = ComponentDefinition(Widget)
            definition.method_overrides.add_override(
                LookupOverride("create_part", "part")  # must match a method
            )
            definition.validate()

    Note:
        Validation happens before construction, so the failure is reported
        early. Callers usually wrap this error with the definition's
        ``resource_description`` to point at the configuration source.
    """

    pass


class DefinitionConflictError(ComponentDefinitionError):
    """
    Raised when a definition combines structurally incompatible settings.

    A factory method is solely responsible for producing the instance, so
    there is no room for container-generated method overrides.

    Common causes:
        - Declaring method overrides on a definition that also names a
          ``factory_method_name``
        - Inheriting overrides from a parent definition while the child
          switches to a factory method

    Solution:
        Drop either the overrides or the factory method::

            definition.factory_method_name = None
            definition.validate()
    """

    pass


class ClassResolutionError(ComponentDefinitionError):
    """
    Raised when a class name cannot be located by a class loader.

    The definition's class slot is left untouched, so resolution can be
    retried with a different loader.

    Common causes:
        - Typo in the fully qualified class name
        - Module not importable from the current environment
        - Name missing from a ``MappingClassLoader``

    Solution:
        Use the fully qualified name (``package.module.ClassName``)::

            definition.class_name = "myapp.services.Widget"
            definition.resolve_class(ImportClassLoader())
    """

    pass


class DefinitionStateError(ComponentDefinitionError):
    """
    Raised when an accessor is used in a state that does not support it.

    Check ``has_resolved_class()`` before reading ``component_class``.
    """

    pass


class NoClassSpecifiedError(DefinitionStateError):
    """
    Raised when the resolved class is requested from a definition that
    has no class at all.

    Solution:
        Set either ``class_name`` or ``component_class`` first::

            definition.component_class = Widget
    """

    pass


class UnresolvedClassError(DefinitionStateError):
    """
    Raised when the resolved class is requested while the definition
    only holds a class name.

    Solution:
        Resolve the name before dereferencing the class::

            if not definition.has_resolved_class():
                definition.resolve_class(loader)
            cls = definition.component_class
    """

    pass
