"""
DefinitionView

The minimal read-only shape of a definition that ComponentDefinition can
copy from or merge on top of itself.
"""

from typing import Any, List, Optional, Protocol, runtime_checkable

from .constants import Role
from .constructor_arguments import ConstructorArgumentValues
from .property_values import MutablePropertyValues


@runtime_checkable
class DefinitionView(Protocol):
    """Any definition-like object.

    ComponentDefinition implements the full model. Other implementations
    (e.g. definitions read from a foreign registry) only need these
    members; copying or merging from them transfers the values listed
    here, the constructor arguments, the property values and the
    resource description.
    """

    parent_name: Optional[str]
    scope: Optional[str]
    is_abstract: bool
    lazy_init: bool
    factory_component_name: Optional[str]
    factory_method_name: Optional[str]
    role: Role
    description: Optional[str]
    source: Optional[Any]

    @property
    def class_name(self) -> Optional[str]: ...

    @property
    def resource_description(self) -> Optional[str]: ...

    @property
    def constructor_argument_values(self) -> ConstructorArgumentValues: ...

    @property
    def property_values(self) -> MutablePropertyValues: ...

    def attribute_names(self) -> List[str]: ...

    def get_attribute(self, name: str, default: Any = None) -> Any: ...
