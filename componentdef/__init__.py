# Public API
from .attributes import AttributeAccessor
from .class_identity import ResolvedClass, UnresolvedClass, qualified_class_name
from .class_loading import ClassLoader, ImportClassLoader, MappingClassLoader, method_count_for_name
from .constants import (
    INFER_METHOD,
    SCOPE_DEFAULT,
    SCOPE_PROTOTYPE,
    SCOPE_SINGLETON,
    AutowireMode,
    DependencyCheck,
    Role,
)
from .constructor_arguments import ConstructorArgumentValues, ValueHolder
from .defaults import DefinitionDefaults
from .definition import ComponentDefinition
from .definition_view import DefinitionView
from .entity_resolver import (
    DelegatingEntityResolver,
    EntityResolver,
    InputSource,
    MappingEntityResolver,
)
from .exceptions import (
    ClassResolutionError,
    ComponentDefinitionError,
    DefinitionConflictError,
    DefinitionStateError,
    DefinitionValidationError,
    NoClassSpecifiedError,
    UnresolvedClassError,
)
from .method_override import LookupOverride, MethodOverride, ReplaceOverride
from .method_overrides import MethodOverrides
from .property_values import MutablePropertyValues, PropertyValue
from .qualifier import Qualifier
from .resource import (
    DefinitionResource,
    DescriptiveResource,
    LocatedResource,
    Resource,
    iter_origin_chain,
    original_definition,
)

__all__ = [
    "ComponentDefinition",
    "DefinitionView",
    "DefinitionDefaults",
    "AttributeAccessor",
    # Class identity and loading
    "ResolvedClass",
    "UnresolvedClass",
    "qualified_class_name",
    "ClassLoader",
    "ImportClassLoader",
    "MappingClassLoader",
    "method_count_for_name",
    # Constants
    "SCOPE_DEFAULT",
    "SCOPE_SINGLETON",
    "SCOPE_PROTOTYPE",
    "INFER_METHOD",
    "AutowireMode",
    "DependencyCheck",
    "Role",
    # Collections
    "ConstructorArgumentValues",
    "ValueHolder",
    "MutablePropertyValues",
    "PropertyValue",
    "MethodOverride",
    "LookupOverride",
    "ReplaceOverride",
    "MethodOverrides",
    "Qualifier",
    # Origin
    "Resource",
    "DescriptiveResource",
    "LocatedResource",
    "DefinitionResource",
    "iter_origin_chain",
    "original_definition",
    # Entity resolution
    "EntityResolver",
    "DelegatingEntityResolver",
    "MappingEntityResolver",
    "InputSource",
    # Exceptions
    "ComponentDefinitionError",
    "DefinitionConflictError",
    "DefinitionValidationError",
    "ClassResolutionError",
    "DefinitionStateError",
    "NoClassSpecifiedError",
    "UnresolvedClassError",
]

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("componentdef")
except PackageNotFoundError:
    # Not installed, e.g. running from a source checkout
    __version__ = "0.0.0"
