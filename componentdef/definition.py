"""
ComponentDefinition

Mutable metadata describing how a container should construct, configure
and manage one component, before any instance exists.

A definition goes through these stages:

1. Created empty, or as a deep copy of another definition
2. Configured field by field by a parser or builder
3. Optionally merged on top of a parent definition (override_from)
4. Optionally given process-wide defaults (apply_defaults)
5. Validated once (validate) and handed to a construction engine

Example::

    parent = ComponentDefinition("myapp.widgets.Widget")
    parent.property_values.add("color", "red")

    child = ComponentDefinition()
    child.scope = SCOPE_PROTOTYPE
    child.property_values.add("size", "large")

    parent.override_from(child)
    parent.validate()
"""

import inspect
import warnings
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Type, Union

from .attributes import AttributeAccessor
from .class_identity import ClassIdentity, ResolvedClass, UnresolvedClass, qualified_class_name
from .class_loading import ClassLoader, ImportClassLoader, method_count_for_name
from .constants import (
    SCOPE_DEFAULT,
    SCOPE_PROTOTYPE,
    SCOPE_SINGLETON,
    AutowireMode,
    DependencyCheck,
    Role,
)
from .constructor_arguments import ConstructorArgumentValues
from .defaults import DefinitionDefaults
from .definition_view import DefinitionView
from .exceptions import (
    DefinitionConflictError,
    DefinitionValidationError,
    NoClassSpecifiedError,
    UnresolvedClassError,
)
from .method_override import MethodOverride
from .method_overrides import MethodOverrides
from .property_values import MutablePropertyValues
from .qualifier import Qualifier
from .resource import DefinitionResource, DescriptiveResource, Resource


def _collections_equal(mine, theirs) -> bool:
    # An unmaterialized collection equals an empty one
    mine_empty = mine is None or mine.is_empty()
    theirs_empty = theirs is None or theirs.is_empty()
    if mine_empty or theirs_empty:
        return mine_empty and theirs_empty
    return mine == theirs


def _collection_hash(collection) -> int:
    if collection is None or collection.is_empty():
        return hash(None)
    return hash(collection)


class ComponentDefinition(AttributeAccessor):
    """Full component definition.

    Simple settings are plain attributes; settings with invariants are
    properties.

    Attributes:
        parent_name: Name of the parent definition, if any
        scope: Target scope name; "" means singleton until a scope is
            inherited or resolved
        is_abstract: Whether the definition only serves as a parent
        lazy_init: Whether the component is created on first request
        dependency_check: Which unsatisfied properties are reported
        autowire_candidate: Whether the component may be injected into others
        primary: Whether the component wins among several candidates
        instance_supplier: Zero-argument callback creating the instance;
            replaces constructor/factory method resolution only
        non_public_access_allowed: Whether non-public members may be used
        lenient_constructor_resolution: Whether constructor matching is lenient
        factory_component_name: Component providing the factory method
        factory_method_name: Factory method creating the instance
        init_method_name: Method called after configuration
            (INFER_METHOD asks the engine to probe conventional names)
        enforce_init_method: Whether a missing init method is an error
        destroy_method_name: Method called on shutdown
        enforce_destroy_method: Whether a missing destroy method is an error
        synthetic: Whether the definition was generated by infrastructure
        role: Who the definition was written for
        description: Human-readable description
        resource: Where the definition came from
        source: Configuration source object (from AttributeAccessor)

    Thread safety:
        After configuration a definition is treated as immutable and may
        be read from any thread. The one exception is the class slot:
        ``resolve_class()`` replaces it with an immutable ResolvedClass in
        a single assignment, so concurrent readers see either the name or
        the complete resolved class. Two threads resolving the same name
        at once both load the same class; the last write wins. To change a
        definition that is already in use, replace the whole object.
    """

    def __init__(
        self,
        component_class: Union[Type, str, None] = None,
        constructor_argument_values: Optional[ConstructorArgumentValues] = None,
        property_values: Union[MutablePropertyValues, Mapping[str, Any], None] = None,
        original: Optional[DefinitionView] = None,
    ):
        """Create a definition.

        Args:
            component_class: The component class, or its fully qualified name
            constructor_argument_values: Initial constructor arguments
            property_values: Initial property values, or a name/value mapping
            original: Definition to copy; all other arguments are ignored

        Example::

            ComponentDefinition(Widget)
            ComponentDefinition("myapp.widgets.Widget", property_values={"color": "red"})
            ComponentDefinition(original=other)  # deep copy
        """
        super().__init__()
        self._class_identity: Optional[ClassIdentity] = None
        self.parent_name: Optional[str] = None
        self.scope: Optional[str] = SCOPE_DEFAULT
        self.is_abstract: bool = False
        self.lazy_init: bool = False
        self._autowire_mode: AutowireMode = AutowireMode.NONE
        self.dependency_check: DependencyCheck = DependencyCheck.NONE
        self._depends_on: tuple = ()
        self.autowire_candidate: bool = True
        self.primary: bool = False
        self._qualifiers: Dict[str, Qualifier] = {}
        self.instance_supplier: Optional[Callable[[], Any]] = None
        self.non_public_access_allowed: bool = True
        self.lenient_constructor_resolution: bool = True
        self.factory_component_name: Optional[str] = None
        self.factory_method_name: Optional[str] = None
        self._constructor_argument_values: Optional[ConstructorArgumentValues] = None
        self._property_values: Optional[MutablePropertyValues] = None
        self._method_overrides: MethodOverrides = MethodOverrides()
        self.init_method_name: Optional[str] = None
        self.destroy_method_name: Optional[str] = None
        self.enforce_init_method: bool = True
        self.enforce_destroy_method: bool = True
        self.synthetic: bool = False
        self.role: Role = Role.APPLICATION
        self.description: Optional[str] = None
        self.resource: Optional[Resource] = None

        if original is not None:
            self._copy_from(original)
            return

        if isinstance(component_class, str):
            self.class_name = component_class
        elif component_class is not None:
            self.component_class = component_class
        self._constructor_argument_values = constructor_argument_values
        if property_values is not None:
            self.property_values = property_values

    def _copy_from(self, original: DefinitionView) -> None:
        self.parent_name = original.parent_name
        self.class_name = original.class_name
        self.scope = original.scope
        self.is_abstract = original.is_abstract
        self.lazy_init = original.lazy_init
        self.factory_component_name = original.factory_component_name
        self.factory_method_name = original.factory_method_name
        self.role = original.role
        self.description = original.description
        self.source = original.source
        self.copy_attributes_from(original)

        if isinstance(original, ComponentDefinition):
            if original.has_resolved_class():
                self._class_identity = original._class_identity
            if original.has_constructor_argument_values():
                self._constructor_argument_values = ConstructorArgumentValues(
                    original.constructor_argument_values
                )
            if original.has_property_values():
                self._property_values = MutablePropertyValues(original.property_values)
            if original.has_method_overrides():
                self._method_overrides = MethodOverrides(original.method_overrides)
            self._autowire_mode = original.autowire_mode
            self.dependency_check = original.dependency_check
            self._depends_on = original.depends_on
            self.autowire_candidate = original.autowire_candidate
            self.primary = original.primary
            self.copy_qualifiers_from(original)
            self.instance_supplier = original.instance_supplier
            self.non_public_access_allowed = original.non_public_access_allowed
            self.lenient_constructor_resolution = original.lenient_constructor_resolution
            self.init_method_name = original.init_method_name
            self.enforce_init_method = original.enforce_init_method
            self.destroy_method_name = original.destroy_method_name
            self.enforce_destroy_method = original.enforce_destroy_method
            self.synthetic = original.synthetic
            self.resource = original.resource
        else:
            self._constructor_argument_values = ConstructorArgumentValues(
                original.constructor_argument_values
            )
            self._property_values = MutablePropertyValues(original.property_values)
            self.resource_description = original.resource_description

    def clone(self) -> 'ComponentDefinition':
        """Return an independent deep copy of this definition."""
        return type(self)(original=self)

    def override_from(self, other: DefinitionView) -> None:
        """Layer a more specific definition on top of this one.

        This definition is usually a copy of a parent and ``other`` the
        child:

        - class name, scope, factory component/method name and description
          are taken from ``other`` only when set there
        - flags, enums, role, depends-on and the origin are always taken
          from ``other``
        - constructor arguments, property values, method overrides,
          qualifiers and attributes are merged, with ``other`` winning on
          the same key
        - a resolved class on ``other`` replaces this one
        - init/destroy method names are taken together with their enforce
          flag, only when ``other`` names a method

        Args:
            other: The definition whose settings take precedence
        """
        if other.class_name:
            self.class_name = other.class_name
        if other.scope:
            self.scope = other.scope
        self.is_abstract = other.is_abstract
        self.lazy_init = other.lazy_init
        if other.factory_component_name:
            self.factory_component_name = other.factory_component_name
        if other.factory_method_name:
            self.factory_method_name = other.factory_method_name
        if other.description:
            self.description = other.description
        self.role = other.role
        self.source = other.source
        self.copy_attributes_from(other)

        if isinstance(other, ComponentDefinition):
            if other.has_resolved_class():
                self._class_identity = other._class_identity
            if other.has_constructor_argument_values():
                self.constructor_argument_values.add_argument_values(
                    other.constructor_argument_values
                )
            if other.has_property_values():
                self.property_values.add_property_values(other.property_values)
            if other.has_method_overrides():
                self._method_overrides.add_overrides(other.method_overrides)
            self._autowire_mode = other.autowire_mode
            self.dependency_check = other.dependency_check
            self._depends_on = other.depends_on
            self.autowire_candidate = other.autowire_candidate
            self.primary = other.primary
            self.copy_qualifiers_from(other)
            self.instance_supplier = other.instance_supplier
            self.non_public_access_allowed = other.non_public_access_allowed
            self.lenient_constructor_resolution = other.lenient_constructor_resolution
            if other.init_method_name is not None:
                self.init_method_name = other.init_method_name
                self.enforce_init_method = other.enforce_init_method
            if other.destroy_method_name is not None:
                self.destroy_method_name = other.destroy_method_name
                self.enforce_destroy_method = other.enforce_destroy_method
            self.synthetic = other.synthetic
            self.resource = other.resource
        else:
            arguments = other.constructor_argument_values
            if arguments is not None and not arguments.is_empty():
                self.constructor_argument_values.add_argument_values(arguments)
            properties = other.property_values
            if properties is not None and not properties.is_empty():
                self.property_values.add_property_values(properties)
            self.resource_description = other.resource_description

    def apply_defaults(self, defaults: DefinitionDefaults) -> None:
        """Apply default settings to this definition.

        Init and destroy methods coming from defaults are conventions, so
        both enforce flags are switched off: a class lacking the default
        method is not an error.
        """
        self.lazy_init = defaults.lazy_init
        self._autowire_mode = defaults.autowire_mode
        self.dependency_check = defaults.dependency_check
        self.init_method_name = defaults.init_method_name
        self.enforce_init_method = False
        self.destroy_method_name = defaults.destroy_method_name
        self.enforce_destroy_method = False

    # Class identity

    @property
    def class_name(self) -> Optional[str]:
        """The class name, derived from the resolved class when there is one."""
        identity = self._class_identity
        return identity.name if identity is not None else None

    @class_name.setter
    def class_name(self, name: Optional[str]) -> None:
        self._class_identity = UnresolvedClass(name) if name is not None else None

    @property
    def component_class(self) -> Type:
        """The resolved component class.

        Raises:
            NoClassSpecifiedError: When the definition has no class
            UnresolvedClassError: When the class name has not been resolved
        """
        identity = self._class_identity
        if identity is None:
            raise NoClassSpecifiedError("No component class specified on component definition")
        if not isinstance(identity, ResolvedClass):
            raise UnresolvedClassError(
                f"Component class name [{identity.name}] has not been resolved into an actual class"
            )
        return identity.handle

    @component_class.setter
    def component_class(self, cls: Optional[Type]) -> None:
        if cls is not None and not isinstance(cls, type):
            raise TypeError(f"Expected a class, got {cls!r}")
        self._class_identity = ResolvedClass(cls) if cls is not None else None

    def has_resolved_class(self) -> bool:
        return isinstance(self._class_identity, ResolvedClass)

    def resolve_class(self, loader: Optional[ClassLoader] = None) -> Optional[Type]:
        """Load the class named by this definition and cache it.

        A class that is already resolved is reloaded from the name it was
        configured with, which lets a different loader replace it. The
        class name itself never changes.

        Args:
            loader: Class loading context; defaults to ImportClassLoader

        Returns:
            The resolved class, or None when the definition has no class

        Raises:
            ClassResolutionError: When the name cannot be loaded. The class
                slot is left as it was, so another loader can be tried.
        """
        name = self.class_name
        if name is None:
            return None
        if loader is None:
            loader = ImportClassLoader()
        resolved = loader.load_class(name)
        self._class_identity = ResolvedClass(resolved, name)
        return resolved

    # Scope

    @property
    def is_singleton(self) -> bool:
        return self.scope in (SCOPE_SINGLETON, SCOPE_DEFAULT)

    @property
    def is_prototype(self) -> bool:
        return self.scope == SCOPE_PROTOTYPE

    # Autowiring

    @property
    def autowire_mode(self) -> AutowireMode:
        return self._autowire_mode

    @autowire_mode.setter
    def autowire_mode(self, mode: AutowireMode) -> None:
        if mode is AutowireMode.AUTODETECT:
            warnings.warn(
                "AutowireMode.AUTODETECT is deprecated; use CONSTRUCTOR or BY_TYPE",
                DeprecationWarning,
                stacklevel=2,
            )
        self._autowire_mode = mode

    @property
    def resolved_autowire_mode(self) -> AutowireMode:
        """The autowire mode with AUTODETECT resolved.

        AUTODETECT becomes BY_TYPE when the resolved class can be called
        without arguments, CONSTRUCTOR otherwise.
        """
        if self._autowire_mode is not AutowireMode.AUTODETECT:
            return self._autowire_mode
        try:
            signature = inspect.signature(self.component_class)
        except (TypeError, ValueError):
            return AutowireMode.CONSTRUCTOR
        for parameter in signature.parameters.values():
            if (parameter.default is inspect.Parameter.empty
                    and parameter.kind not in (inspect.Parameter.VAR_POSITIONAL,
                                               inspect.Parameter.VAR_KEYWORD)):
                return AutowireMode.CONSTRUCTOR
        return AutowireMode.BY_TYPE

    @property
    def depends_on(self) -> tuple:
        """Names of components that must be initialized before this one."""
        return self._depends_on

    @depends_on.setter
    def depends_on(self, names: Optional[Union[str, Iterable[str]]]) -> None:
        if names is None:
            self._depends_on = ()
        elif isinstance(names, str):
            self._depends_on = (names,)
        else:
            self._depends_on = tuple(names)

    # Qualifiers

    def add_qualifier(self, qualifier: Qualifier) -> None:
        """Register a qualifier, replacing one with the same type name."""
        self._qualifiers[qualifier.type_name] = qualifier

    def has_qualifier(self, qualifier_type: Union[str, Type]) -> bool:
        return self._qualifier_key(qualifier_type) in self._qualifiers

    def get_qualifier(self, qualifier_type: Union[str, Type]) -> Optional[Qualifier]:
        return self._qualifiers.get(self._qualifier_key(qualifier_type))

    @property
    def qualifiers(self) -> List[Qualifier]:
        return list(self._qualifiers.values())

    def copy_qualifiers_from(self, source: 'ComponentDefinition') -> None:
        """Copy the qualifiers of another definition, overwriting same type names."""
        for qualifier in source.qualifiers:
            self.add_qualifier(qualifier.copy())

    @staticmethod
    def _qualifier_key(qualifier_type: Union[str, Type]) -> str:
        if isinstance(qualifier_type, type):
            return qualified_class_name(qualifier_type)
        return qualifier_type

    # Optional collections

    @property
    def constructor_argument_values(self) -> ConstructorArgumentValues:
        """Constructor arguments, created on first access."""
        if self._constructor_argument_values is None:
            self._constructor_argument_values = ConstructorArgumentValues()
        return self._constructor_argument_values

    @constructor_argument_values.setter
    def constructor_argument_values(self, values: Optional[ConstructorArgumentValues]) -> None:
        self._constructor_argument_values = values

    def has_constructor_argument_values(self) -> bool:
        values = self._constructor_argument_values
        return values is not None and not values.is_empty()

    @property
    def property_values(self) -> MutablePropertyValues:
        """Property values, created on first access."""
        if self._property_values is None:
            self._property_values = MutablePropertyValues()
        return self._property_values

    @property_values.setter
    def property_values(self, values: Union[MutablePropertyValues, Mapping[str, Any], None]) -> None:
        if values is not None and not isinstance(values, MutablePropertyValues):
            values = MutablePropertyValues(values)
        self._property_values = values

    def has_property_values(self) -> bool:
        values = self._property_values
        return values is not None and not values.is_empty()

    @property
    def method_overrides(self) -> MethodOverrides:
        """Method overrides; never None."""
        return self._method_overrides

    @method_overrides.setter
    def method_overrides(self, overrides: Optional[MethodOverrides]) -> None:
        self._method_overrides = overrides if overrides is not None else MethodOverrides()

    def has_method_overrides(self) -> bool:
        return not self._method_overrides.is_empty()

    # Origin

    @property
    def resource_description(self) -> Optional[str]:
        return self.resource.description if self.resource is not None else None

    @resource_description.setter
    def resource_description(self, description: Optional[str]) -> None:
        self.resource = DescriptiveResource(description) if description is not None else None

    @property
    def originating_definition(self) -> Optional['ComponentDefinition']:
        """The definition this one was derived from, if still alive.

        Only the immediate origin is returned; see ``iter_origin_chain()``
        to walk further.
        """
        if isinstance(self.resource, DefinitionResource):
            return self.resource.definition
        return None

    @originating_definition.setter
    def originating_definition(self, definition: 'ComponentDefinition') -> None:
        self.resource = DefinitionResource(definition)

    # Validation

    def validate(self) -> None:
        """Validate this definition before it is used.

        Raises:
            DefinitionConflictError: When method overrides are combined
                with a factory method
            DefinitionValidationError: When an override names a method the
                resolved class does not have
        """
        if self.has_method_overrides() and self.factory_method_name is not None:
            raise DefinitionConflictError(
                "Cannot combine factory method with container-generated method overrides: "
                "the factory method must create the concrete component instance."
            )
        if self.has_resolved_class():
            self.prepare_method_overrides()

    def prepare_method_overrides(self) -> None:
        """Check that overridden methods exist and record overload status."""
        for override in self._method_overrides:
            self._prepare_method_override(override)

    def _prepare_method_override(self, override: MethodOverride) -> None:
        count = method_count_for_name(self.component_class, override.method_name)
        if count == 0:
            raise DefinitionValidationError(
                f"Invalid method override: no method with name '{override.method_name}' "
                f"on class [{self.class_name}]"
            )
        if count == 1:
            # A single candidate needs no argument matching later on
            override.overloaded = False

    # Equality

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, ComponentDefinition):
            return NotImplemented
        return (
            self.class_name == other.class_name
            and self.scope == other.scope
            and self.is_abstract == other.is_abstract
            and self.lazy_init == other.lazy_init
            and self._autowire_mode == other._autowire_mode
            and self.dependency_check == other.dependency_check
            and self._depends_on == other._depends_on
            and self.autowire_candidate == other.autowire_candidate
            and self._qualifiers == other._qualifiers
            and self.primary == other.primary
            and self.non_public_access_allowed == other.non_public_access_allowed
            and self.lenient_constructor_resolution == other.lenient_constructor_resolution
            and _collections_equal(self._constructor_argument_values,
                                   other._constructor_argument_values)
            and _collections_equal(self._property_values, other._property_values)
            and _collections_equal(self._method_overrides, other._method_overrides)
            and self.factory_component_name == other.factory_component_name
            and self.factory_method_name == other.factory_method_name
            and self.init_method_name == other.init_method_name
            and self.enforce_init_method == other.enforce_init_method
            and self.destroy_method_name == other.destroy_method_name
            and self.enforce_destroy_method == other.enforce_destroy_method
            and self.synthetic == other.synthetic
            and self.role == other.role
            and self._attributes_equal(other)
        )

    def __hash__(self):
        return hash((
            self.class_name,
            self.scope,
            _collection_hash(self._constructor_argument_values),
            _collection_hash(self._property_values),
            self.factory_component_name,
            self.factory_method_name,
        ))

    def __repr__(self) -> str:
        parts = [
            f"class [{self.class_name}]",
            f"scope={self.scope}",
            f"abstract={self.is_abstract}",
            f"lazyInit={self.lazy_init}",
            f"autowireMode={self._autowire_mode.name}",
            f"dependencyCheck={self.dependency_check.name}",
            f"autowireCandidate={self.autowire_candidate}",
            f"primary={self.primary}",
            f"factoryComponentName={self.factory_component_name}",
            f"factoryMethodName={self.factory_method_name}",
            f"initMethodName={self.init_method_name}",
            f"destroyMethodName={self.destroy_method_name}",
        ]
        if self.resource is not None:
            parts.append(f"defined in {self.resource.description}")
        return "; ".join(parts)
