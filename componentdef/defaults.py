"""
DefinitionDefaults

Immutable default settings applied to definitions via apply_defaults().
"""

from dataclasses import dataclass
from typing import Optional

from .constants import AutowireMode, DependencyCheck


@dataclass(frozen=True)
class DefinitionDefaults:
    """Default settings shared by a group of definitions.

    Instances are plain values handed to ``apply_defaults()``; there is no
    process-wide registry of defaults.

    Attributes:
        lazy_init: Whether components are initialized lazily
        autowire_mode: Default autowire mode
        dependency_check: Default dependency check mode
        init_method_name: Conventional init method name, if any
        destroy_method_name: Conventional destroy method name, if any

    Example::

        defaults = DefinitionDefaults(lazy_init=True, init_method_name="start")
        definition.apply_defaults(defaults)
    """
    lazy_init: bool = False
    autowire_mode: AutowireMode = AutowireMode.NONE
    dependency_check: DependencyCheck = DependencyCheck.NONE
    init_method_name: Optional[str] = None
    destroy_method_name: Optional[str] = None
