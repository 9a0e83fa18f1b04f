"""
Definition Constants

Enums and well-known names used by component definitions
"""

from enum import Enum


# Default scope name: singleton is assumed until a scope is resolved,
# which lets a child definition inherit the scope of its parent.
SCOPE_DEFAULT = ""
SCOPE_SINGLETON = "singleton"
SCOPE_PROTOTYPE = "prototype"

# Init/destroy method name that asks the construction engine to probe
# for conventional method names (e.g. "close" or "shutdown").
INFER_METHOD = "(inferred)"


class AutowireMode(Enum):
    """How dependencies are wired into a component"""
    NONE = 0
    BY_NAME = 1
    BY_TYPE = 2
    CONSTRUCTOR = 3
    AUTODETECT = 4  # Deprecated: prefer CONSTRUCTOR or BY_TYPE


class DependencyCheck(Enum):
    """Which unsatisfied properties are reported at construction"""
    NONE = 0
    OBJECTS = 1
    SIMPLE = 2
    ALL = 3


class Role(Enum):
    """Who a definition was written for"""
    APPLICATION = 0
    SUPPORT = 1
    INFRASTRUCTURE = 2
