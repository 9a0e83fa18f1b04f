"""
Constructor Arguments

Argument values for constructor or factory method invocation, held either
by parameter index or as generic values matched by type and name.
"""

from typing import Any, Dict, Iterable, List, Optional, Tuple, Type, Union

from .class_identity import qualified_class_name


# Required type: a class or its (qualified or simple) name
RequiredType = Union[Type, str, None]


def _type_name_of(required_type: RequiredType) -> Optional[str]:
    if required_type is None or isinstance(required_type, str):
        return required_type
    return qualified_class_name(required_type)


def _matches_type_name(required_type: RequiredType, type_name: str) -> bool:
    if isinstance(required_type, type):
        return type_name in (
            qualified_class_name(required_type),
            required_type.__qualname__,
            required_type.__name__,
        )
    # Either side may be a short name such as "int"
    return (
        required_type == type_name
        or type_name.endswith("." + required_type)
        or required_type.endswith("." + type_name)
    )


def _is_assignable_value(required_type: RequiredType, value: Any) -> bool:
    if not isinstance(required_type, type) or value is None:
        return True
    return isinstance(value, required_type)


class ValueHolder:
    """An argument value with optional type and parameter name.

    Attributes:
        value: The argument value
        type_name: Name of the expected parameter type, if declared
        name: Name of the parameter, if declared
        source: Configuration source object, if any
    """

    def __init__(
        self,
        value: Any,
        type_name: RequiredType = None,
        name: Optional[str] = None,
        source: Optional[Any] = None,
    ):
        self.value = value
        self.type_name: Optional[str] = _type_name_of(type_name)
        self.name = name
        self.source = source

    def copy(self) -> 'ValueHolder':
        return ValueHolder(self.value, self.type_name, self.name, self.source)

    def content_equals(self, other: 'ValueHolder') -> bool:
        """Whether both holders carry the same value, type and name."""
        return (
            self is other
            or (self.value == other.value
                and self.type_name == other.type_name
                and self.name == other.name)
        )

    def collides_with(self, other: 'ValueHolder') -> bool:
        """Whether ``other`` targets the same parameter as this holder."""
        if self.name is not None or other.name is not None:
            return self.name == other.name
        return self.type_name is not None and self.type_name == other.type_name

    def __repr__(self) -> str:
        return f"ValueHolder({self.value!r}, type_name={self.type_name!r}, name={self.name!r})"


class ConstructorArgumentValues:
    """Indexed and generic constructor argument values.

    Attributes:
        _indexed: Values keyed by parameter index
        _generic: Values matched by type and/or name

    Example::

        args = ConstructorArgumentValues()
        args.add_indexed_argument_value(0, "localhost")
        args.add_generic_argument_value(5432, type_name=int)
        args.get_argument_value(0).value  # "localhost"
    """

    def __init__(self, original: Optional['ConstructorArgumentValues'] = None):
        """Create an empty collection, or a deep copy of another one."""
        self._indexed: Dict[int, ValueHolder] = {}
        self._generic: List[ValueHolder] = []
        if original is not None:
            self._indexed = {index: holder.copy() for index, holder in original._indexed.items()}
            self._generic = [holder.copy() for holder in original._generic]

    def add_argument_values(self, other: Optional['ConstructorArgumentValues']) -> None:
        """Copy all values of another collection into this one.

        Indexed values of ``other`` replace those at the same index. A
        generic value of ``other`` replaces existing generic values aimed at
        the same parameter name, or at the same type when neither is named.
        """
        if other is None or other is self:
            return
        for index, holder in other._indexed.items():
            self._indexed[index] = holder.copy()
        incoming = [holder.copy() for holder in other._generic]
        self._generic = [
            existing for existing in self._generic
            if not any(existing.collides_with(holder) for holder in incoming)
        ]
        for holder in incoming:
            self._add_generic_holder(holder)

    # Indexed values

    def add_indexed_argument_value(
        self,
        index: int,
        value: Any,
        type_name: RequiredType = None,
        name: Optional[str] = None,
    ) -> None:
        """Add an argument value for the given parameter index.

        Args:
            index: Zero-based parameter index
            value: The value, or a ready-made ValueHolder
            type_name: Expected parameter type or type name
            name: Parameter name

        Raises:
            ValueError: When the index is negative
        """
        if index < 0:
            raise ValueError(f"Argument index must not be negative: {index}")
        holder = value if isinstance(value, ValueHolder) else ValueHolder(value, type_name, name)
        self._indexed[index] = holder

    def has_indexed_argument_value(self, index: int) -> bool:
        return index in self._indexed

    def get_indexed_argument_value(
        self,
        index: int,
        required_type: RequiredType = None,
        required_name: Optional[str] = None,
    ) -> Optional[ValueHolder]:
        """Get the value for an index if it matches the requested type and name.

        A holder without a declared type (or name) matches any request. A
        holder with a declared type only matches a request for that type,
        and likewise for names; an empty ``required_name`` matches any name.
        """
        if index < 0:
            raise ValueError(f"Argument index must not be negative: {index}")
        holder = self._indexed.get(index)
        if holder is None:
            return None
        if holder.type_name is not None and (
            required_type is None or not _matches_type_name(required_type, holder.type_name)
        ):
            return None
        if holder.name is not None and (
            required_name is None or (required_name and required_name != holder.name)
        ):
            return None
        return holder

    @property
    def indexed_argument_values(self) -> Dict[int, ValueHolder]:
        return dict(self._indexed)

    # Generic values

    def add_generic_argument_value(
        self,
        value: Any,
        type_name: RequiredType = None,
        name: Optional[str] = None,
    ) -> None:
        """Add a generic argument value, matched later by type or name.

        Several generic values of the same type may be added; the same
        holder is never added twice.
        """
        holder = value if isinstance(value, ValueHolder) else ValueHolder(value, type_name, name)
        self._add_generic_holder(holder)

    def _add_generic_holder(self, holder: ValueHolder) -> None:
        if not any(existing.content_equals(holder) for existing in self._generic):
            self._generic.append(holder)

    def get_generic_argument_value(
        self,
        required_type: RequiredType = None,
        required_name: Optional[str] = None,
        used_holders: Optional[Iterable[ValueHolder]] = None,
    ) -> Optional[ValueHolder]:
        """Find the first generic value matching the requested type and name.

        Args:
            required_type: The parameter type to match
            required_name: The parameter name to match ("" matches any name)
            used_holders: Holders already consumed by earlier parameters

        Returns:
            The matching ValueHolder, or None
        """
        used = list(used_holders or ())
        for holder in self._generic:
            if any(holder is u for u in used):
                continue
            if holder.name is not None and (
                required_name is None or (required_name and required_name != holder.name)
            ):
                continue
            if holder.type_name is not None and (
                required_type is None or not _matches_type_name(required_type, holder.type_name)
            ):
                continue
            if (required_type is not None and holder.type_name is None and holder.name is None
                    and not _is_assignable_value(required_type, holder.value)):
                continue
            return holder
        return None

    @property
    def generic_argument_values(self) -> Tuple[ValueHolder, ...]:
        return tuple(self._generic)

    # Combined lookup

    def get_argument_value(
        self,
        index: int,
        required_type: RequiredType = None,
        required_name: Optional[str] = None,
        used_holders: Optional[Iterable[ValueHolder]] = None,
    ) -> Optional[ValueHolder]:
        """Look up an indexed value first, then fall back to generic values."""
        holder = self.get_indexed_argument_value(index, required_type, required_name)
        if holder is None:
            holder = self.get_generic_argument_value(required_type, required_name, used_holders)
        return holder

    def contains_named_argument(self) -> bool:
        return any(
            holder.name is not None
            for holder in list(self._indexed.values()) + self._generic
        )

    @property
    def argument_count(self) -> int:
        return len(self._indexed) + len(self._generic)

    def is_empty(self) -> bool:
        return not self._indexed and not self._generic

    def clear(self) -> None:
        self._indexed.clear()
        self._generic.clear()

    def __len__(self) -> int:
        return self.argument_count

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, ConstructorArgumentValues):
            return NotImplemented
        if self._indexed.keys() != other._indexed.keys():
            return False
        if len(self._generic) != len(other._generic):
            return False
        for index, holder in self._indexed.items():
            if not holder.content_equals(other._indexed[index]):
                return False
        return all(
            mine.content_equals(theirs)
            for mine, theirs in zip(self._generic, other._generic)
        )

    def __hash__(self):
        return hash((tuple(sorted(self._indexed)), len(self._generic)))

    def __repr__(self) -> str:
        return (
            f"ConstructorArgumentValues(indexed={self._indexed!r}, "
            f"generic={self._generic!r})"
        )
