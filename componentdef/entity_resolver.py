"""
Entity Resolvers

Lookup of external documents (DTDs, schemas) referenced by definition
documents. Returning None from a resolver means "no opinion": the caller
falls back to its default behavior.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Mapping, Optional, Union


@dataclass
class InputSource:
    """A resolved external entity.

    Attributes:
        public_id: Public identifier of the entity, if any
        system_id: System identifier (usually a URL) of the entity
        stream: Open binary stream with the entity content, if any
    """
    public_id: Optional[str]
    system_id: Optional[str]
    stream: Optional[BinaryIO] = None


class EntityResolver(ABC):
    """Resolves external entities by public and system identifier"""

    @abstractmethod
    def resolve_entity(self, public_id: Optional[str], system_id: Optional[str]) -> Optional[InputSource]:
        raise NotImplementedError


class DelegatingEntityResolver(EntityResolver):
    """Routes DTD and schema lookups to dedicated resolvers.

    System identifiers ending in DTD_SUFFIX go to the DTD resolver, those
    ending in XSD_SUFFIX go to the schema resolver, anything else yields
    None. The resolver holds no state besides its two delegates.

    Example::

        resolver = DelegatingEntityResolver(dtd_resolver, schema_resolver)
        resolver.resolve_entity(None, "https://example.org/components.xsd")
    """

    DTD_SUFFIX = ".dtd"
    XSD_SUFFIX = ".xsd"

    def __init__(self, dtd_resolver: EntityResolver, schema_resolver: EntityResolver):
        """Create a delegating resolver.

        Raises:
            ValueError: When either delegate is None
        """
        if dtd_resolver is None:
            raise ValueError("'dtd_resolver' is required")
        if schema_resolver is None:
            raise ValueError("'schema_resolver' is required")
        self.dtd_resolver = dtd_resolver
        self.schema_resolver = schema_resolver

    def resolve_entity(self, public_id: Optional[str], system_id: Optional[str]) -> Optional[InputSource]:
        if system_id is not None:
            if system_id.endswith(self.DTD_SUFFIX):
                return self.dtd_resolver.resolve_entity(public_id, system_id)
            if system_id.endswith(self.XSD_SUFFIX):
                return self.schema_resolver.resolve_entity(public_id, system_id)
        return None

    def __repr__(self) -> str:
        return (
            f"EntityResolver delegating {self.XSD_SUFFIX} to {self.schema_resolver!r} "
            f"and {self.DTD_SUFFIX} to {self.dtd_resolver!r}"
        )


class MappingEntityResolver(EntityResolver):
    """Resolves system identifiers to local files.

    Attributes:
        mappings: System identifier to local file path

    Example::

        resolver = MappingEntityResolver({
            "https://example.org/components.xsd": "schemas/components.xsd",
        })
    """

    def __init__(self, mappings: Mapping[str, Union[str, Path]]):
        self.mappings = {system_id: Path(path) for system_id, path in mappings.items()}

    def resolve_entity(self, public_id: Optional[str], system_id: Optional[str]) -> Optional[InputSource]:
        if system_id is None:
            return None
        path = self.mappings.get(system_id)
        if path is None:
            return None
        return InputSource(public_id, system_id, path.open("rb"))

    def __repr__(self) -> str:
        return f"MappingEntityResolver({sorted(self.mappings)!r})"
