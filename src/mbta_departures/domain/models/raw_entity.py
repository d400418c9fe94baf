"""Raw side-table entity domain model."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True)
class RawEntity:
    """A node from the API's `included` side-table, referenced by (type, id)."""

    type: str
    id: str
    attributes: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        # Freeze the attribute bag so the snapshot cannot change after the fetch
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))

    def attribute(self, name: str) -> Any:
        """Return an attribute value or None when it is absent."""
        return self.attributes.get(name)
