"""
FixtureForge — Registered template record.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from fixtureforge.models.attributes import Attribute


@dataclass(frozen=True)
class Template:
    """
    A named, read-only set of attribute kinds.

    ``attributes`` is always a fresh ``MappingProxyType``; the mapping handed
    in at construction is copied so later changes to it are not observed.
    """

    name: str
    attributes: Mapping[str, Attribute]

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))

    def keys(self):
        return self.attributes.keys()

    def __getitem__(self, key: str) -> Attribute:
        return self.attributes[key]

    def __contains__(self, key: object) -> bool:
        return key in self.attributes

    def __len__(self) -> int:
        return len(self.attributes)
