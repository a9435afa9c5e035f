"""FixtureForge data models — attribute kinds, templates and capabilities."""

from fixtureforge.models.attributes import (
    OPTIONAL,
    REQUIRED,
    Attribute,
    Default,
    Generated,
    OptionalMarker,
    RequiredMarker,
    coerce_attribute,
)
from fixtureforge.models.capabilities import AcceptsInitHook, Persistable
from fixtureforge.models.template import Template

__all__ = [
    "OPTIONAL",
    "REQUIRED",
    "Attribute",
    "Default",
    "Generated",
    "OptionalMarker",
    "RequiredMarker",
    "coerce_attribute",
    "AcceptsInitHook",
    "Persistable",
    "Template",
]
