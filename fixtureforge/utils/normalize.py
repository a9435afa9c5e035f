"""
FixtureForge — Name and attribute-key normalisation.

Template names and attribute keys are plain, case-sensitive strings.
Enum members and class/function references are accepted wherever a name
is expected and reduced to their name.
"""

from __future__ import annotations

import enum
from collections.abc import Mapping
from typing import Any


def normalize_name(name: Any) -> str:
    """Reduce a template/type name reference to its string form."""
    if isinstance(name, enum.Enum):
        return name.name
    if isinstance(name, str):
        return str(name)
    if callable(name) and hasattr(name, "__name__"):
        return name.__name__
    raise TypeError(f"Cannot use {name!r} as a template name")


def normalize_key(key: Any) -> str:
    if isinstance(key, enum.Enum):
        return key.name
    if isinstance(key, str):
        return str(key)
    raise TypeError(f"Attribute keys must be strings, got {type(key).__name__}: {key!r}")


def normalize_keys(attrs: Mapping[Any, Any] | None) -> dict[str, Any]:
    """Return a new dict with every key normalised; values are untouched."""
    if not attrs:
        return {}
    return {normalize_key(k): v for k, v in attrs.items()}
