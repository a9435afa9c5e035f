"""
FixtureForge — Attribute merge step.

Combines a template with per-build overrides:

  - overrides always win and are passed through untouched (never copied,
    never called), so callers may share mutable state across builds
  - template-only OPTIONAL attributes are dropped
  - template-only Generated attributes are produced fresh on every build
  - template-only Default values are shallow-copied unless immutable, so
    one instance mutating a default collection cannot leak into another
  - template-only REQUIRED attributes keep the REQUIRED marker as value

Modules, locks and generator objects cannot be copied and are shared as-is.
Any other value whose copy fails raises the error from copy.copy.
"""

from __future__ import annotations

import copy
import dataclasses
import enum
import threading
import types
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from fixtureforge.models.attributes import Attribute, Default, Generated, OptionalMarker
from fixtureforge.models.template import Template

IMMUTABLE_TYPES = (
    type(None),
    bool,
    int,
    float,
    complex,
    str,
    bytes,
    tuple,
    frozenset,
    range,
    enum.Enum,
    type,
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
)

# Shared between builds because copy.copy cannot duplicate them.
UNCOPYABLE_TYPES = (
    types.ModuleType,
    types.GeneratorType,
    type(threading.Lock()),
    type(threading.RLock()),
)


def _is_shared(value: Any) -> bool:
    if isinstance(value, IMMUTABLE_TYPES + UNCOPYABLE_TYPES):
        return True
    if dataclasses.is_dataclass(value):
        params = getattr(type(value), "__dataclass_params__", None)
        return bool(params and params.frozen)
    if isinstance(value, BaseModel):
        return bool(value.model_config.get("frozen"))
    return False


def safe_transform(attribute: Attribute) -> Any:
    """Produce the per-build value for a template-only attribute."""
    if isinstance(attribute, Generated):
        return attribute.generate()
    if isinstance(attribute, Default):
        value = attribute.value
        if _is_shared(value):
            return value
        return copy.copy(value)
    # REQUIRED: the marker itself is the value
    return attribute


def merge_attrs(template: Template, overrides: Mapping[str, Any]) -> dict[str, Any]:
    """
    Build the final attribute dict for one build.

    ``overrides`` must already have normalised keys. Keys not present in the
    template are passed through; the target type decides what to do with them.
    """
    template_only = [key for key in template.keys() if key not in overrides]

    attrs: dict[str, Any] = {}
    for key in template_only:
        attribute = template[key]
        if isinstance(attribute, OptionalMarker):
            continue
        attrs[key] = safe_transform(attribute)

    attrs.update(overrides)
    return attrs
