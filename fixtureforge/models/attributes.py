"""
FixtureForge — Attribute kinds.

Each template attribute is tagged with how its value is produced at build
time. Plain values given at registration become ``Default``; a callable is
only ever invoked when wrapped in ``Generated``.
"""

from __future__ import annotations

from typing import Any, Callable, Union

from pydantic import BaseModel, ConfigDict


class Default(BaseModel):
    """A literal default, shallow-copied per build unless immutable."""

    model_config = ConfigDict(frozen=True)

    value: Any = None

    def __init__(self, value: Any = None, **data: Any) -> None:
        super().__init__(value=value, **data)


class Generated(BaseModel):
    """A zero-argument function called once on every build."""

    model_config = ConfigDict(frozen=True)

    func: Callable[[], Any]

    def __init__(self, func: Callable[[], Any], **data: Any) -> None:
        super().__init__(func=func, **data)

    def generate(self) -> Any:
        return self.func()


class OptionalMarker(BaseModel):
    model_config = ConfigDict(frozen=True)

    def __repr__(self) -> str:
        return "OPTIONAL"


class RequiredMarker(BaseModel):
    model_config = ConfigDict(frozen=True)

    def __repr__(self) -> str:
        return "REQUIRED"


# Dropped from the built attributes unless overridden.
OPTIONAL = OptionalMarker()
# Passed through as-is so the target type rejects the missing value.
REQUIRED = RequiredMarker()

Attribute = Union[Default, Generated, OptionalMarker, RequiredMarker]

ATTRIBUTE_KINDS = (Default, Generated, OptionalMarker, RequiredMarker)


def coerce_attribute(value: Any) -> Attribute:
    if isinstance(value, ATTRIBUTE_KINDS):
        return value
    return Default(value)
