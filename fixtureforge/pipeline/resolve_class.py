"""
FixtureForge — Constructor resolution step.

Names are resolved against an explicit name → constructor map filled in by
callers at setup time. Resolution happens at build time, so a template can
be registered before its target class is importable or registered.
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar

from fixtureforge.errors import ClassResolutionError
from fixtureforge.utils.logging import logger
from fixtureforge.utils.normalize import normalize_name

C = TypeVar("C", bound=Callable[..., Any])


class ClassResolver:
    def __init__(self) -> None:
        self._constructors: dict[str, Callable[..., Any]] = {}

    def register(self, constructor: C, name: Any = None) -> C:
        """Register ``constructor``; returns it unchanged so it can decorate a class."""
        if not callable(constructor):
            raise TypeError(f"Constructor must be callable, got {constructor!r}")
        key = normalize_name(constructor if name is None else name)
        self._constructors[key] = constructor
        logger.debug("Registered constructor %s → %r", key, constructor)
        return constructor

    def resolve(self, target: Any) -> Callable[..., Any]:
        if callable(target) and not isinstance(target, str):
            return target
        key = normalize_name(target)
        try:
            return self._constructors[key]
        except KeyError:
            raise ClassResolutionError(key) from None

    def unregister(self, name: Any) -> None:
        self._constructors.pop(normalize_name(name), None)

    def clear(self) -> None:
        self._constructors.clear()

    def __contains__(self, name: Any) -> bool:
        return normalize_name(name) in self._constructors
