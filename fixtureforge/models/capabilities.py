"""
FixtureForge — Optional capabilities a target type may implement.

The builder queries these with ``isinstance`` after construction instead of
calling a method and catching the failure.
"""

from __future__ import annotations

from typing import Any, Callable, Protocol, runtime_checkable


@runtime_checkable
class Persistable(Protocol):
    """Instances that ``create`` saves after building."""

    def save(self) -> Any: ...


@runtime_checkable
class AcceptsInitHook(Protocol):
    """
    Instances that accept the ``on_init`` hook passed to ``build``.

    The instance decides whether and when the hook runs; the builder only
    hands it over.
    """

    def apply_init_hook(self, hook: Callable[[Any], Any]) -> None: ...
