"""
FixtureForge — Model factory.

``ModelFactory`` owns one template registry, one constructor resolver and
the builder that ties them together. Test suites can create their own
instance and pass it around, or use the process-wide ``model_factory``
through the module-level helpers:

    from fixtureforge import Generated, OPTIONAL, factory, build

    factory(User, {"name": "Jane", "nickname": OPTIONAL,
                   "serial": Generated(next_serial)})
    user = build(User, {"name": "John"})

Templates keyed by a plain string need their constructor registered
separately with ``register_type`` before the first build.
"""

from __future__ import annotations

import importlib
from collections.abc import Mapping
from typing import Any, Callable, TypeVar

from fixtureforge.models.template import Template
from fixtureforge.pipeline.builder import InitHook, InstanceBuilder
from fixtureforge.pipeline.resolve_class import ClassResolver
from fixtureforge.templates.registry import TemplateRegistry
from fixtureforge.utils.logging import logger

T = TypeVar("T")
C = TypeVar("C", bound=Callable[..., Any])


class ModelFactory:
    def __init__(
        self,
        registry: TemplateRegistry | None = None,
        resolver: ClassResolver | None = None,
    ):
        self.registry = registry if registry is not None else TemplateRegistry()
        self.resolver = resolver if resolver is not None else ClassResolver()
        self.builder = InstanceBuilder(self.registry, self.resolver)

    # ── Registration ────────────────────────────────────────

    def register(self, name: Any, attrs: Mapping[Any, Any] | None = None) -> Template:
        """Register a template; a class passed as ``name`` is also its constructor."""
        if isinstance(name, type):
            self.resolver.register(name)
        return self.registry.register(name, attrs)

    define_factory = register
    factory = register

    def register_type(self, constructor: C, name: Any = None) -> C:
        return self.resolver.register(constructor, name)

    def catalog(self, fn: Callable[["ModelFactory"], T]) -> T:
        return fn(self)

    # ── Building ────────────────────────────────────────────

    def build(
        self,
        name: Any,
        overrides: Mapping[Any, Any] | None = None,
        on_init: InitHook | None = None,
    ) -> Any:
        return self.builder.build(name, overrides, on_init)

    def create(
        self,
        name: Any,
        overrides: Mapping[Any, Any] | None = None,
        on_init: InitHook | None = None,
    ) -> Any:
        return self.builder.create(name, overrides, on_init)

    # ── Lifecycle ───────────────────────────────────────────

    def unregister(self, name: Any) -> None:
        """Drop the template and constructor registered under ``name``."""
        self.registry.unregister(name)
        self.resolver.unregister(name)

    def clear(self) -> None:
        """Forget all templates; registered constructors are kept."""
        self.registry.clear()

    def reset(self) -> None:
        self.registry.clear()
        self.resolver.clear()


def _is_missing_module(exc: ModuleNotFoundError, module_name: str) -> bool:
    missing = exc.name or ""
    return module_name == missing or module_name.startswith(missing + ".")


def load_catalog(module_name: str, factory: ModelFactory | None = None) -> bool:
    """
    Import a catalog module holding a project's templates.

    If the module defines ``register_factories(factory)`` it is called with
    ``factory`` (the default factory when omitted). Returns False when the
    module does not exist; errors raised while importing an existing module
    propagate.
    """
    target = factory if factory is not None else model_factory
    if not module_name:
        return False
    try:
        module = importlib.import_module(module_name)
    except ModuleNotFoundError as exc:
        if not _is_missing_module(exc, module_name):
            raise
        logger.debug("No catalog module %s", module_name)
        return False

    register_factories = getattr(module, "register_factories", None)
    if callable(register_factories):
        register_factories(target)
    logger.debug("Loaded catalog %s (%d templates)", module_name, len(target.registry))
    return True


model_factory = ModelFactory()

register = model_factory.register
define_factory = model_factory.define_factory
factory = model_factory.factory
register_type = model_factory.register_type
catalog = model_factory.catalog
build = model_factory.build
create = model_factory.create
