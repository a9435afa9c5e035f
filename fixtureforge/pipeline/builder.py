"""
FixtureForge — Instance builder.

Runs the linear build pipeline:

  normalise overrides → lookup template → merge attributes
  → resolve constructor → construct → (init hook) → (save)

Any failure aborts the build and surfaces to the caller unchanged. There
are no retries and no partially built instances.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable

from fixtureforge.models.capabilities import AcceptsInitHook, Persistable
from fixtureforge.pipeline.merge_attrs import merge_attrs
from fixtureforge.pipeline.resolve_class import ClassResolver
from fixtureforge.templates.registry import TemplateRegistry
from fixtureforge.utils.logging import logger, step_timer
from fixtureforge.utils.normalize import normalize_keys, normalize_name

InitHook = Callable[[Any], Any]


class InstanceBuilder:
    """Builds instances from the templates in ``registry``."""

    def __init__(self, registry: TemplateRegistry, resolver: ClassResolver):
        self.registry = registry
        self.resolver = resolver

    def build(
        self,
        name: Any,
        overrides: Mapping[Any, Any] | None = None,
        on_init: InitHook | None = None,
    ) -> Any:
        """
        Build an instance of ``name`` without persisting it.

        ``on_init`` is handed to instances implementing ``AcceptsInitHook``;
        for any other type it is ignored.
        """
        with step_timer(f"Build {normalize_name(name)}"):
            custom_attrs = normalize_keys(overrides)
            template = self.registry.lookup(name)
            attrs = merge_attrs(template, custom_attrs)
            constructor = self.resolver.resolve(name)
            instance = constructor(**attrs)
            if on_init is not None and isinstance(instance, AcceptsInitHook):
                instance.apply_init_hook(on_init)
            return instance

    def create(
        self,
        name: Any,
        overrides: Mapping[Any, Any] | None = None,
        on_init: InitHook | None = None,
    ) -> Any:
        """Build an instance, then save it if it is ``Persistable``."""
        instance = self.build(name, overrides, on_init)
        if isinstance(instance, Persistable):
            logger.debug("Saving %s", type(instance).__name__)
            instance.save()
        return instance
