"""
FixtureForge — Template registry.

Maps template names to read-only attribute templates. Registering a name
again replaces the previous template as a whole; attributes are never
merged across registrations.

Not thread-safe: templates are expected to be registered during test setup
and only read afterwards.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, TypeVar

from fixtureforge.errors import TemplateNotFound
from fixtureforge.models.attributes import coerce_attribute
from fixtureforge.models.template import Template
from fixtureforge.utils.logging import logger
from fixtureforge.utils.normalize import normalize_keys, normalize_name

T = TypeVar("T")


class TemplateRegistry:
    def __init__(self) -> None:
        self._templates: dict[str, Template] = {}

    def register(self, name: Any, attrs: Mapping[Any, Any] | None = None) -> Template:
        template_name = normalize_name(name)
        attributes = {
            key: coerce_attribute(value)
            for key, value in normalize_keys(attrs).items()
        }
        template = Template(name=template_name, attributes=attributes)
        if template_name in self._templates:
            logger.debug("Replacing template %s", template_name)
        self._templates[template_name] = template
        logger.debug("Registered template %s (%d attributes)", template_name, len(template))
        return template

    define_factory = register
    factory = register

    def catalog(self, fn: Callable[["TemplateRegistry"], T]) -> T:
        """Hand the registry to ``fn`` so it can register several templates."""
        return fn(self)

    def lookup(self, name: Any) -> Template:
        template_name = normalize_name(name)
        try:
            return self._templates[template_name]
        except KeyError:
            raise TemplateNotFound(template_name) from None

    def unregister(self, name: Any) -> None:
        """Drop one template; unknown names are ignored."""
        self._templates.pop(normalize_name(name), None)

    def clear(self) -> None:
        self._templates.clear()

    def names(self) -> list[str]:
        return list(self._templates)

    def __contains__(self, name: Any) -> bool:
        return normalize_name(name) in self._templates

    def __len__(self) -> int:
        return len(self._templates)
