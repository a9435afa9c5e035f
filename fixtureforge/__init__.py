"""FixtureForge — template-based model factory for test fixtures."""

from fixtureforge.errors import (
    ClassResolutionError,
    ConfigurationError,
    FixtureForgeError,
    TemplateNotFound,
)
from fixtureforge.core.factory import (
    ModelFactory,
    build,
    catalog,
    create,
    define_factory,
    factory,
    load_catalog,
    model_factory,
    register,
    register_type,
)
from fixtureforge.models import (
    OPTIONAL,
    REQUIRED,
    AcceptsInitHook,
    Default,
    Generated,
    Persistable,
    Template,
)
from fixtureforge.utils.tempfiles import using_tempfile

__version__ = "0.1.0"

__all__ = [
    "ClassResolutionError",
    "ConfigurationError",
    "FixtureForgeError",
    "TemplateNotFound",
    "ModelFactory",
    "build",
    "catalog",
    "create",
    "define_factory",
    "factory",
    "load_catalog",
    "model_factory",
    "register",
    "register_type",
    "OPTIONAL",
    "REQUIRED",
    "AcceptsInitHook",
    "Default",
    "Generated",
    "Persistable",
    "Template",
    "using_tempfile",
]
