"""
FixtureForge — pytest integration.

Enable it from a conftest:

    pytest_plugins = ["fixtureforge.pytest_plugin"]

Helpers are available as fixtures (``build``, ``create``, ``model_factory``,
``isolated_model_factory``, ``using_tempfile``). Test classes can instead
opt in by marker, which attaches the helpers to the test instance:

    @pytest.mark.model_factory
    class TestUser:
        def test_name(self):
            assert self.build("User").name == "Jane"
"""

from __future__ import annotations

import pytest

from fixtureforge.core.config import settings
from fixtureforge.core.factory import ModelFactory, load_catalog, model_factory as default_factory
from fixtureforge.utils.tempfiles import using_tempfile as _using_tempfile

FACTORY_MARKERS = ("model_factory", "model_factories")
TEMPFILE_MARKERS = ("tempfile", "tmpfile")


def pytest_configure(config):
    for name in FACTORY_MARKERS:
        config.addinivalue_line("markers", f"{name}: attach build/create to the test instance")
    for name in TEMPFILE_MARKERS:
        config.addinivalue_line("markers", f"{name}: attach using_tempfile to the test instance")
    load_catalog(settings.catalog_module, default_factory)


def _has_marker(node, names) -> bool:
    return any(node.get_closest_marker(name) is not None for name in names)


@pytest.fixture(autouse=True)
def _fixtureforge_helpers(request):
    """Attach helpers to class-based tests carrying a matching marker."""
    instance = request.instance
    if instance is None:
        return
    if _has_marker(request.node, FACTORY_MARKERS):
        instance.build = default_factory.build
        instance.create = default_factory.create
    if _has_marker(request.node, TEMPFILE_MARKERS):
        instance.using_tempfile = _using_tempfile


@pytest.fixture
def model_factory():
    return default_factory


@pytest.fixture
def isolated_model_factory():
    """A factory of its own, empty at the start of each test."""
    factory = ModelFactory()
    yield factory
    factory.reset()


@pytest.fixture
def build(model_factory):
    return model_factory.build


@pytest.fixture
def create(model_factory):
    return model_factory.create


@pytest.fixture
def using_tempfile():
    return _using_tempfile
