"""Shared test configuration and fixtures for FixtureForge test suite."""

import itertools

import pytest

from fixtureforge.pipeline.resolve_class import ClassResolver
from fixtureforge.templates.registry import TemplateRegistry

pytest_plugins = ["fixtureforge.pytest_plugin", "pytester"]


@pytest.fixture
def registry():
    return TemplateRegistry()


@pytest.fixture
def resolver():
    return ClassResolver()


@pytest.fixture
def serial():
    """Zero-argument counter yielding 1, 2, 3, ... on successive calls."""
    counter = itertools.count(1)
    return lambda: next(counter)
