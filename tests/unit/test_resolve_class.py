"""Unit tests for constructor resolution."""

import pytest
from fixtureforge.errors import ClassResolutionError


class Widget:
    def __init__(self, **attrs):
        self.attrs = attrs


def make_widget(**attrs):
    return Widget(**attrs)


class TestRegister:
    def test_registers_under_class_name(self, resolver):
        resolver.register(Widget)
        assert "Widget" in resolver
        assert resolver.resolve("Widget") is Widget

    def test_registers_under_explicit_name(self, resolver):
        resolver.register(make_widget, name="Gadget")
        assert resolver.resolve("Gadget") is make_widget

    def test_works_as_decorator(self, resolver):
        @resolver.register
        class Decorated:
            pass

        assert resolver.resolve("Decorated") is Decorated

    def test_rejects_non_callable(self, resolver):
        with pytest.raises(TypeError):
            resolver.register("Widget")


class TestResolve:
    def test_callable_returned_directly(self, resolver):
        assert resolver.resolve(Widget) is Widget
        assert resolver.resolve(make_widget) is make_widget

    def test_resolution_deferred_until_lookup(self, resolver):
        with pytest.raises(ClassResolutionError):
            resolver.resolve("Widget")
        resolver.register(Widget)
        assert resolver.resolve("Widget") is Widget

    def test_unknown_name(self, resolver):
        with pytest.raises(ClassResolutionError) as exc:
            resolver.resolve("Ghost")
        assert exc.value.name == "Ghost"

    def test_clear(self, resolver):
        resolver.register(Widget)
        resolver.clear()
        assert "Widget" not in resolver

    def test_unregister(self, resolver):
        resolver.register(Widget)
        resolver.unregister("Widget")
        resolver.unregister("Unknown")
        with pytest.raises(ClassResolutionError):
            resolver.resolve("Widget")
