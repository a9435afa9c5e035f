"""Unit tests for the attribute merge policy."""

import enum
import threading
import types
from dataclasses import dataclass

import pytest
from pydantic import BaseModel, ConfigDict

from fixtureforge.models import OPTIONAL, REQUIRED, Default, Generated, Template, coerce_attribute
from fixtureforge.pipeline.merge_attrs import merge_attrs, safe_transform


class Status(enum.Enum):
    ACTIVE = "active"


@dataclass(frozen=True)
class Point:
    x: int
    y: int


@dataclass
class Box:
    items: list


class Tag(BaseModel):
    model_config = ConfigDict(frozen=True)
    label: str


class Note(BaseModel):
    text: str


def make_template(**attrs):
    return Template(name="AnyClass", attributes={k: coerce_attribute(v) for k, v in attrs.items()})


class TestSafeTransform:
    def test_generated_called_each_time(self, serial):
        attr = Generated(serial)
        assert safe_transform(attr) == 1
        assert safe_transform(attr) == 2

    @pytest.mark.parametrize("value", [
        None, True, 42, 1.5, "text", b"bytes", (1, [2]), frozenset({1}),
        Status.ACTIVE, Point(1, 2), Tag(label="x"), int, len,
    ])
    def test_immutable_values_shared(self, value):
        assert safe_transform(Default(value)) is value

    @pytest.mark.parametrize("value", [[1, 2], {"a": 1}, {1, 2}, Box(items=[1]), Note(text="x")])
    def test_mutable_values_copied(self, value):
        result = safe_transform(Default(value))
        assert result == value
        assert result is not value

    def test_uncopyable_values_shared(self):
        lock = threading.Lock()
        rlock = threading.RLock()
        gen = (n for n in range(3))
        for value in [lock, rlock, gen, types, pytest]:
            assert safe_transform(Default(value)) is value

    def test_copy_is_shallow(self):
        inner = [1]
        outer = [inner]
        result = safe_transform(Default(outer))
        assert result is not outer
        assert result[0] is inner

    def test_required_passes_through(self):
        assert safe_transform(REQUIRED) is REQUIRED


class TestMergeAttrs:
    def test_template_only(self):
        template = make_template(greeting="hi", count=3)
        assert merge_attrs(template, {}) == {"greeting": "hi", "count": 3}

    def test_override_wins(self):
        template = make_template(greeting="hi")
        assert merge_attrs(template, {"greeting": "hello"}) == {"greeting": "hello"}

    def test_override_not_copied(self):
        shared = ["x"]
        template = make_template(tags=["a"])
        result = merge_attrs(template, {"tags": shared})
        assert result["tags"] is shared

    def test_override_suppresses_generator(self, serial):
        calls = []

        def gen():
            calls.append(1)
            return serial()

        template = make_template(serial=Generated(gen))
        result = merge_attrs(template, {"serial": 99})
        assert result == {"serial": 99}
        assert calls == []

    def test_override_callable_not_invoked(self, serial):
        template = make_template(serial=Generated(serial))
        result = merge_attrs(template, {"serial": serial})
        assert result["serial"] is serial

    def test_optional_dropped(self):
        template = make_template(name="Jane", nickname=OPTIONAL)
        assert merge_attrs(template, {}) == {"name": "Jane"}

    def test_optional_overridden(self):
        template = make_template(nickname=OPTIONAL)
        assert merge_attrs(template, {"nickname": "JJ"}) == {"nickname": "JJ"}

    def test_required_kept(self):
        template = make_template(email=REQUIRED)
        assert merge_attrs(template, {}) == {"email": REQUIRED}

    def test_unknown_override_keys_passed_through(self):
        template = make_template(name="Jane")
        assert merge_attrs(template, {"extra": 1}) == {"name": "Jane", "extra": 1}

    def test_mutable_default_independent_per_merge(self):
        template = make_template(tags=["a", "b"])
        first = merge_attrs(template, {})
        second = merge_attrs(template, {})
        first["tags"].append("c")
        assert second["tags"] == ["a", "b"]
        assert template["tags"].value == ["a", "b"]

    def test_generator_fresh_per_merge(self, serial):
        template = make_template(serial=Generated(serial))
        assert merge_attrs(template, {})["serial"] == 1
        assert merge_attrs(template, {})["serial"] == 2

    def test_example_scenario(self, serial):
        tags = ["a", "b"]
        template = make_template(greeting="hi", tags=tags, serial=Generated(serial))
        result = merge_attrs(template, {"greeting": "hello"})
        assert result == {"greeting": "hello", "tags": ["a", "b"], "serial": 1}
        assert result["tags"] is not tags
