"""Unit tests for the structured error catalog."""

import pytest
from fixtureforge.errors import (
    FixtureForgeError, TemplateNotFound, ClassResolutionError, ConfigurationError,
)


class TestErrorCatalog:
    def test_base_error(self):
        e = FixtureForgeError(code="TEST", message="test msg", suggestion="try this")
        d = e.to_dict()
        assert d["error_code"] == "TEST"
        assert d["message"] == "test msg"
        assert d["suggestion"] == "try this"
        assert "detail" not in d

    def test_template_not_found(self):
        e = TemplateNotFound("User")
        assert e.code == "TEMPLATE_NOT_FOUND"
        assert e.name == "User"
        assert str(e) == "template not found: User"

    def test_template_not_found_is_key_error(self):
        with pytest.raises(KeyError):
            raise TemplateNotFound("User")

    def test_class_resolution_error(self):
        e = ClassResolutionError("Ghost")
        assert e.code == "CLASS_NOT_RESOLVED"
        assert e.name == "Ghost"
        assert "Ghost" in str(e)
        assert isinstance(e, LookupError)

    def test_configuration_error(self):
        e = ConfigurationError("FIXTUREFORGE_LOG_LEVEL", "LOUD", ["DEBUG", "INFO"])
        assert e.code == "CONFIG_INVALID"
        assert "LOUD" in e.message
        d = e.to_dict()
        assert d["detail"] == {"setting": "FIXTUREFORGE_LOG_LEVEL", "value": "LOUD"}
        assert "DEBUG, INFO" in d["suggestion"]

    def test_all_errors_are_exceptions(self):
        for cls in [TemplateNotFound, ClassResolutionError, ConfigurationError]:
            assert issubclass(cls, FixtureForgeError)
            assert issubclass(cls, Exception)
