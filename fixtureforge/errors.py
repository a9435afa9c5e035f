"""
FixtureForge — Structured error catalog.

Every error has a code, human message, and suggested fix.
Errors raised by target constructors are never wrapped; only failures
owned by the factory itself live here.
"""

from __future__ import annotations

from typing import Any


class FixtureForgeError(Exception):
    """Base error with structured code + suggestion."""

    def __init__(self, code: str, message: str, suggestion: str = "", detail: Any = None):
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.detail = detail
        super().__init__(message)

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "error_code": self.code,
            "message": self.message,
        }
        if self.suggestion:
            d["suggestion"] = self.suggestion
        if self.detail:
            d["detail"] = self.detail
        return d


class TemplateNotFound(FixtureForgeError, KeyError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(
            code="TEMPLATE_NOT_FOUND",
            message=f"template not found: {name}",
            suggestion="Register the template with factory(name, attrs) before building it.",
        )


class ClassResolutionError(FixtureForgeError, LookupError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(
            code="CLASS_NOT_RESOLVED",
            message=f"no constructor registered for: {name}",
            suggestion="Register the class with register_type(), or register the template with the class itself.",
        )


class ConfigurationError(FixtureForgeError):
    def __init__(self, setting: str, value: str, allowed: list[str] | None = None):
        super().__init__(
            code="CONFIG_INVALID",
            message=f"Invalid value for {setting}: {value!r}",
            suggestion=f"Allowed values: {', '.join(allowed)}." if allowed else "",
            detail={"setting": setting, "value": value},
        )
