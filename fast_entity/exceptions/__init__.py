"""Custom exceptions for fast-entity."""

from .common_exceptions import (
    ValidationRuleException,
    UniquenessViolationException,
    UnsupportedAttributeTypeException,
    DatabaseNotInitializedException,
    EnvMissingException,
)


__all__ = [
    "ValidationRuleException",
    "UniquenessViolationException",
    "UnsupportedAttributeTypeException",
    "DatabaseNotInitializedException",
    "EnvMissingException",
]
