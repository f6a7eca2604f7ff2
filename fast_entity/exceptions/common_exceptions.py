from typing import Any, Optional


class ValidationRuleException(ValueError):
    """
    Distinct validation error raised by ValidatorRules.

    This is intentionally different from Pydantic's ValidationError so callers
    can distinguish between descriptor-shape errors (Pydantic, raised while
    loading a content type) and rule errors raised while validating a write
    (format checks, required checks, DB uniqueness lookups).
    """

    def __init__(
        self,
        message: str,
        *,
        loc: tuple[str, ...] | None = None,
        error_type: str = "value_error",
        errors: list[dict] | None = None,
        rule: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.loc = loc or tuple()
        self.error_type = error_type
        self.errors = errors
        self.rule = rule

    def to_error_dicts(self) -> list[dict[str, Any]]:
        if self.errors:
            return list(self.errors)
        return [{
            "loc": tuple(self.loc),
            "msg": self.message,
            "type": self.error_type,
        }]


class UniquenessViolationException(ValidationRuleException):
    def __init__(self, attribute: str, value: Any, *, loc: tuple[str, ...] | None = None):
        super().__init__(
            "This attribute must be unique",
            loc=loc or (attribute,),
            error_type="unique",
            rule="unique",
        )
        self.attribute = attribute
        self.value = value


class UnsupportedAttributeTypeException(TypeError):
    def __init__(self, attribute_type: str):
        super().__init__(f"[UNSUPPORTED TYPE] No validator registered for attribute type `{attribute_type}`")
        self.attribute_type = attribute_type


class DatabaseNotInitializedException(RuntimeError):
    def __init__(self):
        super().__init__("Database is not initialized.")


class EnvMissingException(ValueError):
    def __init__(self, env_name: str):
        super().__init__(f"[ENV MISSING] Missing required environment variable: `{env_name}`")
