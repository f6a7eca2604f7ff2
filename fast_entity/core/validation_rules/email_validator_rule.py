from __future__ import annotations

from typing import Any, Sequence

from pydantic import EmailStr, TypeAdapter, ValidationError

from fast_entity.contracts.validator_rule import ValidatorRule
from fast_entity.exceptions.common_exceptions import ValidationRuleException

_email_adapter = TypeAdapter(EmailStr)


class EmailValidatorRule(ValidatorRule):
    name = "email"

    async def validate(self, *, value: Any, data: dict, loc: Sequence[str]) -> Any:
        if value is None:
            return value

        try:
            _email_adapter.validate_python(value)
        except ValidationError:
            display = ".".join(loc)
            raise ValidationRuleException(f"[Email] Field `{display}` must be a valid email.", loc=tuple(loc), error_type="email")

        return value
