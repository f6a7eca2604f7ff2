from __future__ import annotations

from typing import Any, Sequence

from pydantic import TypeAdapter, ValidationError

from fast_entity.contracts.validator_rule import ValidatorRule
from fast_entity.exceptions.common_exceptions import ValidationRuleException

_bool_adapter = TypeAdapter(bool)


class BooleanValidatorRule(ValidatorRule):
    name = "boolean"

    async def validate(self, *, value: Any, data: dict, loc: Sequence[str]) -> Any:
        if value is None:
            return value

        try:
            return _bool_adapter.validate_python(value)
        except ValidationError:
            display = ".".join(loc)
            raise ValidationRuleException(f"[Boolean] Field `{display}` must be a boolean.", loc=tuple(loc), error_type="bool_type")
