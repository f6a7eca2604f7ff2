from __future__ import annotations

from typing import Any, Sequence

from fast_entity.contracts.validator_rule import ValidatorRule
from fast_entity.exceptions.common_exceptions import ValidationRuleException


class EnumerationValidatorRule(ValidatorRule):
    name = "enumeration"

    def __init__(self, values: Sequence[str]) -> None:
        self.values = list(values)

    async def validate(self, *, value: Any, data: dict, loc: Sequence[str]) -> Any:
        if value is None:
            return value

        if value not in self.values:
            display = ".".join(loc)
            allowed = ", ".join(self.values)
            raise ValidationRuleException(
                f"[Enumeration] Field `{display}` must be one of: {allowed}.",
                loc=tuple(loc),
                error_type="enumeration",
            )

        return value
