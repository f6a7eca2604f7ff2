from __future__ import annotations

import re
from typing import Any, Optional, Sequence

from fast_entity.contracts.validator_rule import ValidatorRule
from fast_entity.exceptions.common_exceptions import ValidationRuleException


class StringValidatorRule(ValidatorRule):
    """Type, length and pattern checks for text-like attributes (string, text, email, uid)."""

    name = "string"

    def __init__(
        self,
        *,
        min_length: Optional[int] = None,
        max_length: Optional[int] = None,
        regex: Optional[str] = None,
        required: bool = False,
        name: Optional[str] = None,
    ) -> None:
        self.min_length = min_length
        self.max_length = max_length
        self.pattern = re.compile(regex) if regex else None
        self.required = required
        if name:
            self.name = name

    async def validate(self, *, value: Any, data: dict, loc: Sequence[str]) -> Any:
        if value is None:
            return value

        display = ".".join(loc)
        tag = self.name.capitalize()

        if not isinstance(value, str):
            raise ValidationRuleException(f"[{tag}] Field `{display}` must be a string.", loc=tuple(loc), error_type="string_type")

        if self.min_length is not None and len(value) < self.min_length:
            raise ValidationRuleException(
                f"[{tag}] Field `{display}` must be at least {self.min_length} characters.",
                loc=tuple(loc),
                error_type="string_too_short",
            )

        if self.max_length is not None and len(value) > self.max_length:
            raise ValidationRuleException(
                f"[{tag}] Field `{display}` must be at most {self.max_length} characters.",
                loc=tuple(loc),
                error_type="string_too_long",
            )

        # Empty strings only have to match when the attribute is required
        if self.pattern is not None and (value != "" or self.required):
            if not self.pattern.search(value):
                raise ValidationRuleException(
                    f"[{tag}] Field `{display}` does not match the required pattern.",
                    loc=tuple(loc),
                    error_type="string_pattern_mismatch",
                )

        return value
