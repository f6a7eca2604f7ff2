from __future__ import annotations

from typing import Any, Sequence

from fast_entity.contracts.validator_rule import ValidatorRule
from fast_entity.exceptions.common_exceptions import ValidationRuleException


class RequiredValidatorRule(ValidatorRule):
    """Rejects `None` for required attributes. Drafts may leave required attributes empty."""

    name = "required"

    def __init__(self, *, required: bool, is_draft: bool = False) -> None:
        self.required = required
        self.is_draft = is_draft

    async def validate(self, *, value: Any, data: dict, loc: Sequence[str]) -> Any:
        if not self.required or self.is_draft:
            return value

        if value is None:
            display = ".".join(loc)
            raise ValidationRuleException(f"[Required] Field `{display}` is required.", loc=tuple(loc), error_type="required")

        return value
