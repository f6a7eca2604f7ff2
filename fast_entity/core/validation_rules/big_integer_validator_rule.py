from __future__ import annotations

import re
from typing import Any, Optional, Sequence, Union

from fast_entity.contracts.validator_rule import ValidatorRule
from fast_entity.exceptions.common_exceptions import ValidationRuleException

BIG_INTEGER_REGEX = re.compile(r"^-?\d*$")


class BigIntegerValidatorRule(ValidatorRule):
    """
    Big integers travel as digit strings (or ints) and are returned as given.

    Bounds are compared after int conversion.
    """

    name = "biginteger"

    def __init__(self, *, min: Optional[Union[int, str]] = None, max: Optional[Union[int, str]] = None) -> None:
        self.min = int(min) if min is not None else None
        self.max = int(max) if max is not None else None

    async def validate(self, *, value: Any, data: dict, loc: Sequence[str]) -> Any:
        if value is None:
            return value

        display = ".".join(loc)

        if isinstance(value, bool) or not isinstance(value, (int, str)) or not BIG_INTEGER_REGEX.match(str(value)):
            raise ValidationRuleException(f"[Biginteger] Field `{display}` must be an integer.", loc=tuple(loc), error_type="biginteger_type")

        if value == "" or value == "-":
            return value

        number = int(value)

        if self.min is not None and number < self.min:
            raise ValidationRuleException(
                f"[Biginteger] Field `{display}` must be greater than or equal to {self.min}.",
                loc=tuple(loc),
                error_type="greater_than_equal",
            )

        if self.max is not None and number > self.max:
            raise ValidationRuleException(
                f"[Biginteger] Field `{display}` must be less than or equal to {self.max}.",
                loc=tuple(loc),
                error_type="less_than_equal",
            )

        return value
