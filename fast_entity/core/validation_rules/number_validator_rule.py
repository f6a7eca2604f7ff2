from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Any, Optional, Sequence, Union

from pydantic import Field, TypeAdapter, ValidationError

from fast_entity.contracts.validator_rule import ValidatorRule
from fast_entity.exceptions.common_exceptions import ValidationRuleException


class NumberValidatorRule(ValidatorRule):
    """
    Coerces to `int`, `float` or `Decimal` (pydantic lax mode, so `"2"` becomes `2`) and checks bounds.

    Booleans are rejected even though pydantic would coerce them. Floats and
    decimals must be finite, `"nan"` and `"inf"` are rejected.
    """

    name = "number"

    def __init__(
        self,
        number_type: type = float,
        *,
        min: Optional[Union[float, Decimal]] = None,
        max: Optional[Union[float, Decimal]] = None,
        name: Optional[str] = None,
    ) -> None:
        self.number_type = number_type
        if number_type is int:
            self.adapter = TypeAdapter(int)
        else:
            self.adapter = TypeAdapter(Annotated[number_type, Field(allow_inf_nan=False)])
        self.min = min
        self.max = max
        if name:
            self.name = name

    async def validate(self, *, value: Any, data: dict, loc: Sequence[str]) -> Any:
        if value is None:
            return value

        display = ".".join(loc)
        tag = self.name.capitalize()
        kind = "an integer" if self.number_type is int else "a number"

        if isinstance(value, bool):
            raise ValidationRuleException(f"[{tag}] Field `{display}` must be {kind}.", loc=tuple(loc), error_type=f"{self.name}_type")

        try:
            number = self.adapter.validate_python(value)
        except ValidationError:
            raise ValidationRuleException(f"[{tag}] Field `{display}` must be {kind}.", loc=tuple(loc), error_type=f"{self.name}_type")

        if self.min is not None and number < self.min:
            raise ValidationRuleException(
                f"[{tag}] Field `{display}` must be greater than or equal to {self.min}.",
                loc=tuple(loc),
                error_type="greater_than_equal",
            )

        if self.max is not None and number > self.max:
            raise ValidationRuleException(
                f"[{tag}] Field `{display}` must be less than or equal to {self.max}.",
                loc=tuple(loc),
                error_type="less_than_equal",
            )

        return number
