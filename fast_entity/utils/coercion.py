from decimal import Decimal
from typing import Annotated, Any, Callable

from pydantic import Field, TypeAdapter

_int_adapter = TypeAdapter(int)
_float_adapter = TypeAdapter(Annotated[float, Field(allow_inf_nan=False)])
_bool_adapter = TypeAdapter(bool)


def to_string(value: Any) -> str:
    return value if isinstance(value, str) else str(value)


def to_integer(value: Any) -> int:
    """Lax int coercion: `3`, `"3"` and `3.0` become `3`; `"a"` and `2.5` raise."""
    return _int_adapter.validate_python(value)


def to_big_integer(value: Any) -> int:
    # Exact digits only: floats and "3.0" are rejected so values never pass through a float
    if isinstance(value, bool):
        raise TypeError("Booleans are not big integers")
    if isinstance(value, int):
        return value
    return int(to_string(value).strip())


def to_float(value: Any) -> float:
    return _float_adapter.validate_python(value)


def to_decimal(value: Any) -> Decimal:
    if isinstance(value, bool):
        raise TypeError("Booleans are not decimals")
    number = Decimal(to_string(value))
    if not number.is_finite():
        raise ValueError("Decimals must be finite")
    return number


def to_boolean(value: Any) -> bool:
    return _bool_adapter.validate_python(value)


def values_equal(left: Any, right: Any, coerce: Callable[[Any], Any]) -> bool:
    """
    Compare two values after coercing both to the attribute's declared type.

    `None` only equals `None`. A value that cannot be coerced never equals anything.
    """
    if left is None or right is None:
        return left is None and right is None
    try:
        return coerce(left) == coerce(right)
    except (ValueError, TypeError, ArithmeticError):
        return False
