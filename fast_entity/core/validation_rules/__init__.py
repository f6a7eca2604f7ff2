from .big_integer_validator_rule import BigIntegerValidatorRule
from .boolean_validator_rule import BooleanValidatorRule
from .email_validator_rule import EmailValidatorRule
from .enumeration_validator_rule import EnumerationValidatorRule
from .number_validator_rule import NumberValidatorRule
from .required_validator_rule import RequiredValidatorRule
from .string_validator_rule import StringValidatorRule
from .unique_validator_rule import UniqueValidatorRule, build_unique_query

__all__ = [
    "BigIntegerValidatorRule",
    "BooleanValidatorRule",
    "EmailValidatorRule",
    "EnumerationValidatorRule",
    "NumberValidatorRule",
    "RequiredValidatorRule",
    "StringValidatorRule",
    "UniqueValidatorRule",
    "build_unique_query",
]
