"""
Per-type rule factories.

Each factory composes `format rule(s) -> required rule -> unique rule` for a single
attribute of a single write. The unique rule is the same `UniqueValidatorRule` for
every kind; only `uid` forces it on regardless of the `unique` flag.
"""
from __future__ import annotations

from decimal import Decimal
from typing import Any, Callable, Sequence, TYPE_CHECKING

from fast_entity.contracts.validator_rule import ValidatorRule
from fast_entity.core.rule_chain import RuleChain
from fast_entity.core.validation_rules import (
    BigIntegerValidatorRule,
    BooleanValidatorRule,
    EmailValidatorRule,
    EnumerationValidatorRule,
    NumberValidatorRule,
    RequiredValidatorRule,
    StringValidatorRule,
    UniqueValidatorRule,
)
from fast_entity.exceptions.common_exceptions import UnsupportedAttributeTypeException
from fast_entity.utils.coercion import (
    to_big_integer,
    to_boolean,
    to_decimal,
    to_float,
    to_integer,
    to_string,
)

if TYPE_CHECKING:
    from fast_entity.contracts.lookup import Lookup
    from fast_entity.core.content_type import (
        Attribute,
        BigIntegerAttribute,
        BooleanAttribute,
        DecimalAttribute,
        EmailAttribute,
        EnumerationAttribute,
        FloatAttribute,
        IntegerAttribute,
        StringAttribute,
        TextAttribute,
        UidAttribute,
    )
    from fast_entity.core.validation_context import ValidationContext

UID_REGEX = r"^[A-Za-z0-9\-_.~]*$"

ValidatorFactory = Callable[..., RuleChain]


def build_chain(
    attribute: 'Attribute',
    context: 'ValidationContext',
    format_rules: Sequence[ValidatorRule],
    *,
    lookup: 'Lookup',
    always_unique: bool = False,
    coerce: Callable[[Any], Any] = to_string,
) -> RuleChain:
    chain = RuleChain(context.attribute_name, format_rules)
    chain.add(RequiredValidatorRule(required=attribute.required, is_draft=context.is_draft))

    unique_rule = UniqueValidatorRule(attribute, context, lookup, always_unique=always_unique, coerce=coerce)
    if unique_rule.is_required():
        chain.add(unique_rule)

    return chain


def string(attribute: 'StringAttribute', context: 'ValidationContext', *, lookup: 'Lookup') -> RuleChain:
    format_rule = StringValidatorRule(
        min_length=attribute.min_length,
        max_length=attribute.max_length,
        regex=attribute.regex,
        required=attribute.required,
    )
    return build_chain(attribute, context, [format_rule], lookup=lookup)


def text(attribute: 'TextAttribute', context: 'ValidationContext', *, lookup: 'Lookup') -> RuleChain:
    format_rule = StringValidatorRule(
        min_length=attribute.min_length,
        max_length=attribute.max_length,
        regex=attribute.regex,
        required=attribute.required,
        name="text",
    )
    return build_chain(attribute, context, [format_rule], lookup=lookup)


def email(attribute: 'EmailAttribute', context: 'ValidationContext', *, lookup: 'Lookup') -> RuleChain:
    format_rules = [
        StringValidatorRule(min_length=attribute.min_length, max_length=attribute.max_length, name="email"),
        EmailValidatorRule(),
    ]
    return build_chain(attribute, context, format_rules, lookup=lookup)


def enumeration(attribute: 'EnumerationAttribute', context: 'ValidationContext', *, lookup: 'Lookup') -> RuleChain:
    return build_chain(attribute, context, [EnumerationValidatorRule(attribute.enum)], lookup=lookup)


def integer(attribute: 'IntegerAttribute', context: 'ValidationContext', *, lookup: 'Lookup') -> RuleChain:
    format_rule = NumberValidatorRule(int, min=attribute.min, max=attribute.max, name="integer")
    return build_chain(attribute, context, [format_rule], lookup=lookup, coerce=to_integer)


def biginteger(attribute: 'BigIntegerAttribute', context: 'ValidationContext', *, lookup: 'Lookup') -> RuleChain:
    format_rule = BigIntegerValidatorRule(min=attribute.min, max=attribute.max)
    return build_chain(attribute, context, [format_rule], lookup=lookup, coerce=to_big_integer)


def float_(attribute: 'FloatAttribute', context: 'ValidationContext', *, lookup: 'Lookup') -> RuleChain:
    format_rule = NumberValidatorRule(float, min=attribute.min, max=attribute.max, name="float")
    return build_chain(attribute, context, [format_rule], lookup=lookup, coerce=to_float)


def decimal(attribute: 'DecimalAttribute', context: 'ValidationContext', *, lookup: 'Lookup') -> RuleChain:
    format_rule = NumberValidatorRule(Decimal, min=attribute.min, max=attribute.max, name="decimal")
    return build_chain(attribute, context, [format_rule], lookup=lookup, coerce=to_decimal)


def uid(attribute: 'UidAttribute', context: 'ValidationContext', *, lookup: 'Lookup') -> RuleChain:
    format_rule = StringValidatorRule(
        min_length=attribute.min_length,
        max_length=attribute.max_length,
        regex=attribute.regex or UID_REGEX,
        required=attribute.required,
        name="uid",
    )
    return build_chain(attribute, context, [format_rule], lookup=lookup, always_unique=True)


def boolean(attribute: 'BooleanAttribute', context: 'ValidationContext', *, lookup: 'Lookup') -> RuleChain:
    return build_chain(attribute, context, [BooleanValidatorRule()], lookup=lookup, coerce=to_boolean)


VALIDATORS: dict[str, ValidatorFactory] = {
    "string": string,
    "text": text,
    "email": email,
    "enumeration": enumeration,
    "integer": integer,
    "biginteger": biginteger,
    "float": float_,
    "decimal": decimal,
    "uid": uid,
    "boolean": boolean,
}


def get_validator(attribute_type: str) -> ValidatorFactory:
    try:
        return VALIDATORS[attribute_type]
    except KeyError:
        raise UnsupportedAttributeTypeException(attribute_type) from None
