from decimal import Decimal

import pytest

from fast_entity.core import validators
from fast_entity.core.content_type import (
    BigIntegerAttribute,
    DecimalAttribute,
    FloatAttribute,
    IntegerAttribute,
    StringAttribute,
    UidAttribute,
)
from fast_entity.core.rule_chain import validate_rule_chain
from fast_entity.core.validation_context import ValidationContext
from fast_entity.exceptions import UniquenessViolationException, ValidationRuleException


FAKE_MODEL_ATTRIBUTES = {
    "attrStringUnique": {"type": "string", "unique": True},
    "attrIntegerUnique": {"type": "integer", "unique": True},
    "attrBigIntegerUnique": {"type": "biginteger", "unique": True},
    "attrFloatUnique": {"type": "float", "unique": True},
    "attrUidUnique": {"type": "uid"},
}

# (factory, attribute class, attribute name, value)
OPT_IN_KINDS = [
    pytest.param(validators.string, StringAttribute, "attrStringUnique", "unique-test-data", id="string"),
    pytest.param(validators.integer, IntegerAttribute, "attrIntegerUnique", 2, id="integer"),
    pytest.param(validators.biginteger, BigIntegerAttribute, "attrBigIntegerUnique", "123456789012345678901234567890", id="biginteger"),
    pytest.param(validators.float_, FloatAttribute, "attrFloatUnique", 4.5, id="float"),
]

ALL_KINDS = OPT_IN_KINDS + [
    pytest.param(validators.uid, UidAttribute, "attrUidUnique", "unique-test-data", id="uid"),
]


@pytest.fixture
def fake_model(make_model):
    return make_model(FAKE_MODEL_ATTRIBUTES)


def build_validator(factory, attribute, model, attribute_name, value, lookup, *, entity=None, is_draft=False):
    context = ValidationContext(
        is_draft=is_draft,
        model=model,
        attribute_name=attribute_name,
        entity=entity,
        data=value,
    )
    return validate_rule_chain(factory(attribute, context, lookup=lookup))


@pytest.mark.asyncio
@pytest.mark.parametrize("factory, attribute_cls, name, value", OPT_IN_KINDS)
async def test_does_not_check_uniqueness_when_attribute_is_not_unique(factory, attribute_cls, name, value, fake_model, lookup):
    validator = build_validator(factory, attribute_cls(), fake_model, name, value, lookup)

    await validator(value)

    assert lookup.calls == []


@pytest.mark.asyncio
@pytest.mark.parametrize("factory, attribute_cls, name, value", OPT_IN_KINDS)
async def test_skips_lookup_for_non_unique_attribute_even_with_existing_entity(factory, attribute_cls, name, value, fake_model, lookup):
    lookup.result = {"id": 2}
    validator = build_validator(factory, attribute_cls(), fake_model, name, value, lookup, entity={"id": 1})

    assert await validator(value) == value
    assert lookup.calls == []


@pytest.mark.asyncio
@pytest.mark.parametrize("factory, attribute_cls, name, value", ALL_KINDS)
async def test_passes_when_no_other_record_exists(factory, attribute_cls, name, value, fake_model, lookup):
    validator = build_validator(factory, attribute_cls(unique=True), fake_model, name, value, lookup)

    assert await validator(value) == value


@pytest.mark.asyncio
@pytest.mark.parametrize("factory, attribute_cls, name, value", ALL_KINDS)
async def test_fails_when_database_contains_same_value(factory, attribute_cls, name, value, fake_model, lookup):
    lookup.result = {name: value}
    validator = build_validator(factory, attribute_cls(unique=True), fake_model, name, value, lookup)

    with pytest.raises(UniquenessViolationException) as exc_info:
        await validator(value)

    assert isinstance(exc_info.value, ValidationRuleException)
    assert exc_info.value.attribute == name
    assert exc_info.value.value == value
    assert exc_info.value.rule == "unique"
    assert exc_info.value.loc == (name,)


@pytest.mark.asyncio
@pytest.mark.parametrize("factory, attribute_cls, name, value", ALL_KINDS)
async def test_passes_when_value_has_not_changed(factory, attribute_cls, name, value, fake_model, lookup):
    lookup.result = {name: value}
    validator = build_validator(
        factory, attribute_cls(unique=True), fake_model, name, value, lookup,
        entity={"id": 1, name: value},
    )

    assert await validator(value) == value
    assert lookup.calls == []


@pytest.mark.asyncio
@pytest.mark.parametrize("factory, attribute_cls, name, value", ALL_KINDS)
async def test_queries_by_attribute_value(factory, attribute_cls, name, value, fake_model, lookup):
    validator = build_validator(factory, attribute_cls(unique=True), fake_model, name, value, lookup)

    await validator(value)

    assert lookup.calls == [{"select": ["id"], "where": {name: value}}]


@pytest.mark.asyncio
@pytest.mark.parametrize("factory, attribute_cls, name, value", ALL_KINDS)
async def test_excludes_current_entity_from_query(factory, attribute_cls, name, value, fake_model, lookup):
    validator = build_validator(factory, attribute_cls(unique=True), fake_model, name, value, lookup, entity={"id": 1})

    await validator(value)

    assert lookup.calls == [{
        "select": ["id"],
        "where": {"AND": [{name: value}, {"NOT": {"id": 1}}]},
    }]


@pytest.mark.asyncio
@pytest.mark.parametrize("factory, attribute_cls, name, value", ALL_KINDS)
async def test_drafts_never_check_uniqueness(factory, attribute_cls, name, value, fake_model, lookup):
    lookup.result = {"id": 2}
    validator = build_validator(factory, attribute_cls(unique=True), fake_model, name, value, lookup, is_draft=True)

    assert await validator(value) == value
    assert lookup.calls == []


@pytest.mark.asyncio
@pytest.mark.parametrize("factory, attribute_cls, name, value", ALL_KINDS)
async def test_null_values_never_check_uniqueness(factory, attribute_cls, name, value, fake_model, lookup):
    lookup.result = {"id": 2}
    validator = build_validator(factory, attribute_cls(unique=True), fake_model, name, None, lookup)

    assert await validator(None) is None
    assert lookup.calls == []


@pytest.mark.asyncio
@pytest.mark.parametrize("factory, attribute_cls, name, value", ALL_KINDS)
async def test_lookup_errors_propagate(factory, attribute_cls, name, value, fake_model, lookup):
    lookup.error = ConnectionError("database unavailable")
    validator = build_validator(factory, attribute_cls(unique=True), fake_model, name, value, lookup)

    with pytest.raises(ConnectionError):
        await validator(value)


# Scenarios


@pytest.mark.asyncio
async def test_string_create_scenario(fake_model, lookup):
    validator = build_validator(
        validators.string, StringAttribute(unique=True), fake_model, "attrStringUnique", "test-data", lookup,
    )

    assert await validator("test-data") == "test-data"
    assert lookup.calls == [{"select": ["id"], "where": {"attrStringUnique": "test-data"}}]


@pytest.mark.asyncio
async def test_string_update_scenario(fake_model, lookup):
    validator = build_validator(
        validators.string, StringAttribute(unique=True), fake_model, "attrStringUnique", "test-data", lookup,
        entity={"id": 1},
    )

    assert await validator("test-data") == "test-data"
    assert lookup.calls == [{
        "select": ["id"],
        "where": {"AND": [{"attrStringUnique": "test-data"}, {"NOT": {"id": 1}}]},
    }]


@pytest.mark.asyncio
async def test_integer_collision_scenario(fake_model, lookup):
    lookup.result = {"attrIntegerUnique": 2}
    validator = build_validator(
        validators.integer, IntegerAttribute(unique=True), fake_model, "attrIntegerUnique", 2, lookup,
    )

    with pytest.raises(UniquenessViolationException):
        await validator(2)


@pytest.mark.asyncio
async def test_integer_unchanged_without_entity_id(fake_model, lookup):
    lookup.result = {"attrIntegerUnique": 3}
    validator = build_validator(
        validators.integer, IntegerAttribute(unique=True), fake_model, "attrIntegerUnique", 3, lookup,
        entity={"attrIntegerUnique": 3},
    )

    assert await validator(3) == 3
    assert lookup.calls == []


@pytest.mark.asyncio
async def test_uid_is_always_unique(fake_model, lookup):
    validator = build_validator(validators.uid, UidAttribute(), fake_model, "attrUidUnique", "x", lookup)

    assert await validator("x") == "x"
    assert lookup.calls == [{"select": ["id"], "where": {"attrUidUnique": "x"}}]


# Edge cases


@pytest.mark.asyncio
async def test_changed_value_on_entity_without_id_uses_plain_filter(fake_model, lookup):
    validator = build_validator(
        validators.string, StringAttribute(unique=True), fake_model, "attrStringUnique", "new", lookup,
        entity={"attrStringUnique": "old"},
    )

    await validator("new")

    assert lookup.calls == [{"select": ["id"], "where": {"attrStringUnique": "new"}}]


@pytest.mark.asyncio
@pytest.mark.parametrize("factory, attribute_cls, name, stored, value", [
    pytest.param(validators.integer, IntegerAttribute, "attrIntegerUnique", "3", 3, id="integer-string-stored"),
    pytest.param(validators.integer, IntegerAttribute, "attrIntegerUnique", 3, "3", id="integer-string-submitted"),
    pytest.param(validators.biginteger, BigIntegerAttribute, "attrBigIntegerUnique", 123, "123", id="biginteger"),
    pytest.param(validators.float_, FloatAttribute, "attrFloatUnique", 1, 1.0, id="float"),
    pytest.param(validators.uid, UidAttribute, "attrUidUnique", "abc", "abc", id="uid"),
])
async def test_unchanged_value_is_compared_after_coercion(factory, attribute_cls, name, stored, value, fake_model, lookup):
    lookup.result = {"id": 2}
    validator = build_validator(
        factory, attribute_cls(unique=True), fake_model, name, value, lookup,
        entity={"id": 1, name: stored},
    )

    await validator(value)

    assert lookup.calls == []


@pytest.mark.asyncio
async def test_uncoercible_stored_value_counts_as_changed(fake_model, lookup):
    validator = build_validator(
        validators.integer, IntegerAttribute(unique=True), fake_model, "attrIntegerUnique", 3, lookup,
        entity={"id": 1, "attrIntegerUnique": "three"},
    )

    await validator(3)

    assert len(lookup.calls) == 1


@pytest.mark.asyncio
async def test_stored_null_is_not_equal_to_string_none(fake_model, lookup):
    validator = build_validator(
        validators.string, StringAttribute(unique=True), fake_model, "attrStringUnique", "None", lookup,
        entity={"id": 1, "attrStringUnique": None},
    )

    await validator("None")

    assert len(lookup.calls) == 1


@pytest.mark.asyncio
async def test_format_failure_short_circuits_before_lookup(fake_model, lookup):
    validator = build_validator(validators.uid, UidAttribute(), fake_model, "attrUidUnique", "not valid!", lookup)

    with pytest.raises(ValidationRuleException) as exc_info:
        await validator("not valid!")

    assert exc_info.value.rule == "uid"
    assert lookup.calls == []


def test_unique_rule_is_only_attached_when_applicable(fake_model, lookup):
    context = ValidationContext(is_draft=False, model=fake_model, attribute_name="attrStringUnique")

    plain = validators.string(StringAttribute(), context, lookup=lookup)
    unique = validators.string(StringAttribute(unique=True), context, lookup=lookup)
    uid = validators.uid(UidAttribute(), context, lookup=lookup)

    assert [rule.name for rule in plain] == ["string", "required"]
    assert [rule.name for rule in unique] == ["string", "required", "unique"]
    assert [rule.name for rule in uid] == ["uid", "required", "unique"]


@pytest.mark.asyncio
async def test_decimal_keeps_precision_in_query(fake_model, lookup):
    validator = build_validator(
        validators.decimal, DecimalAttribute(unique=True), fake_model, "attrDecimalUnique", "1234567890.123456789", lookup,
    )

    assert await validator("1234567890.123456789") == Decimal("1234567890.123456789")
    assert lookup.calls == [{"select": ["id"], "where": {"attrDecimalUnique": Decimal("1234567890.123456789")}}]


@pytest.mark.asyncio
async def test_decimal_unchanged_value_is_compared_exactly(fake_model, lookup):
    validator = build_validator(
        validators.decimal, DecimalAttribute(unique=True), fake_model, "attrDecimalUnique", "0.10", lookup,
        entity={"id": 1, "attrDecimalUnique": "0.1"},
    )

    await validator("0.10")

    assert lookup.calls == []


@pytest.mark.asyncio
async def test_nan_float_is_rejected_before_lookup(fake_model, lookup):
    validator = build_validator(
        validators.float_, FloatAttribute(unique=True), fake_model, "attrFloatUnique", "nan", lookup,
        entity={"id": 1, "attrFloatUnique": float("nan")},
    )

    with pytest.raises(ValidationRuleException) as exc_info:
        await validator("nan")

    assert exc_info.value.rule == "float"
    assert lookup.calls == []
