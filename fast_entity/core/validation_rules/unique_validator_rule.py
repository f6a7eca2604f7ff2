from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Sequence, TYPE_CHECKING

from fast_entity.contracts.validator_rule import ValidatorRule
from fast_entity.exceptions.common_exceptions import UniquenessViolationException
from fast_entity.utils.coercion import to_string, values_equal

if TYPE_CHECKING:
    from fast_entity.contracts.lookup import Lookup
    from fast_entity.core.content_type import Attribute
    from fast_entity.core.validation_context import ValidationContext


def build_unique_query(attribute_name: str, value: Any, entity: Optional[dict[str, Any]] = None) -> dict[str, Any]:
    """
    Build the lookup filter for a uniqueness check.

    Without an entity id:  {"select": ["id"], "where": {attr: value}}
    With an entity id:     {"select": ["id"], "where": {"AND": [{attr: value}, {"NOT": {"id": entity_id}}]}}
    """
    where: dict[str, Any] = {attribute_name: value}

    entity_id = entity.get("id") if entity else None
    if entity_id is not None:
        where = {"AND": [where, {"NOT": {"id": entity_id}}]}

    return {"select": ["id"], "where": where}


class UniqueValidatorRule(ValidatorRule):
    """
    Fails when another record already holds the value.

    One implementation serves every scalar kind; kinds differ only by
    `always_unique` (uid) and by `coerce`, which decides whether the submitted
    value equals the one already stored on the entity being updated.

    The lookup is skipped (value passes through) when:
      - the attribute is neither flagged `unique` nor `always_unique`
      - the write is a draft
      - the value is None
      - the entity already stores an equal value
    """

    name = "unique"

    def __init__(
        self,
        attribute: 'Attribute',
        context: 'ValidationContext',
        lookup: 'Lookup',
        *,
        always_unique: bool = False,
        coerce: Callable[[Any], Any] = to_string,
    ) -> None:
        self.attribute = attribute
        self.context = context
        self.lookup = lookup
        self.always_unique = always_unique
        self.coerce = coerce

    def is_required(self) -> bool:
        return self.always_unique or self.attribute.unique

    def is_unchanged(self, value: Any) -> bool:
        return self.context.has_stored_value() and values_equal(self.context.stored_value, value, self.coerce)

    async def validate(self, *, value: Any, data: dict, loc: Sequence[str]) -> Any:
        if not self.is_required() or self.context.is_draft:
            return value

        if value is None:
            return value

        name = self.context.attribute_name
        if self.is_unchanged(value):
            logging.debug(f"[UNIQUE] `{self.context.model.uid}.{name}` unchanged, skipping lookup")
            return value

        query = build_unique_query(name, value, self.context.entity)
        record = await self.lookup.find_one(query)

        if record is not None:
            logging.debug(f"[UNIQUE] `{self.context.model.uid}.{name}` collides with record {record.get('id')}")
            raise UniquenessViolationException(name, value, loc=tuple(loc) if loc else None)

        return value
