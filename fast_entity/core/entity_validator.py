from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Optional, TYPE_CHECKING

from fast_entity.core.validation_context import ValidationContext
from fast_entity.core.validators import get_validator
from fast_entity.database.mongo_lookup import MongoLookup
from fast_entity.exceptions.common_exceptions import ValidationRuleException

if TYPE_CHECKING:
    from fast_entity.contracts.lookup import Lookup
    from fast_entity.core.content_type import ContentTypeSchema
    from fast_entity.core.rule_chain import RuleChain

LookupResolver = Callable[['ContentTypeSchema'], 'Lookup']


class EntityValidator:
    """
    Validates a whole entity write against its content type.

    One `RuleChain` is built per attribute and all chains run concurrently; each
    attribute is checked in isolation, so N unique attributes issue N lookups.
    Rule failures from every attribute are collected into a single
    `ValidationRuleException`; anything else (e.g. a failing lookup) is re-raised.
    """

    def __init__(self, lookup_resolver: Optional[LookupResolver] = None) -> None:
        self.lookup_resolver = lookup_resolver or MongoLookup.for_model

    def build_chains(
        self,
        model: 'ContentTypeSchema',
        data: dict[str, Any],
        *,
        is_draft: bool = False,
        entity: Optional[dict[str, Any]] = None,
        partial: bool = False,
    ) -> dict[str, 'RuleChain']:
        lookup = self.lookup_resolver(model)

        chains: dict[str, 'RuleChain'] = {}
        for name, attribute in model.attributes.items():
            if partial and name not in data:
                continue

            context = ValidationContext(
                is_draft=is_draft,
                model=model,
                attribute_name=name,
                entity=entity,
                data=data.get(name),
            )
            factory = get_validator(attribute.type)
            chains[name] = factory(attribute, context, lookup=lookup)

        return chains

    async def validate(
        self,
        model: 'ContentTypeSchema',
        data: dict[str, Any],
        *,
        is_draft: bool = False,
        entity: Optional[dict[str, Any]] = None,
        partial: bool = False,
    ) -> dict[str, Any]:
        # Drafts only exist for content types with draft & publish enabled
        is_draft = is_draft and model.draft_and_publish

        unknown = [key for key in data if key not in model.attributes]
        if unknown:
            logging.debug(f"[ENTITY VALIDATOR] Dropping unknown keys for `{model.uid}`: {unknown}")

        chains = self.build_chains(model, data, is_draft=is_draft, entity=entity, partial=partial)
        names = list(chains.keys())
        results = await asyncio.gather(
            *(chains[name].validate(data.get(name), data) for name in names),
            return_exceptions=True,
        )

        validated: dict[str, Any] = {}
        errors: list[dict[str, Any]] = []
        for name, result in zip(names, results):
            if isinstance(result, ValidationRuleException):
                errors.extend(result.to_error_dicts())
            elif isinstance(result, BaseException):
                raise result
            elif name in data:
                validated[name] = result

        if errors:
            logging.debug(f"[ENTITY VALIDATOR] `{model.uid}` failed with {len(errors)} error(s)")
            raise ValidationRuleException(
                "entity validation failed",
                loc=tuple(),
                error_type="entity_validation",
                errors=errors,
            )

        return validated

    async def validate_entity_creation(
        self,
        model: 'ContentTypeSchema',
        data: dict[str, Any],
        *,
        is_draft: bool = False,
    ) -> dict[str, Any]:
        return await self.validate(model, data, is_draft=is_draft)

    async def validate_entity_update(
        self,
        model: 'ContentTypeSchema',
        data: dict[str, Any],
        entity: Optional[dict[str, Any]],
        *,
        is_draft: bool = False,
    ) -> dict[str, Any]:
        return await self.validate(model, data, is_draft=is_draft, entity=entity, partial=True)
