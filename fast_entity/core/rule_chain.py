from __future__ import annotations

from typing import Any, Awaitable, Callable, Iterator, Optional, Sequence

from fast_entity.contracts.validator_rule import ValidatorRule
from fast_entity.exceptions.common_exceptions import ValidationRuleException


class RuleChain:
    """
    Ordered list of `ValidatorRule`s for one attribute.

    Rules run sequentially, each receiving the value returned by the previous one.
    The first `ValidationRuleException` stops the chain and is re-raised stamped with
    the name of the rule that produced it. Any other exception (e.g. a failing
    database lookup) propagates untouched.
    """

    def __init__(self, attribute_name: str, rules: Optional[Sequence[ValidatorRule]] = None):
        self.attribute_name = attribute_name
        self.rules: list[ValidatorRule] = list(rules or [])

    def add(self, rule: ValidatorRule) -> 'RuleChain':
        self.rules.append(rule)
        return self

    def __iter__(self) -> Iterator[ValidatorRule]:
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)

    async def validate(self, value: Any, data: Optional[dict] = None, *, loc: Optional[Sequence[str]] = None) -> Any:
        loc = tuple(loc) if loc else (self.attribute_name,)
        payload = data if data is not None else {self.attribute_name: value}

        current = value
        for rule in self.rules:
            try:
                current = await rule.validate(value=current, data=payload, loc=loc)
            except ValidationRuleException as exc:
                if exc.rule is None:
                    exc.rule = rule.name
                if not exc.loc:
                    exc.loc = loc
                raise
        return current

    async def __call__(self, value: Any, data: Optional[dict] = None) -> Any:
        return await self.validate(value, data)


def validate_rule_chain(chain: RuleChain) -> Callable[[Any], Awaitable[Any]]:
    """Wrap a chain into a plain `value -> value` coroutine function."""

    async def validator(value: Any) -> Any:
        return await chain.validate(value)

    return validator
