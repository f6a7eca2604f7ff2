from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Sequence


class ValidatorRule(ABC):
    """
    Contract for a single link of an attribute's `RuleChain`.

    Implementations return the (possibly coerced) value so the next rule in the
    chain receives it, and raise `ValidationRuleException` on failure.
    """

    name: str = "rule"

    @abstractmethod
    async def validate(self, *, value: Any, data: dict, loc: Sequence[str]) -> Any:
        """
        Validate a value within the context of the entire payload.

        Args:
            value: The value produced by the previous rule in the chain.
            data: The full incoming payload as a dict (only submitted keys on partial updates).
            loc: Path components from the payload root to the value.

        Returns:
            The value to hand over to the next rule.

        Raises:
            ValidationRuleException: If the validation fails.
        """
        raise NotImplementedError
