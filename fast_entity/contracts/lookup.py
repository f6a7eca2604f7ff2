from abc import ABC, abstractmethod
from typing import Any, Optional


class Lookup(ABC):
    """Persistence lookup capability bound to a single content type.

    The only query shape issued is::

        {"select": ["id"], "where": <predicate>}

    where ``<predicate>`` is either ``{attr: value}`` or
    ``{"AND": [{attr: value}, {"NOT": {"id": excluded_id}}]}``.
    Adapters must accept this grammar and return the first matching record
    (or ``None``). Errors must be raised, never swallowed.
    """

    @abstractmethod
    async def find_one(self, query: dict[str, Any]) -> Optional[dict[str, Any]]:
        pass

    async def exists(self, query: dict[str, Any]) -> bool:
        return await self.find_one(query) is not None
