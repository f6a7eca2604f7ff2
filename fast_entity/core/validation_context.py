from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from fast_entity.core.content_type import ContentTypeSchema


@dataclass(frozen=True)
class ValidationContext:
    """Per-attribute, per-write context. Never shared across attributes or requests."""

    is_draft: bool
    model: 'ContentTypeSchema'
    attribute_name: str
    entity: Optional[dict[str, Any]] = None
    data: Any = None

    @property
    def entity_id(self) -> Any:
        if self.entity is None:
            return None
        return self.entity.get("id")

    def has_stored_value(self) -> bool:
        return self.entity is not None and self.attribute_name in self.entity

    @property
    def stored_value(self) -> Any:
        if self.entity is None:
            return None
        return self.entity.get(self.attribute_name)
