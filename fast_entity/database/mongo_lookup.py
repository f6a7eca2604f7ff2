from __future__ import annotations

import logging
from typing import Any, Optional, TYPE_CHECKING

from fast_entity.config import MONGO_ID_FIELD
from fast_entity.contracts.lookup import Lookup
from fast_entity.database.mongo import get_db
from fast_entity.exceptions import DatabaseNotInitializedException
from fast_entity.utils.mongo_utils import translate_record, translate_select, translate_where

if TYPE_CHECKING:
    from motor.motor_asyncio import AsyncIOMotorCollection
    from fast_entity.core.content_type import ContentTypeSchema


class MongoLookup(Lookup):
    """`Lookup` backed by a MongoDB collection through Motor."""

    def __init__(self, collection_name: str, *, id_field: str = MONGO_ID_FIELD) -> None:
        self.collection_name = collection_name
        self.id_field = id_field

    @classmethod
    def for_model(cls, model: 'ContentTypeSchema') -> 'MongoLookup':
        return cls(model.collection_name)

    async def collection(self) -> 'AsyncIOMotorCollection':
        db = await get_db()
        if db is None:
            raise DatabaseNotInitializedException()
        return db[self.collection_name]

    async def find_one(self, query: dict[str, Any]) -> Optional[dict[str, Any]]:
        mongo_filter = translate_where(query.get("where") or {}, id_field=self.id_field)
        projection = translate_select(query.get("select"), id_field=self.id_field)

        logging.debug(f"[MONGO LOOKUP] {self.collection_name}.find_one({mongo_filter})")

        coll = await self.collection()
        record = await coll.find_one(mongo_filter, projection)
        return translate_record(record, id_field=self.id_field)
