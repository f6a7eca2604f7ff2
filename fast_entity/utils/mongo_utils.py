from typing import Any, Optional

from bson import ObjectId

from fast_entity.config import MONGO_ID_FIELD

_LOGICAL_OPERATORS = {
    "AND": "$and",
    "OR": "$or",
}


def to_document_id(value: Any, *, id_field: str = MONGO_ID_FIELD) -> Any:
    if id_field == "_id" and isinstance(value, str) and ObjectId.is_valid(value):
        return ObjectId(value)
    return value


def translate_where(where: dict[str, Any], *, id_field: str = MONGO_ID_FIELD) -> dict[str, Any]:
    """
    Translate a lookup predicate into a MongoDB filter document.

    - `{"AND": [...]}` -> `{"$and": [...]}` (same for `OR`)
    - `{"NOT": {...}}` -> `{"$nor": [{...}]}` (`$not` is not allowed at top level)
    - `id` -> `id_field`, 24-hex strings become `ObjectId`s when `id_field` is `_id`
    """
    translated: dict[str, Any] = {}
    for key, value in where.items():
        if key in _LOGICAL_OPERATORS:
            translated[_LOGICAL_OPERATORS[key]] = [translate_where(clause, id_field=id_field) for clause in value]
        elif key == "NOT":
            translated["$nor"] = [translate_where(value, id_field=id_field)]
        elif key == "id":
            translated[id_field] = to_document_id(value, id_field=id_field)
        else:
            translated[key] = value
    return translated


def translate_select(select: Optional[list[str]], *, id_field: str = MONGO_ID_FIELD) -> Optional[dict[str, int]]:
    if not select:
        return None
    return {id_field if field == "id" else field: 1 for field in select}


def translate_record(record: Optional[dict[str, Any]], *, id_field: str = MONGO_ID_FIELD) -> Optional[dict[str, Any]]:
    if record is None:
        return None
    result = {k: v for k, v in record.items() if k != id_field}
    if id_field in record:
        result["id"] = record[id_field]
    return result
