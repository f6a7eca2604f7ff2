from .mongo import clear, get_db, get_mongo, setup_mongo
from .mongo_lookup import MongoLookup

__all__ = [
    "clear",
    "get_db",
    "get_mongo",
    "setup_mongo",
    "MongoLookup",
]
