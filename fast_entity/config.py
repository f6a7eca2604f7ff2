import os

# Document field the lookup `id` key maps to
MONGO_ID_FIELD = os.getenv("MONGO_ID_FIELD", "_id")

# Log file written by `setup_logging` when no explicit name is given
LOG_FILE_NAME = os.getenv("LOG_FILE_NAME", "fast_entity.log")
