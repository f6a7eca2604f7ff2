from .coercion import values_equal
from .mongo_utils import translate_where

__all__ = [
    "values_equal",
    "translate_where",
]
