"""Contract classes and abstract interfaces.

These are the seams the validation core is built against and are exported so
they can be imported directly from :mod:`fast_entity`.
"""

from .lookup import Lookup
from .validator_rule import ValidatorRule

__all__ = [
    "Lookup",
    "ValidatorRule",
]
