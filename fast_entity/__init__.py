"""
fast-entity - entity attribute validation for content types

This package provides:
- Content type schemas with typed attribute descriptors (pydantic)
- Per-type validation rule chains (format, required, unique)
- Database-backed uniqueness checks through a pluggable lookup
- A MongoDB lookup adapter (motor)
- An entity-level validator aggregating attribute errors
"""

__version__ = "0.1.0"
__author__ = "Patrik Mojzis"
__email__ = "patrikm53@gmail.com"
__license__ = "MIT"
__url__ = "https://github.com/patrikmojzis/fast-entity"

from .app_provider import boot
from .contracts import *  # noqa: F401,F403
from .core import *  # noqa: F401,F403
from .database import *  # noqa: F401,F403
from .exceptions import *  # noqa: F401,F403
