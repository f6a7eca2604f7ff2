"""Validation core re-exported for convenient access."""

from .content_type import *  # noqa: F401,F403
from .entity_validator import EntityValidator
from .rule_chain import RuleChain, validate_rule_chain
from .validation_context import ValidationContext
from .validation_rules import *  # noqa: F401,F403
from . import validators  # noqa: F401
