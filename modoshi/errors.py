"""
Exceptions raised by Modoshi.

Every error that can happen while installing a language descriptor derives
from DescriptorError. Searching (LanguageTransformer.transform) never raises.
"""

from typing import Optional, Sequence


class DeinflectionError(Exception):
    """Base class for all Modoshi errors."""


class DescriptorError(DeinflectionError):
    """Raised when a language descriptor cannot be installed."""


class UnknownCondition(DescriptorError):
    """
    Raised when a rule names an undeclared condition.

    A sub-condition naming an undeclared condition never resolves and is
    reported as SubConditionCycle instead.
    """

    def __init__(
        self,
        name: str,
        index: int,
        transform_id: Optional[str] = None,
        rule_index: Optional[int] = None,
    ):
        self.name = name
        self.index = index
        self.transform_id = transform_id
        self.rule_index = rule_index
        where = ""
        if transform_id is not None:
            where = f" in {transform_id}.rules[{rule_index}]"
        super().__init__(f"Unknown condition '{name}' at position {index}{where}")


class SubConditionCycle(DescriptorError):
    """Raised when sub-condition declarations reference each other in a loop."""

    def __init__(self, identifiers: Sequence[str]):
        self.identifiers = list(identifiers)
        chain = " -> ".join(self.identifiers)
        super().__init__(f"Sub-condition cycle detected between: {chain}")


class TooManyConditions(DescriptorError):
    """Raised when the leaf-condition bit budget is exhausted."""

    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"Maximum number of conditions ({limit}) exceeded")


class InvalidPattern(DescriptorError):
    """Raised when a rule pattern is not a valid regular expression."""

    def __init__(self, transform_id: str, rule_index: int, cause: Exception):
        self.transform_id = transform_id
        self.rule_index = rule_index
        self.cause = cause
        super().__init__(
            f"Invalid pattern in {transform_id}.rules[{rule_index}]: {cause}"
        )
