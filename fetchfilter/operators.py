"""
Operator enumerations for filter and condition expressions.
"""
from enum import Enum


class LogicalOperator(str, Enum):
    """Supported logical operators for combining conditions."""
    AND = "and"
    OR = "or"


class ConditionOperator(str, Enum):
    """Supported comparison operators for conditions."""
    EQUAL = "eq"
    NOT_EQUAL = "ne"
    LESS_THAN = "lt"
    LESS_EQUAL = "le"
    GREATER_THAN = "gt"
    GREATER_EQUAL = "ge"
    NULL = "null"
    NOT_NULL = "not-null"

    @property
    def requires_value(self) -> bool:
        """Whether the operator compares against a value (null checks don't)."""
        return self not in (ConditionOperator.NULL, ConditionOperator.NOT_NULL)
