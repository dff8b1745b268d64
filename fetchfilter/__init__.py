from fetchfilter.expressions import ConditionExpression, FilterExpression, condition, and_, or_
from fetchfilter.filter_models import ConditionDefinition, FilterDefinition
from fetchfilter.filter_parser import FilterParser
from fetchfilter.operators import ConditionOperator, LogicalOperator

__all__ = [
    "FilterExpression",
    "ConditionExpression",
    "condition",
    "and_",
    "or_",
    "LogicalOperator",
    "ConditionOperator",
    "FilterDefinition",
    "ConditionDefinition",
    "FilterParser",
]
