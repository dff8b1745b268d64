"""
Expression builders for FetchXML filters.

A ``FilterExpression`` groups conditions and nested filters under a logical
operator. Children are rendered to XML as soon as they are added, so a nested
filter is captured as it was at insertion time.
"""

import math
from enum import Enum
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .logging_config import get_logger
from .operators import ConditionOperator, LogicalOperator

logger = get_logger(__name__)

# Marks a condition built without a value; None is a value and renders as "null".
_UNSET: Any = object()


def _format_value(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
    if isinstance(value, (list, tuple)):
        # nested sequences flatten to comma separated entries, None entries empty
        return ",".join("" if v is None else _format_value(v) for v in value)
    return str(value)


class ConditionExpression(BaseModel):
    """A single attribute comparison."""

    model_config = ConfigDict(frozen=True)

    attribute: str = Field(..., description="Logical name of the attribute")
    operator: ConditionOperator = Field(..., description="Condition operator")
    value: Optional[Any] = Field(None, description="Value or sequence of values")

    def __init__(
        self,
        attribute: str,
        operator: Union[ConditionOperator, str],
        value: Any = _UNSET,
        **kwargs: Any,
    ):
        if value is not _UNSET:
            kwargs["value"] = value
        super().__init__(attribute=attribute, operator=operator, **kwargs)

    @property
    def has_value(self) -> bool:
        """Whether a value (possibly None) was supplied."""
        return "value" in self.model_fields_set

    def render(self) -> str:
        """
        Render the condition element(s).

        A sequence value expands to one element per entry, in order.
        """
        head = f'<condition attribute="{self.attribute}" operator="{self.operator.value}"'

        if not self.has_value:
            return f"{head}/>"

        if isinstance(self.value, (list, tuple)):
            return "".join(f'{head} value="{_format_value(v)}" />' for v in self.value)

        return f'{head} value="{_format_value(self.value)}" />'

    def __str__(self) -> str:
        return self.render()


class FilterExpression:
    """A logical group of conditions and nested filters."""

    def __init__(self, operator: Union[LogicalOperator, str] = LogicalOperator.AND):
        self.operator = LogicalOperator(operator)
        self.expressions: List[str] = []

    def add_condition(
        self,
        attribute: str,
        operator: Union[ConditionOperator, str],
        value: Any = _UNSET,
    ) -> "FilterExpression":
        """Add a condition on ``attribute``; a list or tuple value adds one per entry."""
        expression = ConditionExpression(attribute, operator, value)
        if expression.has_value and not expression.operator.requires_value:
            logger.debug(
                "Condition on '%s' uses '%s' with a value; the value is rendered as given",
                attribute,
                expression.operator.value,
            )
        self.expressions.append(expression.render())
        return self

    def add_filter(self, filter_expression: "FilterExpression") -> "FilterExpression":
        """Add a child filter. Later changes to the child are not reflected here."""
        if not isinstance(filter_expression, FilterExpression):
            raise TypeError(
                f"Expected FilterExpression, got {type(filter_expression).__name__}"
            )
        self.expressions.append(filter_expression.serialize())
        return self

    def serialize(self) -> str:
        """Serialize the filter and its children to FetchXML."""
        return f'<filter type="{self.operator.value}">{"".join(self.expressions)}</filter>'

    def __str__(self) -> str:
        return self.serialize()

    def __repr__(self) -> str:
        return f"FilterExpression(operator={self.operator.value!r}, xml={self.serialize()!r})"

    def __len__(self) -> int:
        return len(self.expressions)


def condition(
    attribute: str,
    operator: Union[ConditionOperator, str],
    value: Any = _UNSET,
) -> ConditionExpression:
    """Create a condition expression."""
    return ConditionExpression(attribute, operator, value)


def _combine(operator: LogicalOperator, children) -> FilterExpression:
    result = FilterExpression(operator)
    for child in children:
        if isinstance(child, FilterExpression):
            result.add_filter(child)
        elif isinstance(child, ConditionExpression):
            result.expressions.append(child.render())
        else:
            raise TypeError(
                f"Cannot add {type(child).__name__} to a filter; "
                "expected ConditionExpression or FilterExpression"
            )
    return result


def and_(*children: Union[ConditionExpression, FilterExpression]) -> FilterExpression:
    """Combine expressions with AND."""
    return _combine(LogicalOperator.AND, children)


def or_(*children: Union[ConditionExpression, FilterExpression]) -> FilterExpression:
    """Combine expressions with OR."""
    return _combine(LogicalOperator.OR, children)
