"""
Models for the JSON filter definition format.
"""
from typing import Any, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .operators import ConditionOperator, LogicalOperator


class ConditionDefinition(BaseModel):
    """A condition on a single attribute."""
    model_config = ConfigDict(extra="forbid")

    type: Literal["condition"] = "condition"
    attribute: str = Field(..., description="Logical name of the attribute")
    operator: ConditionOperator = Field(..., description="Condition operator")
    value: Optional[Any] = Field(None, description="Value or list of values to compare with")


class FilterDefinition(BaseModel):
    """A logical group of conditions and nested filters."""
    model_config = ConfigDict(extra="forbid")

    type: Literal["filter"] = "filter"
    operator: LogicalOperator = Field(LogicalOperator.AND, description="Logical operator")
    conditions: List[Union[ConditionDefinition, "FilterDefinition"]] = Field(
        default_factory=list, description="Conditions and nested filters, in output order"
    )


FilterDefinition.model_rebuild()
