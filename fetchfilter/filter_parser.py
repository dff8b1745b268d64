"""
Parser for converting JSON filter definitions to FetchXML filter expressions.
"""
from typing import Any, Dict, Union

from fetchfilter.expressions import FilterExpression
from fetchfilter.filter_models import ConditionDefinition, FilterDefinition
from fetchfilter.logging_config import get_logger, log_performance

logger = get_logger(__name__)


class FilterParser:
    """Converts filter definitions to filter expressions."""

    @log_performance(logger, "parse filter definition")
    def parse(self, definition: Union[FilterDefinition, Dict[str, Any]]) -> FilterExpression:
        """
        Build a FilterExpression from a definition.

        Args:
            definition: A FilterDefinition or a dict in the same shape

        Returns:
            The filter expression, with children in definition order
        """
        if not isinstance(definition, FilterDefinition):
            definition = FilterDefinition.model_validate(definition)
        return self._parse_filter(definition)

    def parse_json(self, payload: Union[str, bytes]) -> FilterExpression:
        """Validate a JSON filter definition and build the expression."""
        return self.parse(FilterDefinition.model_validate_json(payload))

    def _parse_filter(self, definition: FilterDefinition) -> FilterExpression:
        expression = FilterExpression(definition.operator)

        for child in definition.conditions:
            if isinstance(child, ConditionDefinition):
                if "value" in child.model_fields_set:
                    expression.add_condition(child.attribute, child.operator, child.value)
                else:
                    expression.add_condition(child.attribute, child.operator)
            else:
                expression.add_filter(self._parse_filter(child))

        logger.debug(
            "Built '%s' filter with %d children", definition.operator.value, len(expression)
        )
        return expression
