"""
Shared fixtures for the fetchfilter test suite.
"""

import pytest

from fetchfilter import ConditionOperator, FilterExpression, LogicalOperator


@pytest.fixture
def or_filter():
    """An OR filter with two conditions."""
    return (
        FilterExpression(LogicalOperator.OR)
        .add_condition("name", ConditionOperator.EQUAL, "Bob")
        .add_condition("age", ConditionOperator.GREATER_THAN, 30)
    )


@pytest.fixture
def or_filter_xml():
    """Expected serialization of ``or_filter``."""
    return (
        '<filter type="or">'
        '<condition attribute="name" operator="eq" value="Bob" />'
        '<condition attribute="age" operator="gt" value="30" />'
        "</filter>"
    )


@pytest.fixture
def not_null_condition_xml():
    return '<condition attribute="name" operator="not-null"/>'
