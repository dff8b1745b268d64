"""
Examples demonstrating the FetchXML filter builder usage.

This file shows the ways to build filter fragments: chained calls, the
and_/or_ helpers, and JSON filter definitions.
"""

from fetchfilter import (
    ConditionOperator,
    FilterExpression,
    FilterParser,
    LogicalOperator,
    and_,
    condition,
    or_,
)


def basic_examples():
    """Basic filter building examples."""
    print("=== Basic Filter Examples ===\n")

    # Single condition
    fe = FilterExpression().add_condition("name", ConditionOperator.EQUAL, "Bob")
    print(f"Single condition:\n{fe.serialize()}\n")

    # Null check, no value
    fe = FilterExpression().add_condition("email", ConditionOperator.NOT_NULL)
    print(f"Null check:\n{fe.serialize()}\n")

    # One condition element per value
    fe = FilterExpression(LogicalOperator.OR).add_condition("statuscode", ConditionOperator.EQUAL, [1, 2, 3])
    print(f"Multi-value condition:\n{fe.serialize()}\n")


def nested_examples():
    """Nested filter examples."""
    print("=== Nested Filter Examples ===\n")

    name_filter = (FilterExpression(LogicalOperator.OR)
                   .add_condition("firstname", ConditionOperator.EQUAL, "Bob")
                   .add_condition("lastname", ConditionOperator.EQUAL, "Smith"))

    fe = (FilterExpression()
          .add_condition("statecode", ConditionOperator.EQUAL, 0)
          .add_filter(name_filter))
    print(f"Nested filter:\n{fe.serialize()}\n")

    fe = and_(
        condition("statecode", ConditionOperator.EQUAL, 0),
        or_(
            condition("revenue", ConditionOperator.GREATER_EQUAL, 100000),
            condition("numberofemployees", ConditionOperator.GREATER_THAN, 50),
        ),
    )
    print(f"Built with helpers:\n{fe.serialize()}\n")


def definition_examples():
    """JSON filter definition examples."""
    print("=== Filter Definition Examples ===\n")

    payload = """
    {
        "operator": "and",
        "conditions": [
            {"attribute": "statecode", "operator": "eq", "value": 0},
            {
                "type": "filter",
                "operator": "or",
                "conditions": [
                    {"attribute": "parentaccountid", "operator": "null"},
                    {"attribute": "industrycode", "operator": "eq", "value": [1, 7]}
                ]
            }
        ]
    }
    """
    fe = FilterParser().parse_json(payload)
    print(f"From JSON:\n{fe.serialize()}\n")


def main():
    basic_examples()
    nested_examples()
    definition_examples()


if __name__ == "__main__":
    main()
