"""
Signup Form Example
===================

Coercing a JSON request body against an input object type, demonstrating:
- Input object, list, enum and non-null types
- Default values and list-of-one promotion
- Fail-fast errors versus collecting every error in one pass
"""

from inputdsl import (
    Boolean,
    CoercionError,
    EnumType,
    EnumValue,
    InputField,
    InputObjectType,
    Int,
    ListType,
    NonNullType,
    String,
    coerce_json,
    coerce_value,
)

# ============================================================================
# Define Types
# ============================================================================

Plan = EnumType(
    "Plan",
    (EnumValue("FREE", 0), EnumValue("PRO", 1), EnumValue("TEAM", 2)),
)

Signup = InputObjectType(
    "Signup",
    [
        InputField("email", NonNullType(String)),
        InputField("age", Int),
        InputField("plan", Plan, default_value=0),
        InputField("newsletter", Boolean, default_value=False),
        InputField("interests", ListType(NonNullType(String))),
    ],
)


# ============================================================================
# Example Usage
# ============================================================================

if __name__ == "__main__":
    body = '{"email": "ada@example.com", "age": "36", "interests": "math"}'
    print(coerce_json(body, Signup))
    # {'email': 'ada@example.com', 'age': 36, 'plan': 0,
    #  'newsletter': False, 'interests': ['math']}

    try:
        coerce_json('{"age": 36, "plan": "PREMIUM"}', Signup)
    except CoercionError as error:
        print(error)
    # Invalid value { age: 36, plan: "PREMIUM" }:
    #   Field "email" of required type "String!" was not provided.

    result = coerce_value({"age": 36, "plan": "PRO!", "emial": "x"}, Signup)
    print(result)
    # CoercionResult: 3 error(s)
    #   value: Field "email" of required type "String!" was not provided.
    #   value.plan: Expected type "Plan". Did you mean the enum value "PRO"?
    #   value: Field "emial" is not defined by type "Signup". Did you mean "email"?
