#!/usr/bin/env python3
"""
Linquad module for defining constant values used within the package.
"""

EQUAL = "="
GREATER_EQUAL = ">="
LESS_EQUAL = "<="

long_EQUAL = "=="
short_GREATER_EQUAL = ">"
short_LESS_EQUAL = "<"


SIGNS: set[str] = {EQUAL, GREATER_EQUAL, LESS_EQUAL}
SIGNS_alternative: set[str] = {long_EQUAL, short_GREATER_EQUAL, short_LESS_EQUAL}
SIGNS_pretty: dict[str, str] = {EQUAL: "=", GREATER_EQUAL: "≥", LESS_EQUAL: "≤"}
SIGNS_flipped: dict[str, str] = {
    EQUAL: EQUAL,
    GREATER_EQUAL: LESS_EQUAL,
    LESS_EQUAL: GREATER_EQUAL,
}

sign_replace_dict: dict[str, str] = {
    long_EQUAL: EQUAL,
    short_GREATER_EQUAL: GREATER_EQUAL,
    short_LESS_EQUAL: LESS_EQUAL,
}

# operand kinds known to the arithmetic dispatch
CONSTANT = "constant"
VARIABLE = "variable"
AFFINE = "affine"
QUADRATIC = "quadratic"
ARRAY = "array"

KIND_RANK: dict[str, int] = {CONSTANT: 0, VARIABLE: 1, AFFINE: 2, QUADRATIC: 3}
SYMBOLIC_KINDS: set[str] = {VARIABLE, AFFINE, QUADRATIC}

NONLINEAR_HINT = (
    "The degree of the result would exceed 2. Only affine and quadratic "
    "expressions are supported, are you trying to build a nonlinear problem?"
)
EXPONENT_HINT = "Only exponents of 2 are supported."

NO_VARIABLE = -1
