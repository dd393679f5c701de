"""Evaluation of arithmetic infix expressions via the shunting-yard algorithm.

Supported operators are ``+``, ``-``, ``*`` and ``/`` with parentheses.
Spaces are ignored and do not separate numbers.
"""

from __future__ import annotations

import math
import string

_OPERATORS = frozenset("+-*/()")
_ADDITIVE = frozenset("+-")
_NUMBER_CHARS = frozenset(string.digits + ".")


class EvaluationError(ValueError):
    """Raised when an expression cannot be evaluated."""


def _invalid_expression() -> EvaluationError:
    return EvaluationError("opeval - invalid expression")


def _balanced(expression: str) -> bool:
    depth = 0
    for char in expression:
        if char == "(":
            depth += 1
        elif char == ")":
            if depth == 0:
                return False
            depth -= 1
    return depth == 0


def _binds_before(top: str, incoming: str) -> bool:
    if top in _ADDITIVE:
        return incoming in _ADDITIVE
    return True


def _to_postfix(expression: str) -> list[str]:
    output: list[str] = []
    operators: list[str] = []
    number = ""
    for char in expression:
        if char in _OPERATORS:
            if number:
                output.append(number)
                number = ""
            if char == "(":
                operators.append(char)
            elif char == ")":
                while operators[-1] != "(":
                    output.append(operators.pop())
                operators.pop()
            else:
                while (
                    operators
                    and operators[-1] != "("
                    and _binds_before(operators[-1], char)
                ):
                    output.append(operators.pop())
                operators.append(char)
        elif char in _NUMBER_CHARS:
            number += char
        elif char != " ":
            raise EvaluationError(f"opeval - invalid character '{char}'")
    if number:
        output.append(number)
    output.extend(reversed(operators))
    return output


def _to_value(operand: str | float | None) -> float:
    if isinstance(operand, float):
        return operand
    if operand is None:
        raise _invalid_expression()
    try:
        value = float(operand)
    except ValueError:
        raise _invalid_expression() from None
    if math.isinf(value):
        raise _invalid_expression()
    return value


def _apply(left: float, right: float, operator: str) -> float:
    if operator == "+":
        return left + right
    if operator == "-":
        return left - right
    if operator == "*":
        return left * right
    if right == 0:
        raise EvaluationError("opeval - division by 0")
    return left / right


def evaluate(expression: str) -> float:
    """Return the value of the infix ``expression``."""
    if not _balanced(expression):
        raise EvaluationError("opeval - invalid parenthesis configuration")

    operands: list[str | float] = []
    for token in _to_postfix(expression):
        if token in _OPERATORS:
            right = operands.pop() if operands else None
            if not operands:
                raise _invalid_expression()
            left = operands.pop()
            right_value = _to_value(right)
            left_value = _to_value(left)
            operands.append(_apply(left_value, right_value, token))
        else:
            operands.append(token)

    if not operands:
        return 0.0
    result = operands.pop()
    if isinstance(result, float):
        return result
    try:
        return float(result)
    except ValueError:
        return 0.0