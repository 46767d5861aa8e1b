"""Arithmetic operations applied to two operands."""
from collections.abc import Callable
import math
from typing import Dict

from interactive_calculator.common.logger import logger
from interactive_calculator.common.models import CalculationResult, ErrorResult, NumericResult

DIVISION_BY_ZERO_MESSAGE = "Error: Division by zero!"
UNKNOWN_OPERATOR_MESSAGE = "Error: Operator tidak dikenal."

# Type alias for functions mapping two operands to a tagged result
ResultFn = Callable[[float, float], CalculationResult]


def add(a: float, b: float) -> float:
    return a + b


def subtract(a: float, b: float) -> float:
    return a - b


def multiply(a: float, b: float) -> float:
    return a * b


def divide(a: float, b: float) -> CalculationResult:
    """
    Divide ``a`` by ``b``.

    Division by zero is not an exception: it yields an ErrorResult that is
    displayed like any other outcome.

    :param float a: Dividend
    :param float b: Divisor

    :return: NumericResult with the quotient, or ErrorResult when ``b`` is zero
    :rtype: CalculationResult
    """
    if b == 0:
        logger.warning(f"Division by zero requested: {a} / {b}")
        return ErrorResult(message=DIVISION_BY_ZERO_MESSAGE)
    return NumericResult(value=a / b)


def modulo(a: float, b: float) -> float:
    """
    Floating remainder whose sign follows the left operand.

    A zero divisor or an infinite dividend gives NaN instead of raising.
    """
    try:
        return math.fmod(a, b)
    except ValueError:
        return math.nan


def _is_odd_integer(x: float) -> bool:
    return math.isfinite(x) and x.is_integer() and x % 2 == 1


def power(a: float, b: float) -> float:
    """
    Raise ``a`` to the power ``b`` following floating-point rules.

    - negative base with a fractional exponent: NaN (never a complex number)
    - overflow: infinity, negative when an odd integer exponent keeps the sign
    - zero base with a negative exponent: infinity
    """
    a, b = float(a), float(b)
    if a < 0 and math.isfinite(a) and math.isfinite(b) and not b.is_integer():
        return math.nan
    sign = -1.0 if a < 0 and _is_odd_integer(b) else 1.0
    try:
        result = a ** b
    except OverflowError:
        return math.copysign(math.inf, sign)
    except ZeroDivisionError:
        # Keeps the sign of a negative zero base for odd exponents
        return math.copysign(math.inf, a) if _is_odd_integer(b) else math.inf
    return result


def _numeric(fn: Callable[[float, float], float]) -> ResultFn:
    """Wrap an always-numeric operation so that it returns a NumericResult."""

    def wrapper(a: float, b: float) -> CalculationResult:
        return NumericResult(value=fn(a, b))

    wrapper.__name__ = fn.__name__
    return wrapper


# Mapping of operator symbols to their operation
OPERATIONS: Dict[str, ResultFn] = {
    "+": _numeric(add),
    "-": _numeric(subtract),
    "*": _numeric(multiply),
    "/": divide,
    "%": _numeric(modulo),
    "**": _numeric(power),
}


def calculate(left: float, operator: str, right: float) -> CalculationResult:
    """
    Apply ``operator`` to the two operands.

    :param float left: First operand
    :param str operator: Operator symbol
    :param float right: Second operand

    :return: Tagged result of the operation
    :rtype: CalculationResult
    """
    operation = OPERATIONS.get(operator)
    if operation is None:
        logger.error(f"Unknown operator reached dispatch: {operator!r}")
        return ErrorResult(message=UNKNOWN_OPERATOR_MESSAGE)

    result = operation(left, right)
    logger.debug(f"{left} {operator} {right} -> {result!r}")
    return result
