"""Test helpers: small fallible functions shared by the scenario suites."""

from __future__ import annotations

import math

from fallible import Result, err, ok

DIVIDE_BY_ZERO = "Divide by zero"
NO_IMAGINARY = "No imaginary numbers allowed!"


class CustomMathError(ArithmeticError):
    """Distinct error type for exercising map_err retyping."""


def safe_divide(n: float, m: float) -> Result[float, ZeroDivisionError]:
    if m == 0:
        return err(ZeroDivisionError(DIVIDE_BY_ZERO))
    return ok(n / m)


def sqrt(n: float) -> Result[float, ValueError]:
    if n > 0:
        return ok(math.sqrt(n))
    return err(ValueError(NO_IMAGINARY))
