# parsnip/arith/infix.py
"""Operator tables for the arithmetic precedence layers.

Each layer is an `Infix` node over the next-tighter layer with a table of
(literal, operation constructor) pairs. The engine queues one operation per
operator it reads and folds them left to right onto the first operand, so
every layer (exponentiation included) is left-associative.
"""

from __future__ import annotations
from dataclasses import dataclass

from ..errors import ArithmeticFailure, NumericConversionFailure
from ..numbers import bounded


@dataclass(frozen=True)
class Operation:
    operand: int

    def apply(self, acc: int) -> int:
        raise NotImplementedError


class Add(Operation):
    def apply(self, acc: int) -> int:
        return bounded(acc + self.operand)


class Subtract(Operation):
    def apply(self, acc: int) -> int:
        return bounded(acc - self.operand)


class Multiply(Operation):
    def apply(self, acc: int) -> int:
        return bounded(acc * self.operand)


class Divide(Operation):
    def apply(self, acc: int) -> int:
        if self.operand == 0:
            raise ArithmeticFailure("attempt to divide by zero")
        q = abs(acc) // abs(self.operand)
        # truncate toward zero
        return bounded(-q if (acc < 0) != (self.operand < 0) else q)


class Power(Operation):
    def apply(self, acc: int) -> int:
        return checked_pow(acc, self.operand)


def checked_pow(base: int, exponent: int) -> int:
    if exponent < 0:
        raise NumericConversionFailure(f"negative exponent {exponent}")
    if exponent == 0:
        return 1
    if base in (0, 1):
        return base
    if base == -1:
        return -1 if exponent % 2 else 1
    result = 1
    for _ in range(exponent):
        result = bounded(result * base)
    return result


POWER_OPERATORS = (("^", Power),)
PRODUCT_OPERATORS = (("*", Multiply), ("/", Divide))
SUM_OPERATORS = (("+", Add), ("-", Subtract))
