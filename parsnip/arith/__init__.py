# parsnip/arith/__init__.py
"""Integer arithmetic expressions with + - * / ^ and parentheses."""

from .grammar import ARITH_GRAMMAR, evaluate, parse
from .infix import (
    Operation, Add, Subtract, Multiply, Divide, Power,
    POWER_OPERATORS, PRODUCT_OPERATORS, SUM_OPERATORS,
)
