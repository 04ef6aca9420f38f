"""Named builders for every mapper operator.

Each function builds the same node as the matching operator, wrapping plain
operands into values. Unlike the operators, the builders always produce a
mapper, even when neither operand is one:

    add(_1, 1)           ≡ _1 + 1
    gt(_1, 10)           ≡ _1 > 10
    logical_and(a, b)    ≡ a.logical_and(b)
    add(1, 2)            → val(1) + val(2), evaluates to 3

They also cover the operators Python cannot overload (``and``, ``or``,
``not``) and are convenient as first-class functions:

    functools.reduce(logical_and, [_1 > 0, _2 > 0, _3 > 0])
"""

from __future__ import annotations

from typing import Any

from rpl_mappers.mapper import Binary, Unary, binary, unary
from rpl_mappers.ops import BinaryOp, UnaryOp

__all__ = [
    'abs_',
    'add',
    'and_',
    'eq',
    'floordiv',
    'ge',
    'getitem',
    'gt',
    'invert',
    'le',
    'logical_and',
    'logical_not',
    'logical_or',
    'lshift',
    'lt',
    'mod',
    'mul',
    'ne',
    'neg',
    'or_',
    'pos',
    'pow_',
    'rshift',
    'sub',
    'truediv',
    'xor',
]


# =========================================================================
# Arithmetic
# =========================================================================


def add(left: Any, right: Any) -> Binary:
    """Build ``left + right``."""
    return binary(BinaryOp.ADD, left, right)


def sub(left: Any, right: Any) -> Binary:
    """Build ``left - right``."""
    return binary(BinaryOp.SUB, left, right)


def mul(left: Any, right: Any) -> Binary:
    """Build ``left * right``."""
    return binary(BinaryOp.MUL, left, right)


def truediv(left: Any, right: Any) -> Binary:
    """Build ``left / right``."""
    return binary(BinaryOp.TRUEDIV, left, right)


def floordiv(left: Any, right: Any) -> Binary:
    """Build ``left // right``."""
    return binary(BinaryOp.FLOORDIV, left, right)


def mod(left: Any, right: Any) -> Binary:
    """Build ``left % right``."""
    return binary(BinaryOp.MOD, left, right)


def pow_(left: Any, right: Any) -> Binary:
    """Build ``left ** right``."""
    return binary(BinaryOp.POW, left, right)


def neg(operand: Any) -> Unary:
    """Build ``-operand``."""
    return unary(UnaryOp.NEG, operand)


def pos(operand: Any) -> Unary:
    """Build ``+operand``."""
    return unary(UnaryOp.POS, operand)


def abs_(operand: Any) -> Unary:
    """Build ``abs(operand)``."""
    return unary(UnaryOp.ABS, operand)


# =========================================================================
# Bitwise
# =========================================================================


def and_(left: Any, right: Any) -> Binary:
    """Build ``left & right``."""
    return binary(BinaryOp.AND, left, right)


def or_(left: Any, right: Any) -> Binary:
    """Build ``left | right``."""
    return binary(BinaryOp.OR, left, right)


def xor(left: Any, right: Any) -> Binary:
    """Build ``left ^ right``."""
    return binary(BinaryOp.XOR, left, right)


def lshift(left: Any, right: Any) -> Binary:
    """Build ``left << right``."""
    return binary(BinaryOp.LSHIFT, left, right)


def rshift(left: Any, right: Any) -> Binary:
    """Build ``left >> right``."""
    return binary(BinaryOp.RSHIFT, left, right)


def invert(operand: Any) -> Unary:
    """Build ``~operand``."""
    return unary(UnaryOp.INVERT, operand)


# =========================================================================
# Comparison
# =========================================================================


def lt(left: Any, right: Any) -> Binary:
    """Build ``left < right``."""
    return binary(BinaryOp.LT, left, right)


def le(left: Any, right: Any) -> Binary:
    """Build ``left <= right``."""
    return binary(BinaryOp.LE, left, right)


def gt(left: Any, right: Any) -> Binary:
    """Build ``left > right``."""
    return binary(BinaryOp.GT, left, right)


def ge(left: Any, right: Any) -> Binary:
    """Build ``left >= right``."""
    return binary(BinaryOp.GE, left, right)


def eq(left: Any, right: Any) -> Binary:
    """Build ``left == right``."""
    return binary(BinaryOp.EQ, left, right)


def ne(left: Any, right: Any) -> Binary:
    """Build ``left != right``."""
    return binary(BinaryOp.NE, left, right)


# =========================================================================
# Logical
# =========================================================================


def logical_and(left: Any, right: Any) -> Binary:
    """Build ``left && right``.

    Both sides are evaluated on every call; the result is
    ``bool(left) and bool(right)``.
    """
    return binary(BinaryOp.LOGICAL_AND, left, right)


def logical_or(left: Any, right: Any) -> Binary:
    """Build ``left || right``.

    Both sides are evaluated on every call; the result is
    ``bool(left) or bool(right)``.
    """
    return binary(BinaryOp.LOGICAL_OR, left, right)


def logical_not(operand: Any) -> Unary:
    """Build ``!operand``; the result is ``not operand``."""
    return unary(UnaryOp.NOT, operand)


# =========================================================================
# Access
# =========================================================================


def getitem(container: Any, key: Any) -> Binary:
    """Build ``container[key]``."""
    return binary(BinaryOp.GETITEM, container, key)
