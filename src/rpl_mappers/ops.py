"""Operator tags for composite mappers and their evaluation.

Each composite node carries one of these tags. The tag decides which Python
operator is applied to the already-evaluated child results.

Tags can be looked up by value or by symbol:

    BinaryOp('add') is BinaryOp('+') is BinaryOp.ADD
    UnaryOp('not') is UnaryOp('!') is UnaryOp.NOT
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from rpl_mappers.errors import OperandTypeError

__all__ = ['BinaryOp', 'UnaryOp', 'apply_binary', 'apply_unary']


class UnaryOp(StrEnum):
    """Operators taking one evaluated operand."""

    NEG = 'neg'
    POS = 'pos'
    INVERT = 'invert'
    ABS = 'abs'
    NOT = 'not'

    @property
    def symbol(self) -> str:
        return _UNARY_SYMBOLS[self]

    @classmethod
    def _missing_(cls, value: object) -> UnaryOp | None:
        for member, symbol in _UNARY_SYMBOLS.items():
            if symbol == value:
                return member
        return None


class BinaryOp(StrEnum):
    """Operators taking two evaluated operands."""

    # Arithmetic
    ADD = 'add'
    SUB = 'sub'
    MUL = 'mul'
    TRUEDIV = 'truediv'
    FLOORDIV = 'floordiv'
    MOD = 'mod'
    POW = 'pow'

    # Bitwise
    AND = 'and'
    OR = 'or'
    XOR = 'xor'
    LSHIFT = 'lshift'
    RSHIFT = 'rshift'

    # Comparison
    LT = 'lt'
    LE = 'le'
    GT = 'gt'
    GE = 'ge'
    EQ = 'eq'
    NE = 'ne'

    # Logical, never short-circuit
    LOGICAL_AND = 'logical_and'
    LOGICAL_OR = 'logical_or'

    # Access
    GETITEM = 'getitem'

    @property
    def symbol(self) -> str:
        return _BINARY_SYMBOLS[self]

    @classmethod
    def _missing_(cls, value: object) -> BinaryOp | None:
        for member, symbol in _BINARY_SYMBOLS.items():
            if symbol == value:
                return member
        return None


_UNARY_SYMBOLS: dict[UnaryOp, str] = {
    UnaryOp.NEG: '-',
    UnaryOp.POS: '+',
    UnaryOp.INVERT: '~',
    UnaryOp.ABS: 'abs',
    UnaryOp.NOT: '!',
}

_BINARY_SYMBOLS: dict[BinaryOp, str] = {
    BinaryOp.ADD: '+',
    BinaryOp.SUB: '-',
    BinaryOp.MUL: '*',
    BinaryOp.TRUEDIV: '/',
    BinaryOp.FLOORDIV: '//',
    BinaryOp.MOD: '%',
    BinaryOp.POW: '**',
    BinaryOp.AND: '&',
    BinaryOp.OR: '|',
    BinaryOp.XOR: '^',
    BinaryOp.LSHIFT: '<<',
    BinaryOp.RSHIFT: '>>',
    BinaryOp.LT: '<',
    BinaryOp.LE: '<=',
    BinaryOp.GT: '>',
    BinaryOp.GE: '>=',
    BinaryOp.EQ: '==',
    BinaryOp.NE: '!=',
    BinaryOp.LOGICAL_AND: '&&',
    BinaryOp.LOGICAL_OR: '||',
    BinaryOp.GETITEM: '[]',
}


def apply_unary(op: UnaryOp, value: Any) -> Any:
    """Apply a unary operator to an evaluated operand.

    Raises:
        OperandTypeError: If the operand type does not support the operator.
    """
    try:
        return _apply_unary(op, value)
    except TypeError as e:
        raise OperandTypeError(op.symbol, type(value)) from e


def apply_binary(op: BinaryOp, left: Any, right: Any) -> Any:
    """Apply a binary operator to two evaluated operands.

    Raises:
        OperandTypeError: If the operand types do not support the operator.
    """
    try:
        return _apply_binary(op, left, right)
    except TypeError as e:
        raise OperandTypeError(op.symbol, type(left), type(right)) from e


def _apply_unary(op: UnaryOp, value: Any) -> Any:
    match op:
        case UnaryOp.NEG:
            return -value
        case UnaryOp.POS:
            return +value
        case UnaryOp.INVERT:
            return ~value
        case UnaryOp.ABS:
            return abs(value)
        case UnaryOp.NOT:
            return not value
        case _:
            msg = f'Unknown unary operator: {op!r}'
            raise ValueError(msg)


def _apply_binary(op: BinaryOp, left: Any, right: Any) -> Any:
    match op:
        # Arithmetic
        case BinaryOp.ADD:
            return left + right
        case BinaryOp.SUB:
            return left - right
        case BinaryOp.MUL:
            return left * right
        case BinaryOp.TRUEDIV:
            return left / right
        case BinaryOp.FLOORDIV:
            return left // right
        case BinaryOp.MOD:
            return left % right
        case BinaryOp.POW:
            return left**right

        # Bitwise
        case BinaryOp.AND:
            return left & right
        case BinaryOp.OR:
            return left | right
        case BinaryOp.XOR:
            return left ^ right
        case BinaryOp.LSHIFT:
            return left << right
        case BinaryOp.RSHIFT:
            return left >> right

        # Comparison
        case BinaryOp.LT:
            return left < right
        case BinaryOp.LE:
            return left <= right
        case BinaryOp.GT:
            return left > right
        case BinaryOp.GE:
            return left >= right
        case BinaryOp.EQ:
            return left == right
        case BinaryOp.NE:
            return left != right

        # Logical: both operands are already evaluated
        case BinaryOp.LOGICAL_AND:
            return bool(left) and bool(right)
        case BinaryOp.LOGICAL_OR:
            return bool(left) or bool(right)

        # Access
        case BinaryOp.GETITEM:
            return left[right]

        case _:
            msg = f'Unknown binary operator: {op!r}'
            raise ValueError(msg)
