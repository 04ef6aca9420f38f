"""Argument mappers: immutable expression nodes evaluated over positional arguments.

A mapper is a callable description of a computation. Placeholders select one
positional argument, values ignore the arguments and return a constant, and
composite nodes apply an operator to the results of their children.

Operators on a mapper build a new mapper instead of computing:

    (_1 + _2)(3, 4)             → 7
    (_1 > 10)(11)               → True
    ((_1 + _2) * 3 > 10)(2, 2)  → True

Python cannot overload ``and``, ``or`` and ``not``; use the bitwise operators
on boolean results or the ``logical_and`` / ``logical_or`` / ``logical_not``
methods. Truth-testing a mapper raises MapperTruthError so that
``_1 > 0 and _2 > 0`` fails instead of silently dropping a branch.

Example:
    ```python
    from rpl_mappers import _1, _2, val

    project = (_1 + _2) * val(3)
    project(2, 4, 'ignored')  # 18

    in_range = (_1 > 10).logical_and(_2 < 5)
    list(filter(lambda pair: in_range(*pair), [(11, 3), (9, 3)]))  # [(11, 3)]
    ```
"""

from __future__ import annotations

import copy
from typing import Any, Self

import msgspec
from msgspec.structs import force_setattr

from rpl_mappers._config import get_config
from rpl_mappers._logging import get_logger
from rpl_mappers.errors import ArityError, MapperTruthError
from rpl_mappers.ops import BinaryOp, UnaryOp, apply_binary, apply_unary

__all__ = [
    'Binary',
    'Mapper',
    'Placeholder',
    'Unary',
    'Value',
    'binary',
    'is_mapper',
    'unary',
    'wrap',
]

# Placeholders below this index render as their public name (_1 … _20).
_NAMED_PLACEHOLDERS = 20


class Mapper(msgspec.Struct, frozen=True, gc=False):
    """Capability tag and operator surface shared by every expression node.

    Any instance of a Mapper subclass is an expression node; everything else is
    a plain value and gets wrapped into a Value when composed with a node.

    Calling a mapper evaluates it. The argument count is validated against
    ``arity`` before any child is evaluated.
    """

    # Item access is overloaded, so block the legacy __getitem__ iteration protocol.
    __iter__ = None

    @property
    def arity(self) -> int:
        """Minimum number of positional arguments an evaluation needs."""
        raise NotImplementedError

    def _evaluate(self, args: tuple[Any, ...]) -> Any:
        raise NotImplementedError

    def __call__(self, *args: Any) -> Any:
        """Evaluate the expression with positional arguments."""
        config = get_config()
        if config.check_arity:
            required = self.arity
            if len(args) < required:
                _reject(self, required, len(args))
        result = self._evaluate(args)
        if config.trace:
            get_logger(__name__).debug('mapper.evaluated', expr=repr(self), given=len(args), result=result)
        return result

    def expect_arity(self, given: int) -> Self:
        """Declare the argument count this mapper will be called with.

        Rejects the mapper immediately, before any evaluation, if one of its
        placeholders selects past ``given`` arguments.

        Example:
            ```python
            (_1 + _2).expect_arity(2)  # returns the mapper unchanged
            (_1 + _3).expect_arity(2)  # raises ArityError
            ```

        Raises:
            ArityError: If ``given`` is smaller than ``arity``.
        """
        required = self.arity
        if given < required:
            _reject(self, required, given)
        return self

    def __bool__(self) -> bool:
        raise MapperTruthError(repr(self))

    # =========================================================================
    # Arithmetic operators
    # =========================================================================

    def __add__(self, other: Any) -> Binary:
        return binary(BinaryOp.ADD, self, other)

    def __radd__(self, other: Any) -> Binary:
        return binary(BinaryOp.ADD, other, self)

    def __sub__(self, other: Any) -> Binary:
        return binary(BinaryOp.SUB, self, other)

    def __rsub__(self, other: Any) -> Binary:
        return binary(BinaryOp.SUB, other, self)

    def __mul__(self, other: Any) -> Binary:
        return binary(BinaryOp.MUL, self, other)

    def __rmul__(self, other: Any) -> Binary:
        return binary(BinaryOp.MUL, other, self)

    def __truediv__(self, other: Any) -> Binary:
        return binary(BinaryOp.TRUEDIV, self, other)

    def __rtruediv__(self, other: Any) -> Binary:
        return binary(BinaryOp.TRUEDIV, other, self)

    def __floordiv__(self, other: Any) -> Binary:
        return binary(BinaryOp.FLOORDIV, self, other)

    def __rfloordiv__(self, other: Any) -> Binary:
        return binary(BinaryOp.FLOORDIV, other, self)

    def __mod__(self, other: Any) -> Binary:
        return binary(BinaryOp.MOD, self, other)

    def __rmod__(self, other: Any) -> Binary:
        return binary(BinaryOp.MOD, other, self)

    def __pow__(self, other: Any) -> Binary:
        return binary(BinaryOp.POW, self, other)

    def __rpow__(self, other: Any) -> Binary:
        return binary(BinaryOp.POW, other, self)

    # =========================================================================
    # Bitwise operators
    # =========================================================================

    def __and__(self, other: Any) -> Binary:
        return binary(BinaryOp.AND, self, other)

    def __rand__(self, other: Any) -> Binary:
        return binary(BinaryOp.AND, other, self)

    def __or__(self, other: Any) -> Binary:
        return binary(BinaryOp.OR, self, other)

    def __ror__(self, other: Any) -> Binary:
        return binary(BinaryOp.OR, other, self)

    def __xor__(self, other: Any) -> Binary:
        return binary(BinaryOp.XOR, self, other)

    def __rxor__(self, other: Any) -> Binary:
        return binary(BinaryOp.XOR, other, self)

    def __lshift__(self, other: Any) -> Binary:
        return binary(BinaryOp.LSHIFT, self, other)

    def __rlshift__(self, other: Any) -> Binary:
        return binary(BinaryOp.LSHIFT, other, self)

    def __rshift__(self, other: Any) -> Binary:
        return binary(BinaryOp.RSHIFT, self, other)

    def __rrshift__(self, other: Any) -> Binary:
        return binary(BinaryOp.RSHIFT, other, self)

    # =========================================================================
    # Unary operators
    # =========================================================================

    def __neg__(self) -> Unary:
        return unary(UnaryOp.NEG, self)

    def __pos__(self) -> Unary:
        return unary(UnaryOp.POS, self)

    def __invert__(self) -> Unary:
        return unary(UnaryOp.INVERT, self)

    def __abs__(self) -> Unary:
        return unary(UnaryOp.ABS, self)

    # =========================================================================
    # Comparison operators
    # =========================================================================

    def __lt__(self, other: Any) -> Binary:
        return binary(BinaryOp.LT, self, other)

    def __le__(self, other: Any) -> Binary:
        return binary(BinaryOp.LE, self, other)

    def __gt__(self, other: Any) -> Binary:
        return binary(BinaryOp.GT, self, other)

    def __ge__(self, other: Any) -> Binary:
        return binary(BinaryOp.GE, self, other)

    def __eq__(self, other: object) -> Binary:  # type: ignore[override]
        return binary(BinaryOp.EQ, self, other)

    def __ne__(self, other: object) -> Binary:  # type: ignore[override]
        return binary(BinaryOp.NE, self, other)

    # =========================================================================
    # Logical operators (no short-circuit: both sides are always evaluated)
    # =========================================================================

    def logical_and(self, other: Any) -> Binary:
        """Build ``self && other``; evaluates to a bool."""
        return binary(BinaryOp.LOGICAL_AND, self, other)

    def logical_or(self, other: Any) -> Binary:
        """Build ``self || other``; evaluates to a bool."""
        return binary(BinaryOp.LOGICAL_OR, self, other)

    def logical_not(self) -> Unary:
        """Build ``!self``; evaluates to a bool."""
        return unary(UnaryOp.NOT, self)

    # =========================================================================
    # Item access
    # =========================================================================

    def __getitem__(self, key: Any) -> Binary:
        return binary(BinaryOp.GETITEM, self, key)


class Placeholder(Mapper, frozen=True, gc=False):
    """Selects the positional argument at ``index`` unchanged.

    Example:
        ```python
        Placeholder(1)('a', 'b', 'c')  # 'b'
        ```
    """

    index: int

    def __post_init__(self) -> None:
        if isinstance(self.index, bool) or not isinstance(self.index, int):
            msg = f'Placeholder index must be an int, got {type(self.index).__name__}'
            raise TypeError(msg)
        if self.index < 0:
            msg = f'Placeholder index must be non-negative, got {self.index}'
            raise ValueError(msg)

    @property
    def arity(self) -> int:
        return self.index + 1

    def _evaluate(self, args: tuple[Any, ...]) -> Any:
        try:
            return args[self.index]
        except IndexError:
            raise ArityError(self.arity, len(args), repr(self)) from None

    def __repr__(self) -> str:
        if self.index < _NAMED_PLACEHOLDERS:
            return f'_{self.index + 1}'
        return f'arg({self.index})'


class Value(Mapper, frozen=True, gc=False):
    """Returns a copy of the stored constant for any arguments, of any count.

    The constant is deep-copied on the way in and on every evaluation, so
    neither the caller that supplied it nor a consumer of a result can change
    what later evaluations return.

    Example:
        ```python
        node = val([])
        node().append(1)
        node()  # []
        ```
    """

    value: Any

    def __post_init__(self) -> None:
        force_setattr(self, 'value', copy.deepcopy(self.value))

    @property
    def arity(self) -> int:
        return 0

    def _evaluate(self, args: tuple[Any, ...]) -> Any:
        return copy.deepcopy(self.value)

    def __repr__(self) -> str:
        return f'val({self.value!r})'


class Unary(Mapper, frozen=True, gc=False):
    """Applies ``op`` to the result of ``operand``."""

    op: UnaryOp
    operand: Mapper
    # Derived from the operand in __post_init__; any value passed in is replaced.
    arity: int = -1

    def __post_init__(self) -> None:
        _check_op(self.op, UnaryOp)
        _check_node('operand', self.operand)
        force_setattr(self, 'arity', self.operand.arity)

    def _evaluate(self, args: tuple[Any, ...]) -> Any:
        return apply_unary(self.op, self.operand._evaluate(args))

    def __repr__(self) -> str:
        match self.op:
            case UnaryOp.ABS:
                return f'abs({self.operand!r})'
            case UnaryOp.NOT:
                return f'logical_not({self.operand!r})'
            case _:
                return f'({self.op.symbol}{self.operand!r})'


class Binary(Mapper, frozen=True, gc=False):
    """Applies ``op`` to the results of ``left`` and ``right``.

    Both children are evaluated with the same arguments, left first, and both
    are always evaluated, including for the logical operators.
    """

    op: BinaryOp
    left: Mapper
    right: Mapper
    # Derived from the children in __post_init__; any value passed in is replaced.
    arity: int = -1

    def __post_init__(self) -> None:
        _check_op(self.op, BinaryOp)
        _check_node('left', self.left)
        _check_node('right', self.right)
        force_setattr(self, 'arity', max(self.left.arity, self.right.arity))

    def _evaluate(self, args: tuple[Any, ...]) -> Any:
        left = self.left._evaluate(args)
        right = self.right._evaluate(args)
        return apply_binary(self.op, left, right)

    def __repr__(self) -> str:
        match self.op:
            case BinaryOp.GETITEM:
                return f'{self.left!r}[{self.right!r}]'
            case BinaryOp.LOGICAL_AND | BinaryOp.LOGICAL_OR:
                return f'{self.op.value}({self.left!r}, {self.right!r})'
            case _:
                return f'({self.left!r} {self.op.symbol} {self.right!r})'


def is_mapper(value: object) -> bool:
    """Check whether a value is an expression node."""
    return isinstance(value, Mapper)


def wrap(value: Any) -> Mapper:
    """Normalize an operand: nodes pass through, anything else becomes a Value.

    Example:
        ```python
        wrap(_1) is _1  # True
        wrap(5)         # val(5)
        ```
    """
    if isinstance(value, Mapper):
        return value
    return Value(value)


def unary(op: UnaryOp | str, operand: Any) -> Unary:
    """Build a unary composite node.

    Args:
        op: Operator tag, its value ('neg') or its symbol ('-').
        operand: Child node, or a plain value to wrap.

    Raises:
        ValueError: If ``op`` names no unary operator.
    """
    return Unary(op=UnaryOp(op), operand=wrap(operand))


def binary(op: BinaryOp | str, left: Any, right: Any) -> Binary:
    """Build a binary composite node.

    Args:
        op: Operator tag, its value ('add') or its symbol ('+').
        left: Left child node, or a plain value to wrap.
        right: Right child node, or a plain value to wrap.

    Raises:
        ValueError: If ``op`` names no binary operator.
    """
    return Binary(op=BinaryOp(op), left=wrap(left), right=wrap(right))


def _check_op(op: object, kind: type[UnaryOp] | type[BinaryOp]) -> None:
    if not isinstance(op, kind):
        msg = f'op must be a {kind.__name__}, got {op!r}; use unary() / binary() to look it up by name'
        raise TypeError(msg)


def _check_node(name: str, value: object) -> None:
    if not isinstance(value, Mapper):
        msg = f'{name} must be a Mapper, got {type(value).__name__}; use wrap() for plain values'
        raise TypeError(msg)


def _reject(mapper: Mapper, required: int, given: int) -> None:
    expr = repr(mapper)
    get_logger(__name__).warning('mapper.arity_rejected', expr=expr, required=required, given=given)
    raise ArityError(required, given, expr)
