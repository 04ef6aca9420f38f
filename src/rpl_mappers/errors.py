"""Mapper error types, raised when an expression is built or evaluated wrongly."""

from __future__ import annotations

__all__ = [
    'ArityError',
    'MapperError',
    'MapperTruthError',
    'OperandTypeError',
]


class MapperError(Exception):
    """Base class for every error raised by rpl_mappers."""


class ArityError(MapperError, TypeError):
    """Mapper was given fewer positional arguments than its placeholders need."""

    def __init__(self, required: int, given: int, expr: str | None = None) -> None:
        self.required = required
        self.given = given
        self.expr = expr
        msg = f'Mapper needs at least {required} argument(s), got {given}'
        if expr:
            msg = f'{expr}: {msg}'
        super().__init__(msg)


class OperandTypeError(MapperError, TypeError):
    """Operator was applied to evaluated operands that do not support it."""

    def __init__(self, op: str, *operand_types: type) -> None:
        self.op = op
        self.operand_types = operand_types
        names = ', '.join(t.__name__ for t in operand_types)
        super().__init__(f"Unsupported operand type(s) for '{op}': {names}")


class MapperTruthError(MapperError, TypeError):
    """Mapper was used where Python needs a truth value."""

    def __init__(self, expr: str | None = None) -> None:
        self.expr = expr
        msg = (
            'Mapper has no truth value; use & | ~ or '
            'logical_and() / logical_or() / logical_not() instead of and / or / not'
        )
        if expr:
            msg = f'{expr}: {msg}'
        super().__init__(msg)
