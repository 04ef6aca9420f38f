"""Named argument placeholders and the explicit constant wrapper.

``_1`` … ``_20`` select positional arguments 0 … 19:

    (_1 - _2)(10, 3)   → 7
    _3('a', 'b', 'c')  → 'c'

Example:
    ```python
    from rpl_mappers import _1, _2, val

    (_1 * _2)(6, 7)    # 42
    (_1 + val(5))(1)   # 6, same as _1 + 5
    val('x')()         # 'x'
    ```
"""

from __future__ import annotations

from typing import Any

from rpl_mappers.mapper import Placeholder, Value

__all__ = [
    'ARGUMENTS',
    '_1',
    '_2',
    '_3',
    '_4',
    '_5',
    '_6',
    '_7',
    '_8',
    '_9',
    '_10',
    '_11',
    '_12',
    '_13',
    '_14',
    '_15',
    '_16',
    '_17',
    '_18',
    '_19',
    '_20',
    'arg',
    'val',
]


def arg(index: int) -> Placeholder:
    """Create a placeholder selecting the positional argument at ``index`` (0-based).

    Raises:
        ValueError: If ``index`` is negative.
    """
    return Placeholder(index)


def val(value: Any) -> Value:
    """Wrap a constant into a mapper that ignores its arguments.

    Operators wrap plain operands automatically; use val() where a mapper is
    needed on its own, e.g. as a constant transform callback.
    """
    return Value(value)


_1: Placeholder = Placeholder(0)
_2: Placeholder = Placeholder(1)
_3: Placeholder = Placeholder(2)
_4: Placeholder = Placeholder(3)
_5: Placeholder = Placeholder(4)
_6: Placeholder = Placeholder(5)
_7: Placeholder = Placeholder(6)
_8: Placeholder = Placeholder(7)
_9: Placeholder = Placeholder(8)
_10: Placeholder = Placeholder(9)
_11: Placeholder = Placeholder(10)
_12: Placeholder = Placeholder(11)
_13: Placeholder = Placeholder(12)
_14: Placeholder = Placeholder(13)
_15: Placeholder = Placeholder(14)
_16: Placeholder = Placeholder(15)
_17: Placeholder = Placeholder(16)
_18: Placeholder = Placeholder(17)
_19: Placeholder = Placeholder(18)
_20: Placeholder = Placeholder(19)

ARGUMENTS: tuple[Placeholder, ...] = (
    _1, _2, _3, _4, _5, _6, _7, _8, _9, _10,
    _11, _12, _13, _14, _15, _16, _17, _18, _19, _20,
)  # fmt: skip
