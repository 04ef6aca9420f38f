"""rpl-mappers: composable argument mappers for transform and filter callbacks.

A mapper is an immutable expression over positional arguments, built with
ordinary operator syntax and evaluated by calling it:

    (_1 + _2)(3, 4)                    → 7
    ((_1 + _2) * 3)(2, 4, 'ignored')   → 18
    (_1 > 10).logical_and(_2 < 5)      → predicate over two arguments

Flat imports (preferred):
    from rpl_mappers import _1, _2, val, arg, wrap, logical_and

Submodule imports (for organization):
    from rpl_mappers.mapper import Mapper, Placeholder, Value, Unary, Binary
    from rpl_mappers.ops import BinaryOp, UnaryOp
    from rpl_mappers.combinators import add, gt, logical_not
"""

# Configuration, logging and event hooks
from rpl_mappers._config import MapperConfig, get_config, init, reset_config
from rpl_mappers._logging import (
    add_event_hook,
    clear_event_hooks,
    configure_logging,
    get_logger,
    remove_event_hook,
)

# Named builders
from rpl_mappers.combinators import logical_and, logical_not, logical_or

# Errors
from rpl_mappers.errors import ArityError, MapperError, MapperTruthError, OperandTypeError

# Nodes
from rpl_mappers.mapper import (
    Binary,
    Mapper,
    Placeholder,
    Unary,
    Value,
    binary,
    is_mapper,
    unary,
    wrap,
)
from rpl_mappers.ops import BinaryOp, UnaryOp

# Placeholders
from rpl_mappers.placeholders import (
    ARGUMENTS,
    _1,
    _2,
    _3,
    _4,
    _5,
    _6,
    _7,
    _8,
    _9,
    _10,
    _11,
    _12,
    _13,
    _14,
    _15,
    _16,
    _17,
    _18,
    _19,
    _20,
    arg,
    val,
)

__all__ = [
    'ARGUMENTS',
    # Errors
    'ArityError',
    # Nodes
    'Binary',
    'BinaryOp',
    'Mapper',
    # Configuration
    'MapperConfig',
    'MapperError',
    'MapperTruthError',
    'OperandTypeError',
    'Placeholder',
    'Unary',
    'UnaryOp',
    'Value',
    # Placeholders
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
    # Logging
    'add_event_hook',
    'arg',
    'binary',
    'clear_event_hooks',
    'configure_logging',
    'get_config',
    'get_logger',
    'init',
    'is_mapper',
    # Named builders
    'logical_and',
    'logical_not',
    'logical_or',
    'remove_event_hook',
    'reset_config',
    'unary',
    'val',
    'wrap',
]
