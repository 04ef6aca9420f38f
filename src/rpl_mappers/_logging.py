"""Logging for mapper events.

Mappers log through structlog loggers bound to the stdlib ``rpl_mappers``
logger hierarchy, so whatever logging setup the host application has applies
to them. The package logger carries a NullHandler: until someone configures
logging, nothing is printed.

Events:

    mapper.arity_rejected   warning  expr, required, given
    mapper.evaluated        debug    expr, given, result (trace only)
    mappers.initialized     debug    check_arity, trace, log_level
    config.unknown_flag     warning  variable, value, default

Event hooks see every event that passes the level filter, whether or not a
handler is installed, which lets an application count rejected mappers
without parsing log output:

    events = []
    add_event_hook(events.append)
    (_1 + _3)(1)   # raises ArityError; events[-1]['event'] == 'mapper.arity_rejected'
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from collections.abc import Callable

    EventHook = Callable[[dict[str, Any]], None]

__all__ = [
    'add_event_hook',
    'clear_event_hooks',
    'configure_logging',
    'get_logger',
    'remove_event_hook',
]

_PACKAGE = 'rpl_mappers'

logging.getLogger(_PACKAGE).addHandler(logging.NullHandler())

_event_hooks: list[EventHook] = []

# Handler installed by configure_logging(), replaced on reconfiguration.
_handler: logging.Handler | None = None


def add_event_hook(hook: EventHook) -> None:
    """Call ``hook`` with a copy of every mapper event that passes the level filter."""
    _event_hooks.append(hook)


def remove_event_hook(hook: EventHook) -> None:
    """Unregister a hook; unknown hooks are ignored."""
    if hook in _event_hooks:
        _event_hooks.remove(hook)


def clear_event_hooks() -> None:
    _event_hooks.clear()


def _dispatch_to_hooks(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    for hook in tuple(_event_hooks):
        try:
            hook(dict(event_dict))
        except Exception:  # noqa: BLE001, S112
            continue  # hooks observe; they never break an evaluation
    return event_dict


_EVENT_PROCESSORS: list[Any] = [
    structlog.stdlib.filter_by_level,
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    _dispatch_to_hooks,
    structlog.processors.TimeStamper(fmt='iso'),
    structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
]


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger writing to the stdlib logger ``name``.

    Args:
        name: Stdlib logger name, ``rpl_mappers`` when omitted.

    Returns:
        A lazily bound structlog ``BoundLogger``.
    """
    return structlog.wrap_logger(
        logging.getLogger(name or _PACKAGE),
        processors=_EVENT_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def configure_logging(level: str = 'INFO', *, json_output: bool = True) -> None:
    """Render mapper events (and other stdlib records) to stderr.

    Installs one handler on the root logger, replacing the one a previous call
    installed; handlers added by the host are left in place.

    Args:
        level: Root logging level ("DEBUG", "INFO", "WARNING", ...).
        json_output: Emit JSON lines; otherwise use structlog's console renderer.
    """
    global _handler  # noqa: PLW0603

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt='iso'),
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    root = logging.getLogger()
    if _handler is not None:
        root.removeHandler(_handler)
    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(formatter)
    root.addHandler(_handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
