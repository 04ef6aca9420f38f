"""Mapper configuration: MapperConfig, environment detection, and initialization."""

from __future__ import annotations

import os
from dataclasses import dataclass

from rpl_mappers._logging import configure_logging, get_logger

__all__ = [
    'MapperConfig',
    'get_config',
    'init',
    'reset_config',
]

_TRUE = frozenset({'1', 'true', 'yes', 'on'})
_FALSE = frozenset({'0', 'false', 'no', 'off'})


@dataclass(frozen=True)
class MapperConfig:
    """Configuration for mapper evaluation.

    With ``check_arity`` off, a call with too few arguments is no longer
    rejected before evaluation: children run left to right until the first
    out-of-range placeholder raises ArityError, so side effects of the
    children evaluated before it have already happened.

    Attributes:
        check_arity: Validate the argument count at the root of each evaluation,
            before any child is evaluated.
        trace: Log every root evaluation at DEBUG level.
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
    """

    check_arity: bool = True
    trace: bool = False
    log_level: str | None = None


# Global configuration (set by init() or resolved lazily by get_config())
_config: MapperConfig | None = None


def _env_flag(name: str, default: bool) -> bool:
    """Read a boolean flag from the environment.

    Unknown values are logged and fall back to ``default``.
    """
    raw = os.environ.get(name, '').strip().lower()
    if not raw:
        return default
    if raw in _TRUE:
        return True
    if raw in _FALSE:
        return False
    get_logger(__name__).warning('config.unknown_flag', variable=name, value=raw, default=default)
    return default


def _detect_log_level() -> str | None:
    return os.environ.get('RPL_MAPPERS_LOG_LEVEL') or None


def _config_from_env() -> MapperConfig:
    return MapperConfig(
        check_arity=_env_flag('RPL_MAPPERS_CHECK_ARITY', default=True),
        trace=_env_flag('RPL_MAPPERS_TRACE', default=False),
        log_level=_detect_log_level(),
    )


def init(
    check_arity: bool | None = None,
    trace: bool | None = None,
    log_level: str | None = None,
) -> MapperConfig:
    """Initialize mapper configuration.

    Unspecified arguments are read from ``RPL_MAPPERS_CHECK_ARITY``,
    ``RPL_MAPPERS_TRACE`` and ``RPL_MAPPERS_LOG_LEVEL``.

    Args:
        check_arity: Reject evaluations with too few arguments before evaluating.
        trace: Log each root evaluation.
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.

    Returns:
        The MapperConfig that was set.

    Example:
        ```python
        from rpl_mappers import init

        init(trace=True, log_level='DEBUG')
        ```
    """
    global _config  # noqa: PLW0603

    env = _config_from_env()
    _config = MapperConfig(
        check_arity=env.check_arity if check_arity is None else check_arity,
        trace=env.trace if trace is None else trace,
        log_level=env.log_level if log_level is None else log_level,
    )

    if _config.log_level is not None:
        configure_logging(_config.log_level)

    get_logger(__name__).debug(
        'mappers.initialized',
        check_arity=_config.check_arity,
        trace=_config.trace,
        log_level=_config.log_level,
    )
    return _config


def get_config() -> MapperConfig:
    """Get the active configuration.

    Mappers are usable without calling init(); the first call resolves the
    configuration from the environment and keeps it.
    """
    global _config  # noqa: PLW0603

    if _config is None:
        _config = _config_from_env()
    return _config


def reset_config() -> None:
    """Forget the active configuration so the next get_config() re-reads the environment."""
    global _config  # noqa: PLW0603

    _config = None
