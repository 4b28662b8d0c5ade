"""Library logger of py_quantities.

Conversion overflows, ignored configuration values and preferred-unit problems are
reported through the `py_quantities` logger. Its verbosity is set with
`set_log_level()` or with the `log_level` key of a `.pyquantities.toml` file:

    [py_quantities]
    log_level = "WARNING"
"""
import logging
from typing import Union

__all__ = ('logger',
           'set_log_level',
           'DEFAULT_LOG_LEVEL',
)

DEFAULT_LOG_LEVEL: int = logging.INFO

console_handler = logging.StreamHandler()
console_handler.setFormatter(logging.Formatter("%(levelname)s:%(name)s:%(message)s"))

logger: logging.Logger = logging.getLogger('py_quantities')
logger.addHandler(console_handler)
logger.setLevel(DEFAULT_LOG_LEVEL)


def set_log_level(level: Union[int, str]) -> int:
    """Set the verbosity of the library logger.

    Args:
        level: A `logging` level number or name, e.g. `logging.DEBUG` or `"warning"`.

    Returns:
        The numeric level applied.

    Raises:
        ValueError: If `level` is not a known logging level.
        TypeError: If `level` is neither an int nor a str.

    Examples:
        >>> set_log_level("warning")
        30
        >>> set_log_level(DEFAULT_LOG_LEVEL)
        20
    """
    if isinstance(level, bool) or not isinstance(level, (int, str)):
        raise TypeError(f"log level has to be an int or a str, got {type(level).__name__}")
    if isinstance(level, str):
        numeric = logging.getLevelName(level.strip().upper())
        if not isinstance(numeric, int):
            raise ValueError(f"Unknown log level {level!r}")
        level = numeric
    elif level not in (logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR, logging.CRITICAL):
        raise ValueError(f"Unknown log level {level!r}")
    logger.setLevel(level)
    return level
