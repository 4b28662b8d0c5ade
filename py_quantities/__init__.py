"""Physical quantities tagged with units, convertible within their quantity family."""

import importlib.metadata

__version__ = importlib.metadata.version("py_quantities")

# Standard library imports
import importlib.resources
import os
import sys

# Third-party imports
from typing_extensions import Dict, Optional

# Local imports
from .logger import logger as log, set_log_level
from .settings import Settings
from .unit import QuantityUnit, PreferredUnits

if sys.version_info[:2] < (3, 11):
    import tomli as tomllib
else:
    import tomllib

_CONFIG_KEYS = ('precision', 'log_level', 'preferred_units')


def _load_config(filepath: Optional[str] = None, suppress_warnings: bool = False) -> None:
    """Load configuration from a .pyquantities.toml file.

    Args:
        filepath: Path to configuration file. If None, searches for .pyquantities.toml or pyquantities.toml
        suppress_warnings: If True, suppress warning messages
    """
    def find_config_toml(start_dir: Optional[str] = None) -> Optional[str]:
        """Search for the config file starting from `start_dir` (default: current directory) up to the root."""
        current_dir = os.path.abspath(start_dir or os.getcwd())
        while True:
            config_paths = [
                os.path.join(current_dir, '.pyquantities.toml'),
                os.path.join(current_dir, 'pyquantities.toml'),
            ]
            for config_path in config_paths:
                if os.path.exists(config_path):
                    return os.path.abspath(config_path)

            parent_dir = os.path.dirname(current_dir)
            if parent_dir == current_dir:
                return None
            current_dir = parent_dir

    if filepath is None:
        if (filepath := find_config_toml()) is None:
            filepath = find_config_toml(os.path.dirname(__file__))

    if filepath is not None:
        log.debug(f"Found {os.path.basename(filepath)} at {os.path.dirname(filepath)}")

        with open(filepath, "rb") as fp:
            _config = tomllib.load(fp)

            if _section := _config.get('py_quantities'):
                if (precision := _section.get('precision')) is not None:
                    try:
                        Settings.set_default_precision(precision)
                    except (TypeError, ValueError) as exc:
                        log.warning(f"Config `py_quantities.precision` ignored: {exc}")
                if (log_level := _section.get('log_level')) is not None:
                    try:
                        set_log_level(log_level)
                    except (TypeError, ValueError) as exc:
                        log.warning(f"Config `py_quantities.log_level` ignored: {exc}")
                if preferred_units := _section.get('preferred_units'):
                    PreferredUnits.set(**preferred_units)
                if not suppress_warnings and not any(key in _section for key in _CONFIG_KEYS):
                    log.warning(f"Config `py_quantities` section sets none of {', '.join(_CONFIG_KEYS)}")
            elif not suppress_warnings:
                log.warning("Config has no `py_quantities` section")

    log.debug("Settings and PreferredUnits load success")


def _basic_config(filename: Optional[str] = None,
                  preferred_units: Optional[Dict[str, QuantityUnit]] = None,
                  precision: Optional[int] = None,
                  suppress_warnings: bool = False) -> None:
    """Load settings and preferred units from file or from arguments.

    Args:
        filename: Configuration file path
        preferred_units: Dictionary of preferred units
        precision: Default number of decimals for `QuantityValue.as_string()`
        suppress_warnings: If True, suppress warning messages

    Raises:
        ValueError: If a filename and explicit settings are both provided
    """
    if filename and (preferred_units or precision is not None):
        raise ValueError("Can't use explicit settings and config file at same time")
    if not filename and (preferred_units or precision is not None):
        if preferred_units:
            PreferredUnits.set(**preferred_units)
        if precision is not None:
            Settings.set_default_precision(precision)
    else:
        # trying to load definitions from pyquantities.toml
        _load_config(filename, suppress_warnings)


def _resolve_resource_path(path: str) -> str:
    """Resolve a resource path relative to the package."""
    return str(importlib.resources.files('py_quantities').joinpath(path))


def _load_imperial_units() -> None:
    """Load imperial unit preferences."""
    _basic_config(_resolve_resource_path('assets/.pyquantities-imperial.toml'), suppress_warnings=True)


def _load_metric_units() -> None:
    """Load metric unit preferences."""
    _basic_config(_resolve_resource_path('assets/.pyquantities-metric.toml'), suppress_warnings=True)


loadImperialUnits = _load_imperial_units
loadMetricUnits = _load_metric_units

basicConfig = _basic_config

basicConfig()


from .exceptions import QuantityTypeError, QuantityConversionError, UnitUnsetError, UnitAliasError
from .logger import logger, DEFAULT_LOG_LEVEL
from .unit import Quantity, UnitProps, UnitAliases, Distance, Mass, Time, Velocity
from .value import QuantityValue, INT32_MAX, INT32_MIN

# build __all__ from global symbols
_SKIP_GLOBALS = {
    "__name__", "__doc__", "__package__", "__loader__", "__spec__",
    "__file__", "__cached__", "__builtins__", "__path__",
    "tomllib", "sys", "os", "importlib", "Dict", "Optional",
    # Skip submodules
    "exceptions", "settings", "unit", "value",
    "log",
    "_load_config", "_basic_config", "_resolve_resource_path",
    "_load_imperial_units", "_load_metric_units"
}
__all__ = [
    name for name in globals()
    if not name.startswith("_") and name not in _SKIP_GLOBALS
]
