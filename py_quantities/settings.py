"""Global settings of the py_quantities library"""
from py_quantities.logger import logger

__all__ = ('Settings',)


class Settings:  # pylint: disable=too-few-public-methods
    """Global settings class of the py_quantities library"""

    _DEFAULT_PRECISION_FACTORY: int = 2
    DEFAULT_PRECISION: int = _DEFAULT_PRECISION_FACTORY

    @classmethod
    def set_default_precision(cls, value: int):
        """
        DEFAULT_PRECISION setter
        :param value: int number of decimals `QuantityValue.as_string()` renders by default
        """
        cls.validate_precision(value, "DEFAULT_PRECISION")
        if value != cls.DEFAULT_PRECISION:
            logger.debug(f"Settings.DEFAULT_PRECISION changed from {cls.DEFAULT_PRECISION} to {value}")
        cls.DEFAULT_PRECISION = value

    @staticmethod
    def validate_precision(value: int, name: str = "precision") -> int:
        """Check that `value` is a usable number of decimals.

        Raises:
            TypeError: If `value` is not an int (bools are rejected).
            ValueError: If `value` is negative.
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"{name} has to be an int, got {type(value).__name__}")
        if value < 0:
            raise ValueError(f"{name} can't be negative, got {value}")
        return value

    @classmethod
    def get_default_precision(cls) -> int:
        return cls.DEFAULT_PRECISION

    @classmethod
    def restore_defaults(cls):
        cls.DEFAULT_PRECISION = cls._DEFAULT_PRECISION_FACTORY
