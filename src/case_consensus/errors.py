"""Exceptions raised by the aggregation core."""


class EmptyInputError(ValueError):
    """Raised when statistics are requested over an empty weight distribution."""
