"""
Exceptions raised by the password engine.
"""


class PassgenError(Exception):
    """Base class for all passgen errors."""


class InvalidArgument(PassgenError, ValueError):
    """A length, pool or randomness source violates its precondition."""
