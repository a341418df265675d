"""Custom exceptions for the sequential pattern package."""


class SequentialMiningError(Exception):
    """Base exception for all sequential pattern errors."""
    pass


class InvalidParameterError(SequentialMiningError):
    """Raised when invalid parameters are provided."""
    pass


class InvalidSequenceCountError(InvalidParameterError, ArithmeticError):
    """Raised when a relative support is requested for a non-positive sequence count."""
    pass


class SupportNotComputedError(SequentialMiningError):
    """Raised when support is queried before the sequence IDs were assigned."""
    pass
