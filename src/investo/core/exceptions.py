"""Custom exceptions for investo."""


class InvestoError(Exception):
    """Base exception."""
    pass


class InvalidArgumentError(InvestoError, ValueError):
    """An input falls outside the domain a formula accepts."""
    pass
