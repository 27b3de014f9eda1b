"""
Exceptions raised by the minefield model and the detector.

Every error here is a programming-contract violation rather than an
environmental failure, so none of them is meant to be retried.
"""


class MinefieldError(Exception):
    """Base class for all minefield errors."""


class InvalidConfiguration(MinefieldError, ValueError):
    """Field parameters that cannot produce a playable field."""


class ContractViolation(MinefieldError, RuntimeError):
    """An operation was called in a state its contract does not allow."""


class ExhaustedFallback(ContractViolation):
    """No closed, unflagged cell was left to guess while the game was running."""
