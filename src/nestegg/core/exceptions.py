"""
nestegg exception hierarchy.

All nestegg exceptions inherit from NestEggError, making it easy for consumers
to catch library-level errors while still distinguishing specific failure modes.
"""


class NestEggError(Exception):
    """Base exception class for all nestegg errors."""


class ConfigurationError(NestEggError):
    """Raised for configuration errors (missing keys, invalid values)."""


class InvalidInputError(NestEggError, ValueError):
    """Raised when a calculator input falls outside its documented domain.

    Attributes:
        field: Name of the offending parameter (e.g. "home_price").
        value: The rejected value.
    """

    def __init__(self, field: str, value: object, reason: str):
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {field}={value!r}: {reason}")
