"""
Exceptions raised by terragen.

Everything derives from NoiseError so callers (and the CLI) can catch the
whole family in one place.
"""


class NoiseError(Exception):
    """Base class for all terragen errors."""


class InvalidArgument(NoiseError, TypeError):
    """A setter received a value of the wrong kind."""

    def __init__(self, field: str, expected: str, value) -> None:
        self.field = field
        self.received = type(value).__name__
        super().__init__(f"{field} must be {expected}, {self.received} given")


class ConfigurationError(NoiseError, RuntimeError):
    """Generation was requested before the required options were set."""


class FrozenGridError(NoiseError):
    """A TerraGrid was mutated after its generation call finished."""
