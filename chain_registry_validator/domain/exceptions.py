"""Custom exceptions for the chain registry validator.

This module defines domain-specific exceptions that represent expected
error conditions while walking and decoding a chain registry.
"""


class ChainRegistryError(Exception):
    """Base class for all chain registry validator errors."""


class StructuralError(ChainRegistryError):
    """Registry layout is unusable (missing or unreadable directory).

    Raised when a required directory of the registry does not exist or is
    not a directory. Validation cannot continue without it, so the whole
    run is aborted.
    """


class RecordDecodeError(ChainRegistryError):
    """Chain record could not be decoded.

    Raised for malformed JSON and for JSON values of the wrong type
    (for example a number where ``chainId`` expects a string).

    Example:
        >>> raise RecordDecodeError("expected str for dictionary value @ data['chainId']")
    """


class UrlSetTypeError(ChainRegistryError):
    """URL field holds neither a string nor a list of strings."""


class ConfigError(ChainRegistryError):
    """Settings file is unreadable or does not match the settings schema."""


class StopValidation(ChainRegistryError):
    """Raised on the first violation when stop-on-error is enabled.

    Carries the violation that triggered the stop so the caller can
    report it before exiting.
    """

    def __init__(self, violation) -> None:
        """Initialize with the triggering violation.

        Args:
            violation: The Violation that ended the run
        """
        super().__init__(str(violation))
        self.violation = violation
