"""Use cases for the chain registry validator.

Each use case has a single public method (execute), accepts its
collaborators through the constructor and returns a result DTO.
"""

from .validate_registry_result import ValidateRegistryResult
from .validate_registry_use_case import ValidateRegistryUseCase

__all__ = [
    "ValidateRegistryResult",
    "ValidateRegistryUseCase",
]
