"""Value Objects for the chain registry domain.

Value Objects are immutable domain primitives that:
- Have no identity (equality based on value, not reference)
- Are immutable (cannot be changed after creation)
- Encapsulate related data and behavior
"""

from .url_set import UrlSet, UrlSetKind
from .validate_target import ValidateTarget

__all__ = [
    "UrlSet",
    "UrlSetKind",
    "ValidateTarget",
]
