"""UrlSet value object.

Represents an endpoint field that the registry lets authors write either
as a single string or as an ordered list of strings.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..exceptions import UrlSetTypeError


def _json_type_name(value: Any) -> str:
    """Name a decoded JSON value the way a registry author would."""
    names = {
        bool: "bool",
        int: "number",
        float: "number",
        str: "string",
        list: "list",
        dict: "object",
    }
    return names.get(type(value), type(value).__name__)


class UrlSetKind(Enum):
    """Shape the URL field had in the source document."""

    ABSENT = "absent"
    SINGLE = "single"
    MULTIPLE = "multiple"
    INVALID = "invalid"


@dataclass(frozen=True)
class UrlSet:
    """Immutable tagged URL set.

    Attributes:
        kind: Shape of the source value
        urls: URLs in source order (empty for ABSENT and INVALID)
        error: Type mismatch description for INVALID

    Example:
        >>> UrlSet.parse("http://a").as_list()
        ['http://a']
        >>> UrlSet.parse(["http://a", "http://b"]).as_list()
        ['http://a', 'http://b']
        >>> UrlSet.parse(None).as_list()
        []
    """

    kind: UrlSetKind
    urls: tuple[str, ...] = ()
    error: str = ""

    @classmethod
    def parse(cls, raw: Any) -> "UrlSet":
        """Build a UrlSet from a decoded JSON value.

        Never raises; a value of the wrong shape yields an INVALID set
        whose error is raised by as_list().
        """
        if raw is None:
            return cls(UrlSetKind.ABSENT)
        if isinstance(raw, str):
            return cls(UrlSetKind.SINGLE, (raw,))
        if isinstance(raw, list):
            for item in raw:
                if not isinstance(item, str):
                    return cls(
                        UrlSetKind.INVALID,
                        error=f"url must be string, got {_json_type_name(item)}",
                    )
            return cls(UrlSetKind.MULTIPLE, tuple(raw))
        return cls(
            UrlSetKind.INVALID,
            error=f"url must be string or list of strings, got {_json_type_name(raw)}",
        )

    @property
    def is_valid_shape(self) -> bool:
        """Return True unless the source value had the wrong type."""
        return self.kind is not UrlSetKind.INVALID

    def as_list(self) -> list[str]:
        """Return the URLs as a list in source order.

        Raises:
            UrlSetTypeError: If the source value was not a string or a
                list of strings
        """
        if self.kind is UrlSetKind.INVALID:
            raise UrlSetTypeError(self.error)
        return list(self.urls)

    def __len__(self) -> int:
        """Number of URLs."""
        return len(self.urls)
