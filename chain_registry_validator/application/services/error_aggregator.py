"""Error aggregation for a validation run.

Collects violations with the group/chain/file they were found in, writes
each one to stderr as it is found, and prints the end-of-run summary.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import Optional, TextIO

from ...domain.exceptions import StopValidation

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Violation:
    """One reported problem, with the context it was found in.

    Attributes:
        group: Display name of the validation group
        message: Human-readable description of the problem
        chain: Chain directory name, if a chain was being validated
        file: Chain record path, if one was being validated
    """

    group: str
    message: str
    chain: Optional[str] = None
    file: Optional[str] = None

    @property
    def headline(self) -> str:
        """Report line without the file suffix.

        Example:
            >>> Violation("Mainnet", "Bad chain id: Foo", chain="foo").headline
            'ERR: [group:Mainnet] [chain:foo] Validation failed! Bad chain id: Foo'
        """
        parts = ["ERR:", f"[group:{self.group}]"]
        if self.chain:
            parts.append(f"[chain:{self.chain}]")
        parts.append("Validation failed!")
        parts.append(self.message)
        return " ".join(parts)

    def format(self) -> str:
        """Single-line form stored for the end-of-run summary."""
        if self.file:
            return f"{self.headline}, File: {self.file}"
        return self.headline

    def __str__(self) -> str:
        return self.format()


class ErrorAggregator:
    """Accumulates violations for a whole run.

    The aggregator tracks the working group, chain and file so callers
    only pass the message. Under stop-on-first the first violation raises
    StopValidation after being reported.

    Example:
        >>> aggregator = ErrorAggregator()
        >>> aggregator.begin_group("Mainnet")
        >>> aggregator.begin_chain("dymension")
        >>> aggregator.mark("Bad chain name: Dymension ")
        >>> aggregator.count
        1
    """

    def __init__(self, stop_on_first: bool = False, stream: Optional[TextIO] = None) -> None:
        """Initialize aggregator.

        Args:
            stop_on_first: Raise StopValidation on the first violation
            stream: Output stream for reports (default: sys.stderr at write time)
        """
        self.stop_on_first = stop_on_first
        self._stream = stream
        self._violations: list[Violation] = []
        self._group = ""
        self._chain: Optional[str] = None
        self._file: Optional[str] = None

    @property
    def stream(self) -> TextIO:
        """Stream reports are written to."""
        return self._stream if self._stream is not None else sys.stderr

    def begin_group(self, group: str) -> None:
        """Start reporting for a new group; clears chain and file."""
        self._group = group
        self._chain = None
        self._file = None

    def begin_chain(self, chain: str) -> None:
        """Start reporting for a new chain; clears the working file."""
        self._chain = chain
        self._file = None

    def set_file(self, file: object) -> None:
        """Attach the chain record path to subsequent violations."""
        self._file = str(file) if file is not None else None

    def mark(self, message: str) -> Violation:
        """Record and report a violation.

        Args:
            message: Human-readable description of the problem

        Returns:
            The recorded violation

        Raises:
            StopValidation: If stop-on-first is enabled
        """
        violation = Violation(
            group=self._group, message=message, chain=self._chain, file=self._file
        )
        self._violations.append(violation)

        out = self.stream
        print(violation.headline, file=out)
        if violation.file:
            print("File:", violation.file, file=out)
        print(file=out)

        _LOGGER.debug("Violation #%d recorded: %s", len(self._violations), message)

        if self.stop_on_first:
            raise StopValidation(violation)
        return violation

    @property
    def violations(self) -> list[Violation]:
        """Recorded violations, in report order."""
        return list(self._violations)

    @property
    def count(self) -> int:
        """Number of recorded violations."""
        return len(self._violations)

    @property
    def has_violations(self) -> bool:
        """Whether anything was recorded."""
        return bool(self._violations)

    def print_summary(self) -> None:
        """Print the end-of-run list of violations and the total."""
        if not self._violations:
            return
        out = self.stream
        print("Errors:", file=out)
        for violation in self._violations:
            print(">", violation.format(), file=out)
        print(f"Total {len(self._violations)} issues found!", file=out)
