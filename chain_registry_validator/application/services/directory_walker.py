"""Registry directory walker.

Layout: ``<repo>/<tier>/<chain>/<chain>.json``. Chains are visited in
sorted directory-name order; nested directories inside a chain (assets)
are never treated as chains.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from ...const import RECORD_SUFFIX
from ...domain.exceptions import StructuralError
from ...domain.value_objects import ValidateTarget

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChainEntry:
    """One chain directory inside a group."""

    name: str
    directory: Path

    @property
    def record_path(self) -> Path:
        """Canonical record file, named after the directory."""
        return self.directory / f"{self.name}{RECORD_SUFFIX}"


class DirectoryWalker:
    """Enumerates the groups and chains of a registry checkout."""

    def __init__(self, repo_dir: Path | str) -> None:
        """Initialize walker.

        Args:
            repo_dir: Root of the registry checkout
        """
        self.repo_dir = Path(repo_dir)

    def check_repository(self) -> None:
        """Ensure the registry root exists and is a directory.

        Raises:
            StructuralError: If the path is missing or not a directory
        """
        if not self.repo_dir.exists():
            raise StructuralError(
                "Provided 'chain-registry' repository path does not exists"
            )
        if not self.repo_dir.is_dir():
            raise StructuralError(
                "Provided 'chain-registry' repository path is not a directory"
            )

    def group_directory(self, target: ValidateTarget) -> Path:
        """Resolve and check the directory of one tier.

        Raises:
            StructuralError: If the tier directory is missing or not a directory
        """
        sub_dir = self.repo_dir / target.sub_directory_name
        if not sub_dir.exists():
            raise StructuralError(
                f"Missing required directory {target.sub_directory_name} at {sub_dir}"
            )
        if not sub_dir.is_dir():
            raise StructuralError(f"Expected target path is not a directory: {sub_dir}")
        return sub_dir

    def iter_chains(self, target: ValidateTarget) -> Iterator[ChainEntry]:
        """Yield the chain directories of a tier in sorted order.

        Raises:
            StructuralError: If the tier directory is missing or not a directory
        """
        sub_dir = self.group_directory(target)
        children = sorted(
            (child for child in sub_dir.iterdir() if child.is_dir()),
            key=lambda child: child.name,
        )
        _LOGGER.debug("Found %d chain directories in %s", len(children), sub_dir)
        for child in children:
            yield ChainEntry(name=child.name, directory=child)
