"""ValidateRegistryUseCase for chain registry checkouts.

This use case orchestrates a whole validation run:
1. Check the registry root
2. Walk each selected tier in order
3. Load every chain record
4. Run the rule battery and report violations
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

from ...config import ValidatorSettings
from ...domain.exceptions import RecordDecodeError, StructuralError
from ...domain.value_objects import ValidateTarget
from ...record_loader import load_chain_record
from ...validation import ValidationContext, ValidationFramework
from ..services.directory_walker import ChainEntry, DirectoryWalker
from ..services.error_aggregator import ErrorAggregator
from ..services.group_tracker import GroupTracker
from .validate_registry_result import ValidateRegistryResult

_LOGGER = logging.getLogger(__name__)


class ValidateRegistryUseCase:
    """Use case for validating a chain registry checkout.

    Responsibilities:
    - Announce the run and each group on stdout
    - Keep one chain id tracker per group
    - Report a missing, unreadable or undecodable record and move on
    - Abort the run on a missing tier directory

    Dependencies (injected):
    - settings: Effective run settings
    - aggregator: Collects and reports violations
    - framework: Rule battery (default: the standard battery)

    Example:
        >>> aggregator = ErrorAggregator()
        >>> use_case = ValidateRegistryUseCase(ValidatorSettings(), aggregator)
        >>> result = use_case.execute("chain-registry")
        >>> result.success
        True
    """

    def __init__(
        self,
        settings: ValidatorSettings,
        aggregator: ErrorAggregator,
        framework: Optional[ValidationFramework] = None,
        out: Optional[TextIO] = None,
    ) -> None:
        """Initialize use case with dependencies.

        Args:
            settings: Effective run settings
            aggregator: Violation collector
            framework: Rule battery (default: ValidationFramework())
            out: Progress stream (default: sys.stdout at write time)
        """
        self._settings = settings
        self._aggregator = aggregator
        self._framework = framework if framework is not None else ValidationFramework()
        self._out = out

    def _say(self, *parts: object) -> None:
        print(*parts, file=self._out if self._out is not None else sys.stdout)

    def execute(self, repo_dir: Path | str) -> ValidateRegistryResult:
        """Validate every selected tier of a registry checkout.

        Args:
            repo_dir: Root of the registry checkout

        Returns:
            ValidateRegistryResult of the run

        Raises:
            StructuralError: If the registry root is missing or not a directory
            StopValidation: On the first violation when stop-on-error is set
        """
        result = ValidateRegistryResult(targets=self._settings.targets)
        self._say("Going to validate", self._settings.describe_targets())

        walker = DirectoryWalker(repo_dir)
        walker.check_repository()

        for target in self._settings.targets:
            if not self._validate_group(walker, target, result):
                result.aborted = True
                break
            result.groups_validated += 1

        result.violation_count = self._aggregator.count
        _LOGGER.info(
            "Validated %d chains in %d groups, %d violations",
            result.chains_validated,
            result.groups_validated,
            result.violation_count,
        )
        return result

    def _validate_group(
        self, walker: DirectoryWalker, target: ValidateTarget, result: ValidateRegistryResult
    ) -> bool:
        """Walk one tier.

        Returns:
            False if the tier directory is unusable and the run must stop
        """
        self._say("Validating group", target.display_name, "...")
        self._aggregator.begin_group(target.display_name)

        try:
            chains = list(walker.iter_chains(target))
        except StructuralError as err:
            self._aggregator.mark(str(err))
            return False

        tracker = GroupTracker(target.display_name)
        try:
            for entry in chains:
                if not self._validate_chain(entry, tracker):
                    _LOGGER.warning(
                        "Skipping chain %s of group %s: record not loaded",
                        entry.name,
                        target.display_name,
                    )
                    continue
                result.chains_validated += 1
        finally:
            tracker.reset()
        return True

    def _validate_chain(self, entry: ChainEntry, tracker: GroupTracker) -> bool:
        """Load and validate one chain.

        Returns:
            False if the record could not be loaded
        """
        aggregator = self._aggregator
        aggregator.begin_chain(entry.name)

        record_path = entry.record_path
        if not record_path.exists():
            aggregator.mark(f"Missing required file {record_path}")
            return False

        aggregator.set_file(record_path)
        try:
            record = load_chain_record(record_path)
        except OSError as err:
            aggregator.mark(f"Failed to read chain definition file: {err}")
            return False
        except RecordDecodeError as err:
            aggregator.mark(f"Failed to unmarshal chain definition file: {err}")
            return False

        _LOGGER.debug("Validating chain %s (%s)", entry.name, record.chain_id)
        context = ValidationContext(
            chain_dir=entry.directory,
            tracker=tracker,
            additional_chain_types=self._settings.additional_chain_types,
        )
        for message in self._framework.iter_violations(record, context):
            aggregator.mark(message)
        return True
