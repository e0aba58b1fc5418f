"""Depth-first traversal of the archive tree.

    source roots -> funds -> inventories -> units -> images

Each level lists its children in natural order, skips excluded names, runs
the structural check and descends. Units additionally get the destination
cross-check (before the structural check) and the image sequence check.
Every violation goes through the error policy; a False answer unwinds the
whole run.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from tqdm import tqdm

from .config import ValidatorConfig
from .destination import check_destinations
from .images import ImageSequenceValidator
from .integrity import ExternalImageTool, IntegrityChecker
from .models import (
    ArchivalPath,
    UnitIdentity,
    ValidationOutcome,
    ValidationResult,
    Violation,
    ViolationKind,
)
from .natural import list_children
from .patterns import LevelRule
from .policy import ErrorPolicy, build_policy, report_all
from .rules import check_directory
from .utils import log_verbose

logger = logging.getLogger(__name__)


class FundValidator:
    """Validate every configured source root against the naming convention."""

    def __init__(
        self,
        config: ValidatorConfig,
        policy: Optional[ErrorPolicy] = None,
        integrity: Optional[IntegrityChecker] = None,
    ) -> None:
        self.config = config
        self.policy = policy if policy is not None else build_policy(config.continue_on_error)
        if config.check_images and integrity is None:
            tool = ExternalImageTool(tool_dir=config.resolved_tool_dir())
            tool.locate()  # MissingToolError before any traversal
            integrity = tool
        self.images = ImageSequenceValidator(config, integrity)

    # ------------------------------------------------------------------
    # Entry point
    # ------------------------------------------------------------------
    def run(self) -> ValidationResult:
        start = len(self.policy.violations)
        logger.info("Validation started for %d source root(s)", len(self.config.source_roots))
        completed = True
        with tqdm(self.config.source_roots, desc="Sources", disable=not self.config.show_progress) as roots:
            for root in roots:
                if not self._scan_source(ArchivalPath.of(root)):
                    completed = False
                    break
        violations = self.policy.violations[start:]
        if not completed:
            logger.info("Validation aborted")
            outcome = ValidationOutcome.ABORTED
        elif violations:
            logger.info("Validation finished")
            outcome = ValidationOutcome.COMPLETED_WITH_VIOLATIONS
        else:
            logger.info("Validation finished")
            outcome = ValidationOutcome.SUCCESS
        return ValidationResult(outcome, list(violations), violations[0] if violations else None)

    # ------------------------------------------------------------------
    # Levels
    # ------------------------------------------------------------------
    def _excluded(self, path: ArchivalPath) -> bool:
        if path.name in self.config.excluded:
            logger.info("Skipping excluded %s", path)
            return True
        return False

    def _check(self, path: ArchivalPath, rule: LevelRule) -> bool:
        try:
            return report_all(self.policy, check_directory(path, rule))
        except OSError as e:
            logger.error("Cannot read %s: %s", path, e)
            return False

    def _children(self, directory: ArchivalPath) -> Optional[List[Path]]:
        try:
            return list_children(directory.path)
        except OSError as e:
            logger.error("Cannot list %s: %s", directory, e)
            return None

    def _scan_source(self, root: ArchivalPath) -> bool:
        logger.info("Scanning source %s", root)
        if not root.is_dir():
            return self.policy.report(Violation(
                ViolationKind.NOT_A_DIRECTORY, root.path, f"source root {root.name!r} is not an existing directory",
            ))
        children = self._children(root)
        if children is None:
            return False
        for child in children:
            if not self._scan_fund(ArchivalPath(child)):
                return False
        return True

    def _scan_fund(self, fund: ArchivalPath) -> bool:
        if self._excluded(fund):
            return True
        if not self._check(fund, self.config.rules.fund):
            return False
        if not fund.is_dir():
            return True
        children = self._children(fund)
        if children is None:
            return False
        for child in children:
            if not self._scan_inventory(ArchivalPath(child), fund):
                return False
        return True

    def _scan_inventory(self, inventory: ArchivalPath, fund: ArchivalPath) -> bool:
        if self._excluded(inventory):
            return True
        if not self._check(inventory, self.config.rules.inventory.with_prefix(fund.name)):
            return False
        if not inventory.is_dir():
            return True
        children = self._children(inventory)
        if children is None:
            return False
        for child in children:
            if not self._scan_unit(ArchivalPath(child), UnitIdentity(fund.name, inventory.name, child.name)):
                return False
        return True

    def _scan_unit(self, unit: ArchivalPath, identity: UnitIdentity) -> bool:
        if self._excluded(unit):
            return True
        if not report_all(self.policy, check_destinations(identity, self.config.destination_roots)):
            return False
        if not self._check(unit, self.config.rules.unit.with_prefix(identity.inventory)):
            return False
        if not unit.is_dir():
            return True
        return self._scan_images(unit)

    def _scan_images(self, unit: ArchivalPath) -> bool:
        files = self._children(unit)
        if files is None:
            return False
        log_verbose(logger, "Checking %d file(s) in %s", len(files), unit)
        return report_all(self.policy, self.images.iter_violations(unit.path, files))
