"""Single-directory structural check."""
from __future__ import annotations

import logging
from typing import List, Optional

from .models import ArchivalPath, Violation, ViolationKind
from .patterns import LevelRule

logger = logging.getLogger(__name__)


def _has_entries(path: ArchivalPath) -> bool:
    return any(True for _ in path.path.iterdir())


def check_directory(path: ArchivalPath, rule: LevelRule, required_prefix: Optional[str] = None) -> List[Violation]:
    """Check existence, name pattern, name prefix and non-emptiness of ``path``.

    All checks are evaluated so one directory yields every problem it has.
    Emptiness is only meaningful for an existing directory and is skipped
    otherwise. The required prefix defaults to the one carried by ``rule``.
    """
    if required_prefix is None:
        required_prefix = rule.prefix
    logger.info("Checking %s %s", rule.level, path)
    violations: List[Violation] = []
    name = path.name
    is_dir = path.is_dir()

    if not is_dir:
        problem = "is not a directory" if path.exists else "does not exist"
        violations.append(Violation(
            ViolationKind.NOT_A_DIRECTORY, path.path, f"{rule.level} {name!r} {problem}",
        ))
    if not rule.matches(name):
        violations.append(Violation(
            ViolationKind.PATTERN_MISMATCH, path.path,
            f"{rule.level} name {name!r} does not match pattern {rule.pattern!r}",
        ))
    if not name.startswith(required_prefix):
        violations.append(Violation(
            ViolationKind.PREFIX_MISMATCH, path.path,
            f"{rule.level} name {name!r} does not start with {required_prefix!r}",
        ))
    if is_dir and not _has_entries(path):
        violations.append(Violation(
            ViolationKind.EMPTY_DIRECTORY, path.path,
            f"{rule.level} {name!r} is empty",
        ))
    return violations
