"""Duplicate-ingestion guard against the destination archives."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

from .models import UnitIdentity, Violation, ViolationKind

logger = logging.getLogger(__name__)


def destination_path(root: str, identity: UnitIdentity) -> Path:
    return Path(root).joinpath(*identity.relative_parts())


def check_destinations(identity: UnitIdentity, destination_roots: Iterable[str]) -> List[Violation]:
    """Report every destination root that already holds this unit."""
    violations: List[Violation] = []
    for root in destination_roots:
        candidate = destination_path(root, identity)
        logger.debug("Looking for existing unit at %s", candidate)
        if candidate.exists():
            violations.append(Violation(
                ViolationKind.ALREADY_EXISTS, candidate,
                f"unit {identity.unit!r} already exists in destination {root!r}",
            ))
    return violations
