"""Error policies: how a violation is surfaced and whether the walk goes on.

Every check hands its violations to ``policy.report``; the returned flag is
the only thing that stops a traversal.
  - AbortOnFirst: log, record, stop the whole run
  - CollectAndContinue: log, record, keep going
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Protocol

from .models import Violation

logger = logging.getLogger(__name__)


class ErrorPolicy(Protocol):
    violations: List[Violation]

    def report(self, violation: Violation) -> bool:
        """Surface ``violation``; return True to continue the traversal."""
        ...  # pragma: no cover


@dataclass
class AbortOnFirst:
    violations: List[Violation] = field(default_factory=list)

    def report(self, violation: Violation) -> bool:
        logger.error("%s", violation)
        self.violations.append(violation)
        return False


@dataclass
class CollectAndContinue:
    violations: List[Violation] = field(default_factory=list)

    def report(self, violation: Violation) -> bool:
        logger.error("%s", violation)
        self.violations.append(violation)
        return True


def report_all(policy: ErrorPolicy, violations: Iterable[Violation]) -> bool:
    """Report violations in order until the policy asks to stop."""
    for v in violations:
        if not policy.report(v):
            return False
    return True


def build_policy(continue_on_error: bool) -> ErrorPolicy:
    if continue_on_error:
        return CollectAndContinue()
    return AbortOnFirst()
