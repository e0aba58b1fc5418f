"""Data model shared by the validator components."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from functools import cached_property
from pathlib import Path
from typing import List, Optional, Union


class ViolationKind(str, Enum):
    NOT_A_DIRECTORY = "NotADirectory"
    PATTERN_MISMATCH = "PatternMismatch"
    PREFIX_MISMATCH = "PrefixMismatch"
    EMPTY_DIRECTORY = "EmptyDirectory"
    NOT_A_FILE = "NotAFile"
    BAD_EXTENSION = "BadExtension"
    BAD_FILE_NAME = "BadFileName"
    CORRUPT_IMAGE = "CorruptImage"
    ALREADY_EXISTS = "AlreadyExists"


@dataclass(frozen=True)
class Violation:
    kind: ViolationKind
    path: Path
    message: str

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message} ({self.path})"


@dataclass(frozen=True)
class ArchivalPath:
    """A directory or file location inside the archive tree.

    Only the absolute path is stored. Existence is resolved on first access
    and cached; everything else is derived from the path.
    """
    path: Path

    @classmethod
    def of(cls, location: Union[str, "os.PathLike[str]"]) -> "ArchivalPath":
        return cls(Path(os.path.abspath(location)))

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def extension(self) -> str:
        return self.path.suffix

    @property
    def parent(self) -> "ArchivalPath":
        return ArchivalPath(self.path.parent)

    @cached_property
    def exists(self) -> bool:
        return self.path.exists()

    def is_dir(self) -> bool:
        return self.path.is_dir()

    def is_file(self) -> bool:
        return self.path.is_file()

    def __str__(self) -> str:
        return str(self.path)


@dataclass(frozen=True)
class UnitIdentity:
    """Base names of a unit and the inventory and fund that contain it."""
    fund: str
    inventory: str
    unit: str

    def relative_parts(self) -> tuple:
        return self.fund, self.inventory, self.unit


class ValidationOutcome(str, Enum):
    SUCCESS = "success"
    ABORTED = "aborted-with-violation"
    COMPLETED_WITH_VIOLATIONS = "completed-with-recorded-violations"


@dataclass
class ValidationResult:
    outcome: ValidationOutcome
    violations: List[Violation] = field(default_factory=list)
    first_violation: Optional[Violation] = None

    @property
    def ok(self) -> bool:
        return self.outcome is ValidationOutcome.SUCCESS
