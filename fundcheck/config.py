"""Immutable run configuration.

A single :class:`ValidatorConfig` is built once (normally from CLI arguments)
and handed to every component; nothing reads global flags.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import FrozenSet, Optional, Tuple

from .errors import ConfigurationError
from .patterns import (
    DEFAULT_DELIMITER,
    DEFAULT_FUND_PATTERN,
    DEFAULT_INVENTORY_PATTERN,
    DEFAULT_UNIT_PATTERN,
    LevelRules,
    compose_rules,
)

DEFAULT_EXTENSIONS: Tuple[str, ...] = (".jpg",)
DEFAULT_NUMBER_LENGTH = 6
TOOL_DIR_ENV = "FUNDCHECK_TOOL_DIR"


def normalize_extension(ext: str) -> str:
    ext = ext.strip()
    if not ext:
        raise ConfigurationError("Empty file extension")
    return ext if ext.startswith(".") else f".{ext}"


@dataclass(frozen=True)
class ValidatorConfig:
    source_roots: Tuple[str, ...]
    destination_roots: Tuple[str, ...] = ()
    excluded: FrozenSet[str] = frozenset()
    extensions: Tuple[str, ...] = DEFAULT_EXTENSIONS
    number_length: int = DEFAULT_NUMBER_LENGTH
    use_prefix: bool = False
    archive_prefix: str = ""
    fund_pattern: str = DEFAULT_FUND_PATTERN
    inventory_pattern: str = DEFAULT_INVENTORY_PATTERN
    unit_pattern: str = DEFAULT_UNIT_PATTERN
    delimiter: str = DEFAULT_DELIMITER
    check_images: bool = False
    tool_dir: Optional[str] = None
    log_file: Optional[str] = None
    continue_on_error: bool = False
    verbose: bool = False
    debug: bool = False
    show_progress: bool = False
    rules: LevelRules = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.source_roots:
            raise ConfigurationError("At least one source root is required")
        if self.number_length < 1:
            raise ConfigurationError(f"Number length must be positive, got {self.number_length}")
        if not self.extensions:
            raise ConfigurationError("At least one file extension is required")
        # frozen: normalised values go through object.__setattr__
        object.__setattr__(self, "source_roots", tuple(self.source_roots))
        object.__setattr__(self, "destination_roots", tuple(self.destination_roots))
        object.__setattr__(self, "excluded", frozenset(self.excluded))
        object.__setattr__(self, "extensions", tuple(normalize_extension(e) for e in self.extensions))
        object.__setattr__(
            self,
            "rules",
            compose_rules(self.fund_pattern, self.inventory_pattern, self.unit_pattern, self.delimiter),
        )

    def resolved_tool_dir(self) -> Optional[str]:
        """Explicit tool directory, else the one named by the environment."""
        return self.tool_dir or os.getenv(TOOL_DIR_ENV) or None
