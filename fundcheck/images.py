"""Validation of the image files inside a unit directory.

Files must form an unbroken zero-based sequence in natural order:

    000000.jpg, 000001.jpg, ...                  (prefixing off)
    GAYO-<unit>-000000.jpg, GAYO-<unit>-000001.jpg, ...   (prefixing on)

The index is assigned over *all* entries of the unit, so a stray entry
shifts the expected name of every sibling after it.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, List, Optional, Sequence

from .config import ValidatorConfig
from .integrity import IntegrityChecker
from .models import Violation, ViolationKind
from .utils import log_verbose

logger = logging.getLogger(__name__)


def expected_stem(
    unit_name: str,
    index: int,
    number_length: int = 6,
    use_prefix: bool = False,
    archive_prefix: str = "",
    delimiter: str = "-",
) -> str:
    number = str(index).zfill(number_length)
    if not use_prefix:
        return number
    parts = [p for p in (archive_prefix, unit_name) if p]
    return delimiter.join(parts + [number])


def expected_image_name(unit_name: str, index: int, extension: str, **kwargs) -> str:
    return expected_stem(unit_name, index, **kwargs) + extension


class ImageSequenceValidator:
    """Checks the ordered children of one unit directory."""

    def __init__(self, config: ValidatorConfig, integrity: Optional[IntegrityChecker] = None) -> None:
        self.config = config
        self.integrity = integrity if config.check_images else None

    def _stem(self, unit_name: str, index: int) -> str:
        c = self.config
        return expected_stem(unit_name, index, c.number_length, c.use_prefix, c.archive_prefix, c.delimiter)

    def iter_violations(self, unit_path: Path, ordered: Sequence[Path]) -> Iterator[Violation]:
        """Yield violations file by file, so a caller may stop early."""
        for index, entry in enumerate(ordered):
            name = entry.name
            log_verbose(logger, "Checking image %s", entry)
            is_file = entry.is_file()
            if not is_file:
                yield Violation(ViolationKind.NOT_A_FILE, entry, f"{name!r} is not a file")
            if not any(name.endswith(ext) for ext in self.config.extensions):
                yield Violation(
                    ViolationKind.BAD_EXTENSION, entry,
                    f"{name!r} has none of the extensions {list(self.config.extensions)}",
                )
            stem = self._stem(unit_path.name, index)
            candidates = [stem + ext for ext in self.config.extensions]
            if name not in candidates:
                yield Violation(
                    ViolationKind.BAD_FILE_NAME, entry,
                    f"{name!r} at position {index} should be {candidates[0]!r}",
                )
            if self.integrity is not None and is_file and not self.integrity.verify(entry):
                yield Violation(ViolationKind.CORRUPT_IMAGE, entry, f"{name!r} failed the integrity check")

    def check(self, unit_path: Path, ordered: Sequence[Path]) -> List[Violation]:
        return list(self.iter_violations(unit_path, ordered))
