"""Natural (human) ordering of directory and file names.

Digit runs are compared by numeric value: ``"2" < "10"``. Every listing in the
validator goes through :func:`natural_sorted` because the position of an image
in this order decides the file name it must carry.
"""
from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, List, Tuple

DIGIT_RUN_RE = re.compile(r"\d+")
PAD_WIDTH = 20


def natural_key(name: str) -> Tuple[str, str]:
    padded = DIGIT_RUN_RE.sub(lambda m: m.group(0).zfill(PAD_WIDTH), name)
    # "01" and "1" pad identically; the raw name keeps the order total
    return padded, name


def natural_sorted(names: Iterable[str]) -> List[str]:
    return sorted(names, key=natural_key)


def list_children(directory: Path) -> List[Path]:
    """Return the entries of ``directory`` in natural order of their names."""
    return [directory / name for name in natural_sorted(p.name for p in directory.iterdir())]
