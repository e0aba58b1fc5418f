import logging
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def restore_root_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    for h in handlers:
        if h not in root.handlers:
            root.addHandler(h)
    root.setLevel(level)


def build_unit(root: Path, fund: str, inventory: str, unit: str, files=("000000.jpg", "000001.jpg", "000002.jpg")) -> Path:
    """Create root/fund/fund-inventory/fund-inventory-unit holding ``files``."""
    inv_name = f"{fund}-{inventory}"
    unit_dir = root / fund / inv_name / f"{inv_name}-{unit}"
    unit_dir.mkdir(parents=True, exist_ok=True)
    for name in files:
        (unit_dir / name).write_bytes(b"\xff\xd8\xff")
    return unit_dir


@pytest.fixture
def valid_tree(tmp_path):
    src = tmp_path / "src"
    build_unit(src, "42", "1_А", "7_Б")
    build_unit(src, "42", "1_А", "8")
    build_unit(src, "42", "2", "1", files=("000000.jpg",))
    return src
