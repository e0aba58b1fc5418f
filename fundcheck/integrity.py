"""Image integrity verification through an external executable.

Only the exit status of the tool is consulted: zero means the image is
valid. Its output is discarded.
"""
from __future__ import annotations

import logging
import os
import shutil
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Protocol, Tuple

from .errors import MissingToolError

logger = logging.getLogger(__name__)

DEFAULT_TOOL = "jpeginfo"
DEFAULT_TOOL_ARGS: Tuple[str, ...] = ("-c",)


class IntegrityChecker(Protocol):
    def verify(self, path: Path) -> bool:
        """Return True when the image at ``path`` is intact."""
        ...  # pragma: no cover


def locate_tool(executable: str, tool_dir: Optional[str] = None) -> str:
    """Resolve ``executable`` inside ``tool_dir`` or on PATH.

    Raises MissingToolError when it cannot be found.
    """
    if tool_dir:
        found = shutil.which(executable, path=tool_dir)
        if found is None:
            raise MissingToolError(f"{executable!r} not found in tool directory {tool_dir!r}")
        return found
    found = shutil.which(executable)
    if found is None:
        raise MissingToolError(f"{executable!r} not found on PATH; pass a tool directory")
    return found


@dataclass
class ExternalImageTool:
    executable: str = DEFAULT_TOOL
    args: Tuple[str, ...] = DEFAULT_TOOL_ARGS
    tool_dir: Optional[str] = None
    _binary: Optional[str] = field(default=None, repr=False)

    def locate(self) -> str:
        if self._binary is None:
            self._binary = locate_tool(self.executable, self.tool_dir)
            logger.debug("Image integrity tool resolved to %s", self._binary)
        return self._binary

    def verify(self, path: Path) -> bool:
        cmd = [self.locate(), *self.args, os.fspath(path)]
        logger.debug("Running %s", " ".join(cmd))
        proc = subprocess.run(cmd, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)
        return proc.returncode == 0
