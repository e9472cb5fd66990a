"""Moving a single file into its target directory."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

log = logging.getLogger(__name__)


def extend_file(file_name: str, index: int) -> str:
    """Insert ``(index)`` before the last extension of ``file_name``."""
    stem, dot, extension = file_name.rpartition(".")
    if not dot:
        return f"{file_name}({index})"
    return f"{stem}({index}).{extension}"


@dataclass(frozen=True)
class Task:
    """A request to move one file into a target directory."""

    full_path: str
    file_name: str
    target_dir: str
    dry_run: bool = False

    def execute(self) -> Path:
        """Move the file to a free path in the target directory.

        Nothing is moved in dry-run mode. A failed move is logged rather
        than raised. Returns the destination that was chosen.
        """
        target_path = self.find_target_path()
        log.info(
            "Moving file '%s': '%s' ---> '%s'", self.file_name, self.full_path, target_path
        )
        if self.dry_run:
            return target_path

        try:
            self._move_file(target_path)
        except OSError as exc:
            log.error("Error moving file '%s': '%s'", self.file_name, exc)
        else:
            log.info(
                "File '%s' moved from '%s' to '%s'",
                self.file_name,
                self.full_path,
                target_path,
            )
        return target_path

    def find_target_path(self) -> Path:
        """Return the first path in the target directory not already taken."""
        log.debug("Searching target path for: '%s'", self.file_name)
        target_dir = Path(self.target_dir)
        candidate = target_dir / self.file_name
        index = 0
        while candidate.exists():
            log.debug("Target path '%s' already taken", candidate)
            index += 1
            candidate = target_dir / extend_file(self.file_name, index)
        log.debug("Target path '%s' is free", candidate)
        return candidate

    def _move_file(self, destination: Path) -> None:
        destination.parent.mkdir(parents=True, exist_ok=True)
        Path(self.full_path).rename(destination)