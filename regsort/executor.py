"""Matching files against rules and dispatching moves."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from regsort.config import MatchingRegexRule
from regsort.task import Task

log = logging.getLogger(__name__)


class TaskExecutor:
    """Moves files to the target of the first rule that matches their name."""

    def __init__(self, dry_run: bool, rules: Iterable[MatchingRegexRule]) -> None:
        self.dry_run = dry_run
        self.rules = list(rules)

    def execute(self, path: str | os.PathLike[str]) -> Path | None:
        """Sort the file at ``path``.

        Returns the destination chosen, or None when no rule matches.
        """
        path = Path(path)
        log.info("Checking file from: '%s'", path)

        file_name = path.name
        if file_name in ("", ".", ".."):
            raise ValueError(f"path has no file name: {path}")

        rule = self.find_matching_rule(file_name)
        if rule is None:
            log.warning("No matching rule found for: '%s'", file_name)
            return None

        log.info(
            "Found matching rule for file: '%s' ('%s')", file_name, rule.regex.pattern
        )
        task = Task(
            full_path=str(path),
            file_name=file_name,
            target_dir=rule.target,
            dry_run=self.dry_run,
        )
        return task.execute()

    def find_matching_rule(self, file_name: str) -> MatchingRegexRule | None:
        """Return the first rule matching ``file_name``, if any."""
        return next((rule for rule in self.rules if rule.is_match(file_name)), None)