"""Loading and validation of the TOML configuration file."""

from __future__ import annotations

import os
import re
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


class ConfigError(Exception):
    """Raised when the configuration cannot be loaded or is invalid."""


def _require(table: dict[str, Any], key: str, kind: type, section: str) -> Any:
    if key not in table:
        raise ConfigError(f"missing field `{key}` in [{section}]")
    value = table[key]
    if kind is bool:
        valid = isinstance(value, bool)
    else:
        valid = isinstance(value, kind) and not isinstance(value, bool)
    if not valid:
        raise ConfigError(
            f"field `{key}` in [{section}] must be of type {kind.__name__}"
        )
    return value


def _require_table(value: Any, section: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise ConfigError(f"[{section}] must be a table")
    return value


@dataclass(frozen=True)
class CoreProperties:
    """The ``[config]`` section: where to look and how to behave."""

    source_dir: str
    log: bool
    dry_run: bool

    @classmethod
    def _from_table(cls, table: Any) -> CoreProperties:
        table = _require_table(table, "config")
        return cls(
            source_dir=_require(table, "source_dir", str, "config"),
            log=_require(table, "log", bool, "config"),
            dry_run=_require(table, "dry_run", bool, "config"),
        )


@dataclass(frozen=True)
class MatchingRule:
    """A rule as written in the file: a pattern and a target directory."""

    pattern: str
    target: str

    @classmethod
    def _from_table(cls, table: Any) -> MatchingRule:
        table = _require_table(table, "rules")
        return cls(
            pattern=_require(table, "pattern", str, "rules"),
            target=_require(table, "target", str, "rules"),
        )


@dataclass(frozen=True)
class MatchingRegexRule:
    """A rule whose pattern has been compiled."""

    regex: re.Pattern[str]
    target: str

    @classmethod
    def from_rule(cls, rule: MatchingRule) -> MatchingRegexRule:
        """Compile the pattern of ``rule``."""
        try:
            regex = re.compile(rule.pattern)
        except re.error as exc:
            raise ConfigError(f"Invalid pattern {rule.pattern!r}: {exc}") from exc
        return cls(regex=regex, target=rule.target)

    def is_match(self, file_name: str) -> bool:
        """Return whether the pattern matches anywhere in ``file_name``."""
        return self.regex.search(file_name) is not None


def _parse_file(file_path: str | os.PathLike[str]) -> tuple[CoreProperties, list[MatchingRule]]:
    try:
        with open(file_path, "rb") as handle:
            document = tomllib.load(handle)
        core = CoreProperties._from_table(_require(document, "config", dict, "root"))
        raw_rules = _require(document, "rules", list, "root")
        rules = [MatchingRule._from_table(item) for item in raw_rules]
    except (OSError, tomllib.TOMLDecodeError, ConfigError) as exc:
        raise ConfigError(f"Could not parse config file: {exc}") from exc
    return core, rules


@dataclass(frozen=True)
class Config:
    """The complete, validated configuration."""

    config: CoreProperties
    rules: list[MatchingRegexRule] = field(default_factory=list)

    @classmethod
    def from_file(cls, file_path: str | os.PathLike[str]) -> Config:
        """Read, validate and compile the configuration at ``file_path``."""
        core, rules = _parse_file(file_path)
        if not Path(core.source_dir).is_dir():
            raise ConfigError("The source dir is not a directory")
        return cls(
            config=core,
            rules=[MatchingRegexRule.from_rule(rule) for rule in rules],
        )