"""Configuration loading and validation for the class organizer."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

from scripts.organizer.groups import DEFAULT_GROUPS, Group, build_groups

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Error in organizer configuration."""

    def __init__(
        self,
        message: str,
        file: Optional[str] = None,
        line: Optional[int] = None,
        error_type: str = "config_invalid",
    ):
        super().__init__(message)
        self.message = message
        self.file = file
        self.line = line
        self.error_type = error_type

    def to_json(self) -> dict[str, Any]:
        """Serialize error to JSON format for machine parsing."""
        result: dict[str, Any] = {
            "error": self.error_type,
            "message": self.message,
        }
        if self.file:
            result["file"] = self.file
        if self.line:
            result["line"] = self.line
        return result

    def __str__(self) -> str:
        parts = [self.message]
        if self.file:
            parts.append(f"file: {self.file}")
        if self.line:
            parts.append(f"line: {self.line}")
        return " | ".join(parts)


DEFAULT_CONFIG_PATH = ".organizer.yaml"

FORMATS = ("inline", "multiline", "with-comments")

# JavaScript identifier, optionally dotted (e.g. "utils.cn")
_FUNCTION_NAME_RE = re.compile(r"^[A-Za-z_$][\w$]*(?:\.[A-Za-z_$][\w$]*)*$")


def _is_identifier(value: Any) -> bool:
    return isinstance(value, str) and bool(_FUNCTION_NAME_RE.match(value))


@dataclass
class GroupDefinition:
    """A user-defined base group."""

    label: str
    patterns: list[str] = field(default_factory=list)


@dataclass
class OrganizerConfig:
    """Complete organizer configuration."""

    version: str = "1.0"
    format: str = "inline"
    utility_function: str = "clsx"
    utility_import_path: Optional[str] = None
    component_name: str = "select"
    groups: list[GroupDefinition] = field(default_factory=list)

    def precedence(self) -> tuple[Group, ...]:
        """Return the precedence table this configuration selects.

        Custom groups replace the built-in base groups; variant tables are
        always appended after them.
        """
        if not self.groups:
            return DEFAULT_GROUPS
        return build_groups((g.label, g.patterns) for g in self.groups)


def get_default_config() -> OrganizerConfig:
    """Return the default organizer configuration."""
    return OrganizerConfig()


def _parse_group(group_dict: Any, config_file: Optional[str] = None) -> GroupDefinition:
    """Parse a group dictionary into a GroupDefinition."""
    if not isinstance(group_dict, dict):
        raise ConfigError(
            "Each group must be a mapping with 'label' and 'patterns'",
            file=config_file,
        )

    label = group_dict.get("label")
    patterns = group_dict.get("patterns", [])
    if not isinstance(label, str) or not label.strip():
        raise ConfigError("Group label must be a non-empty string", file=config_file)
    if not isinstance(patterns, list) or not all(isinstance(p, str) for p in patterns):
        raise ConfigError(
            f"Patterns for group '{label}' must be a list of strings",
            file=config_file,
        )

    return GroupDefinition(label=label, patterns=patterns)


def validate_config(config: OrganizerConfig, config_file: Optional[str] = None) -> None:
    """Validate configuration values.

    Raises:
        ConfigError: If configuration is invalid.
    """
    if config.format not in FORMATS:
        raise ConfigError(
            f"Unknown format '{config.format}'. Must be one of: {', '.join(FORMATS)}",
            file=config_file,
        )

    if not _is_identifier(config.utility_function):
        raise ConfigError(
            f"Invalid utility function name '{config.utility_function}'",
            file=config_file,
        )

    if not _is_identifier(config.component_name):
        raise ConfigError(
            f"Invalid component name '{config.component_name}'",
            file=config_file,
        )

    if config.groups:
        try:
            config.precedence()
        except ValueError as e:
            raise ConfigError(str(e), file=config_file)


def load_config(config_path: Path | str) -> OrganizerConfig:
    """Load configuration from a YAML file.

    Args:
        config_path: Path to the organizer YAML file.

    Returns:
        OrganizerConfig with loaded values merged with defaults.

    Raises:
        ConfigError: If the file exists but contains invalid configuration.
    """
    config_path = Path(config_path)
    config_file = str(config_path)

    defaults = get_default_config()

    if not config_path.exists():
        logger.debug("No config at %s, using defaults", config_file)
        return defaults

    try:
        content = config_path.read_text(encoding="utf-8")
        if not content.strip():
            return defaults

        data = yaml.safe_load(content)
        if not data:
            return defaults
        if not isinstance(data, dict):
            raise ConfigError(
                "Top-level organizer config must be a mapping",
                file=config_file,
            )

    except yaml.YAMLError as e:
        line = None
        mark = getattr(e, "problem_mark", None)
        if mark is not None:
            line = mark.line + 1
        raise ConfigError(f"Invalid YAML: {e}", file=config_file, line=line)

    groups_data = data.get("groups") or []
    if not isinstance(groups_data, list):
        raise ConfigError("'groups' must be a list", file=config_file)

    config = OrganizerConfig(
        version=str(data.get("version", defaults.version)),
        format=data.get("format", defaults.format),
        utility_function=data.get("utility_function", defaults.utility_function),
        utility_import_path=data.get("utility_import_path", defaults.utility_import_path),
        component_name=data.get("component_name", defaults.component_name),
        groups=[_parse_group(g, config_file) for g in groups_data],
    )

    validate_config(config, config_file)
    logger.debug("Loaded organizer config from %s", config_file)

    return config
