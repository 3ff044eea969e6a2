"""Configuration for tag cloud generation."""

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

from .render import DEFAULT_STYLESHEETS, FONT_MAX, FONT_MIN
from .tokenizer import DEFAULT_SEPARATORS

# Settings taken verbatim from ``key=value`` overrides
STRING_SETTINGS = {"separators"}


@dataclass
class CloudConfig:
    """Settings for one tag cloud run."""

    font_min: int = FONT_MIN
    font_max: int = FONT_MAX
    separators: str = DEFAULT_SEPARATORS
    stylesheets: list[str] = field(default_factory=lambda: list(DEFAULT_STYLESHEETS))
    word_count: int | None = None  # None = ask on the command line

    def __post_init__(self) -> None:
        self.validate()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CloudConfig":
        """Create CloudConfig from YAML dict."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(unknown)}")

        return cls(
            font_min=data.get("font_min", FONT_MIN),
            font_max=data.get("font_max", FONT_MAX),
            separators=data.get("separators", DEFAULT_SEPARATORS),
            stylesheets=_as_stylesheet_list(data.get("stylesheets", DEFAULT_STYLESHEETS)),
            word_count=data.get("word_count"),
        )

    @classmethod
    def from_yaml(cls, path: Path) -> "CloudConfig":
        """Load configuration from a YAML file.

        An empty file yields the defaults.
        """
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping: {path}")
        return cls.from_dict(data)

    def override(self, overrides: dict[str, Any]) -> None:
        """Apply ``key=value`` overrides and re-validate.

        Raises:
            ValueError: On unknown keys or invalid resulting values.
        """
        known = {f.name for f in fields(self)}
        for key, value in overrides.items():
            if key not in known:
                raise ValueError(f"Unknown config key: {key}")
            if key == "stylesheets":
                value = _as_stylesheet_list(value)
            setattr(self, key, value)
        self.validate()

    def validate(self) -> None:
        """Check value ranges.

        Raises:
            ValueError: If any setting is out of range.
        """
        for name in ("font_min", "font_max"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}")
        if self.font_min <= 0:
            raise ValueError(f"font_min must be positive, got {self.font_min}")
        if self.font_min > self.font_max:
            raise ValueError(
                f"font_min ({self.font_min}) must not exceed font_max ({self.font_max})"
            )
        if not isinstance(self.separators, str) or not self.separators:
            raise ValueError("separators must be a non-empty string")
        if not isinstance(self.stylesheets, list) or not all(
            isinstance(href, str) for href in self.stylesheets
        ):
            raise ValueError(f"stylesheets must be a list of strings, got {self.stylesheets!r}")
        if self.word_count is not None:
            if isinstance(self.word_count, bool) or not isinstance(self.word_count, int):
                raise ValueError(f"word_count must be an integer, got {self.word_count!r}")
            if self.word_count < 0:
                raise ValueError(f"word_count cannot be negative, got {self.word_count}")


def _as_stylesheet_list(value: Any) -> Any:
    """Wrap a single stylesheet in a list; other values are left for validate()."""
    if isinstance(value, str):
        return [value]
    if isinstance(value, list):
        return list(value)
    return value


def parse_key_value_args(args: list[str]) -> dict[str, Any]:
    """Parse key=value arguments into a dict.

    Args:
        args: List of "key=value" strings.

    Returns:
        Dict of parsed key-value pairs.
    """
    result: dict[str, Any] = {}
    for arg in args:
        if "=" not in arg:
            raise ValueError(f"Invalid format: {arg}. Expected key=value")
        key, value = arg.split("=", 1)

        # Integers and booleans are coerced; everything else stays a string
        if key in STRING_SETTINGS:
            result[key] = value
        elif value.lower() == "true":
            result[key] = True
        elif value.lower() == "false":
            result[key] = False
        else:
            try:
                result[key] = int(value)
            except ValueError:
                result[key] = value

    return result
