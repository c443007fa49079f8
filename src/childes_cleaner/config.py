"""YAML configuration loading and validation for corpus cleaning runs."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .exceptions import ConfigError
from .stream import DEFAULT_SPEAKER


@dataclass
class CleanerConfig:
    """Parsed run configuration.

    Example YAML::

        input_dir: data/xml-files/Suppes/Nina
        output_dir: data
        name: Nina
        speaker: MOT
        strict: true
    """

    input_dir: Path
    output_dir: Path = Path("data")
    name: str = ""
    speaker: str = DEFAULT_SPEAKER
    strict: bool = True
    raw: dict[str, Any] = field(repr=False, default_factory=dict)

    def __post_init__(self) -> None:
        if not self.name:
            self.name = Path(self.input_dir).resolve().name
        if not self.name:
            raise ConfigError(
                f"Cannot derive an output name from {str(self.input_dir)!r}; set 'name'"
            )

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> CleanerConfig:
        """Build a config from a mapping, validating required keys."""
        if not raw.get("input_dir"):
            raise ConfigError("Config missing required key: 'input_dir'")
        for key in ("input_dir", "output_dir", "name"):
            value = raw.get(key)
            if value is not None and not isinstance(value, str):
                raise ConfigError(f"'{key}' must be a string, got {value!r}")

        speaker = raw.get("speaker", DEFAULT_SPEAKER)
        if not isinstance(speaker, str) or not speaker.strip():
            raise ConfigError(f"'speaker' must be a non-empty string, got {speaker!r}")

        strict = raw.get("strict", True)
        if not isinstance(strict, bool):
            raise ConfigError(f"'strict' must be a boolean, got {strict!r}")

        return cls(
            input_dir=Path(raw["input_dir"]),
            output_dir=Path(raw.get("output_dir") or "data"),
            name=raw.get("name") or "",
            speaker=speaker.strip(),
            strict=strict,
            raw=raw,
        )


def load_config(path: str | Path, overrides: dict[str, Any] | None = None) -> CleanerConfig:
    """Load and validate a run configuration from a YAML file.

    Keys in *overrides* replace those read from the file.

    Raises
    ------
    FileNotFoundError
        If the config file does not exist.
    ConfigError
        If the config is not a mapping or fails validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, encoding="utf-8") as f:
        try:
            raw = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Cannot parse config {path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError(f"Config must be a YAML mapping, got {type(raw).__name__}")

    if overrides:
        raw = {**raw, **overrides}
    return CleanerConfig.from_dict(raw)
