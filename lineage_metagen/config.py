"""Configuration object for lineage-metagen."""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import yaml

from .errors import MetadataConfigError
from .models import DEFAULT_PRODUCER
from .sizing import (
    DEFAULT_BYTES_PER_EVENT,
    DEFAULT_BYTES_PER_INPUT,
    DEFAULT_BYTES_PER_OUTPUT,
    DEFAULT_INPUTS_PER_EVENT,
    DEFAULT_OUTPUTS_PER_EVENT,
    DEFAULT_RUNS,
)

DEFAULT_OUTPUT = "metadata.json"
DEFAULT_OUTPUT_FORMAT = "json"
DEFAULT_TIME_ZONE = "America/Los_Angeles"
OUTPUT_FORMATS = ("json", "jsonl", "parquet")

VAR_PREFIX = "metagen_"

INT_SETTINGS = frozenset(
    {
        "runs",
        "bytes_per_event",
        "inputs_per_event",
        "bytes_per_input",
        "outputs_per_event",
        "bytes_per_output",
        "seed",
    }
)


def _coerce_setting(key: str, name: str, value: Any) -> Any:
    if name in INT_SETTINGS:
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        if isinstance(value, str):
            try:
                return int(value.strip())
            except ValueError:
                pass
        raise MetadataConfigError(f"Invalid value for {key}: {value!r} (expected an integer)")
    if not isinstance(value, str):
        raise MetadataConfigError(f"Invalid value for {key}: {value!r} (expected a string)")
    return value


@dataclass
class MetadataConfig:
    runs: int = DEFAULT_RUNS
    bytes_per_event: int = DEFAULT_BYTES_PER_EVENT
    inputs_per_event: int = DEFAULT_INPUTS_PER_EVENT
    bytes_per_input: int = DEFAULT_BYTES_PER_INPUT
    outputs_per_event: int = DEFAULT_OUTPUTS_PER_EVENT
    bytes_per_output: int = DEFAULT_BYTES_PER_OUTPUT
    output: str = DEFAULT_OUTPUT
    output_format: str = DEFAULT_OUTPUT_FORMAT
    namespace: str | None = None
    time_zone: str = DEFAULT_TIME_ZONE
    producer: str = DEFAULT_PRODUCER
    seed: int | None = None

    def __post_init__(self) -> None:
        if isinstance(self.output_format, str):
            self.output_format = self.output_format.lower()

    @classmethod
    def from_vars(cls, vars_dict: Dict[str, Any]) -> "MetadataConfig":
        settings = vars_dict or {}
        values = {}
        for f in fields(cls):
            key = VAR_PREFIX + f.name
            if settings.get(key) is not None:
                values[f.name] = _coerce_setting(key, f.name, settings[key])
        return cls(**values)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "MetadataConfig":
        """Load settings from a YAML mapping of ``metagen_*`` keys."""

        config_path = Path(path)
        if not config_path.exists():
            raise MetadataConfigError(f"Config file not found at {config_path}")
        try:
            loaded = yaml.safe_load(config_path.read_text(encoding="utf-8"))
        except yaml.YAMLError as exc:
            raise MetadataConfigError(f"Invalid YAML in {config_path}: {exc}") from exc
        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise MetadataConfigError(f"Expected a mapping in {config_path}")
        unknown = sorted(k for k in loaded if not str(k).startswith(VAR_PREFIX))
        if unknown:
            raise MetadataConfigError(f"Unknown settings in {config_path}: {', '.join(unknown)}")
        return cls.from_vars(loaded)

    def as_dict(self) -> Dict[str, Any]:
        return {VAR_PREFIX + f.name: getattr(self, f.name) for f in fields(self)}

    def merged(self, **overrides: Any) -> "MetadataConfig":
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    def tzinfo(self) -> dt.tzinfo:
        try:
            return ZoneInfo(self.time_zone)
        except (ZoneInfoNotFoundError, ValueError, TypeError) as exc:
            raise MetadataConfigError(f"Unknown time zone: {self.time_zone!r}") from exc

    def validate(self) -> None:
        if self.output_format not in OUTPUT_FORMATS:
            raise MetadataConfigError(
                f"Unsupported output format: {self.output_format!r} "
                f"(expected one of {', '.join(OUTPUT_FORMATS)})"
            )
        self.tzinfo()
