from __future__ import annotations

import math
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml

_MINIMUM_COUNTS = {
    "min_text_length": 0,
    "min_sentences": 1,
    "min_words": 1,
    "repetition_window": 1,
}
_SCALES = ("perplexity_scale", "burstiness_scale")


@dataclass(slots=True)
class DetectorConfig:
    """Tunable preconditions and display constants for the detection engine."""

    min_text_length: int = 50
    min_sentences: int = 2
    min_words: int = 10
    repetition_window: int = 20
    notable_threshold: float = 0.65
    perplexity_scale: float = 10.0
    burstiness_scale: float = 10.0
    include_features: bool = True

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {field.name for field in fields(DetectorConfig)}
    return {key: data[key] for key in data if key in allowed}


def config_from_dict(data: Mapping[str, Any] | None) -> DetectorConfig:
    """Build a DetectorConfig from a dictionary-like input."""
    if data is None:
        return DetectorConfig()
    cfg = DetectorConfig(**_build_kwargs(data))
    validate_config(cfg)
    return cfg


def validate_config(cfg: DetectorConfig) -> None:
    """Raise ValueError when a configuration value has the wrong type or range."""
    for name, minimum in _MINIMUM_COUNTS.items():
        value = getattr(cfg, name)
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"{name} must be an integer, got {value!r}.")
        if value < minimum:
            raise ValueError(f"{name} must be at least {minimum}, got {value}.")

    threshold = cfg.notable_threshold
    if not _is_number(threshold) or not 0.0 < threshold <= 1.0:
        raise ValueError(f"notable_threshold must be a number in (0, 1], got {threshold!r}.")
    for name in _SCALES:
        value = getattr(cfg, name)
        if not _is_number(value) or not math.isfinite(value):
            raise ValueError(f"{name} must be a finite number, got {value!r}.")

    if not isinstance(cfg.include_features, bool):
        raise ValueError(f"include_features must be true or false, got {cfg.include_features!r}.")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def config_from_yaml(path: str | Path) -> DetectorConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> DetectorConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return DetectorConfig()
    return config_from_yaml(path)
