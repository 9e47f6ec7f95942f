from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Tuple

import yaml

ON_ERROR_CHOICES = ("abort", "skip")
DEFAULT_LABELS = ("Player 1", "Player 2")


@dataclass(frozen=True, slots=True)
class RunConfig:
    on_error: str = "abort"
    log_level: str = "WARNING"
    labels: Tuple[str, str] = field(default=DEFAULT_LABELS)

    def __post_init__(self) -> None:
        if self.on_error not in ON_ERROR_CHOICES:
            raise ValueError(f"on_error must be one of {ON_ERROR_CHOICES}, got {self.on_error!r}")
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown log level: {self.log_level!r}")
        if len(self.labels) != 2 or not all(isinstance(x, str) for x in self.labels):
            raise ValueError("labels must be a list of two names")

    @classmethod
    def from_yaml(cls, path: str) -> "RunConfig":
        with open(path, "r") as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"{path}: invalid YAML: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"{path}: expected a mapping at the top level")

        labels = data.get("labels", DEFAULT_LABELS)
        if not isinstance(labels, (list, tuple)):
            raise ValueError("labels must be a list of two names")

        return cls(
            on_error=str(data.get("on_error", "abort")),
            log_level=str(data.get("log_level", "WARNING")).upper(),
            labels=tuple(labels),
        )

    def merged(self, **overrides) -> "RunConfig":
        """Copy with any non-None overrides applied (CLI flags win)."""
        values = {
            "on_error": self.on_error,
            "log_level": self.log_level,
            "labels": self.labels,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return RunConfig(**values)
