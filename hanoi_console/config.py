from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

from .state import HanoiError

MAX_SUPPORTED_DISKS = 20


class ConfigError(HanoiError, ValueError):
    """Raised when a config file or override is malformed."""


@dataclass(frozen=True, slots=True)
class GameConfig:
    default_disks: int = 4
    min_disks: int = 1
    max_disks: int = 12
    frame_delay_s: float = 0.35
    warning_delay_s: float = 0.7
    celebration_delay_s: float = 0.12
    celebration_frames: int = 12
    color: bool = True

    def __post_init__(self) -> None:
        for name in ("default_disks", "min_disks", "max_disks", "celebration_frames"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(f"{name} must be int, got {type(value).__name__}")
        for name in ("frame_delay_s", "warning_delay_s", "celebration_delay_s"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigError(f"{name} must be a number, got {type(value).__name__}")
            if value < 0:
                raise ConfigError(f"{name} must be >= 0, got {value}")
        if not isinstance(self.color, bool):
            raise ConfigError(f"color must be bool, got {type(self.color).__name__}")
        if not 1 <= self.min_disks <= self.max_disks <= MAX_SUPPORTED_DISKS:
            raise ConfigError(
                f"disk range must satisfy 1 <= min_disks <= max_disks <= "
                f"{MAX_SUPPORTED_DISKS}, got [{self.min_disks}, {self.max_disks}]"
            )
        if self.celebration_frames < 0:
            raise ConfigError("celebration_frames must be >= 0")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GameConfig:
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"unknown config keys: {', '.join(unknown)}")
        return cls(**data)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    def clamp_disks(self, n_disks: int) -> int:
        return max(self.min_disks, min(self.max_disks, n_disks))


def load_config(path: str) -> dict[str, Any]:
    try:
        data = json.loads(Path(path).read_text())
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"config root must be an object: {path}")
    return _expand_env_vars(data)


def _expand_env_vars(value: Any) -> Any:
    if isinstance(value, str):
        return os.path.expandvars(value)
    if isinstance(value, list):
        return [_expand_env_vars(item) for item in value]
    if isinstance(value, dict):
        return {str(k): _expand_env_vars(v) for k, v in value.items()}
    return value


def merge_dicts(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    result: dict[str, Any] = {**base}
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_dicts(result[key], value)
        else:
            result[key] = value
    return result


def resolve_config(
    path: str | None = None, overrides: dict[str, Any] | None = None
) -> GameConfig:
    """Defaults, then the JSON file at `path`, then non-None `overrides`."""

    merged = GameConfig().to_dict()
    if path:
        merged = merge_dicts(merged, load_config(path))
    if overrides:
        merged = merge_dicts(
            merged, {k: v for k, v in overrides.items() if v is not None}
        )
    return GameConfig.from_dict(merged)
