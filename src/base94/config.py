import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

from .alphabet import DEFAULT_BASE, validate_base

CONFIG_PATH = Path.home() / ".base94.json"

ENV_MAPPING: Dict[str, str] = {
    "default_base": "BASE94_DEFAULT_BASE",
    "history": "BASE94_HISTORY",
}

_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class CodecConfig:
    default_base: int = DEFAULT_BASE
    history: bool = True

    def to_dict(self) -> Dict[str, object]:
        return {
            "default_base": self.default_base,
            "history": self.history,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, object]) -> "CodecConfig":
        return cls(
            default_base=_parse_base(data.get("default_base")) or DEFAULT_BASE,
            history=_parse_flag(data.get("history", True)),
        )


def _parse_base(value: object) -> Optional[int]:
    """Return the base as an int, or None when it is missing or unusable."""
    try:
        return validate_base(int(value))  # type: ignore[arg-type]
    except (TypeError, ValueError):
        # InvalidBase is a ValueError too.
        return None


def _parse_flag(value: object) -> bool:
    if isinstance(value, str):
        return value.strip().lower() not in _FALSE_VALUES
    return bool(value)


def _merge_env(cfg: CodecConfig) -> CodecConfig:
    base_env = os.getenv(ENV_MAPPING["default_base"], "")
    base = _parse_base(base_env)
    if base is not None:
        cfg.default_base = base
    history_env = os.getenv(ENV_MAPPING["history"], "")
    if history_env:
        cfg.history = _parse_flag(history_env)
    return cfg


def load_config(path: Optional[Path] = None, apply_env: bool = True) -> CodecConfig:
    """
    Load settings from ``path`` (default ``~/.base94.json``), then apply
    environment overrides unless ``apply_env`` is false. A missing or
    malformed file yields the defaults.
    """
    path = path or CONFIG_PATH
    config = CodecConfig()
    if path.exists():
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            data = None
        if isinstance(data, dict):
            config = CodecConfig.from_dict(data)
    return _merge_env(config) if apply_env else config


def save_config(config: CodecConfig, path: Optional[Path] = None) -> None:
    path = path or CONFIG_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(config.to_dict(), indent=2), encoding="utf-8")
