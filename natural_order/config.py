# natural_order/config.py
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

_LOGGER = logging.getLogger("natural_order.config")

CONFIG_ENV = "NATURAL_ORDER_CONFIG"


class SortCfg(BaseModel):
    digits: Literal["unicode", "ascii"] = "unicode"  # which characters count as numeric
    reverse: bool = False                            # default sort direction

    model_config = ConfigDict(extra="ignore", validate_assignment=True)


class Config(BaseModel):
    sort: SortCfg = Field(default_factory=SortCfg)
    model_config = ConfigDict(extra="ignore")


# --- Back-compat for flat YAML ---
_FLAT_KEYS = {"digits", "reverse"}

def _normalize_data(data: dict[str, Any]) -> dict[str, Any]:
    if not data:
        return {}
    data = dict(data)
    # flat -> sort section migration
    flat = {k: data.pop(k) for k in list(data.keys()) if k in _FLAT_KEYS}
    if flat:
        data.setdefault("sort", {}).update(flat)
    return data

def load_config(path: str | Path | None = None) -> Config:
    data: dict[str, Any] = {}
    if path:
        p = Path(path)
        if p.exists():
            try:
                with p.open("r", encoding="utf-8") as f:
                    data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise RuntimeError(f"Failed to parse YAML at {path}: {e}") from e
        else:
            _LOGGER.debug("config file %s not found; using defaults", p)
    data = _normalize_data(data)
    return Config(**data)


def _cast_env_value(val: str, current):
    """
    Cast env string to the type of `current` when possible.
    Bools accept 1/true/yes/y/on and 0/false/no/n/off; anything else stays a string.
    """
    if isinstance(current, bool):
        s = str(val).strip().lower()
        if s in ("1", "true", "yes", "y", "on"):
            return True
        if s in ("0", "false", "no", "n", "off"):
            return False
        return val
    return str(val).strip().lower()


def apply_env_overrides(cfg: Config) -> None:
    """
    Override knobs from environment variables.
    Supported:
      NATURAL_ORDER_DIGITS   unicode|ascii
      NATURAL_ORDER_REVERSE  1/0, true/false, yes/no, on/off
    Invalid values are ignored with a warning; the file/default value stays.
    """
    mapping = {
        "NATURAL_ORDER_DIGITS": ("sort", "digits"),
        "NATURAL_ORDER_REVERSE": ("sort", "reverse"),
    }
    for env_key, (section, field) in mapping.items():
        raw = os.getenv(env_key)
        if raw is None:
            continue
        sect_obj = getattr(cfg, section)
        current = getattr(sect_obj, field)
        try:
            setattr(sect_obj, field, _cast_env_value(raw, current))
        except ValidationError:
            _LOGGER.warning("ignoring invalid %s=%r", env_key, raw)


_CACHED: Config | None = None

def get_config() -> Config:
    """Process-wide config: file from $NATURAL_ORDER_CONFIG (if any) plus env overrides."""
    global _CACHED
    if _CACHED is None:
        cfg = load_config(os.getenv(CONFIG_ENV))
        apply_env_overrides(cfg)
        _CACHED = cfg
    return _CACHED


def reset_config() -> None:
    global _CACHED
    _CACHED = None
