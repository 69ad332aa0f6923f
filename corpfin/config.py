from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict
import os
import io
import yaml

from .errors import SettingsError
from .schema import ENV_OVERRIDES
from .validate import validate_settings_dict


@dataclass(frozen=True)
class Settings:
    """Tunables for the IRR search. Precision is fixed at two decimals."""

    evaluation_limit: int = 1000


DEFAULT_SETTINGS = Settings()


def _flatten_grouped(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """
    Flatten shallow groups like {'search': {...}} into one level.
    Prefers top-level keys if collisions occur.
    """
    flat: Dict[str, Any] = {k: v for k, v in cfg.items() if not isinstance(v, dict)}
    for v in cfg.values():
        if isinstance(v, dict):
            for sk, sv in v.items():
                flat.setdefault(sk, sv)
    return flat


def _read_yaml(source: str | os.PathLike | io.StringIO) -> Dict[str, Any]:
    text: str
    if hasattr(source, "read"):
        text = str(source.read())
    else:
        p = os.fspath(source)
        with open(p, "r", encoding="utf-8") as f:
            text = f.read()

    try:
        cfg = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise SettingsError(f"settings are not valid YAML: {e}") from e
    if not isinstance(cfg, dict):
        raise SettingsError(f"settings must be a mapping, got {type(cfg).__name__}")
    return _flatten_grouped(cfg)


def _env_overrides() -> Dict[str, Any]:
    return {
        key: os.environ[var]
        for var, key in ENV_OVERRIDES.items()
        if os.environ.get(var)
    }


def load_settings(
    source: str | os.PathLike | io.StringIO | None = None,
) -> Settings:
    """
    Build Settings from defaults, an optional YAML path or text stream, and
    CORPFIN_* environment variables (environment wins).
    """
    data: Dict[str, Any] = _read_yaml(source) if source is not None else {}
    data.update(_env_overrides())
    mode = data.get("validation_mode")
    values = validate_settings_dict(data, mode=str(mode).lower() if mode else None)
    # validation_mode only governs this load
    values.pop("validation_mode", None)
    return replace(DEFAULT_SETTINGS, **values)


__all__ = ["Settings", "DEFAULT_SETTINGS", "load_settings"]
