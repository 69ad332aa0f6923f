# corpfin/validate.py
from __future__ import annotations
import os
from typing import Any, Dict, Sequence

from .errors import InsufficientCashFlows, SettingsError
from .schema import MIN_CASHFLOWS, SETTINGS_SCHEMA

def _mode_from_env_or_flag(flag: str | None) -> str:
    if flag in ("strict", "relaxed"):
        return flag
    env = (os.environ.get("CORPFIN_VALIDATION_MODE") or "").lower()
    return env if env in ("strict", "relaxed") else "relaxed"

def _coerce(key: str, value: Any, kind: str) -> Any:
    try:
        if kind == "int":
            as_float = float(value)
            if as_float != int(as_float):
                raise ValueError(f"not an integer: {value!r}")
            return int(as_float)
        if kind == "float":
            return float(value)
        return str(value).strip().lower()
    except (TypeError, ValueError) as e:
        raise SettingsError(f"{key}: expected {kind}, got {value!r}") from e

def validate_settings_dict(data: Dict[str, Any], *, mode: str | None = None) -> Dict[str, Any]:
    """
    Check settings against SETTINGS_SCHEMA and return the coerced values.
      - relaxed: unknown keys are dropped
      - strict : unknown keys raise
    """
    mode = _mode_from_env_or_flag(mode)
    if mode == "strict":
        unknown = sorted(k for k in data if k not in SETTINGS_SCHEMA)
        if unknown:
            raise SettingsError(f"unknown settings keys (strict mode): {unknown}")

    validated: Dict[str, Any] = {}
    for key, rule in SETTINGS_SCHEMA.items():
        if key not in data:
            continue
        value = _coerce(key, data[key], rule["type"])
        if "choices" in rule and value not in rule["choices"]:
            raise SettingsError(f"{key} must be one of {list(rule['choices'])}: {value}")
        lo = rule.get("min")
        hi = rule.get("max")
        if (lo is not None and value < lo) or (hi is not None and value > hi):
            raise SettingsError(f"{key} outside allowed range [{lo}, {hi}]: {value}")
        validated[key] = value
    return validated

def require_cashflows(cashflows: Sequence[float], where: str) -> None:
    """Raise InsufficientCashFlows when `cashflows` is too short for `where`."""
    minimum = MIN_CASHFLOWS.get(where, 1)
    if len(cashflows) < minimum:
        raise InsufficientCashFlows(where, minimum, len(cashflows))

__all__ = ["validate_settings_dict", "require_cashflows"]
