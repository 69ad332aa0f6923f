from __future__ import annotations
from typing import Dict, Any

# Settings schema: type, min/max ranges, and description.
SETTINGS_SCHEMA: Dict[str, Dict[str, Any]] = {
    "evaluation_limit": {"unit": "evaluations", "type": "int", "min": 1, "max": 1_000_000, "desc": "Max NPV evaluations per IRR search"},
    "validation_mode":  {"unit": "-",           "type": "str", "choices": ("strict", "relaxed"), "desc": "Unknown settings keys raise in strict mode"},
}

# Environment variables that override a settings key.
ENV_OVERRIDES: Dict[str, str] = {
    "CORPFIN_EVALUATION_LIMIT": "evaluation_limit",
    "CORPFIN_VALIDATION_MODE": "validation_mode",
}

# Minimum series length per formula that indexes past period 0.
MIN_CASHFLOWS: Dict[str, int] = {
    "pp": 2,
    "pi": 2,
}
