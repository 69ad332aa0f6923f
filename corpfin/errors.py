# corpfin/errors.py
"""
Typed failures raised by the finance formulas and the settings layer.

Callers that only care about "something went wrong in a calculation" can
catch FinanceError; the concrete classes also derive from the builtin
exception a plain-Python caller would expect (ValueError / RuntimeError).
"""

from __future__ import annotations


class FinanceError(Exception):
    """Base class for every error raised by corpfin."""


class InsufficientCashFlows(FinanceError, ValueError):
    """A cash-flow series is shorter than the formula requires."""

    def __init__(self, where: str, minimum: int, got: int) -> None:
        self.where = where
        self.minimum = minimum
        self.got = got
        super().__init__(
            f"{where}: cash-flow series needs at least {minimum} elements, got {got}"
        )


class SearchBudgetExceeded(FinanceError, RuntimeError):
    """The IRR root search ran out of evaluations without settling."""

    def __init__(self, evaluations: int, limit: int, detail: str = "") -> None:
        self.evaluations = evaluations
        self.limit = limit
        msg = "IRR search exceeded evaluation budget"
        if detail:
            msg = f"{msg} ({detail})"
        super().__init__(f"{msg}: {evaluations} evaluations, limit {limit}")


class SettingsError(FinanceError, ValueError):
    pass


__all__ = [
    "FinanceError",
    "InsufficientCashFlows",
    "SearchBudgetExceeded",
    "SettingsError",
]
