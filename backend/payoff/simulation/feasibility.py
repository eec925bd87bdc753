"""Budget feasibility check against the sum of minimum payments."""
from __future__ import annotations

from typing import Iterable

from payoff.models.debt import Debt


def minimum_total(debts: Iterable[Debt]) -> float:
    return sum(d.min_payment for d in debts)


def total_balance(debts: Iterable[Debt]) -> float:
    return sum(d.balance for d in debts if d.balance > 0)


def is_feasible(debts: Iterable[Debt], budget: float) -> bool:
    """True when the budget is positive and covers the sum of minimum payments.

    Checked once against the initial debts; clearing a debt only frees
    budget, so a feasible run never becomes infeasible later.
    """
    if budget <= 0:
        return False
    return minimum_total(debts) <= budget
