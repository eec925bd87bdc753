"""Surplus-allocation strategies: a closed enum plus its ordering table.

Each strategy maps to a sort key over active debts; the first debt in that
order receives the month's surplus. Python's sort is stable, so ties keep
the input order.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, Callable, Iterable

from payoff.models.debt import Debt

logger = logging.getLogger(__name__)


class Strategy(str, Enum):
    avalanche = "avalanche"                # highest rate first
    snowball = "snowball"                  # smallest balance first
    highest_balance = "highest_balance"    # largest balance first
    due_date = "due_date"                  # earliest due date first


@dataclass(frozen=True)
class StrategyOrder:
    """Comparator definition for a single strategy."""
    strategy: Strategy
    field: str
    direction: str
    description: str
    key: Callable[[Debt], Any]


def _due_date_key(debt: Debt) -> date:
    # Missing due dates sort after every real date
    return debt.due_date if debt.due_date is not None else date.max


_ORDERS: dict[Strategy, StrategyOrder] = {
    Strategy.avalanche: StrategyOrder(
        strategy=Strategy.avalanche,
        field="annual_rate",
        direction="descending",
        description="Highest interest rate first; minimizes total interest paid.",
        key=lambda d: -d.annual_rate,
    ),
    Strategy.snowball: StrategyOrder(
        strategy=Strategy.snowball,
        field="balance",
        direction="ascending",
        description="Smallest balance first; clears individual debts soonest.",
        key=lambda d: d.balance,
    ),
    Strategy.highest_balance: StrategyOrder(
        strategy=Strategy.highest_balance,
        field="balance",
        direction="descending",
        description="Largest balance first; tackles the biggest obligation upfront.",
        key=lambda d: -d.balance,
    ),
    Strategy.due_date: StrategyOrder(
        strategy=Strategy.due_date,
        field="due_date",
        direction="ascending",
        description="Earliest due date first; debts without a due date go last.",
        key=_due_date_key,
    ),
}

DEFAULT_STRATEGY = Strategy.avalanche


def resolve_strategy(name: str | Strategy | None) -> Strategy:
    """Return the Strategy for a name. Unknown or missing names fall back to avalanche."""
    if isinstance(name, Strategy):
        return name
    try:
        return Strategy((name or "").strip().lower())
    except ValueError:
        logger.debug("Unknown strategy %r, falling back to %s", name, DEFAULT_STRATEGY.value)
        return DEFAULT_STRATEGY


def get_strategy_order(strategy: str | Strategy | None) -> StrategyOrder:
    return _ORDERS[resolve_strategy(strategy)]


def list_strategies() -> list[StrategyOrder]:
    """Return all strategy definitions in enumeration order."""
    return [_ORDERS[s] for s in Strategy]


def order_debts(debts: Iterable[Debt], strategy: str | Strategy | None) -> list[Debt]:
    """Return debts sorted by the strategy's priority (highest priority first)."""
    return sorted(debts, key=get_strategy_order(strategy).key)
