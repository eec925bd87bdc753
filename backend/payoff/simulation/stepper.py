"""Monthly simulation stepper: the core payoff loop.

One step accrues a month of simple interest on every active debt, pays each
its minimum, sends the whole surplus to the top-priority debt, and retires
any debt whose balance falls to the paid-off threshold. A retired debt's
minimum payment drops to zero, so it joins the surplus from the next month on.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Sequence

from payoff.config import settings
from payoff.models.debt import Debt
from payoff.simulation.feasibility import total_balance
from payoff.simulation.strategies import Strategy, get_strategy_order


@dataclass(frozen=True)
class MonthStep:
    """Outcome of advancing every debt by one month."""
    month: int
    debts: tuple[Debt, ...]        # balances after this month, input order
    payments: tuple[float, ...]    # per-debt payment, aligned with debts
    target: Optional[int]          # index of the surplus recipient
    start_balance: float
    payment: float
    interest: float
    end_balance: float

    @property
    def cleared(self) -> bool:
        return not any(d.balance > 0 for d in self.debts)


def _retire(debt: Debt) -> Debt:
    return debt.model_copy(update={"balance": 0.0, "min_payment": 0.0})


def settle_debts(debts: Sequence[Debt], epsilon: float | None = None) -> tuple[Debt, ...]:
    """Retire debts already at or below the paid-off threshold."""
    eps = settings.PAID_OFF_EPSILON if epsilon is None else epsilon
    return tuple(_retire(d) if d.balance <= eps else d for d in debts)


def step_month(
    debts: Sequence[Debt],
    budget: float,
    strategy: str | Strategy | None = Strategy.avalanche,
    month: int = 1,
    epsilon: float | None = None,
) -> MonthStep:
    """Advance all debts by exactly one month.

    newBalance = balance + balance * (annual_rate / 12) - payment, where the
    payment is the debt's minimum plus the full surplus for the target debt.
    """
    eps = settings.PAID_OFF_EPSILON if epsilon is None else epsilon
    order = get_strategy_order(strategy)

    active = [i for i, d in enumerate(debts) if d.balance > 0]
    ranked = sorted(active, key=lambda i: order.key(debts[i]))
    min_total = sum(debts[i].min_payment for i in active)
    surplus = max(0.0, budget - min_total)
    target = ranked[0] if ranked else None

    updated: list[Debt] = []
    payments: list[float] = []
    total_interest = 0.0
    total_payment = 0.0
    for i, debt in enumerate(debts):
        if debt.balance <= 0:
            updated.append(debt)
            payments.append(0.0)
            continue

        interest = debt.balance * (debt.annual_rate / 12.0)
        payment = debt.min_payment + (surplus if i == target else 0.0)
        new_balance = debt.balance + interest - payment

        # Greedy: an overpaying target is not capped and the excess does not spill over
        if new_balance <= eps:
            updated.append(_retire(debt))
        else:
            updated.append(debt.model_copy(update={"balance": new_balance}))
        payments.append(payment)
        total_interest += interest
        total_payment += payment

    return MonthStep(
        month=month,
        debts=tuple(updated),
        payments=tuple(payments),
        target=target,
        start_balance=total_balance(debts),
        payment=total_payment,
        interest=total_interest,
        end_balance=total_balance(updated),
    )


def run_simulation(
    debts: Sequence[Debt],
    budget: float,
    strategy: str | Strategy | None = Strategy.avalanche,
    max_months: int | None = None,
    epsilon: float | None = None,
) -> Iterator[MonthStep]:
    """Yield one MonthStep per month until every debt clears or the cap is hit.

    Works on its own snapshot of ``debts``; callers' objects are never touched.
    Does not check feasibility.
    """
    cap = settings.MAX_MONTHS if max_months is None else max_months
    current = settle_debts(debts, epsilon)
    month = 0
    while month < cap and any(d.balance > 0 for d in current):
        month += 1
        step = step_month(current, budget, strategy, month=month, epsilon=epsilon)
        yield step
        current = step.debts
