"""Report generators: three views over one shared simulation run.

months_to_payoff, balance_trajectory and amortization_schedule all read the
same PayoffRun, so for identical inputs their numbers agree:
schedule[i].end == trajectory[i + 1].
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence

from payoff.config import settings
from payoff.models.debt import Debt
from payoff.models.schedule import ScheduleRow
from payoff.simulation.feasibility import is_feasible, total_balance
from payoff.simulation.stepper import MonthStep, run_simulation, settle_debts
from payoff.simulation.strategies import Strategy, resolve_strategy

logger = logging.getLogger(__name__)


@dataclass
class PayoffRun:
    """A complete simulation for one (debts, budget, strategy) triple."""
    strategy: Strategy
    feasible: bool
    initial_balance: float
    max_months: int
    steps: list[MonthStep] = field(default_factory=list)

    @property
    def converged(self) -> bool:
        if not self.feasible:
            return False
        if not self.steps:
            return self.initial_balance <= 0
        return self.steps[-1].cleared

    @property
    def months(self) -> Optional[int]:
        return len(self.steps) if self.converged else None


def run_payoff(
    debts: Sequence[Debt],
    budget: float,
    strategy: str | Strategy | None = Strategy.avalanche,
    *,
    max_months: int | None = None,
    epsilon: float | None = None,
) -> PayoffRun:
    """Check feasibility against the initial debts, then simulate to completion."""
    resolved = resolve_strategy(strategy)
    cap = settings.MAX_MONTHS if max_months is None else max_months

    if not is_feasible(debts, budget):
        logger.debug("Budget %.2f does not cover minimum payments, skipping simulation", budget)
        return PayoffRun(
            strategy=resolved,
            feasible=False,
            initial_balance=total_balance(debts),
            max_months=cap,
        )

    run = PayoffRun(
        strategy=resolved,
        feasible=True,
        initial_balance=total_balance(settle_debts(debts, epsilon)),
        max_months=cap,
        steps=list(run_simulation(debts, budget, resolved, max_months=cap, epsilon=epsilon)),
    )
    if run.converged:
        logger.debug("%s payoff converged in %d months", resolved.value, len(run.steps))
    else:
        logger.warning(
            "%s payoff did not converge within %d months (remaining balance %.2f)",
            resolved.value, cap, run.steps[-1].end_balance if run.steps else run.initial_balance,
        )
    return run


def months_to_payoff(
    debts: Sequence[Debt],
    budget: float,
    strategy: str | Strategy | None = Strategy.avalanche,
    *,
    max_months: int | None = None,
    epsilon: float | None = None,
) -> Optional[int]:
    """Months until every balance is zero.

    0 with no debts; None when the budget is infeasible or the safety cap
    is reached first.
    """
    if not debts:
        return 0
    return run_payoff(debts, budget, strategy, max_months=max_months, epsilon=epsilon).months


def trajectory_from_run(run: PayoffRun) -> list[float]:
    if not run.feasible:
        return [run.initial_balance]
    balances = [run.initial_balance]
    balances.extend(step.end_balance for step in run.steps)
    return balances[:run.max_months]


def schedule_from_run(run: PayoffRun) -> list[ScheduleRow]:
    if not run.feasible:
        return [ScheduleRow(
            month=1,
            start=run.initial_balance,
            payment=0.0,
            interest=0.0,
            end=run.initial_balance,
        )]
    return [
        ScheduleRow(
            month=step.month,
            start=step.start_balance,
            payment=step.payment,
            interest=step.interest,
            end=step.end_balance,
        )
        for step in run.steps
    ]


def balance_trajectory(
    debts: Sequence[Debt],
    budget: float,
    strategy: str | Strategy | None = Strategy.avalanche,
    *,
    max_months: int | None = None,
    epsilon: float | None = None,
) -> list[float]:
    """Total remaining balance before each month, starting with the initial total.

    [] with no debts; [total] when infeasible. Truncated to the safety cap, so
    a trajectory of exactly ``max_months`` entries may not have converged.
    """
    if not debts:
        return []
    return trajectory_from_run(
        run_payoff(debts, budget, strategy, max_months=max_months, epsilon=epsilon)
    )


def amortization_schedule(
    debts: Sequence[Debt],
    budget: float,
    strategy: str | Strategy | None = Strategy.avalanche,
    *,
    max_months: int | None = None,
    epsilon: float | None = None,
) -> list[ScheduleRow]:
    """Aggregate start balance, payment, interest and end balance per month.

    [] with no debts; a single zero-payment row when infeasible.
    """
    if not debts:
        return []
    return schedule_from_run(
        run_payoff(debts, budget, strategy, max_months=max_months, epsilon=epsilon)
    )
