"""Payoff planning service.

Sits between the HTTP routes and the engine: collects debts from source
records, runs the simulation, and shapes results into response models.
"""
from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Sequence

from payoff.config import settings
from payoff.models.accounts import CreditCard, Loan
from payoff.models.debt import Debt
from payoff.models.plan import (
    DebtOverview,
    PaymentRecommendation,
    PayoffReport,
    PayoffRequest,
    RecommendedPayment,
    StrategyComparison,
    StrategyOutcome,
)
from payoff.simulation.feasibility import minimum_total, total_balance
from payoff.simulation.normalizer import card_min_payment, normalize_debts
from payoff.simulation.reports import run_payoff, schedule_from_run, trajectory_from_run
from payoff.simulation.strategies import Strategy, order_debts, resolve_strategy

logger = logging.getLogger(__name__)


def collect_debts(request: PayoffRequest) -> list[Debt]:
    """Normalized debts first, then cards and loans in request order."""
    return list(request.debts) + normalize_debts(request.cards, request.loans)


def build_payoff_report(
    debts: Sequence[Debt], budget: float, strategy: str | Strategy | None = None,
) -> PayoffReport:
    """Run one simulation and derive months, trajectory, and schedule from it.

    Empty debt lists short-circuit to the zero-debt results (0 months, no
    rows) without simulating.
    """
    resolved = resolve_strategy(strategy)
    min_total = minimum_total(debts)

    if not debts:
        return PayoffReport(
            strategy=resolved.value,
            budget=budget,
            feasible=True,
            converged=True,
            minimum_total=0.0,
            total_balance=0.0,
            months=0,
            balances=[],
            schedule=[],
            total_interest=0.0,
            total_paid=0.0,
        )

    run = run_payoff(debts, budget, resolved)
    schedule = schedule_from_run(run)
    logger.info(
        "Payoff report: strategy=%s debts=%d feasible=%s months=%s",
        resolved.value, len(debts), run.feasible, run.months,
    )
    return PayoffReport(
        strategy=resolved.value,
        budget=budget,
        feasible=run.feasible,
        converged=run.converged,
        minimum_total=round(min_total, 2),
        total_balance=round(total_balance(debts), 2),
        months=run.months,
        balances=trajectory_from_run(run),
        schedule=schedule,
        total_interest=round(sum(row.interest for row in schedule), 2),
        total_paid=round(sum(row.payment for row in schedule), 2),
    )


def compare_strategies(debts: Sequence[Debt], budget: float) -> StrategyComparison:
    """Simulate every strategy and pick the fastest.

    Best = fewest months, then least interest, then enumeration order.
    None when no strategy pays everything off within the safety cap.
    """
    outcomes: list[StrategyOutcome] = []
    for strategy in Strategy:
        report = build_payoff_report(debts, budget, strategy)
        outcomes.append(StrategyOutcome(
            strategy=strategy.value,
            months=report.months,
            total_interest=report.total_interest,
            converged=report.converged,
        ))

    finished = [o for o in outcomes if o.converged and o.months is not None]
    best = min(finished, key=lambda o: (o.months, o.total_interest)) if finished else None
    return StrategyComparison(
        budget=budget,
        outcomes=outcomes,
        best_strategy=best.strategy if best else None,
    )


def recommend_payments(
    debts: Sequence[Debt], budget: float, strategy: str | Strategy | None = None,
) -> PaymentRecommendation:
    """Recommend this month's payment for each debt.

    Every debt gets its minimum; the top-priority debt also gets the surplus,
    capped at its balance beyond the minimum.
    """
    resolved = resolve_strategy(strategy)
    ordered = order_debts(debts, resolved)
    min_total = minimum_total(ordered)
    surplus = max(0.0, budget - min_total)

    payments: list[RecommendedPayment] = []
    for index, debt in enumerate(ordered):
        extra = 0.0
        if index == 0 and surplus > 0:
            extra = max(0.0, min(surplus, debt.balance - debt.min_payment))
        payments.append(RecommendedPayment(
            name=debt.name,
            payment=round(debt.min_payment + extra, 2),
            min_payment=round(debt.min_payment, 2),
        ))

    return PaymentRecommendation(
        strategy=resolved.value,
        budget=budget,
        minimum_total=round(min_total, 2),
        surplus=round(surplus, 2),
        payments=payments,
    )


def summarize_debts(
    cards: Iterable[CreditCard] = (),
    loans: Iterable[Loan] = (),
    budget: float = 0.0,
    as_of: date | None = None,
) -> DebtOverview:
    """Balances, minimum payments, due-date status, and budget usage."""
    cards = list(cards)
    loans = list(loans)
    today = as_of or date.today()
    window = settings.UPCOMING_WINDOW_DAYS

    card_balance = sum(c.balance for c in cards)
    loan_balance = sum(l.principal for l in loans)
    dues = [(c.due_date, card_min_payment(c)) for c in cards]
    dues.extend((l.due_date, l.monthly_payment or 0.0) for l in loans)
    min_total = sum(payment for _, payment in dues)

    upcoming_count = overdue_count = 0
    upcoming_amount = overdue_amount = 0.0
    for due_date, payment in dues:
        if due_date is None:
            continue
        if due_date < today:
            overdue_count += 1
            overdue_amount += payment
        elif (due_date - today).days <= window:
            upcoming_count += 1
            upcoming_amount += payment

    return DebtOverview(
        as_of=today,
        card_balance=round(card_balance, 2),
        loan_balance=round(loan_balance, 2),
        total_balance=round(card_balance + loan_balance, 2),
        minimum_total=round(min_total, 2),
        upcoming_count=upcoming_count,
        upcoming_amount=round(upcoming_amount, 2),
        overdue_count=overdue_count,
        overdue_amount=round(overdue_amount, 2),
        budget=budget,
        budget_usage=round(min_total / budget, 6) if budget > 0 else None,
        shortfall=round(max(0.0, min_total - budget), 2),
    )
