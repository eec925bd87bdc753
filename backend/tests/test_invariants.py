"""Invariant tests: properties that must hold for every strategy.

Covers the feasibility gate, zero-debt identity, monotonic decrease,
schedule/trajectory agreement, surplus targeting, and cap behavior.
"""
from datetime import date

import pytest

from payoff.models.debt import Debt
from payoff.simulation.reports import (
    amortization_schedule,
    balance_trajectory,
    months_to_payoff,
    run_payoff,
)
from payoff.simulation.strategies import Strategy

ALL_STRATEGIES = list(Strategy)


def _portfolio() -> list[Debt]:
    return [
        Debt(name="visa", balance=5000.0, annual_rate=0.20, min_payment=250.0, due_date=date(2026, 11, 12)),
        Debt(name="car", balance=10_000.0, annual_rate=0.06, min_payment=193.33, due_date=date(2026, 11, 1)),
        Debt(name="store", balance=1200.0, annual_rate=0.24, min_payment=60.0),
        Debt(name="family", balance=800.0, annual_rate=0.0, min_payment=40.0, due_date=date(2026, 12, 1)),
    ]


# ---------------------------------------------------------------------------
# Feasibility gate
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("strategy", ALL_STRATEGIES)
@pytest.mark.parametrize("budget", [0.0, -50.0, 300.0, 543.32])
def test_infeasible_budget_gate(strategy, budget):
    debts = _portfolio()  # minimums total 543.33
    total = sum(d.balance for d in debts)

    assert months_to_payoff(debts, budget, strategy) is None
    assert balance_trajectory(debts, budget, strategy) == [total]
    rows = amortization_schedule(debts, budget, strategy)
    assert len(rows) == 1
    assert rows[0].payment == 0.0
    assert rows[0].interest == 0.0
    assert rows[0].start == rows[0].end == total


# ---------------------------------------------------------------------------
# Zero-debt identity
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("strategy", ALL_STRATEGIES)
def test_zero_debt_identity(strategy):
    assert months_to_payoff([], 1000.0, strategy) == 0
    assert balance_trajectory([], 1000.0, strategy) == []
    assert amortization_schedule([], 1000.0, strategy) == []


# ---------------------------------------------------------------------------
# Monotonic decrease and convergence
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("strategy", ALL_STRATEGIES)
def test_trajectory_non_increasing(strategy):
    balances = balance_trajectory(_portfolio(), 1000.0, strategy)
    for prev, curr in zip(balances, balances[1:]):
        assert curr <= prev + 1e-9, f"Balance rose under {strategy.value}: {prev} -> {curr}"
    assert balances[-1] <= 0.01


@pytest.mark.parametrize("strategy", ALL_STRATEGIES)
def test_months_agree_with_trajectory_and_schedule(strategy):
    debts = _portfolio()
    months = months_to_payoff(debts, 1000.0, strategy)
    assert months is not None
    assert len(amortization_schedule(debts, 1000.0, strategy)) == months
    assert len(balance_trajectory(debts, 1000.0, strategy)) == months + 1


@pytest.mark.parametrize("strategy", ALL_STRATEGIES)
def test_budget_fully_spent_each_month_before_payoff(strategy):
    rows = amortization_schedule(_portfolio(), 1000.0, strategy)
    for row in rows:
        assert abs(row.payment - 1000.0) < 1e-6


# ---------------------------------------------------------------------------
# Schedule / trajectory consistency
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("strategy", ALL_STRATEGIES)
def test_schedule_end_matches_next_trajectory_point(strategy):
    debts = _portfolio()
    balances = balance_trajectory(debts, 1000.0, strategy)
    rows = amortization_schedule(debts, 1000.0, strategy)
    assert abs(rows[0].start - balances[0]) < 1e-6
    for i in range(min(len(rows), len(balances) - 1)):
        assert abs(rows[i].end - balances[i + 1]) < 1e-6


@pytest.mark.parametrize("strategy", ALL_STRATEGIES)
def test_accounting_identity_in_months_without_payoff(strategy):
    """end == start + interest - payment whenever no debt is retired that month."""
    debts = _portfolio()
    run = run_payoff(debts, 1000.0, strategy)
    active_before = sum(1 for d in debts if d.balance > 0)
    for step in run.steps:
        active_after = sum(1 for d in step.debts if d.balance > 0)
        if active_after == active_before:
            expected = step.start_balance + step.interest - step.payment
            assert abs(step.end_balance - expected) < 1e-6, f"Month {step.month} does not balance"
        active_before = active_after


# ---------------------------------------------------------------------------
# Strategy targeting
# ---------------------------------------------------------------------------


def _two_debts() -> list[Debt]:
    return [
        Debt(name="high", balance=1000.0, annual_rate=0.24, min_payment=30.0),
        Debt(name="low", balance=500.0, annual_rate=0.10, min_payment=20.0),
    ]


def _targets_while_both_active(strategy: Strategy) -> list[tuple[int, list[Debt]]]:
    """(target, balances entering the month) for every month both debts are open."""
    run = run_payoff(_two_debts(), 200.0, strategy)
    previous = _two_debts()
    seen = []
    for step in run.steps:
        if all(d.balance > 0 for d in previous):
            seen.append((step.target, previous))
        previous = list(step.debts)
    return seen


def test_avalanche_targets_highest_rate():
    seen = _targets_while_both_active(Strategy.avalanche)
    assert seen
    assert {target for target, _ in seen} == {0}


def test_snowball_targets_smallest_balance():
    seen = _targets_while_both_active(Strategy.snowball)
    assert seen
    for target, debts in seen:
        assert target == min(range(len(debts)), key=lambda i: debts[i].balance)


def test_highest_balance_targets_largest_balance():
    seen = _targets_while_both_active(Strategy.highest_balance)
    assert seen
    assert seen[0][0] == 0
    for target, debts in seen:
        assert target == max(range(len(debts)), key=lambda i: debts[i].balance)


def test_due_date_targets_earliest_due():
    debts = [
        Debt(name="later", balance=800.0, annual_rate=0.15, min_payment=20.0, due_date=date(2026, 12, 20)),
        Debt(name="none", balance=300.0, annual_rate=0.30, min_payment=20.0),
        Debt(name="sooner", balance=900.0, annual_rate=0.05, min_payment=20.0, due_date=date(2026, 11, 2)),
    ]
    run = run_payoff(debts, 300.0, Strategy.due_date)
    assert run.steps[0].target == 2


def test_avalanche_pays_less_interest_than_snowball():
    debts = _portfolio()
    aval = sum(r.interest for r in amortization_schedule(debts, 1000.0, Strategy.avalanche))
    snow = sum(r.interest for r in amortization_schedule(debts, 1000.0, Strategy.snowball))
    assert aval <= snow + 1e-6


# ---------------------------------------------------------------------------
# Safety cap
# ---------------------------------------------------------------------------


def _unpayable() -> list[Debt]:
    # Minimum covered, no surplus, interest (200/month) above the payment
    return [Debt(name="trap", balance=10_000.0, annual_rate=0.24, min_payment=150.0)]


@pytest.mark.parametrize("strategy", ALL_STRATEGIES)
def test_cap_behavior(strategy):
    debts = _unpayable()
    assert months_to_payoff(debts, 150.0, strategy) is None
    assert len(balance_trajectory(debts, 150.0, strategy)) == 600
    assert len(amortization_schedule(debts, 150.0, strategy)) == 600


def test_cap_override():
    debts = _unpayable()
    assert len(balance_trajectory(debts, 150.0, max_months=12)) == 12
    assert len(amortization_schedule(debts, 150.0, max_months=12)) == 12


# ---------------------------------------------------------------------------
# Determinism
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("strategy", ALL_STRATEGIES)
def test_reports_are_deterministic(strategy):
    debts = _portfolio()
    assert balance_trajectory(debts, 900.0, strategy) == balance_trajectory(debts, 900.0, strategy)
    assert amortization_schedule(debts, 900.0, strategy) == amortization_schedule(debts, 900.0, strategy)
