"""Payoff engine: normalization, strategies, stepping, and reports."""
from payoff.simulation.amortization import calculate_monthly_payment, calculate_term
from payoff.simulation.strategies import Strategy, order_debts, resolve_strategy, list_strategies
from payoff.simulation.normalizer import normalize_debts
from payoff.simulation.feasibility import is_feasible, minimum_total, total_balance
from payoff.simulation.stepper import MonthStep, step_month, run_simulation
from payoff.simulation.reports import (
    PayoffRun,
    run_payoff,
    months_to_payoff,
    balance_trajectory,
    amortization_schedule,
)

__all__ = [
    "calculate_monthly_payment",
    "calculate_term",
    "Strategy",
    "order_debts",
    "resolve_strategy",
    "list_strategies",
    "normalize_debts",
    "is_feasible",
    "minimum_total",
    "total_balance",
    "MonthStep",
    "step_month",
    "run_simulation",
    "PayoffRun",
    "run_payoff",
    "months_to_payoff",
    "balance_trajectory",
    "amortization_schedule",
]
