"""Fixed-payment amortization formulas used to complete source records."""
from __future__ import annotations

import math


def calculate_monthly_payment(balance: float, annual_rate: float, remaining_months: int) -> float:
    """Standard PMT formula for a fixed-rate amortizing loan.

    PMT = P * r / (1 - (1+r)^-n)
    """
    if remaining_months <= 0 or balance <= 0:
        return 0.0
    r = annual_rate / 12.0
    if r <= 0:
        return balance / remaining_months
    return balance * r / (1.0 - (1.0 + r) ** -remaining_months)


def calculate_term(balance: float, annual_rate: float, payment: float) -> int:
    """Number of monthly payments needed to retire ``balance`` at ``payment``.

    n = -ln(1 - r*P/A) / ln(1+r), rounded up. A payment that never covers
    the monthly interest yields a single-month term.
    """
    if balance <= 0 or payment <= 0:
        return 0
    r = annual_rate / 12.0
    if r <= 0:
        return math.ceil(balance / payment)
    ratio = 1.0 - (r * balance) / payment
    if ratio <= 0:
        return 1
    return math.ceil(-math.log(ratio) / math.log(1.0 + r))
