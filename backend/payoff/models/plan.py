"""Pydantic request/response models for payoff planning."""
from datetime import date
from typing import Optional

from pydantic import BaseModel

from payoff.models.accounts import CreditCard, Loan
from payoff.models.debt import Debt
from payoff.models.schedule import ScheduleRow


class PayoffRequest(BaseModel):
    """Debts to plan for, either as source records or already normalized."""
    cards: list[CreditCard] = []
    loans: list[Loan] = []
    debts: list[Debt] = []
    budget: float
    strategy: str = "avalanche"  # unknown names fall back to avalanche


class MonthsResult(BaseModel):
    strategy: str
    months: Optional[int] = None


class TrajectoryResult(BaseModel):
    strategy: str
    balances: list[float]


class ScheduleResult(BaseModel):
    strategy: str
    rows: list[ScheduleRow]


class PayoffReport(BaseModel):
    """All three payoff views for one strategy, from a single simulation run."""
    strategy: str
    budget: float
    feasible: bool
    converged: bool
    minimum_total: float
    total_balance: float
    months: Optional[int] = None
    balances: list[float]
    schedule: list[ScheduleRow]
    total_interest: float
    total_paid: float


class StrategyOutcome(BaseModel):
    strategy: str
    months: Optional[int] = None
    total_interest: float
    converged: bool


class StrategyComparison(BaseModel):
    budget: float
    outcomes: list[StrategyOutcome]
    best_strategy: Optional[str] = None


class RecommendedPayment(BaseModel):
    name: Optional[str] = None
    payment: float
    min_payment: float


class PaymentRecommendation(BaseModel):
    """What to pay on each debt this month under a strategy."""
    strategy: str
    budget: float
    minimum_total: float
    surplus: float
    payments: list[RecommendedPayment]


class OverviewRequest(BaseModel):
    cards: list[CreditCard] = []
    loans: list[Loan] = []
    budget: float = 0.0
    as_of: Optional[date] = None


class DebtOverview(BaseModel):
    """Dashboard totals across cards and loans."""
    as_of: date
    card_balance: float
    loan_balance: float
    total_balance: float
    minimum_total: float
    upcoming_count: int
    upcoming_amount: float
    overdue_count: int
    overdue_amount: float
    budget: float
    budget_usage: Optional[float] = None
    shortfall: float = 0.0


class StrategyInfo(BaseModel):
    name: str
    key: str
    direction: str
    description: str

