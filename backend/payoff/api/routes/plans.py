from fastapi import APIRouter
from fastapi.responses import Response

from payoff.models.plan import (
    DebtOverview,
    MonthsResult,
    OverviewRequest,
    PaymentRecommendation,
    PayoffReport,
    PayoffRequest,
    ScheduleResult,
    StrategyComparison,
    TrajectoryResult,
)
from payoff.services.export import schedule_to_csv
from payoff.services.payoff_service import (
    build_payoff_report,
    collect_debts,
    compare_strategies,
    recommend_payments,
    summarize_debts,
)
from payoff.simulation.reports import amortization_schedule, balance_trajectory, months_to_payoff
from payoff.simulation.strategies import resolve_strategy

router = APIRouter(prefix="/payoff", tags=["payoff"])


@router.post("/months", response_model=MonthsResult)
def get_months_to_payoff(request: PayoffRequest):
    """Months until debt-free; null when the budget is infeasible or the cap is hit."""
    strategy = resolve_strategy(request.strategy)
    months = months_to_payoff(collect_debts(request), request.budget, strategy)
    return MonthsResult(strategy=strategy.value, months=months)


@router.post("/trajectory", response_model=TrajectoryResult)
def get_balance_trajectory(request: PayoffRequest):
    strategy = resolve_strategy(request.strategy)
    balances = balance_trajectory(collect_debts(request), request.budget, strategy)
    return TrajectoryResult(strategy=strategy.value, balances=balances)


@router.post("/schedule", response_model=ScheduleResult)
def get_amortization_schedule(request: PayoffRequest):
    strategy = resolve_strategy(request.strategy)
    rows = amortization_schedule(collect_debts(request), request.budget, strategy)
    return ScheduleResult(strategy=strategy.value, rows=rows)


@router.post("/schedule.csv")
def export_amortization_schedule(request: PayoffRequest):
    """Amortization schedule as CSV, one line per month."""
    rows = amortization_schedule(collect_debts(request), request.budget, request.strategy)
    return Response(
        content=schedule_to_csv(rows),
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="payoff_schedule.csv"'},
    )


@router.post("/report", response_model=PayoffReport)
def get_payoff_report(request: PayoffRequest):
    """Months, trajectory, and schedule for one strategy, with totals."""
    return build_payoff_report(collect_debts(request), request.budget, request.strategy)


@router.post("/compare", response_model=StrategyComparison)
def get_strategy_comparison(request: PayoffRequest):
    return compare_strategies(collect_debts(request), request.budget)


@router.post("/recommendations", response_model=PaymentRecommendation)
def get_payment_recommendations(request: PayoffRequest):
    return recommend_payments(collect_debts(request), request.budget, request.strategy)


@router.post("/overview", response_model=DebtOverview)
def get_debt_overview(request: OverviewRequest):
    return summarize_debts(request.cards, request.loans, request.budget, request.as_of)
