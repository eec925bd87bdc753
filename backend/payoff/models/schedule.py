from pydantic import BaseModel


class ScheduleRow(BaseModel):
    """Aggregate amortization figures for a single month across all debts."""
    month: int
    start: float
    payment: float
    interest: float
    end: float
