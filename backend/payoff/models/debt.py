from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Debt(BaseModel):
    """A single obligation as seen by the payoff engine.

    Built fresh from source records on every run and never written back;
    the simulation replaces debts with updated copies instead of mutating them.
    """
    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None
    balance: float = Field(ge=0.0)
    annual_rate: float = Field(default=0.0, ge=0.0)
    min_payment: float = Field(default=0.0, ge=0.0)
    due_date: Optional[date] = None
