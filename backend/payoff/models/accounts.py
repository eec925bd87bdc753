"""Source records for revolving credit cards and installment loans.

Both records complete their payment terms on validation: a card with only
one half of an installment plan gets the other half derived, and a loan
without a monthly payment gets one from the amortization formula.
"""
from datetime import date
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from payoff.simulation.amortization import calculate_monthly_payment, calculate_term


class CreditCard(BaseModel):
    name: str
    balance: float = Field(ge=0.0)
    rate: Optional[float] = Field(default=None, ge=0.0)  # annual, decimal (0.20 = 20%)
    due_date: Optional[date] = None
    installments: int = Field(default=0, ge=0)
    installment_amount: float = Field(default=0.0, ge=0.0)

    @model_validator(mode="after")
    def complete_installment_plan(self) -> "CreditCard":
        rate = self.rate or 0.0
        if self.installments > 0 and self.installment_amount <= 0:
            amount = calculate_monthly_payment(self.balance, rate, self.installments)
            self.installment_amount = round(amount, 2)
        elif self.installment_amount > 0 and self.installments <= 0:
            self.installments = calculate_term(self.balance, rate, self.installment_amount)
        return self

    @property
    def has_installment_plan(self) -> bool:
        return self.installments > 0


class Loan(BaseModel):
    name: str
    principal: float = Field(ge=0.0)
    rate: Optional[float] = Field(default=None, ge=0.0)  # annual, decimal
    term: Optional[int] = Field(default=None, gt=0)  # months
    due_date: Optional[date] = None
    monthly_payment: Optional[float] = Field(default=None, ge=0.0)

    @model_validator(mode="after")
    def complete_monthly_payment(self) -> "Loan":
        if self.monthly_payment is None:
            if self.term is None:
                raise ValueError(f"Loan '{self.name}' needs either a term or a monthly_payment")
            self.monthly_payment = calculate_monthly_payment(
                self.principal, self.rate or 0.0, self.term,
            )
        return self
